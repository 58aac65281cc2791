"""Seedable randomness and id generation.

Every random decision in a game draws from one ``random.Random`` owned by the
engine, so the same seed and the same human input replay the same game.
"""

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


def create_rng(seed: Optional[int] = None) -> random.Random:
    """Create the game's random source.

    Args:
        seed: Seed for reproducible games. None seeds from system entropy.
    """
    return random.Random(seed)


def shuffled(items: Sequence[T], rng: random.Random) -> list[T]:
    """Return a shuffled copy of items; the input is left untouched."""
    result = list(items)
    rng.shuffle(result)
    return result


def pick(candidates: Sequence[T], rng: random.Random) -> Optional[T]:
    """Uniformly pick one candidate, or None when there are none."""
    if not candidates:
        return None
    return candidates[rng.randrange(len(candidates))]


def chance(probability: float, rng: random.Random) -> bool:
    """Bernoulli draw: True with the given probability."""
    return rng.random() < probability


class IdFactory:
    """Monotonic ids scoped to one owner (``log-1``, ``log-2``, ...).

    Ids are deterministic so seeded games produce identical logs; there is
    no process-wide counter.
    """

    def __init__(self, prefix: str):
        self._prefix = prefix
        self._count = 0

    def __call__(self) -> str:
        self._count += 1
        return f"{self._prefix}-{self._count}"

    @property
    def issued(self) -> int:
        return self._count
