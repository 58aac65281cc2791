"""How AI players choose who to vote for.

- Werewolves vote for the first Good-aligned candidate.
- A Seer votes for the first candidate their visions exposed as a wolf.
- Everyone else, or anyone without a match, votes uniformly at random.
"""

import random
from typing import Callable, Optional, Sequence

from werewolf_party.models.player import Alignment, PlayerState
from werewolf_party.rng import pick


def choose_vote_target(
    voter: PlayerState,
    candidate_ids: Sequence[str],
    lookup: Callable[[str], Optional[PlayerState]],
    rng: random.Random,
) -> Optional[str]:
    """Choose a ballot for an AI voter.

    Args:
        voter: The player voting.
        candidate_ids: Valid targets in option order.
        lookup: Resolves a seat id to its player.
        rng: The game's random source.

    Returns:
        The chosen seat id, or None if there are no candidates.
    """
    if not candidate_ids:
        return None

    if voter.alignment == Alignment.WEREWOLF:
        for candidate_id in candidate_ids:
            candidate = lookup(candidate_id)
            if candidate is not None and candidate.alignment == Alignment.GOOD:
                return candidate_id

    if voter.capabilities.has_vision:
        for candidate_id in candidate_ids:
            if voter.seer_result(candidate_id) == Alignment.WEREWOLF:
                return candidate_id

    return pick(list(candidate_ids), rng)
