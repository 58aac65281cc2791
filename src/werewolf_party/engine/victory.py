"""Victory conditions.

- Good wins when no Werewolf-aligned player is alive.
- Werewolves win when living wolves are at least as many as living Good players.
"""

from typing import Iterable, Optional

from werewolf_party.models.player import Alignment, PlayerState


def count_living(players: Iterable[PlayerState]) -> dict[Alignment, int]:
    """Count living players per alignment."""
    counts = {Alignment.GOOD: 0, Alignment.WEREWOLF: 0}
    for player in players:
        if player.is_alive:
            counts[player.alignment] += 1
    return counts


def evaluate_winner(players: Iterable[PlayerState]) -> Optional[Alignment]:
    """Check whether the game has ended.

    Args:
        players: The full roster; dead players are ignored.

    Returns:
        The winning alignment, or None while the game continues.
    """
    counts = count_living(players)
    wolves = counts[Alignment.WEREWOLF]
    good = counts[Alignment.GOOD]

    if wolves == 0:
        return Alignment.GOOD
    if wolves >= good:
        return Alignment.WEREWOLF
    return None
