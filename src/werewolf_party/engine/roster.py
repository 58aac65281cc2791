"""Roster builder - deals shuffled roles to seats."""

import random

from werewolf_party.errors import ConfigurationError
from werewolf_party.models.config import DEFAULT_PLAYER_NAMES, GameConfig
from werewolf_party.models.player import (
    ROLE_LIBRARY,
    PlayerNotes,
    PlayerState,
    role_bag,
)
from werewolf_party.rng import shuffled


def build_roster(config: GameConfig, rng: random.Random) -> list[PlayerState]:
    """Create players with shuffled roles.

    Seats are numbered from 1. A seat matching a human override takes that
    override's display name and is human-controlled; every other seat is AI
    with a default name. Witches start with both potions.

    Args:
        config: Game configuration.
        rng: The game's random source, used for the shuffle.

    Returns:
        Players in seat order.

    Raises:
        ConfigurationError: If the role bag for the player count is empty.
    """
    bag = role_bag(config.total_players, config.allow_hunter)
    if not bag:
        raise ConfigurationError(f"No roles configured for {config.total_players} players")

    players: list[PlayerState] = []
    for index, role_name in enumerate(shuffled(bag, rng)):
        seat = str(index + 1)
        role = ROLE_LIBRARY[role_name]
        human = config.human_for_seat(seat)

        if human is not None:
            display_name = human.display_name
        elif index < len(DEFAULT_PLAYER_NAMES):
            display_name = DEFAULT_PLAYER_NAMES[index]
        else:
            display_name = f"Player {seat}"

        notes = PlayerNotes(
            heal_available=role.capabilities.has_heal,
            poison_available=role.capabilities.has_poison,
        )
        players.append(
            PlayerState(
                id=seat,
                display_name=display_name,
                role=role,
                is_human=human is not None,
                notes=notes,
            )
        )
    return players
