"""Models package."""

from werewolf_party.models.base import WireModel
from werewolf_party.models.player import (
    RoleName,
    Alignment,
    RoleCapabilities,
    RoleDefinition,
    ROLE_LIBRARY,
    ROLE_BAGS,
    role_bag,
    PlayerNotes,
    PlayerState,
)
from werewolf_party.models.config import (
    Language,
    DEFAULT_PLAYER_NAMES,
    HumanParticipantConfig,
    GameConfig,
)

__all__ = [
    "WireModel",
    "RoleName",
    "Alignment",
    "RoleCapabilities",
    "RoleDefinition",
    "ROLE_LIBRARY",
    "ROLE_BAGS",
    "role_bag",
    "PlayerNotes",
    "PlayerState",
    "Language",
    "DEFAULT_PLAYER_NAMES",
    "HumanParticipantConfig",
    "GameConfig",
]
