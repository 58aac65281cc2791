"""Werewolf party engine: AI and human players through night and day."""

from werewolf_party.engine import WerewolfGame, EngineSnapshot
from werewolf_party.models import GameConfig, HumanParticipantConfig

__version__ = "0.1.0"

__all__ = [
    "WerewolfGame",
    "EngineSnapshot",
    "GameConfig",
    "HumanParticipantConfig",
    "__version__",
]
