"""Phase and log entry types."""

from enum import Enum
from typing import Optional

from pydantic import ConfigDict, Field

from werewolf_party.models.base import WireModel


class Phase(str, Enum):
    """Top-level phases of the game."""

    IDLE = "idle"
    NIGHT = "night"
    DAY_DISCUSSION = "day-discussion"
    DAY_VOTE = "day-vote"
    GAME_OVER = "game-over"


class LogTag(str, Enum):
    """Tags attached to log entries."""

    PRIVATE = "private"  # hidden from observers and from speech context


class LogEntry(WireModel):
    """A single line of the game log."""

    model_config = ConfigDict(frozen=True)

    id: str
    day: int
    phase: Phase
    message: str
    tags: Optional[list[LogTag]] = None

    @property
    def is_private(self) -> bool:
        return bool(self.tags) and LogTag.PRIVATE in self.tags

    def __str__(self) -> str:
        marker = " [private]" if self.is_private else ""
        return f"[day {self.day} {self.phase.value}]{marker} {self.message}"
