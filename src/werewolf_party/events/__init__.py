"""Events package."""

from werewolf_party.events.game_events import (
    Phase,
    LogTag,
    LogEntry,
)
from werewolf_party.events.event_log import EventLog

__all__ = [
    "Phase",
    "LogTag",
    "LogEntry",
    "EventLog",
]
