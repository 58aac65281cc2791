"""Append-only game log with YAML export."""

from typing import Callable, Iterable, Optional

import yaml

from werewolf_party.rng import IdFactory
from .game_events import LogEntry, LogTag, Phase


class EventLog:
    """Append-only log of everything that happens in one game.

    Usage:
        log = EventLog(on_entry=print)
        log.append("Night falls.", day=1, phase=Phase.NIGHT)
        public = log.public_entries()

    The optional callback fires after each entry is appended, which is how a
    console front end streams the game as it happens.
    """

    def __init__(self, on_entry: Optional[Callable[[LogEntry], None]] = None):
        self._entries: list[LogEntry] = []
        self._next_id = IdFactory("log")
        self._on_entry = on_entry

    def append(
        self,
        message: str,
        day: int,
        phase: Phase,
        tags: Optional[Iterable[LogTag]] = None,
    ) -> LogEntry:
        """Append a new entry and return it."""
        entry = LogEntry(
            id=self._next_id(),
            day=day,
            phase=phase,
            message=message,
            tags=list(tags) if tags else None,
        )
        self._entries.append(entry)
        if self._on_entry is not None:
            self._on_entry(entry)
        return entry

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        return tuple(self._entries)

    def public_entries(self) -> list[LogEntry]:
        """Entries that every observer may see (``private`` ones removed)."""
        return [entry for entry in self._entries if not entry.is_private]

    def tail(self, count: int, public_only: bool = True) -> list[LogEntry]:
        """The last ``count`` entries, public ones only by default."""
        source = self.public_entries() if public_only else self._entries
        if count <= 0:
            return []
        return list(source[-count:])

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def to_yaml(self, include_private: bool = False) -> str:
        """Serialize the log to a YAML string.

        Args:
            include_private: Keep entries tagged ``private``. Off by default so
                an exported log can be shared with players.
        """
        entries = self._entries if include_private else self.public_entries()
        data = [entry.model_dump(mode="json", exclude_none=True) for entry in entries]
        return yaml.safe_dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)

    def save_to_file(self, filepath: str, include_private: bool = False) -> None:
        """Write the YAML export to a file."""
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(self.to_yaml(include_private=include_private))
