"""Immutable view of the engine handed to the presentation layer."""

from typing import Optional

from pydantic import ConfigDict, Field

from werewolf_party.engine.requests import HumanActionRequest
from werewolf_party.events import LogEntry, Phase
from werewolf_party.models.base import WireModel
from werewolf_party.models.player import Alignment, PlayerState


class EngineSnapshot(WireModel):
    """Everything an observer can see at one point in time.

    Players are deep copies, so mutating a snapshot never reaches the engine.
    """

    model_config = ConfigDict(frozen=True)

    day: int
    phase: Phase
    players: list[PlayerState] = Field(default_factory=list)
    logs: list[LogEntry] = Field(default_factory=list)
    pending_request: Optional[HumanActionRequest] = None
    winner: Optional[Alignment] = None

    def get_player(self, player_id: str) -> Optional[PlayerState]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def public_logs(self) -> list[LogEntry]:
        return [entry for entry in self.logs if not entry.is_private]
