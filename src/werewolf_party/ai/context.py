"""What a speaker is told about the table when asked to talk."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from werewolf_party.events import LogEntry, Phase
from werewolf_party.models.config import Language
from werewolf_party.models.player import Alignment, RoleName

SpeechTopic = Literal["discussion", "vote"]


class AlivePlayerView(BaseModel):
    """A living player as the speaker sees them.

    Alignment is only filled in for the speaker themself.
    """

    id: str
    name: str
    is_human: bool = False
    alignment: Optional[Alignment] = None


class SpeechContext(BaseModel):
    """Input to a speech provider."""

    day: int
    phase: Phase  # DAY_DISCUSSION or DAY_VOTE
    topic: SpeechTopic
    speaker_id: str
    speaker_name: str
    speaker_role: RoleName
    speaker_alignment: Alignment
    alive_players: list[AlivePlayerView] = Field(default_factory=list)
    recent_logs: list[LogEntry] = Field(default_factory=list)  # public entries only
    language: Language = "en"
    suggested_target_id: Optional[str] = None

    def name_of(self, player_id: Optional[str]) -> Optional[str]:
        for player in self.alive_players:
            if player.id == player_id:
                return player.name
        return None
