"""Game setup configuration."""

from typing import Literal, Optional

from pydantic import ConfigDict, Field

from werewolf_party.models.base import WireModel

Language = Literal["en", "zh-Hant"]

DEFAULT_PLAYER_NAMES: list[str] = [f"AI Player {i}" for i in range(1, 13)]


class HumanParticipantConfig(WireModel):
    """A seat taken by a human: 1-based seat id plus display name."""

    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str


class GameConfig(WireModel):
    """Supplied at game start and never changed while the game runs.

    ``total_players`` outside the catalogue (6-8) falls back to the
    6-player role bag. ``ai_providers`` is opaque to the engine.
    """

    model_config = ConfigDict(frozen=True)

    total_players: int = 6
    allow_hunter: bool = True
    human_players: list[HumanParticipantConfig] = Field(default_factory=list)
    ai_providers: list[str] = Field(default_factory=lambda: ["gpt"])
    seed: Optional[int] = None
    language: Language = "en"

    def human_for_seat(self, seat_id: str) -> Optional[HumanParticipantConfig]:
        """Get the human override for a seat, if any."""
        for human in self.human_players:
            if human.id == seat_id:
                return human
        return None
