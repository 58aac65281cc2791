"""Per-phase working state.

Each context is built when its phase starts and dropped when it ends; none
of them outlives its phase.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class NightStep(str, Enum):
    """Steps of one night, in resolution order.

    Wolves pick before the Witch is asked so the heal can see the target, and
    both potions are settled before anyone dies.
    """

    INTRO = "intro"
    WEREWOLF = "werewolf"
    SEER = "seer"
    WITCH_HEAL = "witch-heal"
    WITCH_POISON = "witch-poison"
    RESOLUTION = "resolution"
    COMPLETE = "complete"


class NightContext(BaseModel):
    """Tracks one night's actions.

    Queues hold the seats of Seers and Witches still to act tonight; they
    are captured when the night starts.
    """

    step: NightStep = NightStep.INTRO
    werewolf_target: Optional[str] = None
    seer_queue: list[str] = Field(default_factory=list)
    witch_queue: list[str] = Field(default_factory=list)
    healed_target: Optional[str] = None
    poisoned_target: Optional[str] = None
    poison_asked: bool = False


class DiscussionContext(BaseModel):
    """Speaker order captured at the start of the discussion."""

    speakers: list[str] = Field(default_factory=list)
    index: int = 0

    def next_speaker(self) -> Optional[str]:
        """Advance the cursor and return the speaker, or None when done."""
        if self.index >= len(self.speakers):
            return None
        speaker = self.speakers[self.index]
        self.index += 1
        return speaker


class VoteContext(BaseModel):
    """Ballots for one day's vote.

    ``tallied`` is set once the votes are counted but a Hunter's shot is
    still owed; the context is kept until that shot is resolved.
    """

    voters: list[str] = Field(default_factory=list)
    index: int = 0
    votes: dict[str, str] = Field(default_factory=dict)  # voter id -> target id
    tallied: bool = False

    @property
    def exhausted(self) -> bool:
        return self.index >= len(self.voters)


class HunterPendingContext(BaseModel):
    """A Hunter who has just been eliminated and still owes a shot."""

    player_id: str
    cause: str
