"""Game state management for the Werewolf game."""

import logging
from typing import Callable, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field

from werewolf_party.events import EventLog, LogEntry, LogTag, Phase
from werewolf_party.models.config import Language
from werewolf_party.models.player import Alignment, PlayerState
from werewolf_party.engine.contexts import (
    DiscussionContext,
    HunterPendingContext,
    NightContext,
    VoteContext,
)
from werewolf_party.engine.victory import evaluate_winner

logger = logging.getLogger(__name__)

VICTORY_MESSAGES = {
    Alignment.GOOD: "The village has rooted out every werewolf. Good wins!",
    Alignment.WEREWOLF: "The werewolves have overrun the village. Werewolves win!",
}


class GameState(BaseModel):
    """Everything one game owns, passed by reference to the resolvers.

    Exactly one engine owns a GameState; resolvers mutate it in place. The
    phase contexts exist only while their phase is active.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    players: list[PlayerState] = Field(default_factory=list)
    phase: Phase = Phase.IDLE
    day: int = 0
    winner: Optional[Alignment] = None
    language: Language = "en"
    log: EventLog = Field(default_factory=EventLog)

    night: Optional[NightContext] = None
    discussion: Optional[DiscussionContext] = None
    vote: Optional[VoteContext] = None
    pending_hunters: list[HunterPendingContext] = Field(default_factory=list)

    # ------------------------------------------------------------------
    # Roster queries
    # ------------------------------------------------------------------

    def get_player(self, player_id: Optional[str]) -> Optional[PlayerState]:
        """Get player by seat id.

        Args:
            player_id: The player's seat id ("1".."N")

        Returns:
            PlayerState if found, None otherwise
        """
        if player_id is None:
            return None
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def living(self, predicate: Optional[Callable[[PlayerState], bool]] = None) -> list[PlayerState]:
        """Living players in seat order, optionally filtered."""
        return [p for p in self.players if p.is_alive and (predicate is None or predicate(p))]

    def living_werewolves(self) -> list[PlayerState]:
        return self.living(lambda p: p.alignment == Alignment.WEREWOLF)

    def living_non_werewolves(self) -> list[PlayerState]:
        return self.living(lambda p: p.alignment != Alignment.WEREWOLF)

    def living_except(self, player_id: str) -> list[PlayerState]:
        """Living players other than the given one."""
        return self.living(lambda p: p.id != player_id)

    def resolve_name(self, player_id: Optional[str]) -> str:
        """Display name for a seat, with a safe default for unknown ids."""
        player = self.get_player(player_id)
        if player is None:
            return f"Player {player_id}"
        return player.display_name

    @property
    def is_over(self) -> bool:
        return self.phase == Phase.GAME_OVER

    # ------------------------------------------------------------------
    # Log
    # ------------------------------------------------------------------

    def append_log(
        self,
        message: str,
        phase: Optional[Phase] = None,
        tags: Optional[Iterable[LogTag]] = None,
    ) -> LogEntry:
        """Log a message for the current day, in the current phase by default."""
        return self.log.append(message, day=self.day, phase=phase or self.phase, tags=tags)

    # ------------------------------------------------------------------
    # Eliminations and victory
    # ------------------------------------------------------------------

    def eliminate(self, player_id: Optional[str], cause: str) -> bool:
        """Eliminate a player.

        Eliminating a dead or unknown player does nothing. A Hunter who is
        eliminated queues a revenge shot, resolved during the next vote phase.

        Args:
            player_id: Seat id of the player to eliminate
            cause: Human-readable cause for the log

        Returns:
            True if a living player was eliminated.
        """
        player = self.get_player(player_id)
        if player is None or not player.kill():
            return False

        self.append_log(f"☠️ {player.display_name} ({player.role.name.value}) was eliminated: {cause}.")
        logger.debug("Eliminated %s (%s) on day %d: %s", player.id, player.role.name.value, self.day, cause)

        if player.capabilities.has_revenge_shot:
            self.pending_hunters.append(HunterPendingContext(player_id=player.id, cause=cause))
        return True

    def check_victory(self) -> Optional[Alignment]:
        """Evaluate the win condition and end the game if it is met.

        Returns:
            The winner, or None while the game continues.
        """
        if self.winner is not None:
            return self.winner

        winner = evaluate_winner(self.players)
        if winner is None:
            return None

        self.winner = winner
        self.phase = Phase.GAME_OVER
        self.night = None
        self.discussion = None
        self.vote = None
        self.append_log(VICTORY_MESSAGES[winner], phase=Phase.GAME_OVER)
        logger.debug("Game over on day %d: %s wins", self.day, winner.value)
        return winner

    # ------------------------------------------------------------------
    # Phase transitions
    # ------------------------------------------------------------------

    def begin_night(self) -> NightContext:
        """Create tonight's context with the Seers and Witches alive now."""
        self.night = NightContext(
            seer_queue=[p.id for p in self.living(lambda p: p.capabilities.has_vision)],
            witch_queue=[p.id for p in self.living(lambda p: p.capabilities.has_heal)],
        )
        return self.night

    def enter_night(self) -> None:
        self.phase = Phase.NIGHT
        self.discussion = None
        self.vote = None
        self.night = None
        self.append_log("Night falls again; the next round begins.")
        logger.debug("Entering night after day %d", self.day)

    def enter_discussion(self) -> None:
        self.phase = Phase.DAY_DISCUSSION
        self.night = None
        self.discussion = DiscussionContext(speakers=[p.id for p in self.living()])
        self.append_log("Day breaks. The villagers gather in the square to talk.")
        logger.debug("Entering discussion on day %d", self.day)

    def enter_vote(self) -> None:
        self.phase = Phase.DAY_VOTE
        self.discussion = None
        self.vote = VoteContext(voters=[p.id for p in self.living()])
        self.append_log("Discussion is over. Time to vote on who to banish.")
        logger.debug("Entering vote on day %d", self.day)
