"""Shared base types for Werewolf game handlers.

- StepResult: tagged outcome of one atomic step (continue, suspended, terminal)
- SpeechFn: how handlers ask the engine for AI speech
- BaseHandler / SpeakingHandler: common plumbing for issuing human requests
  and building speech contexts
"""

import random
from enum import Enum
from typing import Awaitable, Callable, Optional

from pydantic import BaseModel

from werewolf_party.ai.context import AlivePlayerView, SpeechContext, SpeechTopic
from werewolf_party.engine.game_state import GameState
from werewolf_party.engine.requests import (
    HumanActionBroker,
    HumanActionOption,
    HumanActionRequest,
    HumanActionType,
    TextInputSpec,
)
from werewolf_party.models.player import Alignment, PlayerState

# Number of public log entries a speaker gets to see
RECENT_LOG_WINDOW = 8

SpeechFn = Callable[[SpeechContext], Awaitable[str]]


# ============================================================================
# Step Results
# ============================================================================


class StepKind(str, Enum):
    CONTINUE = "continue"
    SUSPENDED = "suspended"
    TERMINAL = "terminal"


class StepResult(BaseModel):
    """Outcome of one ``progress()`` step.

    - CONTINUE: the step completed; call again to keep going
    - SUSPENDED: a human decision is pending (``request`` is set)
    - TERMINAL: the game is over (``winner`` is set)
    """

    kind: StepKind
    request: Optional[HumanActionRequest] = None
    winner: Optional[Alignment] = None

    @classmethod
    def from_state(cls, state: GameState, request: Optional[HumanActionRequest]) -> "StepResult":
        """Classify the state a step left behind."""
        if request is not None:
            return cls(kind=StepKind.SUSPENDED, request=request)
        if state.is_over:
            return cls(kind=StepKind.TERMINAL, winner=state.winner)
        return cls(kind=StepKind.CONTINUE)


# ============================================================================
# Handler Bases
# ============================================================================


class BaseHandler:
    """Plumbing shared by every handler.

    Handlers mutate the GameState they are given and talk to humans only
    through the broker. ``apply`` receives an answered request; the engine
    routes it to the handler that issued it.
    """

    handles: tuple[HumanActionType, ...] = ()

    def __init__(self, rng: random.Random, broker: HumanActionBroker):
        self._rng = rng
        self._broker = broker

    def _request(
        self,
        action_type: HumanActionType,
        player: PlayerState,
        title: str,
        description: str,
        options: Optional[list[HumanActionOption]] = None,
        extra_input: Optional[TextInputSpec] = None,
    ) -> HumanActionRequest:
        return self._broker.issue(action_type, player, title, description, options, extra_input)

    def apply(
        self,
        state: GameState,
        request: HumanActionRequest,
        choice: Optional[str],
        text: Optional[str],
    ) -> None:
        """Apply a human's answer to a request this handler issued."""
        raise NotImplementedError(f"{type(self).__name__} does not accept {request.type.value}")


class SpeakingHandler(BaseHandler):
    """A handler whose AI players talk through the speech provider."""

    def __init__(self, rng: random.Random, broker: HumanActionBroker, speak: SpeechFn):
        super().__init__(rng, broker)
        self._speak = speak

    def _speech_context(
        self,
        state: GameState,
        speaker: PlayerState,
        topic: SpeechTopic,
        suggested_target_id: Optional[str] = None,
    ) -> SpeechContext:
        """Build the speaker's view: everyone alive, only their own alignment."""
        alive = [
            AlivePlayerView(
                id=p.id,
                name=p.display_name,
                is_human=p.is_human,
                alignment=p.alignment if p.id == speaker.id else None,
            )
            for p in state.living()
        ]
        return SpeechContext(
            day=state.day,
            phase=state.phase,
            topic=topic,
            speaker_id=speaker.id,
            speaker_name=speaker.display_name,
            speaker_role=speaker.role.name,
            speaker_alignment=speaker.alignment,
            alive_players=alive,
            recent_logs=state.log.tail(RECENT_LOG_WINDOW),
            language=state.language,
            suggested_target_id=suggested_target_id,
        )
