"""WerewolfGame - main game controller that drives one game step by step."""

import asyncio
import logging
from typing import Callable, Optional

from werewolf_party.ai.context import SpeechContext
from werewolf_party.ai.fallback import fallback_speech
from werewolf_party.ai.speech_provider import SpeechProvider, create_speech_provider
from werewolf_party.engine.day_scheduler import DayScheduler
from werewolf_party.engine.game_state import GameState
from werewolf_party.engine.night_scheduler import NightScheduler
from werewolf_party.engine.requests import HumanActionBroker, HumanActionSubmission, HumanActionType
from werewolf_party.engine.roster import build_roster
from werewolf_party.engine.snapshot import EngineSnapshot
from werewolf_party.events import EventLog, LogEntry, Phase
from werewolf_party.handlers import BaseHandler, StepResult
from werewolf_party.models.config import GameConfig
from werewolf_party.rng import create_rng

logger = logging.getLogger(__name__)

# Upper bound on one speech call, on top of the provider's own HTTP timeout
SPEECH_TIMEOUT_SEC = 25.0

GAME_START_MESSAGE = "The game begins and roles have been dealt. Night settles over the village..."


class WerewolfGame:
    """Main game controller - advances the game one atomic step at a time.

    Game Flow:
        1. Night N: Werewolf -> Seer -> Witch heal -> Witch poison -> Resolution
        2. Day N discussion: each living player speaks once
        3. Day N vote: owed Hunter shots, ballots, tally
        4. Night N+1: (repeat) until one side wins

    The game pauses whenever a human decision is needed. The caller answers
    with ``submit_human_action`` and the game picks up where it stopped.

    Example:
        game = WerewolfGame(GameConfig(seed=7))
        game.start()
        snapshot = await game.run_until_decision()
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        speech_provider: Optional[SpeechProvider] = None,
        speech_timeout: float = SPEECH_TIMEOUT_SEC,
        on_log: Optional[Callable[[LogEntry], None]] = None,
    ):
        """Initialize the WerewolfGame.

        Args:
            config: Game configuration; defaults to a six-player all-AI game.
            speech_provider: Source of AI speech. Defaults to the HTTP
                provider when an API key is configured, canned speech
                otherwise.
            speech_timeout: Seconds to wait for one speech before falling
                back to a canned line.
            on_log: Optional callback invoked with every new log entry.
        """
        self.config = config or GameConfig()
        self._speech_provider = speech_provider or create_speech_provider()
        self._speech_timeout = speech_timeout
        self._on_log = on_log
        self._reset()

    def _reset(self) -> None:
        self._rng = create_rng(self.config.seed)
        self._broker = HumanActionBroker()
        self._state = GameState(language=self.config.language, log=EventLog(on_entry=self._on_log))
        self._night_scheduler = NightScheduler(self._rng, self._broker)
        self._day_scheduler = DayScheduler(self._rng, self._broker, self._speak)

        self._handlers: dict[HumanActionType, BaseHandler] = {}
        for handler in self._night_scheduler.handlers + self._day_scheduler.handlers:
            for action_type in handler.handles:
                self._handlers[action_type] = handler

    # ========================================================================
    # Public API
    # ========================================================================

    @property
    def state(self) -> GameState:
        """The live game state. Observers should prefer ``get_snapshot``."""
        return self._state

    def start(self, config: Optional[GameConfig] = None) -> EngineSnapshot:
        """Start a fresh game, discarding any game in progress.

        Args:
            config: Optional replacement configuration.

        Returns:
            Snapshot of the freshly dealt game, in the night phase of day 0.
        """
        if config is not None:
            self.config = config
        self._reset()

        self._state.players = build_roster(self.config, self._rng)
        self._state.phase = Phase.NIGHT
        self._state.append_log(GAME_START_MESSAGE)
        logger.debug(
            "Started %d-player game (seed=%s, humans=%d)",
            len(self._state.players),
            self.config.seed,
            sum(1 for p in self._state.players if p.is_human),
        )
        return self.get_snapshot()

    async def step(self) -> StepResult:
        """Run one atomic step and classify where it left the game.

        A pending human request, an idle engine and a finished game are all
        left untouched.
        """
        pending = self._broker.pending
        if pending is None:
            phase = self._state.phase
            if phase == Phase.NIGHT:
                await self._night_scheduler(self._state)
            elif phase in (Phase.DAY_DISCUSSION, Phase.DAY_VOTE):
                await self._day_scheduler(self._state)
        return StepResult.from_state(self._state, self._broker.pending)

    async def progress(self) -> EngineSnapshot:
        """Run one atomic step and return the resulting snapshot."""
        await self.step()
        return self.get_snapshot()

    async def submit_human_action(
        self,
        request_id: str,
        chosen_option_id: Optional[str] = None,
        text: Optional[str] = None,
    ) -> EngineSnapshot:
        """Answer the pending human request and continue.

        A submission for a request that is not pending is ignored, and the
        unchanged snapshot is returned.
        """
        return await self.submit(
            HumanActionSubmission(request_id=request_id, chosen_option_id=chosen_option_id, text=text)
        )

    async def submit(self, submission: HumanActionSubmission) -> EngineSnapshot:
        """Like ``submit_human_action``, taking a submission object."""
        request = self._broker.accept(submission)
        if request is None:
            logger.debug("Ignoring submission for %s", submission.request_id)
            return self.get_snapshot()

        handler = self._handlers.get(request.type)
        if handler is not None and self._state.get_player(request.player_id) is not None:
            choice = HumanActionBroker.resolve_choice(request, submission.chosen_option_id)
            handler.apply(self._state, request, choice, submission.text)

        return await self.progress()

    async def run_until_decision(self) -> EngineSnapshot:
        """Step until a human decision is pending or the game is over."""
        while (
            self._broker.pending is None
            and not self._state.is_over
            and self._state.phase != Phase.IDLE
        ):
            await self.step()
        return self.get_snapshot()

    def get_snapshot(self) -> EngineSnapshot:
        """Return a detached copy of the observable game."""
        state = self._state
        return EngineSnapshot(
            day=state.day,
            phase=state.phase,
            players=[player.model_copy(deep=True) for player in state.players],
            logs=list(state.log.entries),
            pending_request=self._broker.pending,
            winner=state.winner,
        )

    # ========================================================================
    # Speech
    # ========================================================================

    async def _speak(self, context: SpeechContext) -> str:
        """Generate speech, degrading to a canned line on any failure."""
        try:
            text = await asyncio.wait_for(
                self._speech_provider.generate_speech(context),
                timeout=self._speech_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning("Speech for %s timed out; using a fallback line", context.speaker_name)
            text = ""
        except Exception as exc:
            logger.warning("Speech for %s failed (%s); using a fallback line", context.speaker_name, exc)
            text = ""

        text = (text or "").strip()
        if text:
            return text
        return fallback_speech(context.speaker_role, self._state.language, self._rng)
