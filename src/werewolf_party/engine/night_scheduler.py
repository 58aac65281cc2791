"""NightScheduler - runs the night one step at a time.

Night order:
1. Intro (day counter advances)
2. Werewolves pick a target
3. Each Seer checks one player
4. Each Witch may heal the werewolf target
5. One Witch may poison
6. Resolution: deaths, then the win check

The scheduler keeps stepping until a human decision is pending or the night
is complete, then hands over to the day discussion.
"""

import logging
import random

from werewolf_party.engine.contexts import NightStep
from werewolf_party.engine.game_state import GameState
from werewolf_party.engine.requests import HumanActionBroker
from werewolf_party.handlers import (
    BaseHandler,
    NightResolutionHandler,
    SeerHandler,
    WerewolfHandler,
    WitchHandler,
)

logger = logging.getLogger(__name__)


class NightScheduler:
    """Orchestrates the night phase: Werewolf -> Seer -> Witch -> Resolution."""

    def __init__(self, rng: random.Random, broker: HumanActionBroker):
        self._broker = broker
        self._werewolf_handler = WerewolfHandler(rng, broker)
        self._seer_handler = SeerHandler(rng, broker)
        self._witch_handler = WitchHandler(rng, broker)
        self._resolution_handler = NightResolutionHandler()

    @property
    def handlers(self) -> list[BaseHandler]:
        """Handlers that can issue human requests during the night."""
        return [self._werewolf_handler, self._seer_handler, self._witch_handler]

    async def __call__(self, state: GameState) -> None:
        """Advance the night until it pauses or completes.

        Args:
            state: The game state; ``state.phase`` must be NIGHT.
        """
        night = state.night or state.begin_night()

        while self._broker.pending is None and night.step != NightStep.COMPLETE:
            step = night.step
            if step == NightStep.INTRO:
                state.day += 1
                state.append_log(f"🌙 Night {state.day} falls.")
                logger.debug("Night %d begins", state.day)
                night.step = NightStep.WEREWOLF
            elif step == NightStep.WEREWOLF:
                await self._werewolf_handler(state, night)
            elif step == NightStep.SEER:
                await self._seer_handler(state, night)
            elif step == NightStep.WITCH_HEAL:
                await self._witch_handler.heal(state, night)
            elif step == NightStep.WITCH_POISON:
                await self._witch_handler.poison(state, night)
            elif step == NightStep.RESOLUTION:
                await self._resolution_handler(state, night)

        if night.step != NightStep.COMPLETE or self._broker.pending is not None:
            return

        state.night = None
        if not state.is_over:
            state.enter_discussion()
