"""DayScheduler - runs the day discussion and vote, one step per call.

Day order:
1. Discussion: each living player speaks once
2. Vote: owed Hunter shots first, then ballots, then the tally
"""

import random

from werewolf_party.engine.game_state import GameState
from werewolf_party.engine.requests import HumanActionBroker
from werewolf_party.events import Phase
from werewolf_party.handlers import (
    BaseHandler,
    DiscussionHandler,
    HunterHandler,
    SpeechFn,
    VotingHandler,
)


class DayScheduler:
    """Orchestrates the day phase: Discussion -> (Hunter) -> Voting."""

    def __init__(self, rng: random.Random, broker: HumanActionBroker, speak: SpeechFn):
        self._discussion_handler = DiscussionHandler(rng, broker, speak)
        self._hunter_handler = HunterHandler(rng, broker)
        self._voting_handler = VotingHandler(rng, broker, speak)

    @property
    def handlers(self) -> list[BaseHandler]:
        """Handlers that can issue human requests during the day."""
        return [self._discussion_handler, self._hunter_handler, self._voting_handler]

    async def __call__(self, state: GameState) -> None:
        """Run one atomic day step."""
        if state.phase == Phase.DAY_DISCUSSION:
            await self._discussion_handler(state)
        elif state.phase == Phase.DAY_VOTE:
            if state.pending_hunters:
                await self._hunter_handler(state)
                return
            await self._voting_handler(state)
