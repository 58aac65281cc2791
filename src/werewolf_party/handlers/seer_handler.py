"""Seer handler - one vision per living Seer per night.

The result goes into the Seer's private notes and is logged with the
``private`` tag; it never reaches public context.
"""

from typing import Optional

from werewolf_party.engine.contexts import NightContext, NightStep
from werewolf_party.engine.game_state import GameState
from werewolf_party.engine.requests import HumanActionRequest, HumanActionType, seat_options
from werewolf_party.events import LogTag
from werewolf_party.models.player import PlayerState
from werewolf_party.rng import pick

from .base import BaseHandler


class SeerHandler(BaseHandler):
    """Handler for the Seer step: processes one queued Seer per call."""

    handles = (HumanActionType.SEER_CHECK,)

    async def __call__(self, state: GameState, night: NightContext) -> None:
        if not night.seer_queue:
            night.step = NightStep.WITCH_HEAL
            return

        seer = state.get_player(night.seer_queue.pop(0))
        if seer is None or not seer.is_alive:
            return

        candidates = state.living_except(seer.id)
        if not candidates:
            return

        if seer.is_human:
            self._request(
                HumanActionType.SEER_CHECK,
                seer,
                title="Seer's vision",
                description="Choose one player to learn their alignment.",
                options=seat_options(candidates),
            )
            return

        self._reveal(state, seer, pick(candidates, self._rng))

    def apply(
        self,
        state: GameState,
        request: HumanActionRequest,
        choice: Optional[str],
        text: Optional[str],
    ) -> None:
        seer = state.get_player(request.player_id)
        target = state.get_player(choice)
        if seer is None or target is None:
            return
        self._reveal(state, seer, target)

    def _reveal(self, state: GameState, seer: PlayerState, target: PlayerState) -> None:
        seer.record_seer_result(target.id, target.alignment)
        state.append_log(
            f"{seer.display_name} peers into {target.display_name}'s true nature: {target.alignment.value}.",
            tags=[LogTag.PRIVATE],
        )
