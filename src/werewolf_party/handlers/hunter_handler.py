"""Hunter handler - the revenge shot of an eliminated Hunter.

Pending shots are resolved one per step, oldest first. The pending entry is
removed before the shot lands, so a shot that kills a second Hunter queues
a fresh entry behind it instead of being lost.
"""

from typing import Optional

from werewolf_party.engine.game_state import GameState
from werewolf_party.engine.requests import (
    SKIP_OPTION_ID,
    HumanActionRequest,
    HumanActionType,
    seat_options,
    skip_option,
)
from werewolf_party.models.player import PlayerState
from werewolf_party.rng import pick

from .base import BaseHandler


class HunterHandler(BaseHandler):
    """Handler for pending Hunter shots."""

    handles = (HumanActionType.HUNTER_SHOOT,)

    async def __call__(self, state: GameState) -> None:
        if not state.pending_hunters:
            return

        pending = state.pending_hunters.pop(0)
        hunter = state.get_player(pending.player_id)
        if hunter is None:
            return

        targets = state.living_except(hunter.id)
        if not targets:
            state.append_log(f"{hunter.display_name} has no one left to take down.")
            return

        if hunter.is_human:
            self._request(
                HumanActionType.HUNTER_SHOOT,
                hunter,
                title="Hunter's last shot",
                description=f"You were eliminated ({pending.cause}). Take someone down with you?",
                options=[skip_option("Hold fire"), *seat_options(targets)],
            )
            return

        self._shoot(state, hunter, pick(targets, self._rng).id)
        state.check_victory()

    def apply(
        self,
        state: GameState,
        request: HumanActionRequest,
        choice: Optional[str],
        text: Optional[str],
    ) -> None:
        hunter = state.get_player(request.player_id)
        if hunter is None:
            return

        if choice is None or choice == SKIP_OPTION_ID:
            state.append_log(f"{hunter.display_name} lowers the gun and holds fire.")
        else:
            self._shoot(state, hunter, choice)
        state.check_victory()

    def _shoot(self, state: GameState, hunter: PlayerState, target_id: str) -> None:
        state.append_log(f"🔫 {hunter.display_name} fires a final shot at {state.resolve_name(target_id)}.")
        state.eliminate(target_id, f"shot by the Hunter {hunter.display_name}")
