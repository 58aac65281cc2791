"""Night resolution handler - applies the night's deaths and checks victory."""

from typing import Optional

from werewolf_party.engine.contexts import NightContext, NightStep
from werewolf_party.engine.game_state import GameState
from werewolf_party.engine.night_action_resolver import NightActionResolver


class NightResolutionHandler:
    """Turns tonight's actions into eliminations."""

    def __init__(self, resolver: Optional[NightActionResolver] = None):
        self._resolver = resolver or NightActionResolver()

    async def __call__(self, state: GameState, night: NightContext) -> None:
        deaths = self._resolver.resolve(night)
        if not deaths:
            state.append_log("The night passes strangely quiet. No one died.")

        for player_id, cause in deaths:
            state.eliminate(player_id, cause)

        state.check_victory()
        night.step = NightStep.COMPLETE
