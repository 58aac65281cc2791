"""Werewolf handler - the pack picks tonight's victim.

If any living werewolf is human, that human chooses for the whole pack.
An all-AI pack picks a living non-werewolf uniformly at random.
"""

from typing import Optional

from werewolf_party.engine.contexts import NightContext, NightStep
from werewolf_party.engine.game_state import GameState
from werewolf_party.engine.requests import HumanActionRequest, HumanActionType, seat_options
from werewolf_party.events import LogTag
from werewolf_party.rng import pick

from .base import BaseHandler


class WerewolfHandler(BaseHandler):
    """Handler for the werewolf step of the night."""

    handles = (HumanActionType.WEREWOLF_TARGET,)

    async def __call__(self, state: GameState, night: NightContext) -> None:
        """Choose the werewolf target, or ask the human wolf to.

        Moves on to the Seer once a target exists or no valid target exists.
        """
        werewolves = state.living_werewolves()
        candidates = state.living_non_werewolves()

        if not werewolves or not candidates:
            night.step = NightStep.SEER
            return

        if night.werewolf_target is None:
            human = next((wolf for wolf in werewolves if wolf.is_human), None)
            if human is not None:
                self._request(
                    HumanActionType.WEREWOLF_TARGET,
                    human,
                    title="Choose tonight's target",
                    description="Pick one player outside the pack for the werewolves to attack tonight.",
                    options=seat_options(candidates),
                )
                return

            target = pick(candidates, self._rng)
            night.werewolf_target = target.id
            state.append_log(
                f"The pack gathers in the dark and sets its sights on {target.display_name}.",
                tags=[LogTag.PRIVATE],
            )

        night.step = NightStep.SEER

    def apply(
        self,
        state: GameState,
        request: HumanActionRequest,
        choice: Optional[str],
        text: Optional[str],
    ) -> None:
        night = state.night
        wolf = state.get_player(request.player_id)
        if night is None or wolf is None or choice is None:
            return

        night.werewolf_target = choice
        night.step = NightStep.SEER
        state.append_log(
            f"{wolf.display_name} marks {state.resolve_name(choice)} as tonight's prey.",
            tags=[LogTag.PRIVATE],
        )
