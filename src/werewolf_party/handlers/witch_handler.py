"""Witch handler - the healing potion, then the poison.

Rules:
- The heal is offered only for tonight's werewolf target, once per queued
  Witch that still holds it. An AI Witch heals half the time.
- The poison is offered once per night, to the first living Witch that
  still holds it. An AI Witch poisons a quarter of the time.
- Both potions are single use; a spent potion never comes back.
- The poison decision ignores the heal, so a Witch can poison the player
  she just saved.
"""

from typing import Optional

from werewolf_party.engine.contexts import NightContext, NightStep
from werewolf_party.engine.game_state import GameState
from werewolf_party.engine.requests import (
    SKIP_OPTION_ID,
    HumanActionOption,
    HumanActionRequest,
    HumanActionType,
    seat_options,
    skip_option,
)
from werewolf_party.events import LogTag
from werewolf_party.models.player import PlayerState
from werewolf_party.rng import chance, pick

from .base import BaseHandler

AI_HEAL_PROBABILITY = 0.5
AI_POISON_PROBABILITY = 0.25


class WitchHandler(BaseHandler):
    """Handler for the witch-heal and witch-poison steps."""

    handles = (HumanActionType.WITCH_HEAL, HumanActionType.WITCH_POISON)

    # ------------------------------------------------------------------
    # Heal
    # ------------------------------------------------------------------

    async def heal(self, state: GameState, night: NightContext) -> None:
        """Offer the heal to the next queued Witch."""
        if not night.witch_queue:
            night.step = NightStep.WITCH_POISON
            return

        witch = state.get_player(night.witch_queue.pop(0))
        if witch is None or not witch.is_alive:
            return
        if not witch.notes.heal_available or night.werewolf_target is None:
            return

        target = state.get_player(night.werewolf_target)
        if target is None:
            return

        if witch.is_human:
            self._request(
                HumanActionType.WITCH_HEAL,
                witch,
                title="Use the healing potion?",
                description=f"{target.display_name} was attacked by the werewolves tonight. Will you save them?",
                options=[
                    HumanActionOption(id=target.id, label=f"Save {target.display_name}"),
                    skip_option("Keep the potion"),
                ],
            )
            return

        if chance(AI_HEAL_PROBABILITY, self._rng):
            self._use_heal(state, night, witch, target.id)

    def _use_heal(self, state: GameState, night: NightContext, witch: PlayerState, target_id: str) -> None:
        night.healed_target = target_id
        witch.use_heal()
        state.append_log(
            f"{witch.display_name} quietly uses the healing potion on {state.resolve_name(target_id)}.",
            tags=[LogTag.PRIVATE],
        )

    # ------------------------------------------------------------------
    # Poison
    # ------------------------------------------------------------------

    async def poison(self, state: GameState, night: NightContext) -> None:
        """Offer the poison once, then move on to resolution."""
        if night.poison_asked:
            night.step = NightStep.RESOLUTION
            return

        witches = state.living(lambda p: p.capabilities.has_poison and p.notes.poison_available)
        if not witches:
            night.step = NightStep.RESOLUTION
            return

        witch = witches[0]
        targets = state.living_except(witch.id)
        if not targets:
            night.step = NightStep.RESOLUTION
            return

        night.poison_asked = True
        if witch.is_human:
            self._request(
                HumanActionType.WITCH_POISON,
                witch,
                title="Use the poison?",
                description="Choose a player to poison, or skip to keep the poison.",
                options=[skip_option("Keep the poison"), *seat_options(targets)],
            )
            return

        if chance(AI_POISON_PROBABILITY, self._rng):
            self._use_poison(state, night, witch, pick(targets, self._rng).id)
        night.step = NightStep.RESOLUTION

    def _use_poison(self, state: GameState, night: NightContext, witch: PlayerState, target_id: str) -> None:
        night.poisoned_target = target_id
        witch.use_poison()
        state.append_log(
            f"{witch.display_name} slips poison to {state.resolve_name(target_id)} in the night.",
            tags=[LogTag.PRIVATE],
        )

    # ------------------------------------------------------------------
    # Human answers
    # ------------------------------------------------------------------

    def apply(
        self,
        state: GameState,
        request: HumanActionRequest,
        choice: Optional[str],
        text: Optional[str],
    ) -> None:
        night = state.night
        witch = state.get_player(request.player_id)
        if night is None or witch is None:
            return

        if request.type == HumanActionType.WITCH_HEAL:
            if choice is not None and choice != SKIP_OPTION_ID:
                self._use_heal(state, night, witch, choice)
            return

        if choice is not None and choice != SKIP_OPTION_ID:
            self._use_poison(state, night, witch, choice)
        night.step = NightStep.RESOLUTION
