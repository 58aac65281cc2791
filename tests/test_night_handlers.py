"""Tests for the night handlers: werewolf, seer, witch and resolution."""

import random

import pytest

from werewolf_party.engine.contexts import NightContext, NightStep
from werewolf_party.engine.game_state import GameState
from werewolf_party.engine.requests import SKIP_OPTION_ID, HumanActionBroker, HumanActionType
from werewolf_party.events import Phase
from werewolf_party.handlers import NightResolutionHandler, SeerHandler, WerewolfHandler, WitchHandler
from werewolf_party.models import ROLE_LIBRARY, Alignment, PlayerNotes, PlayerState, RoleName


# ============================================================================
# Helper types and functions
# ============================================================================


class FixedRandom(random.Random):
    """Random source whose ``random()`` always returns the same value."""

    def __init__(self, value: float):
        super().__init__(0)
        self._value = value

    def random(self) -> float:
        return self._value

    def getrandbits(self, k: int) -> int:
        return super().getrandbits(k)


def make_state(*roles: RoleName, humans: tuple[str, ...] = ()) -> GameState:
    players = []
    for i, role in enumerate(roles, start=1):
        definition = ROLE_LIBRARY[role]
        players.append(
            PlayerState(
                id=str(i),
                display_name=f"Player {i}",
                role=definition,
                is_human=str(i) in humans,
                notes=PlayerNotes(
                    heal_available=definition.capabilities.has_heal,
                    poison_available=definition.capabilities.has_poison,
                ),
            )
        )
    state = GameState(players=players, phase=Phase.NIGHT, day=1)
    state.begin_night()
    return state


STANDARD_SIX = (
    RoleName.WEREWOLF,
    RoleName.WEREWOLF,
    RoleName.SEER,
    RoleName.WITCH,
    RoleName.VILLAGER,
    RoleName.VILLAGER,
)


@pytest.fixture
def broker() -> HumanActionBroker:
    return HumanActionBroker()


# ============================================================================
# Werewolf
# ============================================================================


class TestWerewolfHandler:
    @pytest.mark.asyncio
    async def test_ai_pack_picks_a_non_werewolf(self, broker):
        state = make_state(*STANDARD_SIX)
        night = state.night
        night.step = NightStep.WEREWOLF
        await WerewolfHandler(random.Random(1), broker)(state, night)

        assert night.werewolf_target in {"3", "4", "5", "6"}
        assert night.step == NightStep.SEER
        assert broker.pending is None
        assert state.log.entries[-1].is_private

    @pytest.mark.asyncio
    async def test_human_wolf_is_asked(self, broker):
        state = make_state(*STANDARD_SIX, humans=("2",))
        night = state.night
        night.step = NightStep.WEREWOLF
        handler = WerewolfHandler(random.Random(1), broker)
        await handler(state, night)

        request = broker.pending
        assert request.type == HumanActionType.WEREWOLF_TARGET
        assert request.player_id == "2"
        assert [o.id for o in request.options] == ["3", "4", "5", "6"]
        assert night.step == NightStep.WEREWOLF
        assert night.werewolf_target is None

        handler.apply(state, request, "5", None)
        assert night.werewolf_target == "5"
        assert night.step == NightStep.SEER
        assert state.log.entries[-1].is_private

    @pytest.mark.asyncio
    async def test_no_choice_leaves_target_unset(self, broker):
        state = make_state(*STANDARD_SIX, humans=("1",))
        night = state.night
        handler = WerewolfHandler(random.Random(1), broker)
        await handler(state, night)
        handler.apply(state, broker.pending, None, None)
        assert night.werewolf_target is None

    @pytest.mark.asyncio
    async def test_no_candidates_skips_to_seer(self, broker):
        state = make_state(RoleName.WEREWOLF, RoleName.WEREWOLF)
        night = state.night
        await WerewolfHandler(random.Random(1), broker)(state, night)
        assert night.werewolf_target is None
        assert night.step == NightStep.SEER


# ============================================================================
# Seer
# ============================================================================


class TestSeerHandler:
    @pytest.mark.asyncio
    async def test_ai_seer_records_alignment_privately(self, broker):
        state = make_state(*STANDARD_SIX)
        night = state.night
        await SeerHandler(random.Random(4), broker)(state, night)

        seer = state.get_player("3")
        assert night.seer_queue == []
        assert len(seer.notes.seer_results) == 1
        target_id, alignment = next(iter(seer.notes.seer_results.items()))
        assert target_id != "3"
        assert alignment == state.get_player(target_id).alignment
        assert state.log.entries[-1].is_private

    @pytest.mark.asyncio
    async def test_human_seer(self, broker):
        state = make_state(*STANDARD_SIX, humans=("3",))
        night = state.night
        handler = SeerHandler(random.Random(4), broker)
        await handler(state, night)

        request = broker.pending
        assert request.type == HumanActionType.SEER_CHECK
        assert "3" not in [o.id for o in request.options]

        handler.apply(state, request, "1", None)
        assert state.get_player("3").seer_result("1") == Alignment.WEREWOLF

    @pytest.mark.asyncio
    async def test_dead_seer_is_skipped(self, broker):
        state = make_state(*STANDARD_SIX)
        state.get_player("3").kill()
        night = state.night
        night.seer_queue = ["3"]
        await SeerHandler(random.Random(4), broker)(state, night)
        assert night.seer_queue == []
        assert state.get_player("3").notes.seer_results == {}

    @pytest.mark.asyncio
    async def test_empty_queue_moves_to_witch(self, broker):
        state = make_state(*STANDARD_SIX)
        night = state.night
        night.seer_queue = []
        await SeerHandler(random.Random(4), broker)(state, night)
        assert night.step == NightStep.WITCH_HEAL


# ============================================================================
# Witch
# ============================================================================


class TestWitchHeal:
    @pytest.mark.asyncio
    async def test_ai_heals_below_threshold(self, broker):
        state = make_state(*STANDARD_SIX)
        night = state.night
        night.werewolf_target = "5"
        await WitchHandler(FixedRandom(0.49), broker).heal(state, night)
        assert night.healed_target == "5"
        assert not state.get_player("4").notes.heal_available

    @pytest.mark.asyncio
    async def test_ai_keeps_heal_above_threshold(self, broker):
        state = make_state(*STANDARD_SIX)
        night = state.night
        night.werewolf_target = "5"
        await WitchHandler(FixedRandom(0.5), broker).heal(state, night)
        assert night.healed_target is None
        assert state.get_player("4").notes.heal_available

    @pytest.mark.asyncio
    async def test_no_target_no_heal(self, broker):
        state = make_state(*STANDARD_SIX, humans=("4",))
        night = state.night
        await WitchHandler(FixedRandom(0.0), broker).heal(state, night)
        assert broker.pending is None
        assert night.witch_queue == []

    @pytest.mark.asyncio
    async def test_spent_heal_is_not_offered(self, broker):
        state = make_state(*STANDARD_SIX, humans=("4",))
        state.get_player("4").use_heal()
        night = state.night
        night.werewolf_target = "5"
        await WitchHandler(FixedRandom(0.0), broker).heal(state, night)
        assert broker.pending is None

    @pytest.mark.asyncio
    async def test_human_heal_request(self, broker):
        state = make_state(*STANDARD_SIX, humans=("4",))
        night = state.night
        night.werewolf_target = "5"
        handler = WitchHandler(FixedRandom(0.0), broker)
        await handler.heal(state, night)

        request = broker.pending
        assert request.type == HumanActionType.WITCH_HEAL
        assert [o.id for o in request.options] == ["5", SKIP_OPTION_ID]

        handler.apply(state, request, SKIP_OPTION_ID, None)
        assert night.healed_target is None
        assert state.get_player("4").notes.heal_available

    @pytest.mark.asyncio
    async def test_empty_queue_moves_to_poison(self, broker):
        state = make_state(*STANDARD_SIX)
        night = state.night
        night.witch_queue = []
        await WitchHandler(FixedRandom(0.0), broker).heal(state, night)
        assert night.step == NightStep.WITCH_POISON


class TestWitchPoison:
    @pytest.mark.asyncio
    async def test_ai_poisons_below_threshold(self, broker):
        state = make_state(*STANDARD_SIX)
        night = state.night
        await WitchHandler(FixedRandom(0.2), broker).poison(state, night)
        assert night.poisoned_target is not None
        assert night.poisoned_target != "4"
        assert not state.get_player("4").notes.poison_available
        assert night.step == NightStep.RESOLUTION

    @pytest.mark.asyncio
    async def test_ai_keeps_poison_above_threshold(self, broker):
        state = make_state(*STANDARD_SIX)
        night = state.night
        await WitchHandler(FixedRandom(0.25), broker).poison(state, night)
        assert night.poisoned_target is None
        assert night.poison_asked
        assert night.step == NightStep.RESOLUTION

    @pytest.mark.asyncio
    async def test_poison_is_asked_once(self, broker):
        state = make_state(*STANDARD_SIX, humans=("4",))
        night = state.night
        night.poison_asked = True
        await WitchHandler(FixedRandom(0.0), broker).poison(state, night)
        assert broker.pending is None
        assert night.step == NightStep.RESOLUTION

    @pytest.mark.asyncio
    async def test_human_poison_request_offers_skip_first(self, broker):
        state = make_state(*STANDARD_SIX, humans=("4",))
        night = state.night
        await WitchHandler(FixedRandom(0.0), broker).poison(state, night)
        request = broker.pending
        assert request.type == HumanActionType.WITCH_POISON
        assert [o.id for o in request.options] == [SKIP_OPTION_ID, "1", "2", "3", "5", "6"]

    @pytest.mark.asyncio
    async def test_witch_can_poison_the_player_she_saved(self, broker):
        state = make_state(*STANDARD_SIX, humans=("4",))
        night = state.night
        night.werewolf_target = "5"
        handler = WitchHandler(FixedRandom(0.0), broker)

        await handler.heal(state, night)
        handler.apply(state, broker.pending, "5", None)
        broker.clear()
        await handler.heal(state, night)
        await handler.poison(state, night)
        handler.apply(state, broker.pending, "5", None)
        broker.clear()

        assert night.healed_target == "5"
        assert night.poisoned_target == "5"
        assert night.step == NightStep.RESOLUTION

        await NightResolutionHandler()(state, night)
        assert not state.get_player("5").is_alive


# ============================================================================
# Resolution
# ============================================================================


class TestNightResolution:
    @pytest.mark.asyncio
    async def test_peaceful_night(self):
        state = make_state(*STANDARD_SIX)
        night = state.night
        await NightResolutionHandler()(state, night)
        assert "No one died" in state.log.entries[-1].message
        assert night.step == NightStep.COMPLETE
        assert all(p.is_alive for p in state.players)

    @pytest.mark.asyncio
    async def test_deaths_and_victory(self):
        state = make_state(RoleName.WEREWOLF, RoleName.SEER, RoleName.VILLAGER)
        night = state.night
        night.werewolf_target = "2"
        await NightResolutionHandler()(state, night)
        assert not state.get_player("2").is_alive
        assert state.winner == Alignment.WEREWOLF
        assert state.phase == Phase.GAME_OVER
        assert night.step == NightStep.COMPLETE
