"""Tests for NightActionResolver."""

from werewolf_party.engine.contexts import NightContext
from werewolf_party.engine.night_action_resolver import (
    WEREWOLF_ATTACK,
    WITCH_POISON,
    NightActionResolver,
)


class TestNightActionResolver:
    def setup_method(self):
        self.resolver = NightActionResolver()

    def test_quiet_night(self):
        assert self.resolver.resolve(NightContext()) == []

    def test_werewolf_kill(self):
        assert self.resolver.resolve(NightContext(werewolf_target="3")) == [("3", WEREWOLF_ATTACK)]

    def test_heal_saves_the_target(self):
        night = NightContext(werewolf_target="3", healed_target="3")
        assert self.resolver.resolve(night) == []

    def test_poison_kills_independently(self):
        night = NightContext(werewolf_target="3", poisoned_target="5")
        assert self.resolver.resolve(night) == [("3", WEREWOLF_ATTACK), ("5", WITCH_POISON)]

    def test_saved_player_can_still_be_poisoned(self):
        night = NightContext(werewolf_target="3", healed_target="3", poisoned_target="3")
        assert self.resolver.resolve(night) == [("3", WITCH_POISON)]
