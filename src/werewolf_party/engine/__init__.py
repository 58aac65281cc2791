"""Engine package - game orchestration components."""

from .contexts import (
    DiscussionContext,
    HunterPendingContext,
    NightContext,
    NightStep,
    VoteContext,
)
from .victory import count_living, evaluate_winner
from .game_state import GameState
from .requests import (
    SKIP_OPTION_ID,
    HumanActionBroker,
    HumanActionOption,
    HumanActionRequest,
    HumanActionSubmission,
    HumanActionType,
    TextInputSpec,
)
from .snapshot import EngineSnapshot
from .roster import build_roster
from .night_action_resolver import NightActionResolver
from .night_scheduler import NightScheduler
from .day_scheduler import DayScheduler
from .werewolf_game import WerewolfGame

__all__ = [
    "DiscussionContext",
    "HunterPendingContext",
    "NightContext",
    "NightStep",
    "VoteContext",
    "count_living",
    "evaluate_winner",
    "GameState",
    "SKIP_OPTION_ID",
    "HumanActionBroker",
    "HumanActionOption",
    "HumanActionRequest",
    "HumanActionSubmission",
    "HumanActionType",
    "TextInputSpec",
    "EngineSnapshot",
    "build_roster",
    "NightActionResolver",
    "NightScheduler",
    "DayScheduler",
    "WerewolfGame",
]
