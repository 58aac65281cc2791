"""Phase handlers for the Werewolf party game."""

from .base import BaseHandler, SpeakingHandler, SpeechFn, StepKind, StepResult
from .discussion_handler import DiscussionHandler
from .hunter_handler import HunterHandler
from .night_resolution_handler import NightResolutionHandler
from .seer_handler import SeerHandler
from .voting_handler import VotingHandler
from .werewolf_handler import WerewolfHandler
from .witch_handler import WitchHandler

__all__ = [
    "BaseHandler",
    "SpeakingHandler",
    "SpeechFn",
    "StepKind",
    "StepResult",
    "DiscussionHandler",
    "HunterHandler",
    "NightResolutionHandler",
    "SeerHandler",
    "VotingHandler",
    "WerewolfHandler",
    "WitchHandler",
]
