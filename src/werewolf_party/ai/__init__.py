"""AI-side collaborators: speech generation and vote policy."""

from werewolf_party.ai.context import AlivePlayerView, SpeechContext, SpeechTopic
from werewolf_party.ai.config import SpeechProviderConfig
from werewolf_party.ai.fallback import FALLBACK_LINES, fallback_speech
from werewolf_party.ai.prompts import build_speech_prompt, get_system_prompt
from werewolf_party.ai.speech_provider import (
    SpeechProvider,
    HttpSpeechProvider,
    create_speech_provider,
    truncate,
)
from werewolf_party.ai.stub_ai import StubSpeechProvider
from werewolf_party.ai.vote_policy import choose_vote_target

__all__ = [
    "AlivePlayerView",
    "SpeechContext",
    "SpeechTopic",
    "SpeechProviderConfig",
    "FALLBACK_LINES",
    "fallback_speech",
    "build_speech_prompt",
    "get_system_prompt",
    "SpeechProvider",
    "HttpSpeechProvider",
    "create_speech_provider",
    "truncate",
    "StubSpeechProvider",
    "choose_vote_target",
]
