"""Stub speech provider for tests and offline play.

Generates speech without calling an LLM. Useful for:
- Integration tests (full game flow without network calls)
- Playing offline
"""

import random
from typing import Optional

from .context import SpeechContext
from .fallback import fallback_speech


class StubSpeechProvider:
    """Answers every speech request with a canned line for the speaker's role.

    Vote requests name the suggested target so the log still reads naturally.
    """

    def __init__(self, seed: Optional[int] = 0):
        self._rng = random.Random(seed)
        self.calls: list[SpeechContext] = []

    async def generate_speech(self, context: SpeechContext) -> str:
        self.calls.append(context)
        line = fallback_speech(context.speaker_role, context.language, self._rng)
        if context.topic == "vote":
            target = context.name_of(context.suggested_target_id)
            if target:
                if context.language == "zh-Hant":
                    return f"我投給 {target}。{line}"
                return f"I'm voting for {target}. {line}"
        return line
