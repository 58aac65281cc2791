"""Speech provider configuration, read from the environment."""

import os
from typing import Optional

from pydantic import BaseModel

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TIMEOUT_SEC = 20.0


class SpeechProviderConfig(BaseModel):
    """Connection settings for an OpenAI-compatible chat completions API."""

    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    timeout_sec: float = DEFAULT_TIMEOUT_SEC
    max_tokens: int = 160
    max_chars: int = 220

    @property
    def completions_url(self) -> str:
        return self.base_url.rstrip("/") + "/chat/completions"

    @classmethod
    def from_env(cls) -> "SpeechProviderConfig":
        """Build the config from environment variables.

        Reads ``OPENAI_API_KEY``, ``OPENAI_BASE_URL``, ``OPENAI_MODEL`` and
        ``WEREWOLF_SPEECH_TIMEOUT``; unset values keep their defaults.
        """
        return cls(
            api_key=os.getenv("OPENAI_API_KEY") or None,
            base_url=os.getenv("OPENAI_BASE_URL") or DEFAULT_BASE_URL,
            model=os.getenv("OPENAI_MODEL") or DEFAULT_MODEL,
            timeout_sec=float(os.getenv("WEREWOLF_SPEECH_TIMEOUT") or DEFAULT_TIMEOUT_SEC),
        )
