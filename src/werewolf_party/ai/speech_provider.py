"""Speech providers: the engine's only network boundary.

The engine depends on ``SpeechProvider.generate_speech`` alone. Providers
raise on failure; the engine substitutes a canned line at the call site.
"""

import logging
from typing import Optional, Protocol

import httpx

from werewolf_party.errors import SpeechProviderError

from .config import SpeechProviderConfig
from .context import SpeechContext
from .prompts import build_speech_prompt, get_system_prompt
from .stub_ai import StubSpeechProvider

logger = logging.getLogger(__name__)

VOTE_TEMPERATURE = 0.6
DISCUSSION_TEMPERATURE = 0.85


class SpeechProvider(Protocol):
    """Anything that can turn a speech context into in-character text."""

    async def generate_speech(self, context: SpeechContext) -> str:
        """Return non-empty speech text, or raise."""
        ...


def truncate(text: str, max_chars: int) -> str:
    if len(text) <= max_chars:
        return text
    return text[: max_chars - 1] + "…"


class HttpSpeechProvider:
    """Calls an OpenAI-compatible chat completions endpoint with httpx.

    Args:
        config: Endpoint, credentials and limits.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in
            tests.
    """

    def __init__(
        self,
        config: Optional[SpeechProviderConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._config = config or SpeechProviderConfig.from_env()
        self._transport = transport

    @property
    def config(self) -> SpeechProviderConfig:
        return self._config

    def build_request_body(self, context: SpeechContext) -> dict:
        """Build the JSON body for one completion request."""
        return {
            "model": self._config.model,
            "temperature": VOTE_TEMPERATURE if context.topic == "vote" else DISCUSSION_TEMPERATURE,
            "max_tokens": self._config.max_tokens,
            "messages": [
                {"role": "system", "content": get_system_prompt(context.language)},
                {"role": "user", "content": build_speech_prompt(context)},
            ],
        }

    async def generate_speech(self, context: SpeechContext) -> str:
        """Request one speech from the provider.

        Raises:
            SpeechProviderError: Missing credentials, transport failure, error
                status, malformed payload or empty completion.
        """
        cfg = self._config
        if not cfg.api_key:
            raise SpeechProviderError("No API key configured for the speech provider")

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {cfg.api_key}",
        }
        body = self.build_request_body(context)

        logger.debug("Requesting %s speech for %s from %s", context.topic, context.speaker_name, cfg.model)
        try:
            async with httpx.AsyncClient(timeout=cfg.timeout_sec, transport=self._transport) as client:
                resp = await client.post(cfg.completions_url, headers=headers, json=body)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as exc:
            raise SpeechProviderError(
                f"Speech provider returned {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise SpeechProviderError(f"Speech provider request failed: {exc}") from exc
        except ValueError as exc:
            raise SpeechProviderError("Speech provider returned invalid JSON") from exc

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise SpeechProviderError("Speech provider response has no message content") from exc

        text = (content or "").strip() if isinstance(content, str) else ""
        if not text:
            raise SpeechProviderError("Speech provider returned empty text")
        return truncate(text, cfg.max_chars)


def create_speech_provider(config: Optional[SpeechProviderConfig] = None) -> SpeechProvider:
    """Pick a provider: HTTP when an API key is configured, offline otherwise."""
    config = config or SpeechProviderConfig.from_env()
    if config.api_key:
        return HttpSpeechProvider(config)
    logger.info("No speech provider API key set; AI players will use canned speech")
    return StubSpeechProvider()
