"""Tests for the HTTP speech provider, using httpx.MockTransport."""

import json

import httpx
import pytest

from werewolf_party.ai import (
    AlivePlayerView,
    HttpSpeechProvider,
    SpeechContext,
    SpeechProviderConfig,
    StubSpeechProvider,
    create_speech_provider,
    truncate,
)
from werewolf_party.errors import SpeechProviderError
from werewolf_party.events import Phase
from werewolf_party.models import Alignment, RoleName


# ============================================================================
# Helper functions
# ============================================================================


def make_context(topic: str = "discussion", suggested_target_id=None) -> SpeechContext:
    return SpeechContext(
        day=2,
        phase=Phase.DAY_VOTE if topic == "vote" else Phase.DAY_DISCUSSION,
        topic=topic,
        speaker_id="1",
        speaker_name="AI Player 1",
        speaker_role=RoleName.SEER,
        speaker_alignment=Alignment.GOOD,
        alive_players=[
            AlivePlayerView(id="1", name="AI Player 1", alignment=Alignment.GOOD),
            AlivePlayerView(id="2", name="Alice", is_human=True),
        ],
        suggested_target_id=suggested_target_id,
    )


def make_provider(handler, **config) -> HttpSpeechProvider:
    config.setdefault("api_key", "test-key")
    return HttpSpeechProvider(SpeechProviderConfig(**config), transport=httpx.MockTransport(handler))


def completion(content) -> httpx.Response:
    return httpx.Response(200, json={"choices": [{"message": {"role": "assistant", "content": content}}]})


# ============================================================================
# Tests
# ============================================================================


class TestHttpSpeechProvider:
    @pytest.mark.asyncio
    async def test_success(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return completion("  I trust Alice, for now.  ")

        provider = make_provider(handler, base_url="https://llm.example/v1/")
        text = await provider.generate_speech(make_context())

        assert text == "I trust Alice, for now."
        request = seen[0]
        assert str(request.url) == "https://llm.example/v1/chat/completions"
        assert request.headers["Authorization"] == "Bearer test-key"
        body = json.loads(request.content)
        assert body["model"] == "gpt-4o-mini"
        assert body["temperature"] == 0.85
        assert [m["role"] for m in body["messages"]] == ["system", "user"]

    def test_vote_uses_lower_temperature(self):
        provider = HttpSpeechProvider(SpeechProviderConfig(api_key="k"))
        body = provider.build_request_body(make_context("vote", "2"))
        assert body["temperature"] == 0.6
        assert "Alice" in body["messages"][1]["content"]

    @pytest.mark.asyncio
    async def test_long_text_is_truncated(self):
        provider = make_provider(lambda request: completion("x" * 500), max_chars=50)
        text = await provider.generate_speech(make_context())
        assert len(text) == 50
        assert text.endswith("…")

    @pytest.mark.asyncio
    async def test_error_status(self):
        provider = make_provider(lambda request: httpx.Response(503, text="overloaded"))
        with pytest.raises(SpeechProviderError) as exc_info:
            await provider.generate_speech(make_context())
        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_transport_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(SpeechProviderError):
            await make_provider(handler).generate_speech(make_context())

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, text="not json"),
            httpx.Response(200, json={"choices": []}),
            httpx.Response(200, json={"unexpected": True}),
            completion(None),
            completion("   "),
        ],
    )
    async def test_unusable_responses(self, response):
        with pytest.raises(SpeechProviderError):
            await make_provider(lambda request: response).generate_speech(make_context())

    @pytest.mark.asyncio
    async def test_missing_api_key(self):
        provider = HttpSpeechProvider(SpeechProviderConfig(api_key=None))
        with pytest.raises(SpeechProviderError):
            await provider.generate_speech(make_context())


class TestProviderConfig:
    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "abc")
        monkeypatch.setenv("OPENAI_BASE_URL", "http://localhost:8000/v1")
        monkeypatch.setenv("OPENAI_MODEL", "local-model")
        monkeypatch.setenv("WEREWOLF_SPEECH_TIMEOUT", "5")
        config = SpeechProviderConfig.from_env()
        assert config.api_key == "abc"
        assert config.completions_url == "http://localhost:8000/v1/chat/completions"
        assert config.model == "local-model"
        assert config.timeout_sec == 5.0

    def test_create_provider(self, monkeypatch):
        assert isinstance(create_speech_provider(SpeechProviderConfig(api_key="abc")), HttpSpeechProvider)
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        assert isinstance(create_speech_provider(), StubSpeechProvider)

    def test_truncate(self):
        assert truncate("short", 10) == "short"
        assert truncate("abcdefghij", 5) == "abcd…"
