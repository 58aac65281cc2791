"""Tests for speech prompts, canned fallback lines and the stub provider."""

import random

import pytest

from werewolf_party.ai import (
    FALLBACK_LINES,
    AlivePlayerView,
    SpeechContext,
    StubSpeechProvider,
    build_speech_prompt,
    fallback_speech,
    get_system_prompt,
)
from werewolf_party.events import LogEntry, Phase
from werewolf_party.models import Alignment, RoleName


def make_context(topic: str = "discussion", language: str = "en", **kwargs) -> SpeechContext:
    return SpeechContext(
        day=1,
        phase=Phase.DAY_VOTE if topic == "vote" else Phase.DAY_DISCUSSION,
        topic=topic,
        speaker_id="2",
        speaker_name="AI Player 2",
        speaker_role=RoleName.WEREWOLF,
        speaker_alignment=Alignment.WEREWOLF,
        alive_players=[
            AlivePlayerView(id="2", name="AI Player 2", alignment=Alignment.WEREWOLF),
            AlivePlayerView(id="3", name="Bob", is_human=True),
        ],
        language=language,
        **kwargs,
    )


class TestPrompts:
    def test_discussion_prompt(self):
        logs = [LogEntry(id="log-1", day=1, phase=Phase.NIGHT, message="☠️ Player 5 was eliminated.")]
        prompt = build_speech_prompt(make_context(recent_logs=logs))
        assert "AI Player 2" in prompt
        assert "Werewolf (Werewolf)" in prompt
        assert "Bob (human)" in prompt
        assert "daytime discussion" in prompt
        assert "Player 5 was eliminated" in prompt

    def test_vote_prompt_names_the_target(self):
        prompt = build_speech_prompt(make_context("vote", suggested_target_id="3"))
        assert "You plan to vote for Bob" in prompt
        assert "daytime voting" in prompt

    def test_no_events(self):
        assert "No significant events yet." in build_speech_prompt(make_context())

    def test_traditional_chinese(self):
        prompt = build_speech_prompt(make_context("vote", language="zh-Hant", suggested_target_id="3"))
        assert "Traditional Chinese" in prompt
        assert "你計畫投給 Bob" in prompt

    def test_system_prompt_falls_back_to_english(self):
        assert get_system_prompt("fr") == get_system_prompt("en")


class TestFallback:
    @pytest.mark.parametrize("role", list(RoleName))
    def test_every_role_has_lines(self, role):
        for language in ("en", "zh-Hant"):
            assert fallback_speech(role, language, random.Random(0)) in FALLBACK_LINES[language][role]


class TestStubSpeechProvider:
    @pytest.mark.asyncio
    async def test_discussion_line(self):
        stub = StubSpeechProvider()
        text = await stub.generate_speech(make_context())
        assert text in FALLBACK_LINES["en"][RoleName.WEREWOLF]
        assert len(stub.calls) == 1

    @pytest.mark.asyncio
    async def test_vote_names_the_target(self):
        text = await StubSpeechProvider().generate_speech(make_context("vote", suggested_target_id="3"))
        assert text.startswith("I'm voting for Bob.")
