"""Tests for the console front end."""

import io

import pytest
from rich.console import Console

from werewolf_party.engine.requests import (
    HumanActionOption,
    HumanActionRequest,
    HumanActionType,
    TextInputSpec,
)
from werewolf_party.events import LogEntry, LogTag, Phase
from werewolf_party.models import RoleName
from werewolf_party.ui import InteractiveHuman, LogPrinter
from werewolf_party.ui import interactive


def make_console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False, width=120)


def make_request(**kwargs) -> HumanActionRequest:
    defaults = dict(
        request_id="req-1",
        player_id="1",
        role=RoleName.VILLAGER,
        type=HumanActionType.DAY_VOTE,
        title="Cast your vote",
        description="Choose who to banish.",
        options=[
            HumanActionOption(id="2", label="Alice"),
            HumanActionOption(id="3", label="Bob", disabled=True),
            HumanActionOption(id="4", label="Cara"),
        ],
    )
    defaults.update(kwargs)
    return HumanActionRequest(**defaults)


class TestLogPrinter:
    def test_hides_private_entries(self):
        console = make_console()
        printer = LogPrinter(console)
        printer(LogEntry(id="log-1", day=1, phase=Phase.NIGHT, message="Public news"))
        printer(LogEntry(id="log-2", day=1, phase=Phase.NIGHT, message="Secret", tags=[LogTag.PRIVATE]))
        output = console.file.getvalue()
        assert "Public news" in output
        assert "Secret" not in output

    def test_reveal_shows_private_entries(self):
        console = make_console()
        LogPrinter(console, reveal=True)(
            LogEntry(id="log-2", day=1, phase=Phase.NIGHT, message="Secret", tags=[LogTag.PRIVATE])
        )
        assert "Secret" in console.file.getvalue()


class TestInteractiveHuman:
    def test_choice_skips_disabled_options(self, monkeypatch):
        answers = iter(["9", "2"])
        monkeypatch.setattr(interactive.Prompt, "ask", lambda *args, **kwargs: next(answers))
        option_id, text = InteractiveHuman(make_console()).answer(make_request())
        assert option_id == "4"
        assert text is None

    def test_free_text(self, monkeypatch):
        monkeypatch.setattr(interactive.Prompt, "ask", lambda *args, **kwargs: "I suspect Bob.")
        request = make_request(
            type=HumanActionType.DAY_SPEECH,
            options=[],
            extra_input=TextInputSpec(placeholder="Say something", multiline=True),
        )
        option_id, text = InteractiveHuman(make_console()).answer(request)
        assert option_id is None
        assert text == "I suspect Bob."

    def test_interrupt_means_no_choice(self, monkeypatch):
        def interrupted(*args, **kwargs):
            raise EOFError

        monkeypatch.setattr(interactive.Prompt, "ask", interrupted)
        option_id, _ = InteractiveHuman(make_console()).answer(make_request())
        assert option_id is None
