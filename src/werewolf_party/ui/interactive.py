"""Interactive console for human players.

Uses rich to stream the game log and to answer pending human requests.
"""

from typing import Optional

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from werewolf_party.engine.requests import HumanActionRequest
from werewolf_party.events import LogEntry, Phase
from werewolf_party.models.player import RoleName

# Short role reminders shown alongside each request
ROLE_REMINDERS = {
    RoleName.WEREWOLF: "You are a WEREWOLF. Work with the pack to eliminate the villagers.",
    RoleName.SEER: "You are the SEER. Check one player each night to learn their alignment.",
    RoleName.WITCH: "You are the WITCH. One healing potion, one poison. Use them wisely.",
    RoleName.HUNTER: "You are the HUNTER. When you die, you can shoot one player.",
    RoleName.VILLAGER: "You are a VILLAGER. Find the werewolves and vote them out.",
}

PHASE_STYLES = {
    Phase.NIGHT: "blue",
    Phase.DAY_DISCUSSION: "yellow",
    Phase.DAY_VOTE: "magenta",
    Phase.GAME_OVER: "bold green",
}


class LogPrinter:
    """Prints log entries as they are appended.

    Pass an instance as the game's ``on_log`` callback.
    """

    def __init__(self, console: Optional[Console] = None, reveal: bool = False):
        """
        Args:
            console: Rich Console instance. Creates one if None.
            reveal: Also print private entries (night secrets).
        """
        self._console = console or Console()
        self._reveal = reveal

    def __call__(self, entry: LogEntry) -> None:
        if entry.is_private and not self._reveal:
            return
        style = PHASE_STYLES.get(entry.phase, "white")
        prefix = "[dim](secret)[/dim] " if entry.is_private else ""
        self._console.print(f"[{style}]Day {entry.day}[/{style}] {prefix}{entry.message}", highlight=False)


class InteractiveHuman:
    """Answers human action requests at the console.

    Usage:
        human = InteractiveHuman(console=console)
        option_id, text = human.answer(request)
        await game.submit_human_action(request.request_id, option_id, text)
    """

    def __init__(self, console: Optional[Console] = None):
        self._console = console or Console()

    def answer(self, request: HumanActionRequest) -> tuple[Optional[str], Optional[str]]:
        """Ask the human for a decision.

        Returns:
            (chosen option id, free text); either may be None.
        """
        reminder = ROLE_REMINDERS.get(request.role, "")
        self._console.print(
            Panel(f"{request.description}\n\n[dim]{reminder}[/dim]", title=request.title, border_style="cyan")
        )

        option_id = self._choose_option(request) if request.options else None
        text = None
        if request.extra_input is not None:
            text = self._ask_text(request.extra_input.placeholder)
        return option_id, text

    def _choose_option(self, request: HumanActionRequest) -> Optional[str]:
        enabled = [option for option in request.options if not option.disabled]
        if not enabled:
            return None

        table = Table(show_header=True)
        table.add_column("#", width=4)
        table.add_column("Choice", justify="left")
        for i, option in enumerate(enabled):
            table.add_row(f"[{i + 1}]", option.label)
        self._console.print(Align(table, align="center"))

        while True:
            try:
                user_input = Prompt.ask(f"Choose (1-{len(enabled)})", console=self._console)
            except (KeyboardInterrupt, EOFError):
                self._console.print("\n[yellow]No choice made.[/yellow]")
                return None

            try:
                idx = int(user_input) - 1
                if idx in range(len(enabled)):
                    return enabled[idx].id
            except ValueError:
                pass

            self._console.print(f"[red]Invalid selection. Enter 1-{len(enabled)}[/red]")

    def _ask_text(self, placeholder: str) -> Optional[str]:
        try:
            return Prompt.ask(placeholder, console=self._console, default="", show_default=False)
        except (KeyboardInterrupt, EOFError):
            self._console.print("\n[yellow]You stay silent.[/yellow]")
            return None
