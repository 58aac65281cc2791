#!/usr/bin/env python
"""Play Werewolf at the console, with any mix of human and AI players.

Usage:
    werewolf-party                          # Watch an all-AI game
    werewolf-party --human 3:Alice          # Take seat 3 as "Alice"
    werewolf-party --players 8 --seed 42    # Reproducible 8-player game
    werewolf-party --offline --reveal       # Canned speech, show night secrets
"""

import argparse
import asyncio
import logging
import sys

# Enable Windows console colors
if sys.platform == "win32":
    import colorama
    colorama.init()

from rich.console import Console
from rich.panel import Panel

from werewolf_party.ai import StubSpeechProvider, create_speech_provider
from werewolf_party.engine import WerewolfGame
from werewolf_party.errors import WerewolfPartyError
from werewolf_party.models import GameConfig, HumanParticipantConfig
from werewolf_party.ui import InteractiveHuman, LogPrinter


def parse_human(value: str) -> HumanParticipantConfig:
    """Parse ``SEAT`` or ``SEAT:NAME`` into a human seat override."""
    seat, _, name = value.partition(":")
    seat = seat.strip()
    if not seat.isdigit() or int(seat) < 1:
        raise argparse.ArgumentTypeError(f"invalid seat {seat!r}; expected a positive number")
    return HumanParticipantConfig(id=seat, display_name=name.strip() or f"Player {seat}")


async def run_game(
    config: GameConfig,
    console: Console,
    offline: bool = False,
    reveal: bool = False,
    log_file: str | None = None,
) -> int:
    """Play one game to the end.

    Returns:
        Process exit code.
    """
    provider = StubSpeechProvider(seed=config.seed) if offline else create_speech_provider()
    game = WerewolfGame(config, speech_provider=provider, on_log=LogPrinter(console, reveal=reveal))
    human = InteractiveHuman(console)

    game.start()
    for player in game.state.players:
        if player.is_human:
            console.print(f"[bold]{player.display_name}[/bold], you are the [bold]{player.role.name.value}[/bold].")

    snapshot = await game.run_until_decision()
    while snapshot.winner is None:
        request = snapshot.pending_request
        if request is None:
            break
        option_id, text = human.answer(request)
        await game.submit_human_action(request.request_id, option_id, text)
        snapshot = await game.run_until_decision()

    roles = "\n".join(
        f"{p.display_name}: {p.role.name.value}{'' if p.is_alive else ' (dead)'}" for p in snapshot.players
    )
    winner = snapshot.winner.value if snapshot.winner else "nobody"
    console.print(Panel(f"[bold]Game Over[/bold]\n\nWinner: {winner}\n\n{roles}", title="Result"))

    if log_file:
        try:
            game.state.log.save_to_file(log_file, include_private=True)
            console.print(f"Game log saved to {log_file}")
        except OSError as e:
            console.print(f"[red]Failed to save log: {e}[/red]")
    return 0


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Werewolf Party - AI and human players in one village",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--players",
        type=int,
        default=6,
        help="Number of players, 6-8 (default: 6)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible games",
    )
    parser.add_argument(
        "--human",
        type=parse_human,
        action="append",
        default=[],
        metavar="SEAT[:NAME]",
        help="Seat a human player; repeat for more humans",
    )
    parser.add_argument(
        "--no-hunter",
        action="store_true",
        help="Deal a Villager instead of the Hunter",
    )
    parser.add_argument(
        "--language",
        choices=["en", "zh-Hant"],
        default="en",
        help="Language for AI speech (default: en)",
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Use canned speech instead of the speech provider",
    )
    parser.add_argument(
        "--reveal",
        action="store_true",
        help="Show private night actions as they happen",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default="",
        help="Save the full game log as YAML to this file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show engine debug logging",
    )

    args = parser.parse_args()

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    console = Console()
    try:
        config = GameConfig(
            total_players=args.players,
            allow_hunter=not args.no_hunter,
            human_players=args.human,
            seed=args.seed,
            language=args.language,
        )
        return asyncio.run(run_game(config, console, args.offline, args.reveal, args.log_file or None))
    except WerewolfPartyError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1


if __name__ == "__main__":
    exit(main())
