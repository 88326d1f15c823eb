"""Unified Testing CLI for American Format.

This module provides an interactive command-line interface for generating,
validating and benchmarking American format schedules during development.
"""

# American Format
# Copyright (C) 2025  American Format developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import json
import shlex
import subprocess
import sys
import time
from pathlib import Path
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from americanformat.constants import PAIRING_SYSTEMS
from americanformat.exceptions import AmericanFormatException
from americanformat.models.tournament import rounds_from_dicts
from americanformat.testing.rtg import (
    RandomTournamentGenerator,
    ResultPattern,
    RTGConfig,
)
from americanformat.tournament import (
    generate_tournament_leaderboard,
    validate_leaderboard_integrity,
)
from americanformat.utils import enable_console_logging, setup_logger
from americanformat.validation import validate_american_format_schedule

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Command definitions with their options
COMMANDS = {
    "generate": {
        "description": "Generate and play a random tournament (RTG)",
        "options": {
            "--players": "Number of players (default: 8)",
            "--courts": "Number of courts (default: players / 4)",
            "--points": "Points per match (default: 16)",
            "--pattern": "Score pattern (balanced/random/blowout)",
            "--completion": "Share of matches to score, 0-1 (default: 1)",
            "--pairing-system": "Pairing system (auto/circle/greedy)",
            "--seed": "Random seed for reproducibility",
            "--output": "Write the tournament as JSON to this file",
        },
    },
    "validate": {
        "description": "Validate a schedule stored as JSON",
        "options": {
            "--file": "JSON file with a 'rounds' list",
            "--detailed": "Show the leaderboard as well",
        },
    },
    "benchmark": {
        "description": "Time schedule generation",
        "options": {
            "--players": "Number of players (default: 16)",
            "--iterations": "Number of iterations (default: 10)",
            "--pairing-system": "Pairing system (auto/circle/greedy)",
        },
    },
    "unit": {
        "description": "Run unit tests (pytest)",
        "options": {
            "--module": "Specific test module, e.g. leaderboard",
            "--verbose": "Verbose output",
        },
    },
    "help": {
        "description": "Show help for specific command",
        "options": {"<command>": "Command name to get help for"},
    },
    "exit": {"description": "Exit the interactive mode", "options": {}},
}


def print_banner():
    """Print the application banner."""
    print(
        f"\n{Colors.OKBLUE}{Colors.BOLD}AMERICAN FORMAT - TEST CLI{Colors.ENDC}\n\n"
        f"Type {Colors.BOLD}/help{Colors.ENDC} to see all available commands\n"
        f"Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} "
        "to leave interactive mode\n"
    )


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:15}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str):
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")
    if cmd_info["options"]:
        print(f"{Colors.BOLD}Options:{Colors.ENDC}")
        for option, description in cmd_info["options"].items():
            print(f"  {Colors.OKCYAN}{option:20}{Colors.ENDC} {description}")
    print()


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for interactive mode."""
    completions = {}
    for cmd, info in COMMANDS.items():
        options_completer = (
            WordCompleter(list(info["options"].keys())) if info["options"] else None
        )
        completions[cmd] = options_completer
        completions[f"/{cmd}"] = options_completer
    completions["/help"] = None
    completions["/list"] = None
    return NestedCompleter.from_nested_dict(completions)


def _print_validation(validation) -> None:
    if validation.is_valid:
        print(f"  {Colors.OKGREEN}Schedule valid{Colors.ENDC}")
    for error in validation.errors:
        print(f"  {Colors.FAIL}Error: {error}{Colors.ENDC}")
    for warning in validation.warnings:
        print(f"  {Colors.WARNING}Warning: {warning}{Colors.ENDC}")


def _print_leaderboard(leaderboard) -> None:
    print(f"\n{Colors.BOLD}Leaderboard:{Colors.ENDC}")
    for entry in leaderboard.players:
        print(
            f"  {entry.rank:>2}. {entry.player:20} {entry.total_points:>4} pts "
            f"{entry.matches_played:>2} played {entry.win_percentage:5.1f}% wins"
        )


def run_generate_command(args: argparse.Namespace) -> int:
    """Run the generate (RTG) command."""
    print(f"\n{Colors.BOLD}Generating tournament...{Colors.ENDC}")

    config = RTGConfig(
        num_players=args.players,
        num_courts=args.courts,
        points_per_match=args.points,
        completion_rate=args.completion,
        result_pattern=ResultPattern[args.pattern.upper()],
        pairing_system=args.pairing_system,
        seed=args.seed,
    )
    rtg = RandomTournamentGenerator(config)
    tournament_data = rtg.generate_complete_tournament()

    if args.output:
        output_path = Path(args.output)
        output_path.write_text(rtg.export_json_format(tournament_data), encoding="utf-8")
        print(f"{Colors.OKGREEN}Tournament saved to: {output_path}{Colors.ENDC}")

    progress = tournament_data["progress"]
    print(f"\n{Colors.BOLD}Tournament Generated:{Colors.ENDC}")
    print(f"  Players: {len(tournament_data['players'])}")
    print(f"  Rounds: {len(tournament_data['rounds'])}")
    print(
        f"  Matches: {progress.completed_matches}/{progress.total_matches} "
        f"({progress.progress_percentage:.0f}%), "
        f"{progress.estimated_time_remaining} min remaining"
    )
    _print_validation(tournament_data["validation"])
    _print_leaderboard(tournament_data["leaderboard"])
    return 0 if tournament_data["validation"].is_valid else 1


def run_validate_command(args: argparse.Namespace) -> int:
    """Run the validation command."""
    if not args.file:
        print(f"{Colors.FAIL}Error: --file required{Colors.ENDC}")
        return 1

    file_path = Path(args.file)
    if not file_path.exists():
        print(f"{Colors.FAIL}Error: File not found: {file_path}{Colors.ENDC}")
        return 1

    print(f"\n{Colors.BOLD}Validating schedule: {file_path}{Colors.ENDC}")
    with open(file_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    try:
        rounds = rounds_from_dicts(data.get("rounds", []))
    except AmericanFormatException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return 1

    validation = validate_american_format_schedule(rounds, data.get("players"))
    _print_validation(validation)

    if args.detailed:
        leaderboard = generate_tournament_leaderboard(rounds)
        _print_leaderboard(leaderboard)
        if not validate_leaderboard_integrity(leaderboard, rounds):
            print(f"{Colors.FAIL}Leaderboard integrity check failed{Colors.ENDC}")
            return 1

    return 0 if validation.is_valid else 1


def run_benchmark_command(args: argparse.Namespace) -> int:
    """Run performance benchmarks."""
    print(f"\n{Colors.BOLD}Running performance benchmark...{Colors.ENDC}")
    print(f"Tournament size: {args.players} players")
    print(f"Iterations: {args.iterations}\n")

    times = []
    for i in range(args.iterations):
        config = RTGConfig(
            num_players=args.players,
            pairing_system=args.pairing_system,
            seed=42 + i,
        )
        rtg = RandomTournamentGenerator(config)
        start = time.perf_counter()
        rtg.generate_complete_tournament()
        elapsed = time.perf_counter() - start
        times.append(elapsed)
        print(f"  Iteration {i+1}/{args.iterations}: {elapsed*1000:.2f}ms")

    print(f"\n{Colors.BOLD}Results:{Colors.ENDC}")
    print(f"  Average: {sum(times) / len(times) * 1000:.2f}ms")
    print(f"  Min: {min(times) * 1000:.2f}ms")
    print(f"  Max: {max(times) * 1000:.2f}ms")
    return 0


def run_unit_command(args: argparse.Namespace) -> int:
    """Run unit tests using pytest."""
    print(f"\n{Colors.BOLD}Running unit tests...{Colors.ENDC}")
    pytest_args = [sys.executable, "-m", "pytest"]
    if args.module:
        pytest_args.append(f"tests/test_{args.module}.py")
    else:
        pytest_args.append("tests/")
    if args.verbose:
        pytest_args.append("-v")
    return subprocess.run(pytest_args).returncode


def build_parser() -> argparse.ArgumentParser:
    """Argument parser shared by one-shot and interactive mode."""
    parser = argparse.ArgumentParser(
        prog="american-test", description="American Format testing CLI"
    )
    parser.add_argument("--debug", action="store_true", help="Log debug output")
    sub = parser.add_subparsers(dest="command")

    gen = sub.add_parser("generate", help=COMMANDS["generate"]["description"])
    gen.add_argument("--players", type=int, default=8)
    gen.add_argument("--courts", type=int, default=None)
    gen.add_argument("--points", type=int, default=16)
    gen.add_argument(
        "--pattern", choices=[p.value for p in ResultPattern], default="balanced"
    )
    gen.add_argument("--completion", type=float, default=1.0)
    gen.add_argument("--pairing-system", choices=PAIRING_SYSTEMS, default="auto")
    gen.add_argument("--seed", type=int, default=None)
    gen.add_argument("--output", default=None)
    gen.set_defaults(handler=run_generate_command)

    val = sub.add_parser("validate", help=COMMANDS["validate"]["description"])
    val.add_argument("--file", default=None)
    val.add_argument("--detailed", action="store_true")
    val.set_defaults(handler=run_validate_command)

    bench = sub.add_parser("benchmark", help=COMMANDS["benchmark"]["description"])
    bench.add_argument("--players", type=int, default=16)
    bench.add_argument("--iterations", type=int, default=10)
    bench.add_argument("--pairing-system", choices=PAIRING_SYSTEMS, default="auto")
    bench.set_defaults(handler=run_benchmark_command)

    unit = sub.add_parser("unit", help=COMMANDS["unit"]["description"])
    unit.add_argument("--module", default=None)
    unit.add_argument("--verbose", action="store_true")
    unit.set_defaults(handler=run_unit_command)

    return parser


def execute(parser: argparse.ArgumentParser, argv: List[str]) -> int:
    """Parse ``argv`` and run the selected command."""
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse already printed its message
        return int(e.code or 0)
    if args.debug:
        enable_console_logging()
    if not getattr(args, "handler", None):
        print_commands_list()
        return 0
    return args.handler(args)


def run_interactive_mode(parser: argparse.ArgumentParser) -> int:
    """Run in interactive mode with autocomplete."""
    print_banner()
    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=Style.from_dict({"prompt": "#00aa00 bold"}),
    )

    while True:
        try:
            user_input = session.prompt("american-test> ").strip()
        except (KeyboardInterrupt, EOFError):
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            return 0

        if not user_input:
            continue
        if user_input in ["exit", "quit", "q", "/exit"]:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            return 0
        if user_input in ["/help", "help", "?", "/list"]:
            print_commands_list()
            continue
        if user_input.startswith("/help ") or user_input.startswith("help "):
            print_command_help(user_input.split()[1].lstrip("/"))
            continue

        parts = shlex.split(user_input)
        parts[0] = parts[0].lstrip("/")
        try:
            execute(parser, parts)
        except (AmericanFormatException, OSError, ValueError) as e:
            logger.warning("Command failed: %s", e)
            print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point: interactive without arguments, one-shot otherwise."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    if not argv:
        return run_interactive_mode(parser)
    return execute(parser, argv)


if __name__ == "__main__":
    sys.exit(main())
