"""Command-line entry point for playing a scenario in the terminal."""

import argparse
import sys
from typing import Optional, Sequence

from .core.data import PlayerKind
from .game.players import create_player
from .game.scenarios import ScenarioLoader

DEFAULT_SCENARIO = "assets/scenarios/border_skirmish.yaml"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play a Skirmish scenario in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  skirmish                                        # Default scenario, seats as declared
  skirmish assets/scenarios/duel.yaml             # Another scenario
  skirmish --seat console --seat aggressive       # Override who sits in each seat
  skirmish --save-log                             # Write the game log to logs/
        """
    )
    parser.add_argument(
        "scenario",
        nargs="?",
        default=DEFAULT_SCENARIO,
        help="Path to a scenario YAML file"
    )
    parser.add_argument(
        "--seat",
        action="append",
        choices=[kind.value for kind in PlayerKind],
        help="Player kind for each seat, in scenario order"
    )
    parser.add_argument(
        "--turn-limit",
        type=int,
        help="Override the scenario's rounds per level"
    )
    parser.add_argument(
        "--save-log",
        action="store_true",
        help="Save the game log to a file when the game ends"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        scenario = ScenarioLoader.load_from_file(args.scenario)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.turn_limit is not None:
        if args.turn_limit < 1:
            print(f"Error: --turn-limit must be a positive integer, got {args.turn_limit}", file=sys.stderr)
            return 2
        scenario.settings.turn_limit = args.turn_limit

    players = None
    if args.seat:
        if len(args.seat) != len(scenario.players):
            print(
                f"Error: {scenario.name} has {len(scenario.players)} seats, got {len(args.seat)}",
                file=sys.stderr,
            )
            return 2
        players = [
            create_player(PlayerKind(kind), data.name)
            for kind, data in zip(args.seat, scenario.players)
        ]

    game = scenario.build_game(players)
    try:
        game.run()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted")
        return 130
    finally:
        if args.save_log:
            path = game.log_manager.save_log_to_file()
            print(f"Log saved to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
