"""
uttt CLI - Command-line interface for the engine.

Usage:
    uttt replay <replay_file> [--step]   Replay a game and print the board
    uttt show <replay_file>              Print the final board as JSON
"""

import argparse
import json
import logging
import os
import sys

from pydantic import ValidationError

from .engine_core.errors import BoardError
from .replay.schemas import ReplayFile, BoardSnapshot, RESULT_NAMES

# Environment configuration
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

UTTT_LOG_LEVEL = os.getenv("UTTT_LOG_LEVEL", "WARNING").upper()
# Validated with the replay file, not at import
UTTT_BOARD_SIZE = os.getenv("UTTT_BOARD_SIZE", "3")

logger = logging.getLogger(__name__)


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="uttt - Ultimate Tic-Tac-Toe sub-board engine",
        prog="uttt",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=UTTT_LOG_LEVEL if UTTT_LOG_LEVEL in LOG_LEVELS else "WARNING",
        help="Logging level",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Replay command
    replay_parser = subparsers.add_parser("replay", help="Replay a game file")
    replay_parser.add_argument("replay_file", help="Path to JSON replay file")
    replay_parser.add_argument("--step", action="store_true", help="Print every snapshot")

    # Show command
    show_parser = subparsers.add_parser("show", help="Print the final board as JSON")
    show_parser.add_argument("replay_file", help="Path to JSON replay file")

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level)

    if args.command == "replay":
        return cmd_replay(args)
    elif args.command == "show":
        return cmd_show(args)
    else:
        parser.print_help()
        return 1


def load_replay(path: str) -> ReplayFile:
    """Read a replay file. A missing size falls back to UTTT_BOARD_SIZE."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data.setdefault("size", UTTT_BOARD_SIZE)
    return ReplayFile.model_validate(data)


def _build_history(path: str):
    try:
        replay = load_replay(path)
        return replay.to_history()
    except FileNotFoundError:
        print(f"Error: File not found: {path}")
    except OSError as e:
        print(f"Error: Cannot read {path}: {e}")
    except UnicodeDecodeError as e:
        print(f"Error: Replay file is not valid UTF-8: {e}")
    except (json.JSONDecodeError, ValidationError) as e:
        print(f"Error: Invalid replay file: {e}")
    except BoardError as e:
        print(f"Error: {e.error_code.value}: {e}")
    return None


def cmd_replay(args) -> int:
    """Replay a game and print the board."""
    history = _build_history(args.replay_file)
    if history is None:
        return 1

    logger.info("Replayed %d moves from %s", len(history), args.replay_file)

    if args.step:
        for n, record in enumerate(history.records, start=1):
            print(f"Move {n}: player {int(record.player)} at {record.move}")
            print(history.at(n).pretty_print())
            print()
    else:
        print(history.board.pretty_print())

    board = history.board
    if board.is_finished():
        print(f"\nResult: {RESULT_NAMES[board.get_result()]}")
    else:
        print(f"\nIn progress: {board.move_count}/{board.max_moves} moves")
    return 0


def cmd_show(args) -> int:
    """Print the final board as JSON."""
    history = _build_history(args.replay_file)
    if history is None:
        return 1
    print(BoardSnapshot.from_board(history.board).model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
