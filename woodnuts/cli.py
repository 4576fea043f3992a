"""
Wood Nuts CLI - Command-line interface for the engine.

Usage:
    woodnuts show [--puzzle ID]            Print the board and planks
    woodnuts validate [--puzzle ID]        Validate a puzzle definition
    woodnuts play [--puzzle ID]            Play in the terminal
    woodnuts serve [--host H] [--port P]   Run the REST API
"""

import argparse
import logging
import sys

from .config import LOG_LEVEL
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Wood Nuts - Bolt-and-plank puzzle engine",
        prog="woodnuts",
    )
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level (default from WOODNUTS_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    show_parser = subparsers.add_parser("show", help="Print the board and planks")
    show_parser.add_argument("--puzzle", default="wood_nuts", help="Puzzle ID")

    validate_parser = subparsers.add_parser("validate", help="Validate a puzzle definition")
    validate_parser.add_argument("--puzzle", default="wood_nuts", help="Puzzle ID")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--puzzle", default="wood_nuts", help="Puzzle ID")

    serve_parser = subparsers.add_parser("serve", help="Run the REST API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if args.command == "show":
        cmd_show(args)
    elif args.command == "validate":
        cmd_validate(args)
    elif args.command == "play":
        cmd_play(args)
    elif args.command == "serve":
        cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def _load_puzzle(puzzle_id):
    from .games import get_puzzle

    try:
        return get_puzzle(puzzle_id)
    except KeyError as e:
        print(f"Error: {e.args[0]}")
        sys.exit(1)


def cmd_show(args):
    """Print the board and plank table."""
    from .engine_core import PuzzleState, build_board_view, render_text

    spec = _load_puzzle(args.puzzle)
    print(render_text(build_board_view(spec, PuzzleState.initial(spec))))
    print()
    for plank in spec.planks:
        print(f"  {plank.id:<4} level {plank.level}  {plank.color:<6} {' '.join(plank.bolts)}")


def cmd_validate(args):
    """Validate a puzzle definition."""
    from .puzzle_schema import validate_puzzle

    spec = _load_puzzle(args.puzzle)
    print(f"Validating: {spec.puzzle_id}")
    result = validate_puzzle(spec)

    if result.warnings:
        print("\nWarnings:")
        for w in result.warnings:
            print(f"  - {w}")

    if result.errors:
        print("\nErrors:")
        for e in result.errors:
            print(f"  - {e}")
        sys.exit(1)

    print("OK")


def cmd_play(args, input_fn=input):
    """Interactive play: type a bolt ID to remove it, 'reset', or 'quit'."""
    from .engine_core import render_text
    from .session import Session

    spec = _load_puzzle(args.puzzle)
    session = Session.start(spec)

    print(render_text(session.board()))
    while True:
        try:
            command = input_fn("> ").strip()
        except EOFError:
            break

        if not command:
            continue
        if command in {"quit", "exit", "q"}:
            break

        if command == "reset":
            session.reset()
        elif session.remove_bolt(command):
            print(session.log[-1])
        else:
            blockers = session.blocking_planks(command)
            if blockers:
                print(f"Cannot remove {command}: held by {', '.join(p.id for p in blockers)}")
            else:
                print(f"Cannot remove {command}")
            continue

        print(render_text(session.board()))

    if session.log:
        print("\nSteps:")
        for step in session.log:
            print(f"  - {step}")


def cmd_serve(args):
    """Run the REST API with uvicorn."""
    import uvicorn
    from .api import create_app

    logger.info("Serving on %s:%d", args.host, args.port)
    uvicorn.run(create_app(), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
