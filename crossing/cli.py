#!/usr/bin/env python3
"""Crossing CLI - solve the bridge-and-torch puzzle for a group of people.

Usage:
    python -m crossing                      # built-in four people (1, 2, 5, 10)
    python -m crossing people.yaml          # participants from a document
    python -m crossing people.yaml --summary --moves-output /tmp/moves.json
"""

from __future__ import annotations

import argparse
import logging

from pydantic import ValidationError

from crossing.config import DocumentError, default_participants, load_participants
from crossing.errors import ContractViolation
from crossing.logging_config import configure_logging, get_logger, level_from_name
from crossing.rendering import render_crossings, render_log
from crossing.settings import get_settings
from crossing.solver import GreedyStrategy, MoveLogger, summarize_crossings
from crossing.state import CrossingState

logger = get_logger(__name__)


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Find a fast way to get everyone across the bridge at night")

    parser.add_argument(
        "path",
        nargs="?",
        help="YAML document with a 'people' list of name/time entries (default: built-in set)",
    )

    parser.add_argument("--summary", action="store_true", help="Also print one line per bridge trip")

    parser.add_argument("--moves-output", type=str, help="Write the JSON move log to this file")

    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    return parser.parse_args(args)


def main(argv: list[str] | None = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging("crossing", debug=args.debug)
        logger.error(f"Invalid CROSSING_* settings: {e}")
        return 1

    log_level = logging.DEBUG if args.debug else level_from_name(settings.log_level)
    configure_logging("crossing", log_level)

    path = args.path or settings.input_path
    moves_output = args.moves_output or settings.moves_output
    move_logger = MoveLogger(debug_mode=args.debug)

    try:
        if path:
            participants = load_participants(path).participants
        else:
            logger.info("No participant document given; using the built-in set")
            participants = default_participants()

        log = GreedyStrategy(move_logger=move_logger).solve(CrossingState.from_participants(participants))
    except DocumentError as e:
        logger.error(f"Cannot load participants: {e}")
        return 1
    except ContractViolation as e:
        logger.error(f"Crossing aborted: {e}")
        return 1

    print(render_log(log))

    if args.summary:
        print()
        print(render_crossings(summarize_crossings(log)))

    if moves_output:
        try:
            move_logger.save_to_file(moves_output)
        except OSError as e:
            logger.error(f"Cannot save move log to {moves_output}: {e}")
            return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
