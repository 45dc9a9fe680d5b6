#!/usr/bin/env python3
"""
Mars Robots - Main Entry Point

Usage:
    python main.py mission.txt        # Read mission from a file
    python main.py < mission.txt      # Read mission from stdin
    python main.py mission.txt --stats
"""

import argparse
import logging
import sys

from config import DEFAULT_LOG_LEVEL, LOG_FORMAT
from input_parser import InputError, parse_input
from run_statistics import format_summary, summarize_run
from simulation import Simulation
from utils import format_results

logger = logging.getLogger(__name__)


def read_input(path=None) -> str:
    if path is None:
        return sys.stdin.read()
    with open(path, encoding="utf-8", errors="replace") as f:
        return f.read()


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Simulate robots moving across a grid of Mars")
    parser.add_argument(
        "input",
        nargs="?",
        help="Mission file (reads stdin when omitted)",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print a run summary to stderr after the results",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    try:
        parsed = parse_input(read_input(args.input))
    except (InputError, OSError, UnicodeDecodeError) as e:
        logger.debug("Run aborted", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    sim = Simulation(parsed.bounds, parsed.robots)
    print(format_results(sim.run()))

    if args.stats:
        print(format_summary(summarize_run(sim)), file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
