"""Main entry point for the track-laying simulation."""

import argparse
import logging
import sys

from controller.simulation_session import SimulationSession
from controller.turn_logger import TurnLogger
from game.constants import NUM_TURNS
from renderer.text_renderer import TextRenderer


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Track-laying path game simulation on a 9x9 grid",
        epilog="""
Each turn rolls a six-faced die (3 carrot, 2 curve, 1 straight). A curve or
straight tile is laid next to the previous tile when its connectors line up;
otherwise the turn is skipped. The final board is printed when the run ends.

  Symbols:
    S               - starting anchor (a1)
    ┌ ┐ ┘ └         - curves
    ─ │             - straights
    .               - empty square
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for a reproducible run (default: current time)",
    )
    parser.add_argument(
        "--turns",
        type=int,
        default=NUM_TURNS,
        help=f"Turns played after the priming turn (default: {NUM_TURNS})",
    )
    parser.add_argument(
        "--transcript-screen",
        action="store_true",
        help="Output every turn in transcript format to screen",
    )
    parser.add_argument(
        "--show-occupancy",
        action="store_true",
        help="Also print the occupancy grid (1 = occupied)",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Report placement statistics for the run",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging of every turn decision",
    )
    args = parser.parse_args(argv)

    if args.turns < 0:
        parser.error("--turns must be non-negative")

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    renderer = TextRenderer(sys.stdout)
    turn_logger = TurnLogger(log_to_screen=args.transcript_screen)
    session = SimulationSession(
        seed=args.seed,
        turns=args.turns,
        status_reporter=renderer.report_status,
        turn_logger=turn_logger,
    )
    board = session.run()
    turn_logger.close()

    renderer.show_board(board)
    if args.show_occupancy:
        renderer.report_status("")
        renderer.show_occupancy(board)

    if args.stats:
        stats = session.get_statistics()
        renderer.report_status(
            f"Turns: {stats['turns']}  Placements: {stats['placements']}  "
            f"Skipped: {stats['skipped']}  Carrots: {stats['carrots']}  "
            f"Occupied: {stats['occupied']}"
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
