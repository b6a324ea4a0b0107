"""Main entry point for Mr. Smartyplants.

This module provides command-line options to run the game:
- Web mode (default): FastAPI backend for a browser or engine client
- Headless mode: plays a game automatically and logs each season
"""

import argparse
import logging
import sys

logger = logging.getLogger(__name__)


def run_web_server(host: str, port: int, log_level: str) -> None:
    """Run the web server backing a presentation client."""
    from smartyplants.config.server import SEPARATOR_WIDTH

    try:
        import uvicorn

        from backend.app_factory import create_app

        app = create_app(log_level=log_level)

        logger.info("=" * SEPARATOR_WIDTH)
        logger.info("MR. SMARTYPLANTS - WEB SERVER")
        logger.info("=" * SEPARATOR_WIDTH)
        logger.info("")
        logger.info("Starting FastAPI backend server on %s:%d", host, port)
        logger.info("API docs available at http://localhost:%d/docs", port)
        logger.info("")
        logger.info("Press Ctrl+C to stop the server")
        logger.info("=" * SEPARATOR_WIDTH)
        logger.info("")

        uvicorn.run(app, host=host, port=port, log_level=log_level.lower())
    except ImportError as e:
        logger.error("Error: Required dependencies not installed: %s", e)
        logger.error("Install with: pip install -e .")
        sys.exit(1)


def run_headless(max_seasons: int, seed=None) -> int:
    """Play one game without a client, splicing and planting greedily.

    Each season the two smartest living plants are spliced, every stored
    seed is planted into a free slot, and the garden advances.

    Args:
        max_seasons: Stop after this many seasons if the game is still running
        seed: Optional random seed for deterministic behavior

    Returns:
        Process exit code: 0 when the game was won, 1 otherwise
    """
    from smartyplants.config.server import SEPARATOR_WIDTH
    from smartyplants.game_state import GameOutcome, GameState
    from smartyplants.planters import DeadPlant, Empty

    state = GameState.new(seed)

    while not state.is_over and state.season <= max_seasons:
        ranked = sorted(
            state.planters.living_plants(),
            key=lambda entry: entry[1].get_phenotype().intelligence,
            reverse=True,
        )
        if len(ranked) >= 2:
            state.splice(ranked[0][0], ranked[1][0])

        free_slots = [
            slot_id
            for slot_id, planter in enumerate(state.planters)
            if isinstance(planter, (Empty, DeadPlant))
        ]
        for slot_id in free_slots:
            if state.seeds.is_empty:
                break
            state.plant_seed(0, slot_id)

        state.next_season()
        logger.info("Season %d: %s", state.season, state.snapshot()["planters"])

    logger.info("=" * SEPARATOR_WIDTH)
    if state.outcome is GameOutcome.WON:
        logger.info("Won in season %d with %s", state.season, state.winner.display_name)
    else:
        logger.info("Game %s after %d seasons", state.outcome.value, state.season - 1)
    logger.info("=" * SEPARATOR_WIDTH)
    return 0 if state.outcome is GameOutcome.WON else 1


def main():
    """Parse command-line arguments and run the appropriate mode."""
    from smartyplants.config.server import DEFAULT_API_HOST, DEFAULT_API_PORT

    parser = argparse.ArgumentParser(
        description="Mr. Smartyplants plant breeding game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run web server (default)
  python main.py

  # Run on a different port with debug logging
  python main.py --port 9000 --log-level DEBUG

  # Play a seeded game automatically
  python main.py --headless --seasons 50 --seed 42
        """,
    )
    parser.add_argument("--host", default=DEFAULT_API_HOST, help="Interface to bind")
    parser.add_argument("--port", type=int, default=DEFAULT_API_PORT, help="Port to listen on")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument("--headless", action="store_true", help="Play automatically without a server")
    parser.add_argument("--seasons", type=int, default=100, help="Season limit in headless mode")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for headless mode")

    args = parser.parse_args()

    if args.headless:
        from backend.logging_config import configure_logging

        configure_logging(level=args.log_level, include_uvicorn=False)
        sys.exit(run_headless(args.seasons, seed=args.seed))

    logging.basicConfig(level=args.log_level, format="%(levelname)s:%(name)s:%(message)s")
    run_web_server(args.host, args.port, args.log_level)


if __name__ == "__main__":
    main()
