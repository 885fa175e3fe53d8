"""Command-line entry point for the aquarium.

Two modes:
- Window mode (default): interactive pygame window
- Headless mode: no window, runs a fixed number of frames and logs stats
"""

import argparse
import logging

from aquarium.config.display import FRAME_RATE, SCREEN_HEIGHT, SCREEN_WIDTH
from aquarium.config.simulation_config import DisplayConfig, SimulationConfig
from aquarium.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def run_headless(config: SimulationConfig, max_frames: int, stats_interval: int) -> dict:
    """Run the simulation in headless mode (no visualization).

    Args:
        config: Simulation configuration
        max_frames: Number of frames to simulate
        stats_interval: Log stats every N frames

    Returns:
        Summary stats after the last frame
    """
    from aquarium.simulation.engine import SimulationEngine

    engine = SimulationEngine(config)
    engine.setup()
    stats = engine.run_headless(max_frames=max_frames, stats_interval=stats_interval)
    for key, value in stats.items():
        logger.info("  %s: %s", key, value)
    return stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Aquarium Simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Open the aquarium window
  python main.py

  # Start at night with sound off
  python main.py --night --mute

  # Headless run for testing/benchmarking
  python main.py --headless --max-frames 5000 --stats-interval 500 --seed 42
        """,
    )
    parser.add_argument(
        "--headless", action="store_true", help="Run without a window (stats only)"
    )
    parser.add_argument(
        "--max-frames",
        type=int,
        default=10000,
        help="Frames to simulate in headless mode (default: 10000)",
    )
    parser.add_argument(
        "--stats-interval",
        type=int,
        default=600,
        help="Log stats every N frames in headless mode (default: 600)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for deterministic behavior (optional)"
    )
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH, help="Tank width in pixels")
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT, help="Tank height in pixels")
    parser.add_argument("--fps", type=int, default=FRAME_RATE, help="Frame rate cap in window mode")
    parser.add_argument("--night", action="store_true", help="Start with the night palette")
    parser.add_argument("--mute", action="store_true", help="Start with sound effects muted")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    """Build a validated configuration from parsed arguments."""
    return SimulationConfig.production(
        headless=args.headless,
        seed=args.seed,
        start_in_day=not args.night,
        muted=args.mute,
        display=DisplayConfig(screen_width=args.width, screen_height=args.height, frame_rate=args.fps),
    )


def main(argv=None) -> int:
    """Parse command-line arguments and run the appropriate mode."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s:%(name)s:%(message)s",
    )

    try:
        config = config_from_args(args)
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    if config.headless:
        logger.info(
            "Starting headless simulation: %d frames, stats every %d frames",
            args.max_frames,
            args.stats_interval,
        )
        run_headless(config, args.max_frames, args.stats_interval)
    else:
        from aquarium.app import run_window

        run_window(config)
    return 0
