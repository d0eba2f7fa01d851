"""Entry-point for launching the CLI application."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from delve.core.rng import RNG
from delve.data.errors import DataError
from delve.data.registry import EntityRegistry
from delve.presentation.cli import config
from delve.presentation.cli.app import build_services, play
from delve.presentation.cli.console import ConsoleClosed, TerminalConsole
from delve.presentation.cli.save_store import SaveStore

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="delve",
        description="Delve - a turn-based text adventure",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding the JSON definition files (default: data/definitions)",
    )
    parser.add_argument(
        "--save-dir",
        type=Path,
        default=None,
        help="Directory for save files (default: from config or DELVE_SAVE_DIR)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random number generator (default: system clock)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI presentation layer."""
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    settings = config.load_config()
    registry = EntityRegistry(args.data_dir)
    try:
        registry.load_all()
    except DataError:
        logger.exception("Failed to load game definitions")
        return 1

    rng = RNG(args.seed) if args.seed is not None else RNG.from_clock()
    logger.info("RNG seed: %d", rng.seed)
    save_dir = args.save_dir if args.save_dir is not None else config.get_save_dir(settings)
    services = build_services(registry, SaveStore(save_dir), start_area_id=settings["start_area"])

    console = TerminalConsole()
    try:
        play(console, services, rng)
    except (ConsoleClosed, KeyboardInterrupt):
        console.write()
        console.write("Goodbye!")
    except LookupError:
        logger.exception("Game aborted on a missing definition")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
