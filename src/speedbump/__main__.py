"""
Speed Bump Tracker entry point.

Usage:
    python -m speedbump                      # Launch the app
    python -m speedbump --data-dir ./data    # Keep the history in ./data
    python -m speedbump --help               # Show help
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from .core.config import Config


def setup_logging(config: Config) -> None:
    """Configure logging based on config."""
    log_config = config["logging"]
    level = getattr(logging, str(log_config.get("level", "INFO")).upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    log_file = log_config.get("file")
    if log_file:
        log_dir = Path(log_file).parent
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=log_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
        handlers=handlers,
    )


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Speed Bump Tracker - vehicle entry/exit logging",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m speedbump                       Launch the app
    python -m speedbump --data-dir ./data     Store history in ./data
    python -m speedbump --config ./config     Use another config directory
        """,
    )

    parser.add_argument(
        "--config", type=str, help="Path to configuration directory"
    )
    parser.add_argument(
        "--data-dir", type=str, help="Directory for the saved history (overrides config)"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging"
    )

    args = parser.parse_args()

    config_dir = Path(args.config) if args.config else None
    config = Config(config_dir)

    if args.debug:
        os.environ["SPEEDBUMP_LOGGING_LEVEL"] = "DEBUG"
        config.reload()

    setup_logging(config)

    logger = logging.getLogger(__name__)
    logger.info("Speed Bump Tracker starting...")
    logger.info(f"Environment: {config.env}")

    from .mobile.app import run_mobile_app

    run_mobile_app(config, data_dir=args.data_dir)


if __name__ == "__main__":
    main()
