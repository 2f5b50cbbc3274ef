"""Command line entry point."""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

from .app import FoosRelayApp
from .config import ConfigError, load_settings


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Forward Foos play-by-play posts from Discord threads to a webhook"
    )
    parser.add_argument(
        "--state-path", default="forward_state.json", help="Path to the forwarding state file"
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    args = parser.parse_args()

    log_level = getattr(logging, args.log_level.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        settings = load_settings()
    except ConfigError as exc:
        parser.error(str(exc))

    app = FoosRelayApp(settings=settings, state_path=Path(args.state_path))
    try:
        asyncio.run(app.run())
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Stopped by user")


if __name__ == "__main__":
    main()
