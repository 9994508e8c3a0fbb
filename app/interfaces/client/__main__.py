"""Command line entry point that fetches and prints the backend message."""

from __future__ import annotations

import argparse
import asyncio
import logging

from app.config import get_settings

from .display import ERROR_TEXT, MessageDisplay
from .fetcher import MessageFetcher


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments for the display client."""

    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Fetch the backend message once and print it.",
    )
    parser.add_argument(
        "--url",
        default=settings.message_url,
        help=f"Message endpoint to request (default: {settings.message_url})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.client_timeout,
        help="Seconds to wait for the backend (default: wait indefinitely)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Activate the display once and print the rendered page."""

    args = parse_args(argv)
    logging.basicConfig(level=get_settings().log_level)

    display = MessageDisplay(MessageFetcher(args.url, timeout=args.timeout))
    print(display.render(), flush=True)
    text = asyncio.run(display.activate())
    print(display.render())
    return 1 if text == ERROR_TEXT else 0


if __name__ == "__main__":
    raise SystemExit(main())
