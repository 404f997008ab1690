"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="knightly", description="Two-player chess board.")
    parser.add_argument("--debug", action="store_true", help="log at DEBUG level")
    return parser.parse_known_args(argv)[0]


def main() -> None:
    """Launch the Knightly application."""
    from knightly.ui.bootstrap import run_application

    args = _parse_args(sys.argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run_application(sys.argv))


if __name__ == "__main__":
    main()
