"""Command line interface for inspecting easing curves."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .config import OPTIONS_FILE, load_options
from .easing import EASING_FUNCTIONS, get_easing
from .log import configure_logging

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tweenline", description="List and sample tweenline easing curves"
    )
    parser.add_argument("--list", action="store_true", help="list registered easing names")
    parser.add_argument("--ease", help="easing to sample (defaults to the configured one)")
    parser.add_argument("--steps", type=int, default=10, help="number of samples after t=0")
    parser.add_argument("--options", default=str(OPTIONS_FILE), help="path to the options file")
    parser.add_argument("--log-level", help="override the configured log level")
    return parser


def sample(name: str, steps: int) -> List[tuple]:
    """Return ``(t, eased)`` pairs for ``steps + 1`` evenly spaced points."""
    func = get_easing(name)
    return [(i / steps, func(i / steps)) for i in range(steps + 1)]


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    options = load_options(args.options)
    configure_logging(args.log_level or options.log_level, options.log_file)

    if args.list:
        for name in sorted(EASING_FUNCTIONS):
            print(name)
        return 0

    if args.steps <= 0:
        parser.error("--steps must be positive")
    name = args.ease or options.default_ease
    try:
        rows = sample(name, args.steps)
    except KeyError as exc:
        logger.error("Unknown easing requested: %s", name)
        print(exc.args[0])
        return 1
    for t, value in rows:
        print(f"{t:.3f}\t{value:.6f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
