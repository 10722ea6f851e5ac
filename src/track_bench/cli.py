"""
Track Bench CLI - Entry point

Parses command-line options and starts the interactive menu.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from track_bench.core.config import VALID_BACKENDS


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the track-bench command."""
    parser = argparse.ArgumentParser(
        description="Track Bench - sort, filter and search a music dataset, "
        "comparing array and linked list stores",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '--backend',
        choices=VALID_BACKENDS,
        default=None,
        help='Store backing structure (asked interactively when omitted)',
    )
    parser.add_argument(
        '--file',
        type=Path,
        default=None,
        help='CSV dataset to load before the menu opens',
    )
    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help='Path to config file (default: ./config.toml or ~/.config/track-bench/config.toml)',
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the track-bench command."""
    args = build_parser().parse_args(argv)

    from .main import interactive_mode
    interactive_mode(config_path=args.config, backend=args.backend, preload=args.file)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
