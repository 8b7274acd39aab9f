#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: overlaylab/subcommands/check.py

import argparse
import sys
from typing import List, Optional

from overlaylab.core import config as c
from overlaylab.shared.logger import OverlaylabArgumentParser
from overlaylab.shared.sanitizer import INPUT_HANDLERS
from overlaylab.logic.check.resolver import resolve_check_input


def get_check_parser() -> argparse.ArgumentParser:
    """Create argument parser for check command."""
    parser = OverlaylabArgumentParser(
        prog="overlaylab check",
        description="overlaylab check: measure how well one overlay color reproduces the targets",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-o",
        "--overlay",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="six character hex code of the overlay color",
    )
    parser.add_argument(
        "-a",
        "--alpha",
        required=True,
        type=INPUT_HANDLERS["alpha"],
        help=f"opacity of the overlay in percent ({c.ALPHA_MIN}-{c.ALPHA_MAX})",
    )
    parser.add_argument(
        "-d",
        "--distance",
        type=INPUT_HANDLERS["distance"],
        default=c.DEFAULT_MAX_DISTANCE,
        help=f"maximum distance for a pair to count as a match (default: {c.DEFAULT_MAX_DISTANCE})",
    )
    parser.add_argument(
        "--base-colors",
        type=INPUT_HANDLERS["hex_list"],
        help="comma-separated six character hex codes for the base colors",
    )
    parser.add_argument(
        "--target-colors",
        type=INPUT_HANDLERS["hex_list"],
        help="comma-separated six character hex codes for the target colors",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for check command."""
    parser = get_check_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    if not resolve_check_input(args):
        sys.exit(1)


if __name__ == "__main__":
    main()
