#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: overlaylab/main.py

import argparse
import sys
from typing import List, Optional

from overlaylab import __version__
from overlaylab.core import config as c
from overlaylab.logic.search.resolver import resolve_search_input
from overlaylab.subcommands.command_registry import SUBCOMMANDS
from overlaylab.shared.logger import log, OverlaylabArgumentParser
from overlaylab.shared.sanitizer import INPUT_HANDLERS


def get_search_parser() -> argparse.ArgumentParser:
    """Create argument parser for the main search command."""
    parser = OverlaylabArgumentParser(
        prog="overlaylab",
        description=(
            "overlaylab: find an unknown, semitransparent overlay color\n"
            "from colors seen before and after it was applied"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"overlaylab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )

    # Alpha Range Group
    alpha_group = parser.add_argument_group("alpha range")
    alpha_group.add_argument(
        "--alpha-min",
        type=INPUT_HANDLERS["alpha"],
        default=c.ALPHA_MIN,
        help=f"the lowest opacity value to check (default: {c.ALPHA_MIN})",
    )
    alpha_group.add_argument(
        "--alpha-max",
        type=INPUT_HANDLERS["alpha"],
        default=c.ALPHA_MAX,
        help=f"the highest opacity value to check (default: {c.ALPHA_MAX})",
    )

    # Matching Group
    match_group = parser.add_argument_group("matching")
    match_group.add_argument(
        "-d",
        "--distance",
        type=INPUT_HANDLERS["distance"],
        default=c.DEFAULT_MAX_DISTANCE,
        help=(
            "the maximum distance between two colors that will let a guess be considered\n"
            f"a match (default: {c.DEFAULT_MAX_DISTANCE})\n"
            "a distance below 1.0 is generally considered to be visually indistinguishable,\n"
            f"while {c.JND_DISTANCE} is generally considered to be a barely noticeable difference"
        ),
    )
    match_group.add_argument(
        "-r",
        "--results",
        type=INPUT_HANDLERS["results"],
        default=c.DEFAULT_MAX_RESULTS,
        help=(
            f"the maximum number of results to display (default: {c.DEFAULT_MAX_RESULTS})\n"
            "supply zero or a negative value to see all results"
        ),
    )

    # Color Input Group
    color_group = parser.add_argument_group("colors (prompted for when omitted)")
    color_group.add_argument(
        "--base-colors",
        type=INPUT_HANDLERS["hex_list"],
        help="comma-separated six character hex codes for the base colors",
    )
    color_group.add_argument(
        "--target-colors",
        type=INPUT_HANDLERS["hex_list"],
        help="comma-separated six character hex codes for the target colors",
    )

    # Execution Group
    exec_group = parser.add_argument_group("execution")
    exec_group.add_argument(
        "-w",
        "--workers",
        type=INPUT_HANDLERS["workers"],
        default=None,
        help="number of worker processes (default: number of CPUs)",
    )
    exec_group.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="do not show search progress",
    )

    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_search_command(args: argparse.Namespace) -> None:
    """Entry point for the core search command."""
    parser = get_search_parser()

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            try:
                getter = getattr(module, f"get_{name}_parser")
                getter().print_help()
            except AttributeError:
                log("info", f"help for '{name}' not available")
        sys.exit(0)

    # Routing Validation (if a command was passed in the wrong place)
    if args.command:
        if args.command.lower() in SUBCOMMANDS:
            log("error", f"the '{args.command}' command must be the first argument")
        else:
            log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    # Execution
    resolve_search_input(args)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for overlaylab CLI"""
    argv = sys.argv[1:] if argv is None else list(argv)

    # Subcommand Routing (Global behavior)
    if argv:
        cmd = argv[0].lower()
        if cmd in SUBCOMMANDS:
            SUBCOMMANDS[cmd].main(argv[1:])
            sys.exit(0)

    parser = get_search_parser()
    args = parser.parse_args(argv)
    handle_search_command(args)


if __name__ == "__main__":
    main()
