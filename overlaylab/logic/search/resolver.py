#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: overlaylab/logic/search/resolver.py

import argparse
import sys
from typing import List, Tuple

from overlaylab.core import conversions as conv
from overlaylab.core.errors import ColorCountMismatchError
from overlaylab.core.models import LinearColor
from overlaylab.shared.logger import log
from overlaylab.shared.prompt import prompt_for_colors
from .engine import find_overlay_colors
from .renderer import open_progress, render_progress, render_results


def resolve_colors(args: argparse.Namespace) -> Tuple[List[LinearColor], List[LinearColor]]:
    """Get base and target colors from the command line, or ask for them."""
    base_values = getattr(args, "base_colors", None)
    target_values = getattr(args, "target_colors", None)

    if base_values is None and target_values is None:
        try:
            base_values, target_values = prompt_for_colors()
        except (EOFError, KeyboardInterrupt):
            print()
            log("error", "color input aborted")
            sys.exit(1)
    elif base_values is None or target_values is None:
        log("error", "--base-colors and --target-colors must be given together")
        sys.exit(2)

    try:
        return conv.parse_color_pairs(base_values, target_values)
    except ColorCountMismatchError as e:
        log("error", str(e))
        sys.exit(1)


def resolve_search_input(args: argparse.Namespace) -> None:
    """Validate input, run the search over all alphas and print the results."""
    if args.alpha_min > args.alpha_max:
        log("error", "alpha-min must be less than or equal to alpha-max")
        sys.exit(1)

    base_colors, target_colors = resolve_colors(args)

    num_alphas = args.alpha_max - args.alpha_min + 1

    with open_progress(num_alphas, quiet=args.quiet) as bar:
        color_results = find_overlay_colors(
            base_colors,
            target_colors,
            args.alpha_min,
            args.alpha_max,
            args.distance,
            workers=args.workers,
            on_alpha=lambda alpha, alpha_results, total: render_progress(bar, alpha, total),
        )

    if not color_results:
        log("error", "no results found")
        sys.exit(1)

    render_results(color_results, args.results)
