#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: overlaylab/logic/search/renderer.py

from typing import List, Tuple

from tqdm import tqdm

from overlaylab.core import config as c
from overlaylab.core.models import ColorResult


def open_progress(num_alphas: int, quiet: bool = False) -> tqdm:
    """Progress bar over the alphas of one search, written to stderr."""
    return tqdm(
        total=num_alphas,
        desc=c.PROGRESS_DESC,
        unit=c.PROGRESS_UNIT,
        disable=quiet,
        leave=True,
    )


def render_progress(bar: tqdm, alpha: int, found: int) -> None:
    """Advance the bar after one alpha has been searched."""
    bar.update(1)
    bar.set_postfix_str(f"last {alpha}%, found {found} possible colors")


def select_results(color_results: List[ColorResult], max_results: int) -> Tuple[str, List[ColorResult]]:
    """
    Sort results from the most similar color and cut them down to
    max_results. A max_results below 1 keeps everything.
    """
    ordered = sorted(color_results, key=lambda r: r.avg_distance)

    if max_results < 1 or len(ordered) <= max_results:
        return "All results", ordered
    if max_results > 1:
        return f"Top {max_results} results", ordered[:max_results]
    return "Top result", ordered[:1]


def render_results(color_results: List[ColorResult], max_results: int) -> None:
    """Print the selected results, one per line, most similar first."""
    prefix, selected = select_results(color_results, max_results)
    print()
    print(f"{c.BOLD_WHITE}{prefix}, starting from the most similar color:{c.RESET}")
    for result in selected:
        print(result)
