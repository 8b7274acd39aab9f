#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: overlaylab/logic/check/renderer.py

from typing import List, Optional, Sequence, Tuple

from overlaylab.core import config as c
from overlaylab.core import conversions as conv
from overlaylab.core.models import ColorResult, LinearColor
from overlaylab.shared.logger import log


def render_check(
    overlay_hex: str,
    alpha: int,
    target_colors: Sequence[LinearColor],
    measured: List[Tuple[LinearColor, float]],
    match: Optional[ColorResult],
    max_distance: float,
) -> None:
    """Print the composited color and distance of every pair, then the verdict."""
    print()
    print(f"{c.BOLD_WHITE}#{overlay_hex} at {alpha}% opacity{c.RESET}")
    for i, ((guess, distance), target) in enumerate(zip(measured, target_colors), start=1):
        got = conv.rgb_to_hex(*conv.linear_to_rgb8(guess))
        want = conv.rgb_to_hex(*conv.linear_to_rgb8(target))
        flag = "" if distance <= max_distance else "  (over limit)"
        print(f"pair {i:>3}: #{got} vs #{want}; distance: {distance:.6f}{flag}")
    print()

    if match is None:
        log("warning", f"not a match at distance {max_distance}")
    else:
        log("success", f"match; average distance: {match.avg_distance:.6f}")
