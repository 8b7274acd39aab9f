#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: overlaylab/shared/prompt.py

from typing import Callable, List, Tuple

from overlaylab.core.errors import MalformedColorError
from .logger import log
from .sanitizer import normalize_hex


def prompt_for_colors(read_line: Callable[[str], str] = input) -> Tuple[List[str], List[str]]:
    """
    Ask for base and target colors in turn until the user submits an empty
    line with at least one complete pair entered.

    Invalid codes and premature empty lines are reported and asked again.
    EOFError and KeyboardInterrupt from `read_line` propagate to the caller.
    """
    base_colors: List[str] = []
    target_colors: List[str] = []

    log("info", "press Enter when you have finished entering all colors")

    while True:
        if len(base_colors) == len(target_colors):
            color_type, destination = "base", base_colors
        else:
            color_type, destination = "target", target_colors
        raw = read_line(f"Enter {color_type} color #{len(destination) + 1}: ")

        if not raw.strip():
            if len(base_colors) != len(target_colors):
                log(
                    "error",
                    f"you have entered {len(base_colors)} base colors but {len(target_colors)} "
                    "target colors, please enter the same number of each",
                )
                continue
            if not base_colors:
                continue
            break

        try:
            destination.append(normalize_hex(raw))
        except MalformedColorError:
            log("error", "invalid color format, please enter a valid hex code")

    return base_colors, target_colors
