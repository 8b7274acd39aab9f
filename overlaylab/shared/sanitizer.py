#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: overlaylab/shared/sanitizer.py

import argparse
import re
from typing import List

from overlaylab.core import config as c
from overlaylab.core.errors import MalformedColorError

_HEX_PATTERN = re.compile(c.HEX_COLOR_REGEX)


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def normalize_hex(value: str) -> str:
    """
    Strips surrounding whitespace and the '#' prefix from a six-digit hex code
    and lowercases it. Anything that is not exactly six hex digits is refused.
    """
    s = "" if value is None else str(value).strip()
    match = _HEX_PATTERN.match(s)
    if match is None:
        raise MalformedColorError(_sanitize_for_log(value))
    return "".join(match.groups()).lower()


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    """Validator for a single hex code."""
    try:
        return normalize_hex(v)
    except MalformedColorError as e:
        raise argparse.ArgumentTypeError(str(e))


def handle_hex_list(v: str) -> List[str]:
    """Validator for comma-separated hex codes. Empty items are malformed too."""
    return [handle_hex(p) for p in str(v).split(",")]


def handle_alpha(v: str) -> int:
    """
    Validator for opacity percentages. Unlike the clamping handlers the value
    must already be an integer between ALPHA_MIN and ALPHA_MAX.
    """
    raw = _sanitize_for_log(v)
    try:
        val = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"cannot parse alpha '{raw}' as an integer")
    if not c.ALPHA_MIN <= val <= c.ALPHA_MAX:
        raise argparse.ArgumentTypeError(
            f"the alphas to search must be between {c.ALPHA_MIN} and {c.ALPHA_MAX}"
        )
    return val


def handle_distance(v: str) -> float:
    """Validator for the non-negative distance threshold."""
    raw = _sanitize_for_log(v)
    try:
        val = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid distance value: '{raw}'")
    if val != val or val < 0:
        raise argparse.ArgumentTypeError(f"distance must be a non-negative number: '{raw}'")
    return val


def handle_int(v: str) -> int:
    """Validator for plain (possibly negative) integers."""
    raw = _sanitize_for_log(v)
    try:
        return int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")


def handle_positive_int(min_v: int, max_v: int):
    """
    Factory function returning a validator that specifically handles
    positive integers clamped within a given range.
    """
    def validator(v: str) -> int:
        val = handle_int(v)
        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

# This dictionary maps custom CLI argument types to their respective parsing functions.
INPUT_HANDLERS = {
    "hex": handle_hex,
    "hex_list": handle_hex_list,
    "alpha": handle_alpha,
    "distance": handle_distance,
    "results": handle_int,
    "workers": handle_positive_int(1, 1024),
}
