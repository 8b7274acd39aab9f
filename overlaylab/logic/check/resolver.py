#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: overlaylab/logic/check/resolver.py

import argparse

from overlaylab.core import config as c
from overlaylab.core import conversions as conv
from overlaylab.logic.search.engine import find_match, measure_overlay
from overlaylab.logic.search.resolver import resolve_colors
from .renderer import render_check


def resolve_check_input(args: argparse.Namespace) -> bool:
    """Measure one overlay color against every pair. Returns whether it matches."""
    base_colors, target_colors = resolve_colors(args)
    overlay = conv.parse_hex_color(args.overlay)._replace(alpha=args.alpha / c.PERCENT_TO_FACTOR)

    measured = measure_overlay(base_colors, target_colors, overlay)
    target_labs = [conv.linear_to_lab(t) for t in target_colors]
    match = find_match(base_colors, target_labs, overlay, args.distance)

    render_check(args.overlay, args.alpha, target_colors, measured, match, args.distance)
    return match is not None
