#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: overlaylab/logic/search/engine.py

import functools
import itertools
import os
from concurrent.futures import Executor, ProcessPoolExecutor
from contextlib import nullcontext
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from overlaylab.core import config as c
from overlaylab.core import conversions as conv
from overlaylab.core.difference import delta_e_ciede2000, delta_e_ciede2000_array
from overlaylab.core.models import ColorResult, LinearColor
from .alpha_generator import AlphaGenerator

AlphaCallback = Callable[[int, List[ColorResult], int], None]


@functools.lru_cache(maxsize=1)
def _green_blue_grid() -> np.ndarray:
    """Every (green, blue) pair of the cube as a read-only (65536, 2) int array."""
    levels = np.arange(c.CHANNEL_LEVELS)
    green, blue = np.meshgrid(levels, levels, indexing="ij")
    grid = np.column_stack([green.ravel(), blue.ravel()])
    grid.setflags(write=False)
    return grid


def _alpha_percent(alpha: float) -> int:
    return int(round(alpha * c.PERCENT_TO_FACTOR))


def _search_red_slice(
    red: int,
    base_colors: Sequence[LinearColor],
    target_labs: np.ndarray,
    alpha: float,
    max_distance: float,
) -> List[ColorResult]:
    """
    Test every overlay with the given red value against all pairs.

    Pairs are checked in order and a candidate is dropped at the first pair
    whose distance exceeds max_distance, so later pairs only ever see the
    survivors of earlier ones.
    """
    gb = _green_blue_grid()
    overlay = np.empty((gb.shape[0], 3), dtype=np.float64)
    overlay[:, 0] = red / c.RGB_MAX
    overlay[:, 1:] = gb / c.RGB_MAX

    survivors = np.arange(gb.shape[0])
    distance_sum = np.zeros(gb.shape[0], dtype=np.float64)

    for base, target_lab in zip(base_colors, target_labs):
        guess = conv.composite_over_array(overlay[survivors], alpha, base)
        distances = delta_e_ciede2000_array(target_lab, conv.linear_to_lab_array(guess))
        keep = distances <= max_distance
        survivors = survivors[keep]
        distance_sum = distance_sum[keep] + distances[keep]
        if survivors.size == 0:
            return []

    percent = _alpha_percent(alpha)
    avg_distances = distance_sum / len(base_colors)
    return [
        ColorResult((red, int(gb[i, 0]), int(gb[i, 1])), percent, float(d))
        for i, d in zip(survivors, avg_distances)
    ]


def _check_preconditions(
    base_colors: Sequence[LinearColor], target_colors: Sequence[LinearColor], alpha: float
) -> None:
    if not base_colors or len(base_colors) != len(target_colors):
        raise ValueError("base and target colors must be non-empty and of equal length")
    if not 0.0 < alpha < c.UNIT:
        raise ValueError(f"alpha must be a fraction strictly between 0 and 1, got {alpha}")


def _open_pool(workers: Optional[int]):
    if workers == 1:
        return nullcontext(None)
    return ProcessPoolExecutor(max_workers=workers or os.cpu_count())


def search_alpha(
    base_colors: Sequence[LinearColor],
    target_colors: Sequence[LinearColor],
    alpha: float,
    max_distance: float,
    workers: Optional[int] = None,
    executor: Optional[Executor] = None,
) -> List[ColorResult]:
    """
    Search all of the RGB values at one alpha (a fraction) for overlay colors
    matching every base/target pair within max_distance.

    The cube is split by red value into CHANNEL_LEVELS independent slices.
    Slices run on `executor` when given, otherwise on a process pool of
    `workers` processes (all CPUs by default); workers=1 scans in-process.
    The order of the returned results is unspecified.
    """
    _check_preconditions(base_colors, target_colors, alpha)
    base_colors = [LinearColor(*b) for b in base_colors]
    target_labs = np.array([conv.linear_to_lab(t) for t in target_colors], dtype=np.float64)

    reds = range(c.CHANNEL_LEVELS)
    args = (
        itertools.repeat(base_colors),
        itertools.repeat(target_labs),
        itertools.repeat(alpha),
        itertools.repeat(max_distance),
    )

    if executor is not None:
        slices = executor.map(_search_red_slice, reds, *args)
        return list(itertools.chain.from_iterable(slices))

    with _open_pool(workers) as pool:
        if pool is None:
            slices = map(_search_red_slice, reds, *args)
        else:
            slices = pool.map(_search_red_slice, reds, *args)
        return list(itertools.chain.from_iterable(slices))


def measure_overlay(
    base_colors: Sequence[LinearColor],
    target_colors: Sequence[LinearColor],
    overlay: LinearColor,
) -> List[Tuple[LinearColor, float]]:
    """Composite one overlay over every base and measure each result against its target."""
    measured = []
    for base, target in zip(base_colors, target_colors):
        guess = conv.composite_over(overlay, base)
        distance = delta_e_ciede2000(conv.linear_to_lab(target), conv.linear_to_lab(guess))
        measured.append((guess, distance))
    return measured


def find_match(
    base_colors: Sequence[LinearColor],
    target_labs: Sequence[Tuple[float, float, float]],
    overlay: LinearColor,
    max_distance: float,
) -> Optional[ColorResult]:
    """Single-candidate version of the slice search, pair by pair with early exit."""
    distances = []

    for base, target_lab in zip(base_colors, target_labs):
        guess = conv.composite_over(overlay, base)
        distance = delta_e_ciede2000(target_lab, conv.linear_to_lab(guess))
        if distance > max_distance:
            return None
        distances.append(distance)

    return ColorResult(
        conv.linear_to_rgb8(overlay),
        _alpha_percent(overlay.alpha),
        sum(distances) / len(distances),
    )


def find_overlay_colors(
    base_colors: Sequence[LinearColor],
    target_colors: Sequence[LinearColor],
    alpha_min: int,
    alpha_max: int,
    max_distance: float,
    workers: Optional[int] = None,
    on_alpha: Optional[AlphaCallback] = None,
) -> List[ColorResult]:
    """
    Search every alpha the generator hands out and collect all matches.

    The generator is told after each alpha whether it produced matches and
    decides on its own when to stop. `on_alpha(alpha, results, total)` is
    called after each alpha is searched. An empty list means no overlay
    color matched at any tested alpha.
    """
    alpha_generator = AlphaGenerator(alpha_min, alpha_max)
    color_results: List[ColorResult] = []
    previous_alpha_had_results = False

    with _open_pool(workers) as pool:
        while True:
            alpha_int = alpha_generator.next(previous_alpha_had_results)
            if alpha_int is None:
                break

            alpha = alpha_int / c.PERCENT_TO_FACTOR
            alpha_results = search_alpha(
                base_colors, target_colors, alpha, max_distance, workers=workers, executor=pool
            )
            previous_alpha_had_results = bool(alpha_results)
            color_results.extend(alpha_results)

            if on_alpha is not None:
                on_alpha(alpha_int, alpha_results, len(color_results))

    return color_results
