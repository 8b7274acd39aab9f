#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: overlaylab/core/models.py

from dataclasses import dataclass
from typing import NamedTuple, Tuple


class LinearColor(NamedTuple):
    """RGBA color in linear light, every channel in [0, 1]."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0


@dataclass(frozen=True)
class ColorResult:
    """
    An overlay color that produces the target colors when placed over the
    base colors.

    The color is kept as 8-bit integers because image editors expect those,
    and the alpha as an integer percent so 50% opacity never turns into 127.
    """

    color: Tuple[int, int, int]
    alpha: int
    avg_distance: float

    @property
    def hex(self) -> str:
        r, g, b = self.color
        return f"{r:02x}{g:02x}{b:02x}"

    def __str__(self) -> str:
        return f"#{self.hex} at {self.alpha}% opacity; average distance: {self.avg_distance:.6f}"
