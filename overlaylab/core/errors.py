#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: overlaylab/core/errors.py


class MalformedColorError(ValueError):
    """A color string is not a six-digit hex code."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"the color '{value}' is not a valid six-character hex color code")


class ColorCountMismatchError(ValueError):
    """The number of base colors and target colors differ."""

    def __init__(self, num_base: int, num_target: int):
        self.num_base = num_base
        self.num_target = num_target
        super().__init__(
            f"the number of base colors ({num_base}) and target colors ({num_target}) must match"
        )
