#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: overlaylab/logic/search/alpha_generator.py

from typing import List, Optional

from overlaylab.core import config as c

COARSE_SCAN = "coarse_scan"
POST_HIT_EXPAND = "post_hit_expand"
PRUNED_SINGLE_SIDE = "pruned_single_side"
EXHAUSTED = "exhausted"


def generate_initial_guesses(alpha_min: int, alpha_max: int) -> List[int]:
    """
    Walk outward from the midpoint of the range, alternating above and below
    it, first in steps of COARSE_STEP and then in steps of FINE_STEP over
    whatever the coarse pass missed.

    The list is returned reversed so that pop() hands out values in order.
    """
    midpoint = alpha_min + (alpha_max - alpha_min) // 2
    guesses: List[int] = []
    seen = set()

    for step in (c.COARSE_STEP, c.FINE_STEP):
        alpha = midpoint
        while alpha_min <= alpha <= alpha_max:
            if alpha not in seen:
                guesses.append(alpha)
                seen.add(alpha)
            diff = alpha - midpoint
            # At or below the midpoint: jump to the next value above it.
            # Above the midpoint: mirror to the same distance below it.
            alpha = midpoint + abs(diff) + step if diff <= 0 else midpoint - diff

    guesses.reverse()
    return guesses


class AlphaGenerator:
    """
    Hands out opacity percentages to search, one at a time.

    Values start out in a coarse-then-fine scan from the middle of the range.
    The first alpha that produced matches (the first hit) switches the
    generator to expanding one step at a time in both directions from it,
    stopping at values already tried. When an expanded value produces no
    matches, the remaining values on that side of the first hit are dropped.

    States: coarse_scan -> post_hit_expand -> pruned_single_side -> exhausted.
    Any state can move straight to exhausted once no values remain.
    """

    def __init__(self, alpha_min: int, alpha_max: int):
        if not c.ALPHA_MIN <= alpha_min <= alpha_max <= c.ALPHA_MAX:
            raise ValueError(
                f"alpha bounds must satisfy {c.ALPHA_MIN} <= alpha_min <= alpha_max <= {c.ALPHA_MAX}, "
                f"got ({alpha_min}, {alpha_max})"
            )
        self.alpha_min = alpha_min
        self.alpha_max = alpha_max
        self.previous_alpha: Optional[int] = None
        self.first_hit: Optional[int] = None
        self.state = COARSE_SCAN
        self.guesses = generate_initial_guesses(alpha_min, alpha_max)
        # Index alpha - 1; True until the value has been handed out.
        self.should_check = [alpha_min <= i <= alpha_max for i in range(c.ALPHA_MIN, c.ALPHA_MAX + 1)]

    def is_eligible(self, alpha: int) -> bool:
        return self.alpha_min <= alpha <= self.alpha_max and self.should_check[alpha - 1]

    def next(self, had_results: bool) -> Optional[int]:
        """
        Return the next alpha to search, or None once the range is exhausted.
        `had_results` tells whether the previously returned alpha matched.
        """
        if self.state == EXHAUSTED:
            return None

        # Before the first value is handed out there is nothing to have matched
        if self.previous_alpha is None:
            had_results = False

        if had_results and self.first_hit is None:
            self._on_first_hit()
        elif not had_results and self.first_hit is not None:
            self._on_band_end()

        if not self.guesses:
            self.state = EXHAUSTED
            return None

        alpha = self.guesses.pop()
        self.should_check[alpha - 1] = False
        self.previous_alpha = alpha
        return alpha

    def _on_first_hit(self) -> None:
        self.first_hit = self.previous_alpha
        self.guesses = self._expand_around_first_hit()
        self.state = POST_HIT_EXPAND

    def _on_band_end(self) -> None:
        first_hit = self.first_hit
        if self.previous_alpha < first_hit:
            # Only keep values above the first hit
            self.guesses = [g for g in self.guesses if g > first_hit]
        elif self.previous_alpha > first_hit:
            # Only keep values below the first hit
            self.guesses = [g for g in self.guesses if g < first_hit]
        self.state = PRUNED_SINGLE_SIDE

    def _expand_around_first_hit(self) -> List[int]:
        guesses: List[int] = []
        for alpha in range(self.first_hit - 1, self.alpha_min - 1, -1):
            if not self.is_eligible(alpha):
                break
            guesses.append(alpha)
        for alpha in range(self.first_hit + 1, self.alpha_max + 1):
            if not self.is_eligible(alpha):
                break
            guesses.append(alpha)

        guesses.reverse()
        return guesses
