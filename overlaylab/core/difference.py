#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: overlaylab/core/difference.py

from typing import Tuple

import numpy as np

from . import config as c


def delta_e_ciede2000_array(lab1: np.ndarray, lab2: np.ndarray) -> np.ndarray:
    """
    Calculate the CIEDE2000 color difference (ΔE_00) between CIE LAB colors.
    `lab1` and `lab2` are (N, 3) arrays, or a single (3,) LAB value broadcast
    against the other; returns an (N,) array. The parametric weights k_L, k_C
    and k_H are all 1, and the hue of a color with a' = b = 0 is taken as 0.

    Source: Sharma, G., Wu, W., & Dalal, E. N. (2005).
    """
    lab1 = np.atleast_2d(np.asarray(lab1, dtype=np.float64))
    lab2 = np.atleast_2d(np.asarray(lab2, dtype=np.float64))
    L1, a1, b1 = lab1[:, 0], lab1[:, 1], lab1[:, 2]
    L2, a2, b2 = lab2[:, 0], lab2[:, 1], lab2[:, 2]

    C1 = np.hypot(a1, b1)
    C2 = np.hypot(a2, b2)
    C_bar_7 = ((C1 + C2) / c.DIV_2) ** c.EXP_7
    G = c.G_FACTOR * (c.UNIT - np.sqrt(C_bar_7 / (C_bar_7 + c.POW7_25)))

    a1_prime = (c.UNIT + G) * a1
    a2_prime = (c.UNIT + G) * a2
    C1_prime = np.hypot(a1_prime, b1)
    C2_prime = np.hypot(a2_prime, b2)

    h1_prime_deg = np.where(
        (a1_prime == 0) & (b1 == 0), 0.0, np.degrees(np.arctan2(b1, a1_prime)) % c.HUE_MAX
    )
    h2_prime_deg = np.where(
        (a2_prime == 0) & (b2 == 0), 0.0, np.degrees(np.arctan2(b2, a2_prime)) % c.HUE_MAX
    )

    delta_L_prime = L2 - L1
    delta_C_prime = C2_prime - C1_prime
    C_prime_bar = (C1_prime + C2_prime) / c.DIV_2

    chroma_product = C1_prime * C2_prime
    achromatic = chroma_product == 0
    h_diff = h2_prime_deg - h1_prime_deg
    h_sum = h1_prime_deg + h2_prime_deg
    near = np.abs(h_diff) <= c.DEG_180

    delta_h_prime_deg = np.select(
        [achromatic, near, h_diff > c.DEG_180],
        [0.0, h_diff, h_diff - c.HUE_MAX],
        default=h_diff + c.HUE_MAX,
    )
    delta_H_prime = c.DIV_2 * np.sqrt(chroma_product) * np.sin(
        np.radians(delta_h_prime_deg) / c.DIV_2
    )

    L_prime_bar = (L1 + L2) / c.DIV_2
    h_prime_bar_deg = np.select(
        [achromatic, near, h_sum < c.HUE_MAX],
        [h_sum, h_sum / c.DIV_2, (h_sum + c.HUE_MAX) / c.DIV_2],
        default=(h_sum - c.HUE_MAX) / c.DIV_2,
    )

    T = (
        c.UNIT
        - c.T_K1 * np.cos(np.radians(h_prime_bar_deg - c.T_OFFSET_1))
        + c.T_K2 * np.cos(np.radians(c.DIV_2 * h_prime_bar_deg))
        + c.T_K3 * np.cos(np.radians(c.T_MUL_3 * h_prime_bar_deg + c.T_OFFSET_2))
        - c.T_K4 * np.cos(np.radians(c.T_MUL_4 * h_prime_bar_deg - c.T_OFFSET_3))
    )

    L_L_50_SQ = (L_prime_bar - c.L_OFFSET) ** c.EXP_2
    S_L = c.UNIT + (c.S_L_K * L_L_50_SQ) / np.sqrt(c.S_L_DIV + L_L_50_SQ)
    S_C = c.UNIT + c.S_C_K * C_prime_bar
    S_H = c.UNIT + c.S_H_K * C_prime_bar * T

    delta_theta_deg = c.RT_D30 * np.exp(-(((h_prime_bar_deg - c.RT_H_OFFSET) / c.RT_DIV) ** c.EXP_2))
    C_prime_bar_7 = C_prime_bar ** c.EXP_7
    R_C = c.DIV_2 * np.sqrt(C_prime_bar_7 / (C_prime_bar_7 + c.POW7_25))
    R_T = -R_C * np.sin(np.radians(c.DIV_2 * delta_theta_deg))

    k_L, k_C, k_H = c.K_FACTORS
    dL = delta_L_prime / (k_L * S_L)
    dC = delta_C_prime / (k_C * S_C)
    dH = delta_H_prime / (k_H * S_H)

    return np.sqrt(dL ** c.EXP_2 + dC ** c.EXP_2 + dH ** c.EXP_2 + R_T * dC * dH)


def delta_e_ciede2000(
    lab1: Tuple[float, float, float], lab2: Tuple[float, float, float]
) -> float:
    """CIEDE2000 distance between two single LAB colors."""
    return float(delta_e_ciede2000_array(lab1, lab2)[0])
