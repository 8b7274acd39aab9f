#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: overlaylab/core/conversions.py

import re
from typing import List, Sequence, Tuple

import numpy as np

from . import config as c
from .errors import ColorCountMismatchError, MalformedColorError
from .models import LinearColor

_HEX_PATTERN = re.compile(c.HEX_COLOR_REGEX)


def parse_hex_color(value: str) -> LinearColor:
    """
    Parse a six-digit hex code (optionally '#'-prefixed, any case) into an
    opaque linear color. The 8-bit channels are read directly as linear
    values, no transfer curve is applied.
    """
    match = _HEX_PATTERN.match(str(value).strip())
    if match is None:
        raise MalformedColorError(value)
    r, g, b = (int(part, 16) / c.RGB_MAX for part in match.groups())
    return LinearColor(r, g, b, c.UNIT)


def parse_color_pairs(
    base_values: Sequence[str], target_values: Sequence[str]
) -> Tuple[List[LinearColor], List[LinearColor]]:
    """Parse base and target hex codes, refusing lists of different length."""
    if len(base_values) != len(target_values):
        raise ColorCountMismatchError(len(base_values), len(target_values))
    base_colors = [parse_hex_color(v) for v in base_values]
    target_colors = [parse_hex_color(v) for v in target_values]
    return base_colors, target_colors


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert 8-bit RGB components to a lowercase hex string."""
    r_clamped = max(0, min(int(c.RGB_MAX), int(round(r))))
    g_clamped = max(0, min(int(c.RGB_MAX), int(round(g))))
    b_clamped = max(0, min(int(c.RGB_MAX), int(round(b))))
    return f"{r_clamped:02x}{g_clamped:02x}{b_clamped:02x}"


def linear_to_rgb8(color: LinearColor) -> Tuple[int, int, int]:
    """Round a linear color to 8-bit channels."""
    return tuple(
        max(0, min(int(c.RGB_MAX), int(round(v * c.RGB_MAX))))
        for v in (color.red, color.green, color.blue)
    )


# ==========================================
# Compositing
# ==========================================

def composite_over(overlay: LinearColor, base: LinearColor) -> LinearColor:
    """Place a straight-alpha overlay on top of a base color ("over")."""
    out_alpha = overlay.alpha + base.alpha * (c.UNIT - overlay.alpha)
    if out_alpha <= 0.0:
        return LinearColor(0.0, 0.0, 0.0, 0.0)
    base_weight = base.alpha * (c.UNIT - overlay.alpha)

    def blend(src: float, dst: float) -> float:
        return (src * overlay.alpha + dst * base_weight) / out_alpha

    return LinearColor(
        blend(overlay.red, base.red),
        blend(overlay.green, base.green),
        blend(overlay.blue, base.blue),
        out_alpha,
    )


def composite_over_array(overlay_rgb: np.ndarray, alpha: float, base: LinearColor) -> np.ndarray:
    """
    Vectorized `composite_over` for many overlay candidates sharing one alpha.
    `overlay_rgb` has shape (N, 3); the result has the same shape.
    """
    out_alpha = alpha + base.alpha * (c.UNIT - alpha)
    if out_alpha <= 0.0:
        return np.zeros_like(overlay_rgb, dtype=np.float64)
    base_rgb = np.array([base.red, base.green, base.blue], dtype=np.float64)
    base_weight = base.alpha * (c.UNIT - alpha)
    return (overlay_rgb * alpha + base_rgb * base_weight) / out_alpha


# ==========================================
# Linear RGB -> XYZ -> CIE LAB
# ==========================================

def linear_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert linear RGB (0-1) to CIE XYZ with Y normalized to 1."""
    x = r * c.M_SRGB_XYZ_X[0] + g * c.M_SRGB_XYZ_X[1] + b * c.M_SRGB_XYZ_X[2]
    y = r * c.M_SRGB_XYZ_Y[0] + g * c.M_SRGB_XYZ_Y[1] + b * c.M_SRGB_XYZ_Y[2]
    z = r * c.M_SRGB_XYZ_Z[0] + g * c.M_SRGB_XYZ_Z[1] + b * c.M_SRGB_XYZ_Z[2]
    return x, y, z


def _xyz_f(t: float) -> float:
    """Helper function for XYZ to LAB."""
    return t ** c.LAB_POW if t > c.LAB_EPSILON else (c.LAB_KAPPA * t + c.LAB_L_SUB) / c.LAB_L_MULT


def xyz_to_lab(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert XYZ to CIE LAB (D65)."""
    x_r = _xyz_f(x / c.D65_X)
    y_r = _xyz_f(y / c.D65_Y)
    z_r = _xyz_f(z / c.D65_Z)
    L = (c.LAB_L_MULT * y_r) - c.LAB_L_SUB
    a = c.LAB_A_MULT * (x_r - y_r)
    b = c.LAB_B_MULT * (y_r - z_r)
    return L, a, b


def linear_to_lab(color: LinearColor) -> Tuple[float, float, float]:
    """Direct linear color to LAB conversion. Alpha does not take part."""
    return xyz_to_lab(*linear_to_xyz(color.red, color.green, color.blue))


def linear_to_lab_array(rgb: np.ndarray) -> np.ndarray:
    """Convert an (N, 3) array of linear RGB values to an (N, 3) LAB array."""
    rgb = np.asarray(rgb, dtype=np.float64)
    r, g, b = rgb[:, 0], rgb[:, 1], rgb[:, 2]

    m_x, m_y, m_z = c.M_SRGB_XYZ_X, c.M_SRGB_XYZ_Y, c.M_SRGB_XYZ_Z
    x = (r * m_x[0] + g * m_x[1] + b * m_x[2]) / c.D65_X
    y = (r * m_y[0] + g * m_y[1] + b * m_y[2]) / c.D65_Y
    z = (r * m_z[0] + g * m_z[1] + b * m_z[2]) / c.D65_Z

    def f(t: np.ndarray) -> np.ndarray:
        linear = (c.LAB_KAPPA * t + c.LAB_L_SUB) / c.LAB_L_MULT
        return np.where(t > c.LAB_EPSILON, np.cbrt(t), linear)

    fx, fy, fz = f(x), f(y), f(z)

    L = c.LAB_L_MULT * fy - c.LAB_L_SUB
    a = c.LAB_A_MULT * (fx - fy)
    b_val = c.LAB_B_MULT * (fy - fz)

    return np.column_stack([L, a, b_val])
