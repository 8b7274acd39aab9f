#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: overlaylab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
DEG_180 = 180.0                    # Half circle degrees
EXP_2 = 2                          # Square power
EXP_7 = 7                          # Power for CIEDE2000 chroma calculation

# XYZ D65 Reference White (Source: ASTM E308-01 / CIE D65), Y normalized to 1
D65_X = 0.95047                    # X coordinate for D65 illuminant (2-degree observer)
D65_Y = 1.0                        # Y coordinate (Luminance) for D65 illuminant
D65_Z = 1.08883                    # Z coordinate for D65 illuminant

# Linear sRGB to XYZ Matrix (Source: sRGB D65)
M_SRGB_XYZ_X = (0.4124564, 0.3575761, 0.1804375)  # Coefficients for X coordinate calculation
M_SRGB_XYZ_Y = (0.2126729, 0.7151522, 0.0721750)  # Coefficients for Y (Luminance) calculation
M_SRGB_XYZ_Z = (0.0193339, 0.1191920, 0.9503041)  # Coefficients for Z coordinate calculation

# CIELAB Constants (Source: CIE 15:2004, exact rational form)
LAB_EPSILON = 216.0 / 24389.0      # Threshold for switching between linear and cube-root segments
LAB_KAPPA = 24389.0 / 27.0         # Slope of the linear segment for low luminance values
LAB_POW = 1.0 / 3.0                # Cube root exponent
LAB_L_MULT = 116.0                 # Multiplier for Lightness (L*) calculation
LAB_L_SUB = 16.0                   # Subtraction constant for Lightness (L*) calculation
LAB_A_MULT = 500.0                 # Multiplier for 'a*' (green-red) channel calculation
LAB_B_MULT = 200.0                 # Multiplier for 'b*' (blue-yellow) channel calculation

# CIEDE2000 Constants (Source: Sharma, G., Wu, W., & Dalal, E. N. (2005))
POW7_25 = 6103515625.0             # Constant for chroma normalization (25^7)
G_FACTOR = 0.5                     # Axial adjustment factor for neutral gray
T_K1 = 0.17                        # First T-factor coefficient for hue weighting
T_K2 = 0.24                        # Second T-factor coefficient for hue weighting
T_K3 = 0.32                        # Third T-factor coefficient for hue weighting
T_K4 = 0.20                        # Fourth T-factor coefficient for hue weighting
T_OFFSET_1 = 30.0                  # Primary phase offset for hue angle T-factor
T_OFFSET_2 = 6.0                   # Secondary phase offset for hue angle T-factor
T_OFFSET_3 = 63.0                  # Tertiary phase offset for hue angle T-factor
T_MUL_3 = 3.0                      # Multiplier for tertiary hue angle calculation
T_MUL_4 = 4.0                      # Multiplier for quaternary hue angle calculation
L_OFFSET = 50.0                    # Lightness midpoint for S_L weighting function
S_L_K = 0.015                      # Lightness weighting coefficient for S_L
S_C_K = 0.045                      # Chroma weighting coefficient for S_C
S_H_K = 0.015                      # Hue weighting coefficient for S_H
S_L_DIV = 20.0                     # Divisor term for S_L weighting calculation
RT_D30 = 30.0                      # Degree factor for rotation term (R_T) calculation
RT_H_OFFSET = 275.0                # Hue offset for blue region in R_T calculation
RT_DIV = 25.0                      # Hue divisor for blue region in R_T calculation
K_FACTORS = (1.0, 1.0, 1.0)        # Parametric weighting factors (k_L, k_C, k_H)

# ==========================================
# Search Logic & Constraints
# ==========================================

ALPHA_MIN = 1                      # Lowest opacity percent that can be searched
ALPHA_MAX = 99                     # Highest opacity percent that can be searched
PERCENT_TO_FACTOR = 100.0          # Divisor to convert percentage values to fractions
COARSE_STEP = 3                    # Step size of the first pass over the alpha range
FINE_STEP = 1                      # Step size of the gap-filling pass
CHANNEL_LEVELS = 256               # Values per 8-bit channel (partitions per search)

# Input hex code: optional '#', then exactly six hex digits
HEX_COLOR_REGEX = r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$"

# ==========================================
# CLI Defaults
# ==========================================

DEFAULT_MAX_DISTANCE = 1.0         # Below 1.0 two colors are visually indistinguishable
DEFAULT_MAX_RESULTS = 25           # Number of results printed unless overridden
JND_DISTANCE = 2.1                 # Barely noticeable difference, used in help text

# Progress bar
PROGRESS_DESC = "searching"        # Label in front of the bar
PROGRESS_UNIT = "alpha"            # One tick per searched opacity

# ==========================================
# CLI UI
# ==========================================

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
