#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/core/config.py

import os

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for conversion cache
LRU_CACHE_SIZE = 1024

EPS = 1e-12                        # Floating-point precision and division-by-zero safety

# Standard Scaling & Mathematical Constants
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
XYZ_SCALING = 100.0                # Factor for scaling XYZ coordinates to the 0-100 range

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB

# XYZ D65 Reference White (Source: ASTM E308-01 / CIE D65)
D65_X = 95.047                     # X coordinate for D65 illuminant (2-degree observer)
D65_Y = 100.0                      # Y coordinate (Luminance) for D65 illuminant
D65_Z = 108.883                    # Z coordinate for D65 illuminant

# sRGB to XYZ Matrix (Source: sRGB D65)
M_SRGB_XYZ_X = (0.4124564, 0.3575761, 0.1804375)  # Coefficients for X coordinate calculation
M_SRGB_XYZ_Y = (0.2126729, 0.7151522, 0.0721750)  # Coefficients for Y (Luminance) calculation
M_SRGB_XYZ_Z = (0.0193339, 0.1191920, 0.9503041)  # Coefficients for Z coordinate calculation

# CIELAB Constants (Source: CIE 15:2004)
LAB_E = 0.008856                   # Threshold for switching between linear and power functions
LAB_K = 7.787                      # Slope of the linear segment for low luminance values
LAB_OFFSET = 16.0 / 116.0          # Constant offset for normalization in XYZ to Lab conversion
LAB_POW = 1.0 / 3.0                # Cube root exponent for the non-linear segment
LAB_L_MULT = 116.0                 # Multiplier for Lightness (L*) calculation
LAB_L_SUB = 16.0                   # Subtraction constant for Lightness (L*) calculation
LAB_A_MULT = 500.0                 # Multiplier for 'a*' (green-red) channel calculation
LAB_B_MULT = 200.0                 # Multiplier for 'b*' (blue-yellow) channel calculation

# Constants for OKLab color space conversions (Source: https://bottosson.github.io/posts/oklab/)
OKLAB_CUBE_ROOT_EXP = 1.0 / 3.0    # Power exponent for perceptual LMS non-linearity

# Linear sRGB to LMS matrix (Source: Björn Ottosson, 2020)
M1_OKLAB = (
    (0.4122214708, 0.5363325363, 0.0514459929),   # Long-wavelength (L) response
    (0.2119034982, 0.6806995451, 0.1073969566),   # Medium-wavelength (M) response
    (0.0883024619, 0.2817188376, 0.6299787005),   # Short-wavelength (S) response
)

# Cube-rooted LMS to OKLab matrix (Perceptual lightness and opponency)
M2_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),  # Lightness (L)
    (1.9779984951, -2.4285922050, 0.4505937099),  # 'a' (green-red)
    (0.0259040371, 0.7827717662, -0.8086757660),  # 'b' (blue-yellow)
)

# WCAG Relative Luminance (Source: https://www.w3.org/TR/WCAG21/#dfn-relative-luminance)
WCAG_LINEAR_TH = 0.03928           # Gamma threshold as published in the WCAG 2.x reference formula
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance
WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_AAA = 7.0                     # Enhanced contrast for normal text (Level AAA)
WCAG_AA = 4.5                      # Minimum contrast for normal text (Level AA)
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)

# ==========================================
# GrayBit-7 Raster Format
# ==========================================

GB7_FORMAT_NAME = "GrayBit-7"
GB7_SIGNATURE = b"\x47\x42\x37\x1D"  # "GB7" + 0x1D
GB7_VERSION = 0x01                   # The only supported version
GB7_HEADER_SIZE = 12                 # signature(4) version(1) flags(1) width(2) height(2) reserved(2)
GB7_HEADER_STRUCT = ">4sBBHHH"       # Big-endian header layout
GB7_FLAG_MASK = 0x01                 # Flags bit 0: mask present
GB7_GRAY_BITS = 0x7F                 # Payload bits 0-6: 7-bit gray sample
GB7_MASK_BIT = 0x80                  # Payload bit 7: mask bit
GB7_GRAY_MAX = 127                   # Largest 7-bit sample
GB7_MAX_DIMENSION = 0xFFFF           # Width/height are stored as u16
GB7_ALPHA_THRESHOLD = 127            # Alpha strictly above this encodes mask bit 1
GB7_EXTENSION = "gb7"

# ==========================================
# Resampling
# ==========================================

BICUBIC_A = -0.5                   # Keys kernel parameter (Catmull-Rom)
BICUBIC_TAPS = (-1, 0, 1, 2)       # Neighbourhood offsets per axis
MIN_DIMENSION = 1                  # Smallest target size in pixels
MAX_DIMENSION = 32768              # Largest target size in pixels
MIN_PERCENT = 1                    # Smallest scale in percent mode
MAX_PERCENT = 1000                 # Largest scale in percent mode
PARALLEL_MIN_PIXELS = 512 * 512    # Output size from which rows are split across workers
MAX_WORKERS = min(8, os.cpu_count() or 1)

# ==========================================
# Color Depth Analysis
# ==========================================

DEPTH_SAMPLE_MAX = 200             # Longest sampled edge; larger images are downscaled first
DEPTH_BIT_THRESHOLDS = (
    (2, 1),
    (4, 2),
    (8, 3),
    (16, 4),
    (32, 5),
    (64, 6),
    (128, 7),
)
DEPTH_MAX_BITS = 8

# ==========================================
# Layers & Compositing
# ==========================================

MAX_LAYERS = 2                     # Layer stack capacity
BASE_LAYER_ID = "base-layer"
BASE_LAYER_NAME = "Layer 1"        # The base layer is always called this
LAYER_NAME_PREFIX = "Layer"
LAYER_NAME_TEMPLATE = LAYER_NAME_PREFIX + " {index}"
COLOR_LAYER_NAME_TEMPLATE = "Color {hex}"
OPACITY_MIN = 0
OPACITY_MAX = 100
PERCENT_TO_FACTOR = 100.0          # Divisor to convert percentage values to decimal factors
BLEND_MIDPOINT = 0.5               # Overlay switches between multiply and screen here

CHECKER_SIZE = 10                  # Checkerboard square edge in pixels
CHECKER_LIGHT = (255, 255, 255)
CHECKER_DARK = (224, 224, 224)     # #e0e0e0
FIT_INTERPOLATION = "bilinear"     # Used when an image layer is fitted into the output

# ==========================================
# Loader & Storage
# ==========================================

PLATFORM_FORMAT_NAMES = {
    "JPEG": "JPEG",
    "PNG": "PNG",
    "GIF": "GIF",
    "WEBP": "WebP",
    "BMP": "BMP",
}
EXPORT_FORMATS = {
    "png": "PNG",
    "jpg": "JPEG",
    "jpeg": "JPEG",
    "bmp": "BMP",
    "webp": "WEBP",
}
STATE_FILE = os.path.join(os.path.expanduser("~"), ".pixlab_state.json")
STATE_KEY_METADATA = "last_format_metadata"

# ==========================================
# CLI UI & Data Structures
# ==========================================

PREVIEW_LABEL_WIDTH = 18

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
