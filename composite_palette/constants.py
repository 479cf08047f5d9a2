#!/usr/bin/env python3
"""
Constants for the composite palette generator
All magic numbers and format specifications in one place
"""

import math

# Color channel limits
RGB888_MAX_VALUE = 255

# YIQ -> RGB coefficients (NTSC)
YIQ_R_I = 0.956
YIQ_R_Q = 0.619
YIQ_G_I = -0.272
YIQ_G_Q = -0.647
YIQ_B_I = -1.106
YIQ_B_Q = 1.703

# Hue wheel
FULL_CIRCLE_DEGREES = 360
NES_HUE_STEP = 30  # degrees
NES_ROTATED_HUE_OFFSET = 15  # degrees
COMPOSITE_ROTATED_PHASE = math.pi / 12  # 15 degrees

# Consolidated composite tap counts
COMPOSITE_TAP_COUNTS = (8, 16, 32)
LEGACY_TAP_COUNTS = (6, 12, 18, 24, 36, 48)

# Color list capacities (also the TGA width tiers)
CAPACITY_SMALL = 64
CAPACITY_MEDIUM = 256
CAPACITY_LARGE = 1024
TGA_WIDTH_TIERS = (CAPACITY_SMALL, CAPACITY_MEDIUM, CAPACITY_LARGE)

# TGA header fields (Truevision TGA 1.0, type 2)
TGA_ID_LENGTH = 0
TGA_COLORMAP_TYPE = 0
TGA_IMAGE_TYPE_TRUECOLOR = 2
TGA_COLORMAP_SPEC_SIZE = 5
TGA_IMAGE_HEIGHT = 1
TGA_BITS_PER_PIXEL = 24
TGA_BYTES_PER_PIXEL = 3
TGA_DESCRIPTOR_TOP_LEFT = 0x20
TGA_MAX_COLORS = 1024  # refuse at or above this count

# GIMP palette
GPL_HEADER = "GIMP Palette"
GPL_DEFAULT_COLUMNS = 16

# Output file extensions
GPL_EXTENSION = ".gpl"
TGA_EXTENSION = ".tga"

# Default source name when nothing else is configured
DEFAULT_SOURCE = "approx_nes"
