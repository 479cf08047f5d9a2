#!/usr/bin/env python3
"""
Palette generation
Greys plus a YIQ hue wheel for each palette source
"""

import math
from typing import Optional

import numpy as np

from .color_list import BLACK, WHITE, Color, ColorList
from .constants import (
    FULL_CIRCLE_DEGREES,
    RGB888_MAX_VALUE,
    YIQ_B_I,
    YIQ_B_Q,
    YIQ_G_I,
    YIQ_G_Q,
    YIQ_R_I,
    YIQ_R_Q,
)
from .logging_config import get_logger
from .sources import HueRange, HueStrategy, SourceConfig
from .voltage_tables import VoltageTable, get_voltage_table

logger = get_logger("palette_generator")


def _to_channel(values: np.ndarray) -> np.ndarray:
    """Scale 0.0-1.0 levels to 0-255 in single precision, rounding half up and clamping"""
    levels = np.asarray(values, dtype=np.float32)
    scaled = np.floor(levels * np.float32(RGB888_MAX_VALUE) + np.float32(0.5))
    return np.clip(scaled, 0, RGB888_MAX_VALUE).astype(np.int64)


def _yiq_to_rgb_arrays(luma: np.ndarray, saturation: np.ndarray,
                       angle: float) -> np.ndarray:
    """Convert per-tap luma/saturation at one hue angle to an (n, 3) array"""
    y = np.asarray(luma, dtype=np.float32)
    sat = np.asarray(saturation, dtype=np.float32).astype(np.float64)

    # The chroma components are stored in single precision before mixing
    i = (sat * math.cos(angle)).astype(np.float32)
    q = (sat * math.sin(angle)).astype(np.float32)

    r = y + i * np.float32(YIQ_R_I) + q * np.float32(YIQ_R_Q)
    g = y + i * np.float32(YIQ_G_I) + q * np.float32(YIQ_G_Q)
    b = y + i * np.float32(YIQ_B_I) + q * np.float32(YIQ_B_Q)

    return _to_channel(np.stack([r, g, b], axis=-1))


def yiq_to_rgb(luma: float, saturation: float, angle: float) -> Color:
    """
    Convert one composite signal level to RGB.

    Args:
        luma: Luma (Y) level, 0.0-1.0
        saturation: Chroma amplitude
        angle: Hue angle in radians

    Returns:
        Color with channels clamped to 0-255
    """
    rgb = _yiq_to_rgb_arrays(np.array([luma]), np.array([saturation]), angle)[0]
    return Color(*(int(c) for c in rgb))


def degree_hue_angle(hue: int) -> float:
    """Convert a whole-degree hue in [0, 360) to radians (single precision)"""
    if hue < 0 or hue >= FULL_CIRCLE_DEGREES:
        raise ValueError(f"Invalid hue {hue}: must be in [0, {FULL_CIRCLE_DEGREES})")
    angle = np.float32(2 * math.pi) * np.float32(hue) / np.float32(FULL_CIRCLE_DEGREES)
    return float(angle)


def tap_range(table: VoltageTable, hue_range: HueRange = HueRange.FULL) -> range:
    """Indices of the taps that receive chroma"""
    half = len(table) // 2
    if hue_range is HueRange.LOWER_HALF:
        return range(0, half)
    if hue_range is HueRange.UPPER_HALF:
        return range(half, len(table))
    return range(0, len(table))


def grey_colors(table: VoltageTable) -> list[Color]:
    """One grey per tap, from the tap's luma"""
    levels = _to_channel(table.luma)
    return [Color.grey(int(level)) for level in levels]


def hue_colors(table: VoltageTable, angle: float,
               hue_range: HueRange = HueRange.FULL) -> list[Color]:
    """One color per tap in hue_range at the given hue angle (radians)"""
    taps = tap_range(table, hue_range)
    rgb = _yiq_to_rgb_arrays(
        table.luma[taps.start:taps.stop],
        table.saturation[taps.start:taps.stop],
        angle,
    )
    return [Color(int(r), int(g), int(b)) for r, g, b in rgb]


def hue_angles(config: SourceConfig) -> list[float]:
    """
    Hue angles swept by a source, in generation order.

    NES wheels step a whole number of degrees from the start hue, wrapping
    at 360. Composite wheels space num_hues angles evenly and add the phase.
    """
    if config.strategy is HueStrategy.NES_WHEEL:
        angles = []
        hue = config.hue_offset
        for _ in range(FULL_CIRCLE_DEGREES // config.hue_step):
            angles.append(degree_hue_angle(hue))
            hue = (hue + config.hue_step) % FULL_CIRCLE_DEGREES
        return angles

    return [
        2 * math.pi * index / config.num_hues + config.phase_offset
        for index in range(config.num_hues)
    ]


def generate_palette(config: SourceConfig,
                     table: Optional[VoltageTable] = None) -> ColorList:
    """
    Generate the full color list for a source.

    Args:
        config: Source configuration
        table: Voltage table override (defaults to the source's table)

    Returns:
        Sealed ColorList bounded by the source's max_colors
    """
    if table is None:
        table = get_voltage_table(config.table)

    logger.debug(
        f"Generating {config.display_name}: {len(table)} taps, "
        f"{config.strategy.value}, capacity {config.max_colors}"
    )

    colors = ColorList(config.max_colors)

    if config.black_white_endpoints:
        colors.append(BLACK)

    colors.extend(grey_colors(table))

    if config.black_white_endpoints:
        colors.append(WHITE)

    for angle in hue_angles(config):
        colors.extend(hue_colors(table, angle, config.hue_range))

    logger.debug(f"Generated {len(colors)} colors for {config.display_name}")
    return colors.seal()
