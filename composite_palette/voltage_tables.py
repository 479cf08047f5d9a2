#!/usr/bin/env python3
"""
Composite video voltage tables
Per-tap luma and saturation levels used to generate palette colors.

The luma of a tap is the average of its low and high signal voltages. For
the lower half of a derived table the low voltage is 0, for the upper half
the high voltage is 1. The saturation is half of the peak-to-peak voltage.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

import numpy as np

from .constants import COMPOSITE_TAP_COUNTS, LEGACY_TAP_COUNTS
from .exceptions import ConfigurationError
from .logging_config import get_logger

logger = get_logger("voltage_tables")

# Measured values from the nesdev wiki ("NTSC video" and "PPU palettes")
NES_PEAK_TO_PEAK = (0.399, 0.684, 0.692, 0.285)
NES_LUMA = (0.1995, 0.342, 0.654, 0.8575)
NES_SATURATION = (0.1995, 0.342, 0.346, 0.1425)

APPROX_NES_PEAK_TO_PEAK = (0.4, 0.7, 0.7, 0.3)
APPROX_NES_LUMA = (0.2, 0.35, 0.65, 0.85)
APPROX_NES_SATURATION = (0.2, 0.35, 0.35, 0.15)


@dataclass(frozen=True, eq=False)
class VoltageTable:
    """Parallel luma/saturation arrays, one entry per tap"""

    name: str
    luma: np.ndarray
    saturation: np.ndarray

    def __post_init__(self):
        luma = np.array(self.luma, dtype=np.float32)
        saturation = np.array(self.saturation, dtype=np.float32)
        if luma.ndim != 1 or luma.shape != saturation.shape:
            raise ValueError(
                f"Table {self.name!r}: luma and saturation must be 1-D arrays "
                f"of equal length (got {luma.shape} and {saturation.shape})"
            )
        luma.flags.writeable = False
        saturation.flags.writeable = False
        object.__setattr__(self, "luma", luma)
        object.__setattr__(self, "saturation", saturation)

    def __len__(self) -> int:
        return len(self.luma)

    def __eq__(self, other):
        if not isinstance(other, VoltageTable):
            return NotImplemented
        return (
            self.name == other.name
            and np.array_equal(self.luma, other.luma)
            and np.array_equal(self.saturation, other.saturation)
        )

    def __hash__(self):
        return hash((self.name, self.luma.tobytes(), self.saturation.tobytes()))

    def tap(self, index: int) -> tuple[float, float]:
        """Return (luma, saturation) for a single tap"""
        return float(self.luma[index]), float(self.saturation[index])


def table_step(length: int) -> np.float32:
    """Step between adjacent lower-half taps: 1 / (length + 2)"""
    return np.float32(1.0) / np.float32(length + 2)


def build_voltage_table(step: float, length: int,
                        name: Optional[str] = None) -> VoltageTable:
    """
    Derive a symmetric voltage table.

    Args:
        step: Luma increment between taps of the lower half
        length: Number of taps (positive and even)
        name: Optional table name (defaults to composite_<length>)

    Returns:
        VoltageTable whose upper half mirrors the lower half around 0.5
    """
    if length <= 0 or length % 2:
        raise ValueError(f"Table length must be a positive even number, got {length}")

    step = np.float32(step)
    luma = np.zeros(length, dtype=np.float32)
    saturation = np.zeros(length, dtype=np.float32)

    for k in range(length // 2):
        luma[k] = np.float32(k + 1) * step
        luma[length - 1 - k] = np.float32(1.0) - luma[k]

        saturation[k] = luma[k]
        saturation[length - 1 - k] = saturation[k]

    return VoltageTable(name or f"composite_{length:02d}", luma, saturation)


@lru_cache(maxsize=None)
def composite_table(length: int) -> VoltageTable:
    """Build (once per process) the derived table for a tap count"""
    logger.debug(f"Building composite voltage table with {length} taps")
    return build_voltage_table(table_step(length), length)


NES_TABLE = VoltageTable("nes", NES_LUMA, NES_SATURATION)
APPROX_NES_TABLE = VoltageTable("approx_nes", APPROX_NES_LUMA, APPROX_NES_SATURATION)

FIXED_TABLES = {
    NES_TABLE.name: NES_TABLE,
    APPROX_NES_TABLE.name: APPROX_NES_TABLE,
}

DERIVED_TABLE_LENGTHS = {
    f"composite_{length:02d}": length
    for length in sorted(COMPOSITE_TAP_COUNTS + LEGACY_TAP_COUNTS)
}


def get_voltage_table(key: str) -> VoltageTable:
    """
    Look up a voltage table by key.

    Args:
        key: Table key, e.g. 'approx_nes' or 'composite_16'

    Returns:
        The matching VoltageTable

    Raises:
        ConfigurationError: If the key names no known table
    """
    if key in FIXED_TABLES:
        return FIXED_TABLES[key]
    if key in DERIVED_TABLE_LENGTHS:
        return composite_table(DERIVED_TABLE_LENGTHS[key])
    raise ConfigurationError(f"Unknown voltage table: {key}")
