#!/usr/bin/env python3
"""
Palette sources
One configuration record per palette family, for both the consolidated
source set and the legacy eleven-source set.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .constants import (
    CAPACITY_LARGE,
    CAPACITY_MEDIUM,
    CAPACITY_SMALL,
    COMPOSITE_ROTATED_PHASE,
    FULL_CIRCLE_DEGREES,
    GPL_EXTENSION,
    NES_HUE_STEP,
    NES_ROTATED_HUE_OFFSET,
    TGA_EXTENSION,
)
from .exceptions import ConfigurationError
from .voltage_tables import get_voltage_table


class HueStrategy(Enum):
    """How hue angles are laid out around the wheel"""

    NES_WHEEL = "nes_wheel"  # fixed degree step from a start hue
    COMPOSITE_WHEEL = "composite_wheel"  # num_hues evenly spaced plus a phase


class HueRange(Enum):
    """Which taps of the table receive chroma for each hue"""

    FULL = "full"
    LOWER_HALF = "lower_half"
    UPPER_HALF = "upper_half"


class FormatRevision(Enum):
    CONSOLIDATED = "consolidated"
    LEGACY = "legacy"

    @classmethod
    def from_name(cls, name: str) -> "FormatRevision":
        try:
            return cls(name.strip().lower())
        except ValueError as e:
            choices = ", ".join(r.value for r in cls)
            raise ConfigurationError(
                f"Unknown format revision {name!r} (expected one of: {choices})"
            ) from e


@dataclass(frozen=True)
class SourceConfig:
    """Everything needed to generate and name one palette"""

    name: str
    display_name: str
    table: str
    strategy: HueStrategy
    max_colors: int
    hue_step: int = NES_HUE_STEP
    hue_offset: int = 0
    num_hues: int = 0
    phase_offset: float = 0.0
    black_white_endpoints: bool = False
    hue_range: HueRange = HueRange.FULL
    revision: FormatRevision = FormatRevision.CONSOLIDATED

    @property
    def file_base_name(self) -> str:
        return self.name

    @property
    def gpl_filename(self) -> str:
        return self.file_base_name + GPL_EXTENSION

    @property
    def tga_filename(self) -> str:
        return self.file_base_name + TGA_EXTENSION

    @property
    def table_length(self) -> int:
        return len(get_voltage_table(self.table))

    @property
    def hue_count(self) -> int:
        """Number of hue angles swept by this source"""
        if self.strategy is HueStrategy.NES_WHEEL:
            return FULL_CIRCLE_DEGREES // self.hue_step
        return self.num_hues

    @property
    def taps_per_hue(self) -> int:
        length = self.table_length
        if self.hue_range is HueRange.FULL:
            return length
        if self.hue_range is HueRange.LOWER_HALF:
            return length // 2
        return length - length // 2

    @property
    def expected_color_count(self) -> int:
        """Colors generate_palette will produce for this source"""
        count = self.table_length + self.hue_count * self.taps_per_hue
        if self.black_white_endpoints:
            count += 2
        return count


def _nes(name, display_name, table, hue_offset=0, revision=FormatRevision.CONSOLIDATED):
    return SourceConfig(
        name=name,
        display_name=display_name,
        table=table,
        strategy=HueStrategy.NES_WHEEL,
        max_colors=CAPACITY_SMALL,
        hue_step=NES_HUE_STEP,
        hue_offset=hue_offset,
        black_white_endpoints=True,
        revision=revision,
    )


def _composite(name, display_name, taps, num_hues, max_colors, phase_offset=0.0):
    return SourceConfig(
        name=name,
        display_name=display_name,
        table=f"composite_{taps:02d}",
        strategy=HueStrategy.COMPOSITE_WHEEL,
        max_colors=max_colors,
        num_hues=num_hues,
        phase_offset=phase_offset,
    )


def _legacy_composite(name, display_name, taps, hue_step, max_colors):
    return SourceConfig(
        name=name,
        display_name=display_name,
        table=f"composite_{taps:02d}",
        strategy=HueStrategy.NES_WHEEL,
        max_colors=max_colors,
        hue_step=hue_step,
        revision=FormatRevision.LEGACY,
    )


CONSOLIDATED_SOURCES = (
    _nes("approx_nes", "Approximate NES", "approx_nes"),
    _nes("approx_nes_rotated", "Approximate NES Rotated", "approx_nes",
         hue_offset=NES_ROTATED_HUE_OFFSET),
    _nes("nes", "NES", "nes"),
    _composite("composite_08", "Composite 08", 8, 24, CAPACITY_MEDIUM),
    _composite("composite_16", "Composite 16", 16, 12, CAPACITY_MEDIUM),
    _composite("composite_16_rotated", "Composite 16 Rotated", 16, 12,
               CAPACITY_MEDIUM, phase_offset=COMPOSITE_ROTATED_PHASE),
    _composite("composite_32", "Composite 32", 32, 24, CAPACITY_LARGE),
)

# The multiplier suffix is the hue count relative to a 30 degree step,
# e.g. 0.75X sweeps 9 hues (40 degrees apart), 6X sweeps 72 (5 degrees).
LEGACY_SOURCES = (
    _nes("approx_nes", "Approximate NES", "approx_nes",
         revision=FormatRevision.LEGACY),
    _nes("approx_nes_rotated", "Approximate NES Rotated", "approx_nes",
         hue_offset=NES_ROTATED_HUE_OFFSET, revision=FormatRevision.LEGACY),
    _legacy_composite("composite_06_0p75x", "Composite 06 0.75X", 6, 40, CAPACITY_SMALL),
    _legacy_composite("composite_06_3x", "Composite 06 3X", 6, 10, CAPACITY_MEDIUM),
    _legacy_composite("composite_12_1p50x", "Composite 12 1.5X", 12, 20, CAPACITY_MEDIUM),
    _legacy_composite("composite_12_6x", "Composite 12 6X", 12, 5, CAPACITY_LARGE),
    _legacy_composite("composite_18_1x", "Composite 18 1X", 18, 30, CAPACITY_MEDIUM),
    _legacy_composite("composite_24_0p75x", "Composite 24 0.75X", 24, 40, CAPACITY_MEDIUM),
    _legacy_composite("composite_24_3x", "Composite 24 3X", 24, 10, CAPACITY_LARGE),
    _legacy_composite("composite_36_2x", "Composite 36 2X", 36, 15, CAPACITY_LARGE),
    _legacy_composite("composite_48_1p50x", "Composite 48 1.5X", 48, 20, CAPACITY_LARGE),
)

_SOURCE_TABLES = {
    FormatRevision.CONSOLIDATED: {s.name: s for s in CONSOLIDATED_SOURCES},
    FormatRevision.LEGACY: {s.name: s for s in LEGACY_SOURCES},
}


def get_source_table(
    revision: FormatRevision = FormatRevision.CONSOLIDATED,
) -> dict[str, SourceConfig]:
    """Return the name -> SourceConfig mapping for a revision"""
    return dict(_SOURCE_TABLES[revision])


def list_source_names(
    revision: FormatRevision = FormatRevision.CONSOLIDATED,
) -> list[str]:
    return list(_SOURCE_TABLES[revision])


def lookup_source(name: Optional[str],
                  revision: FormatRevision = FormatRevision.CONSOLIDATED) -> SourceConfig:
    """
    Resolve a source name to its configuration.

    Args:
        name: Source identifier, e.g. 'composite_16_rotated' (case-insensitive)
        revision: Which source set to search

    Returns:
        SourceConfig for the source

    Raises:
        ConfigurationError: If the name is not part of the revision's source set
    """
    key = (name or "").strip().lower()
    sources = _SOURCE_TABLES[revision]
    if key not in sources:
        raise ConfigurationError(
            f"Unknown source {name!r} for {revision.value} format "
            f"(expected one of: {', '.join(sources)})"
        )
    return sources[key]
