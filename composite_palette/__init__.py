"""
Composite Palette Generator
Builds NES and composite video palettes and writes them as GPL and TGA files
"""

from .color_list import Color, ColorList
from .exceptions import (
    CapacityError,
    ConfigurationError,
    PaletteError,
    PaletteWriteError,
    TgaSizeError,
)
from .gpl_writer import write_gpl
from .palette_generator import generate_palette
from .pipeline import PipelineResult, run_pipeline
from .sources import FormatRevision, SourceConfig, lookup_source
from .tga_writer import write_tga
from .voltage_tables import VoltageTable, build_voltage_table, get_voltage_table

__version__ = "1.0.0"
__all__ = [
    "CapacityError",
    "Color",
    "ColorList",
    "ConfigurationError",
    "FormatRevision",
    "PaletteError",
    "PaletteWriteError",
    "PipelineResult",
    "SourceConfig",
    "TgaSizeError",
    "VoltageTable",
    "build_voltage_table",
    "generate_palette",
    "get_voltage_table",
    "lookup_source",
    "run_pipeline",
    "write_gpl",
    "write_tga",
]
