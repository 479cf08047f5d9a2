#!/usr/bin/env python3
"""
Palette generation pipeline
Source lookup -> palette generation -> GPL and TGA output
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .color_list import ColorList
from .constants import GPL_DEFAULT_COLUMNS
from .exceptions import ConfigurationError, PaletteWriteError
from .gpl_writer import write_gpl
from .logging_config import get_logger
from .palette_generator import generate_palette
from .sources import FormatRevision, SourceConfig, lookup_source
from .tga_writer import write_tga

logger = get_logger("pipeline")


@dataclass
class PipelineResult:
    """Outcome of one generator run"""

    config: SourceConfig
    colors: ColorList
    gpl_path: Optional[Path] = None
    tga_path: Optional[Path] = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return not self.errors


def output_paths(config: SourceConfig, output_dir: Union[str, Path] = ".") -> tuple[Path, Path]:
    """
    Build the .gpl and .tga paths for a source.

    Raises:
        ConfigurationError: If output_dir is not an existing directory
    """
    directory = Path(output_dir or ".")
    if not directory.is_dir():
        raise ConfigurationError(f"Output directory does not exist: {directory}")
    return directory / config.gpl_filename, directory / config.tga_filename


def run_pipeline(source_name: str,
                 output_dir: Union[str, Path] = ".",
                 revision: FormatRevision = FormatRevision.CONSOLIDATED,
                 gpl_columns: Optional[int] = GPL_DEFAULT_COLUMNS) -> PipelineResult:
    """
    Generate a palette and write both output files.

    Configuration errors abort before anything is generated. Each writer is
    independent: a failure in one is recorded and the other still runs.

    Args:
        source_name: Source identifier, e.g. 'composite_16'
        output_dir: Directory receiving <source>.gpl and <source>.tga
        revision: Source set the name belongs to
        gpl_columns: Columns: value for the GPL header (ignored for legacy
            output, which has no Columns: line)

    Returns:
        PipelineResult with the colors, written paths and per-writer errors

    Raises:
        ConfigurationError: Unknown source or missing output directory
    """
    config = lookup_source(source_name, revision)
    gpl_path, tga_path = output_paths(config, output_dir)

    colors = generate_palette(config)
    logger.info(f"Generated {len(colors)} colors for {config.display_name}")

    result = PipelineResult(config=config, colors=colors)

    columns = None if revision is FormatRevision.LEGACY else gpl_columns

    try:
        result.gpl_path = write_gpl(gpl_path, colors, config.display_name, columns)
    except PaletteWriteError as e:
        logger.error(str(e))
        result.errors["gpl"] = str(e)

    try:
        result.tga_path = write_tga(tga_path, colors)
    except PaletteWriteError as e:
        logger.error(str(e))
        result.errors["tga"] = str(e)

    return result
