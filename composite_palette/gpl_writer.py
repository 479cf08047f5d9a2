#!/usr/bin/env python3
"""
GIMP palette (.gpl) writer
"""

from pathlib import Path
from typing import Iterable, Optional

from .color_list import Color
from .constants import GPL_DEFAULT_COLUMNS, GPL_HEADER
from .exceptions import PaletteWriteError
from .logging_config import get_logger

logger = get_logger("gpl_writer")


def format_gpl_color(color: Color) -> str:
    """'rrr ggg bbb<TAB>(r, g, b)' with space-padded 3-wide fields"""
    r, g, b = color
    return f"{r:3d} {g:3d} {b:3d}\t({r}, {g}, {b})"


def format_gpl(colors: Iterable[Color], name: str,
               columns: Optional[int] = GPL_DEFAULT_COLUMNS) -> str:
    """
    Render a palette as GIMP palette text.

    Args:
        colors: Colors in palette order
        name: Palette name for the Name: header
        columns: Columns: header value, or None to omit the line

    Returns:
        Complete file contents, newline terminated
    """
    lines = [GPL_HEADER, f"Name: {name}"]
    if columns is not None:
        lines.append(f"Columns: {columns}")
    lines.append("")
    lines.extend(format_gpl_color(color) for color in colors)
    return "\n".join(lines) + "\n"


def write_gpl(path, colors: Iterable[Color], name: str,
              columns: Optional[int] = GPL_DEFAULT_COLUMNS) -> Path:
    """
    Write a GIMP palette file.

    Args:
        path: Output file path
        colors: Colors in palette order
        name: Palette display name
        columns: Columns: header value, or None for the legacy header

    Returns:
        Absolute path of the written file

    Raises:
        PaletteWriteError: If the file cannot be opened or written
    """
    output_path = Path(path).resolve()
    text = format_gpl(colors, name, columns)

    try:
        f = open(output_path, "w", encoding="ascii", newline="\n")
    except OSError as e:
        raise PaletteWriteError(f"Unable to open output GPL file {output_path}: {e}") from e

    with f:
        try:
            f.write(text)
        except OSError as e:
            raise PaletteWriteError(f"Unable to write output GPL file {output_path}: {e}") from e

    logger.info(f"Wrote GIMP palette {output_path}")
    return output_path
