#!/usr/bin/env python3
"""
Truevision TGA writer
Writes the palette as a single row of uncompressed 24-bit pixels (type 2).
"""

import struct
from collections.abc import Sequence
from pathlib import Path

from .color_list import Color
from .constants import (
    TGA_BITS_PER_PIXEL,
    TGA_BYTES_PER_PIXEL,
    TGA_COLORMAP_SPEC_SIZE,
    TGA_COLORMAP_TYPE,
    TGA_DESCRIPTOR_TOP_LEFT,
    TGA_ID_LENGTH,
    TGA_IMAGE_HEIGHT,
    TGA_IMAGE_TYPE_TRUECOLOR,
    TGA_MAX_COLORS,
    TGA_WIDTH_TIERS,
)
from .exceptions import PaletteWriteError, TgaSizeError
from .logging_config import get_logger

logger = get_logger("tga_writer")

# id length, colormap type, image type, colormap spec, x origin, y origin,
# width, height, bits per pixel, image descriptor
TGA_HEADER_FORMAT = "<BBB5sHHHHBB"


def tga_image_width(color_count: int) -> int:
    """Smallest width tier that holds color_count pixels (capped at the largest)"""
    for width in TGA_WIDTH_TIERS:
        if color_count <= width:
            return width
    return TGA_WIDTH_TIERS[-1]


def build_tga_header(width: int) -> bytes:
    """18-byte header for a width x 1 top-left-origin true-color image"""
    return struct.pack(
        TGA_HEADER_FORMAT,
        TGA_ID_LENGTH,
        TGA_COLORMAP_TYPE,
        TGA_IMAGE_TYPE_TRUECOLOR,
        bytes(TGA_COLORMAP_SPEC_SIZE),
        0,  # x origin
        0,  # y origin
        width,
        TGA_IMAGE_HEIGHT,
        TGA_BITS_PER_PIXEL,
        TGA_DESCRIPTOR_TOP_LEFT,
    )


def encode_tga(colors: Sequence[Color]) -> bytes:
    """
    Encode colors as a TGA image.

    Args:
        colors: Colors in palette order (fewer than 1024)

    Returns:
        Header, BGR pixel data, then black padding up to the image width

    Raises:
        TgaSizeError: If there are 1024 or more colors
    """
    if len(colors) >= TGA_MAX_COLORS:
        raise TgaSizeError(
            f"Write TGA file failed: number of colors ({len(colors)}) >= {TGA_MAX_COLORS}"
        )

    width = tga_image_width(len(colors))

    data = bytearray(build_tga_header(width))
    for color in colors:
        data.extend(color.to_bgr_bytes())
    data.extend(bytes((width - len(colors)) * TGA_BYTES_PER_PIXEL))
    return bytes(data)


def write_tga(path, colors: Sequence[Color]) -> Path:
    """
    Write colors to a TGA file.

    Args:
        path: Output file path
        colors: Colors in palette order

    Returns:
        Absolute path of the written file

    Raises:
        TgaSizeError: If there are too many colors (no file is created)
        PaletteWriteError: If the file cannot be opened or a write is short
    """
    data = encode_tga(colors)
    output_path = Path(path).resolve()

    try:
        f = open(output_path, "wb")
    except OSError as e:
        raise PaletteWriteError(f"Write TGA file failed: unable to open {output_path}: {e}") from e

    with f:
        try:
            written = f.write(data)
        except OSError as e:
            raise PaletteWriteError(f"Write TGA file failed: {output_path}: {e}") from e

    if written != len(data):
        raise PaletteWriteError(
            f"Write TGA file failed: short write to {output_path} "
            f"({written} of {len(data)} bytes)"
        )

    logger.info(f"Wrote TGA image {output_path} ({tga_image_width(len(colors))}x1)")
    return output_path
