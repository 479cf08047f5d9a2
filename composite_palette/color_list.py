#!/usr/bin/env python3
"""
Color and bounded color list
"""

from typing import Iterable, Iterator, NamedTuple

from .constants import RGB888_MAX_VALUE
from .exceptions import CapacityError, PaletteError
from .logging_config import get_logger

logger = get_logger("color_list")


class _RGB(NamedTuple):
    r: int
    g: int
    b: int


class Color(_RGB):
    """24-bit RGB color; every channel must be in 0-255"""

    __slots__ = ()

    def __new__(cls, r: int, g: int, b: int):
        for channel_name, value in (("r", r), ("g", g), ("b", b)):
            if not 0 <= int(value) <= RGB888_MAX_VALUE:
                raise ValueError(f"Channel {channel_name}={value} outside 0-{RGB888_MAX_VALUE}")
        return super().__new__(cls, int(r), int(g), int(b))

    @classmethod
    def create(cls, r: int, g: int, b: int) -> "Color":
        """Build a color, rejecting channels outside 0-255"""
        return cls(r, g, b)

    @classmethod
    def grey(cls, level: int) -> "Color":
        return cls.create(level, level, level)

    def to_bgr_bytes(self) -> bytes:
        """Pixel bytes in TGA channel order"""
        return bytes((self.b, self.g, self.r))


BLACK = Color(0, 0, 0)
WHITE = Color(RGB888_MAX_VALUE, RGB888_MAX_VALUE, RGB888_MAX_VALUE)


class ColorList:
    """Append-only list of colors with a fixed capacity"""

    def __init__(self, capacity: int, colors: Iterable[Color] = ()):
        if capacity <= 0:
            raise ValueError(f"Capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._colors: list[Color] = []
        self._sealed = False
        for color in colors:
            self.append(color, strict=True)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def remaining(self) -> int:
        return self._capacity - len(self._colors)

    def is_full(self) -> bool:
        return len(self._colors) >= self._capacity

    def append(self, color: Color, strict: bool = False) -> bool:
        """
        Add a color to the end of the list.

        Args:
            color: Color to add
            strict: Raise CapacityError instead of dropping when full

        Returns:
            True if the color was added, False if it was dropped

        Raises:
            PaletteError: If the list has been sealed
            CapacityError: If strict and the list is full
        """
        if self._sealed:
            raise PaletteError("Cannot add color: color list is sealed")

        if self.is_full():
            message = f"Unable to add color {tuple(color)}: color list is full ({self._capacity} colors)"
            if strict:
                raise CapacityError(message)
            logger.error(message)
            return False

        self._colors.append(color)
        return True

    def extend(self, colors: Iterable[Color]) -> int:
        """Append several colors, returning how many were added"""
        return sum(1 for color in colors if self.append(color))

    def seal(self) -> "ColorList":
        """Freeze the list once generation is complete"""
        self._sealed = True
        return self

    def to_list(self) -> list[Color]:
        return list(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self._colors)

    def __getitem__(self, index):
        return self._colors[index]

    def __eq__(self, other):
        if isinstance(other, ColorList):
            return self._colors == other._colors
        if isinstance(other, list):
            return self._colors == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"ColorList({len(self._colors)}/{self._capacity} colors)"
