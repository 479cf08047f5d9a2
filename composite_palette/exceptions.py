"""Custom exceptions for the composite palette generator"""


class PaletteError(Exception):
    """Base exception for all palette generator errors."""


class ConfigurationError(PaletteError):
    """Raised for an unknown source, table or format revision."""


class CapacityError(PaletteError):
    """Raised when a color is appended to a full color list in strict mode."""


class PaletteWriteError(PaletteError):
    """Raised when a palette file cannot be written."""


class TgaSizeError(PaletteWriteError):
    """Raised when a color list is too large for a single-row TGA image."""
