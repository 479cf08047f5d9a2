"""
Shared pytest fixtures and configuration for palette generator tests
"""

import logging
import tempfile
from pathlib import Path

import pytest

from composite_palette.color_list import Color
from composite_palette.logging_config import LOGGER_NAME
from composite_palette.settings_manager import SettingsManager


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_colors():
    """A short list of colors covering 1-, 2- and 3-digit channel values"""
    return [
        Color(0, 0, 0),
        Color(5, 50, 250),
        Color(99, 100, 9),
        Color(255, 255, 255),
    ]


@pytest.fixture
def gradient_colors():
    """Build n distinct colors for writer tests"""
    def _make(count):
        return [Color(i % 256, (i * 3) % 256, (i * 7) % 256) for i in range(count)]
    return _make


@pytest.fixture
def settings_file(temp_dir):
    return temp_dir / "settings.json"


@pytest.fixture
def settings(settings_file):
    """Settings manager backed by a temporary file"""
    return SettingsManager(settings_file=settings_file)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging() so caplog sees package records in every test"""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
