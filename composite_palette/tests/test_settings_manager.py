#!/usr/bin/env python3
"""
Tests for settings manager
Settings are read from a JSON file and never written back
"""

import json

import pytest

from composite_palette import settings_manager
from composite_palette.settings_manager import SettingsManager, get_settings


@pytest.mark.unit
class TestSettingsManager:
    """Test loading and defaults"""

    def test_defaults(self, settings):
        assert settings.get("default_source") == "approx_nes"
        assert settings.get("format_revision") == "consolidated"
        assert settings.get("gpl_columns") == 16
        assert settings.get("output_dir") == ""

    def test_missing_key_default(self, settings):
        assert settings.get("nope", "fallback") == "fallback"
        assert settings.get("default_source.nope") is None

    def test_file_values_override_defaults(self, settings_file):
        settings_file.write_text(json.dumps({"default_source": "composite_32"}))
        assert SettingsManager(settings_file=settings_file).get("default_source") == "composite_32"

    def test_nested_key_from_file(self, settings_file):
        settings_file.write_text(json.dumps({"paths": {"output": "/tmp/palettes"}}))
        settings = SettingsManager(settings_file=settings_file)
        assert settings.get("paths.output") == "/tmp/palettes"

    def test_partial_file_keeps_other_defaults(self, settings_file):
        settings_file.write_text(json.dumps({"log_level": "DEBUG"}))
        settings = SettingsManager(settings_file=settings_file)
        assert settings.get("log_level") == "DEBUG"
        assert settings.get("default_source") == "approx_nes"

    def test_corrupted_file(self, settings_file):
        settings_file.write_text("{ not json")
        assert SettingsManager(settings_file=settings_file).get("default_source") == "approx_nes"

    def test_non_object_file_ignored(self, settings_file):
        settings_file.write_text(json.dumps(["composite_16"]))
        assert SettingsManager(settings_file=settings_file).get("default_source") == "approx_nes"

    def test_missing_file_is_not_created(self, settings, settings_file):
        assert settings.get("default_source") == "approx_nes"
        assert not settings_file.exists()

    def test_default_path_under_home(self, temp_dir, monkeypatch):
        monkeypatch.setenv("HOME", str(temp_dir))
        settings = SettingsManager("test_app")
        assert settings.settings_file == temp_dir / ".test_app" / "settings.json"


@pytest.mark.unit
def test_get_settings_singleton(temp_dir, monkeypatch):
    monkeypatch.setenv("HOME", str(temp_dir))
    monkeypatch.setattr(settings_manager, "_settings_instance", None)
    assert get_settings() is get_settings()
