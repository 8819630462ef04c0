"""
Unit tests for the settings file and logging setup.
"""

import json
import logging

from core.log import configure_logging
from core.settings import DEFAULT_SETTINGS, load_settings, save_settings


class TestSettings:
    """Test settings load/merge/save."""

    def test_missing_file_created_with_defaults(self, tmp_path):
        path = tmp_path / "cfg" / "settings.json"

        settings = load_settings(path)

        assert settings == DEFAULT_SETTINGS
        assert json.loads(path.read_text()) == DEFAULT_SETTINGS

    def test_partial_file_merged_with_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"audio": {"output_device": "USB"}, "unknown": {"x": 1}}))

        settings = load_settings(path)

        assert settings["audio"]["output_device"] == "USB"
        assert settings["logging"]["level"] == "INFO"
        assert settings["general"]["store_path"] == DEFAULT_SETTINGS["general"]["store_path"]
        assert "unknown" not in settings

    def test_invalid_json_falls_back(self, tmp_path, caplog):
        path = tmp_path / "settings.json"
        path.write_text("{not json")

        settings = load_settings(path)

        assert settings == DEFAULT_SETTINGS
        assert "Failed to load settings" in caplog.text

    def test_defaults_not_mutated(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"video": {"ui_scale": 1.5}}))

        load_settings(path)

        assert DEFAULT_SETTINGS["video"]["ui_scale"] == 1.0

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "settings.json"
        settings = load_settings(path)
        settings["general"]["show_edit_options"] = True

        save_settings(settings, path)

        assert load_settings(path)["general"]["show_edit_options"] is True


class TestConfigureLogging:
    """Test root logger setup."""

    def test_level_by_name(self):
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        try:
            configure_logging("debug")
            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1

            configure_logging("nonsense")
            assert root.level == logging.INFO
        finally:
            for handler in list(root.handlers):
                root.removeHandler(handler)
            for handler in saved_handlers:
                root.addHandler(handler)
            root.setLevel(saved_level)
