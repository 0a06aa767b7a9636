"""Tests for settings and logging setup."""

import json
import logging

from md_to_html.config import get_settings
from md_to_html.logging_config import JSONFormatter
from md_to_html.markdown.config import get_pandoc_config


class TestGetSettings:
    """Test environment-driven settings."""

    def test_defaults(self):
        settings = get_settings({})
        assert settings["environment"] == "development"
        assert settings["development"] is True
        assert settings["log_level"] == "DEBUG"
        assert settings["mmdc_path"] is None

    def test_production_defaults_to_info(self):
        settings = get_settings({"MD_TO_HTML_ENV": "production"})
        assert settings["development"] is False
        assert settings["log_level"] == "INFO"

    def test_explicit_log_level(self):
        assert get_settings({"LOG_LEVEL": "error"})["log_level"] == "ERROR"

    def test_invalid_log_level_falls_back(self):
        assert get_settings({"LOG_LEVEL": "chatty"})["log_level"] == "DEBUG"

    def test_mmdc_path(self):
        assert get_settings({"MMDC_PATH": "/opt/mmdc"})["mmdc_path"] == "/opt/mmdc"


class TestJSONFormatter:
    """Test structured log output."""

    def test_includes_extra_fields(self):
        record = logging.LogRecord(
            "md_to_html.test", logging.WARNING, __file__, 1, "render failed", (), None
        )
        record.diagram_id = "diagram_2"

        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "WARNING"
        assert data["message"] == "render failed"
        assert data["diagram_id"] == "diagram_2"
        assert "pathname" not in data


def test_pandoc_config_points_at_bundled_filter():
    config = get_pandoc_config()
    assert config["from"].startswith("gfm")
    for path in config["filters"]:
        assert path.endswith(".lua")
        with open(path, encoding="utf-8") as handle:
            assert "CodeBlock" in handle.read()
