"""
Unit tests for configuration (config.py), logging setup (logging_config.py)
and version metadata (version.py).
"""

import logging

import pytest
import structlog
from pydantic import ValidationError

from reservation_extractor import logging_config
from reservation_extractor.config import Settings
from reservation_extractor.version import EXTRACTOR_VERSION, FIELD_MAPPING_VERSION, __version__


class TestSettings:
    @pytest.mark.unit
    def test_defaults(self, mock_settings):
        assert mock_settings.confidence_threshold == 0.3
        assert mock_settings.default_form_type == "accountCreation"
        assert mock_settings.macro_name_prefix == "LimoAnywhere"

    @pytest.mark.unit
    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("CONFIDENCE_THRESHOLD", "0.6")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        config = Settings()

        assert config.confidence_threshold == 0.6
        assert config.log_level == "DEBUG"

    @pytest.mark.unit
    @pytest.mark.parametrize("threshold", [-0.5, 1.5])
    def test_threshold_out_of_range(self, threshold):
        with pytest.raises(ValidationError):
            Settings(confidence_threshold=threshold)


class TestVersion:
    @pytest.mark.unit
    def test_version_strings(self):
        assert __version__ == "1.0.0"
        assert EXTRACTOR_VERSION.startswith("rule-extractor-")
        assert FIELD_MAPPING_VERSION.startswith("field-mapping-")


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def restore_structlog(self):
        yield
        structlog.reset_defaults()

    @pytest.mark.unit
    def test_level_and_renderer_from_settings(self, monkeypatch):
        monkeypatch.setattr(logging_config.settings, "log_level", "warning")
        monkeypatch.setattr(logging_config.settings, "log_json", True)

        logging_config.setup_logging()

        config = structlog.get_config()
        assert config["wrapper_class"] is structlog.make_filtering_bound_logger(logging.WARNING)
        assert isinstance(config["processors"][-1], structlog.processors.JSONRenderer)

    @pytest.mark.unit
    def test_console_renderer_on_stderr(self, monkeypatch, capsys):
        monkeypatch.setattr(logging_config.settings, "log_level", "INFO")
        monkeypatch.setattr(logging_config.settings, "log_json", False)

        logging_config.setup_logging()
        structlog.get_logger("test").info("entity_extraction_start", text_length=3)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "entity_extraction_start" in captured.err
