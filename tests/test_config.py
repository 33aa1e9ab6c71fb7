"""Unit tests for the config module."""

import os
from pathlib import Path
from unittest.mock import patch

from pydantic import ValidationError
import pytest

from little_search_engine.config import Settings


pytestmark = pytest.mark.unit


class TestConfig:
    """Test configuration loading and validation."""

    def test_config_values_from_test_environment(self):
        settings = Settings()
        assert settings.docs_file == Path("docs.txt")
        assert settings.noise_words_file == Path("noisewords.txt")
        assert settings.max_results == 5
        assert settings.log_level == "info"
        assert settings.log_json is True

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults_without_environment(self):
        settings = Settings()
        assert settings.docs_file == Path("docs.txt")
        assert settings.max_results == 5

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DOCS_FILE", "/data/corpus/docs.txt")
        monkeypatch.setenv("MAX_RESULTS", "10")
        monkeypatch.setenv("LOG_LEVEL", " DEBUG ")
        monkeypatch.setenv("LOG_JSON", "false")
        settings = Settings()
        assert settings.docs_file == Path("/data/corpus/docs.txt")
        assert settings.max_results == 10
        assert settings.log_level == "debug"
        assert settings.log_json is False

    def test_max_results_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("MAX_RESULTS", "0")
        with pytest.raises(ValidationError):
            Settings()

    def test_unknown_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "verbose")
        with pytest.raises(ValidationError, match="LOG_LEVEL"):
            Settings()

    def test_dotenv_file_is_read(self, monkeypatch, tmp_path):
        monkeypatch.delenv("NOISE_WORDS_FILE")
        (tmp_path / ".env").write_text("NOISE_WORDS_FILE=stop.txt\nUNRELATED=1\n", encoding="utf-8")
        settings = Settings()
        assert settings.noise_words_file == Path("stop.txt")
