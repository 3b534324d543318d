"""Tests for environment-driven configuration"""
import pytest
from pydantic import ValidationError

from convert_pluggable.common.config import AppConfig, ConverterConfig, Settings
from convert_pluggable.conversion import ConversionEngine


class TestConverterConfig:
    """Tests for converter settings"""

    def test_defaults(self, monkeypatch):
        """Test default values without environment overrides"""
        for name in (
            "CONVERTER_STRICT_ALIASES",
            "CONVERTER_REAUMUR_FALLBACK",
            "CONVERTER_TEMPERATURE_COEFFICIENTS",
            "CONVERTER_MAX_PRECISION",
            "CONVERTER_SUGGESTION_CUTOFF",
        ):
            monkeypatch.delenv(name, raising=False)

        config = ConverterConfig(_env_file=None)
        assert config.strict_aliases is False
        assert config.reaumur_fallback is False
        assert config.temperature_coefficients == "legacy"
        assert config.max_precision == 50
        assert config.suggestion_cutoff == 75.0

    def test_from_environment(self, monkeypatch):
        """Test values are read from the environment"""
        monkeypatch.setenv("CONVERTER_STRICT_ALIASES", "true")
        monkeypatch.setenv("CONVERTER_TEMPERATURE_COEFFICIENTS", "exact")
        monkeypatch.setenv("CONVERTER_MAX_PRECISION", "8")

        config = ConverterConfig(_env_file=None)
        assert config.strict_aliases is True
        assert config.temperature_coefficients == "exact"
        assert config.max_precision == 8

    def test_invalid_coefficients(self, monkeypatch):
        """Test unknown coefficient sets are rejected"""
        monkeypatch.setenv("CONVERTER_TEMPERATURE_COEFFICIENTS", "rough")
        with pytest.raises(ValidationError):
            ConverterConfig(_env_file=None)

    def test_negative_max_precision(self, monkeypatch):
        """Test negative maximum precision is rejected"""
        monkeypatch.setenv("CONVERTER_MAX_PRECISION", "-1")
        with pytest.raises(ValidationError):
            ConverterConfig(_env_file=None)

    def test_suggestion_cutoff_range(self, monkeypatch):
        """Test suggestion cutoff must be a percentage"""
        monkeypatch.setenv("CONVERTER_SUGGESTION_CUTOFF", "150")
        with pytest.raises(ValidationError):
            ConverterConfig(_env_file=None)

    def test_engine_uses_environment(self, monkeypatch, catalog):
        """Test an engine built from environment settings honours them"""
        monkeypatch.setenv("CONVERTER_STRICT_ALIASES", "1")
        engine = ConversionEngine(catalog, ConverterConfig(_env_file=None))
        assert engine.convert("hp", "watt", "1", 2) is None
        assert engine.convert("kw", "watt", "1", 0) == "1000"


class TestAppConfig:
    """Tests for application settings"""

    def test_log_level_upper_cased(self, monkeypatch):
        """Test log level is normalised to upper case"""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert AppConfig(_env_file=None).log_level == "DEBUG"

    def test_invalid_log_level(self, monkeypatch):
        """Test unknown log levels are rejected"""
        monkeypatch.setenv("LOG_LEVEL", "VERBOSE")
        with pytest.raises(ValidationError):
            AppConfig(_env_file=None)

    def test_batch_limit(self, monkeypatch):
        """Test batch limit from environment"""
        monkeypatch.setenv("BATCH_LIMIT", "10")
        assert AppConfig(_env_file=None).batch_limit == 10

    def test_settings_aggregate(self):
        """Test global settings expose both sections"""
        settings = Settings()
        assert isinstance(settings.converter, ConverterConfig)
        assert isinstance(settings.app, AppConfig)
