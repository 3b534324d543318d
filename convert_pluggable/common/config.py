"""Configuration management using Pydantic Settings"""
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConverterConfig(BaseSettings):
    """Conversion engine configuration"""
    strict_aliases: bool = Field(default=False, alias="CONVERTER_STRICT_ALIASES")
    reaumur_fallback: bool = Field(default=False, alias="CONVERTER_REAUMUR_FALLBACK")
    temperature_coefficients: Literal["legacy", "exact"] = Field(
        default="legacy",
        alias="CONVERTER_TEMPERATURE_COEFFICIENTS"
    )
    max_precision: int = Field(default=50, alias="CONVERTER_MAX_PRECISION")
    suggestion_cutoff: float = Field(default=75.0, alias="CONVERTER_SUGGESTION_CUTOFF")

    @field_validator("max_precision")
    @classmethod
    def validate_max_precision(cls, v: int) -> int:
        if v < 0:
            raise ValueError("CONVERTER_MAX_PRECISION must be >= 0")
        return v

    @field_validator("suggestion_cutoff")
    @classmethod
    def validate_suggestion_cutoff(cls, v: float) -> float:
        if not 0.0 <= v <= 100.0:
            raise ValueError("CONVERTER_SUGGESTION_CUTOFF must be between 0 and 100")
        return v

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)


class AppConfig(BaseSettings):
    """Application configuration"""
    name: str = Field(default="convert-pluggable", alias="APP_NAME")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    batch_limit: int = Field(default=1000, alias="BATCH_LIMIT")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        return v.upper()

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)


class Settings(BaseSettings):
    """Global settings"""
    converter: ConverterConfig = Field(default_factory=ConverterConfig)
    app: AppConfig = Field(default_factory=AppConfig)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


# Global settings instance
settings = Settings()
