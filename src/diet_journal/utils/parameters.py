"""
Configuration and parameter loading using Pydantic.

This module provides centralized configuration management for the entire application.
All parameters are loaded from YAML and validated using Pydantic models.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from diet_journal.utils.exceptions import ConfigurationError


class TrendConfig(BaseModel):
    """Weight trend window configuration."""

    window_size: int = Field(7, ge=1, description="Number of most recent logged entries")
    min_points: int = Field(2, ge=2, description="Weighed entries needed for a trend")


class JournalConfig(BaseModel):
    """Journal behaviour configuration."""

    timezone: str = "UTC"
    weight_unit: str = "lbs"
    trend: TrendConfig = Field(default_factory=TrendConfig)


class CSVConfig(BaseModel):
    """Draft CSV parsing configuration."""

    encodings: list[str] = Field(default_factory=lambda: ["utf-8", "latin-1"])
    delimiters: list[str] = Field(default_factory=lambda: [",", ";", "\t"])
    column_mappings: dict[str, str] = Field(default_factory=dict)


class OutputFilesConfig(BaseModel):
    """Output file names configuration (without extension)."""

    entries: str = "entries"
    chart_series: str = "chart_series"
    exercise_series: str = "exercise_series"
    summary: str = "summary.json"


class OutputConfig(BaseModel):
    """Output configuration."""

    dir: str = "output"
    files: OutputFilesConfig = Field(default_factory=OutputFilesConfig)
    formats: list[str] = Field(default_factory=lambda: ["csv"])


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: str | None = None
    console: bool = True


class AppConfig(BaseSettings):
    """Main application configuration."""

    journal: JournalConfig = Field(default_factory=JournalConfig)
    csv: CSVConfig = Field(default_factory=CSVConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(env_prefix="DJ_", case_sensitive=False)


class ParameterLoader:
    """
    Centralized parameter loader for the application.

    Loads and validates configuration from YAML files using Pydantic models.
    Provides type-safe access to all configuration parameters.
    """

    def __init__(self, config_path: str = "config/config.yaml") -> None:
        """
        Initialize parameter loader.

        Args:
            config_path: Path to the YAML configuration file.

        Raises:
            ConfigurationError: If configuration file cannot be loaded or is invalid.
        """
        self.config_path = Path(config_path)
        self.config: AppConfig
        self._load_config()

    def _load_config(self) -> None:
        """
        Load configuration from YAML file.

        Raises:
            ConfigurationError: If configuration file cannot be loaded or is invalid.
        """
        if not self.config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, encoding="utf-8") as f:
                config_dict = yaml.safe_load(f) or {}

            self.config = AppConfig(**config_dict)

        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse YAML configuration: {e}") from e
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

    def get_journal_config(self) -> JournalConfig:
        """Get journal configuration."""
        return self.config.journal

    def get_csv_config(self) -> CSVConfig:
        """Get draft CSV parsing configuration."""
        return self.config.csv

    def get_output_config(self) -> OutputConfig:
        """Get output configuration."""
        return self.config.output

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        return self.config.logging

    def get_raw_config(self) -> dict[str, Any]:
        """
        Get raw configuration dictionary.

        Returns:
            Dictionary representation of the configuration.
        """
        return self.config.model_dump()
