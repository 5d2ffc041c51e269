"""
Configuration management using Pydantic models loaded from YAML.
"""

from pathlib import Path

import pendulum
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .domain.calculator import WorkingHoursCalculator
from .domain.models import WorkingWindow


class WorkingWindowConfig(BaseModel):
    """Daily working window settings."""
    start_hour: int = 9
    start_minute: int = 0
    end_hour: int = 17
    end_minute: int = 30

    @field_validator("start_hour", "end_hour")
    @classmethod
    def validate_hour(cls, v: int) -> int:
        """Validate hour is between 0 and 23."""
        if not 0 <= v <= 23:
            raise ValueError(f"Hour must be between 0 and 23, got {v}")
        return v

    @field_validator("start_minute", "end_minute")
    @classmethod
    def validate_minute(cls, v: int) -> int:
        """Validate minute is between 0 and 59."""
        if not 0 <= v <= 59:
            raise ValueError(f"Minute must be between 0 and 59, got {v}")
        return v

    @model_validator(mode="after")
    def validate_window_order(self) -> "WorkingWindowConfig":
        """Ensure the configured window opens before it closes."""
        if (self.end_hour, self.end_minute) <= (self.start_hour, self.start_minute):
            raise ValueError("Working window must end later than it starts")
        return self

    def to_window(self) -> WorkingWindow:
        """Get the domain working window."""
        return WorkingWindow(
            start_hour=self.start_hour,
            start_minute=self.start_minute,
            end_hour=self.end_hour,
            end_minute=self.end_minute,
        )


class AppConfig(BaseModel):
    """Application configuration."""
    working_window: WorkingWindowConfig = Field(default_factory=WorkingWindowConfig)
    timezone: str = "UTC"

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Ensure the zone exists in the timezone database."""
        try:
            pendulum.timezone(value)
        except (ValueError, KeyError) as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value

    def build_calculator(self) -> WorkingHoursCalculator:
        """Create a calculator for the configured working window."""
        return WorkingHoursCalculator.from_window(self.working_window.to_window())

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Read a working window and zone from a YAML file.

        An empty file yields the defaults.

        Raises:
            FileNotFoundError: If config_path does not exist
            ValueError: On malformed YAML or settings
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path} "
                f"(config.example.yaml lists the available settings)"
            )

        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError(f"{config_path} must hold a mapping at the root level")

        return cls(**data)


def get_default_config_path() -> Path:
    """Return ./config.yaml, or the checkout's config.yaml when that is missing."""
    config_path = Path.cwd() / "config.yaml"
    if config_path.exists():
        return config_path

    return Path(__file__).resolve().parent.parent / "config.yaml"
