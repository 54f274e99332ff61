"""Application settings configuration.

Loads and validates settings from a YAML file using Pydantic.
"""

import logging
from pathlib import Path
from typing import Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger("RepoCleaner.Settings")


class ApiSettings(BaseModel):
    """Remote API settings"""
    model_config = ConfigDict(frozen=True)

    base_url: str = Field(
        default="https://api.github.com",
        description="Base URL of the GitHub REST API",
    )
    per_page: int = Field(
        default=100,
        ge=1,
        le=100,
        description="Number of repositories requested per listing page (1-100)",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout for a single HTTP request",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop the trailing slash"""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")


class DisplaySettings(BaseModel):
    """Display-related settings"""
    model_config = ConfigDict(frozen=True)

    page_size: int = Field(
        default=12,
        ge=1,
        le=100,
        description="Number of repository cards shown per page (1-100)",
    )
    notification_seconds: int = Field(
        default=5,
        ge=1,
        le=60,
        description="Seconds before a notification hides itself",
    )


class WindowSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    default_width: int = Field(default=1100, ge=320)
    default_height: int = Field(default=800, ge=240)


class AppSettings(BaseModel):
    """Main settings model"""
    model_config = ConfigDict(frozen=True)

    api: ApiSettings = Field(default_factory=ApiSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    window: WindowSettings = Field(default_factory=WindowSettings)
    theme: Literal["dark", "light", "system"] = "dark"

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "AppSettings":
        """Load settings from ``path``, falling back to defaults.

        A missing, empty or unparsable file yields the defaults. Values that
        parse but fail validation raise ``pydantic.ValidationError``.
        """
        if path is None:
            path = "settings.yml"

        config = cls._load_yaml(Path(path))
        settings = cls(**config)
        logger.debug(
            f"Settings: per_page={settings.api.per_page}, "
            f"page_size={settings.display.page_size}"
        )
        return settings

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with open(path, "r") as f:
                config = yaml.safe_load(f)
        except FileNotFoundError:
            logger.info(f"Settings file not found at {path}, using defaults")
            return {}
        except yaml.YAMLError as e:
            logger.warning(f"Error parsing settings YAML at {path}: {e}")
            return {}

        if config is None:
            logger.info("Settings file is empty, using defaults")
            return {}
        if not isinstance(config, dict):
            logger.warning(f"Settings file {path} is not a mapping, using defaults")
            return {}

        logger.info(f"Loaded settings from {path}")
        return config
