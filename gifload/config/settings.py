"""Application settings configuration.

Loads and validates settings from settings.yml using Pydantic.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

logger = logging.getLogger("GifLoad.Settings")

API_KEY_ENV = "GIPHY_API_KEY"
DEFAULT_CONFIG_PATH = Path("settings.yml")


class ApiSettings(BaseModel):
    """Remote API connection settings"""

    model_config = ConfigDict(frozen=True)

    base_url: str = "https://api.giphy.com/v1/"
    api_key: str = ""
    connect_timeout: float = Field(default=30.0, gt=0)
    read_timeout: float = Field(default=30.0, gt=0)


class PaginationSettings(BaseModel):
    """Page sizes and infinite-scroll trigger"""

    model_config = ConfigDict(frozen=True)

    initial_page_size: int = Field(
        default=20,
        ge=1,
        le=50,
        description="Items requested for the first page (1-50)",
    )
    page_size: int = Field(
        default=20,
        ge=1,
        le=50,
        description="Items requested for every following page (1-50)",
    )
    prefetch_threshold: int = Field(
        default=3,
        ge=1,
        description="Load more once the last visible index is this close to the end",
    )


class DisplaySettings(BaseModel):
    """Grid display settings"""

    model_config = ConfigDict(frozen=True)

    columns: int = Field(default=2, ge=1, le=6)
    min_aspect_ratio: float = Field(default=0.5, gt=0)
    max_aspect_ratio: float = Field(default=2.0, gt=0)

    @model_validator(mode="after")
    def validate_aspect_bounds(self) -> "DisplaySettings":
        if self.min_aspect_ratio > self.max_aspect_ratio:
            raise ValueError("min_aspect_ratio cannot exceed max_aspect_ratio")
        return self


class AppSettings(BaseModel):
    """Main settings model"""

    model_config = ConfigDict(frozen=True)

    api: ApiSettings = Field(default_factory=ApiSettings)
    pagination: PaginationSettings = Field(default_factory=PaginationSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "AppSettings":
        """Load settings from a YAML file, falling back to defaults.

        The ``GIPHY_API_KEY`` environment variable overrides the API key
        from the file.

        Args:
            path: Path to settings.yml. Defaults to ./settings.yml

        Returns:
            Validated settings
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        config = cls._load_yaml(Path(path))
        try:
            settings = cls(**config)
        except (ValidationError, TypeError) as e:
            logger.error(f"Invalid settings in {path}, using defaults: {e}")
            settings = cls()

        env_key = os.environ.get(API_KEY_ENV)
        if env_key:
            settings = settings.model_copy(
                update={"api": settings.api.model_copy(update={"api_key": env_key})}
            )
        return settings

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.debug(f"Settings file not found at {path}, using defaults")
            return {}
        except yaml.YAMLError as e:
            logger.error(f"Error parsing settings YAML: {e}")
            return {}
        if not isinstance(data, dict):
            logger.error(f"Settings file {path} is not a mapping, using defaults")
            return {}
        return data
