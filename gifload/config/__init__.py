"""Configuration management."""

from .settings import ApiSettings, AppSettings, DisplaySettings, PaginationSettings

__all__ = ["ApiSettings", "AppSettings", "DisplaySettings", "PaginationSettings"]
