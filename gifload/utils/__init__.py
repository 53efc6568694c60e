"""Utility functions."""

from .formatting import aspect_ratio, caption, truncate_text
from .scrolling import should_load_more

__all__ = ["aspect_ratio", "caption", "should_load_more", "truncate_text"]
