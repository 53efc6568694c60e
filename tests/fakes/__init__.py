"""Test doubles."""

from .fake_page_source import FakePageSource, make_records

__all__ = ["FakePageSource", "make_records"]
