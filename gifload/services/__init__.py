"""Remote page sources."""

from .giphy_page_source import GiphyPageSource

__all__ = ["GiphyPageSource"]
