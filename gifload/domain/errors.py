"""Errors raised by page sources."""

from typing import Optional


class FetchFailed(Exception):
    """A page could not be fetched.

    Covers transport failures, non-2xx responses and unparseable payloads
    alike; callers never need to tell them apart.
    """

    def __init__(self, description: Optional[str] = None):
        super().__init__(description or "")
        self.description = description or None
