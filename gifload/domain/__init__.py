"""Domain models."""

from .errors import FetchFailed
from .models import DEFAULT_DIMENSION, Item, Page, RawRecord
from .state import Error, Loading, Paginating, SessionState, Success

__all__ = [
    "DEFAULT_DIMENSION",
    "Error",
    "FetchFailed",
    "Item",
    "Loading",
    "Page",
    "Paginating",
    "RawRecord",
    "SessionState",
    "Success",
]
