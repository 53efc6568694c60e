"""Core interfaces.

The dependency container lives in ``gifload.core.di_container`` and is not
re-exported here because it imports the managers, which import this package.
"""

from .observable import ObservableValue
from .protocols import PageSource

__all__ = ["ObservableValue", "PageSource"]
