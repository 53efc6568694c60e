"""Session state published by the pagination controller.

The state is a closed union: every consumer handles exactly these four
members. ``Success`` is the resting state; ``Paginating`` keeps the items
already on screen while the next page loads.
"""

from dataclasses import dataclass
from typing import Tuple, Union

from gifload.domain.models import Item


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Success:
    items: Tuple[Item, ...] = ()


@dataclass(frozen=True)
class Paginating:
    items: Tuple[Item, ...] = ()


@dataclass(frozen=True)
class Error:
    message: str


SessionState = Union[Loading, Success, Paginating, Error]
