"""Feed item domain models."""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

DEFAULT_DIMENSION = 200


@dataclass(frozen=True)
class RawRecord:
    """A record as delivered by a page source, before normalization.

    Dimensions arrive as strings (or not at all) and may not be numeric.
    """

    id: str
    url: str
    width: Optional[str] = None
    height: Optional[str] = None


def _parse_dimension(value: Union[str, int, None]) -> int:
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return DEFAULT_DIMENSION
    return parsed if parsed > 0 else DEFAULT_DIMENSION


@dataclass(frozen=True)
class Item:
    """Value object for a single renderable GIF."""

    id: str
    image_url: str
    width: int = DEFAULT_DIMENSION
    height: int = DEFAULT_DIMENSION

    def __post_init__(self):
        object.__setattr__(self, "width", _parse_dimension(self.width))
        object.__setattr__(self, "height", _parse_dimension(self.height))

    @classmethod
    def from_record(cls, record: RawRecord) -> "Item":
        """
        Normalize a raw record into an item.

        Args:
            record: Record from a page source

        Returns:
            Item with width and height defaulted to 200 when missing or invalid
        """
        return cls(
            id=record.id,
            image_url=record.url,
            width=record.width,
            height=record.height,
        )


# Cached pages are stored as tuples so they cannot change once stored
Page = Tuple[Item, ...]
