"""Text and layout formatting utilities."""

from gifload.domain.models import Item


def caption(position: int) -> str:
    return f"GIF #{position}"


def aspect_ratio(item: Item, min_ratio: float = 0.5, max_ratio: float = 2.0) -> float:
    ratio = item.width / item.height
    return max(min_ratio, min(max_ratio, ratio))


def truncate_text(text: str, max_length: int = 60) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."
