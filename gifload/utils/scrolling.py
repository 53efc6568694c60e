"""Infinite-scroll trigger."""

from typing import Optional

from gifload.domain.state import Paginating, SessionState


def should_load_more(
    last_visible_index: Optional[int],
    total_items: int,
    state: SessionState,
    threshold: int = 3,
) -> bool:
    """Decide whether the grid is close enough to its end to request a page.

    Args:
        last_visible_index: Zero-based index of the last visible cell, None if
            nothing is laid out yet
        total_items: Number of items currently rendered
        state: Current session state
        threshold: How many items before the end the trigger fires

    Returns:
        True when ``load_more`` should be called
    """
    if last_visible_index is None or isinstance(state, Paginating):
        return False
    return last_visible_index >= total_items - threshold
