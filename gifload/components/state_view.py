"""Headless text rendering of the feed state."""

from typing import Callable, List, Sequence

from gifload.config import DisplaySettings
from gifload.domain.models import Item
from gifload.domain.state import Error, Loading, Paginating, SessionState, Success
from gifload.utils.formatting import aspect_ratio, caption, truncate_text

LOADING_TEXT = "Loading..."
LOADING_MORE_TEXT = "Loading more..."
RETRY_HINT = "Retry"


class StateView:
    """Renders a session state as lines of text, one grid row per line."""

    def __init__(
        self,
        display: DisplaySettings,
        index_of: Callable[[str], int],
    ):
        """Initialize StateView.

        Args:
            display: Grid display settings
            index_of: Position lookup used for item captions
        """
        self.display = display
        self.index_of = index_of

    def render(self, state: SessionState) -> List[str]:
        if isinstance(state, Loading):
            return [LOADING_TEXT]
        if isinstance(state, Error):
            return [f"Loading error: {state.message}", f"[{RETRY_HINT}]"]
        if isinstance(state, Paginating):
            return self._render_grid(state.items) + [LOADING_MORE_TEXT]
        if isinstance(state, Success):
            return self._render_grid(state.items)
        raise TypeError(f"Unknown session state: {state!r}")

    def _render_grid(self, items: Sequence[Item]) -> List[str]:
        columns = self.display.columns
        return [
            " | ".join(self._render_cell(item) for item in items[start:start + columns])
            for start in range(0, len(items), columns)
        ]

    def _render_cell(self, item: Item) -> str:
        ratio = aspect_ratio(
            item, self.display.min_aspect_ratio, self.display.max_aspect_ratio
        )
        return (
            f"{caption(self.index_of(item.id))} "
            f"[{item.width}x{item.height} {ratio:.2f}] "
            f"{truncate_text(item.image_url)}"
        )
