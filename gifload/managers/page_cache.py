"""In-memory page cache keyed by page index."""

from typing import Dict, Iterable, Optional

from gifload.domain.models import Item, Page


class PageCache:
    def __init__(self):
        self._pages: Dict[int, Page] = {}

    def get(self, page_index: int) -> Optional[Page]:
        return self._pages.get(page_index)

    def put(self, page_index: int, items: Iterable[Item]) -> Page:
        page = tuple(items)
        self._pages[page_index] = page
        return page

    def clear(self) -> None:
        self._pages.clear()

    def __contains__(self, page_index: int) -> bool:
        return page_index in self._pages

    def __len__(self) -> int:
        return len(self._pages)
