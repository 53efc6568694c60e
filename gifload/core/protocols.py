"""Protocol definitions for dependency injection."""

from typing import List, Protocol

from gifload.domain.models import RawRecord


class PageSource(Protocol):
    async def fetch_page(self, page_size: int, offset: int) -> List[RawRecord]:
        """Fetch ``page_size`` records starting at ``offset``.

        Raises:
            FetchFailed: on any transport, status or parse failure
        """
        ...
