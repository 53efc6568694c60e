"""Fake page source for testing."""
import asyncio
from typing import Dict, List, Optional, Tuple

from gifload.domain import RawRecord


def make_records(page_index: int, count: int = 20) -> List[RawRecord]:
    return [
        RawRecord(
            id=f"gif-{page_index}-{i}",
            url=f"https://media.example/{page_index}/{i}.gif",
            width="200",
            height="150",
        )
        for i in range(count)
    ]


class FakePageSource:
    """In-memory page source that records every fetch."""

    def __init__(self, page_size: int = 20):
        """Initialize the fake source.

        Args:
            page_size: Size used to turn offsets back into page indexes
        """
        self.page_size = page_size
        self.pages: Dict[int, List[RawRecord]] = {}
        self.calls: List[Tuple[int, int]] = []
        self.failure: Optional[Exception] = None
        self.gate: Optional[asyncio.Event] = None

    async def fetch_page(self, page_size: int, offset: int) -> List[RawRecord]:
        self.calls.append((page_size, offset))
        if self.gate is not None:
            await self.gate.wait()
        if self.failure is not None:
            raise self.failure
        return list(self.pages.get(offset // self.page_size, []))

    def hold(self) -> asyncio.Event:
        """Make fetches wait until the returned event is set."""
        self.gate = asyncio.Event()
        return self.gate
