"""Pagination controller - coordinates page fetches, the page cache and session state."""

import asyncio
import logging
from typing import List, Optional, Set, Tuple

from gifload.config import PaginationSettings
from gifload.core.observable import ObservableValue
from gifload.core.protocols import PageSource
from gifload.domain import (
    Error,
    FetchFailed,
    Item,
    Loading,
    Page,
    Paginating,
    RawRecord,
    SessionState,
    Success,
)
from gifload.managers.page_cache import PageCache
from gifload.managers.pagination_manager import PaginationManager

logger = logging.getLogger("GifLoad.PaginationController")

UNKNOWN_ERROR = "Unknown error"


class PaginationController:
    """Owns the session state of one feed screen.

    Commands are plain methods that must be called from the event loop that
    owns the controller. Each one checks and sets the in-flight flag before
    returning, so at most one fetch is ever outstanding. Fetch results are
    reconciled on the same loop; after ``close()`` they are discarded.
    """

    def __init__(
        self,
        source: PageSource,
        initial_page_size: int = 20,
        page_size: int = 20,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        """Initialize PaginationController.

        Args:
            source: Page source used for every network fetch
            initial_page_size: Items requested for page 0
            page_size: Items requested for every later page
            loop: Event loop to run fetches on; defaults to the running loop
        """
        self._source = source
        self._loop = loop
        self._pagination = PaginationManager(
            page_size=page_size, initial_page_size=initial_page_size
        )
        self._cache = PageCache()
        self._items: Tuple[Item, ...] = ()
        self._tasks: Set[asyncio.Task] = set()
        self._closed = False
        self.state: ObservableValue[SessionState] = ObservableValue(Loading())

    @classmethod
    def from_settings(
        cls, source: PageSource, settings: PaginationSettings
    ) -> "PaginationController":
        return cls(
            source,
            initial_page_size=settings.initial_page_size,
            page_size=settings.page_size,
        )

    @property
    def next_page_index(self) -> int:
        return self._pagination.next_page_index

    @property
    def has_more(self) -> bool:
        return self._pagination.has_more

    @property
    def is_loading(self) -> bool:
        return self._pagination.loading

    @property
    def items(self) -> Tuple[Item, ...]:
        return self._items

    @property
    def cache(self) -> PageCache:
        return self._cache

    @property
    def closed(self) -> bool:
        return self._closed

    def load_initial(self) -> Optional[asyncio.Task]:
        """Restart the feed from page 0.

        Returns:
            The fetch task, or None when the call was ignored
        """
        if self._closed or self._pagination.loading:
            logger.debug("load_initial ignored: fetch in flight or closed")
            return None

        self._pagination.reset()
        self._items = ()
        self._pagination.start_loading()
        self._publish(Loading())
        return self._launch(self._fetch_initial())

    def load_more(self) -> Optional[asyncio.Task]:
        """Append the next page, from the cache when it holds it.

        Returns:
            The fetch task, or None when the call was ignored or served
            from the cache
        """
        if self._closed or not self._pagination.can_load_more():
            return None
        state = self.state.value
        if not isinstance(state, (Success, Paginating)):
            return None

        current = state.items
        page_index = self._pagination.next_page_index
        # Guard before publishing: subscribers may call back into load_more
        self._pagination.start_loading()
        self._publish(Paginating(current))

        cached = self._cache.get(page_index)
        if cached is not None:
            logger.debug(f"Page {page_index} served from cache ({len(cached)} items)")
            self._items = current + cached
            self._pagination.advance()
            self._pagination.finish_loading()
            self._publish(Success(self._items))
            return None

        if self._closed:
            return None
        return self._launch(self._fetch_more(page_index, current))

    def retry(self) -> Optional[asyncio.Task]:
        return self.load_initial()

    def index_of(self, item_id: str) -> int:
        """1-based position of ``item_id`` in the accumulated items, 0 if absent."""
        for position, item in enumerate(self._items):
            if item.id == item_id:
                return position + 1
        return 0

    async def wait_idle(self) -> None:
        """Wait until no fetch is outstanding."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def close(self) -> None:
        """Tear down: cancel outstanding fetches and drop all observers."""
        if self._closed:
            return
        self._closed = True
        for task in list(self._tasks):
            task.cancel()
        self.state.clear()
        logger.debug("Controller closed")

    async def _fetch_initial(self) -> None:
        page = await self._fetch(0)
        if page is None or self._closed:
            return

        page = self._cache.put(0, page)
        if not page:
            self._pagination.mark_exhausted()
        self._items = page
        self._pagination.advance()
        logger.info(f"Initial page loaded with {len(page)} items")
        self._publish(Success(self._items))

    async def _fetch_more(self, page_index: int, current: Tuple[Item, ...]) -> None:
        page = await self._fetch(page_index)
        if page is None or self._closed:
            return
        if not page:
            logger.info(f"Page {page_index} is empty, no more items")
            self._pagination.mark_exhausted()
            self._publish(Success(current))
            return

        page = self._cache.put(page_index, page)
        self._items = current + page
        self._pagination.advance()
        logger.info(f"Page {page_index} loaded, {len(self._items)} items total")
        self._publish(Success(self._items))

    async def _fetch(self, page_index: int) -> Optional[Page]:
        """Fetch and normalize one page.

        The in-flight flag is cleared before anything is published, so
        subscribers may issue the next command from their callback.

        Returns:
            The page, or None after publishing the failure
        """
        error: Optional[Exception] = None
        page: Page = ()
        try:
            records: List[RawRecord] = await self._source.fetch_page(
                self._pagination.page_size_for(page_index),
                self._pagination.offset_for(page_index),
            )
            page = tuple(Item.from_record(record) for record in records)
        except Exception as e:
            error = e
        finally:
            self._pagination.finish_loading()

        if error is not None:
            self._fail(error)
            return None
        return page

    def _fail(self, error: Exception) -> None:
        if self._closed:
            return
        if isinstance(error, FetchFailed):
            message = error.description or UNKNOWN_ERROR
        else:
            logger.error("Unexpected page source failure", exc_info=error)
            message = str(error) or UNKNOWN_ERROR
        logger.error(f"Fetch failed: {message}")
        self._items = ()
        self._publish(Error(message))

    def _publish(self, state: SessionState) -> None:
        if not self._closed:
            self.state.set(state)

    def _launch(self, coro) -> asyncio.Task:
        loop = self._loop or asyncio.get_running_loop()
        task = loop.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task
