"""Dependency injection container."""

from dataclasses import dataclass, field
from typing import Optional

from gifload.config import AppSettings
from gifload.core.protocols import PageSource
from gifload.managers import PaginationController
from gifload.services import GiphyPageSource


@dataclass
class AppContainer:
    settings: AppSettings

    _page_source: Optional[PageSource] = field(default=None, repr=False)

    @property
    def page_source(self) -> PageSource:
        if self._page_source is None:
            self._page_source = GiphyPageSource(self.settings.api)
        return self._page_source

    def create_controller(self) -> PaginationController:
        return PaginationController.from_settings(
            self.page_source, self.settings.pagination
        )

    @classmethod
    def create(
        cls,
        settings: Optional[AppSettings] = None,
        page_source: Optional[PageSource] = None,
    ) -> "AppContainer":
        return cls(
            settings=settings or AppSettings.load(),
            _page_source=page_source,
        )
