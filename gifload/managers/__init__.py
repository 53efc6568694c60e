"""Pagination state managers."""

from .page_cache import PageCache
from .pagination_controller import PaginationController
from .pagination_manager import PaginationManager

__all__ = ["PageCache", "PaginationController", "PaginationManager"]
