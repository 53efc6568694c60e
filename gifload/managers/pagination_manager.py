"""Pagination cursor for infinite scroll."""


class PaginationManager:
    def __init__(self, page_size: int = 20, initial_page_size: int = 20):
        self.page_size = page_size
        self.initial_page_size = initial_page_size
        self.next_page_index = 0
        self.has_more = True
        self.loading = False

    def can_load_more(self) -> bool:
        return self.has_more and not self.loading

    def start_loading(self) -> None:
        self.loading = True

    def finish_loading(self) -> None:
        self.loading = False

    def advance(self) -> None:
        self.next_page_index += 1

    def mark_exhausted(self) -> None:
        self.has_more = False

    def page_size_for(self, page_index: int) -> int:
        return self.initial_page_size if page_index == 0 else self.page_size

    def offset_for(self, page_index: int) -> int:
        # Page 0 may use a different size; later pages follow it back to back
        if page_index == 0:
            return 0
        return self.initial_page_size + (page_index - 1) * self.page_size

    def reset(self) -> None:
        self.next_page_index = 0
        self.has_more = True
        self.loading = False
