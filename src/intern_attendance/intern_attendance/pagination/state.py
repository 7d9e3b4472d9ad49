from __future__ import annotations

import math
from typing import Sequence, TypeVar

from ..core.constants import DEFAULT_ITEMS_PER_PAGE, DEFAULT_PAGE
from ..core.exceptions import ValidationError

T = TypeVar("T")


class Pagination:
    """Page index and page size with simple navigation.

    ``next_page`` is unbounded and ``set_page`` is not validated: callers
    bound the page against ``total_pages`` themselves.
    """

    def __init__(self, initial_page: int = DEFAULT_PAGE, initial_items_per_page: int = DEFAULT_ITEMS_PER_PAGE):
        if initial_items_per_page <= 0:
            raise ValidationError("items_per_page must be positive")
        self._initial_page = initial_page
        self._initial_items_per_page = initial_items_per_page
        self.current_page = initial_page
        self.items_per_page = initial_items_per_page

    def next_page(self) -> None:
        self.current_page += 1

    def prev_page(self) -> None:
        self.current_page = self.current_page - 1 if self.current_page > 1 else 1

    def set_page(self, page: int) -> None:
        self.current_page = page

    def set_items_per_page(self, items_per_page: int) -> None:
        if items_per_page <= 0:
            raise ValidationError("items_per_page must be positive")
        self.items_per_page = items_per_page

    def reset(self) -> None:
        self.current_page = self._initial_page
        self.items_per_page = self._initial_items_per_page

    def total_pages(self, item_count: int) -> int:
        return max(1, math.ceil(item_count / self.items_per_page))

    def page_items(self, items: Sequence[T]) -> list[T]:
        start = (self.current_page - 1) * self.items_per_page
        if start < 0:
            return []
        return list(items[start:start + self.items_per_page])


class SearchState:
    def __init__(self, initial_term: str = ""):
        self.term = initial_term

    def set_term(self, term: str) -> None:
        self.term = term or ""

    def clear(self) -> None:
        self.term = ""
