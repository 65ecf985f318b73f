"""
Pagination types for pagesplice.

This module holds the request-scoped value objects that flow through a merge:
the caller's PageRequest, the OriginWindow asked of each origin, the
OriginPage each origin answers with, and the MergedPage handed back.
All of them are frozen once constructed.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, TypeVar

from .config import DEFAULT_SORT, Sort, SortDirection
from .exceptions import InvalidPageRequest

T = TypeVar("T")
R = TypeVar("R")
U = TypeVar("U")


def validate_page_bounds(page_index: Any, page_size: Any) -> None:
    """
    Checks the two numbers every page request must satisfy.

    Raises:
        InvalidPageRequest: If page_size < 1 or page_index < 0
    """
    if page_size is None or page_size <= 0:
        raise InvalidPageRequest("page size must be positive", field="page_size", value=page_size)
    if page_index is None or page_index < 0:
        raise InvalidPageRequest(
            "page index must be non-negative", field="page_index", value=page_index
        )


@dataclass(frozen=True)
class PageRequest:
    """
    Which page of the combined result a caller wants.

    Attributes:
        page_index: Zero-based page number
        page_size: Maximum number of records on the page (at least 1)
        sort: The single sort applied to both origins
    """

    page_index: int
    page_size: int
    sort: Sort = DEFAULT_SORT

    def __post_init__(self) -> None:
        validate_page_bounds(self.page_index, self.page_size)

    @classmethod
    def of(
        cls,
        page_index: int,
        page_size: int,
        direction: SortDirection | str | None = None,
        field: str | None = None,
    ) -> "PageRequest":
        """
        Builds a request, filling anything omitted from the default sort.

        Usage:
            PageRequest.of(0, 20)                  # timestamp DESC
            PageRequest.of(2, 20, "asc")           # timestamp ASC
            PageRequest.of(0, 10, field="ended")   # ended DESC
        """
        sort = Sort(
            field=field or DEFAULT_SORT.field,
            direction=(
                SortDirection.parse(direction) if direction is not None else DEFAULT_SORT.direction
            ),
        )
        return cls(page_index=page_index, page_size=page_size, sort=sort)

    @property
    def sort_direction(self) -> SortDirection:
        return self.sort.direction

    @property
    def offset(self) -> int:
        """Global index of the first record this page would hold."""
        return self.page_index * self.page_size

    def next(self) -> "PageRequest":
        return PageRequest(self.page_index + 1, self.page_size, self.sort)

    def previous(self) -> "PageRequest":
        """The page before this one; the first page is its own previous."""
        return PageRequest(max(self.page_index - 1, 0), self.page_size, self.sort)

    def first(self) -> "PageRequest":
        return PageRequest(0, self.page_size, self.sort)


@dataclass(frozen=True)
class OriginWindow:
    """
    The slice a merger asks of one origin.

    A count of 0 means the origin must not be contacted at all.
    """

    offset: int
    count: int

    EMPTY: ClassVar["OriginWindow"]

    def __post_init__(self) -> None:
        if self.offset < 0 or self.count < 0:
            raise ValueError(
                f"Window offset and count must be non-negative, got "
                f"offset={self.offset} count={self.count}"
            )

    @property
    def is_empty(self) -> bool:
        return self.count == 0


OriginWindow.EMPTY = OriginWindow(0, 0)


@dataclass(frozen=True)
class OriginPage(Generic[T]):
    """
    What an origin returns for one window.

    Attributes:
        items: Records in the requested direction, at most the requested count
        total_count: The origin's full size, independent of the window
    """

    items: list[T]
    total_count: int

    @property
    def count(self) -> int:
        """Number of records in this slice."""
        return len(self.items)

    @classmethod
    def empty(cls, total_count: int = 0) -> "OriginPage[T]":
        return cls(items=[], total_count=total_count)


@dataclass(frozen=True)
class MergedPage(Generic[R]):
    """
    A single page drawn from the concatenation of two origins.

    Attributes:
        content: Primary-role records followed by secondary-role records
        page_index: Zero-based index of this page
        page_size: Requested page size
        total_elements: Sum of both origins' counts at call time
        has_next: True if at least one record lies beyond this page
        has_previous: True for every page after the first
        sort: The sort the page was assembled with
    """

    content: list[R]
    page_index: int
    page_size: int
    total_elements: int
    has_next: bool
    has_previous: bool
    sort: Sort = field(default=DEFAULT_SORT)

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def has_content(self) -> bool:
        return bool(self.content)

    @property
    def total_pages(self) -> int:
        """Total number of pages at this page size."""
        if self.total_elements == 0:
            return 0
        return math.ceil(self.total_elements / self.page_size)

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    @property
    def is_last(self) -> bool:
        return not self.has_next

    def next_page_request(self) -> PageRequest | None:
        """Request for the following page, or None on the last page."""
        if not self.has_next:
            return None
        return PageRequest(self.page_index + 1, self.page_size, self.sort)

    def previous_page_request(self) -> PageRequest | None:
        """Request for the preceding page, or None on the first page."""
        if not self.has_previous:
            return None
        return PageRequest(self.page_index - 1, self.page_size, self.sort)

    def map(self, func: Callable[[R], U]) -> "MergedPage[U]":
        """Transform content using a mapping function, preserving pagination metadata."""
        return MergedPage(
            content=[func(item) for item in self.content],
            page_index=self.page_index,
            page_size=self.page_size,
            total_elements=self.total_elements,
            has_next=self.has_next,
            has_previous=self.has_previous,
            sort=self.sort,
        )
