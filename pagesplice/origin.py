"""
The contract every origin honours, plus two ready-made origins.

An origin is an independently paginated, sorted record source. The merger only
ever asks it two things: how many records it holds, and a contiguous slice of
them in a given direction.
"""

import operator
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

from ._logging import logger, window_context
from .config import DEFAULT_SORT_DIRECTION, DEFAULT_SORT_FIELD, SortDirection
from .exceptions import handle_origin_errors
from .pagination import OriginPage, OriginWindow

T = TypeVar("T")


class Origin(ABC, Generic[T]):
    """
    Base class for a paginated, sorted record source.

    Subclasses implement `_total_count` and `_fetch`. The public methods add
    argument checks, the zero-count short circuit, logging, and the translation
    of any backing-store failure into OriginUnavailable.

    A caller that has just counted the origin may pass that count as
    `known_total`. Origins that cannot report their size as a side effect of a
    fetch (DynamoDB, for one) then reuse it instead of counting again.
    """

    def __init__(self, name: str) -> None:
        self.name = name

    def total_count(self) -> int:
        """
        Current number of records in this origin.

        Raises:
            OriginUnavailable: If the backing store cannot be reached
        """
        with handle_origin_errors(self.name):
            total = self._total_count()
        logger.debug("Counted origin", extra={"origin": self.name, "total_count": total})
        return total

    def fetch(
        self,
        offset: int,
        count: int,
        direction: SortDirection = DEFAULT_SORT_DIRECTION,
        known_total: int | None = None,
    ) -> OriginPage[T]:
        """
        Returns up to `count` records starting at `offset`, ordered by `direction`.

        An offset past the end yields an empty page, not an error.
        A count of 0 yields an empty page without querying for records; its
        total is `known_total` when given, otherwise a fresh total_count().

        Raises:
            ValueError: If offset or count is negative
            OriginUnavailable: If the backing store cannot be reached
        """
        if offset < 0 or count < 0:
            raise ValueError(
                f"offset and count must be non-negative, got offset={offset} count={count}"
            )

        if count == 0:
            if known_total is not None:
                return OriginPage.empty(known_total)
            return OriginPage.empty(self.total_count())

        logger.debug("Fetching window", extra=window_context(self.name, offset, count, direction))

        with handle_origin_errors(self.name):
            page = self._fetch(offset, count, direction, known_total)

        logger.debug(
            "Window fetched",
            extra={"origin": self.name, "fetched": page.count, "total_count": page.total_count},
        )
        return page

    def fetch_window(
        self,
        window: OriginWindow,
        direction: SortDirection = DEFAULT_SORT_DIRECTION,
        known_total: int | None = None,
    ) -> OriginPage[T]:
        """Same as fetch(), taking the slice as an OriginWindow."""
        return self.fetch(window.offset, window.count, direction, known_total)

    @abstractmethod
    def _total_count(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def _fetch(
        self, offset: int, count: int, direction: SortDirection, known_total: int | None
    ) -> OriginPage[T]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class SequenceOrigin(Origin[T]):
    """
    An origin over records already held in memory.

    Records are kept sorted ascending by `key`; descending windows are read
    from the tail, so only the requested slice is ever copied.

    Usage:
        live = SequenceOrigin([LiveDrive(timestamp=t) for t in range(8)], name="live")
        live.fetch(0, 3, SortDirection.DESC).items   # timestamps 7, 6, 5
    """

    def __init__(
        self,
        records: Iterable[T],
        key: Callable[[T], Any] | None = None,
        name: str = "sequence",
    ) -> None:
        super().__init__(name)
        self._key = key or operator.attrgetter(DEFAULT_SORT_FIELD)
        self._records = sorted(records, key=self._key)

    def _total_count(self) -> int:
        return len(self._records)

    def _fetch(
        self, offset: int, count: int, direction: SortDirection, known_total: int | None
    ) -> OriginPage[T]:
        total = len(self._records)
        if offset >= total:
            return OriginPage.empty(total)

        if direction.is_ascending:
            items = self._records[offset : offset + count]
        else:
            # Descending index i maps to ascending index total - 1 - i
            stop = total - offset
            start = max(stop - count, 0)
            items = self._records[start:stop][::-1]

        return OriginPage(items=items, total_count=total)


class QueryOrigin(Origin[T]):
    """
    Adapts a repository-style query function into an origin.

    `query(offset, count, direction)` must return an OriginPage whose
    total_count is the size of the whole result set. When no `counter` is given,
    the total comes from a zero-size probe of the query.

    Usage:
        archived = QueryOrigin(repo.find_archived, counter=repo.count_archived, name="archived")
    """

    def __init__(
        self,
        query: Callable[[int, int, SortDirection], OriginPage[T]],
        counter: Callable[[], int] | None = None,
        name: str = "query",
    ) -> None:
        super().__init__(name)
        self._query = query
        self._counter = counter

    def _total_count(self) -> int:
        if self._counter is not None:
            return self._counter()
        return self._query(0, 0, DEFAULT_SORT_DIRECTION).total_count

    def _fetch(
        self, offset: int, count: int, direction: SortDirection, known_total: int | None
    ) -> OriginPage[T]:
        return self._query(offset, count, direction)
