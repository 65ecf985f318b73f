"""
Windowed merging of two paginated origins into one contiguous result.

The two origins are never interleaved by value. For a descending sort the
first-declared origin (e.g. live records) wholly precedes the second (e.g.
archived records); for an ascending sort the order flips. A page of the
combined result therefore needs at most one window from each origin, and the
only interesting case is the page that straddles the boundary between them.

    global index:  0 ......... size_a-1 | size_a ......... total-1
                   [   primary role    ] [   secondary role      ]
                              [ page straddling the boundary ]
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from ._logging import logger
from .config import DEFAULT_SORT, Sort, SortDirection
from .exceptions import InvalidPageRequest
from .origin import Origin
from .pagination import MergedPage, OriginWindow, validate_page_bounds

P = TypeVar("P")
S = TypeVar("S")
R = TypeVar("R")


class _Role(Generic[R]):
    """An origin paired with the function mapping its records to the result type."""

    __slots__ = ("origin", "mapper")

    def __init__(self, origin: Origin[Any], mapper: Callable[[Any], R]) -> None:
        self.origin = origin
        self.mapper = mapper


def assign_roles(
    direction: SortDirection, first: Any, second: Any
) -> tuple[Any, Any]:
    """
    Orders the two declared origins for a sort direction.

    The first-declared origin holds the sort-greater records, so it leads a
    descending page and trails an ascending one.
    """
    if direction is SortDirection.ASC:
        return second, first
    return first, second


def compute_windows(
    size_a: int, page_index: int, page_size: int
) -> tuple[OriginWindow, OriginWindow]:
    """
    Derives the slice to request from the leading (A) and trailing (B) origin.

    Only the size of the leading origin matters: the trailing origin is asked
    for whatever the page still needs, starting where the leading one ran out.
    A window past the end of B is still issued and comes back empty.
    """
    global_start = page_index * page_size
    global_end = global_start + page_size - 1

    if global_start >= size_a:
        return OriginWindow.EMPTY, OriginWindow(global_start - size_a, page_size)

    if global_end < size_a:
        return OriginWindow(global_start, page_size), OriginWindow.EMPTY

    remaining_a = size_a - global_start
    return OriginWindow(global_start, remaining_a), OriginWindow(0, page_size - remaining_a)


class Merger:
    """
    Assembles pages over a primary and a secondary origin.

    The merger holds no per-call state, so one instance can serve any number of
    concurrent callers. Every call re-counts both origins; nothing is cached.

    Usage:
        merger = Merger()
        page = merger.merge_page(
            live_origin,
            archived_origin,
            lambda drive: drive,
            translate,
            PageRequest.of(0, 20),
        )
        while page.has_next:
            page = merger.merge_page(..., page.next_page_request())
    """

    def __init__(self, default_sort: Sort = DEFAULT_SORT) -> None:
        self.default_sort = default_sort

    def merge_page(
        self,
        primary_origin: Origin[P],
        secondary_origin: Origin[S],
        primary_map: Callable[[P], R],
        secondary_map: Callable[[S], R],
        request: Any,
    ) -> MergedPage[R]:
        """
        Returns one page of the concatenation of both origins.

        Args:
            primary_origin: Origin whose records lead a descending sort (e.g. live)
            secondary_origin: Origin whose records lead an ascending sort (e.g. archived)
            primary_map: Converts a primary record into the result type
            secondary_map: Converts a secondary record into the result type
            request: A PageRequest, or any object with page_index, page_size and
                either sort or sort_direction (the default sort applies otherwise)

        Raises:
            InvalidPageRequest: If page_size < 1 or page_index < 0; no origin is contacted
            OriginUnavailable: If either origin fails; no partial page is returned
        """
        page_index = getattr(request, "page_index", None)
        page_size = getattr(request, "page_size", None)
        try:
            validate_page_bounds(page_index, page_size)
        except InvalidPageRequest as e:
            logger.error(
                "Rejected page request",
                extra={"page_index": page_index, "page_size": page_size, "reason": e.message},
            )
            raise

        sort = self._resolve_sort(request)
        direction = sort.direction

        role_a, role_b = assign_roles(
            direction,
            _Role(primary_origin, primary_map),
            _Role(secondary_origin, secondary_map),
        )

        size_a = role_a.origin.total_count()
        size_b = role_b.origin.total_count()
        total = size_a + size_b

        window_a, window_b = compute_windows(size_a, page_index, page_size)

        logger.debug(
            "Computed origin windows",
            extra={
                "page_index": page_index,
                "page_size": page_size,
                "direction": direction.value,
                "leading_origin": role_a.origin.name,
                "window_a": (window_a.offset, window_a.count),
                "trailing_origin": role_b.origin.name,
                "window_b": (window_b.offset, window_b.count),
            },
        )

        content = self._collect(role_a, window_a, size_a, direction)
        content.extend(self._collect(role_b, window_b, size_b, direction))

        global_end = page_index * page_size + page_size - 1
        page = MergedPage(
            content=content,
            page_index=page_index,
            page_size=page_size,
            total_elements=total,
            has_next=global_end + 1 < total,
            has_previous=page_index > 0,
            sort=sort,
        )

        logger.info(
            "Merged page assembled",
            extra={
                "page_index": page_index,
                "page_size": page_size,
                "direction": direction.value,
                "number_of_elements": page.number_of_elements,
                "total_elements": total,
                "has_next": page.has_next,
            },
        )
        return page

    def _resolve_sort(self, request: Any) -> Sort:
        """Sort carried by the request, falling back to a bare direction, then the default."""
        sort = getattr(request, "sort", None)
        if sort is not None:
            return sort
        direction = getattr(request, "sort_direction", None)
        if direction is not None:
            return Sort(self.default_sort.field, SortDirection.parse(direction))
        return self.default_sort

    def _collect(
        self,
        role: _Role[R],
        window: OriginWindow,
        probed_total: int,
        direction: SortDirection,
    ) -> list[R]:
        """Fetches one window (unless empty) and maps its records in order."""
        if window.is_empty:
            return []

        fetched = role.origin.fetch_window(window, direction, known_total=probed_total)

        if fetched.total_count != probed_total:
            # Origin changed between count and fetch; the window may be shifted
            logger.warning(
                "Origin count changed during merge",
                extra={
                    "origin": role.origin.name,
                    "probed_total": probed_total,
                    "fetched_total": fetched.total_count,
                },
            )

        return [role.mapper(item) for item in fetched.items]


_default_merger = Merger()


def merge_page(
    primary_origin: Origin[P],
    secondary_origin: Origin[S],
    primary_map: Callable[[P], R],
    secondary_map: Callable[[S], R],
    request: Any,
) -> MergedPage[R]:
    """Module-level shortcut for Merger().merge_page() with the default sort."""
    return _default_merger.merge_page(
        primary_origin, secondary_origin, primary_map, secondary_map, request
    )
