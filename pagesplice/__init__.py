from .config import (
    DEFAULT_SORT,
    DEFAULT_SORT_DIRECTION,
    DEFAULT_SORT_FIELD,
    DynamoOriginOptions,
    Sort,
    SortDirection,
)
from .dynamo import DynamoOrigin
from .exceptions import (
    InvalidPageRequest,
    ItemSerializationError,
    OriginUnavailable,
    PageSpliceError,
)
from .merger import Merger, assign_roles, compute_windows, merge_page
from .origin import Origin, QueryOrigin, SequenceOrigin
from .pagination import MergedPage, OriginPage, OriginWindow, PageRequest
from .records import ArchivedDrive, DriveType, LiveDrive, to_archived, translate

__all__ = [
    # Merging
    "Merger",
    "merge_page",
    "assign_roles",
    "compute_windows",
    # Pagination types
    "PageRequest",
    "OriginWindow",
    "OriginPage",
    "MergedPage",
    # Sorting
    "Sort",
    "SortDirection",
    "DEFAULT_SORT",
    "DEFAULT_SORT_FIELD",
    "DEFAULT_SORT_DIRECTION",
    # Origins
    "Origin",
    "SequenceOrigin",
    "QueryOrigin",
    "DynamoOrigin",
    "DynamoOriginOptions",
    # Records
    "DriveType",
    "LiveDrive",
    "ArchivedDrive",
    "translate",
    "to_archived",
    # Exceptions
    "PageSpliceError",
    "InvalidPageRequest",
    "OriginUnavailable",
    "ItemSerializationError",
]
