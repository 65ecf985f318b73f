from dataclasses import dataclass
from enum import Enum

from .exceptions import InvalidPageRequest


class SortDirection(str, Enum):
    """Direction of the single sort applied to both origins."""

    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, value: "SortDirection | str") -> "SortDirection":
        """
        Accepts a SortDirection or a case-insensitive name.

        "asc", "ascending", "DESC" and "descending" are all understood.

        Raises:
            InvalidPageRequest: If the value names no direction
        """
        if isinstance(value, SortDirection):
            return value
        normalized = str(value).strip().upper()
        if normalized in ("ASC", "ASCENDING"):
            return cls.ASC
        if normalized in ("DESC", "DESCENDING"):
            return cls.DESC
        raise InvalidPageRequest(
            f"Unknown sort direction '{value}'", field="sort_direction", value=value
        )

    @property
    def is_ascending(self) -> bool:
        return self is SortDirection.ASC


@dataclass(frozen=True)
class Sort:
    """
    A single sort criterion: field name plus direction.

    Only one Sort governs a request; multi-field sorting is not supported.
    The direction may be given as a string; it is parsed on construction.

    Raises:
        InvalidPageRequest: If the direction names no known direction
    """

    field: str
    direction: SortDirection = SortDirection.DESC

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", SortDirection.parse(self.direction))


DEFAULT_SORT_FIELD = "timestamp"
DEFAULT_SORT_DIRECTION = SortDirection.DESC
DEFAULT_SORT = Sort(DEFAULT_SORT_FIELD, DEFAULT_SORT_DIRECTION)


@dataclass(frozen=True)
class DynamoOriginOptions:
    """
    Where a DynamoOrigin reads its records from.

    The origin queries a single partition (pk_name = value) and relies on the
    table's (or index's) sort key for ordering.
    """

    table_name: str
    pk_name: str
    sk_name: str = DEFAULT_SORT_FIELD
    index_name: str | None = None
    region: str = "us-east-1"
