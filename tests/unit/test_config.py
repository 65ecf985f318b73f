"""
Unit tests for sort and origin configuration.
"""

import pytest

from pagesplice import (
    DEFAULT_SORT,
    DEFAULT_SORT_DIRECTION,
    DEFAULT_SORT_FIELD,
    DynamoOriginOptions,
    InvalidPageRequest,
    Sort,
    SortDirection,
)


@pytest.mark.unit
class TestSortDirection:
    """Test SortDirection parsing."""

    @pytest.mark.parametrize("value", ["asc", "ASC", " Ascending ", SortDirection.ASC])
    def test_parse_ascending(self, value) -> None:
        assert SortDirection.parse(value) is SortDirection.ASC

    @pytest.mark.parametrize("value", ["desc", "DESC", "descending", SortDirection.DESC])
    def test_parse_descending(self, value) -> None:
        assert SortDirection.parse(value) is SortDirection.DESC

    def test_parse_unknown(self) -> None:
        with pytest.raises(InvalidPageRequest) as exc_info:
            SortDirection.parse("up")
        assert exc_info.value.field == "sort_direction"

    def test_is_ascending(self) -> None:
        assert SortDirection.ASC.is_ascending is True
        assert SortDirection.DESC.is_ascending is False


@pytest.mark.unit
class TestSort:
    """Test the Sort dataclass and defaults."""

    def test_defaults(self) -> None:
        assert DEFAULT_SORT_FIELD == "timestamp"
        assert DEFAULT_SORT_DIRECTION is SortDirection.DESC
        assert DEFAULT_SORT == Sort("timestamp", SortDirection.DESC)

    def test_direction_defaults_to_descending(self) -> None:
        assert Sort("ended_at").direction is SortDirection.DESC

    @pytest.mark.parametrize("value", ["asc", "ASC", "ascending"])
    def test_string_direction_is_parsed(self, value) -> None:
        sort = Sort("timestamp", value)
        assert sort.direction is SortDirection.ASC
        assert sort == Sort("timestamp", SortDirection.ASC)

    def test_unknown_string_direction(self) -> None:
        with pytest.raises(InvalidPageRequest) as exc_info:
            Sort("timestamp", "sideways")
        assert exc_info.value.field == "sort_direction"
        assert exc_info.value.value == "sideways"


@pytest.mark.unit
class TestDynamoOriginOptions:
    """Test DynamoOriginOptions dataclass."""

    def test_defaults(self) -> None:
        options = DynamoOriginOptions(table_name="live_drives", pk_name="vehicle_id")

        assert options.table_name == "live_drives"
        assert options.pk_name == "vehicle_id"
        assert options.sk_name == "timestamp"
        assert options.index_name is None
        assert options.region == "us-east-1"

    def test_custom_index_and_region(self) -> None:
        options = DynamoOriginOptions(
            table_name="drives",
            pk_name="driver_id",
            sk_name="ended_at",
            index_name="driver-index",
            region="eu-south-1",
        )

        assert options.index_name == "driver-index"
        assert options.region == "eu-south-1"

    def test_equality(self) -> None:
        options1 = DynamoOriginOptions(table_name="t", pk_name="pk")
        options2 = DynamoOriginOptions(table_name="t", pk_name="pk")
        options3 = DynamoOriginOptions(table_name="other", pk_name="pk")

        assert options1 == options2
        assert options1 != options3
