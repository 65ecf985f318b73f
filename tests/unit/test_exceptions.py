"""
Unit tests for the exception hierarchy and handle_origin_errors.

These tests verify that every origin failure surfaces as OriginUnavailable,
with botocore ClientError details kept in the message.
"""

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from pagesplice.exceptions import (
    InvalidPageRequest,
    ItemSerializationError,
    OriginUnavailable,
    PageSpliceError,
    handle_origin_errors,
)


def client_error(code: str, message: str = "Test error") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, "Query")


class TestExceptionHierarchy:
    """Test the exception class hierarchy and instantiation."""

    def test_base_class(self):
        error = PageSpliceError("Test message")
        assert isinstance(error, Exception)
        assert error.message == "Test message"
        assert error.original_error is None

    def test_invalid_page_request(self):
        error = InvalidPageRequest("page size must be positive", field="page_size", value=0)
        assert isinstance(error, PageSpliceError)
        assert error.field == "page_size"
        assert error.value == 0

    def test_origin_unavailable_message(self):
        error = OriginUnavailable("archived", message="connection refused")
        assert isinstance(error, PageSpliceError)
        assert error.origin_name == "archived"
        assert str(error) == "Origin 'archived' is unavailable: connection refused"

    def test_origin_unavailable_without_detail(self):
        assert str(OriginUnavailable("live")) == "Origin 'live' is unavailable"

    def test_item_serialization_error(self):
        original = TypeError("bad")
        error = ItemSerializationError("Serialization failed", original_error=original)
        assert isinstance(error, PageSpliceError)
        assert error.original_error is original


class TestHandleOriginErrors:
    """Test the handle_origin_errors context manager."""

    def test_no_error_passes_through(self):
        with handle_origin_errors("live"):
            result = 1 + 1
        assert result == 2

    @pytest.mark.parametrize(
        "code",
        ["ResourceNotFoundException", "ProvisionedThroughputExceededException", "Weird"],
    )
    def test_client_error_translated(self, code):
        with pytest.raises(OriginUnavailable) as exc_info:
            with handle_origin_errors("archived"):
                raise client_error(code, "boom")

        assert exc_info.value.origin_name == "archived"
        assert code in str(exc_info.value)
        assert "boom" in str(exc_info.value)
        assert isinstance(exc_info.value.original_error, ClientError)

    def test_botocore_error_translated(self):
        with pytest.raises(OriginUnavailable) as exc_info:
            with handle_origin_errors("archived"):
                raise EndpointConnectionError(endpoint_url="http://localhost:4566")

        assert isinstance(exc_info.value.__cause__, EndpointConnectionError)

    def test_arbitrary_error_translated(self):
        with pytest.raises(OriginUnavailable, match="ConnectionError: refused"):
            with handle_origin_errors("live"):
                raise ConnectionError("refused")

    def test_library_errors_not_rewrapped(self):
        with pytest.raises(ItemSerializationError):
            with handle_origin_errors("live"):
                raise ItemSerializationError("bad item")
