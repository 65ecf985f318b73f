from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError


class PageSpliceError(Exception):
    """Base exception for all pagesplice errors."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class InvalidPageRequest(PageSpliceError):
    """Raised when a caller asks for a page that cannot exist (bad size or index)."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.field = field
        self.value = value


class OriginUnavailable(PageSpliceError):
    """Raised when an origin cannot report its count or serve a window."""

    def __init__(
        self,
        origin_name: str,
        message: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        msg = f"Origin '{origin_name}' is unavailable"
        if message:
            msg += f": {message}"
        super().__init__(msg, original_error)
        self.origin_name = origin_name


class ItemSerializationError(PageSpliceError):
    """Raised when a DynamoDB item or key value cannot be converted."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message, original_error)


@contextmanager
def handle_origin_errors(origin_name: str) -> Generator[None, None, None]:
    """
    Context manager that turns any failure of an origin call into OriginUnavailable.

    Library errors (e.g. a serialization failure already wrapped) pass through
    untouched. botocore ClientError keeps its error code in the message.

    Usage:
        with handle_origin_errors("archived"):
            client.query(...)
    """
    try:
        yield
    except PageSpliceError:
        raise
    except ClientError as e:
        error_code = e.response.get("Error", {}).get("Code", "Unknown")
        error_message = e.response.get("Error", {}).get("Message", str(e))
        raise OriginUnavailable(
            origin_name, message=f"DynamoDB error ({error_code}): {error_message}", original_error=e
        ) from e
    except BotoCoreError as e:
        raise OriginUnavailable(origin_name, message=str(e), original_error=e) from e
    except Exception as e:
        raise OriginUnavailable(
            origin_name, message=f"{type(e).__name__}: {e}", original_error=e
        ) from e
