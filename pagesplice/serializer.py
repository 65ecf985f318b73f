from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, cast
from uuid import UUID

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer

from .exceptions import ItemSerializationError


class ItemSerializer:
    """
    Converts between DynamoDB low-level JSON and plain Python values.

    Architectural Note:
    -------------------
    DynamoDB hands numbers back as 'Decimal'. Records built from them (pydantic
    models with int timestamps, for instance) expect plain ints and floats, so
    this class restores Python types on the way out and prepares values
    (float -> Decimal, datetime -> ISO string) on the way in.
    """

    def __init__(self) -> None:
        self._serializer = TypeSerializer()
        self._deserializer = TypeDeserializer()

    def to_dynamo_value(self, value: Any) -> dict[str, Any]:
        """
        Serializes a single scalar value to DynamoDB format.
        Used for the partition value in ExpressionAttributeValues.
        E.g.: 10.5 -> {'N': '10.5'}
        """
        clean_value = self._prepare_for_dynamo(value)
        try:
            result = cast(dict[str, Any], self._serializer.serialize(clean_value))
        except TypeError as e:
            raise ItemSerializationError(
                f"Failed to serialize value '{value}'. error={e!s}", original_error=e
            ) from e
        return result

    def from_dynamo(self, item: dict[str, Any]) -> dict[str, Any]:
        """Converts DynamoDB JSON format back to standard Python dict."""
        try:
            python_data = {k: self._deserializer.deserialize(v) for k, v in item.items()}
        except (TypeError, ValueError) as e:
            raise ItemSerializationError(
                f"Failed to deserialize item. error={e!s}", original_error=e
            ) from e
        return cast(dict[str, Any], self._restore_to_python(python_data))

    def _prepare_for_dynamo(self, value: Any) -> Any:
        """
        Prepares a key value for Boto3 TypeSerializer.

        Converts:
        - float -> Decimal (boto3 requirement)
        - datetime/date -> ISO 8601 string
        - UUID -> string
        - Enum -> value
        """
        if isinstance(value, float):
            # Via str to avoid float precision artifacts in the Decimal
            return Decimal(str(value))
        if isinstance(value, datetime):
            utc_offset = value.utcoffset()
            if utc_offset is not None and utc_offset.total_seconds() == 0:
                return value.replace(tzinfo=None).isoformat() + "Z"
            return value.isoformat()
        if isinstance(value, date):
            return value.isoformat()
        if isinstance(value, UUID):
            return str(value)
        if isinstance(value, Enum):
            return value.value
        return value

    def _restore_to_python(self, value: Any) -> Any:
        """
        Recursively restores DynamoDB values to Python-friendly types.

        Converts:
        - Decimal -> int (if whole number) or float
        """
        if isinstance(value, Decimal):
            if value % 1 == 0:
                return int(value)
            return float(value)
        if isinstance(value, list):
            return [self._restore_to_python(v) for v in value]
        if isinstance(value, dict):
            return {k: self._restore_to_python(v) for k, v in value.items()}
        return value
