from typing import Any, TypeVar

import boto3
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ._logging import logger, redact_key, window_context
from .config import DynamoOriginOptions, SortDirection
from .exceptions import ItemSerializationError
from .origin import Origin
from .pagination import OriginPage
from .serializer import ItemSerializer

M = TypeVar("M", bound=BaseModel)


class DynamoOrigin(Origin[Any]):
    """
    An origin over one partition of a DynamoDB table (or GSI).

    Records come back ordered by the table's sort key; the direction maps onto
    ScanIndexForward. DynamoDB has no offset, so a window is served by walking
    the query paginator, skipping `offset` items and stopping as soon as
    `count` items have been collected.

    Usage:
        options = DynamoOriginOptions(table_name="archived_drives", pk_name="vehicle_id")
        archived = DynamoOrigin(options, "vehicle-42", model=ArchivedDrive, name="archived")

    Architectural Note:
    -------------------
    The count and the window are two separate queries. If the partition is
    written to between them the merged page may shift by a record at the
    boundary; the merger logs this and carries on. A fetch never re-counts when
    the caller passes `known_total` or when the walk reaches the partition end.
    """

    def __init__(
        self,
        options: DynamoOriginOptions,
        partition_value: Any,
        client: Any | None = None,
        model: type[M] | None = None,
        name: str | None = None,
    ) -> None:
        super().__init__(name or options.table_name)
        self.options = options
        self.partition_value = partition_value
        self.client = client or boto3.client("dynamodb", region_name=options.region)
        self.model = model
        self.serializer = ItemSerializer()

    def _base_query(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "TableName": self.options.table_name,
            "KeyConditionExpression": "#pk = :pk",
            "ExpressionAttributeNames": {"#pk": self.options.pk_name},
            "ExpressionAttributeValues": {
                ":pk": self.serializer.to_dynamo_value(self.partition_value)
            },
        }
        if self.options.index_name:
            kwargs["IndexName"] = self.options.index_name
        return kwargs

    def _total_count(self) -> int:
        logger.debug(
            "Counting partition",
            extra={
                "origin": self.name,
                "table": self.options.table_name,
                "pk_hash": redact_key(self.partition_value),
            },
        )
        paginator = self.client.get_paginator("query")
        total = 0
        for page in paginator.paginate(Select="COUNT", **self._base_query()):
            total += page.get("Count", 0)
        return total

    def _fetch(
        self, offset: int, count: int, direction: SortDirection, known_total: int | None
    ) -> OriginPage[Any]:
        kwargs = self._base_query()
        kwargs["ScanIndexForward"] = direction.is_ascending

        logger.info(
            "Querying partition window",
            extra=window_context(
                self.name,
                offset,
                count,
                direction,
                table=self.options.table_name,
                index=self.options.index_name,
                pk_hash=redact_key(self.partition_value),
            ),
        )

        items: list[Any] = []
        skipped = 0
        exhausted = True
        paginator = self.client.get_paginator("query")
        for page in paginator.paginate(**kwargs):
            for raw in page.get("Items", []):
                if skipped < offset:
                    skipped += 1
                    continue
                items.append(self._to_record(raw))
                if len(items) >= count:
                    break
            if len(items) >= count:
                exhausted = False
                break

        # A walk that ran off the end has seen every item from offset 0
        if exhausted:
            total = skipped + len(items)
        elif known_total is not None:
            total = known_total
        else:
            total = self._total_count()
        return OriginPage(items=items, total_count=total)

    def _to_record(self, raw: dict[str, Any]) -> Any:
        """DynamoDB JSON -> Python dict -> model instance (when a model is set)."""
        data = self.serializer.from_dynamo(raw)
        if self.model is None:
            return data
        try:
            return self.model.model_validate(data)
        except PydanticValidationError as e:
            raise ItemSerializationError(
                f"Item from '{self.name}' does not match {self.model.__name__}: {e}",
                original_error=e,
            ) from e
