"""
Drive History Example

Pages through one vehicle's drives, newest first: ongoing drives live in one
DynamoDB table, ended drives in another. Both tables use vehicle_id as the
partition key and timestamp as the sort key.
"""

import logging

from pagesplice import (
    ArchivedDrive,
    DynamoOrigin,
    DynamoOriginOptions,
    LiveDrive,
    Merger,
    PageRequest,
    translate,
)

logging.basicConfig(level=logging.INFO)

live = DynamoOrigin(
    DynamoOriginOptions(table_name="LiveDrives", pk_name="vehicle_id"),
    "vehicle-42",
    model=LiveDrive,
    name="live",
)
archived = DynamoOrigin(
    DynamoOriginOptions(table_name="ArchivedDrives", pk_name="vehicle_id"),
    "vehicle-42",
    model=ArchivedDrive,
    name="archived",
)

merger = Merger()

# Newest first: every live drive, then every archived one
request: PageRequest | None = PageRequest.of(0, 10)
while request is not None:
    page = merger.merge_page(live, archived, lambda drive: drive, translate, request)
    print(f"\nPage {page.page_index + 1}/{page.total_pages} ({page.total_elements} drives)")
    for drive in page.content:
        print(f"  - {drive.timestamp} [{drive.type.value}]")
    request = page.next_page_request()

# Oldest first: archived drives lead
oldest_first = PageRequest.of(0, 5, "asc")
page = merger.merge_page(live, archived, lambda drive: drive, translate, oldest_first)
print(f"\nOldest drives: {[drive.timestamp for drive in page.content]}")
