"""
FastAPI Integration Example

Serves a vehicle's merged drive history as a paginated endpoint. Invalid page
parameters map to 400, an unreachable origin to 503.
"""

from fastapi import FastAPI, HTTPException, Query, status
from pydantic import BaseModel

from pagesplice import (
    ArchivedDrive,
    DynamoOrigin,
    DynamoOriginOptions,
    InvalidPageRequest,
    LiveDrive,
    Merger,
    OriginUnavailable,
    PageRequest,
    translate,
)


class DrivePage(BaseModel):
    """Response model for one page of drives"""

    content: list[LiveDrive]
    page: int
    size: int
    total_elements: int
    total_pages: int
    has_next: bool
    has_previous: bool


app = FastAPI(title="pagesplice + FastAPI Example")
merger = Merger()

LIVE_OPTIONS = DynamoOriginOptions(table_name="LiveDrives", pk_name="vehicle_id")
ARCHIVED_OPTIONS = DynamoOriginOptions(table_name="ArchivedDrives", pk_name="vehicle_id")


@app.get("/vehicles/{vehicle_id}/drives", response_model=DrivePage)
def list_drives(
    vehicle_id: str,
    page: int = 0,
    size: int = 20,
    direction: str = Query(default="desc", pattern="^(asc|desc|ASC|DESC)$"),
) -> DrivePage:
    """List a vehicle's drives, live and archived, in one page stream"""
    live = DynamoOrigin(LIVE_OPTIONS, vehicle_id, model=LiveDrive, name="live")
    archived = DynamoOrigin(ARCHIVED_OPTIONS, vehicle_id, model=ArchivedDrive, name="archived")

    try:
        request = PageRequest.of(page, size, direction)
        result = merger.merge_page(live, archived, lambda drive: drive, translate, request)
    except InvalidPageRequest as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    except OriginUnavailable as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message
        ) from e

    return DrivePage(
        content=result.content,
        page=result.page_index,
        size=result.page_size,
        total_elements=result.total_elements,
        total_pages=result.total_pages,
        has_next=result.has_next,
        has_previous=result.has_previous,
    )


# Run with: uvicorn main:app --reload
# Visit: http://localhost:8000/docs
