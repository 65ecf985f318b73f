"""
Drive records served by the live and archived origins.

A drive is live while ongoing and archived once it has ended. Both shapes
carry a `type` tag; translation between them keeps the tag of the origin the
record came from, so a merged page shows the provenance of every entry.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DriveType(str, Enum):
    LIVE = "LIVE"
    ARCHIVED = "ARCHIVED"


class LiveDrive(BaseModel):
    """An ongoing drive."""

    model_config = ConfigDict(frozen=True)

    type: DriveType = DriveType.LIVE
    timestamp: int = Field(ge=0)


class ArchivedDrive(BaseModel):
    """A drive that has ended and been archived."""

    model_config = ConfigDict(frozen=True)

    type: DriveType = DriveType.ARCHIVED
    timestamp: int = Field(ge=0)


def translate(archived_drive: ArchivedDrive | None) -> LiveDrive | None:
    """
    Converts an archived drive into the live shape.

    The result is tagged ARCHIVED so that callers can tell translated
    records apart from genuine live ones.
    """
    if archived_drive is None:
        return None
    return LiveDrive(type=DriveType.ARCHIVED, timestamp=archived_drive.timestamp)


def to_archived(live_drive: LiveDrive | None) -> ArchivedDrive | None:
    """Converts a live drive into the archived shape, tagged LIVE."""
    if live_drive is None:
        return None
    return ArchivedDrive(type=DriveType.LIVE, timestamp=live_drive.timestamp)
