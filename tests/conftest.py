"""
Shared pytest fixtures and configuration for pagesplice tests.

This module provides drive generators, origins over them, and a mocked boto3
client for the DynamoDB-backed origin.
"""

from collections.abc import Callable
from unittest.mock import MagicMock

import pytest

from pagesplice import ArchivedDrive, LiveDrive, Merger, SequenceOrigin
from tests.helpers.origins import RecordingOrigin


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")


def generate_live_drives(num_drives: int) -> list[LiveDrive]:
    """Live drives with timestamps 0..num_drives-1."""
    return [LiveDrive(timestamp=i) for i in range(num_drives)]


def generate_archived_drives(num_drives: int) -> list[ArchivedDrive]:
    """Archived drives with timestamps 0..num_drives-1 (same range as the live ones)."""
    return [ArchivedDrive(timestamp=i) for i in range(num_drives)]


@pytest.fixture
def merger() -> Merger:
    return Merger()


@pytest.fixture
def make_origins() -> Callable[[int, int], tuple[SequenceOrigin, SequenceOrigin]]:
    """
    Factory for a (live, archived) pair of in-memory origins.

    Usage:
        live, archived = make_origins(8, 8)
    """

    def _make(num_live: int, num_archived: int) -> tuple[SequenceOrigin, SequenceOrigin]:
        live = SequenceOrigin(generate_live_drives(num_live), name="live")
        archived = SequenceOrigin(generate_archived_drives(num_archived), name="archived")
        return live, archived

    return _make


@pytest.fixture
def make_recording_origins() -> Callable[[int, int], tuple[RecordingOrigin, RecordingOrigin]]:
    """Same as make_origins, but each origin logs its backing calls."""

    def _make(num_live: int, num_archived: int) -> tuple[RecordingOrigin, RecordingOrigin]:
        live = RecordingOrigin(generate_live_drives(num_live), name="live")
        archived = RecordingOrigin(generate_archived_drives(num_archived), name="archived")
        return live, archived

    return _make


@pytest.fixture
def mock_client():
    """
    Creates a fully mocked boto3 DynamoDB client.

    Tests configure `client.get_paginator.return_value.paginate`.
    """
    client = MagicMock()
    client.get_paginator.return_value = MagicMock()
    return client
