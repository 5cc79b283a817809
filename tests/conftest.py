"""Shared test fixtures for the alternating disks tests."""

import pytest

from disks.core.row import DiskRow
from disks.utils.validation import parse_row


@pytest.fixture
def canonical_row():
    """Alternating row with three light disks: D L D L D L."""
    return DiskRow(3)


@pytest.fixture
def sorted_row():
    return parse_row("L L L D D D")


@pytest.fixture
def light_first_row():
    """Alternates, but starts with a light disk."""
    return parse_row("L D L D L D")
