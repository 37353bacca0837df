"""Shared test fixtures."""

import pytest

from pyextduration import Duration


@pytest.fixture
def hms_duration():
    """1h 23m 45s."""
    return Duration(5025)


@pytest.fixture
def mixed_duration():
    """1h 2m 3s 250ms."""
    return Duration(3723, 250_000_000)
