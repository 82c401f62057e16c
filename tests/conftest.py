"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import random

import pytest


@pytest.fixture
def check_input() -> bytes:
    """Standard check input used by CRC catalogs."""
    return b"123456789"


@pytest.fixture
def random_payload() -> bytes:
    """10,000 bytes of reproducible pseudo-random data."""
    rng = random.Random(0xC0FFEE)
    return bytes(rng.getrandbits(8) for _ in range(10000))
