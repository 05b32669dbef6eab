"""Shared fixtures."""

from __future__ import annotations

import pytest
from loguru import logger

# 32 KB PRG, 8 KB CHR, vertical mirroring, mapper 0
SAMPLE_HEADER = bytes.fromhex("4E45531A020101000000000000000000")


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger.remove()


@pytest.fixture
def sample_bytes() -> bytes:
    return SAMPLE_HEADER
