"""Pytest configuration and shared fixtures for klaw-well tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def rng():
    """A deterministically seeded Rand."""
    from klaw_well import Rand

    return Rand(20240611)


@pytest.fixture
def counting_source():
    """A counting wrapper around a seeded generator."""
    from klaw_well import Well1024a

    from tests.sources import CountingSource

    return CountingSource(Well1024a(99))
