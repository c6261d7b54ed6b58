"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import src...' works, and
provides shared fixtures for deterministic date generation.
"""
import sys
from datetime import date
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from src.config.settings import reset_settings
from src.utils.rng import RangeSampler, reset_default_sampler
from src.utils.time import FrozenClock


@pytest.fixture
def seeded_sampler():
    """Sampler with a fixed seed so failures are reproducible."""
    return RangeSampler(seed=20240401)


@pytest.fixture
def frozen_clock():
    """Clock frozen to 2000-01-01."""
    return FrozenClock(date(2000, 1, 1))


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Each test starts from default settings and a fresh default sampler."""
    monkeypatch.delenv("DATEJUGGLER_SEED", raising=False)
    monkeypatch.delenv("DATEJUGGLER_LOG_LEVEL", raising=False)
    reset_settings()
    reset_default_sampler()
    yield
    reset_settings()
    reset_default_sampler()
