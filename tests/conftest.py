"""
Pytest configuration to ensure the project root is on sys.path for imports.
"""

import sys
from pathlib import Path

import pytest
import structlog

ROOT = Path(__file__).resolve().parent.parent

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from terror.core.config import FeatureConfig, get_config  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def _reset_config():
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def all_features() -> FeatureConfig:
    return FeatureConfig.all()


@pytest.fixture
def no_features() -> FeatureConfig:
    return FeatureConfig.none()
