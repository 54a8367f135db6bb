"""
Pytest configuration and shared fixtures for hashtree tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

import importlib

_trees = importlib.import_module("fixtures.trees")

make_blocks = _trees.make_blocks
make_numbered_blocks = _trees.make_numbered_blocks
seven_leaf_digests = _trees.seven_leaf_digests

from hashtree.config import set_default_config
from hashtree.merkle import build_tree


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def abc_blocks():
    """Blocks b"a", b"b", b"c"."""
    return make_blocks("abc")


@pytest.fixture
def seven_blocks():
    """Blocks b"a" .. b"g"."""
    return make_blocks("abcdefg")


@pytest.fixture
def seven_tree(seven_blocks):
    """Tree over b"a" .. b"g"."""
    return build_tree(seven_blocks)


@pytest.fixture
def digests():
    """Expected node digests of the seven-block tree."""
    return seven_leaf_digests()


@pytest.fixture(autouse=True)
def reset_default_config():
    """Keep the process-wide default config from leaking between tests."""
    set_default_config(None)
    yield
    set_default_config(None)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
