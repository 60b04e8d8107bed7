"""
Unit test fixtures: factory-built models and the in-memory repository.
"""

import pytest

from tests.factories.model_factories import make_asset_fields, make_grid_asset
from tests.fakes.in_memory_repository import InMemoryGridAssetRepository


@pytest.fixture
def asset_fields():
    """Return a randomized, valid create payload."""
    return make_asset_fields()


@pytest.fixture
def grid_asset_data():
    """Return randomized stored asset data dict."""
    return make_grid_asset()


@pytest.fixture
def repository():
    """Empty in-memory repository."""
    return InMemoryGridAssetRepository()
