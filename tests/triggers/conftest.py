"""
Trigger test fixtures: real triggers over the in-memory repository.
"""

import json

import pytest

from services.grid_asset_service import GridAssetService
from tests.factories.http_factories import make_request
from tests.fakes.in_memory_repository import InMemoryGridAssetRepository
from triggers.grid_assets import GridAssetsTrigger


@pytest.fixture
def repository():
    return InMemoryGridAssetRepository()


@pytest.fixture
def trigger(repository):
    return GridAssetsTrigger(GridAssetService(repository))


@pytest.fixture
def call(trigger):
    """Send a request through handle_request; returns (status, json body)."""
    def _call(method, body=None, **kwargs):
        response = trigger.handle_request(make_request(method, body, **kwargs))
        return response.status_code, json.loads(response.get_body())
    return _call
