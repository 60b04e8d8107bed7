"""
Console test fixtures: controllers talking to the real trigger through
httpx.MockTransport, backed by the in-memory repository.
"""

import httpx
import pytest

from console import GridAssetApiClient, build_console
from services.grid_asset_service import GridAssetService
from tests.factories.http_factories import ADMIN_PRINCIPAL, trigger_transport
from tests.fakes.in_memory_repository import InMemoryGridAssetRepository
from triggers.grid_assets import GridAssetsTrigger

BASE_URL = "http://testserver/api"


@pytest.fixture
def repository():
    return InMemoryGridAssetRepository()


@pytest.fixture
def request_log():
    return []


@pytest.fixture
def trigger(repository):
    return GridAssetsTrigger(GridAssetService(repository))


@pytest.fixture
def api_client(trigger, request_log):
    http = httpx.Client(transport=trigger_transport(trigger, request_log))
    client = GridAssetApiClient(BASE_URL, principal=ADMIN_PRINCIPAL, client=http)
    yield client
    http.close()


class Dialogs:
    """Records confirm/alert calls; answers confirms with `answer`."""

    def __init__(self):
        self.answer = True
        self.confirms = []
        self.alerts = []

    def confirm(self, message):
        self.confirms.append(message)
        return self.answer

    def alert(self, message):
        self.alerts.append(message)


@pytest.fixture
def dialogs():
    return Dialogs()


@pytest.fixture
def views(api_client, dialogs):
    return build_console(api_client, confirm=dialogs.confirm, alert=dialogs.alert)
