"""
Store handle and managed identity token tests: fake pool factory and
fake azure-identity credential, no database.
"""

import time
from unittest.mock import MagicMock

import pytest
from azure.core.credentials import AccessToken
from azure.core.exceptions import ClientAuthenticationError

from config import DatabaseConfig
from exceptions import ConfigurationError
from infrastructure.auth import postgres_auth
from infrastructure.auth.postgres_auth import (
    POSTGRES_SCOPE,
    get_postgres_conninfo,
    get_postgres_token,
    reset_token_cache,
    token_expires_soon,
)
from infrastructure.connection_pool import POOL_MAX_LIFETIME, StoreHandle
from infrastructure.factory import RepositoryFactory


@pytest.fixture(autouse=True)
def clear_token_cache():
    reset_token_cache()
    yield
    reset_token_cache()


def _db_config(**overrides):
    values = dict(host="db.example.org", database="grid", user="grid_admin", password="pw")
    values.update(overrides)
    return DatabaseConfig(**values)


class FakeCredential:
    def __init__(self, lifetime=3600):
        self.lifetime = lifetime
        self.scopes = []

    def get_token(self, *scopes):
        self.scopes.append(scopes)
        return AccessToken(f"token-{len(self.scopes)}", int(time.time()) + self.lifetime)


# ============================================================================
# StoreHandle
# ============================================================================

class TestStoreHandle:

    def test_open_creates_pool_once(self):
        factory = MagicMock()
        store = StoreHandle(_db_config(pool_min_size=2, pool_max_size=5), pool_factory=factory)
        assert store.open() is store
        store.open()
        factory.assert_called_once()
        kwargs = factory.call_args.kwargs
        assert kwargs["conninfo"].endswith("user=grid_admin password=pw")
        assert (kwargs["min_size"], kwargs["max_size"]) == (2, 5)
        assert kwargs["max_lifetime"] == POOL_MAX_LIFETIME

    def test_connection_requires_open_handle(self):
        store = StoreHandle(_db_config(), pool_factory=MagicMock())
        with pytest.raises(ConfigurationError):
            with store.connection():
                pass

    def test_connection_borrows_from_pool(self):
        factory = MagicMock()
        pool = factory.return_value
        conn = pool.connection.return_value.__enter__.return_value
        with StoreHandle(_db_config(), pool_factory=factory) as store:
            with store.connection() as borrowed:
                assert borrowed is conn
        pool.close.assert_called_once()
        assert store.is_open is False

    def test_close_is_idempotent(self):
        factory = MagicMock()
        store = StoreHandle(_db_config(), pool_factory=factory).open()
        store.close()
        store.close()
        factory.return_value.close.assert_called_once()

    def test_stats(self):
        factory = MagicMock()
        factory.return_value.get_stats.return_value = {"pool_size": 1}
        store = StoreHandle(_db_config(), pool_factory=factory)
        assert store.get_stats() == {"open": False}
        store.open()
        assert store.get_stats() == {"pool_size": 1, "open": True}

    def test_managed_identity_pool_recreated_near_expiry(self):
        factory = MagicMock()
        credential = FakeCredential(lifetime=60)
        store = StoreHandle(_db_config(use_managed_identity=True), pool_factory=factory, credential=credential)
        store.open()
        with store.connection():
            pass
        # token lives 60s, inside the refresh buffer
        assert factory.call_count == 2
        assert "password=token-2" in factory.call_args.kwargs["conninfo"]

    def test_factory_rejects_closed_store(self):
        store = StoreHandle(_db_config(), pool_factory=MagicMock())
        with pytest.raises(ConfigurationError):
            RepositoryFactory.create_grid_asset_repository(store, _db_config())

    def test_factory_builds_repository(self):
        store = StoreHandle(_db_config(), pool_factory=MagicMock()).open()
        repo = RepositoryFactory.create_grid_asset_repository(
            store, _db_config(app_schema="registry", grid_asset_table="assets")
        )
        assert (repo.schema_name, repo.table) == ("registry", "assets")


# ============================================================================
# Managed identity token
# ============================================================================

class TestPostgresToken:

    def test_disabled_returns_none(self):
        assert get_postgres_token(_db_config(), credential=FakeCredential()) is None

    def test_token_cached(self):
        config = _db_config(use_managed_identity=True)
        credential = FakeCredential()
        assert get_postgres_token(config, credential) == "token-1"
        assert get_postgres_token(config, credential) == "token-1"
        assert credential.scopes == [(POSTGRES_SCOPE,)]
        assert token_expires_soon() is False

    def test_conninfo_appends_token(self):
        config = _db_config(use_managed_identity=True, managed_identity_admin_name="grid-mi")
        conninfo = get_postgres_conninfo(config, FakeCredential())
        assert conninfo.endswith("user=grid-mi sslmode=require password=token-1")

    def test_password_conninfo_unchanged(self):
        config = _db_config()
        assert get_postgres_conninfo(config) == config.connection_string

    def test_authentication_failure_propagates(self):
        credential = MagicMock()
        credential.get_token.side_effect = ClientAuthenticationError("no identity")
        with pytest.raises(ClientAuthenticationError):
            get_postgres_token(_db_config(use_managed_identity=True), credential)
        assert postgres_auth._cached_token is None
