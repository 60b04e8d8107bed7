"""
Config test fixtures: clean environment via monkeypatch.
"""

import pytest


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all env vars that config modules might read, for isolation."""
    env_vars_to_clear = [
        "POSTGIS_HOST", "POSTGIS_PORT", "POSTGIS_USER", "POSTGIS_PASSWORD",
        "POSTGIS_DATABASE", "APP_SCHEMA", "GRID_ASSET_TABLE",
        "USE_MANAGED_IDENTITY", "DB_ADMIN_MANAGED_IDENTITY_NAME",
        "DB_ADMIN_MANAGED_IDENTITY_CLIENT_ID", "DB_POOL_MIN", "DB_POOL_MAX",
        "DB_CONNECTION_TIMEOUT", "DB_ENSURE_SCHEMA",
        "ADMIN_ROLE", "PRINCIPAL_HEADER", "ROLE_CLAIM_TYPE",
        "CONSOLE_API_BASE_URL", "CONSOLE_PAGE_SIZE", "CONSOLE_REQUEST_TIMEOUT",
        "DEBUG_MODE", "ENVIRONMENT", "LOG_LEVEL",
    ]
    for var in env_vars_to_clear:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("POSTGIS_HOST", "db.example.org")
    monkeypatch.setenv("POSTGIS_DATABASE", "grid")
    return monkeypatch
