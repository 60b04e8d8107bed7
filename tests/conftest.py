"""
Root conftest.py: sys.path, env vars, shared fixtures.

Sets up the test environment so all production code can be imported
without database connections or Azure credentials.
"""

import os
import sys

import pytest

# Add project root to sys.path so 'core', 'config', 'console', etc. are importable
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


@pytest.fixture(autouse=True, scope="session")
def set_minimal_env_vars():
    """
    Set minimal environment variables to prevent import crashes.

    Config is read lazily through get_config(); we provide safe defaults
    so it loads without Azure infrastructure.
    """
    defaults = {
        "POSTGIS_HOST": "localhost",
        "POSTGIS_DATABASE": "testdb",
        "POSTGIS_USER": "tester",
        "POSTGIS_PASSWORD": "test-password",
        "APP_SCHEMA": "app",
        "ENVIRONMENT": "dev",
    }
    for key, value in defaults.items():
        os.environ.setdefault(key, value)


@pytest.fixture(autouse=True)
def fresh_config():
    """Each test sees config rebuilt from the current environment."""
    from config import reset_config
    reset_config()
    yield
    reset_config()


@pytest.fixture
def admin_identity():
    from infrastructure.auth.principal import CallerIdentity
    return CallerIdentity(user_id="admin-1", name="Admin", roles=("ADMIN",))


@pytest.fixture
def viewer_identity():
    from infrastructure.auth.principal import CallerIdentity
    return CallerIdentity(user_id="viewer-1", name="Viewer", roles=("VIEWER",))
