"""
Configuration loading tests: env vars, defaults, masking.
"""

import pytest

from config import (
    AppConfig,
    AuthConfig,
    ConsoleConfig,
    DatabaseConfig,
    debug_config,
    get_config,
    reset_config,
)


# ============================================================================
# DatabaseConfig
# ============================================================================

class TestDatabaseConfig:

    def test_defaults(self, clean_env):
        config = DatabaseConfig.from_environment()
        assert config.port == 5432
        assert config.app_schema == "app"
        assert config.grid_asset_table == "grid_assets"
        assert config.use_managed_identity is False
        assert config.ensure_schema_on_start is False

    def test_required_host(self, clean_env):
        clean_env.delenv("POSTGIS_HOST")
        with pytest.raises(KeyError):
            DatabaseConfig.from_environment()

    def test_password_connection_string(self, clean_env):
        clean_env.setenv("POSTGIS_USER", "grid_admin")
        clean_env.setenv("POSTGIS_PASSWORD", "s3cret")
        config = DatabaseConfig.from_environment()
        assert config.connection_string == (
            "host=db.example.org port=5432 dbname=grid user=grid_admin password=s3cret"
        )

    def test_password_auth_requires_user(self, clean_env):
        with pytest.raises(ValueError):
            DatabaseConfig.from_environment().connection_string

    def test_managed_identity_connection_string(self, clean_env):
        clean_env.setenv("USE_MANAGED_IDENTITY", "true")
        clean_env.setenv("DB_ADMIN_MANAGED_IDENTITY_NAME", "grid-registry-mi")
        conninfo = DatabaseConfig.from_environment().connection_string
        assert "user=grid-registry-mi" in conninfo
        assert "sslmode=require" in conninfo
        assert "password" not in conninfo

    def test_pool_and_schema_flags(self, clean_env):
        clean_env.setenv("DB_POOL_MIN", "2")
        clean_env.setenv("DB_POOL_MAX", "4")
        clean_env.setenv("DB_ENSURE_SCHEMA", "TRUE")
        config = DatabaseConfig.from_environment()
        assert (config.pool_min_size, config.pool_max_size) == (2, 4)
        assert config.ensure_schema_on_start is True

    def test_debug_dict_masks_password(self, clean_env):
        clean_env.setenv("POSTGIS_PASSWORD", "s3cret")
        assert DatabaseConfig.from_environment().debug_dict()["password"] == "***MASKED***"

    def test_password_not_in_repr(self, clean_env):
        clean_env.setenv("POSTGIS_PASSWORD", "s3cret")
        assert "s3cret" not in repr(DatabaseConfig.from_environment())


# ============================================================================
# Auth / console / app
# ============================================================================

class TestDomainConfigs:

    def test_auth_defaults(self, clean_env):
        config = AuthConfig.from_environment()
        assert config.admin_role == "ADMIN"
        assert config.principal_header == "X-MS-CLIENT-PRINCIPAL"

    def test_auth_override(self, clean_env):
        clean_env.setenv("ADMIN_ROLE", "GridOperator")
        assert AuthConfig.from_environment().admin_role == "GridOperator"

    def test_console_defaults(self, clean_env):
        config = ConsoleConfig.from_environment()
        assert config.page_size == 10
        assert config.api_base_url == "http://localhost:7071/api"

    def test_console_page_size_bounds(self, clean_env):
        clean_env.setenv("CONSOLE_PAGE_SIZE", "0")
        with pytest.raises(ValueError):
            ConsoleConfig.from_environment()

    def test_log_level_normalized(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "debug")
        assert AppConfig.from_environment().log_level == "DEBUG"

    def test_unknown_log_level_rejected(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError):
            AppConfig.from_environment()


class TestSingleton:

    def test_get_config_cached_until_reset(self, clean_env):
        first = get_config()
        assert get_config() is first
        reset_config()
        assert get_config() is not first

    def test_debug_config_masks(self, clean_env):
        clean_env.setenv("POSTGIS_PASSWORD", "s3cret")
        assert "s3cret" not in str(debug_config())

    def test_debug_config_reports_load_error(self, clean_env):
        clean_env.delenv("POSTGIS_DATABASE")
        assert "error" in debug_config()
