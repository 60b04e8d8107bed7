"""
Configuration Defaults - Single source of truth for all default values.

FAIL-FAST DESIGN:
Tenant-specific defaults use INTENTIONALLY INVALID placeholder values.
This ensures deployments fail loudly if required environment variables aren't set.

Organization:
    - AzureDefaults: MUST be overridden - uses invalid placeholders (fail-fast)
    - All other *Defaults: Safe universal defaults that work for any deployment

Required Environment Variables (will fail if not set):
    POSTGIS_HOST - PostgreSQL server hostname
    POSTGIS_DATABASE - PostgreSQL database name

Usage:
    from config.defaults import DatabaseDefaults, AuthDefaults

    port: int = Field(default=DatabaseDefaults.PORT, ...)
"""


# =============================================================================
# AZURE RESOURCE DEFAULTS (MUST override for new tenant)
# =============================================================================

class AzureDefaults:
    """
    Defaults that MUST be overridden for a new Azure tenant deployment.

    Required Environment Variables:
        DB_ADMIN_MANAGED_IDENTITY_NAME - PostgreSQL managed identity name
    """

    # Managed Identity (Admin) - Override: DB_ADMIN_MANAGED_IDENTITY_NAME
    MANAGED_IDENTITY_NAME = "your-managed-identity-name"


# =============================================================================
# DATABASE DEFAULTS
# =============================================================================

class DatabaseDefaults:
    """Database configuration reference values."""

    PORT = 5432
    APP_SCHEMA = "app"
    GRID_ASSET_TABLE = "grid_assets"
    CONNECTION_TIMEOUT_SECONDS = 30
    POOL_MIN = 1
    POOL_MAX = 10
    ENSURE_SCHEMA_ON_START = False


# =============================================================================
# AUTHORIZATION DEFAULTS
# =============================================================================

class AuthDefaults:
    """
    Session / role defaults.

    The identity provider sits in front of the Function App (App Service
    Authentication); it forwards the caller as a base64 JSON principal header.
    """

    ADMIN_ROLE = "ADMIN"
    PRINCIPAL_HEADER = "X-MS-CLIENT-PRINCIPAL"
    ROLE_CLAIM_TYPE = "roles"


# =============================================================================
# CONSOLE DEFAULTS
# =============================================================================

class ConsoleDefaults:
    """Admin console (client-side view controller) defaults."""

    API_BASE_URL = "http://localhost:7071/api"
    PAGE_SIZE = 10
    REQUEST_TIMEOUT_SECONDS = 30.0


# =============================================================================
# APPLICATION DEFAULTS
# =============================================================================

class AppDefaults:
    """Application-wide defaults."""

    DEBUG_MODE = False
    ENVIRONMENT = "dev"
    LOG_LEVEL = "INFO"
