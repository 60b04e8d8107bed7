"""
PostgreSQL Database Configuration.

Provides configuration for the asset store:
    - app.grid_assets table (one row per GridAsset)
    - password auth for local development
    - Azure Managed Identity (passwordless) for deployed apps

Exports:
    DatabaseConfig: Asset store configuration
"""

import os
from typing import Optional
from pydantic import BaseModel, Field

from .defaults import DatabaseDefaults, AzureDefaults


# ============================================================================
# DATABASE CONFIGURATION
# ============================================================================

class DatabaseConfig(BaseModel):
    """
    PostgreSQL configuration with managed identity support.

    Supports both password-based and Azure Managed Identity authentication.
    """

    host: str = Field(
        ...,
        description="PostgreSQL server hostname",
        examples=["gridregistry.postgres.database.azure.com"]
    )

    port: int = Field(
        default=DatabaseDefaults.PORT,
        description="PostgreSQL server port number"
    )

    user: Optional[str] = Field(
        default=None,
        description="PostgreSQL username for password-based authentication (local dev only)"
    )

    password: Optional[str] = Field(
        default=None,
        repr=False,
        description="PostgreSQL password from POSTGIS_PASSWORD environment variable"
    )

    database: str = Field(
        ...,
        description="PostgreSQL database name",
        examples=["gridregistry"]
    )

    app_schema: str = Field(
        default=DatabaseDefaults.APP_SCHEMA,
        description="Schema holding the grid_assets table"
    )

    grid_asset_table: str = Field(
        default=DatabaseDefaults.GRID_ASSET_TABLE,
        description="Table name for grid assets"
    )

    use_managed_identity: bool = Field(
        default=False,
        description="""Enable Azure Managed Identity for passwordless PostgreSQL authentication.

        When True an Azure AD access token is acquired with azure-identity and
        used as the connection password. When False POSTGIS_USER/POSTGIS_PASSWORD
        are used.

        Environment Variable: USE_MANAGED_IDENTITY
        """
    )

    managed_identity_admin_name: Optional[str] = Field(
        default=AzureDefaults.MANAGED_IDENTITY_NAME,
        description="PostgreSQL role name matching the managed identity (DB_ADMIN_MANAGED_IDENTITY_NAME)"
    )

    managed_identity_client_id: Optional[str] = Field(
        default=None,
        description="Client ID of the user-assigned managed identity (DB_ADMIN_MANAGED_IDENTITY_CLIENT_ID)"
    )

    pool_min_size: int = Field(
        default=DatabaseDefaults.POOL_MIN,
        ge=0,
        description="Minimum connections kept open by the store handle"
    )

    pool_max_size: int = Field(
        default=DatabaseDefaults.POOL_MAX,
        ge=1,
        description="Maximum connections held by the store handle"
    )

    connection_timeout_seconds: int = Field(
        default=DatabaseDefaults.CONNECTION_TIMEOUT_SECONDS,
        description="Seconds to wait for a pooled connection"
    )

    ensure_schema_on_start: bool = Field(
        default=DatabaseDefaults.ENSURE_SCHEMA_ON_START,
        description="Create the grid asset table at process start if missing (DB_ENSURE_SCHEMA)"
    )

    @property
    def connection_string(self) -> str:
        """
        Build PostgreSQL connection string for password auth.

        Managed identity connections get their password (token) injected by
        infrastructure.auth.postgres_auth at connect time.
        """
        if self.use_managed_identity:
            return (
                f"host={self.host} port={self.port} dbname={self.database} "
                f"user={self.managed_identity_admin_name} sslmode=require"
            )
        if not self.user:
            raise ValueError("POSTGIS_USER is required for password authentication")
        password_part = f" password={self.password}" if self.password else ""
        return f"host={self.host} port={self.port} dbname={self.database} user={self.user}{password_part}"

    def debug_dict(self) -> dict:
        """Debug output with masked password."""
        return {
            "host": self.host,
            "port": self.port,
            "user": self.user,
            "database": self.database,
            "password": "***MASKED***" if self.password else None,
            "managed_identity": self.use_managed_identity,
            "managed_identity_admin_name": self.managed_identity_admin_name,
            "managed_identity_client_id": self.managed_identity_client_id[:8] + "..." if self.managed_identity_client_id else None,
            "app_schema": self.app_schema,
            "grid_asset_table": self.grid_asset_table,
            "pool": f"{self.pool_min_size}-{self.pool_max_size}",
        }

    @classmethod
    def from_environment(cls):
        """Load from environment variables.

        POSTGIS_USER is optional when using managed identity authentication.
        """
        return cls(
            host=os.environ["POSTGIS_HOST"],
            port=int(os.environ.get("POSTGIS_PORT", str(DatabaseDefaults.PORT))),
            user=os.environ.get("POSTGIS_USER"),
            password=os.environ.get("POSTGIS_PASSWORD"),
            database=os.environ["POSTGIS_DATABASE"],
            app_schema=os.environ.get("APP_SCHEMA", DatabaseDefaults.APP_SCHEMA),
            grid_asset_table=os.environ.get("GRID_ASSET_TABLE", DatabaseDefaults.GRID_ASSET_TABLE),
            use_managed_identity=os.environ.get("USE_MANAGED_IDENTITY", "false").lower() == "true",
            managed_identity_admin_name=os.environ.get("DB_ADMIN_MANAGED_IDENTITY_NAME", AzureDefaults.MANAGED_IDENTITY_NAME),
            managed_identity_client_id=os.environ.get("DB_ADMIN_MANAGED_IDENTITY_CLIENT_ID"),
            pool_min_size=int(os.environ.get("DB_POOL_MIN", str(DatabaseDefaults.POOL_MIN))),
            pool_max_size=int(os.environ.get("DB_POOL_MAX", str(DatabaseDefaults.POOL_MAX))),
            connection_timeout_seconds=int(os.environ.get("DB_CONNECTION_TIMEOUT", str(DatabaseDefaults.CONNECTION_TIMEOUT_SECONDS))),
            ensure_schema_on_start=os.environ.get("DB_ENSURE_SCHEMA", str(DatabaseDefaults.ENSURE_SCHEMA_ON_START).lower()).lower() == "true",
        )
