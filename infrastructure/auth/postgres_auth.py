# ============================================================================
# POSTGRESQL OAUTH AUTHENTICATION
# ============================================================================
# STATUS: Infrastructure - PostgreSQL OAuth for the asset store
# PURPOSE: Managed Identity authentication for Azure PostgreSQL
# EXPORTS: get_postgres_token, get_postgres_conninfo, token_expires_soon,
#          reset_token_cache, POSTGRES_SCOPE
# DEPENDENCIES: azure-identity, config.DatabaseConfig
# ============================================================================
"""
PostgreSQL OAuth authentication.

Acquires OAuth tokens for Azure Database for PostgreSQL using Managed Identity.
Tokens are cached and re-acquired shortly before expiry.

Authentication Flow:
-------------------
1. Store handle opens -> get_postgres_conninfo() called
2. ManagedIdentityCredential acquires token for PostgreSQL scope
3. Token cached with expiry time
4. Store handle recreates its pool when token_expires_soon() is true

Environment Variables:
---------------------
USE_MANAGED_IDENTITY=true
DB_ADMIN_MANAGED_IDENTITY_CLIENT_ID=<guid>  # User-assigned MI (recommended)
DB_ADMIN_MANAGED_IDENTITY_NAME=<identity-name>  # PostgreSQL user name
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Optional

from config.database_config import DatabaseConfig

logger = logging.getLogger(__name__)

# OAuth scope for Azure Database for PostgreSQL
POSTGRES_SCOPE = "https://ossrdbms-aad.database.windows.net/.default"

# Refresh tokens when less than 5 minutes until expiry
TOKEN_REFRESH_BUFFER_SECS = 300

_token_lock = threading.Lock()
_cached_token: Optional[str] = None
_cached_expiry: Optional[datetime] = None


def _ttl_seconds() -> float:
    if _cached_expiry is None:
        return 0.0
    return (_cached_expiry - datetime.now(timezone.utc)).total_seconds()


def token_expires_soon() -> bool:
    """True when the cached token is missing or inside the refresh buffer."""
    return _cached_token is None or _ttl_seconds() < TOKEN_REFRESH_BUFFER_SECS


def reset_token_cache() -> None:
    global _cached_token, _cached_expiry
    with _token_lock:
        _cached_token = None
        _cached_expiry = None


def get_postgres_token(db_config: DatabaseConfig, credential=None) -> Optional[str]:
    """
    Get PostgreSQL OAuth token using Managed Identity.

    Args:
        db_config: Database configuration
        credential: Optional azure-identity credential (tests inject a fake)

    Returns:
        OAuth bearer token, or None when managed identity is disabled.

    Raises:
        azure.core.exceptions.ClientAuthenticationError: If token acquisition fails.
    """
    global _cached_token, _cached_expiry

    if not db_config.use_managed_identity:
        logger.debug("Managed identity disabled, using password auth")
        return None

    with _token_lock:
        if not token_expires_soon():
            logger.debug(f"Using cached PostgreSQL token, TTL: {_ttl_seconds():.0f}s")
            return _cached_token

        logger.info(f"Acquiring PostgreSQL OAuth token for {db_config.host}/{db_config.database}")

        from azure.core.exceptions import ClientAuthenticationError

        if credential is None:
            from azure.identity import ManagedIdentityCredential, DefaultAzureCredential

            client_id = db_config.managed_identity_client_id
            if client_id:
                logger.info(f"Using user-assigned Managed Identity: {client_id[:8]}...")
                credential = ManagedIdentityCredential(client_id=client_id)
            else:
                logger.info("Using DefaultAzureCredential (system MI or az login)")
                credential = DefaultAzureCredential()

        try:
            token_response = credential.get_token(POSTGRES_SCOPE)
        except ClientAuthenticationError as e:
            logger.error(f"FAILED TO GET POSTGRESQL OAUTH TOKEN: {e}")
            logger.error(f"  Expected database user: {db_config.managed_identity_admin_name}")
            raise

        _cached_token = token_response.token
        _cached_expiry = datetime.fromtimestamp(token_response.expires_on, tz=timezone.utc)
        logger.info(f"PostgreSQL token acquired, expires: {_cached_expiry.isoformat()}")
        return _cached_token


def get_postgres_conninfo(db_config: DatabaseConfig, credential=None) -> str:
    """
    Connection string for the store handle.

    Password auth returns DatabaseConfig.connection_string unchanged;
    managed identity appends the current OAuth token as the password.
    """
    conninfo = db_config.connection_string
    if not db_config.use_managed_identity:
        return conninfo

    token = get_postgres_token(db_config, credential=credential)
    if not token:
        raise ValueError("Failed to acquire PostgreSQL OAuth token")
    return f"{conninfo} password={token}"
