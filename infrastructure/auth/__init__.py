# ============================================================================
# AUTHENTICATION MODULE
# ============================================================================
# STATUS: Infrastructure - identity at the two process boundaries
# PURPOSE: Inbound caller identity and outbound PostgreSQL OAuth tokens
# ============================================================================
"""
Authentication Module.

Components:
-----------
- principal: Caller identity from the App Service authentication header
- postgres_auth: PostgreSQL OAuth token acquisition for the store handle
"""

from .principal import CallerIdentity, parse_client_principal, encode_client_principal
from .postgres_auth import (
    get_postgres_token,
    get_postgres_conninfo,
    token_expires_soon,
    reset_token_cache,
    POSTGRES_SCOPE,
)

__all__ = [
    'CallerIdentity',
    'parse_client_principal',
    'encode_client_principal',
    'get_postgres_token',
    'get_postgres_conninfo',
    'token_expires_soon',
    'reset_token_cache',
    'POSTGRES_SCOPE',
]
