# ============================================================================
# CLAUDE CONTEXT - CONFIG PACKAGE INIT
# ============================================================================
# STATUS: Shared - configuration package exports
# PURPOSE: get_config singleton and debug_config helper over the domain configs
# EXPORTS: AppConfig, DatabaseConfig, AuthConfig, ConsoleConfig, get_config,
#          reset_config, debug_config
# INTERFACES: Pydantic BaseModel
# DEPENDENCIES: domain config modules
# PATTERNS: Singleton, composition, facade
# ENTRY_POINTS: from config import get_config
# ============================================================================

"""
Configuration Package - Domain-Specific Configuration Modules

Structure:
    config/
    ├── __init__.py              # This file - exports and singleton
    ├── app_config.py            # Main config (composes domain configs)
    ├── database_config.py       # PostgreSQL asset store
    ├── auth_config.py           # Admin role / principal header
    ├── console_config.py        # Admin console settings
    └── defaults.py              # Default values

Usage:
    from config import get_config
    config = get_config()
    schema = config.database.app_schema

    from config import debug_config
    info = debug_config()  # Passwords masked
"""

from typing import Optional

from .database_config import DatabaseConfig
from .auth_config import AuthConfig
from .console_config import ConsoleConfig
from .app_config import AppConfig


# ============================================================================
# SINGLETON PATTERN
# ============================================================================

_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get global configuration singleton.

    Returns:
        AppConfig instance loaded from environment
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = AppConfig.from_environment()
    return _config_instance


def reset_config() -> None:
    """Drop the cached singleton so the next get_config() re-reads the environment."""
    global _config_instance
    _config_instance = None


def debug_config() -> dict:
    """
    Get sanitized configuration for debugging (masks sensitive values).

    Returns:
        Dictionary with configuration values, passwords masked
    """
    try:
        config = get_config()
        return {
            'database': config.database.debug_dict(),
            'auth': config.auth.debug_dict(),
            'console': config.console.debug_dict(),
            'debug_mode': config.debug_mode,
            'environment': config.environment,
            'log_level': config.log_level,
        }
    except Exception as e:
        return {'error': f'Configuration not loaded: {e}'}


__all__ = [
    'AppConfig',
    'DatabaseConfig',
    'AuthConfig',
    'ConsoleConfig',
    'get_config',
    'reset_config',
    'debug_config',
]
