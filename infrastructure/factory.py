# ============================================================================
# CLAUDE CONTEXT - REPOSITORY FACTORY
# ============================================================================
# STATUS: Infrastructure - Central factory for repository instances
# PURPOSE: Build repositories over an explicitly opened store handle
# EXPORTS: RepositoryFactory (static class with factory methods)
# INTERFACES: Creates instances implementing IGridAssetRepository
# DEPENDENCIES: infrastructure.grid_asset_repository, config
# PATTERNS: Factory pattern, Dependency Injection
# ENTRY_POINTS: RepositoryFactory.create_grid_asset_repository(store)
# ============================================================================

"""
Repository Factory - Central Creation Point

Single point for repository instantiation. The store handle is always
passed in; the factory never opens connections itself.
"""

from typing import Optional

from config.database_config import DatabaseConfig
from exceptions import ConfigurationError
from util_logger import LoggerFactory, ComponentType
from .connection_pool import StoreHandle
from .grid_asset_repository import GridAssetRepository
from .interface_repository import IGridAssetRepository

logger = LoggerFactory.create_logger(ComponentType.FACTORY, "RepositoryFactory")


# ============================================================================
# REPOSITORY FACTORY - Central creation point
# ============================================================================

class RepositoryFactory:
    """
    Factory for creating repository instances.
    """

    @staticmethod
    def create_store_handle(db_config: Optional[DatabaseConfig] = None) -> StoreHandle:
        """
        Build (not open) a store handle from configuration.

        Args:
            db_config: Database config (loads from get_config() if omitted)
        """
        if db_config is None:
            from config import get_config
            db_config = get_config().database
        return StoreHandle(db_config)

    @staticmethod
    def create_grid_asset_repository(
        store: StoreHandle,
        db_config: Optional[DatabaseConfig] = None
    ) -> IGridAssetRepository:
        """
        Create the grid asset repository over an opened store handle.

        Args:
            store: Opened StoreHandle
            db_config: Source of schema/table names (defaults to store.db_config)

        Raises:
            ConfigurationError: If the handle has not been opened
        """
        if not store.is_open:
            raise ConfigurationError("Store handle must be opened before creating repositories")

        db_config = db_config or store.db_config
        logger.debug(f"Creating GridAssetRepository for {db_config.app_schema}.{db_config.grid_asset_table}")
        return GridAssetRepository(
            store,
            schema_name=db_config.app_schema,
            table_name=db_config.grid_asset_table,
        )
