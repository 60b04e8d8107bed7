"""
Repository Abstract Base Classes - Single Point of Truth.

Enforces exact method signatures across all repository implementations
(PostgreSQL and the in-memory test double), preventing parameter name
mismatches.

Philosophy: "Define once, enforce everywhere"

Exports:
    IGridAssetRepository: Grid asset store interface
    ParamNames: Canonical parameter name constants
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Final, List, Optional

from core.models import GridAsset


# ============================================================================
# CANONICAL PARAMETER NAMES - Single source of truth
# ============================================================================

class ParamNames:
    """
    Parameter and wire names used across the system.
    Using class attributes as constants ensures consistency.
    """

    ASSET_ID: Final[str] = "id"
    DELETED: Final[str] = "deleted"
    LAST_UPDATE: Final[str] = "lastUpdate"
    INCLUDE_DELETED: Final[str] = "includeDeleted"
    PERMANENT: Final[str] = "permanent"


# ============================================================================
# GRID ASSET REPOSITORY INTERFACE
# ============================================================================

class IGridAssetRepository(ABC):
    """
    Grid asset store.

    Every mutating call touches exactly one row inside one transaction or
    raises. Store failures surface as exceptions.DatabaseError.
    """

    @abstractmethod
    def ensure_table(self) -> None:
        """Create schema, table and indexes if missing."""
        pass

    @abstractmethod
    def list_assets(self, include_deleted: bool = False) -> List[GridAsset]:
        """
        List assets ordered by lastUpdate, then id.

        Soft-deleted assets are excluded unless include_deleted is True.
        """
        pass

    @abstractmethod
    def get_asset(self, asset_id: str) -> Optional[GridAsset]:
        pass

    @abstractmethod
    def create_asset(self, fields: Dict[str, Any]) -> GridAsset:
        """
        Insert a new asset with a fresh id, deleted=False, lastUpdate=now.

        Args:
            fields: Validated wire-name fields without id/deleted/lastUpdate
        """
        pass

    @abstractmethod
    def update_asset(self, asset_id: str, fields: Dict[str, Any]) -> GridAsset:
        """
        Apply a partial update.

        Raises:
            ResourceNotFoundError: No row with that id
            InvalidTransitionError: deleted change not allowed
        """
        pass

    @abstractmethod
    def soft_delete_asset(self, asset_id: str) -> GridAsset:
        """
        Set deleted=True.

        Raises:
            ResourceNotFoundError: No row with that id
        """
        pass

    @abstractmethod
    def purge_asset(self, asset_id: str) -> None:
        """
        Remove the row.

        Raises:
            ResourceNotFoundError: No row with that id
        """
        pass
