# ============================================================================
# GRID ASSET SERVICE
# ============================================================================
# STATUS: Service - Business logic for grid assets
# PURPOSE: Lifecycle API operations: list, create, update, delete, restore
# EXPORTS: GridAssetService, DeleteOutcome
# DEPENDENCIES: infrastructure.interface_repository, services.authorization,
#               core.logic.validation
# ============================================================================
"""
Grid Asset Service - Lifecycle API.

Every operation runs the same three steps, in order:
    1. Authorization gate (anonymous / non-admin -> UnauthorizedError)
    2. Validation (-> ValidationError with per-field messages)
    3. Exactly one repository call (-> ResourceNotFoundError, DatabaseError)

Nothing retries automatically.

Exports:
    GridAssetService: Lifecycle operations
    DeleteOutcome: Result of a soft or permanent delete
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from core.logic.validation import validate_create, validate_update, writable_create_fields
from core.models import GridAsset
from exceptions import ValidationError
from infrastructure.auth.principal import CallerIdentity
from infrastructure.interface_repository import IGridAssetRepository
from util_logger import LoggerFactory, ComponentType
from .authorization import AuthorizationGate

logger = LoggerFactory.create_logger(ComponentType.SERVICE, "GridAssetService")

SOFT_DELETED_MESSAGE = "Grid asset soft deleted successfully"
PURGED_MESSAGE = "Grid asset permanently deleted successfully"


@dataclass(frozen=True)
class DeleteOutcome:
    asset_id: str
    permanent: bool
    message: str


class GridAssetService:
    """
    Service for the grid asset lifecycle.

    Usage:
        service = GridAssetService(repository, AuthorizationGate("ADMIN"))
        asset = service.create_asset(identity, {"type": "substation", ...})
        service.delete_asset(identity, asset.id)              # soft
        service.restore_asset(identity, asset.id)
        service.delete_asset(identity, asset.id, permanent=True)
    """

    def __init__(self, repository: IGridAssetRepository, gate: Optional[AuthorizationGate] = None):
        self._repository = repository
        self._gate = gate or AuthorizationGate()

    # =========================================================================
    # READ
    # =========================================================================

    def list_assets(self, identity: Optional[CallerIdentity], include_deleted: bool = False) -> List[GridAsset]:
        self._gate.require_admin(identity)
        assets = self._repository.list_assets(include_deleted=include_deleted)
        logger.debug(f"Listed {len(assets)} assets (include_deleted={include_deleted})")
        return assets

    # =========================================================================
    # CREATE
    # =========================================================================

    def create_asset(self, identity: Optional[CallerIdentity], fields: Mapping[str, Any]) -> GridAsset:
        """
        Validate and persist a new asset.

        id, deleted and lastUpdate in the payload are ignored; the store
        assigns them.

        Raises:
            UnauthorizedError, ValidationError, DatabaseError
        """
        self._gate.require_admin(identity)

        errors = validate_create(fields)
        if errors:
            logger.info(f"Create rejected: {sorted(errors)}")
            raise ValidationError("Validation failed", fields=errors)

        asset = self._repository.create_asset(writable_create_fields(fields))
        logger.info(f"✅ Created grid asset {asset.id} by {identity.user_id}")
        return asset

    # =========================================================================
    # UPDATE
    # =========================================================================

    def update_asset(
        self,
        identity: Optional[CallerIdentity],
        asset_id: str,
        fields: Mapping[str, Any]
    ) -> GridAsset:
        """
        Partial update. Only the fields present are validated and written.

        A deleted key is a lifecycle move (restore is deleted=False); the
        repository checks the transition against the locked row.

        Raises:
            UnauthorizedError, ValidationError, ResourceNotFoundError,
            InvalidTransitionError, DatabaseError
        """
        self._gate.require_admin(identity)

        errors = validate_update(fields, asset_id=asset_id)
        if errors:
            logger.info(f"Update of {asset_id} rejected: {sorted(errors)}")
            raise ValidationError("Validation failed", fields=errors)

        changes: Dict[str, Any] = {k: v for k, v in fields.items() if k != "id"}
        asset = self._repository.update_asset(asset_id, changes)
        logger.info(f"✅ Updated grid asset {asset_id} by {identity.user_id}")
        return asset

    def restore_asset(self, identity: Optional[CallerIdentity], asset_id: str) -> GridAsset:
        """Restore a soft-deleted asset (an update of deleted to False)."""
        return self.update_asset(identity, asset_id, {"deleted": False})

    # =========================================================================
    # DELETE
    # =========================================================================

    def delete_asset(
        self,
        identity: Optional[CallerIdentity],
        asset_id: str,
        permanent: bool = False
    ) -> DeleteOutcome:
        """
        Soft delete (default) or purge.

        Raises:
            UnauthorizedError, ResourceNotFoundError, DatabaseError
        """
        self._gate.require_admin(identity)

        if permanent:
            self._repository.purge_asset(asset_id)
            logger.info(f"🗑️ Purged grid asset {asset_id} by {identity.user_id}")
            return DeleteOutcome(asset_id, True, PURGED_MESSAGE)

        self._repository.soft_delete_asset(asset_id)
        logger.info(f"Soft-deleted grid asset {asset_id} by {identity.user_id}")
        return DeleteOutcome(asset_id, False, SOFT_DELETED_MESSAGE)
