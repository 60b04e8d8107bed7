"""
Deleted Assets View Controller.

Lists soft-deleted assets and carries the restore and permanent delete
actions.
"""

from typing import Any, Dict, List, Mapping

from core.models import ProcessedAsset
from core.schema import DELETED_VIEW_COLUMNS
from .api_client import PURGE_FAILED, RESTORE_FAILED
from .view_controller import AssetViewController

PURGE_CONFIRMATION = (
    "Are you sure you want to permanently delete this asset? "
    "This action cannot be undone."
)


class DeletedAssetsController(AssetViewController):
    """Deleted view: list(includeDeleted=true) narrowed to deleted=true."""

    columns = DELETED_VIEW_COLUMNS

    def fetch(self) -> List[Dict[str, Any]]:
        return self.client.list_assets(include_deleted=True)

    def select(self, asset: ProcessedAsset) -> bool:
        return asset.is_deleted

    def restore_asset(self, asset_id: str) -> bool:
        if not self.controls_enabled:
            return False
        return self._mutate("restore", lambda: self.client.restore_asset(asset_id), RESTORE_FAILED)

    def permanent_delete_asset(self, asset_id: str) -> bool:
        """Irreversible; asks for confirmation first."""
        if not self.controls_enabled or not self.confirm(PURGE_CONFIRMATION):
            return False
        return self._mutate(
            "permanent delete",
            lambda: self.client.delete_asset(asset_id, permanent=True),
            PURGE_FAILED
        )
