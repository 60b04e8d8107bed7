# ============================================================================
# GRID ASSETS HTTP TRIGGER
# ============================================================================
# STATUS: Trigger layer - Lifecycle API HTTP boundary
# PURPOSE: Dispatch GET/POST/PATCH/DELETE on /api/grid-assets to GridAssetService
# EXPORTS: GridAssetsTrigger
# DEPENDENCIES: triggers.http_base, services.grid_asset_service, services.authorization
# ============================================================================
"""
Grid Assets HTTP Trigger.

Routes (one path, four methods):
    GET    /api/grid-assets[?includeDeleted=true] -> 200 {"gridAssets": [...]}
    POST   /api/grid-assets   {fields}            -> 201 {"asset": {...}}
    PATCH  /api/grid-assets   {"id", fields}      -> 200 {"asset": {...}}
    DELETE /api/grid-assets   {"id", "permanent"} -> 200 {"message": "..."}

The authorization gate runs before the body is parsed and before any
store access. Store failures return a generic per-operation message.
"""

from typing import Any, Dict, List, Optional

import azure.functions as func

from config.auth_config import AuthConfig
from infrastructure.interface_repository import ParamNames
from services.authorization import AuthorizationGate
from services.grid_asset_service import GridAssetService
from ..http_base import BaseHttpTrigger


FAILURE_MESSAGES = {
    "GET": "Failed to fetch grid assets",
    "POST": "Failed to create grid asset",
    "PATCH": "Failed to update grid asset",
    "DELETE": "Failed to delete grid asset",
}


class GridAssetsTrigger(BaseHttpTrigger):
    """Lifecycle API trigger."""

    def __init__(
        self,
        service: GridAssetService,
        auth_config: Optional[AuthConfig] = None,
        gate: Optional[AuthorizationGate] = None
    ):
        super().__init__("grid_assets", auth_config)
        self.service = service
        self.gate = gate or AuthorizationGate(self.auth_config.admin_role)

    def get_allowed_methods(self) -> List[str]:
        return ["GET", "POST", "PATCH", "DELETE"]

    def get_success_status(self, req: func.HttpRequest) -> int:
        return 201 if req.method == "POST" else 200

    def get_failure_message(self, req: func.HttpRequest) -> str:
        return FAILURE_MESSAGES.get(req.method, super().get_failure_message(req))

    def get_not_found_error(self, req: func.HttpRequest) -> str:
        return "Grid asset not found"

    def process_request(self, req: func.HttpRequest) -> Dict[str, Any]:
        identity = self.gate.require_admin(self.get_identity(req))

        if req.method == "GET":
            include_deleted = req.params.get(ParamNames.INCLUDE_DELETED, "").lower() == "true"
            assets = self.service.list_assets(identity, include_deleted=include_deleted)
            return {"gridAssets": [asset.to_wire() for asset in assets]}

        body = self.extract_json_body(req)

        if req.method == "POST":
            asset = self.service.create_asset(identity, body)
            return {"asset": asset.to_wire()}

        asset_id = self._require_asset_id(body)

        if req.method == "PATCH":
            asset = self.service.update_asset(identity, asset_id, body)
            return {"asset": asset.to_wire()}

        permanent = body.get(ParamNames.PERMANENT, False)
        if not isinstance(permanent, bool):
            raise ValueError("permanent must be true or false")
        outcome = self.service.delete_asset(identity, asset_id, permanent=permanent)
        return {"message": outcome.message}

    @staticmethod
    def _require_asset_id(body: Dict[str, Any]) -> str:
        asset_id = body.get(ParamNames.ASSET_ID)
        if not isinstance(asset_id, str) or not asset_id.strip():
            raise ValueError("Asset id is required")
        return asset_id
