# ============================================================================
# GRID ASSETS BLUEPRINT
# ============================================================================
# STATUS: Trigger layer - Lifecycle API route registration
# PURPOSE: Bind /api/grid-assets to the configured GridAssetsTrigger
# EXPORTS: bp (Blueprint), configure_grid_assets, get_grid_assets_trigger
# DEPENDENCIES: azure.functions, triggers.grid_assets.grid_assets
# ============================================================================
"""
Grid Assets Blueprint.

function_app.py builds the trigger over the opened store handle and hands
it to configure_grid_assets() before registering bp.

Routes (1 path):
    GET|POST|PATCH|DELETE /api/grid-assets
"""

from typing import Optional

import azure.functions as func
from azure.functions import Blueprint

from exceptions import ConfigurationError
from .grid_assets import GridAssetsTrigger

bp = Blueprint()

_trigger: Optional[GridAssetsTrigger] = None


def configure_grid_assets(trigger: GridAssetsTrigger) -> None:
    global _trigger
    _trigger = trigger


def get_grid_assets_trigger() -> GridAssetsTrigger:
    if _trigger is None:
        raise ConfigurationError("Grid assets trigger not configured; call configure_grid_assets() at startup")
    return _trigger


@bp.route(
    route="grid-assets",
    methods=["GET", "POST", "PATCH", "DELETE"],
    auth_level=func.AuthLevel.ANONYMOUS
)
def grid_assets(req: func.HttpRequest) -> func.HttpResponse:
    """
    Grid asset lifecycle.

    GET    /api/grid-assets?includeDeleted=true
    POST   /api/grid-assets
    PATCH  /api/grid-assets
    DELETE /api/grid-assets
    """
    return get_grid_assets_trigger().handle_request(req)
