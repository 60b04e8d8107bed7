"""
Grid Assets Trigger Package.

Exports:
    GridAssetsTrigger: Lifecycle API trigger
    bp: Blueprint with the /api/grid-assets route
    configure_grid_assets: Install the trigger used by bp
"""

from .grid_assets import GridAssetsTrigger, FAILURE_MESSAGES
from .grid_assets_bp import bp, configure_grid_assets, get_grid_assets_trigger

__all__ = [
    'GridAssetsTrigger',
    'FAILURE_MESSAGES',
    'bp',
    'configure_grid_assets',
    'get_grid_assets_trigger',
]
