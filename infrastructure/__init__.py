"""
Infrastructure Package - Lazy Loading Implementation.

Provides repository implementations with lazy loading so that importing
function_app.py does not read environment variables, acquire managed
identity tokens or touch the database before the Functions runtime has
finished initializing.

Azure Functions loads function_app.py on every cold start, before
application settings and managed identity are guaranteed to be ready.
__getattr__ defers each import until the name is first used, which is
when function_app builds the store handle.

Exports (lazy):
    RepositoryFactory
    StoreHandle
    GridAssetRepository
    IGridAssetRepository, ParamNames
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .factory import RepositoryFactory
    from .connection_pool import StoreHandle
    from .grid_asset_repository import GridAssetRepository
    from .interface_repository import IGridAssetRepository, ParamNames


def __getattr__(name: str):
    """
    Lazy import mechanism - only imports when actually accessed.
    This prevents module-level code execution until needed.
    """
    # Factory - most common import
    if name == "RepositoryFactory":
        from .factory import RepositoryFactory
        return RepositoryFactory

    if name == "StoreHandle":
        from .connection_pool import StoreHandle
        return StoreHandle

    if name == "GridAssetRepository":
        from .grid_asset_repository import GridAssetRepository
        return GridAssetRepository

    if name in ("IGridAssetRepository", "ParamNames"):
        from . import interface_repository
        return getattr(interface_repository, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "RepositoryFactory",
    "StoreHandle",
    "GridAssetRepository",
    "IGridAssetRepository",
    "ParamNames",
]
