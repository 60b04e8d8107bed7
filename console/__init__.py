"""
Console Package.

Client side of the admin console: the Lifecycle API client and the two
coordinated view controllers.

Usage:
    from console import console_from_config

    active, deleted = console_from_config(principal=encoded)
    active.refresh()
    deleted.refresh()

Exports:
    GridAssetApiClient: httpx client for /api/grid-assets
    ActiveAssetsController, DeletedAssetsController: view controllers
    link_views: Wire two controllers for cross-view refresh
    build_console: Create and link both controllers over a client
    console_from_config: build_console with ConsoleConfig settings
    new_asset_form, edit_asset_form: Initial form values for add and edit
"""

from typing import Optional, Sequence, Tuple

from config import get_config
from config.defaults import ConsoleDefaults
from .api_client import GridAssetApiClient
from .view_controller import AlertHook, AssetViewController, ConfirmHook, link_views
from .active_view import (
    ActiveAssetsController,
    DELETE_CONFIRMATION,
    RecordSource,
    edit_asset_form,
    new_asset_form,
)
from .deleted_view import DeletedAssetsController, PURGE_CONFIRMATION


def build_console(
    client: GridAssetApiClient,
    supplementary_sources: Sequence[RecordSource] = (),
    confirm: Optional[ConfirmHook] = None,
    alert: Optional[AlertHook] = None,
    page_size: int = ConsoleDefaults.PAGE_SIZE
) -> Tuple[ActiveAssetsController, DeletedAssetsController]:
    active = ActiveAssetsController(
        client, supplementary_sources, page_size=page_size, confirm=confirm, alert=alert
    )
    deleted = DeletedAssetsController(client, page_size=page_size, confirm=confirm, alert=alert)
    link_views(active, deleted)
    return active, deleted


def console_from_config(
    principal: Optional[str] = None,
    supplementary_sources: Sequence[RecordSource] = (),
    confirm: Optional[ConfirmHook] = None,
    alert: Optional[AlertHook] = None
) -> Tuple[ActiveAssetsController, DeletedAssetsController]:
    """Both controllers over one client built from ConsoleConfig (CONSOLE_*)."""
    console_config = get_config().console
    client = GridAssetApiClient.from_config(principal, console_config)
    return build_console(
        client,
        supplementary_sources,
        confirm=confirm,
        alert=alert,
        page_size=console_config.page_size,
    )


__all__ = [
    'GridAssetApiClient',
    'AssetViewController',
    'ActiveAssetsController',
    'DeletedAssetsController',
    'link_views',
    'build_console',
    'console_from_config',
    'new_asset_form',
    'edit_asset_form',
    'DELETE_CONFIRMATION',
    'PURGE_CONFIRMATION',
]
