"""
Pure Enumeration Types for the Grid Asset Registry.

Defines the lifecycle states of an asset, the two console partitions and
the view controller states. No business logic - pure type definitions only.

Exports:
    LifecycleState: Asset lifecycle enumeration
    AssetPartition: Console view an asset belongs to
    ViewState: View controller state enumeration
"""

from enum import Enum


class LifecycleState(Enum):
    """
    Lifecycle states of a grid asset.

    State transitions:
    - ACTIVE -> SOFT_DELETED (soft delete)
    - SOFT_DELETED -> ACTIVE (restore)
    - ACTIVE -> PURGED, SOFT_DELETED -> PURGED (permanent delete)

    PURGED is terminal: the row no longer exists.
    """

    ACTIVE = "active"
    SOFT_DELETED = "soft_deleted"
    PURGED = "purged"


class AssetPartition(Enum):
    """Console partitions. An asset is visible in at most one at a time."""

    ACTIVE = "active"
    DELETED = "deleted"


class ViewState(Enum):
    """
    View controller states.

    State transitions:
    - IDLE -> LOADING (first refresh)
    - LOADING -> READY (fetch or mutation succeeded)
    - LOADING -> ERROR (fetch or mutation failed)
    - READY|ERROR -> LOADING (every refresh or mutation)
    """

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"
