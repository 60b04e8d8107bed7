"""
Core Data Models Package.

Contains pure data structures without business logic.
All business logic is in the core.logic package.

Exports:
    GridAsset: Persisted asset entity
    ProcessedAsset: Display projection
    LifecycleState, AssetPartition, ViewState: Enums
"""

# Enums
from .enums import (
    LifecycleState,
    AssetPartition,
    ViewState
)

# Asset models
from .grid_asset import (
    GridAsset,
    ProcessedAsset
)

__all__ = [
    'LifecycleState',
    'AssetPartition',
    'ViewState',
    'GridAsset',
    'ProcessedAsset'
]
