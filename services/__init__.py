"""
Grid Asset Services - Explicit Exports (No Auto-Discovery!)

Server side:
    AuthorizationGate, authorize, require_admin: Role check before every operation
    GridAssetService, DeleteOutcome: Lifecycle API operations

Client side (pure, used by the console view controllers):
    normalize, normalize_many, display_value: Record Normalizer
    reconcile, PageResult: Collection Reconciliation Pipeline
"""

from .authorization import AuthorizationDecision, AuthorizationGate, authorize, require_admin
from .grid_asset_service import GridAssetService, DeleteOutcome
from .record_normalizer import normalize, normalize_many, display_value, format_value, is_present
from .reconciliation import (
    PageResult,
    DEFAULT_PAGE_SIZE,
    deduplicate,
    filter_assets,
    paginate,
    reconcile,
    total_pages_for,
)

__all__ = [
    'AuthorizationDecision',
    'AuthorizationGate',
    'authorize',
    'require_admin',
    'GridAssetService',
    'DeleteOutcome',
    'normalize',
    'normalize_many',
    'display_value',
    'format_value',
    'is_present',
    'PageResult',
    'DEFAULT_PAGE_SIZE',
    'deduplicate',
    'filter_assets',
    'paginate',
    'reconcile',
    'total_pages_for',
]
