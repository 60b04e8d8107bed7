"""
Core Schema Package.

Contains the grid asset field schema and the DDL generated from it.

Exports:
    AssetField, FieldKind, DisplayColumn: Schema descriptors
    ASSET_FIELDS: Ordered field schema
    ACTIVE_VIEW_COLUMNS, DELETED_VIEW_COLUMNS: Console column sets
    GridAssetSQL: DDL generator
"""

from .asset_fields import (
    AssetField,
    FieldKind,
    DisplayColumn,
    ASSET_FIELDS,
    SERVER_ASSIGNED_FIELDS,
    ACTIVE_VIEW_COLUMNS,
    DELETED_VIEW_COLUMNS,
    get_field,
    required_fields,
    editable_fields,
)
from .sql_generator import GridAssetSQL

__all__ = [
    'AssetField',
    'FieldKind',
    'DisplayColumn',
    'ASSET_FIELDS',
    'SERVER_ASSIGNED_FIELDS',
    'ACTIVE_VIEW_COLUMNS',
    'DELETED_VIEW_COLUMNS',
    'get_field',
    'required_fields',
    'editable_fields',
    'GridAssetSQL',
]
