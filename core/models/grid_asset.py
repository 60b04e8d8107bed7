# ============================================================================
# GRID ASSET ENTITY MODELS
# ============================================================================
# STATUS: Core - canonical entity for the Lifecycle API and asset store
# PURPOSE: GridAsset (persisted) and ProcessedAsset (display projection)
# EXPORTS: GridAsset, ProcessedAsset
# DEPENDENCIES: pydantic, datetime
# ============================================================================
"""
Grid Asset Entity Models.

Architecture:
    - GridAsset: one row of app.grid_assets. Wire names are camelCase
      (lastUpdate, nameLink); Python attributes are snake_case aliases.
    - ProcessedAsset: a GridAsset-shaped record from any source, plus the
      alternate-name fields some sources use (plant_type, source, poletical,
      elevation) and whatever unknown fields they carry. Display only,
      never written back to storage.

Lifecycle:
    deleted=False -> active view
    deleted=True  -> deleted view
    row absent    -> purged
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import AssetPartition, LifecycleState


# ============================================================================
# GRID ASSET MODEL
# ============================================================================

class GridAsset(BaseModel):
    """
    Physical grid-infrastructure asset (substation, line, plant).

    Table: app.grid_assets
    Primary Key: id (uuid4 hex, assigned by the store at creation)

    Mandatory on every committed write: type, address, voltage.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., max_length=64, description="Immutable asset identifier")
    name: Optional[str] = Field(default=None, description="Human readable name")
    type: str = Field(..., description="Asset type (substation, line, plant...)")
    status: Optional[str] = Field(default=None, description="Operational status, form default 'normal'")
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    address: str = Field(..., description="Street or site address")
    voltage: float = Field(..., gt=0, description="Nominal voltage (kV)")
    load: Optional[float] = Field(default=None, ge=0)
    capacity: Optional[float] = Field(default=None, ge=0)
    last_update: datetime = Field(..., alias="lastUpdate", description="Set at creation, never auto-refreshed")
    site: Optional[str] = None
    zone: Optional[str] = None
    woreda: Optional[str] = None
    category: Optional[str] = None
    name_link: Optional[str] = Field(default=None, alias="nameLink")
    deleted: bool = Field(default=False, description="Soft-delete flag")

    @property
    def lifecycle_state(self) -> LifecycleState:
        return LifecycleState.SOFT_DELETED if self.deleted else LifecycleState.ACTIVE

    @property
    def partition(self) -> AssetPartition:
        return AssetPartition.DELETED if self.deleted else AssetPartition.ACTIVE

    def to_wire(self) -> Dict[str, Any]:
        """JSON-safe dict with camelCase keys, as sent over HTTP."""
        return self.model_dump(by_alias=True, mode="json")


# ============================================================================
# DISPLAY PROJECTION
# ============================================================================

class ProcessedAsset(BaseModel):
    """
    Display projection of a raw record.

    Every field is optional and loosely typed because supplementary sources
    do not follow the GridAsset contract. Unknown fields are kept as extras
    under their original keys.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    id: Optional[Any] = None
    name: Optional[Any] = None
    type: Optional[Any] = None
    status: Optional[Any] = None
    latitude: Optional[Any] = None
    longitude: Optional[Any] = None
    address: Optional[Any] = None
    voltage: Optional[Any] = None
    load: Optional[Any] = None
    capacity: Optional[Any] = None
    last_update: Optional[Any] = Field(default=None, alias="lastUpdate")
    site: Optional[Any] = None
    zone: Optional[Any] = None
    woreda: Optional[Any] = None
    category: Optional[Any] = None
    name_link: Optional[Any] = Field(default=None, alias="nameLink")
    deleted: Optional[Any] = None

    # Alternate-name fields used by some sources
    plant_type: Optional[Any] = None
    source: Optional[Any] = None
    poletical: Optional[Any] = None
    elevation: Optional[Any] = None

    def as_dict(self) -> Dict[str, Any]:
        """All field values keyed by wire name, extras included."""
        return self.model_dump(by_alias=True)

    def value(self, wire_name: str) -> Any:
        """Value of one field by wire name, None when absent."""
        return self.as_dict().get(wire_name)

    @property
    def is_deleted(self) -> bool:
        return self.deleted is True
