"""
Grid Asset Field Schema.

One ordered declaration of every GridAsset field. The record normalizer,
the validation layer, the console form logic and the DDL generator all
read this schema instead of iterating over whatever keys a record has.

Exports:
    FieldKind: Value kind of a field
    AssetField: Field descriptor
    DisplayColumn: Console table column
    ASSET_FIELDS: Ordered field schema
    ACTIVE_VIEW_COLUMNS, DELETED_VIEW_COLUMNS: Column sets per view
    get_field, required_fields, editable_fields
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class FieldKind(Enum):
    TEXT = "text"
    NUMBER = "number"
    DATETIME = "datetime"
    BOOL = "bool"


@dataclass(frozen=True)
class AssetField:
    """
    Descriptor for one GridAsset field.

    name is the wire name (camelCase). alternates are fallback field names
    read, in order, when the field itself is not present on a record.
    minimum/maximum are inclusive; positive means strictly greater than 0.
    nullable=False marks a NOT NULL column that has a store default: it may
    be omitted from a payload but never sent as null.
    """

    name: str
    kind: FieldKind
    label: str
    required: bool = False
    alternates: Tuple[str, ...] = ()
    editable: bool = True
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    positive: bool = False
    nullable: bool = True

    @property
    def required_message(self) -> str:
        return f"{self.label} is required."

    @property
    def range_message(self) -> str:
        if self.positive:
            return f"{self.label} must be greater than 0."
        if self.minimum is not None and self.maximum is not None:
            return f"{self.label} must be between {self.minimum:g} and {self.maximum:g}."
        if self.minimum is not None:
            return f"{self.label} must be at least {self.minimum:g}."
        return f"{self.label} must be at most {self.maximum:g}."


@dataclass(frozen=True)
class DisplayColumn:
    """Console table column: header label plus the field it shows."""

    label: str
    field: str


ASSET_FIELDS: Tuple[AssetField, ...] = (
    AssetField("id", FieldKind.TEXT, "Id", editable=False),
    AssetField("name", FieldKind.TEXT, "Name"),
    AssetField("type", FieldKind.TEXT, "Type", required=True, alternates=("plant_type", "source")),
    AssetField("status", FieldKind.TEXT, "Status"),
    AssetField("latitude", FieldKind.NUMBER, "Latitude", minimum=-90, maximum=90),
    AssetField("longitude", FieldKind.NUMBER, "Longitude", minimum=-180, maximum=180),
    AssetField("address", FieldKind.TEXT, "Address", required=True, alternates=("site", "poletical")),
    AssetField("voltage", FieldKind.NUMBER, "Voltage", required=True, positive=True),
    AssetField("load", FieldKind.NUMBER, "Load", minimum=0),
    AssetField("capacity", FieldKind.NUMBER, "Capacity", minimum=0),
    AssetField("lastUpdate", FieldKind.DATETIME, "Last update", nullable=False),
    AssetField("site", FieldKind.TEXT, "Site"),
    AssetField("zone", FieldKind.TEXT, "Zone"),
    AssetField("woreda", FieldKind.TEXT, "Woreda"),
    AssetField("category", FieldKind.TEXT, "Category"),
    AssetField("nameLink", FieldKind.TEXT, "Name link"),
    AssetField("deleted", FieldKind.BOOL, "Deleted", editable=False, nullable=False),
)

# Fields the store assigns; a create payload never sets them
SERVER_ASSIGNED_FIELDS: Tuple[str, ...] = ("id", "deleted", "lastUpdate")

ACTIVE_VIEW_COLUMNS: Tuple[DisplayColumn, ...] = (
    DisplayColumn("Name", "name"),
    DisplayColumn("Type", "type"),
    DisplayColumn("Status", "status"),
    DisplayColumn("Address", "address"),
    DisplayColumn("Elevation (m)", "elevation"),
)

DELETED_VIEW_COLUMNS: Tuple[DisplayColumn, ...] = (
    DisplayColumn("Name", "name"),
    DisplayColumn("Type", "type"),
    DisplayColumn("Status", "status"),
)

_FIELDS_BY_NAME: Dict[str, AssetField] = {f.name: f for f in ASSET_FIELDS}


def get_field(name: str) -> Optional[AssetField]:
    return _FIELDS_BY_NAME.get(name)


def required_fields() -> Tuple[AssetField, ...]:
    return tuple(f for f in ASSET_FIELDS if f.required)


def editable_fields() -> Tuple[AssetField, ...]:
    """Fields a console form may edit (id and deleted are managed by actions)."""
    return tuple(f for f in ASSET_FIELDS if f.editable)
