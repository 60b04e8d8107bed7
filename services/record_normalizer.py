"""
Record Normalizer.

Turns raw records from any source (API rows, supplementary feeds) into
ProcessedAsset display projections. Pure: never mutates its input and never
drops unknown fields.

Display fallbacks follow the alternates declared in the field schema:
    type    -> plant_type -> source
    address -> site -> poletical

A value is present when it is not None and not a blank string.

Exports:
    normalize, normalize_many: Raw record(s) -> ProcessedAsset
    is_present: Presence rule
    format_value: Canonical string form of a field value
    display_value: Field (or first present alternate) as display text
"""

import math
from datetime import date, datetime
from typing import Any, Iterable, List, Mapping, Union

from core.models import GridAsset, ProcessedAsset
from core.schema import get_field

MISSING_DISPLAY = "-"

RawRecord = Union[Mapping[str, Any], GridAsset, ProcessedAsset]


def is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


def format_value(value: Any) -> str:
    """
    String form used for display and search.

    Booleans render as true/false, integral floats without ".0",
    datetimes as ISO 8601.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def normalize(raw: RawRecord) -> ProcessedAsset:
    if isinstance(raw, ProcessedAsset):
        return raw
    if isinstance(raw, GridAsset):
        return ProcessedAsset.model_validate(raw.model_dump(by_alias=True))
    return ProcessedAsset.model_validate(dict(raw))


def normalize_many(raws: Iterable[RawRecord]) -> List[ProcessedAsset]:
    """Normalize a collection, preserving order."""
    return [normalize(raw) for raw in raws]


def display_value(asset: ProcessedAsset, field_name: str) -> str:
    """
    Display text for one field.

    Reads the field, then its schema alternates in order; returns "-" when
    none is present.
    """
    field = get_field(field_name)
    candidates = (field_name,) + (field.alternates if field else ())
    values = asset.as_dict()
    for name in candidates:
        value = values.get(name)
        if is_present(value):
            return format_value(value)
    return MISSING_DISPLAY
