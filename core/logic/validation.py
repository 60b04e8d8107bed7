# ============================================================================
# GRID ASSET FIELD VALIDATION
# ============================================================================
# STATUS: Core - shared by the console edge and the Lifecycle API
# PURPOSE: Mandatory-field, type and range checks driven by the field schema
# EXPORTS: validate_create, validate_update, coerce_form_values,
#          writable_create_fields, prepare_store_values, parse_datetime
# DEPENDENCIES: core.schema.asset_fields
# ============================================================================
"""
Grid Asset Field Validation.

The same rules run in two places: the console refuses to submit a form that
fails them, and the Lifecycle API refuses to commit a payload that fails
them. Both return a per-field message map; an empty map means valid.

Rules:
    - type, address: present and non-blank after strip
    - voltage: present, numeric, non-zero (and positive)
    - latitude [-90, 90], longitude [-180, 180], load >= 0, capacity >= 0
    - text fields must be strings, numbers must be finite numbers
    - deleted and lastUpdate may be omitted but never null
    - keys not in the field schema are rejected
    - on update only the fields present are checked and id cannot change
"""

import math
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from exceptions import ContractViolationError
from ..schema.asset_fields import (
    AssetField,
    FieldKind,
    SERVER_ASSIGNED_FIELDS,
    get_field,
    required_fields,
)


UNKNOWN_FIELD_MESSAGE = "Unknown field."
ID_IMMUTABLE_MESSAGE = "Id cannot be changed."


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def parse_datetime(value: Any) -> Optional[datetime]:
    """Parse an ISO 8601 string (trailing Z accepted); datetimes pass through."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


_KIND_MESSAGES = {
    FieldKind.TEXT: "must be text.",
    FieldKind.NUMBER: "must be a number.",
    FieldKind.DATETIME: "must be an ISO 8601 date and time.",
    FieldKind.BOOL: "must be true or false.",
}


def _kind_message(field: AssetField) -> str:
    return f"{field.label} {_KIND_MESSAGES[field.kind]}"


def _check_field(field: AssetField, value: Any) -> Optional[str]:
    """Message for one present field, or None when the value is acceptable."""
    if field.required and _is_blank(value):
        return field.required_message
    if value is None:
        # NOT NULL columns with a store default may be omitted, not nulled
        return None if field.nullable else _kind_message(field)

    if field.kind == FieldKind.TEXT:
        if not isinstance(value, str):
            return _kind_message(field)
        return None

    if field.kind == FieldKind.NUMBER:
        if not _is_number(value):
            return _kind_message(field)
        if field.positive and value == 0:
            # zero voltage counts as missing
            return field.required_message
        if field.positive and value < 0:
            return field.range_message
        if field.minimum is not None and value < field.minimum:
            return field.range_message
        if field.maximum is not None and value > field.maximum:
            return field.range_message
        return None

    if field.kind == FieldKind.DATETIME:
        if parse_datetime(value) is None:
            return _kind_message(field)
        return None

    if field.kind == FieldKind.BOOL and not isinstance(value, bool):
        return _kind_message(field)
    return None


def _require_mapping(fields: Any) -> None:
    if not isinstance(fields, Mapping):
        raise ContractViolationError(
            f"Asset fields must be a mapping, got {type(fields).__name__}"
        )


def validate_create(fields: Mapping[str, Any]) -> Dict[str, str]:
    """
    Validate a create payload.

    Server-assigned keys (id, deleted, lastUpdate) are not validated; the
    caller drops them before persisting.

    Returns:
        Field name -> message; empty when valid
    """
    _require_mapping(fields)
    errors: Dict[str, str] = {}

    for field in required_fields():
        message = _check_field(field, fields.get(field.name))
        if message:
            errors[field.name] = message

    for name, value in fields.items():
        if name in errors or name in SERVER_ASSIGNED_FIELDS:
            continue
        field = get_field(name)
        if field is None:
            errors[name] = UNKNOWN_FIELD_MESSAGE
            continue
        if field.required:
            continue
        message = _check_field(field, value)
        if message:
            errors[name] = message

    return errors


def validate_update(fields: Mapping[str, Any], asset_id: Optional[str] = None) -> Dict[str, str]:
    """
    Validate a partial update. Only the fields present are checked.

    Args:
        fields: Fields to change (may include id, which must equal asset_id)
        asset_id: Id of the asset being updated

    Returns:
        Field name -> message; empty when valid
    """
    _require_mapping(fields)
    errors: Dict[str, str] = {}

    for name, value in fields.items():
        if name == "id":
            if asset_id is not None and value != asset_id:
                errors["id"] = ID_IMMUTABLE_MESSAGE
            continue
        field = get_field(name)
        if field is None:
            errors[name] = UNKNOWN_FIELD_MESSAGE
            continue
        message = _check_field(field, value)
        if message:
            errors[name] = message

    return errors


def coerce_form_values(values: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Convert console text input to typed values using the field schema.

    Blank numeric input becomes None, "12.5" becomes 12.5, "true"/"false"
    become booleans. Values that do not parse are left as they are so
    validation reports them. Unknown keys pass through untouched.
    """
    _require_mapping(values)
    coerced: Dict[str, Any] = {}
    for name, value in values.items():
        field = get_field(name)
        if field is None or not isinstance(value, str):
            coerced[name] = value
            continue

        if field.kind == FieldKind.NUMBER:
            text = value.strip()
            if not text:
                coerced[name] = None
                continue
            try:
                coerced[name] = float(text)
            except ValueError:
                coerced[name] = value
        elif field.kind == FieldKind.BOOL and value.strip().lower() in ("true", "false"):
            coerced[name] = value.strip().lower() == "true"
        else:
            coerced[name] = value
    return coerced


def writable_create_fields(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Create payload without the keys the store assigns."""
    return {k: v for k, v in fields.items() if k not in SERVER_ASSIGNED_FIELDS}


def prepare_store_values(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Typed column values for an already validated payload.

    ints become floats for numeric columns and ISO strings become datetimes.
    The id key is dropped; it addresses the row, it is never written.
    """
    prepared: Dict[str, Any] = {}
    for name, value in fields.items():
        if name == "id":
            continue
        field = get_field(name)
        if field is not None and value is not None:
            if field.kind == FieldKind.NUMBER:
                value = float(value)
            elif field.kind == FieldKind.DATETIME:
                value = parse_datetime(value)
        prepared[name] = value
    return prepared
