"""
Field validation tests: shared by the console edge and the Lifecycle API.
"""

from datetime import datetime, timezone

import pytest

from core.logic.validation import (
    UNKNOWN_FIELD_MESSAGE,
    ID_IMMUTABLE_MESSAGE,
    coerce_form_values,
    parse_datetime,
    prepare_store_values,
    validate_create,
    validate_update,
    writable_create_fields,
)
from exceptions import ContractViolationError


# ============================================================================
# validate_create
# ============================================================================

class TestValidateCreate:

    def test_valid_payload_has_no_errors(self, asset_fields):
        assert validate_create(asset_fields) == {}

    @pytest.mark.parametrize("field,value,message", [
        ("type", "", "Type is required."),
        ("type", "   ", "Type is required."),
        ("type", None, "Type is required."),
        ("address", "", "Address is required."),
        ("voltage", None, "Voltage is required."),
        ("voltage", 0, "Voltage is required."),
    ])
    def test_mandatory_fields(self, asset_fields, field, value, message):
        asset_fields[field] = value
        assert validate_create(asset_fields)[field] == message

    def test_missing_mandatory_keys_reported_together(self):
        errors = validate_create({"name": "Bare"})
        assert errors == {
            "type": "Type is required.",
            "address": "Address is required.",
            "voltage": "Voltage is required.",
        }

    @pytest.mark.parametrize("field,value,message", [
        ("latitude", 91, "Latitude must be between -90 and 90."),
        ("latitude", -90.5, "Latitude must be between -90 and 90."),
        ("longitude", 181, "Longitude must be between -180 and 180."),
        ("load", -1, "Load must be at least 0."),
        ("capacity", -0.5, "Capacity must be at least 0."),
        ("voltage", -33, "Voltage must be greater than 0."),
    ])
    def test_numeric_ranges(self, asset_fields, field, value, message):
        asset_fields[field] = value
        assert validate_create(asset_fields) == {field: message}

    def test_range_bounds_are_inclusive(self, asset_fields):
        asset_fields.update(latitude=-90, longitude=180, load=0)
        assert validate_create(asset_fields) == {}

    def test_wrong_types(self, asset_fields):
        asset_fields.update(voltage="high", name=12, lastUpdate="yesterday")
        errors = validate_create(asset_fields)
        assert errors["voltage"] == "Voltage must be a number."
        assert errors["name"] == "Name must be text."
        # server-assigned, not validated at create
        assert "lastUpdate" not in errors

    def test_boolean_is_not_a_number(self, asset_fields):
        asset_fields["voltage"] = True
        assert validate_create(asset_fields)["voltage"] == "Voltage must be a number."

    def test_unknown_field_rejected(self, asset_fields):
        asset_fields["colour"] = "red"
        assert validate_create(asset_fields) == {"colour": UNKNOWN_FIELD_MESSAGE}

    def test_server_assigned_keys_ignored(self, asset_fields):
        asset_fields.update(id="client-id", deleted=True, lastUpdate="not a date")
        assert validate_create(asset_fields) == {}

    def test_non_mapping_is_contract_violation(self):
        with pytest.raises(ContractViolationError):
            validate_create(["type", "address"])


# ============================================================================
# validate_update
# ============================================================================

class TestValidateUpdate:

    def test_only_present_fields_checked(self):
        assert validate_update({"status": "fault"}, "a1") == {}

    def test_blank_mandatory_field_rejected(self):
        assert validate_update({"address": " "}, "a1") == {"address": "Address is required."}

    def test_id_must_match(self):
        assert validate_update({"id": "other"}, "a1") == {"id": ID_IMMUTABLE_MESSAGE}
        assert validate_update({"id": "a1", "name": "x"}, "a1") == {}

    def test_deleted_must_be_boolean(self):
        assert validate_update({"deleted": "no"}, "a1") == {"deleted": "Deleted must be true or false."}
        assert validate_update({"deleted": False}, "a1") == {}

    def test_last_update_checked_on_update(self):
        errors = validate_update({"lastUpdate": "soon"}, "a1")
        assert errors == {"lastUpdate": "Last update must be an ISO 8601 date and time."}

    def test_unknown_field_rejected(self):
        assert validate_update({"colour": "red"}, "a1") == {"colour": UNKNOWN_FIELD_MESSAGE}

    @pytest.mark.parametrize("field,message", [
        ("deleted", "Deleted must be true or false."),
        ("lastUpdate", "Last update must be an ISO 8601 date and time."),
    ])
    def test_not_null_columns_reject_null(self, field, message):
        assert validate_update({field: None}, "a1") == {field: message}

    def test_optional_fields_may_be_cleared(self):
        assert validate_update({"status": None, "load": None}, "a1") == {}


# ============================================================================
# Form coercion and store preparation
# ============================================================================

class TestCoercion:

    def test_numeric_text_becomes_float(self):
        assert coerce_form_values({"voltage": "12.5"}) == {"voltage": 12.5}

    def test_blank_numeric_becomes_none(self):
        assert coerce_form_values({"load": "  "}) == {"load": None}

    def test_unparseable_number_left_for_validation(self):
        fields = coerce_form_values({"voltage": "abc"})
        assert fields == {"voltage": "abc"}
        assert validate_update(fields, "a1")["voltage"] == "Voltage must be a number."

    def test_boolean_text(self):
        assert coerce_form_values({"deleted": "TRUE"}) == {"deleted": True}

    def test_text_and_unknown_untouched(self):
        values = {"type": " feeder ", "colour": "red", "latitude": 9.0}
        assert coerce_form_values(values) == values

    def test_input_not_mutated(self):
        values = {"voltage": "33"}
        coerce_form_values(values)
        assert values == {"voltage": "33"}

    def test_writable_create_fields_drops_server_keys(self, asset_fields):
        asset_fields.update(id="x", deleted=True, lastUpdate="2024-01-01T00:00:00Z")
        writable = writable_create_fields(asset_fields)
        assert not {"id", "deleted", "lastUpdate"} & set(writable)

    def test_prepare_store_values(self):
        prepared = prepare_store_values({
            "id": "a1", "voltage": 33, "lastUpdate": "2024-05-01T10:00:00Z", "name": "N",
        })
        assert "id" not in prepared
        assert prepared["voltage"] == 33.0 and isinstance(prepared["voltage"], float)
        assert prepared["lastUpdate"] == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)
        assert prepared["name"] == "N"


class TestParseDatetime:

    def test_trailing_z(self):
        assert parse_datetime("2024-01-02T03:04:05Z").tzinfo is not None

    def test_datetime_passes_through(self):
        now = datetime.now(timezone.utc)
        assert parse_datetime(now) is now

    @pytest.mark.parametrize("value", ["", "not-a-date", 12, None])
    def test_invalid(self, value):
        assert parse_datetime(value) is None
