"""
Active Assets View Controller.

Lists assets with deleted=false, merged with any supplementary record
sources, and carries the create / edit / soft delete actions.
"""

from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from config.defaults import ConsoleDefaults
from core.logic.validation import coerce_form_values, validate_create, validate_update
from core.models import ProcessedAsset
from core.schema import ACTIVE_VIEW_COLUMNS, SERVER_ASSIGNED_FIELDS, editable_fields
from .api_client import CREATE_FAILED, DELETE_FAILED, UPDATE_FAILED, GridAssetApiClient
from .view_controller import AlertHook, AssetViewController, ConfirmHook

DELETE_CONFIRMATION = "Are you sure you want to delete this asset?"

RecordSource = Callable[[], Iterable[Mapping[str, Any]]]


def new_asset_form() -> Dict[str, Any]:
    """Initial values of the "add asset" form."""
    return {
        "name": "",
        "type": "",
        "status": "normal",
        "latitude": 0,
        "longitude": 0,
        "address": "",
        "voltage": 0,
        "load": 0,
        "capacity": 0,
        "lastUpdate": datetime.now(timezone.utc).isoformat(),
        "site": "",
        "zone": "",
        "woreda": "",
        "category": "",
        "nameLink": "",
    }


def edit_asset_form(asset: ProcessedAsset) -> Dict[str, Any]:
    """
    Initial values of the "edit asset" form, pre-filled from a listed row.

    Only editable schema fields are carried, so display-only keys such as
    plant_type or elevation never reach the PATCH. A NOT NULL field the row
    lacks is left out and keeps its stored value.
    """
    form: Dict[str, Any] = {}
    for field in editable_fields():
        value = asset.value(field.name)
        if value is None and not field.nullable:
            continue
        if isinstance(value, datetime):
            value = value.isoformat()
        form[field.name] = value
    return form


class ActiveAssetsController(AssetViewController):
    """
    Active view.

    `supplementary_sources` are callables returning extra raw records
    (e.g. processed survey data); they are appended after the API records
    and go through the same normalizer and deduplication.
    """

    columns = ACTIVE_VIEW_COLUMNS

    def __init__(
        self,
        client: GridAssetApiClient,
        supplementary_sources: Sequence[RecordSource] = (),
        page_size: int = ConsoleDefaults.PAGE_SIZE,
        confirm: Optional[ConfirmHook] = None,
        alert: Optional[AlertHook] = None
    ):
        super().__init__(client, page_size=page_size, confirm=confirm, alert=alert)
        self.supplementary_sources = list(supplementary_sources)

    def fetch(self) -> List[Mapping[str, Any]]:
        records: List[Mapping[str, Any]] = list(self.client.list_assets(include_deleted=False))
        for source in self.supplementary_sources:
            records.extend(source())
        return records

    def select(self, asset: ProcessedAsset) -> bool:
        return not asset.is_deleted

    def create_asset(self, values: Mapping[str, Any]) -> bool:
        """
        Validate the form at the edge, then POST.

        Validation failures fill `form_errors` and no request is issued.
        """
        if not self.controls_enabled:
            return False
        fields = coerce_form_values(values)
        self.form_errors = validate_create(fields)
        if self.form_errors:
            self.logger.info(f"Create blocked by validation: {sorted(self.form_errors)}")
            return False
        payload = {k: v for k, v in fields.items() if k not in SERVER_ASSIGNED_FIELDS}
        return self._mutate("create", lambda: self.client.create_asset(payload), CREATE_FAILED)

    def update_asset(self, asset_id: str, values: Mapping[str, Any]) -> bool:
        if not self.controls_enabled:
            return False
        fields = coerce_form_values(values)
        self.form_errors = validate_update(fields, asset_id)
        if self.form_errors:
            self.logger.info(f"Update of {asset_id} blocked by validation: {sorted(self.form_errors)}")
            return False
        payload = {k: v for k, v in fields.items() if k != "id"}
        return self._mutate(
            "update", lambda: self.client.update_asset(asset_id, payload), UPDATE_FAILED
        )

    def delete_asset(self, asset_id: str) -> bool:
        """Soft delete after confirmation; the asset moves to the deleted view."""
        if not self.controls_enabled or not self.confirm(DELETE_CONFIRMATION):
            return False
        return self._mutate("delete", lambda: self.client.delete_asset(asset_id), DELETE_FAILED)
