"""
GridAsset / ProcessedAsset model tests.
"""

import pytest
from pydantic import ValidationError

from core.models import AssetPartition, GridAsset, LifecycleState, ProcessedAsset
from tests.factories.model_factories import make_grid_asset


class TestGridAsset:

    def test_accepts_wire_names(self, grid_asset_data):
        asset = GridAsset.model_validate(grid_asset_data)
        assert asset.last_update == grid_asset_data["lastUpdate"]

    def test_to_wire_is_json_safe_camel_case(self, grid_asset_data):
        wire = GridAsset.model_validate(grid_asset_data).to_wire()
        assert isinstance(wire["lastUpdate"], str)
        assert "nameLink" in wire and "name_link" not in wire

    @pytest.mark.parametrize("deleted,state,partition", [
        (False, LifecycleState.ACTIVE, AssetPartition.ACTIVE),
        (True, LifecycleState.SOFT_DELETED, AssetPartition.DELETED),
    ])
    def test_lifecycle_projection(self, deleted, state, partition):
        asset = GridAsset.model_validate(make_grid_asset(deleted=deleted))
        assert asset.lifecycle_state == state
        assert asset.partition == partition

    @pytest.mark.parametrize("overrides", [
        {"voltage": 0},
        {"latitude": 95},
        {"longitude": -200},
        {"load": -1},
        {"type": None},
    ])
    def test_stored_record_invariants(self, overrides):
        with pytest.raises(ValidationError):
            GridAsset.model_validate(make_grid_asset(**overrides))


class TestProcessedAsset:

    def test_loose_and_frozen(self):
        asset = ProcessedAsset.model_validate({"id": 7, "voltage": "n/a", "circuit": "C1"})
        assert asset.value("circuit") == "C1"
        with pytest.raises(ValidationError):
            asset.id = 8

    def test_is_deleted_only_for_true(self):
        assert ProcessedAsset.model_validate({"deleted": True}).is_deleted
        assert not ProcessedAsset.model_validate({"deleted": "true"}).is_deleted
        assert not ProcessedAsset.model_validate({}).is_deleted
