"""
SQL DDL generation tests: GridAssetSQL.

Tests that the generator produces the grid_assets table from the field schema.
"""

import pytest

from core.schema import ASSET_FIELDS, FieldKind
from core.schema.sql_generator import GridAssetSQL


def _render(stmt) -> str:
    return stmt.as_string(None)


class TestSqlTypeMapping:

    @pytest.fixture
    def generator(self):
        return GridAssetSQL("app", "grid_assets")

    def test_every_field_kind_mapped(self):
        assert set(GridAssetSQL.TYPE_MAP) == set(FieldKind)

    def test_generate_all_order(self, generator):
        stmts = [_render(s) for s in generator.generate_all()]
        assert stmts[0].startswith("CREATE SCHEMA")
        assert stmts[1].startswith("CREATE TABLE IF NOT EXISTS")
        assert all(s.startswith("CREATE INDEX") for s in stmts[2:])

    def test_table_has_one_column_per_field(self, generator):
        table = _render(generator.generate_table())
        for field in ASSET_FIELDS:
            assert f'"{field.name}" {GridAssetSQL.TYPE_MAP[field.kind]}' in table

    @pytest.mark.parametrize("field_name,clause", [
        ("id", '"id" TEXT PRIMARY KEY'),
        ("deleted", '"deleted" BOOLEAN NOT NULL DEFAULT false'),
        ("lastUpdate", '"lastUpdate" TIMESTAMPTZ NOT NULL DEFAULT now()'),
        ("type", '"type" TEXT NOT NULL'),
        ("address", '"address" TEXT NOT NULL'),
        ("voltage", '"voltage" DOUBLE PRECISION NOT NULL'),
    ])
    def test_column_constraints(self, generator, field_name, clause):
        assert clause in _render(generator.generate_table())

    def test_optional_columns_nullable(self, generator):
        field = next(f for f in ASSET_FIELDS if f.name == "zone")
        assert _render(generator.column_definition(field)) == '"zone" TEXT'

    def test_check_constraints(self, generator):
        checks = " ".join(_render(c) for c in generator.check_constraints())
        assert "CHECK (btrim(\"type\") <> '')" in checks
        assert "CHECK (btrim(\"address\") <> '')" in checks
        assert 'CHECK ("voltage" > 0)' in checks
        assert '"latitude" >=' in checks and '"latitude" <=' in checks

    def test_listing_index(self, generator):
        index = _render(generator.generate_indexes()[0])
        assert '("deleted", "lastUpdate", "id")' in index
