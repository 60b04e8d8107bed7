"""
Field Schema to PostgreSQL DDL Generator.

Generates the grid asset table DDL from core.schema.asset_fields so the
table always matches the field schema.

Exports:
    GridAssetSQL: Generator for the grid_assets table and its indexes

Dependencies:
    psycopg: SQL composition
    core.schema.asset_fields: ASSET_FIELDS, FieldKind
"""

from typing import Dict, List

from psycopg import sql

from util_logger import LoggerFactory, ComponentType
from .asset_fields import ASSET_FIELDS, AssetField, FieldKind


class GridAssetSQL:
    """
    Convert the asset field schema to PostgreSQL DDL statements.

    Column names are the wire names, quoted, so "lastUpdate" keeps its case.
    """

    TYPE_MAP: Dict[FieldKind, str] = {
        FieldKind.TEXT: "TEXT",
        FieldKind.NUMBER: "DOUBLE PRECISION",
        FieldKind.DATETIME: "TIMESTAMPTZ",
        FieldKind.BOOL: "BOOLEAN",
    }

    def __init__(self, schema_name: str = "app", table_name: str = "grid_assets"):
        self.schema_name = schema_name
        self.table_name = table_name
        self.logger = LoggerFactory.create_logger(ComponentType.FACTORY, "GridAssetSQL")

    def column_definition(self, field: AssetField) -> sql.Composed:
        """
        One column clause.

        id is the primary key; deleted and lastUpdate are NOT NULL with
        defaults; required fields are NOT NULL.
        """
        parts = [sql.Identifier(field.name), sql.SQL(self.TYPE_MAP[field.kind])]
        if field.name == "id":
            parts.append(sql.SQL("PRIMARY KEY"))
        elif field.name == "deleted":
            parts.append(sql.SQL("NOT NULL DEFAULT false"))
        elif field.name == "lastUpdate":
            parts.append(sql.SQL("NOT NULL DEFAULT now()"))
        elif field.required:
            parts.append(sql.SQL("NOT NULL"))
        return sql.SQL(" ").join(parts)

    def check_constraints(self) -> List[sql.Composed]:
        """CHECK clauses for mandatory text and numeric ranges."""
        checks = []
        for field in ASSET_FIELDS:
            column = sql.Identifier(field.name)
            if field.required and field.kind == FieldKind.TEXT:
                checks.append(sql.SQL("CHECK (btrim({}) <> '')").format(column))
            if field.positive:
                checks.append(sql.SQL("CHECK ({} > 0)").format(column))
            if field.minimum is not None:
                checks.append(sql.SQL("CHECK ({} >= {})").format(column, sql.Literal(field.minimum)))
            if field.maximum is not None:
                checks.append(sql.SQL("CHECK ({} <= {})").format(column, sql.Literal(field.maximum)))
        return checks

    def generate_table(self) -> sql.Composed:
        clauses = [self.column_definition(f) for f in ASSET_FIELDS] + self.check_constraints()
        return sql.SQL("CREATE TABLE IF NOT EXISTS {}.{} (\n    {}\n)").format(
            sql.Identifier(self.schema_name),
            sql.Identifier(self.table_name),
            sql.SQL(",\n    ").join(clauses),
        )

    def generate_indexes(self) -> List[sql.Composed]:
        """Index backing the default listing (deleted filter, lastUpdate order)."""
        return [
            sql.SQL("CREATE INDEX IF NOT EXISTS {} ON {}.{} ({}, {}, {})").format(
                sql.Identifier(f"idx_{self.table_name}_deleted_last_update"),
                sql.Identifier(self.schema_name),
                sql.Identifier(self.table_name),
                sql.Identifier("deleted"),
                sql.Identifier("lastUpdate"),
                sql.Identifier("id"),
            )
        ]

    def generate_all(self) -> List[sql.Composed]:
        """Schema, table and index statements in execution order."""
        statements = [
            sql.SQL("CREATE SCHEMA IF NOT EXISTS {}").format(sql.Identifier(self.schema_name)),
            self.generate_table(),
        ]
        statements.extend(self.generate_indexes())
        self.logger.debug(f"Generated {len(statements)} DDL statements for {self.schema_name}.{self.table_name}")
        return statements
