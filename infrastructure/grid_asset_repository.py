# ============================================================================
# CLAUDE CONTEXT - GRID ASSET REPOSITORY
# ============================================================================
# STATUS: Infrastructure - GridAsset CRUD and lifecycle
# PURPOSE: Database operations for the app.grid_assets table
# EXPORTS: GridAssetRepository
# DEPENDENCIES: psycopg, core.models.grid_asset, core.schema
# ============================================================================
"""
Grid Asset Repository.

Database operations for GridAsset rows.

Features:
    - Listing with the deleted filter (default excludes soft-deleted rows)
    - Create with store-assigned id, deleted=false and lastUpdate=now
    - Partial update, soft delete and purge, each locking the row with
      SELECT ... FOR UPDATE and checking the lifecycle transition inside
      the same transaction
    - Table DDL generated from the field schema

Exports:
    GridAssetRepository: PostgreSQL implementation of IGridAssetRepository
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from psycopg import sql

from core.logic.transitions import lifecycle_state_for
from core.logic.validation import prepare_store_values
from core.models import GridAsset, LifecycleState
from core.schema import GridAssetSQL, get_field
from exceptions import ContractViolationError, ResourceNotFoundError
from .connection_pool import StoreHandle
from .interface_repository import IGridAssetRepository
from .postgresql import PostgreSQLRepository


class GridAssetRepository(PostgreSQLRepository, IGridAssetRepository):
    """
    Repository for GridAsset operations.

    Table: {schema}.grid_assets (columns are the wire names)
    """

    def __init__(self, store: StoreHandle, schema_name: str = "app", table_name: str = "grid_assets"):
        super().__init__(store, schema_name)
        self.table = table_name

    def _table_ref(self) -> sql.Composed:
        return sql.SQL("{}.{}").format(sql.Identifier(self.schema_name), sql.Identifier(self.table))

    @staticmethod
    def _check_columns(values: Dict[str, Any]) -> None:
        unknown = [name for name in values if get_field(name) is None]
        if unknown:
            raise ContractViolationError(f"Unknown grid asset columns: {unknown}")

    # =========================================================================
    # SCHEMA
    # =========================================================================

    def ensure_table(self) -> None:
        """Create schema, table and indexes if missing (idempotent)."""
        statements = GridAssetSQL(self.schema_name, self.table).generate_all()
        with self._transaction("ensure table") as cur:
            for statement in statements:
                cur.execute(statement)
        self.logger.info(f"✅ Ensured table {self.schema_name}.{self.table}")

    # =========================================================================
    # READ
    # =========================================================================

    def list_assets(self, include_deleted: bool = False) -> List[GridAsset]:
        """
        List assets ordered by lastUpdate, then id.

        Args:
            include_deleted: Include soft-deleted rows

        Returns:
            GridAsset list (may be empty)
        """
        where = sql.SQL("") if include_deleted else sql.SQL("WHERE {} = false").format(sql.Identifier("deleted"))
        query = sql.SQL("SELECT * FROM {} {} ORDER BY {}, {}").format(
            self._table_ref(),
            where,
            sql.Identifier("lastUpdate"),
            sql.Identifier("id"),
        )
        rows = self._execute_query(query, fetch='all', operation="list grid assets")
        self.logger.debug(f"Listed {len(rows)} grid assets (include_deleted={include_deleted})")
        return [self._row_to_model(row) for row in rows]

    def get_asset(self, asset_id: str) -> Optional[GridAsset]:
        """Get an asset by primary key (includes soft-deleted)."""
        query = sql.SQL("SELECT * FROM {} WHERE {} = %s").format(self._table_ref(), sql.Identifier("id"))
        row = self._execute_query(query, (asset_id,), fetch='one', operation="get grid asset")
        return self._row_to_model(row) if row else None

    # =========================================================================
    # CREATE
    # =========================================================================

    def create_asset(self, fields: Dict[str, Any]) -> GridAsset:
        """
        Insert a new GridAsset row.

        Args:
            fields: Validated wire-name fields (server-assigned keys ignored)

        Returns:
            Created GridAsset
        """
        values = prepare_store_values(fields)
        values.pop("deleted", None)
        values.pop("lastUpdate", None)
        self._check_columns(values)

        asset_id = uuid.uuid4().hex
        values = {"id": asset_id, **values, "deleted": False, "lastUpdate": datetime.now(timezone.utc)}
        columns = list(values.keys())

        query = sql.SQL("INSERT INTO {} ({}) VALUES ({}) RETURNING *").format(
            self._table_ref(),
            sql.SQL(", ").join(sql.Identifier(c) for c in columns),
            sql.SQL(", ").join(sql.Placeholder() for _ in columns),
        )

        self.logger.info(f"Creating grid asset: {asset_id} (type={values.get('type')})")
        with self._transaction("create grid asset", asset_id) as cur:
            cur.execute(query, tuple(values[c] for c in columns))
            row = cur.fetchone()
        self.logger.info(f"Created grid asset: {asset_id}")
        return self._row_to_model(row)

    # =========================================================================
    # UPDATE / LIFECYCLE
    # =========================================================================

    def _lock_row(self, cur, asset_id: str) -> Dict[str, Any]:
        """SELECT ... FOR UPDATE; raises ResourceNotFoundError when absent."""
        cur.execute(
            sql.SQL("SELECT * FROM {} WHERE {} = %s FOR UPDATE").format(
                self._table_ref(), sql.Identifier("id")
            ),
            (asset_id,)
        )
        row = cur.fetchone()
        if row is None:
            raise ResourceNotFoundError(f"Grid asset not found: {asset_id}")
        return row

    def _update_locked(self, cur, asset_id: str, values: Dict[str, Any]) -> Dict[str, Any]:
        columns = list(values.keys())
        cur.execute(
            sql.SQL("UPDATE {} SET {} WHERE {} = %s RETURNING *").format(
                self._table_ref(),
                sql.SQL(", ").join(
                    sql.SQL("{} = %s").format(sql.Identifier(c)) for c in columns
                ),
                sql.Identifier("id"),
            ),
            tuple(values[c] for c in columns) + (asset_id,)
        )
        return cur.fetchone()

    def update_asset(self, asset_id: str, fields: Dict[str, Any]) -> GridAsset:
        """
        Apply a partial update to one row.

        A deleted key moves the asset between ACTIVE and SOFT_DELETED;
        restore is update_asset(asset_id, {"deleted": False}).
        """
        values = prepare_store_values(fields)
        self._check_columns(values)

        with self._transaction("update grid asset", asset_id) as cur:
            row = self._lock_row(cur, asset_id)
            if "deleted" in values:
                self._validate_lifecycle_transition(
                    asset_id,
                    lifecycle_state_for(row["deleted"]),
                    lifecycle_state_for(values["deleted"]),
                )
            if values:
                row = self._update_locked(cur, asset_id, values)

        self.logger.info(f"Updated grid asset: {asset_id} ({', '.join(values) or 'no changes'})")
        return self._row_to_model(row)

    def soft_delete_asset(self, asset_id: str) -> GridAsset:
        """Set deleted=true. Soft-deleting a soft-deleted asset is a no-op."""
        with self._transaction("soft delete grid asset", asset_id) as cur:
            row = self._lock_row(cur, asset_id)
            self._validate_lifecycle_transition(
                asset_id, lifecycle_state_for(row["deleted"]), LifecycleState.SOFT_DELETED
            )
            row = self._update_locked(cur, asset_id, {"deleted": True})

        self.logger.info(f"Soft-deleted grid asset: {asset_id}")
        return self._row_to_model(row)

    def purge_asset(self, asset_id: str) -> None:
        """Remove the row permanently."""
        with self._transaction("purge grid asset", asset_id) as cur:
            row = self._lock_row(cur, asset_id)
            self._validate_lifecycle_transition(
                asset_id, lifecycle_state_for(row["deleted"]), LifecycleState.PURGED
            )
            cur.execute(
                sql.SQL("DELETE FROM {} WHERE {} = %s").format(self._table_ref(), sql.Identifier("id")),
                (asset_id,)
            )

        self.logger.info(f"Purged grid asset: {asset_id}")

    # =========================================================================
    # MAPPING
    # =========================================================================

    def _row_to_model(self, row: Dict[str, Any]) -> GridAsset:
        """Convert a dict_row to GridAsset (column names are wire names)."""
        return GridAsset.model_validate(row)
