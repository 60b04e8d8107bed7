# ============================================================================
# CLAUDE CONTEXT - POSTGRESQL REPOSITORY BASE
# ============================================================================
# STATUS: Infrastructure - PostgreSQL repository base
# PURPOSE: Transaction management and psycopg error wrapping over an injected store handle
# EXPORTS: PostgreSQLRepository
# INTERFACES: BaseRepository
# DEPENDENCIES: psycopg, psycopg.sql, infrastructure.connection_pool, infrastructure.base
# SOURCE: PostgreSQL database (app schema)
# VALIDATION: SQL injection prevention via psycopg.sql composition, transaction atomicity
# PATTERNS: Repository pattern, Unit of Work (transactions), Template Method
# ============================================================================

"""
PostgreSQL Repository Implementation - Direct Database Access

Architecture:
    BaseRepository (abstract)
        ↓
    PostgreSQLRepository (PostgreSQL-specific base, this file)
        ↓
    GridAssetRepository

Key Features:
- Direct PostgreSQL access using psycopg3
- SQL composition for injection safety
- Connections borrowed from the injected StoreHandle
- One transaction per repository operation
- psycopg errors wrapped into exceptions.DatabaseError
"""

from contextlib import contextmanager
from typing import Any, Optional, Tuple

import psycopg
from psycopg import sql

from exceptions import ContractViolationError, DatabaseError
from .base import BaseRepository
from .connection_pool import StoreHandle


class PostgreSQLRepository(BaseRepository):
    """
    PostgreSQL-specific repository base class.

    Connection management is delegated to the StoreHandle; this class owns
    transaction boundaries and error translation.
    """

    def __init__(self, store: StoreHandle, schema_name: str = "app"):
        if store is None:
            raise ContractViolationError("PostgreSQLRepository requires a StoreHandle")
        super().__init__()
        self.store = store
        self.schema_name = schema_name

    @contextmanager
    def _get_connection(self):
        """
        Borrow a connection from the store handle.

        Transactions are rolled back on error; the connection always goes
        back to the pool.
        """
        with self.store.connection() as conn:
            try:
                yield conn
            except Exception:
                conn.rollback()
                raise

    @contextmanager
    def _transaction(self, operation: str, entity_id: Optional[str] = None):
        """
        One transaction for one repository operation.

        Yields a cursor; commits on success. psycopg errors are logged with
        full detail and re-raised as DatabaseError without the detail.
        Business errors raised inside the block pass through unchanged.
        """
        with self._error_context(operation, entity_id):
            try:
                with self._get_connection() as conn:
                    with conn.cursor() as cursor:
                        yield cursor
                    conn.commit()
            except psycopg.Error as e:
                sqlstate = getattr(e, "sqlstate", None) or "unknown"
                self.logger.error(f"❌ {operation} failed: SQL State {sqlstate}: {type(e).__name__}: {e}")
                raise DatabaseError(f"{operation} failed") from e

    def _execute_query(
        self,
        query: sql.Composed,
        params: Optional[Tuple] = None,
        fetch: Optional[str] = None,
        operation: str = "query"
    ) -> Optional[Any]:
        """
        Execute one composed query in its own transaction.

        Args:
            query: SQL built with psycopg.sql composition
            params: Values for %s placeholders
            fetch: None | 'one' | 'all'

        Returns:
            Fetched row(s), or the affected row count when fetch is None
        """
        if not isinstance(query, sql.Composed):
            raise ContractViolationError(f"❌ SECURITY: Query must be sql.Composed, got {type(query)}")

        if fetch not in (None, 'one', 'all'):
            raise ContractViolationError(f"❌ INVALID FETCH MODE: {fetch}")

        with self._transaction(operation) as cursor:
            cursor.execute(query, params)
            if fetch == 'one':
                return cursor.fetchone()
            if fetch == 'all':
                return cursor.fetchall()
            return cursor.rowcount
