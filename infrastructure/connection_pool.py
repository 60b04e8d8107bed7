# ============================================================================
# ASSET STORE HANDLE
# ============================================================================
# STATUS: Infrastructure - explicit connection pool lifecycle
# PURPOSE: One psycopg_pool.ConnectionPool per process, opened at start,
#          closed at shutdown, injected into repositories
# EXPORTS: StoreHandle
# DEPENDENCIES: psycopg_pool, infrastructure.auth.postgres_auth
# ============================================================================
"""
Asset Store Handle.

================================================================================
LIFECYCLE
================================================================================
The handle is created and opened once by function_app.py and closed at
interpreter exit. Repositories receive it through RepositoryFactory; they
never create connections of their own.

    store = StoreHandle(get_config().database).open()
    repo = RepositoryFactory.create_grid_asset_repository(store)
    ...
    store.close()

================================================================================
TOKEN REFRESH
================================================================================
With managed identity the password is an OAuth token that expires after
about an hour. Pooled connections live at most POOL_MAX_LIFETIME, and the
pool is recreated with a fresh token before the cached one expires.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Any, Callable, Dict, Optional

from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool

from config.database_config import DatabaseConfig
from exceptions import ConfigurationError
from .auth.postgres_auth import get_postgres_conninfo, token_expires_soon

logger = logging.getLogger(__name__)

# Max time a connection can live in the pool (seconds) - 55 minutes
# This is slightly less than the 1-hour OAuth token lifetime
POOL_MAX_LIFETIME = 55 * 60

# Timeout for draining connections on pool close (seconds)
POOL_CLOSE_TIMEOUT = 30.0


class StoreHandle:
    """
    Explicit owner of the asset store connection pool.

    Usage:
        with StoreHandle(db_config) as store:
            with store.connection() as conn:
                conn.execute("SELECT 1")
    """

    def __init__(
        self,
        db_config: DatabaseConfig,
        pool_factory: Callable[..., Any] = ConnectionPool,
        credential=None
    ):
        self.db_config = db_config
        self._pool_factory = pool_factory
        self._credential = credential
        self._pool: Optional[Any] = None
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @staticmethod
    def _configure_connection(conn) -> None:
        """Called by the pool for each new connection."""
        conn.row_factory = dict_row

    def _create_pool(self):
        conninfo = get_postgres_conninfo(self.db_config, credential=self._credential)
        logger.info(
            f"Creating connection pool: min={self.db_config.pool_min_size}, "
            f"max={self.db_config.pool_max_size}"
        )
        pool = self._pool_factory(
            conninfo=conninfo,
            min_size=self.db_config.pool_min_size,
            max_size=self.db_config.pool_max_size,
            timeout=float(self.db_config.connection_timeout_seconds),
            max_lifetime=POOL_MAX_LIFETIME,
            configure=self._configure_connection,
            open=True,
        )
        logger.info("Connection pool created successfully")
        return pool

    def open(self) -> "StoreHandle":
        """Open the pool. Opening an open handle is a no-op."""
        with self._lock:
            if self._pool is None:
                self._pool = self._create_pool()
        return self

    def close(self) -> None:
        """Drain and close the pool. Closing a closed handle is a no-op."""
        with self._lock:
            if self._pool is not None:
                logger.info("Closing connection pool")
                self._pool.close(timeout=POOL_CLOSE_TIMEOUT)
                self._pool = None

    def recreate(self) -> None:
        """Replace the pool (fresh OAuth token)."""
        with self._lock:
            old_pool = self._pool
            self._pool = self._create_pool()
        if old_pool is not None:
            old_pool.close(timeout=POOL_CLOSE_TIMEOUT)
        logger.info("Connection pool recreated")

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    def __enter__(self) -> "StoreHandle":
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Connections
    # ------------------------------------------------------------------

    @contextmanager
    def connection(self):
        """
        Borrow a connection (dict_row rows).

        The pool commits on clean exit and rolls back on exception.

        Raises:
            ConfigurationError: Handle not opened
            psycopg_pool.PoolTimeout: No connection within the timeout
        """
        if self._pool is None:
            raise ConfigurationError("Store handle is not open; call open() at process start")

        if self.db_config.use_managed_identity and token_expires_soon():
            self.recreate()

        with self._pool.connection() as conn:
            yield conn

    def get_stats(self) -> Dict[str, Any]:
        if self._pool is None:
            return {"open": False}
        stats = dict(self._pool.get_stats())
        stats["open"] = True
        return stats
