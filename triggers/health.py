"""
Health Check HTTP Trigger.

System health endpoint for GET /api/health.

Components Monitored:
    - Configuration (masked)
    - Asset store (pool state and a round trip)

Exports:
    HealthCheckTrigger: Health check trigger class
"""

from typing import Any, Dict, List

import azure.functions as func

from config import debug_config
from infrastructure.connection_pool import StoreHandle
from .http_base import SystemMonitoringTrigger


class HealthCheckTrigger(SystemMonitoringTrigger):
    """Health check HTTP trigger implementation."""

    def __init__(self, store: StoreHandle):
        super().__init__("health_check")
        self.store = store

    def get_allowed_methods(self) -> List[str]:
        """Health check only supports GET."""
        return ["GET"]

    def _check_database(self) -> Dict[str, Any]:
        with self.store.connection() as conn:
            conn.execute("SELECT 1")
        return {"pool": self.store.get_stats()}

    def process_request(self, req: func.HttpRequest) -> Dict[str, Any]:
        components = [
            self.check_component_health("database", self._check_database, "PostgreSQL asset store"),
        ]
        overall = "healthy" if all(c["status"] == "healthy" for c in components) else "unhealthy"
        return {
            "status": overall,
            "components": components,
            "config": debug_config(),
        }
