# ============================================================================
# CLAUDE CONTEXT - LIFECYCLE API CLIENT
# ============================================================================
# STATUS: Console - HTTP client for /api/grid-assets
# PURPOSE: Call the Lifecycle API and turn rejections into single-line errors
# EXPORTS: GridAssetApiClient
# DEPENDENCIES: httpx
# ============================================================================
"""
Lifecycle API Client.

Thin httpx client used by the console view controllers. Every call is one
round trip; nothing is retried. Rejections carry the server's `error`
text, falling back to a per-operation message when the body has none.

Usage:
    from console.api_client import GridAssetApiClient

    client = GridAssetApiClient("http://localhost:7071/api", principal=encoded)
    assets = client.list_assets(include_deleted=True)

Environment Variables (via ConsoleConfig):
    CONSOLE_API_BASE_URL: Function app base URL including /api
    CONSOLE_REQUEST_TIMEOUT: Transport timeout in seconds
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx

from config import ConsoleConfig, get_config
from config.defaults import AuthDefaults, ConsoleDefaults
from exceptions import ApiRequestError, NetworkFailureError

logger = logging.getLogger(__name__)

GRID_ASSETS_PATH = "grid-assets"

LOAD_FAILED = "Failed to load grid assets"
CREATE_FAILED = "Failed to create asset"
UPDATE_FAILED = "Failed to update asset"
DELETE_FAILED = "Failed to delete asset"
RESTORE_FAILED = "Failed to restore asset"
PURGE_FAILED = "Failed to delete asset permanently"


class GridAssetApiClient:
    """
    Client for the grid asset Lifecycle API.

    Pass `client` to reuse a configured httpx.Client (tests hand in one
    built on httpx.MockTransport). When omitted, the client owns its own
    connection and `close()` releases it.
    """

    def __init__(
        self,
        base_url: str = ConsoleDefaults.API_BASE_URL,
        principal: Optional[str] = None,
        principal_header: str = AuthDefaults.PRINCIPAL_HEADER,
        client: Optional[httpx.Client] = None,
        timeout: float = ConsoleDefaults.REQUEST_TIMEOUT_SECONDS
    ):
        self._base_url = base_url.rstrip('/')
        self._headers: Dict[str, str] = {}
        if principal:
            self._headers[principal_header] = principal
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    @classmethod
    def from_config(
        cls,
        principal: Optional[str] = None,
        console_config: Optional[ConsoleConfig] = None
    ) -> "GridAssetApiClient":
        app_config = get_config()
        console_config = console_config or app_config.console
        return cls(
            base_url=console_config.api_base_url,
            principal=principal,
            principal_header=app_config.auth.principal_header,
            timeout=console_config.request_timeout_seconds,
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "GridAssetApiClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def url(self) -> str:
        return f"{self._base_url}/{GRID_ASSETS_PATH}"

    # ========================================================================
    # REQUEST PLUMBING
    # ========================================================================

    def _send(
        self,
        method: str,
        fallback: str,
        params: Optional[Dict[str, str]] = None,
        body: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Send one request and return the decoded JSON body.

        Raises:
            NetworkFailureError: The request never completed
            ApiRequestError: Non-2xx response
        """
        try:
            response = self._client.request(
                method,
                self.url,
                params=params,
                json=dict(body) if body is not None else None,
                headers=self._headers,
            )
        except httpx.TransportError as e:
            logger.warning(f"{method} {self.url} failed: {e}")
            raise NetworkFailureError(fallback) from e

        data = self._decode(response)
        if response.is_error:
            message = data.get("error") or fallback
            logger.warning(f"{method} {self.url} rejected ({response.status_code}): {message}")
            raise ApiRequestError(message, status_code=response.status_code)
        return data

    @staticmethod
    def _decode(response: httpx.Response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    # ========================================================================
    # LIFECYCLE OPERATIONS
    # ========================================================================

    def list_assets(self, include_deleted: bool = False) -> List[Dict[str, Any]]:
        """GET list; includeDeleted=true returns both partitions."""
        params = {"includeDeleted": "true"} if include_deleted else None
        try:
            data = self._send("GET", LOAD_FAILED, params=params)
        except ApiRequestError as e:
            if str(e) == LOAD_FAILED and e.status_code is not None:
                raise ApiRequestError(f"{LOAD_FAILED} ({e.status_code})", e.status_code) from e
            raise
        return list(data.get("gridAssets") or [])

    def create_asset(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        return self._send("POST", CREATE_FAILED, body=fields).get("asset", {})

    def update_asset(self, asset_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
        body = dict(fields)
        body["id"] = asset_id
        return self._send("PATCH", UPDATE_FAILED, body=body).get("asset", {})

    def restore_asset(self, asset_id: str) -> Dict[str, Any]:
        body = {"id": asset_id, "deleted": False}
        return self._send("PATCH", RESTORE_FAILED, body=body).get("asset", {})

    def delete_asset(self, asset_id: str, permanent: bool = False) -> str:
        """DELETE soft (default) or permanent; returns the server message."""
        body: Dict[str, Any] = {"id": asset_id}
        fallback = DELETE_FAILED
        if permanent:
            body["permanent"] = True
            fallback = PURGE_FAILED
        return self._send("DELETE", fallback, body=body).get("message", "")
