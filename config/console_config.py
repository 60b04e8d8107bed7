"""
Admin Console Configuration.

Settings consumed by the client-side view controllers and their HTTP client.

Exports:
    ConsoleConfig: API location, page size and request timeout
"""

import os
from pydantic import BaseModel, Field

from .defaults import ConsoleDefaults


class ConsoleConfig(BaseModel):
    """Console settings (CONSOLE_* environment variables)."""

    api_base_url: str = Field(
        default=ConsoleDefaults.API_BASE_URL,
        description="Base URL of the Function App API, without the route (CONSOLE_API_BASE_URL)"
    )

    page_size: int = Field(
        default=ConsoleDefaults.PAGE_SIZE,
        ge=1,
        le=500,
        description="Rows per page in both asset views (CONSOLE_PAGE_SIZE)"
    )

    request_timeout_seconds: float = Field(
        default=ConsoleDefaults.REQUEST_TIMEOUT_SECONDS,
        gt=0,
        description="Transport timeout for one API round trip (CONSOLE_REQUEST_TIMEOUT)"
    )

    def debug_dict(self) -> dict:
        return {
            "api_base_url": self.api_base_url,
            "page_size": self.page_size,
            "request_timeout_seconds": self.request_timeout_seconds,
        }

    @classmethod
    def from_environment(cls) -> "ConsoleConfig":
        return cls(
            api_base_url=os.environ.get("CONSOLE_API_BASE_URL", ConsoleDefaults.API_BASE_URL),
            page_size=int(os.environ.get("CONSOLE_PAGE_SIZE", str(ConsoleDefaults.PAGE_SIZE))),
            request_timeout_seconds=float(
                os.environ.get("CONSOLE_REQUEST_TIMEOUT", str(ConsoleDefaults.REQUEST_TIMEOUT_SECONDS))
            ),
        )
