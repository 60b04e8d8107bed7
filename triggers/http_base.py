"""
HTTP Trigger Base Class.

Abstract base class for all Azure Functions HTTP triggers providing consistent
infrastructure patterns for request/response handling.

Specialized Trigger Types:
    BaseHttpTrigger: Generic HTTP endpoint
    SystemMonitoringTrigger: Health and diagnostics

Exception Mapping (handle_request):
    UnauthorizedError      -> 403 "Unauthorized"
    ValidationError        -> 400 "Validation failed" (+ fields)
    pydantic ValidationError -> 500 (a stored row that fails the model)
    ValueError             -> 400 "Bad request"
    ResourceNotFoundError  -> 404 (get_not_found_error)
    InvalidTransitionError -> 409 "Invalid lifecycle transition"
    anything else          -> 500 (get_failure_message, detail logged only)

Exports:
    BaseHttpTrigger: Base class for HTTP triggers
    SystemMonitoringTrigger: Base class for monitoring
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, List
import uuid
import json
import traceback
from datetime import datetime, timezone

import azure.functions as func
from pydantic import ValidationError as ModelValidationError

from config.auth_config import AuthConfig
from exceptions import (
    InvalidTransitionError,
    ResourceNotFoundError,
    UnauthorizedError,
    ValidationError,
)
from infrastructure.auth.principal import CallerIdentity, parse_client_principal
from util_logger import LoggerFactory
from util_logger import ComponentType


class BaseHttpTrigger(ABC):
    """
    Abstract base class for Azure Functions HTTP triggers.

    Provides consistent infrastructure for HTTP request/response handling,
    parameter extraction, caller identity, error handling, and logging patterns.
    """

    def __init__(self, trigger_name: str, auth_config: Optional[AuthConfig] = None):
        """
        Initialize HTTP trigger with name for logging context.

        Args:
            trigger_name: Name of the trigger for logging (e.g., "grid_assets")
            auth_config: Principal header settings (defaults when omitted)
        """
        self.trigger_name = trigger_name
        self.auth_config = auth_config or AuthConfig()
        self.logger = LoggerFactory.create_logger(ComponentType.TRIGGER, f"HttpTrigger.{trigger_name}")

    # ========================================================================
    # ABSTRACT METHODS - Must be implemented by concrete triggers
    # ========================================================================

    @abstractmethod
    def process_request(self, req: func.HttpRequest) -> Dict[str, Any]:
        """
        Process the HTTP request and return response data.

        Business errors are raised as exceptions and mapped by handle_request.

        Args:
            req: Azure Functions HTTP request object

        Returns:
            Dictionary to be serialized as JSON response
        """
        pass

    @abstractmethod
    def get_allowed_methods(self) -> List[str]:
        """
        Return list of allowed HTTP methods for this trigger.
        """
        pass

    # ========================================================================
    # OVERRIDABLE HOOKS
    # ========================================================================

    def get_success_status(self, req: func.HttpRequest) -> int:
        return 200

    def get_failure_message(self, req: func.HttpRequest) -> str:
        """Generic text returned for unexpected failures (no internal detail)."""
        return "Internal server error"

    def get_not_found_error(self, req: func.HttpRequest) -> str:
        return "Not found"

    # ========================================================================
    # CONCRETE INFRASTRUCTURE METHODS
    # ========================================================================

    def handle_request(self, req: func.HttpRequest) -> func.HttpResponse:
        """
        Main entry point for HTTP request handling.

        Provides consistent error handling, logging, and response formatting.

        Args:
            req: Azure Functions HTTP request object

        Returns:
            Azure Functions HTTP response with JSON content
        """
        request_id = self._generate_request_id()

        self.logger.info(
            f"🌐 [{self.trigger_name}] Request {request_id} started: "
            f"{req.method} {req.url}"
        )

        try:
            # Validate HTTP method
            if req.method not in self.get_allowed_methods():
                return self._create_error_response(
                    error="Method not allowed",
                    message=f"Method {req.method} not allowed. Allowed: {', '.join(self.get_allowed_methods())}",
                    status_code=405,
                    request_id=request_id
                )

            # Process the request (business logic)
            response_data = self.process_request(req)

            response = self._create_success_response(
                response_data, request_id, status_code=self.get_success_status(req)
            )

            self.logger.info(
                f"✅ [{self.trigger_name}] Request {request_id} completed successfully"
            )

            return response

        except UnauthorizedError as e:
            self.logger.warning(f"🚫 [{self.trigger_name}] Unauthorized: {req.method} {req.url}")
            return self._create_error_response(
                error="Unauthorized",
                message=str(e),
                status_code=403,
                request_id=request_id
            )

        except ValidationError as e:
            self.logger.warning(f"❌ [{self.trigger_name}] Validation failed: {sorted(e.fields)}")
            return self._create_error_response(
                error="Validation failed",
                message="; ".join(e.fields.values()) or str(e),
                status_code=400,
                request_id=request_id,
                extra={"fields": e.fields}
            )

        except ModelValidationError as e:
            # A stored row that does not fit the model is a server fault
            return self._internal_error_response(req, e, request_id)

        except ValueError as e:
            # Client errors (400)
            self.logger.warning(f"❌ [{self.trigger_name}] Client error: {e}")
            return self._create_error_response(
                error="Bad request",
                message=str(e),
                status_code=400,
                request_id=request_id
            )

        except ResourceNotFoundError as e:
            self.logger.info(f"🔍 [{self.trigger_name}] Not found: {e}")
            return self._create_error_response(
                error=self.get_not_found_error(req),
                message=str(e),
                status_code=404,
                request_id=request_id
            )

        except InvalidTransitionError as e:
            self.logger.warning(f"⚠️ [{self.trigger_name}] Invalid transition: {e}")
            return self._create_error_response(
                error="Invalid lifecycle transition",
                message=str(e),
                status_code=409,
                request_id=request_id
            )

        except Exception as e:
            return self._internal_error_response(req, e, request_id)

    def _internal_error_response(
        self,
        req: func.HttpRequest,
        error: Exception,
        request_id: str
    ) -> func.HttpResponse:
        """500 with the generic failure message; detail stays in the logs."""
        self.logger.error(f"💥 [{self.trigger_name}] Internal error: {type(error).__name__}: {error}")
        self.logger.debug(f"📍 Full traceback: {traceback.format_exc()}")

        failure = self.get_failure_message(req)
        return self._create_error_response(
            error=failure,
            message=failure,
            status_code=500,
            request_id=request_id
        )

    # ========================================================================
    # UTILITY METHODS FOR SUBCLASSES
    # ========================================================================

    def get_identity(self, req: func.HttpRequest) -> Optional[CallerIdentity]:
        """Caller identity from the App Service principal header (None if anonymous)."""
        return parse_client_principal(
            req.headers.get(self.auth_config.principal_header),
            role_claim_type=self.auth_config.role_claim_type,
        )

    def extract_json_body(self, req: func.HttpRequest, required: bool = True) -> Optional[Dict[str, Any]]:
        """
        Extract and parse a JSON object request body.

        Raises:
            ValueError: If body is required but missing, invalid JSON, or not an object
        """
        if not req.get_body():
            if required:
                raise ValueError("Request body is required")
            return None

        try:
            body = req.get_json()
        except ValueError as e:
            raise ValueError(f"Invalid JSON in request body: {e}") from e

        if not isinstance(body, dict):
            raise ValueError("Request body must be a JSON object")
        return body

    # ========================================================================
    # PRIVATE INFRASTRUCTURE METHODS
    # ========================================================================

    def _generate_request_id(self) -> str:
        """Generate unique request ID for tracing."""
        return str(uuid.uuid4())[:8]

    def _create_success_response(self, data: Dict[str, Any], request_id: str,
                                 status_code: int = 200) -> func.HttpResponse:
        """Create standardized success response."""
        response_data = {
            **data,
            "request_id": request_id,
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

        return func.HttpResponse(
            json.dumps(response_data, default=str),
            status_code=status_code,
            mimetype="application/json",
            headers={"X-Request-ID": request_id}
        )

    def _create_error_response(self, error: str, message: str, status_code: int,
                             request_id: str, extra: Optional[Dict[str, Any]] = None) -> func.HttpResponse:
        """Create standardized error response."""
        response_data = {
            "error": error,
            "message": message,
            "request_id": request_id,
            "timestamp": datetime.now(timezone.utc).isoformat()
        }
        if extra:
            response_data.update(extra)

        return func.HttpResponse(
            json.dumps(response_data),
            status_code=status_code,
            mimetype="application/json",
            headers={"X-Request-ID": request_id}
        )


# ============================================================================
# SPECIALIZED BASE CLASSES FOR COMMON PATTERNS
# ============================================================================

class SystemMonitoringTrigger(BaseHttpTrigger):
    """Base class for system monitoring triggers (health, etc.)"""

    def get_system_timestamp(self) -> str:
        """Get standardized system timestamp."""
        return datetime.now(timezone.utc).isoformat()

    def check_component_health(
        self,
        component_name: str,
        check_function,
        description: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Standard pattern for checking component health.

        Status determination (in priority order):
        1. If check_function raises exception -> "unhealthy"
        2. If result contains "error" key with truthy value -> "unhealthy"
        3. Otherwise -> "healthy"
        """
        try:
            result = check_function()
            status = "unhealthy" if isinstance(result, dict) and result.get("error") else "healthy"
            return {
                "component": component_name,
                "description": description or f"{component_name} health check",
                "status": status,
                "details": result,
                "checked_at": self.get_system_timestamp()
            }
        except Exception as e:
            self.logger.warning(f"Health check {component_name} failed: {type(e).__name__}: {e}")
            return {
                "component": component_name,
                "description": description or f"{component_name} health check",
                "status": "unhealthy",
                "error": type(e).__name__,
                "checked_at": self.get_system_timestamp()
            }
