# ============================================================================
# CLAUDE CONTEXT - EXCEPTIONS
# ============================================================================
# STATUS: Shared - raised by services, repositories and the console client
# PURPOSE: Exception hierarchy separating contract violations from business failures
# EXPORTS: ContractViolationError, BusinessLogicError, UnauthorizedError,
#          ValidationError, ResourceNotFoundError, InvalidTransitionError,
#          DatabaseError, ConfigurationError, ApiRequestError,
#          NetworkFailureError
# DEPENDENCIES: None (standard library only)
# ============================================================================

"""
Custom Exception Hierarchy

Distinguishes between:
1. Contract Violations (programming bugs that need fixing)
2. Business Logic Failures (expected runtime issues)

Business failures map one-to-one onto the rejection classes the HTTP
boundary reports: UnauthorizedError -> 403, ValidationError -> 400,
ResourceNotFoundError -> 404, InvalidTransitionError -> 409,
DatabaseError -> 500.
"""

from typing import Dict, Optional


class ContractViolationError(TypeError):
    """
    Raised when component contracts are violated (programming bugs).

    These should NEVER be caught and handled - they indicate bugs
    that need to be fixed in the code.

    Examples:
        - Repository handed a dict where a GridAsset was expected
        - Store handle used after it was closed
    """
    pass


class BusinessLogicError(Exception):
    """
    Base class for expected runtime business logic failures.

    These are normal failures that occur during system operation
    and should be handled gracefully without crashing.
    """
    pass


class UnauthorizedError(BusinessLogicError):
    """
    Caller lacks the administrative role (or has no session at all).

    Fatal per request, never retried. Raised before any store access.
    """

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class ValidationError(BusinessLogicError):
    """
    Business validation failed.

    Carries a per-field message map so the console can show inline
    errors next to the offending inputs.

    Examples:
        - type or address blank
        - voltage missing or zero
        - latitude outside [-90, 90]
    """

    def __init__(self, message: str, fields: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.fields: Dict[str, str] = dict(fields or {})


class ResourceNotFoundError(BusinessLogicError):
    """
    Requested grid asset does not exist at mutation time.
    """
    pass


class InvalidTransitionError(BusinessLogicError):
    """
    Lifecycle transition not permitted (e.g. touching a purged asset).
    """
    pass


class DatabaseError(BusinessLogicError):
    """
    Asset store failures (StoreUnavailable).

    Examples:
        - Connection lost
        - Pool exhausted / timeout
        - Constraint violation
    """
    pass


class ConfigurationError(Exception):
    """
    System configuration error.

    Typically fatal: missing environment variables, invalid connection
    settings, store handle not opened.
    """
    pass


class ApiRequestError(BusinessLogicError):
    """
    Lifecycle API answered with a rejection (console side).

    The message is the server's single-line error text, or the
    per-operation fallback when the body carries none.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NetworkFailureError(BusinessLogicError):
    """
    Request never completed (console side).

    Surfaced to the user the same way as a store failure.
    """
    pass
