# ============================================================================
# BASE REPOSITORY - PURE ABSTRACT CLASS
# ============================================================================
# STATUS: Infrastructure - Repository hierarchy root
# PURPOSE: Common lifecycle validation, error handling, and logging for all repositories
# ============================================================================
"""
Base Repository - Pure Abstract Class.

Abstract base repository class that all storage-specific repositories inherit
from. Contains NO storage implementation details, only common validation
logic, error handling patterns, and logging infrastructure.

Architecture:
    BaseRepository (this file - pure abstract)
        |
    Storage-specific bases (PostgreSQLRepository)
        |
    Domain-specific repositories (GridAssetRepository)

Exports:
    BaseRepository: Abstract base class for repositories
"""

from abc import ABC
from contextlib import contextmanager
from typing import Optional

from core.logic.transitions import can_lifecycle_transition
from core.models import LifecycleState
from exceptions import BusinessLogicError, DatabaseError, InvalidTransitionError
from util_logger import LoggerFactory, ComponentType


# ============================================================================
# PURE BASE REPOSITORY - No storage dependencies
# ============================================================================

class BaseRepository(ABC):
    """
    Pure abstract base repository with common validation logic.

    Responsibilities:
    ----------------
    - Lifecycle transition validation
    - Error logging with consistent patterns
    - Logging setup

    NOT Responsible For:
    -------------------
    - Connection management (handled by storage-specific subclasses)
    - Query execution (handled by storage-specific subclasses)
    """

    def __init__(self):
        # Each repository gets its own logger for better tracing
        self.logger = LoggerFactory.create_logger(ComponentType.REPOSITORY, self.__class__.__name__)

    @contextmanager
    def _error_context(self, operation: str, entity_id: Optional[str] = None):
        """
        Log failures of a repository operation with context, then re-raise.

        Business failures (not found, invalid transition) are logged at
        WARNING; anything else at ERROR.
        """
        try:
            yield
        except DatabaseError:
            # already logged with the driver detail
            raise
        except BusinessLogicError as e:
            suffix = f" for {entity_id}" if entity_id else ""
            self.logger.warning(f"⚠️ {operation} rejected{suffix}: {e}")
            raise
        except Exception as e:
            suffix = f" for {entity_id}" if entity_id else ""
            self.logger.error(f"❌ {operation} failed{suffix}: {type(e).__name__}: {e}")
            raise

    def _validate_lifecycle_transition(
        self,
        asset_id: str,
        current: LifecycleState,
        target: LifecycleState
    ) -> None:
        """
        Enforce the lifecycle state machine.

        ACTIVE <-> SOFT_DELETED, either -> PURGED; same state is a no-op.

        Raises:
            InvalidTransitionError: If the transition is not allowed
        """
        if not can_lifecycle_transition(current, target):
            raise InvalidTransitionError(
                f"Invalid lifecycle transition for {asset_id}: {current.value} -> {target.value}"
            )
