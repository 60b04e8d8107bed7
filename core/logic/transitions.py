"""
State Transition Logic for Grid Asset Lifecycle.

Contains business rules for valid lifecycle transitions.
Separated from data models for clean architecture.

Exports:
    can_lifecycle_transition: Check if a lifecycle transition is valid
    get_lifecycle_terminal_states: Get terminal lifecycle states
    is_lifecycle_terminal: Check if a state is terminal
    lifecycle_state_for: Lifecycle state implied by a deleted flag
    partition_for: Console partition a lifecycle state is shown in

Dependencies:
    core.models.enums: LifecycleState, AssetPartition
"""

from typing import List, Optional

from ..models.enums import AssetPartition, LifecycleState


def can_lifecycle_transition(current: LifecycleState, target: LifecycleState) -> bool:
    """
    Check if an asset can transition from current to target state.

    Args:
        current: Current lifecycle state
        target: Target lifecycle state

    Returns:
        True if transition is valid, False otherwise
    """
    # Same state is always allowed (no-op)
    if current == target:
        return True

    transitions = {
        LifecycleState.ACTIVE: [LifecycleState.SOFT_DELETED, LifecycleState.PURGED],
        LifecycleState.SOFT_DELETED: [LifecycleState.ACTIVE, LifecycleState.PURGED],
        LifecycleState.PURGED: [],  # Terminal state
    }

    return target in transitions.get(current, [])


def get_lifecycle_terminal_states() -> List[LifecycleState]:
    return [LifecycleState.PURGED]


def is_lifecycle_terminal(state: LifecycleState) -> bool:
    return state in get_lifecycle_terminal_states()


def lifecycle_state_for(deleted: Optional[bool]) -> LifecycleState:
    """Map a stored deleted flag to a lifecycle state (None means active)."""
    return LifecycleState.SOFT_DELETED if deleted else LifecycleState.ACTIVE


def partition_for(state: LifecycleState) -> Optional[AssetPartition]:
    """
    Console partition for a lifecycle state.

    Returns None for PURGED: a purged asset is shown in no view.
    """
    if state == LifecycleState.ACTIVE:
        return AssetPartition.ACTIVE
    if state == LifecycleState.SOFT_DELETED:
        return AssetPartition.DELETED
    return None
