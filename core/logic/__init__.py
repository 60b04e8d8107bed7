"""
Core Business Logic Package.

Contains business logic that operates on pure data models.
Separated from models to maintain clean architecture.

Exports:
    State transitions: can_lifecycle_transition, is_lifecycle_terminal, partition_for
    Validation: validate_create, validate_update, coerce_form_values
"""

# State transitions
from .transitions import (
    can_lifecycle_transition,
    get_lifecycle_terminal_states,
    is_lifecycle_terminal,
    lifecycle_state_for,
    partition_for
)

# Validation
from .validation import (
    validate_create,
    validate_update,
    coerce_form_values,
    writable_create_fields,
    prepare_store_values,
    parse_datetime
)

__all__ = [
    # State transitions
    'can_lifecycle_transition',
    'get_lifecycle_terminal_states',
    'is_lifecycle_terminal',
    'lifecycle_state_for',
    'partition_for',

    # Validation
    'validate_create',
    'validate_update',
    'coerce_form_values',
    'writable_create_fields',
    'prepare_store_values',
    'parse_datetime'
]
