"""
Core Grid Asset Components.

Structure:
    models/: Pure data structures (no business logic)
    logic/: Lifecycle transitions and field validation
    schema/: Field schema and the DDL generated from it
"""

from . import models
from . import logic
from . import schema
