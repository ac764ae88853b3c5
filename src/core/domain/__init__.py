"""
Domain models and value objects.

Contains the type descriptor model, its family taxonomy, and validation outcomes.
"""

from src.core.domain.outcome import (
    ErrorKind,
    TypeConstraintError,
    UnknownTypeError,
    ValidationOutcome,
)
from src.core.domain.type_descriptor import (
    CHAR_FAMILIES,
    FLOAT_FAMILIES,
    INTEGER_FAMILIES,
    NUMERIC_FAMILIES,
    Family,
    TypeDescriptor,
)

__all__ = [
    # Type descriptor
    "Family",
    "TypeDescriptor",
    "INTEGER_FAMILIES",
    "FLOAT_FAMILIES",
    "NUMERIC_FAMILIES",
    "CHAR_FAMILIES",
    # Outcome
    "ErrorKind",
    "ValidationOutcome",
    "TypeConstraintError",
    "UnknownTypeError",
]
