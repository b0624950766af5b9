"""(NOT) IN clause rendering package."""

from .builder import (
    CLAUSE_TRUISM,
    IN_OPERATORS,
    NOT_IN_OPERATORS,
    ClauseVariant,
    InClauseBuilder,
    count_values,
    render_in_clause,
)
from .errors import (
    ClauseError,
    MissingTokenError,
    UnknownClauseError,
    UnsupportedParameterTypeError,
)
from .registry import ClauseRegistry, apply_clause, default_registry

__all__ = [
    "CLAUSE_TRUISM",
    "IN_OPERATORS",
    "NOT_IN_OPERATORS",
    "ClauseError",
    "ClauseRegistry",
    "ClauseVariant",
    "InClauseBuilder",
    "MissingTokenError",
    "UnknownClauseError",
    "UnsupportedParameterTypeError",
    "apply_clause",
    "count_values",
    "default_registry",
    "render_in_clause",
]
