"""
report-clauses: parameterized (NOT) IN predicates for report queries.

Renders ``column [NOT] IN (?, ...)`` fragments from report parameter value
collections, with NULL-aware branches and a ``0 = 0`` fallback for empty input.
"""

from .entities.in_clause import (
    CLAUSE_TRUISM,
    ClauseError,
    ClauseVariant,
    InClauseBuilder,
    MissingTokenError,
    UnknownClauseError,
    UnsupportedParameterTypeError,
    apply_clause,
    render_in_clause,
)
from .entities.shared import DictParameterStore, QueryRenderContext
from .models import ClauseOutput, ClauseRenderResult, ClauseRequest, ClauseTokens, InOperators

__all__ = [
    "CLAUSE_TRUISM",
    "ClauseError",
    "ClauseOutput",
    "ClauseRenderResult",
    "ClauseRequest",
    "ClauseTokens",
    "ClauseVariant",
    "DictParameterStore",
    "InClauseBuilder",
    "InOperators",
    "MissingTokenError",
    "QueryRenderContext",
    "UnknownClauseError",
    "UnsupportedParameterTypeError",
    "apply_clause",
    "render_in_clause",
]
