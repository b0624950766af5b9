"""
Shared models for clause rendering.

All models are re-exported here so callers can import from ``report_clauses.models``.
"""

from .clause import (
    POSITION_CLAUSE_ID,
    POSITION_DB_COLUMN,
    POSITION_PARAMETER,
    ClauseOutput,
    ClauseRenderResult,
    ClauseRequest,
    ClauseTokens,
    InOperators,
)

__all__ = [
    # Token positions
    "POSITION_CLAUSE_ID",
    "POSITION_DB_COLUMN",
    "POSITION_PARAMETER",
    # Clause input
    "ClauseRequest",
    "ClauseTokens",
    "InOperators",
    # Clause output
    "ClauseOutput",
    "ClauseRenderResult",
]
