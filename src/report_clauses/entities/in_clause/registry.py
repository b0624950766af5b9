"""Clause function registry.

Maps directive ids (``IN``, ``NOTIN``) to the clause function that renders
them and dispatches tokenized directives to the right one.
"""

from __future__ import annotations

import logging

from report_clauses.entities.shared.protocols import QueryClauseContext
from report_clauses.models import ClauseOutput, ClauseTokens

from .builder import ClauseVariant, InClauseBuilder
from .errors import UnknownClauseError

logger = logging.getLogger(__name__)


class ClauseRegistry:
    """Case-insensitive lookup of clause functions by directive id."""

    def __init__(self) -> None:
        self._functions: dict[str, InClauseBuilder] = {}

    def register(self, clause_id: str, function: InClauseBuilder) -> None:
        key = clause_id.strip().upper()
        if key in self._functions:
            logger.info("Replacing clause function registered for '%s'", key)
        self._functions[key] = function

    def get(self, clause_id: str | None) -> InClauseBuilder:
        """Return the function registered for *clause_id*.

        Raises:
            UnknownClauseError: Nothing is registered under that id.
        """
        function = self._functions.get((clause_id or "").strip().upper())
        if function is None:
            raise UnknownClauseError(clause_id)
        return function

    def __contains__(self, clause_id: object) -> bool:
        return isinstance(clause_id, str) and clause_id.strip().upper() in self._functions

    def apply(self, tokens: ClauseTokens, context: QueryClauseContext) -> ClauseOutput:
        """Dispatch *tokens* to the clause function named by their first token."""
        return self.get(tokens.clause_id).apply(tokens, context)


def default_registry() -> ClauseRegistry:
    """Build a registry holding the IN and NOTIN clause functions."""
    registry = ClauseRegistry()
    for variant in ClauseVariant:
        registry.register(variant.value, InClauseBuilder(variant))
    return registry


_default_registry = default_registry()


def apply_clause(tokens: ClauseTokens, context: QueryClauseContext) -> ClauseOutput:
    """Apply a tokenized directive using the default registry.

    Args:
        tokens: Directive tokens, e.g. ``ClauseTokens.of("NOTIN", "DEPT_ID", "depts")``.
        context: Query being assembled.

    Returns:
        The rendered ``ClauseOutput``.

    Raises:
        UnknownClauseError: The clause id is not ``IN`` or ``NOTIN``.
    """
    return _default_registry.apply(tokens, context)
