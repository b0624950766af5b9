"""(NOT) IN clause rendering.

Turns a report parameter holding a value collection into a parameterized
``column [NOT] IN (?, ?, ...)`` predicate. ``None`` elements cannot be
matched by ``IN`` so they are expressed structurally with an ``IS [NOT] NULL``
branch instead of being bound. A missing or empty collection renders as
``0 = 0`` so the enclosing query is left unfiltered.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Mapping, Sequence
from enum import StrEnum
from typing import Any

from report_clauses.config.settings import Settings, get_settings
from report_clauses.entities.shared.protocols import QueryClauseContext
from report_clauses.models import (
    ClauseOutput,
    ClauseRenderResult,
    ClauseRequest,
    ClauseTokens,
    InOperators,
)

from .errors import ClauseError, MissingTokenError, UnsupportedParameterTypeError

logger = logging.getLogger(__name__)

CLAUSE_TRUISM = "0 = 0"
OPERATOR_IS_NULL = "IS NULL"
OPERATOR_IS_NOT_NULL = "IS NOT NULL"

IN_OPERATORS = InOperators(in_operator="IN", null_operator=OPERATOR_IS_NULL, combinator="OR")
NOT_IN_OPERATORS = InOperators(
    in_operator="NOT IN", null_operator=OPERATOR_IS_NOT_NULL, combinator="AND"
)

# Sized iterables that are scalar report values, not value lists
_SCALAR_TYPES: tuple[type, ...] = (str, bytes, bytearray, memoryview)


class ClauseVariant(StrEnum):
    """IN / NOT IN flavour of the clause, keyed by its directive id."""

    IN = "IN"
    NOT_IN = "NOTIN"

    @property
    def operators(self) -> InOperators:
        return IN_OPERATORS if self is ClauseVariant.IN else NOT_IN_OPERATORS


def _as_sequence(parameter_name: str, value: Any) -> Sequence[Any]:  # noqa: ANN401
    """Return *value* as an ordered sequence, rejecting non-collection values.

    Raises:
        UnsupportedParameterTypeError: *value* is a scalar, a string, a mapping
            or an unsized iterator.
    """
    if (
        isinstance(value, _SCALAR_TYPES)
        or isinstance(value, Mapping)
        or not isinstance(value, Collection)
    ):
        raise UnsupportedParameterTypeError(parameter_name, type(value))
    if isinstance(value, Sequence):
        return value
    return list(value)


def count_values(parameter_name: str, value: Any) -> int:  # noqa: ANN401
    """Count the elements of a value source, nulls included.

    Args:
        parameter_name: Parameter name, used in the error message.
        value: ``None``, a sequence or a collection.

    Returns:
        Number of elements (``0`` for ``None``).

    Raises:
        UnsupportedParameterTypeError: *value* is not a value collection.
    """
    if value is None:
        return 0
    return len(_as_sequence(parameter_name, value))


def _require_tokens(request: ClauseRequest) -> tuple[str, str]:
    """Return the stripped column and parameter names, rejecting blank ones."""
    column = (request.column or "").strip()
    if not column:
        raise MissingTokenError("DB column")
    parameter_name = (request.parameter_name or "").strip()
    if not parameter_name:
        raise MissingTokenError("parameter")
    return column, parameter_name


def render_in_clause(
    request: ClauseRequest,
    value_source: Any,  # noqa: ANN401
    operators: InOperators,
    settings: Settings | None = None,
) -> ClauseOutput:
    """Render a (NOT) IN predicate for a value collection.

    Non-null values become ``?`` placeholders in iteration order, duplicates
    included. Any ``None`` adds a single ``<column> <null_operator>`` branch,
    joined to the membership branch with ``operators.combinator``.

    Args:
        request: Column and parameter names.
        value_source: Resolved parameter value (``None``, sequence or collection).
        operators: Operator spellings for the clause variant.
        settings: Rendering settings. Defaults to ``get_settings()``.

    Returns:
        A ``ClauseOutput`` whose ``bound_parameters`` line up with the ``?``
        placeholders in its text.

    Raises:
        MissingTokenError: The column or parameter name is missing.
        UnsupportedParameterTypeError: The value is not a collection.
    """
    column, parameter_name = _require_tokens(request)

    if value_source is None:
        logger.debug("Parameter '%s' is unset, rendering truism", parameter_name)
        return ClauseOutput(text=CLAUSE_TRUISM)

    values = _as_sequence(parameter_name, value_source)
    if not values:
        logger.debug("Parameter '%s' is empty, rendering truism", parameter_name)
        return ClauseOutput(text=CLAUSE_TRUISM)

    null_branch: str | None = None
    in_parts: list[str] = []
    bound: list[Any] = []

    for element in values:
        if element is None:
            if null_branch is None:
                null_branch = f"{column} {operators.null_operator}"
            continue
        if not bound:
            in_parts.append(f"{column} {operators.in_operator} (")
        else:
            in_parts.append(", ")
        in_parts.append("?")
        bound.append(element)

    branches: list[str] = []
    if null_branch is not None:
        branches.append(null_branch)
    if bound:
        in_parts.append(")")
        branches.append("".join(in_parts))

    text = f" {operators.combinator} ".join(branches) if branches else CLAUSE_TRUISM

    settings = settings or get_settings()
    if len(bound) > settings.in_list_warning_threshold:
        logger.warning(
            "IN list for parameter '%s' binds %d values (threshold %d); "
            "some databases reject lists this long",
            parameter_name,
            len(bound),
            settings.in_list_warning_threshold,
        )
    if settings.log_bound_values:
        logger.debug("Rendered %s for '%s' with values %r", text, parameter_name, bound)
    else:
        logger.debug("Rendered %s for '%s'", text, parameter_name)

    return ClauseOutput(text=text, bound_parameters=bound)


class InClauseBuilder:
    """Clause function rendering ``$X{IN, column, param}``-style directives.

    The variant's operators are fixed at construction; one instance can be
    reused across renders and threads since it holds no per-call state.

    Args:
        operators: Operator set, or a ``ClauseVariant`` selecting one.
        settings: Rendering settings. Defaults to ``get_settings()`` at render time.
    """

    def __init__(
        self,
        operators: InOperators | ClauseVariant = ClauseVariant.IN,
        settings: Settings | None = None,
    ) -> None:
        if isinstance(operators, ClauseVariant):
            operators = operators.operators
        self.operators = operators
        self._settings = settings

    def render(self, request: ClauseRequest, value_source: Any) -> ClauseOutput:  # noqa: ANN401
        """Render the clause, raising ``ClauseError`` subclasses on bad input."""
        return render_in_clause(request, value_source, self.operators, self._settings)

    def try_render(
        self,
        request: ClauseRequest,
        value_source: Any,  # noqa: ANN401
    ) -> ClauseRenderResult:
        """Render the clause, reporting failures as an error result instead of raising.

        Returns:
            A ``ClauseRenderResult`` with status ``"success"`` or ``"error"``.
        """
        try:
            output = self.render(request, value_source)
        except ClauseError as exc:
            logger.warning("IN clause render failed (%s): %s", exc.error_kind, exc)
            return ClauseRenderResult(status="error", error_kind=exc.error_kind, error=str(exc))
        return ClauseRenderResult(status="success", output=output)

    def apply(self, tokens: ClauseTokens, context: QueryClauseContext) -> ClauseOutput:
        """Render a tokenized directive into *context*.

        Resolves the parameter through the context, appends the fragment to
        its query buffer and registers the bound values under the parameter
        name. Nothing is written to the context if rendering fails.

        Args:
            tokens: Directive tokens; position 1 is the column, 2 the parameter.
            context: Query being assembled.

        Returns:
            The rendered ``ClauseOutput``.
        """
        request = tokens.to_request()
        _, parameter_name = _require_tokens(request)

        value_source = context.get_parameter_value(parameter_name)
        output = self.render(request, value_source)
        logger.debug(
            "Applied clause for '%s': %d element(s), %d bound",
            parameter_name,
            count_values(parameter_name, value_source),
            output.placeholder_count,
        )

        context.query_buffer.append(output.text)
        if output.bound_parameters:
            context.add_multi_parameter(parameter_name, output.bound_parameters)
        return output
