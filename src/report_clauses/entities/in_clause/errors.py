"""Errors raised while rendering a clause.

All errors indicate a malformed report or query definition. They are raised
at the point of detection and are never retried.
"""

from __future__ import annotations


class ClauseError(Exception):
    """Base class for clause rendering failures."""

    error_kind = "clause_error"


class MissingTokenError(ClauseError):
    """A clause directive is missing its column or parameter token."""

    error_kind = "missing_token"

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"SQL IN clause missing {token} token")


class UnsupportedParameterTypeError(ClauseError):
    """The parameter value is neither ``None``, a sequence nor a collection."""

    error_kind = "unsupported_parameter_type"

    def __init__(self, parameter_name: str, value_type: type) -> None:
        self.parameter_name = parameter_name
        self.value_type = value_type
        super().__init__(
            f"Invalid type {value_type.__module__}.{value_type.__qualname__} for parameter "
            f"'{parameter_name}' used in an IN clause; "
            "the value must be a sequence or a collection."
        )


class UnknownClauseError(ClauseError):
    """No clause function is registered under the directive's clause id."""

    error_kind = "unknown_clause"

    def __init__(self, clause_id: str | None) -> None:
        self.clause_id = clause_id
        super().__init__(f"Unknown query clause '{clause_id}'")
