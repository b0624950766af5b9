"""
Clause rendering models.

These models describe a single ``$X{...}``-style clause invocation: the
tokens it was written with, the resolved request, the dialect operators
and the rendered output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, Field

# Token positions inside a clause directive (position 0 is the clause id)
POSITION_CLAUSE_ID = 0
POSITION_DB_COLUMN = 1
POSITION_PARAMETER = 2


class ClauseRequest(BaseModel):
    """
    Column and parameter names extracted from a clause directive.

    Both fields are optional at the model level so that a missing token is
    reported as a ``MissingTokenError`` by the builder rather than as a
    pydantic validation error.
    """

    column: str | None = Field(default=None, description="SQL column the predicate applies to")
    parameter_name: str | None = Field(
        default=None, description="Report parameter holding the value collection"
    )


@dataclass(frozen=True, slots=True)
class ClauseTokens:
    """Ordered tokens of a clause directive, e.g. ``("IN", "DEPT_ID", "depts")``."""

    tokens: tuple[str | None, ...] = ()

    @classmethod
    def of(cls, *tokens: str | None) -> ClauseTokens:
        return cls(tokens=tuple(tokens))

    @property
    def clause_id(self) -> str | None:
        return self.get(POSITION_CLAUSE_ID)

    def get(self, position: int) -> str | None:
        """Return the stripped token at *position*, or ``None`` if absent or blank."""
        if position < 0 or position >= len(self.tokens):
            return None
        token = self.tokens[position]
        if token is None:
            return None
        token = token.strip()
        return token or None

    def to_request(self) -> ClauseRequest:
        return ClauseRequest(
            column=self.get(POSITION_DB_COLUMN),
            parameter_name=self.get(POSITION_PARAMETER),
        )


@dataclass(frozen=True, slots=True)
class InOperators:
    """The three operator spellings that distinguish IN from NOT IN.

    Attributes:
        in_operator: Membership operator for non-null values (``IN`` / ``NOT IN``).
        null_operator: Null test used when the collection contains ``None``.
        combinator: Logical operator joining the null and non-null branches.
    """

    in_operator: str
    null_operator: str
    combinator: str


@dataclass(frozen=True, slots=True)
class ClauseOutput:
    """Rendered clause text and the values bound to its ``?`` placeholders.

    Attributes:
        text: SQL fragment ready to be appended to the enclosing query.
        bound_parameters: Ordered values matching the ``?`` placeholders in *text*.
    """

    text: str
    bound_parameters: list[Any] = field(default_factory=list)

    @property
    def placeholder_count(self) -> int:
        return len(self.bound_parameters)


@dataclass(frozen=True, slots=True)
class ClauseRenderResult:
    """Outcome of a non-raising render.

    Exactly one of *output* / *error* is set, mirroring ``status``.
    """

    status: Literal["success", "error"]
    output: ClauseOutput | None = None
    error_kind: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "success"
