"""Protocol interfaces for the clause rendering boundaries.

These protocols enable dependency injection for testability.
The report engine supplies real implementations; test fakes
hold canned parameter values and record every appended fragment.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ParameterStore(Protocol):
    """Resolves a report parameter name to its runtime value."""

    def get_value(self, name: str) -> Any:  # noqa: ANN401
        """Look up a parameter value.

        Args:
            name: Report parameter name.

        Returns:
            The runtime value, or ``None`` if the parameter is unset or unknown.
        """
        ...


@runtime_checkable
class QueryBuffer(Protocol):
    """Appendable text buffer receiving rendered SQL fragments."""

    def append(self, text: str) -> None:
        """Append a fragment to the end of the query text."""
        ...


@runtime_checkable
class QueryClauseContext(Protocol):
    """The query being assembled while clause functions are applied.

    Clause functions append text to ``query_buffer`` and declare the
    positional values bound to the ``?`` placeholders they emitted.
    """

    @property
    def query_buffer(self) -> QueryBuffer:
        """Buffer holding the query text rendered so far."""
        ...

    def get_parameter_value(self, name: str) -> Any:  # noqa: ANN401
        """Resolve a report parameter value (``None`` when unresolved).

        Args:
            name: Report parameter name.
        """
        ...

    def add_multi_parameter(self, name: str, values: Sequence[Any]) -> None:
        """Declare that *name* contributes *values* as consecutive positional parameters.

        Args:
            name: Report parameter the values came from.
            values: Ordered values, one per ``?`` placeholder just emitted.
        """
        ...
