"""In-memory query assembly context.

Holds the query text rendered so far and the positional parameter list that
lines up with its ``?`` placeholders. One context serves one rendering pass
over one statement and is not safe to share between concurrent renders.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .protocols import ParameterStore

logger = logging.getLogger(__name__)


class DictParameterStore:
    """ParameterStore backed by a plain mapping.

    Unknown names resolve to ``None``, the same as an unset parameter.

    Args:
        values: Parameter name to runtime value.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})

    def get_value(self, name: str) -> Any:  # noqa: ANN401
        """Return the value for *name*, or ``None`` if it was never set."""
        return self._values.get(name)

    def set_value(self, name: str, value: Any) -> None:  # noqa: ANN401
        self._values[name] = value


@dataclass(frozen=True, slots=True)
class ParameterBinding:
    """A run of consecutive positional values contributed by one parameter."""

    name: str
    count: int


class QueryRenderContext:
    """QueryClauseContext implementation accumulating text parts in a list.

    Args:
        parameters: Parameter store, or a mapping wrapped in ``DictParameterStore``.
    """

    def __init__(self, parameters: ParameterStore | Mapping[str, Any] | None = None) -> None:
        if parameters is None or isinstance(parameters, Mapping):
            parameters = DictParameterStore(parameters)
        self._store: ParameterStore = parameters
        self._parts: list[str] = []
        self._values: list[Any] = []
        self._bindings: list[ParameterBinding] = []

    @property
    def query_buffer(self) -> list[str]:
        return self._parts

    def append(self, text: str) -> None:
        """Append literal query text (e.g. the parts around a clause)."""
        self._parts.append(text)

    def get_parameter_value(self, name: str) -> Any:  # noqa: ANN401
        return self._store.get_value(name)

    def add_multi_parameter(self, name: str, values: Sequence[Any]) -> None:
        """Record *values* as the next ``len(values)`` positional parameters.

        Args:
            name: Report parameter the values came from.
            values: Ordered values, one per ``?`` placeholder just emitted.
        """
        values = list(values)
        self._values.extend(values)
        self._bindings.append(ParameterBinding(name=name, count=len(values)))
        logger.debug(
            "Registered %d positional value(s) for parameter '%s' (total %d)",
            len(values),
            name,
            len(self._values),
        )

    @property
    def sql(self) -> str:
        return "".join(self._parts)

    @property
    def parameters(self) -> list[Any]:
        return list(self._values)

    @property
    def bindings(self) -> list[ParameterBinding]:
        return list(self._bindings)

    def positional_count(self, name: str) -> int:
        """Total number of positional values contributed by parameter *name*."""
        return sum(binding.count for binding in self._bindings if binding.name == name)
