"""Shared protocols and the in-memory query context."""

from .protocols import ParameterStore, QueryBuffer, QueryClauseContext
from .query_context import DictParameterStore, ParameterBinding, QueryRenderContext

__all__ = [
    "DictParameterStore",
    "ParameterBinding",
    "ParameterStore",
    "QueryBuffer",
    "QueryClauseContext",
    "QueryRenderContext",
]
