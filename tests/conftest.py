"""Shared test fixtures for report-clauses."""

import sys
from pathlib import Path
from typing import Any

import pytest

# Ensure src/ is on the path for imports when the package is not installed
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from report_clauses.config.settings import Settings

# ---------------------------------------------------------------------------
# Protocol fakes
# ---------------------------------------------------------------------------


class FakeParameterStore:
    """In-memory fake satisfying the ``ParameterStore`` protocol.

    Stores canned values and records every ``get_value`` call for assertions.
    """

    def __init__(self, values: dict[str, Any] | None = None) -> None:
        self.values: dict[str, Any] = values or {}
        self.calls: list[str] = []

    def get_value(self, name: str) -> Any:
        """Return the canned value, ``None`` for unknown names."""
        self.calls.append(name)
        return self.values.get(name)


class SpyQueryContext:
    """Spy satisfying the ``QueryClauseContext`` protocol.

    Captures every appended fragment and every multi-parameter registration.
    """

    def __init__(self, values: dict[str, Any] | None = None) -> None:
        self.store = FakeParameterStore(values)
        self.fragments: list[str] = []
        self.registrations: list[tuple[str, list[Any]]] = []

    @property
    def query_buffer(self) -> list[str]:
        return self.fragments

    def get_parameter_value(self, name: str) -> Any:
        return self.store.get_value(name)

    def add_multi_parameter(self, name: str, values: Any) -> None:
        """Record a registration."""
        self.registrations.append((name, list(values)))


# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Return a ``Settings`` instance with test defaults (no .env lookup)."""
    return Settings(_env_file=None, in_list_warning_threshold=1000, log_bound_values=False)


@pytest.fixture
def spy_context() -> SpyQueryContext:
    """Return an empty ``SpyQueryContext``."""
    return SpyQueryContext()


@pytest.fixture
def fake_parameter_store() -> FakeParameterStore:
    """Return an empty ``FakeParameterStore``."""
    return FakeParameterStore()
