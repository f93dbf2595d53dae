"""Pytest configuration and shared fixtures for the container tests."""

from collections.abc import Generator

import pytest

from monadic.config import reset_settings


# Pytest configuration
def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "property: mark test as a property-based test")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate every test from MONADIC_* variables in the outer environment."""
    monkeypatch.delenv("MONADIC_WARN_ON_NONE_CONVERSION", raising=False)
    monkeypatch.delenv("MONADIC_LOG_LEVEL", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sub():
    """Subtraction, the canonical non-commutative fold function."""
    return lambda a, b: a - b
