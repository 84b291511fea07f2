"""Global test fixtures for the SWML builder."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from swml.config import get_settings
from swml.services.builder import SwmlBuilder


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from SWML_* variables and the cached settings."""
    for key in ("SWML_VALIDATE_STEPS", "SWML_JSON_INDENT", "SWML_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def builder() -> SwmlBuilder:
    """Builder with validation off."""
    return SwmlBuilder(validate=False)


@pytest.fixture
def strict_builder() -> SwmlBuilder:
    """Builder that validates every step."""
    return SwmlBuilder(validate=True)


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-apply test markers based on directory."""
    for item in items:
        path = Path(str(item.fspath))
        parts = path.parts
        if "tests" in parts:
            if "unit" in parts:
                item.add_marker(pytest.mark.unit)
            elif "e2e" in parts:
                item.add_marker(pytest.mark.e2e)
            elif "integration" in parts:
                item.add_marker(pytest.mark.integration)
