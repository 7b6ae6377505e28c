"""Shared fixtures and helpers for tests."""

import json
from pathlib import Path
from typing import Any

import pytest

_FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Auto-marker: every test here runs without external services
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Wire payload builders
# ---------------------------------------------------------------------------


def line_entry(line: str = "Foo x;", lno: int = 3, bounds: tuple[int, int] = (0, 3), **extra: Any) -> dict[str, Any]:
    """Build a wire-level line entry as Searchfox sends it."""
    entry: dict[str, Any] = {"line": line, "lno": lno, "bounds": list(bounds)}
    entry.update(extra)
    return entry


def group(path: str, *lines: dict[str, Any]) -> dict[str, Any]:
    return {"path": path, "lines": list(lines)}


def envelope(title: str = "Foo", timedout: bool = False, **sections: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {"*title*": title, "*timedout*": timedout}
    payload.update(sections)
    return payload


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fixtures_dir() -> Path:
    return _FIXTURES_DIR


@pytest.fixture
def browser_child_bytes() -> bytes:
    return (_FIXTURES_DIR / "BrowserChild.json").read_bytes()


@pytest.fixture
def browser_child_payload(browser_child_bytes: bytes) -> dict[str, Any]:
    payload: dict[str, Any] = json.loads(browser_child_bytes)
    return payload
