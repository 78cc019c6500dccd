"""Global pytest fixtures and default marks for servekit."""

from __future__ import annotations

from pathlib import Path

import pytest

from servekit.dependencies import DependencyRegistry

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
DEFAULT_MARKS = ("unit", "functional")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark items in `tests/unit/` and `tests/functional/` after their directory."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        for name in DEFAULT_MARKS:
            if TESTS_ROOT / name not in path.parents:
                continue
            if not any(marker.name == name for marker in item.iter_markers()):
                item.add_marker(getattr(pytest.mark, name))


class FakeProbe:
    """Probe whose answers are scripted per marker.

    Each marker maps to a list of answers consumed one per call; the last
    answer repeats once the list is exhausted. Calls are recorded.
    """

    def __init__(self, answers: dict[str, list[bool]] | None = None) -> None:
        self.answers = answers or {}
        self.calls: list[str] = []

    def __call__(self, marker: str) -> bool:
        self.calls.append(marker)
        scripted = self.answers.get(marker, [False])
        return scripted.pop(0) if len(scripted) > 1 else scripted[0]


@pytest.fixture
def probe() -> FakeProbe:
    """A scripted probe that reports every marker as missing until told otherwise."""
    return FakeProbe()


@pytest.fixture
def registry(probe: FakeProbe) -> DependencyRegistry:
    """A dependency registry with a fresh cache and the scripted probe."""
    return DependencyRegistry(probe=probe)
