"""
Root test configuration and fixtures for the crossing project.

Note: sys.path manipulation is handled here to ensure imports work correctly
without installing the package.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add project root to path to allow imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from crossing.models import Participant  # noqa: E402
from crossing.settings import get_settings  # noqa: E402
from crossing.state import CrossingState  # noqa: E402


def make_participants(*times: float) -> list[Participant]:
    """Participants named A, B, C... with ids in argument order."""
    return [Participant(id=idx, name=chr(ord("A") + idx), crossing_time=time) for idx, time in enumerate(times)]


def make_state(*times: float) -> CrossingState:
    """Fresh crossing state with everyone on the origin bank."""
    return CrossingState.from_participants(make_participants(*times))


@pytest.fixture
def canonical_participants() -> list[Participant]:
    """The classic puzzle: A=1, B=2, C=5, D=10."""
    return make_participants(1, 2, 5, 10)


@pytest.fixture
def canonical_state(canonical_participants: list[Participant]) -> CrossingState:
    return CrossingState.from_participants(canonical_participants)


@pytest.fixture
def write_document(tmp_path: Path) -> Callable[[str], Path]:
    """Write a participant document into a temp dir and return its path."""

    def _write(text: str, name: str = "people.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep CROSSING_* variables from the developer's shell out of tests."""
    for var in ("CROSSING_INPUT_PATH", "CROSSING_LOG_LEVEL", "CROSSING_MOVES_OUTPUT", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """configure_logging() replaces root handlers; put the previous ones back."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
