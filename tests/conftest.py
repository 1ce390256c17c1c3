from __future__ import annotations

from pathlib import Path

import pytest

from solid_quiz.core.catalog import QuizCatalog
from solid_quiz.core.models import QuizDefinition, QuizMeta
from solid_quiz.core.services.app_state import AppState
from solid_quiz.core.services.state_repository import AppStateRepository


class FakeStore:
    """Persistence reader returning a fixed snapshot and counting loads."""

    def __init__(self, snapshot=None) -> None:
        self.snapshot = snapshot
        self.load_calls = 0

    def load(self):
        self.load_calls += 1
        return self.snapshot


class RecordingAppState(AppState):
    def __init__(self) -> None:
        super().__init__()
        self.hydrated_with: list[dict] = []

    def hydrate(self, snapshot) -> None:
        self.hydrated_with.append(snapshot)
        super().hydrate(snapshot)


@pytest.fixture
def catalog() -> QuizCatalog:
    return QuizCatalog(
        [
            QuizDefinition(name="ocp-1", meta=QuizMeta(correct_answers=("A",))),
            QuizDefinition(name="srp-1", meta=QuizMeta(correct_answers=("B", "C"))),
        ]
    )


@pytest.fixture
def app_state() -> RecordingAppState:
    return RecordingAppState()


@pytest.fixture
def repository(tmp_path: Path) -> AppStateRepository:
    return AppStateRepository(tmp_path / "state" / "app_state.json")


@pytest.fixture
def make_store():
    return FakeStore
