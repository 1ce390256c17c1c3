"""Business logic for reading and answering quizzes after startup."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
import logging
from threading import Lock

from solid_quiz.core.models import QuizDefinition, QuizInstance
from solid_quiz.core.services.app_state import AppState
from solid_quiz.core.services.state_repository import AppStateRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class QuizStatus:
    """Immutable view of one quiz returned to consumers."""

    name: str
    title: str
    options: list[str]
    selected_answers: list[str]
    is_submitted: bool
    is_correct: bool
    correct_answers: list[str] | None  # hidden until the quiz is submitted
    submitted_at: datetime | None


@dataclass(slots=True)
class ProgressSummary:
    total: int
    submitted: int
    correct: int


class QuizManager:
    """Facade over the state tree and catalog, shared by the API handlers."""

    def __init__(
        self,
        app_state: AppState,
        catalog: Mapping[str, QuizDefinition],
        store: AppStateRepository | None = None,
        autosave: bool = True,
    ) -> None:
        self._lock = Lock()
        self._app_state = app_state
        self._catalog = catalog
        self._store = store
        self._autosave = autosave

    def list_quizzes(self) -> list[QuizStatus]:
        with self._lock:
            return [self._status(name) for name in self._catalog]

    def get_quiz(self, name: str) -> QuizStatus:
        with self._lock:
            return self._status(name)

    def submit_answers(self, name: str, answers: list[str]) -> QuizStatus:
        with self._lock:
            definition = self._definition(name)
            cleaned = self._validate_answers(definition, answers)
            self._app_state.get_by_name(name).select_answers(cleaned)
            self._save()
            return self._status(name)

    def reset_quiz(self, name: str) -> QuizStatus:
        with self._lock:
            self._definition(name)
            self._app_state.get_by_name(name).reset()
            self._save()
            return self._status(name)

    def get_summary(self) -> ProgressSummary:
        with self._lock:
            quizzes = [self._app_state.get_by_name(name) for name in self._catalog]
            return ProgressSummary(
                total=len(quizzes),
                submitted=sum(1 for quiz in quizzes if quiz.is_submitted),
                correct=sum(1 for quiz in quizzes if quiz.is_correct),
            )

    def _definition(self, name: str) -> QuizDefinition:
        try:
            return self._catalog[name]
        except KeyError:
            raise KeyError(f"Unknown quiz '{name}'") from None

    def _status(self, name: str) -> QuizStatus:
        definition = self._definition(name)
        quiz: QuizInstance = self._app_state.get_by_name(name)
        return QuizStatus(
            name=name,
            title=definition.meta.title,
            options=list(definition.meta.options),
            selected_answers=list(quiz.selected_answers),
            is_submitted=quiz.is_submitted,
            is_correct=quiz.is_correct,
            correct_answers=list(quiz.correct_answers) if quiz.is_submitted else None,
            submitted_at=quiz.submitted_at,
        )

    @staticmethod
    def _validate_answers(definition: QuizDefinition, answers: list[str]) -> list[str]:
        cleaned: list[str] = []
        for answer in answers:
            value = answer.strip()
            if value and value not in cleaned:
                cleaned.append(value)
        if not cleaned:
            raise ValueError("At least one answer must be selected.")
        unknown = [value for value in cleaned if value not in definition.meta.options]
        if unknown:
            raise ValueError(f"Answers {unknown} are not options of quiz '{definition.name}'.")
        return cleaned

    def _save(self) -> None:
        if self._store is None or not self._autosave:
            return
        try:
            self._store.save(self._app_state.snapshot())
        except OSError:
            logger.exception("Could not save quiz state to %s", self._store.path)
