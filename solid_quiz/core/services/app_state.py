"""In-memory application state tree holding the live quiz instances."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

from solid_quiz.core.models import QuizInstance

logger = logging.getLogger(__name__)


class AppState:
    """Owns every QuizInstance; other components only reach them through this tree."""

    def __init__(self) -> None:
        self._quizzes: dict[str, QuizInstance] = {}

    def hydrate(self, snapshot: Mapping[str, Any]) -> None:
        """Replace the tree contents with the quizzes found in a snapshot."""
        raw_quizzes = snapshot.get("quizzes")
        if not isinstance(raw_quizzes, Mapping):
            raw_quizzes = {}

        quizzes: dict[str, QuizInstance] = {}
        for name, data in raw_quizzes.items():
            if not isinstance(name, str) or not isinstance(data, Mapping):
                logger.warning("Skipping malformed saved quiz entry %r", name)
                continue
            quizzes[name] = QuizInstance.from_snapshot(name, data)
        self._quizzes = quizzes

    def has(self, name: str) -> bool:
        return name in self._quizzes

    def create_quiz(self, name: str) -> QuizInstance:
        if name in self._quizzes:
            raise ValueError(f"Quiz '{name}' already exists.")
        instance = QuizInstance(name=name)
        self._quizzes[name] = instance
        return instance

    def get_by_name(self, name: str) -> QuizInstance:
        try:
            return self._quizzes[name]
        except KeyError:
            raise KeyError(f"Unknown quiz '{name}'") from None

    def remove(self, name: str) -> None:
        self._quizzes.pop(name, None)

    def names(self) -> list[str]:
        return list(self._quizzes)

    def snapshot(self) -> dict[str, Any]:
        return {
            "quizzes": {name: quiz.to_snapshot() for name, quiz in self._quizzes.items()},
        }
