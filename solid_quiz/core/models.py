"""Domain models for the quiz service."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from solid_quiz.constants.storage_constants import DEFAULT_OPTIONS


@dataclass(frozen=True, slots=True)
class QuizMeta:
    """Answer key and display metadata for a quiz definition."""

    correct_answers: tuple[str, ...]
    title: str = ""
    options: tuple[str, ...] = DEFAULT_OPTIONS


@dataclass(frozen=True, slots=True)
class QuizDefinition:
    """Static quiz entry from the catalog. Never persisted."""

    name: str
    meta: QuizMeta


@dataclass(slots=True)
class QuizInstance:
    """Live quiz record owned by the application state tree."""

    name: str
    correct_answers: list[str] = field(default_factory=list)
    selected_answers: list[str] = field(default_factory=list)
    is_submitted: bool = False
    submitted_at: datetime | None = None

    def set_correct_answers(self, values: Iterable[str]) -> None:
        self.correct_answers = list(values)

    def select_answers(self, values: Iterable[str]) -> None:
        """Record the reader's answer and mark the quiz as submitted."""
        self.selected_answers = list(values)
        self.is_submitted = True
        self.submitted_at = datetime.now(timezone.utc)

    def reset(self) -> None:
        """Clear reader progress; the answer key stays in place."""
        self.selected_answers = []
        self.is_submitted = False
        self.submitted_at = None

    @property
    def is_correct(self) -> bool:
        if not self.is_submitted:
            return False
        return set(self.selected_answers) == set(self.correct_answers)

    def to_snapshot(self) -> dict[str, Any]:
        return {
            "correct_answers": list(self.correct_answers),
            "selected_answers": list(self.selected_answers),
            "is_submitted": self.is_submitted,
            "submitted_at": self.submitted_at.isoformat() if self.submitted_at else None,
        }

    @classmethod
    def from_snapshot(cls, name: str, data: Mapping[str, Any]) -> "QuizInstance":
        """Rebuild an instance from saved state, ignoring fields with the wrong shape."""
        return cls(
            name=name,
            correct_answers=_string_list(data.get("correct_answers")),
            selected_answers=_string_list(data.get("selected_answers")),
            is_submitted=data.get("is_submitted") is True,
            submitted_at=_parse_timestamp(data.get("submitted_at")),
        )


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, str)]


def _parse_timestamp(value: Any) -> datetime | None:
    if not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None
