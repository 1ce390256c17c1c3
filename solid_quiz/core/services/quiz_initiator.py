"""Startup reconciliation of saved quiz progress with the quiz catalog.

The catalog is the only source of truth for answer keys. Saved state only
contributes reader progress, so an answer-key fix shipped in the catalog is
never undone by an older save.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
import logging
from typing import Any, Protocol

from solid_quiz.core.models import QuizDefinition
from solid_quiz.core.services.app_state import AppState

logger = logging.getLogger(__name__)


class PersistenceReader(Protocol):
    def load(self) -> Mapping[str, Any] | None: ...


def prune_snapshot(snapshot: Mapping[str, Any], valid_names: Collection[str]) -> dict[str, Any]:
    """Return a copy of the snapshot whose quizzes only contain valid names.

    Other top-level keys are kept. A missing or non-mapping ``quizzes`` field
    becomes an empty mapping. The input snapshot is left untouched.
    """
    raw_quizzes = snapshot.get("quizzes")
    if not isinstance(raw_quizzes, Mapping):
        raw_quizzes = {}
    pruned = dict(snapshot)
    pruned["quizzes"] = {name: data for name, data in raw_quizzes.items() if name in valid_names}
    return pruned


def reconcile(
    catalog: Mapping[str, QuizDefinition],
    store: PersistenceReader,
    tree: AppState,
) -> None:
    """Align the state tree with the catalog, restoring saved progress where it still applies."""
    valid_names = set(catalog)

    snapshot = store.load()
    if snapshot is not None and not isinstance(snapshot, Mapping):
        logger.warning("Ignoring saved state of unexpected type %s", type(snapshot).__name__)
        snapshot = None

    if snapshot is not None:
        pruned = prune_snapshot(snapshot, valid_names)
        raw_quizzes = snapshot.get("quizzes")
        saved_count = len(raw_quizzes) if isinstance(raw_quizzes, Mapping) else 0
        dropped = saved_count - len(pruned["quizzes"])
        if dropped:
            logger.info("Pruned %d saved quiz(zes) no longer in the catalog", dropped)
        tree.hydrate(pruned)

    created = 0
    for name, definition in catalog.items():
        if not tree.has(name):
            quiz = tree.create_quiz(name)
            created += 1
        else:
            quiz = tree.get_by_name(name)
        quiz.set_correct_answers(definition.meta.correct_answers)

    # Covers a tree that already held instances when no snapshot was hydrated.
    for name in tree.names():
        if name not in valid_names:
            tree.remove(name)

    logger.info(
        "Quiz state ready: %d quiz(zes), %d restored, %d created",
        len(catalog),
        len(catalog) - created,
        created,
    )


class QuizInitiator:
    """Service that reconciles quiz state once at application startup."""

    def __init__(self, catalog: Mapping[str, QuizDefinition], store: PersistenceReader) -> None:
        self._catalog = catalog
        self._store = store

    def init(self, app: AppState) -> None:
        reconcile(self._catalog, self._store, app)

    def shutdown(self) -> None:
        pass
