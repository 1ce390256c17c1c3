"""Service that writes the state tree back to disk when the application stops."""

from __future__ import annotations

import logging

from solid_quiz.core.services.app_state import AppState
from solid_quiz.core.services.state_repository import AppStateRepository

logger = logging.getLogger(__name__)


class StatePersister:
    def __init__(self, store: AppStateRepository) -> None:
        self._store = store
        self._app: AppState | None = None

    def init(self, app: AppState) -> None:
        self._app = app

    def shutdown(self) -> None:
        if self._app is None:
            return
        self._store.save(self._app.snapshot())
        logger.info("Saved quiz state to %s", self._store.path)
        self._app = None
