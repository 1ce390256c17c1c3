"""Startup and shutdown orchestration for application services."""

from __future__ import annotations

from collections.abc import Iterable
import logging
from typing import Protocol

from solid_quiz.core.services.app_state import AppState

logger = logging.getLogger(__name__)


class Service(Protocol):
    """Lifecycle hooks every registered service provides."""

    def init(self, app: AppState) -> None: ...

    def shutdown(self) -> None: ...


class ServicesManager:
    """Runs service init hooks once in order and shutdown hooks in reverse."""

    def __init__(self, services: Iterable[Service]) -> None:
        self._services: list[Service] = list(services)
        self._initialized: bool = False

    def init_all(self, app: AppState) -> None:
        if self._initialized:
            raise RuntimeError("Services have already been initialised.")
        self._initialized = True
        for service in self._services:
            logger.info("Initialising %s", type(service).__name__)
            service.init(app)

    def shutdown_all(self) -> None:
        if not self._initialized:
            return
        self._initialized = False
        for service in reversed(self._services):
            try:
                service.shutdown()
            except Exception:
                logger.exception("Shutdown of %s failed", type(service).__name__)

    def is_initialized(self) -> bool:
        return self._initialized
