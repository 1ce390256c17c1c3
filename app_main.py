"""Application entry point for the SOLID quiz service."""

from __future__ import annotations

from solid_quiz.core.catalog import DEFAULT_CATALOG, QuizCatalog
from solid_quiz.core.catalog_importer import load_catalog_from_file
from solid_quiz.core.quiz_manager import QuizManager
from solid_quiz.core.services.app_state import AppState
from solid_quiz.core.services.quiz_initiator import QuizInitiator
from solid_quiz.core.services.services_manager import ServicesManager
from solid_quiz.core.services.state_persister import StatePersister
from solid_quiz.core.services.state_repository import AppStateRepository
from solid_quiz.core.settings import AppSettings
from solid_quiz.server.api_server import run_api_server
from solid_quiz.utils.logging_config import configure_logging


def _load_catalog(settings: AppSettings) -> QuizCatalog:
    if settings.catalog_path is None:
        return DEFAULT_CATALOG
    return load_catalog_from_file(settings.catalog_path)


def main() -> None:
    """Reconcile quiz state, serve the API, and save state on exit."""
    settings = AppSettings.from_env()
    logger = configure_logging(settings.log_level)
    logger.info("Starting SOLID quiz service…")

    catalog = _load_catalog(settings)
    store = AppStateRepository(settings.state_path)
    app_state = AppState()
    services = ServicesManager([QuizInitiator(catalog, store), StatePersister(store)])

    services.init_all(app_state)
    try:
        quiz_manager = QuizManager(app_state, catalog, store=store)
        logger.info("Serving %d quiz(zes) on http://%s:%d/", len(catalog), settings.host, settings.port)
        run_api_server(quiz_manager, host=settings.host, port=settings.port, log_level=settings.log_level)
    finally:
        services.shutdown_all()


if __name__ == "__main__":
    main()
