"""FastAPI server exposing quiz state to the article pages."""

from __future__ import annotations

from datetime import timezone

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel
import uvicorn

from solid_quiz.constants.about import APP_ABOUT_TEXT, APP_NAME, APP_VERSION
from solid_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from solid_quiz.core.quiz_manager import QuizManager, QuizStatus


class AnswerPayload(BaseModel):
    """Payload schema for submitted answers."""

    answers: list[str]


def _get_quiz_manager_dependency(quiz_manager: QuizManager):
    def dependency() -> QuizManager:
        return quiz_manager

    return dependency


def _serialize_status(status: QuizStatus) -> dict[str, object]:
    submitted_iso = None
    if status.submitted_at is not None:
        submitted_at = status.submitted_at
        if submitted_at.tzinfo is None:
            submitted_at = submitted_at.replace(tzinfo=timezone.utc)
        submitted_iso = submitted_at.astimezone(timezone.utc).isoformat()
    return {
        "name": status.name,
        "title": status.title,
        "options": status.options,
        "selected_answers": status.selected_answers,
        "is_submitted": status.is_submitted,
        "is_correct": status.is_correct,
        "correct_answers": status.correct_answers,
        "submitted_at": submitted_iso,
    }


def create_api_app(quiz_manager: QuizManager) -> FastAPI:
    """Create a FastAPI application wired to the provided quiz manager."""
    app = FastAPI(title=f"{APP_NAME} API", description=APP_ABOUT_TEXT, version=APP_VERSION)
    quiz_manager_dep = _get_quiz_manager_dependency(quiz_manager)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/quizzes")
    def list_quizzes(manager: QuizManager = Depends(quiz_manager_dep)) -> list[dict[str, object]]:
        return [_serialize_status(status) for status in manager.list_quizzes()]

    # Registered before /quizzes/{name} so "summary" is not taken for a quiz name.
    @app.get("/quizzes/summary")
    def get_summary(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, int]:
        summary = manager.get_summary()
        return {
            "total": summary.total,
            "submitted": summary.submitted,
            "correct": summary.correct,
        }

    @app.get("/quizzes/{name}")
    def get_quiz(name: str, manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        try:
            return _serialize_status(manager.get_quiz(name))
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=f"Unknown quiz '{name}'") from exc

    @app.post("/quizzes/{name}/answers", status_code=201)
    def submit_answers(
        name: str,
        payload: AnswerPayload,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        try:
            status = manager.submit_answers(name, payload.answers)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=f"Unknown quiz '{name}'") from exc
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return _serialize_status(status)

    @app.delete("/quizzes/{name}/answers")
    def reset_answers(name: str, manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        try:
            return _serialize_status(manager.reset_quiz(name))
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=f"Unknown quiz '{name}'") from exc

    return app


def run_api_server(
    quiz_manager: QuizManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    log_level: str = "info",
) -> None:
    """Serve the API until the process is interrupted."""
    app = create_api_app(quiz_manager)
    config = uvicorn.Config(app=app, host=host, port=port, log_level=log_level.lower())
    server = uvicorn.Server(config)
    server.run()
