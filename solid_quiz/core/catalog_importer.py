"""Utilities for loading a quiz catalog from a plain-text file.

File format (repeat blocks separated by blank lines or '---'):

    QUIZ: quiz name, unique within the file
    TITLE: Question shown above the options (optional)
    OPTIONS: comma separated answer values (optional, defaults to A, B, C, D)
    CORRECT: comma separated correct answers

Example:

    QUIZ: ocp-1
    TITLE: Which change extends behaviour without modifying existing code?
    OPTIONS: A, B, C, D
    CORRECT: A

    ---

    QUIZ: srp-1
    CORRECT: B, C
"""

from __future__ import annotations

from pathlib import Path

from solid_quiz.constants.storage_constants import DEFAULT_OPTIONS
from solid_quiz.core.catalog import QuizCatalog
from solid_quiz.core.models import QuizDefinition, QuizMeta


class CatalogImportError(Exception):
    """Raised when a catalog file cannot be parsed."""


_KEYS = ("QUIZ", "TITLE", "OPTIONS", "CORRECT")


def load_catalog_from_file(file_path: Path) -> QuizCatalog:
    text = file_path.read_text(encoding="utf-8")
    definitions = _parse_catalog_text(text)
    if not definitions:
        raise CatalogImportError("Catalog file did not contain any quizzes.")
    try:
        return QuizCatalog(definitions)
    except ValueError as exc:
        raise CatalogImportError(str(exc)) from exc


def _parse_catalog_text(text: str) -> list[QuizDefinition]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block))
                current_block = []
            continue
        if stripped:
            current_block.append(stripped)
        elif current_block:
            blocks.append("\n".join(current_block))
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block))

    return [_parse_block(block) for block in blocks]


def _parse_block(block: str) -> QuizDefinition:
    fields: dict[str, str] = {}
    for line in block.splitlines():
        key, sep, value = line.partition(":")
        key = key.strip().upper()
        if not sep or key not in _KEYS:
            raise CatalogImportError(f"Encountered text outside of a known field: '{line}'.")
        if key in fields:
            raise CatalogImportError(f"Field {key} given twice in one quiz block.")
        fields[key] = value.strip()

    name = fields.get("QUIZ", "")
    if not name:
        raise CatalogImportError("Quiz name missing (QUIZ: ...)")

    options = DEFAULT_OPTIONS
    if "OPTIONS" in fields:
        options = _split_values(fields["OPTIONS"])
        if not options:
            raise CatalogImportError(f"OPTIONS for quiz '{name}' must list at least one value.")

    correct = _split_values(fields.get("CORRECT", ""))
    if not correct:
        raise CatalogImportError(f"CORRECT for quiz '{name}' must list at least one answer.")

    return QuizDefinition(
        name=name,
        meta=QuizMeta(correct_answers=correct, title=fields.get("TITLE", ""), options=options),
    )


def _split_values(raw_value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw_value.split(",") if part.strip())
