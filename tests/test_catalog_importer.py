from __future__ import annotations

from pathlib import Path

import pytest

from solid_quiz.core.catalog_importer import CatalogImportError, load_catalog_from_file


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "catalog.txt"
    path.write_text(text, encoding="utf-8")
    return path


def test_loads_blocks_separated_by_blank_lines_and_dashes(tmp_path):
    path = _write(
        tmp_path,
        "QUIZ: ocp-1\nTITLE: Open/Closed\nCORRECT: A\n\n"
        "---\n"
        "QUIZ: srp-1\nOPTIONS: A, B, C\nCORRECT: B, C\n",
    )
    catalog = load_catalog_from_file(path)
    assert catalog.names() == ("ocp-1", "srp-1")
    assert catalog["ocp-1"].meta.title == "Open/Closed"
    assert catalog["ocp-1"].meta.options == ("A", "B", "C", "D")
    assert catalog["srp-1"].meta.options == ("A", "B", "C")
    assert catalog["srp-1"].meta.correct_answers == ("B", "C")


def test_empty_file_is_an_error(tmp_path):
    with pytest.raises(CatalogImportError, match="did not contain any quizzes"):
        load_catalog_from_file(_write(tmp_path, "\n\n---\n"))


def test_missing_correct_is_an_error(tmp_path):
    with pytest.raises(CatalogImportError, match="CORRECT"):
        load_catalog_from_file(_write(tmp_path, "QUIZ: ocp-1\n"))


def test_unknown_field_is_an_error(tmp_path):
    with pytest.raises(CatalogImportError, match="known field"):
        load_catalog_from_file(_write(tmp_path, "QUIZ: ocp-1\nHINT: none\nCORRECT: A\n"))


def test_catalog_validation_errors_are_wrapped(tmp_path):
    text = "QUIZ: ocp-1\nCORRECT: A\n\nQUIZ: ocp-1\nCORRECT: B\n"
    with pytest.raises(CatalogImportError, match="Duplicate"):
        load_catalog_from_file(_write(tmp_path, text))
