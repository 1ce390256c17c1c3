from __future__ import annotations

import json

import pytest

from solid_quiz.constants.storage_constants import SNAPSHOT_VERSION


def test_load_returns_none_without_file(repository):
    assert repository.load() is None


def test_save_then_load(repository):
    repository.save({"quizzes": {"ocp-1": {"selected_answers": ["A"]}}})
    loaded = repository.load()
    assert loaded["quizzes"] == {"ocp-1": {"selected_answers": ["A"]}}
    assert loaded["version"] == SNAPSHOT_VERSION
    assert "saved_at" in loaded
    assert not repository.path.with_name(repository.path.name + ".tmp").exists()


def test_save_does_not_mutate_input(repository):
    snapshot = {"quizzes": {}}
    repository.save(snapshot)
    assert snapshot == {"quizzes": {}}


def test_invalid_json_is_treated_as_missing(repository):
    repository.path.parent.mkdir(parents=True)
    repository.path.write_text("{not json", encoding="utf-8")
    assert repository.load() is None


def test_non_object_document_is_treated_as_missing(repository):
    repository.path.parent.mkdir(parents=True)
    repository.path.write_text(json.dumps(["ocp-1"]), encoding="utf-8")
    assert repository.load() is None


def test_clear_removes_file(repository):
    repository.save({"quizzes": {}})
    repository.clear()
    assert repository.load() is None
    repository.clear()


def test_undecodable_file_is_treated_as_missing(repository):
    repository.path.parent.mkdir(parents=True)
    repository.path.write_bytes(b'{"quizzes": {"ocp-1": {"selected_answers": ["\xff\xfe"]}}}')
    assert repository.load() is None


def test_failed_save_removes_temp_file(repository, monkeypatch):
    def failing_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("solid_quiz.core.services.state_repository.os.replace", failing_replace)
    with pytest.raises(OSError, match="disk full"):
        repository.save({"quizzes": {}})
    assert not repository.path.with_name(repository.path.name + ".tmp").exists()
    assert not repository.path.exists()
