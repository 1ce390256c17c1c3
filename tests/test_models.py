from __future__ import annotations

from solid_quiz.core.models import QuizInstance


def test_is_correct_ignores_answer_order():
    quiz = QuizInstance(name="srp-1", correct_answers=["B", "C"])
    quiz.select_answers(["C", "B"])
    assert quiz.is_correct


def test_unsubmitted_quiz_is_never_correct():
    quiz = QuizInstance(name="srp-1", correct_answers=["B"], selected_answers=["B"])
    assert not quiz.is_correct


def test_reset_keeps_answer_key():
    quiz = QuizInstance(name="ocp-1", correct_answers=["A"])
    quiz.select_answers(["A"])
    quiz.reset()
    assert quiz.correct_answers == ["A"]
    assert quiz.selected_answers == []
    assert not quiz.is_submitted
    assert quiz.submitted_at is None


def test_snapshot_roundtrip_keeps_progress():
    quiz = QuizInstance(name="ocp-1", correct_answers=["A"])
    quiz.select_answers(["B"])
    restored = QuizInstance.from_snapshot("ocp-1", quiz.to_snapshot())
    assert restored == quiz


def test_from_snapshot_tolerates_bad_fields():
    restored = QuizInstance.from_snapshot(
        "ocp-1",
        {"correct_answers": "A", "selected_answers": ["A", 3], "is_submitted": "yes", "submitted_at": "nope"},
    )
    assert restored.correct_answers == []
    assert restored.selected_answers == ["A"]
    assert restored.is_submitted is False
    assert restored.submitted_at is None
