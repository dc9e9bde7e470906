"""
Tests for career_guidance/quiz_service/scoring.py.

What we test
------------
record_answer():
  - Uses the question's mapping, else the lower-cased option label.
  - Re-answering replaces the prior answer and moves it to the end.
  - Identical re-selection leaves the answer set unchanged.
  - Undeclared options raise InvalidOptionSelection.
  - The input answer set is not mutated.

compute_recommendation():
  - Tally/plurality/confidence on the reference scenarios.
  - Ties go to the category seen first among the answers.
  - Incomplete (or empty) quizzes raise IncompleteSubmission.
"""

from __future__ import annotations

import pytest

from career_guidance.quiz_service.scoring import (
    Answer,
    IncompleteSubmission,
    InvalidOptionSelection,
    Question,
    build_tally,
    compute_recommendation,
    confidence_percent,
    record_answer,
)


# ── Helpers ────────────────────────────────────────────────────────────────────

def _question(qid: int, mapping: dict[str, str] | None = None, options: tuple[str, ...] | None = None) -> Question:
    mapping = mapping if mapping is not None else {"Maths": "mpc", "Biology": "bipc", "History": "arts"}
    return Question(
        id=qid,
        text=f"Question {qid}",
        options=options or tuple(mapping) or ("Maths",),
        mapping=mapping,
        class_level="10th",
    )


def _answers(*categories: str) -> list[Answer]:
    return [Answer(question_id=i + 1, selected_option=c, category=c) for i, c in enumerate(categories)]


def _questions(n: int) -> list[Question]:
    return [_question(i + 1) for i in range(n)]


# ── record_answer ──────────────────────────────────────────────────────────────

class TestRecordAnswer:
    def test_uses_mapping(self):
        answers = record_answer({}, _question(1), "Biology")
        assert answers[1] == Answer(question_id=1, selected_option="Biology", category="bipc")

    def test_falls_back_to_lowercased_option(self):
        q = _question(1, mapping={"Maths": "mpc"}, options=("Maths", "Social Studies"))
        answers = record_answer({}, q, "Social Studies")
        assert answers[1].category == "social studies"

    def test_replaces_prior_answer(self):
        q1, q2 = _question(1), _question(2)
        answers = record_answer({}, q1, "Maths")
        answers = record_answer(answers, q2, "History")
        answers = record_answer(answers, q1, "Biology")

        assert len(answers) == 2
        assert answers[1].category == "bipc"
        # the changed answer now sits last
        assert list(answers) == [2, 1]

    def test_identical_selection_is_idempotent(self):
        q = _question(1)
        once = record_answer({}, q, "Maths")
        twice = record_answer(once, q, "Maths")
        assert twice == once
        assert len(twice) == 1

    def test_size_tracks_distinct_questions(self):
        answers: dict = {}
        for qid, option in [(1, "Maths"), (2, "Maths"), (1, "History"), (3, "Biology"), (2, "Biology")]:
            answers = record_answer(answers, _question(qid), option)
        assert len(answers) == 3

    def test_undeclared_option_rejected(self):
        with pytest.raises(InvalidOptionSelection) as exc:
            record_answer({}, _question(7), "Astrology")
        assert exc.value.question_id == 7
        assert exc.value.option == "Astrology"

    def test_input_not_mutated(self):
        original = record_answer({}, _question(1), "Maths")
        record_answer(original, _question(1), "History")
        assert original[1].category == "mpc"


# ── compute_recommendation ─────────────────────────────────────────────────────

class TestComputeRecommendation:
    def test_plurality_scenario(self):
        rec = compute_recommendation(_answers("mpc", "mpc", "bipc"), _questions(3))
        assert rec.category == "mpc"
        assert rec.confidence_score == 67
        assert rec.tally == {"mpc": 2, "bipc": 1}

    def test_single_answer_is_full_confidence(self):
        rec = compute_recommendation(_answers("arts"), _questions(1))
        assert rec.category == "arts"
        assert rec.confidence_score == 100
        assert rec.tally == {"arts": 1}

    def test_accepts_answer_set_mapping(self):
        answers = {a.question_id: a for a in _answers("commerce", "arts", "commerce")}
        rec = compute_recommendation(answers, _questions(3))
        assert rec.category == "commerce"

    def test_tie_goes_to_first_seen(self):
        rec = compute_recommendation(_answers("bipc", "mpc", "mpc", "bipc"), _questions(4))
        assert rec.category == "bipc"
        assert rec.confidence_score == 50

        rec = compute_recommendation(_answers("mpc", "bipc", "bipc", "mpc"), _questions(4))
        assert rec.category == "mpc"

    def test_tie_not_decided_by_lexical_order(self):
        rec = compute_recommendation(_answers("medical", "arts"), _questions(2))
        assert rec.category == "medical"

    def test_tally_sums_to_total(self):
        cats = ("mpc", "arts", "bipc", "arts", "commerce", "mpc", "arts")
        rec = compute_recommendation(_answers(*cats), _questions(len(cats)))
        assert sum(rec.tally.values()) == len(cats)
        assert 0 <= rec.confidence_score <= 100
        assert rec.category == "arts"

    def test_zero_count_categories_absent(self):
        rec = compute_recommendation(_answers("mpc", "mpc"), _questions(2))
        assert set(rec.tally) == {"mpc"}

    def test_deterministic(self):
        answers = _answers("arts", "commerce", "arts", "commerce", "bipc")
        first = compute_recommendation(answers, _questions(5))
        for _ in range(5):
            again = compute_recommendation(answers, _questions(5))
            assert (again.category, again.confidence_score) == (first.category, first.confidence_score)

    def test_incomplete_rejected(self):
        with pytest.raises(IncompleteSubmission) as exc:
            compute_recommendation(_answers("mpc", "bipc"), _questions(3))
        assert (exc.value.answered, exc.value.total) == (2, 3)

    def test_empty_quiz_rejected(self):
        with pytest.raises(IncompleteSubmission):
            compute_recommendation([], [])


# ── Tally / confidence helpers ────────────────────────────────────────────────

def test_build_tally_keeps_first_occurrence_order():
    assert list(build_tally(_answers("arts", "mpc", "arts", "bipc"))) == ["arts", "mpc", "bipc"]


@pytest.mark.parametrize(
    "top,total,expected",
    [(2, 3, 67), (1, 3, 33), (1, 8, 13), (1, 2, 50), (5, 5, 100), (1, 200, 1), (1, 201, 0)],
)
def test_confidence_percent(top, total, expected):
    assert confidence_percent(top, total) == expected
