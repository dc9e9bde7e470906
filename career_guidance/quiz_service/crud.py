from sqlalchemy.orm import Session

from .models import AttemptAnswer, QuizAttempt, QuizQuestion, QuizResult
from .scoring import Answer, AnswerSet, Question, Recommendation
from .seed import default_questions

QUESTIONS_PER_QUIZ = 10


def to_question(row: QuizQuestion) -> Question:
    return Question(
        id=row.id,
        text=row.question_text,
        options=tuple(str(o) for o in (row.options or [])),
        mapping={str(k): str(v) for k, v in (row.mapping or {}).items()},
        class_level=row.class_level,
    )


def create_question(db: Session, payload: dict) -> QuizQuestion:
    q = QuizQuestion(**payload)
    db.add(q)
    db.commit()
    db.refresh(q)
    return q


def list_questions(db: Session, class_level: str, limit: int = QUESTIONS_PER_QUIZ) -> list[QuizQuestion]:
    return (
        db.query(QuizQuestion)
        .filter(QuizQuestion.class_level == class_level)
        .order_by(QuizQuestion.id.asc())
        .limit(limit)
        .all()
    )


def list_or_seed_questions(db: Session, class_level: str) -> list[QuizQuestion]:
    rows = list_questions(db, class_level)
    if rows:
        return rows

    db.add_all([QuizQuestion(**q) for q in default_questions(class_level)])
    db.commit()
    return list_questions(db, class_level)


def get_question(db: Session, question_id: int) -> QuizQuestion | None:
    return db.query(QuizQuestion).filter(QuizQuestion.id == question_id).first()


def start_attempt(db: Session, user_id: str, class_level: str) -> QuizAttempt:
    a = QuizAttempt(user_id=user_id, class_level=class_level, submitted=False)
    db.add(a)
    db.commit()
    db.refresh(a)
    return a


def get_attempt(db: Session, attempt_id: int, user_id: str) -> QuizAttempt:
    attempt = (
        db.query(QuizAttempt)
        .filter(QuizAttempt.id == attempt_id, QuizAttempt.user_id == user_id)
        .first()
    )
    if not attempt:
        raise ValueError("Attempt not found")
    return attempt


def load_answer_set(db: Session, attempt_id: int) -> AnswerSet:
    # row id order == order the current answers were recorded in
    rows = (
        db.query(AttemptAnswer)
        .filter(AttemptAnswer.attempt_id == attempt_id)
        .order_by(AttemptAnswer.id.asc())
        .all()
    )
    return {
        r.question_id: Answer(question_id=r.question_id, selected_option=r.selected_option, category=r.mapped_value)
        for r in rows
    }


def replace_answer(db: Session, attempt_id: int, answer: Answer) -> None:
    db.query(AttemptAnswer).filter(
        AttemptAnswer.attempt_id == attempt_id,
        AttemptAnswer.question_id == answer.question_id,
    ).delete()
    db.add(AttemptAnswer(
        attempt_id=attempt_id,
        question_id=answer.question_id,
        selected_option=answer.selected_option,
        mapped_value=answer.category,
    ))
    db.commit()


def save_result(
    db: Session,
    *,
    attempt: QuizAttempt,
    recommendation: Recommendation,
    suggestions: list[str],
    suggestion_source: str,
) -> QuizResult:
    row = QuizResult(
        user_id=attempt.user_id,
        attempt_id=attempt.id,
        result_stream=recommendation.category,
        confidence_score=recommendation.confidence_score,
        suggested_courses=suggestions,
        suggestion_source=suggestion_source,
    )
    attempt.submitted = True
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def list_results(db: Session, user_id: str) -> list[QuizResult]:
    return (
        db.query(QuizResult)
        .filter(QuizResult.user_id == user_id)
        .order_by(QuizResult.created_at.asc(), QuizResult.id.asc())
        .all()
    )


def stream_counts(results: list[QuizResult]) -> list[dict]:
    counts: dict[str, int] = {}
    for r in results:
        counts[r.result_stream] = counts.get(r.result_stream, 0) + 1
    return [{"stream": s, "count": c} for s, c in counts.items()]


def answers_in_set(answers: AnswerSet, question_ids: set[int]) -> AnswerSet:
    return {qid: a for qid, a in answers.items() if qid in question_ids}
