import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from career_guidance.profile_service.crud import get_profile
from career_guidance.shared.auth import bearer_token, current_user_id
from career_guidance.shared.database import db_dependency
from .crud import (
    answers_in_set, create_question, get_attempt, get_question, list_or_seed_questions,
    list_results, load_answer_set, replace_answer, save_result,
    start_attempt, stream_counts, to_question,
)
from .schemas import (
    AnswerIn, AnswerOut, AttemptAnswersOut, AttemptStartOut,
    QuestionCreateIn, QuestionOut, QuizHistoryOut, QuizResultOut, SubmitQuizOut,
)
from .scoring import IncompleteSubmission, InvalidOptionSelection, compute_recommendation, record_answer
from .suggestions import resolve_suggestions

logger = logging.getLogger(__name__)

DEFAULT_CLASS_LEVEL = "10th"


def _question_out(q) -> QuestionOut:
    return QuestionOut(id=q.id, question_text=q.question_text, options=list(q.options or []), class_level=q.class_level)


def _result_out(r) -> QuizResultOut:
    return QuizResultOut(
        id=r.id,
        attempt_id=r.attempt_id,
        result_stream=r.result_stream,
        confidence_score=r.confidence_score,
        suggested_courses=list(r.suggested_courses or []),
        created_at=r.created_at,
    )


def build_router(SessionLocal):
    router = APIRouter()
    get_db = db_dependency(SessionLocal)

    def user_class_level(db: Session, uid: str) -> str:
        profile = get_profile(db, uid)
        return (profile.class_completed if profile else "") or DEFAULT_CLASS_LEVEL

    def open_attempt(db: Session, attempt_id: int, uid: str):
        try:
            attempt = get_attempt(db, attempt_id, uid)
        except ValueError:
            raise HTTPException(404, "Attempt not found")
        if attempt.submitted:
            raise HTTPException(409, "Attempt already submitted")
        return attempt

    @router.get("/questions", response_model=list[QuestionOut])
    def get_qs(request: Request, class_level: str | None = Query(default=None), db: Session = Depends(get_db)):
        level = class_level or user_class_level(db, current_user_id(request))
        return [_question_out(q) for q in list_or_seed_questions(db, level)]

    @router.post("/questions", response_model=QuestionOut)
    def create_q(payload: QuestionCreateIn, db: Session = Depends(get_db)):
        return _question_out(create_question(db, payload.model_dump()))

    @router.post("/attempts/start", response_model=AttemptStartOut)
    def start(request: Request, db: Session = Depends(get_db)):
        uid = current_user_id(request)
        level = user_class_level(db, uid)
        questions = list_or_seed_questions(db, level)
        a = start_attempt(db, uid, level)
        return AttemptStartOut(attempt_id=a.id, class_level=level, questions=[_question_out(q) for q in questions])

    @router.put("/attempts/{attempt_id}/answers", response_model=AttemptAnswersOut)
    def answer(attempt_id: int, payload: AnswerIn, request: Request, db: Session = Depends(get_db)):
        attempt = open_attempt(db, attempt_id, current_user_id(request))

        # only questions from this attempt's question set can be answered
        in_set = {q.id for q in list_or_seed_questions(db, attempt.class_level)}
        row = get_question(db, payload.question_id) if payload.question_id in in_set else None
        if not row:
            raise HTTPException(404, "Question not found")

        answers = load_answer_set(db, attempt.id)
        try:
            answers = record_answer(answers, to_question(row), payload.selected_option)
        except InvalidOptionSelection as e:
            raise HTTPException(422, str(e))

        replace_answer(db, attempt.id, answers[row.id])
        return _answers_out(db, attempt)

    @router.get("/attempts/{attempt_id}/answers", response_model=AttemptAnswersOut)
    def get_answers(attempt_id: int, request: Request, db: Session = Depends(get_db)):
        try:
            attempt = get_attempt(db, attempt_id, current_user_id(request))
        except ValueError:
            raise HTTPException(404, "Attempt not found")
        return _answers_out(db, attempt)

    def _answers_out(db: Session, attempt) -> AttemptAnswersOut:
        questions = list_or_seed_questions(db, attempt.class_level)
        answers = answers_in_set(load_answer_set(db, attempt.id), {q.id for q in questions})
        total = len(questions)
        return AttemptAnswersOut(
            attempt_id=attempt.id,
            answered=len(answers),
            total=total,
            answers=[
                AnswerOut(question_id=a.question_id, selected_option=a.selected_option, mapped_value=a.category)
                for a in answers.values()
            ],
        )

    @router.post("/attempts/{attempt_id}/submit", response_model=SubmitQuizOut)
    async def submit(attempt_id: int, request: Request, db: Session = Depends(get_db)):
        attempt = open_attempt(db, attempt_id, current_user_id(request))

        questions = [to_question(q) for q in list_or_seed_questions(db, attempt.class_level)]
        # answers to questions outside the current set never count
        answers = answers_in_set(load_answer_set(db, attempt.id), {q.id for q in questions})

        try:
            recommendation = compute_recommendation(answers, questions)
        except IncompleteSubmission as e:
            raise HTTPException(400, f"Incomplete quiz: please answer all questions ({e.answered}/{e.total})")

        suggestion_set = await resolve_suggestions(
            recommendation.category, attempt.class_level, token=bearer_token(request)
        )

        result = save_result(
            db,
            attempt=attempt,
            recommendation=recommendation,
            suggestions=suggestion_set.suggestions,
            suggestion_source=suggestion_set.source,
        )
        logger.info(
            "Attempt %s scored %s (%s%%), tally=%s, suggestions from %s",
            attempt.id, recommendation.category, recommendation.confidence_score,
            recommendation.tally, suggestion_set.source,
        )

        return SubmitQuizOut(
            attempt_id=attempt.id,
            result_id=result.id,
            recommended_stream=recommendation.category,
            confidence_score=recommendation.confidence_score,
            suggested_courses=suggestion_set.suggestions,
            suggestion_source=suggestion_set.source,
        )

    @router.get("/results", response_model=QuizHistoryOut)
    def results(request: Request, db: Session = Depends(get_db)):
        rows = list_results(db, current_user_id(request))
        out = [_result_out(r) for r in rows]
        return QuizHistoryOut(
            results=out,
            latest=out[-1] if out else None,
            stream_counts=stream_counts(rows),
        )

    return router
