from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from career_guidance.shared.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class QuizQuestion(Base):
    __tablename__ = "quiz_questions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    question_text: Mapped[str] = mapped_column(Text)
    options: Mapped[list] = mapped_column(JSON, default=list)     # ordered option labels
    mapping: Mapped[dict] = mapped_column(JSON, default=dict)     # option label -> stream code
    class_level: Mapped[str] = mapped_column(String(20), default="10th", index=True)


class QuizAttempt(Base):
    __tablename__ = "quiz_attempts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[str] = mapped_column(String(64), index=True)
    class_level: Mapped[str] = mapped_column(String(20))
    submitted: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)


class AttemptAnswer(Base):
    __tablename__ = "attempt_answers"
    __table_args__ = (UniqueConstraint("attempt_id", "question_id", name="uq_attempt_answer_question"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    attempt_id: Mapped[int] = mapped_column(Integer, ForeignKey("quiz_attempts.id"), index=True)
    question_id: Mapped[int] = mapped_column(Integer, ForeignKey("quiz_questions.id"))
    selected_option: Mapped[str] = mapped_column(Text)
    mapped_value: Mapped[str] = mapped_column(String(50))


class QuizResult(Base):
    __tablename__ = "quiz_results"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[str] = mapped_column(String(64), index=True)
    attempt_id: Mapped[int] = mapped_column(Integer, ForeignKey("quiz_attempts.id"), index=True)
    result_stream: Mapped[str] = mapped_column(String(50))
    confidence_score: Mapped[int] = mapped_column(Integer, default=0)  # 0-100
    suggested_courses: Mapped[list] = mapped_column(JSON, default=list)
    suggestion_source: Mapped[str] = mapped_column(String(20), default="generator")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
