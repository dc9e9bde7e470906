from datetime import datetime

from pydantic import BaseModel, Field, model_validator


class QuestionCreateIn(BaseModel):
    question_text: str = Field(min_length=1)
    options: list[str] = Field(min_length=1)
    mapping: dict[str, str] = Field(default_factory=dict)
    class_level: str = Field(default="10th")

    @model_validator(mode="after")
    def mapping_keys_are_options(self):
        unknown = set(self.mapping) - set(self.options)
        if unknown:
            raise ValueError(f"mapping refers to undeclared options: {sorted(unknown)}")
        if len(set(self.options)) != len(self.options):
            raise ValueError("options must be unique")
        return self


class QuestionOut(BaseModel):
    id: int
    question_text: str
    options: list[str]
    class_level: str


class AttemptStartOut(BaseModel):
    attempt_id: int
    class_level: str
    questions: list[QuestionOut]


class AnswerIn(BaseModel):
    question_id: int
    selected_option: str


class AnswerOut(BaseModel):
    question_id: int
    selected_option: str
    mapped_value: str


class AttemptAnswersOut(BaseModel):
    attempt_id: int
    answered: int
    total: int
    answers: list[AnswerOut]


class SubmitQuizOut(BaseModel):
    attempt_id: int
    result_id: int
    recommended_stream: str
    confidence_score: int = Field(ge=0, le=100)
    suggested_courses: list[str]
    suggestion_source: str


class QuizResultOut(BaseModel):
    id: int
    attempt_id: int
    result_stream: str
    confidence_score: int
    suggested_courses: list[str]
    created_at: datetime


class StreamCountOut(BaseModel):
    stream: str
    count: int


class QuizHistoryOut(BaseModel):
    results: list[QuizResultOut]
    latest: QuizResultOut | None
    stream_counts: list[StreamCountOut]
