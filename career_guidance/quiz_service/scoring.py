import math
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Union


class IncompleteSubmission(ValueError):
    """Raised when a recommendation is requested before every question is answered."""

    def __init__(self, answered: int, total: int):
        self.answered = answered
        self.total = total
        super().__init__(f"Incomplete quiz: {answered} of {total} questions answered")


class InvalidOptionSelection(ValueError):
    """Raised when the selected option is not one the question offers."""

    def __init__(self, question_id: int, option: str):
        self.question_id = question_id
        self.option = option
        super().__init__(f"Option {option!r} is not offered by question {question_id}")


# ----------------------------
# Records
# ----------------------------

@dataclass(frozen=True)
class Question:
    id: int
    text: str
    options: tuple[str, ...]
    mapping: Mapping[str, str] = field(default_factory=dict)
    class_level: str = ""


@dataclass(frozen=True)
class Answer:
    question_id: int
    selected_option: str
    category: str


@dataclass(frozen=True)
class Recommendation:
    category: str
    confidence_score: int   # 0-100
    tally: dict[str, int]   # kept for debugging, not shown to students


AnswerSet = dict[int, Answer]


# ----------------------------
# Engine
# ----------------------------

def category_for(question: Question, selected_option: str) -> str:
    return question.mapping.get(selected_option) or selected_option.lower()


def record_answer(answers: Mapping[int, Answer], question: Question, selected_option: str) -> AnswerSet:
    """
    Returns a new answer set with `selected_option` recorded for `question`.

    A previous answer to the same question is dropped first, so the new one
    lands at the end of the iteration order (same as answering it last).
    """
    if selected_option not in question.options:
        raise InvalidOptionSelection(question.id, selected_option)

    updated: AnswerSet = {qid: a for qid, a in answers.items() if qid != question.id}
    updated[question.id] = Answer(
        question_id=question.id,
        selected_option=selected_option,
        category=category_for(question, selected_option),
    )
    return updated


def build_tally(answers: Iterable[Answer]) -> dict[str, int]:
    # dict keeps first-occurrence order of categories
    tally: dict[str, int] = {}
    for a in answers:
        tally[a.category] = tally.get(a.category, 0) + 1
    return tally


def confidence_percent(top: int, total: int) -> int:
    # half rounds up, e.g. 2/3 -> 67, 1/8 -> 13
    return int(math.floor(100 * top / total + 0.5))


def compute_recommendation(
    answers: Union[Mapping[int, Answer], Iterable[Answer]],
    questions: Iterable[Question],
) -> Recommendation:
    answer_list = list(answers.values()) if isinstance(answers, Mapping) else list(answers)
    question_list = list(questions)

    if not question_list or len(answer_list) != len(question_list):
        raise IncompleteSubmission(len(answer_list), len(question_list))

    tally = build_tally(answer_list)

    # ties go to the category that appeared first among the answers
    first_seen = {cat: i for i, cat in enumerate(tally)}
    ranked = sorted(tally.items(), key=lambda kv: (-kv[1], first_seen[kv[0]]))
    category, top = ranked[0]

    return Recommendation(
        category=category,
        confidence_score=confidence_percent(top, len(answer_list)),
        tally=tally,
    )
