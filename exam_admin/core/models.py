"""Domain models for the exam administration console."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

OPTION_COUNT = 4


def _validate_correct_index(index: int) -> int:
    if not 0 <= index < OPTION_COUNT:
        raise ValueError(f"Correct answer index must be between 0 and {OPTION_COUNT - 1}.")
    return index


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with exactly four options."""

    id: int
    question: str
    options: tuple[str, str, str, str]
    correct_answer: int = 0

    def __post_init__(self) -> None:
        if len(self.options) != OPTION_COUNT:
            raise ValueError("Each question must have exactly four options.")
        _validate_correct_index(self.correct_answer)


class ScoreTier(Enum):
    """Coarse classification of a response's score ratio."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


def classify_score(score: int, total: int) -> ScoreTier:
    """Classify ``score`` out of ``total`` as high (>= 70%), medium (>= 40%) or low."""
    if total <= 0:
        raise ValueError("Total questions must be a positive integer.")
    # Integer comparison keeps the 70% / 40% lower bounds exact.
    if score * 10 >= total * 7:
        return ScoreTier.HIGH
    if score * 10 >= total * 4:
        return ScoreTier.MEDIUM
    return ScoreTier.LOW


@dataclass(frozen=True, slots=True)
class ExamResponse:
    """A respondent's submitted exam. Read-only for the admin console."""

    id: int
    roll_number: str
    name: str
    department: str
    section: str
    score: int
    total_questions: int
    was_tab_switched: bool
    submitted_at: str

    def __post_init__(self) -> None:
        if self.total_questions <= 0:
            raise ValueError("Total questions must be a positive integer.")
        if not 0 <= self.score <= self.total_questions:
            raise ValueError(
                f"Score must be between 0 and {self.total_questions}, got {self.score}."
            )

    @property
    def tier(self) -> ScoreTier:
        return classify_score(self.score, self.total_questions)

    @property
    def score_label(self) -> str:
        return f"{self.score}/{self.total_questions}"


def format_submitted_at(value: str) -> str:
    """Render an ISO-8601 timestamp with the local time zone and locale format."""
    raw = value.strip()
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        return value
    return parsed.astimezone().strftime("%c")


def _empty_options() -> list[str]:
    return [""] * OPTION_COUNT


@dataclass(slots=True)
class DraftForm:
    """Editable copy of a question used while adding or editing."""

    question: str = ""
    options: list[str] = field(default_factory=_empty_options)
    correct_answer: int = 0

    @classmethod
    def from_question(cls, question: Question) -> DraftForm:
        return cls(
            question=question.question,
            options=list(question.options),
            correct_answer=question.correct_answer,
        )

    def reset(self) -> None:
        self.question = ""
        self.options = _empty_options()
        self.correct_answer = 0

    def set_option(self, index: int, text: str) -> None:
        if not 0 <= index < OPTION_COUNT:
            raise IndexError(f"Option index {index} out of range")
        self.options[index] = text

    def select_correct(self, index: int) -> None:
        """Mark option ``index`` as the single correct answer."""
        self.correct_answer = _validate_correct_index(index)

    def is_complete(self) -> bool:
        if not self.question.strip():
            return False
        return all(option.strip() for option in self.options)

    def to_payload(self) -> dict:
        return {
            "question": self.question,
            "options": list(self.options),
            "correct_answer": self.correct_answer,
        }
