"""Pydantic schemas for the remote exam API's JSON envelopes."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from exam_admin.core.models import OPTION_COUNT, ExamResponse, Question


class ApiEnvelope(BaseModel):
    """Every endpoint answers with ``{"success": bool, "data": ...}``."""

    model_config = ConfigDict(extra="ignore")

    success: bool = False
    data: Any = None
    message: str | None = None


class QuestionPayload(BaseModel):
    """Request body for creating or updating a question."""

    question: str = Field(min_length=1)
    options: list[str] = Field(min_length=OPTION_COUNT, max_length=OPTION_COUNT)
    correct_answer: int = Field(ge=0, lt=OPTION_COUNT)


class QuestionSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    question: str = Field(min_length=1)
    options: list[str] = Field(min_length=OPTION_COUNT, max_length=OPTION_COUNT)
    # The server has answered with both spellings.
    correct_answer: int = Field(
        ge=0,
        lt=OPTION_COUNT,
        validation_alias=AliasChoices("correct_answer", "correctAnswer"),
    )

    def to_domain(self) -> Question:
        return Question(
            id=self.id,
            question=self.question,
            options=tuple(self.options),
            correct_answer=self.correct_answer,
        )


class ExamResponseSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    roll_number: str
    name: str
    department: str
    section: str
    score: int = Field(ge=0)
    total_questions: int = Field(gt=0)
    was_tab_switched: bool = False
    submitted_at: str

    @field_validator("roll_number", "section", mode="before")
    @classmethod
    def _coerce_to_text(cls, value: Any) -> Any:
        # Roll numbers and sections are sometimes stored as numbers.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    def to_domain(self) -> ExamResponse:
        return ExamResponse(
            id=self.id,
            roll_number=self.roll_number,
            name=self.name,
            department=self.department,
            section=self.section,
            score=self.score,
            total_questions=self.total_questions,
            was_tab_switched=self.was_tab_switched,
            submitted_at=self.submitted_at,
        )
