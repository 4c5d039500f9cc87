"""Utilities for loading questions from a human-friendly text file.

The bundled fallback set uses this format, and the same parser accepts any
file written the same way (repeat blocks separated by blank lines or '---'):

    Q: Question text. Additional lines until the next marker are treated as
       part of the question.
    A: First option text
    B: Second option text
    C: Third option text
    D: Fourth option text
    CORRECT: A|B|C|D

Example:

    Q: Which data structure works first-in, first-out?
    A: Stack
    B: Queue
    C: Tree
    D: Graph
    CORRECT: B
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from exam_admin.core.models import OPTION_COUNT, Question


class QuestionImportError(Exception):
    """Raised when a question file cannot be parsed."""


FALLBACK_QUESTIONS_PATH = Path(__file__).resolve().parent.parent / "data" / "fallback_questions.txt"

_OPTION_LETTERS = "ABCD"
_MARKER = re.compile(r"^(CORRECT|Q|[A-D])\s*:\s*(.*)$", re.IGNORECASE)


def load_questions_from_file(file_path: Path) -> list[Question]:
    text = file_path.read_text(encoding="utf-8")
    questions = parse_questions(text)
    if not questions:
        raise QuestionImportError(f"{file_path.name} did not contain any questions.")
    return questions


@lru_cache(maxsize=1)
def load_fallback_questions() -> tuple[Question, ...]:
    """Load the bundled fallback set once per process."""
    return tuple(load_questions_from_file(FALLBACK_QUESTIONS_PATH))


def parse_questions(text: str) -> list[Question]:
    """Parse every block in ``text``; ids are assigned from 1 in file order."""
    return [
        _parse_block(lines, question_id=index)
        for index, lines in enumerate(_split_blocks(text), start=1)
    ]


def _split_blocks(text: str) -> list[list[str]]:
    blocks: list[list[str]] = []
    current: list[str] = []
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if line and line != "---":
            current.append(line)
        elif current:
            blocks.append(current)
            current = []
    if current:
        blocks.append(current)
    return blocks


def _parse_block(lines: list[str], question_id: int) -> Question:
    sections: dict[str, list[str]] = {}
    section: str | None = None

    for line in lines:
        match = _MARKER.match(line)
        if match:
            section = match.group(1).upper()
            if section in sections:
                raise QuestionImportError(f"Question {question_id}: '{section}:' appears twice.")
            sections[section] = [match.group(2).strip()]
        elif section is None or section == "CORRECT":
            raise QuestionImportError(
                f"Question {question_id}: text outside of a known section: '{line}'."
            )
        else:
            sections[section].append(line)

    question_text = "\n".join(sections.get("Q", [])).strip()
    if not question_text:
        raise QuestionImportError(f"Question {question_id}: question text missing (Q: ...).")

    if any(letter not in sections for letter in _OPTION_LETTERS):
        raise QuestionImportError(
            f"Question {question_id}: exactly {OPTION_COUNT} options (A-D) are required."
        )
    options = tuple("\n".join(sections[letter]).strip() for letter in _OPTION_LETTERS)
    if not all(options):
        raise QuestionImportError(f"Question {question_id}: option text cannot be empty.")

    correct = "".join(sections.get("CORRECT", [])).strip().upper()
    if not correct:
        raise QuestionImportError(f"Question {question_id}: a CORRECT line is required.")
    if len(correct) != 1 or correct not in _OPTION_LETTERS:
        raise QuestionImportError(f"Question {question_id}: CORRECT must be one of A, B, C, or D.")

    return Question(
        id=question_id,
        question=question_text,
        options=options,
        correct_answer=_OPTION_LETTERS.index(correct),
    )
