"""Fetch the question set for an exam session, falling back to bundled data."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from exam_admin.core.api_client import ExamApiClient, ExamApiError
from exam_admin.core.models import Question
from exam_admin.core.question_importer import load_fallback_questions

logger = logging.getLogger("exam_admin.fetcher")


def fetch_exam_questions(
    client: ExamApiClient,
    fallback: Sequence[Question] | None = None,
) -> Sequence[Question]:
    """Return the remote question set, or the fallback when it is unusable.

    The remote list is returned as-is when the request succeeds and carries at
    least one question. Any failure, or an empty list, yields the fallback
    collection (``fallback`` itself when given, otherwise the bundled set).
    Nothing is retried or cached.
    """
    try:
        questions = client.list_questions()
    except ExamApiError as exc:
        logger.warning("Error fetching questions from API, using fallback set: %s", exc)
        return _fallback(fallback)

    if not questions:
        logger.info("Exam server has no questions, using fallback set.")
        return _fallback(fallback)
    return questions


def _fallback(fallback: Sequence[Question] | None) -> Sequence[Question]:
    if fallback is not None:
        return fallback
    return load_fallback_questions()
