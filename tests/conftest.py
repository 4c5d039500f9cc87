"""Shared fakes for the exam admin tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
import requests

from exam_admin.core.api_client import ExamApiError
from exam_admin.core.models import ExamResponse, Question


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None, raw: str | None = None) -> None:
        self.status_code = status_code
        self._body = body
        self._raw = raw

    def json(self) -> Any:
        if self._raw is not None:
            raise ValueError("No JSON object could be decoded")
        return self._body


class FakeSession:
    """Stands in for ``requests.Session``; records calls and replays queued replies."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self._replies: list[FakeResponse | Exception] = []
        self.closed = False

    def queue(self, reply: FakeResponse | Exception) -> None:
        self._replies.append(reply)

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        reply = self._replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def close(self) -> None:
        self.closed = True


class FakeApiClient:
    """In-memory exam API. Failures are switched on per operation."""

    def __init__(self, questions: list[Question] | None = None) -> None:
        self.questions: list[Question] = list(questions or [])
        self.responses: list[ExamResponse] = []
        self.calls: list[tuple] = []
        self.failing: set[str] = set()
        self._next_id = max((q.id for q in self.questions), default=0) + 1

    def _check(self, operation: str) -> None:
        if operation in self.failing:
            raise ExamApiError(f"{operation} was not successful")

    def list_questions(self) -> list[Question]:
        self.calls.append(("list_questions",))
        self._check("list_questions")
        return list(self.questions)

    def list_responses(self) -> list[ExamResponse]:
        self.calls.append(("list_responses",))
        self._check("list_responses")
        return list(self.responses)

    def create_question(self, payload: dict) -> None:
        self.calls.append(("create_question", payload))
        self._check("create_question")
        self.questions.append(
            Question(
                id=self._next_id,
                question=payload["question"],
                options=tuple(payload["options"]),
                correct_answer=payload["correct_answer"],
            )
        )
        self._next_id += 1

    def update_question(self, question_id: int, payload: dict) -> None:
        self.calls.append(("update_question", question_id, payload))
        self._check("update_question")
        self.questions = [
            Question(
                id=q.id,
                question=payload["question"],
                options=tuple(payload["options"]),
                correct_answer=payload["correct_answer"],
            )
            if q.id == question_id
            else q
            for q in self.questions
        ]

    def delete_question(self, question_id: int) -> None:
        self.calls.append(("delete_question", question_id))
        self._check("delete_question")
        self.questions = [q for q in self.questions if q.id != question_id]

    def mutation_calls(self) -> list[tuple]:
        return [call for call in self.calls if not call[0].startswith("list_")]


class DeferredDispatcher:
    """Holds work until the test releases it, to simulate requests in flight."""

    def __init__(self) -> None:
        self.pending: list[tuple[Callable[[], Any], Callable]] = []

    def submit(self, work: Callable[[], Any], on_done: Callable) -> None:
        self.pending.append((work, on_done))

    def run_next(self) -> None:
        work, on_done = self.pending.pop(0)
        try:
            result = work()
        except ExamApiError as exc:
            on_done(None, exc)
            return
        on_done(result, None)

    def run_all(self) -> None:
        while self.pending:
            self.run_next()


class NoticeRecorder:
    def __init__(self) -> None:
        self.notices: list[tuple] = []

    def __call__(self, level, title: str, message: str) -> None:
        self.notices.append((level, title, message))

    @property
    def messages(self) -> list[str]:
        return [message for _level, _title, message in self.notices]


@pytest.fixture
def sample_questions() -> list[Question]:
    return [
        Question(id=1, question="2 + 2 = ?", options=("3", "4", "5", "22"), correct_answer=1),
        Question(id=2, question="Capital of France?", options=("Paris", "Rome", "Oslo", "Bern"), correct_answer=0),
        Question(id=3, question="Largest planet?", options=("Mars", "Venus", "Jupiter", "Earth"), correct_answer=2),
    ]


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def fake_client(sample_questions) -> FakeApiClient:
    return FakeApiClient(sample_questions)


@pytest.fixture
def notices() -> NoticeRecorder:
    return NoticeRecorder()


@pytest.fixture
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("Name or service not known")
