"""How remote calls are scheduled and how their results come back."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from exam_admin.core.api_client import ExamApiError

DoneCallback = Callable[[Any, ExamApiError | None], None]


class TaskDispatcher(Protocol):
    """Runs ``work`` and later calls ``on_done(result, error)`` on the caller's thread."""

    def submit(self, work: Callable[[], Any], on_done: DoneCallback) -> None: ...


class ImmediateDispatcher:
    """Runs work inline. Used by tests and scripts without an event loop."""

    def submit(self, work: Callable[[], Any], on_done: DoneCallback) -> None:
        try:
            result = work()
        except ExamApiError as exc:
            on_done(None, exc)
            return
        on_done(result, None)
