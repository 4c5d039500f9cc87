"""Runs API calls on a thread pool and hands results back to the GUI thread."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal, Slot

from exam_admin.core.api_client import ExamApiError
from exam_admin.core.dispatch import DoneCallback

logger = logging.getLogger("exam_admin.tasks")


class _TaskSignals(QObject):
    """Lives on the GUI thread; ``finished`` is emitted from a pool thread."""

    finished = Signal(object, object)

    def __init__(
        self,
        on_done: DoneCallback,
        on_delivered: Callable[[_TaskSignals], None],
        parent: QObject,
    ) -> None:
        super().__init__(parent)
        self._on_done = on_done
        self._on_delivered = on_delivered
        self.finished.connect(self._deliver)

    @Slot(object, object)
    def _deliver(self, result: object, error: object) -> None:
        self._on_delivered(self)
        self._on_done(result, error)


class _Task(QRunnable):
    def __init__(self, work: Callable[[], Any], signals: _TaskSignals) -> None:
        super().__init__()
        self._work = work
        self._signals = signals

    def run(self) -> None:
        try:
            result = self._work()
        except ExamApiError as exc:
            self._signals.finished.emit(None, exc)
            return
        except Exception as exc:
            # Keep the UI re-enterable: the loading/submitting flag must clear.
            logger.exception("Unexpected error in background task")
            self._signals.finished.emit(None, ExamApiError(f"Unexpected error: {exc}"))
            return
        self._signals.finished.emit(result, None)


class QtTaskDispatcher(QObject):
    """Dispatcher for :class:`AdminSession` backed by ``QThreadPool``.

    ``on_done`` runs on the thread that owns this object (the GUI thread),
    because the signal crosses threads as a queued connection.
    """

    def __init__(self, max_threads: int = 2, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._pool = QThreadPool(self)
        self._pool.setMaxThreadCount(max_threads)
        self._in_flight: set[_TaskSignals] = set()

    def submit(self, work: Callable[[], Any], on_done: DoneCallback) -> None:
        signals = _TaskSignals(on_done, self._release, self)
        self._in_flight.add(signals)
        self._pool.start(_Task(work, signals))

    def _release(self, signals: _TaskSignals) -> None:
        self._in_flight.discard(signals)
        signals.deleteLater()

    def wait_for_done(self, msecs: int = -1) -> bool:
        return self._pool.waitForDone(msecs)
