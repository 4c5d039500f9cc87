"""State shared by the admin UI: remote collections, the open draft, and flags.

Every remote call goes through the injected dispatcher; completions are
applied to whatever the state is when they arrive (last write wins, no
request fencing). Reads that fail are logged and the last-known collection
stays in place. Mutations that fail raise a notice and leave the draft or
list untouched so the admin can retry.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from functools import partial

from exam_admin.core.api_client import ExamApiClient, ExamApiError
from exam_admin.core.dispatch import ImmediateDispatcher, TaskDispatcher
from exam_admin.core.models import DraftForm, ExamResponse, Question
from exam_admin.core.services.collection_store import QuestionStore, ResponseStore
from exam_admin.core.services.draft_slot import DraftMode, DraftSlot

logger = logging.getLogger("exam_admin.session")


class NoticeLevel(Enum):
    SUCCESS = "Success"
    ERROR = "Error"


Notifier = Callable[[NoticeLevel, str, str], None]
Listener = Callable[[], None]
ConfirmCallback = Callable[[], bool]

MSG_FILL_ALL_FIELDS = "Please fill all fields"
MSG_ADDED = "Question added successfully"
MSG_UPDATED = "Question updated successfully"
MSG_DELETED = "Question deleted successfully"
MSG_ADD_FAILED = "Failed to add question"
MSG_UPDATE_FAILED = "Failed to update question"
MSG_DELETE_FAILED = "Failed to delete question"


def _log_notice(level: NoticeLevel, title: str, message: str) -> None:
    log_level = logging.ERROR if level is NoticeLevel.ERROR else logging.INFO
    logger.log(log_level, "%s: %s", title, message)


class AdminSession:
    """Facade over the question store, response store, and draft slot."""

    def __init__(
        self,
        client: ExamApiClient,
        dispatcher: TaskDispatcher | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        self._client = client
        self._dispatcher = dispatcher or ImmediateDispatcher()
        self._notifier: Notifier = notifier or _log_notice
        self._listeners: list[Listener] = []

        self._questions = QuestionStore()
        self._responses = ResponseStore()
        self._draft = DraftSlot()
        self._submitting: bool = False
        self._questions_reload_pending: bool = False

    # --- Wiring ---

    def set_notifier(self, notifier: Notifier) -> None:
        self._notifier = notifier

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _emit_changed(self) -> None:
        for listener in list(self._listeners):
            listener()

    def _notify(self, level: NoticeLevel, message: str) -> None:
        self._notifier(level, level.value, message)

    # --- Read-only state ---

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions.get_items()

    @property
    def responses(self) -> tuple[ExamResponse, ...]:
        return self._responses.get_items()

    @property
    def questions_loading(self) -> bool:
        return self._questions.is_loading()

    @property
    def responses_loading(self) -> bool:
        return self._responses.is_loading()

    @property
    def is_submitting(self) -> bool:
        return self._submitting

    @property
    def draft(self) -> DraftForm:
        return self._draft.form

    @property
    def draft_mode(self) -> DraftMode | None:
        return self._draft.mode

    @property
    def editing_id(self) -> int | None:
        return self._draft.editing_id

    @property
    def is_adding(self) -> bool:
        return self._draft.mode is DraftMode.ADDING

    # --- Fetching ---

    def load_all(self) -> None:
        self.refresh_questions()
        self.refresh_responses()

    def refresh_questions(self) -> bool:
        """Re-fetch the question list. Returns False if a fetch is already running."""
        if not self._questions.begin_loading():
            return False
        self._emit_changed()
        self._dispatcher.submit(self._client.list_questions, self._on_questions_loaded)
        return True

    def _on_questions_loaded(self, result: list[Question] | None, error: ExamApiError | None) -> None:
        self._questions.finish_loading()
        if error is not None:
            logger.error("Error fetching questions: %s", error)
        else:
            self._questions.replace(result or [])
        self._emit_changed()
        if self._questions_reload_pending:
            # A mutation finished while this fetch was in flight.
            self._questions_reload_pending = False
            self.refresh_questions()

    def refresh_responses(self) -> bool:
        """Re-fetch submitted responses. Returns False if a fetch is already running."""
        if not self._responses.begin_loading():
            return False
        self._emit_changed()
        self._dispatcher.submit(self._client.list_responses, self._on_responses_loaded)
        return True

    def _on_responses_loaded(self, result: list[ExamResponse] | None, error: ExamApiError | None) -> None:
        self._responses.finish_loading()
        if error is not None:
            logger.error("Error fetching responses: %s", error)
        else:
            self._responses.replace(result or [])
        self._emit_changed()

    # --- Draft lifecycle ---

    def start_add(self) -> None:
        self._draft.open_add()
        self._emit_changed()

    def start_edit(self, question: Question) -> None:
        self._draft.open_edit(question)
        self._emit_changed()

    def cancel(self) -> None:
        """Discard the open draft without contacting the server."""
        self._draft.close()
        self._emit_changed()

    # Field edits stay local and do not notify listeners.

    def set_question_text(self, text: str) -> None:
        self._draft.form.question = text

    def set_option(self, index: int, text: str) -> None:
        self._draft.form.set_option(index, text)

    def select_correct(self, index: int) -> None:
        self._draft.form.select_correct(index)

    # --- Mutations ---

    def save(self) -> bool:
        """Submit the open draft. Returns True if a request was issued."""
        if not self._draft.is_open() or self._submitting:
            return False

        form = self._draft.form
        if not form.is_complete():
            self._notify(NoticeLevel.ERROR, MSG_FILL_ALL_FIELDS)
            return False

        payload = form.to_payload()
        mode = self._draft.mode
        if mode is DraftMode.ADDING:
            work = partial(self._client.create_question, payload)
        else:
            work = partial(self._client.update_question, self._draft.editing_id, payload)

        self._submitting = True
        self._emit_changed()
        self._dispatcher.submit(work, partial(self._on_saved, mode))
        return True

    def _on_saved(self, mode: DraftMode, _result: object, error: ExamApiError | None) -> None:
        self._submitting = False
        adding = mode is DraftMode.ADDING
        if error is not None:
            logger.error("Saving question failed: %s", error)
            self._notify(NoticeLevel.ERROR, MSG_ADD_FAILED if adding else MSG_UPDATE_FAILED)
            self._emit_changed()
            return

        self._notify(NoticeLevel.SUCCESS, MSG_ADDED if adding else MSG_UPDATED)
        self._draft.close()
        self._emit_changed()
        self._refresh_questions_after_mutation()

    def delete_question(self, question_id: int, confirm: ConfirmCallback) -> bool:
        """Delete a question after ``confirm()`` agrees. Returns True if a request was issued."""
        if self._submitting:
            return False
        if not confirm():
            return False

        self._submitting = True
        self._emit_changed()
        self._dispatcher.submit(
            partial(self._client.delete_question, question_id),
            partial(self._on_deleted, question_id),
        )
        return True

    def _on_deleted(self, question_id: int, _result: object, error: ExamApiError | None) -> None:
        self._submitting = False
        if error is not None:
            logger.error("Deleting question failed: %s", error)
            self._notify(NoticeLevel.ERROR, MSG_DELETE_FAILED)
            self._emit_changed()
            return

        self._notify(NoticeLevel.SUCCESS, MSG_DELETED)
        if self._draft.editing_id == question_id:
            # The edit form has no card left to attach to.
            self._draft.close()
        self._emit_changed()
        self._refresh_questions_after_mutation()

    def _refresh_questions_after_mutation(self) -> None:
        if not self.refresh_questions():
            self._questions_reload_pending = True
