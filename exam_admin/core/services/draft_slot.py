"""Single slot holding the one add or edit flow that may be open."""

from __future__ import annotations

from enum import Enum, auto

from exam_admin.core.models import DraftForm, Question


class DraftMode(Enum):
    ADDING = auto()
    EDITING = auto()


class DraftSlot:
    """At most one of Adding or Editing(id) is active at any time.

    Opening a flow replaces whatever was open before; the previous draft is
    discarded without prompting.
    """

    def __init__(self) -> None:
        self._mode: DraftMode | None = None
        self._editing_id: int | None = None
        self._form = DraftForm()

    @property
    def mode(self) -> DraftMode | None:
        return self._mode

    @property
    def editing_id(self) -> int | None:
        return self._editing_id

    @property
    def form(self) -> DraftForm:
        return self._form

    def is_open(self) -> bool:
        return self._mode is not None

    def open_add(self) -> None:
        self._mode = DraftMode.ADDING
        self._editing_id = None
        self._form.reset()

    def open_edit(self, question: Question) -> None:
        self._mode = DraftMode.EDITING
        self._editing_id = question.id
        self._form = DraftForm.from_question(question)

    def close(self) -> None:
        self._mode = None
        self._editing_id = None
        self._form.reset()
