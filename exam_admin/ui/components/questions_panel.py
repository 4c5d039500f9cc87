"""Component for managing the remote question bank."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from exam_admin.constants.ui_constants import (
    ADD_FORM_TITLE,
    ADD_QUESTION_BUTTON,
    DELETE_BUTTON,
    EDIT_BUTTON,
    EDIT_FORM_TITLE,
    LOADING_MESSAGE,
    QUESTIONS_EMPTY_STATE,
    QUESTIONS_TOTAL_TEMPLATE,
    REFRESH_BUTTON,
    REFRESHING_BUTTON,
    SAVE_QUESTION_BUTTON,
    UPDATE_QUESTION_BUTTON,
)
from exam_admin.core.admin_session import AdminSession
from exam_admin.core.models import Question
from exam_admin.core.question_renderer import render_question_card
from exam_admin.core.services.draft_slot import DraftMode
from exam_admin.styling.color_palette import Theme
from exam_admin.styling.styles import QUESTION_CARD_OBJECT_NAME, Styles
from exam_admin.ui.components.question_form import QuestionForm


def cards_state_key(session: AdminSession, theme: Theme) -> tuple:
    """What the card list is built from.

    Loading flags are left out so an open edit form survives a refresh.
    """
    return (session.questions, session.draft_mode, session.editing_id, theme)


class QuestionsPanel(QWidget):
    """UI component listing questions with inline add, edit, and delete."""

    def __init__(
        self,
        session: AdminSession,
        confirm_delete: Callable[[Question, int], bool],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.session = session
        self.confirm_delete = confirm_delete
        self._theme = Theme.LIGHT
        self._font_size: int = 10
        self._snapshot: tuple | None = None
        self._edit_form: QuestionForm | None = None
        self._empty_label: QLabel | None = None
        self._delete_buttons: list[QPushButton] = []

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        action_row = QHBoxLayout()
        self.refresh_button = QPushButton(REFRESH_BUTTON, self)
        self.refresh_button.clicked.connect(self.session.refresh_questions)
        action_row.addWidget(self.refresh_button)
        action_row.addStretch()
        self.add_button = QPushButton(ADD_QUESTION_BUTTON, self)
        self.add_button.clicked.connect(self._handle_add)
        action_row.addWidget(self.add_button)
        layout.addLayout(action_row)

        self.add_form = QuestionForm(self.session, ADD_FORM_TITLE, SAVE_QUESTION_BUTTON, self)
        self.add_form.setVisible(False)
        layout.addWidget(self.add_form)

        self.scroll_area = QScrollArea(self)
        self.scroll_area.setWidgetResizable(True)
        self.cards_container = QWidget(self.scroll_area)
        self.cards_layout = QVBoxLayout()
        self.cards_layout.setAlignment(Qt.AlignTop)
        self.cards_container.setLayout(self.cards_layout)
        self.scroll_area.setWidget(self.cards_container)
        layout.addWidget(self.scroll_area, stretch=1)

        self.total_label = QLabel(QUESTIONS_TOTAL_TEMPLATE.format(count=0), self)
        self.total_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.total_label)

    def refresh_view(self) -> None:
        """Bring widgets in line with the session; called on every session change."""
        session = self.session
        loading = session.questions_loading
        self.refresh_button.setEnabled(not loading)
        self.refresh_button.setText(REFRESHING_BUTTON if loading else REFRESH_BUTTON)

        snapshot = cards_state_key(session, self._theme)
        if snapshot != self._snapshot:
            previous_mode = self._snapshot[1] if self._snapshot else None
            self._snapshot = snapshot
            self._sync_add_form(previous_mode)
            self._rebuild_cards()
        if self._empty_label is not None:
            self._empty_label.setText(LOADING_MESSAGE if loading else QUESTIONS_EMPTY_STATE)

        submitting = session.is_submitting
        self.add_form.set_submitting(submitting)
        if self._edit_form is not None:
            self._edit_form.set_submitting(submitting)
        for button in self._delete_buttons:
            button.setEnabled(not submitting)

    def _sync_add_form(self, previous_mode: DraftMode | None) -> None:
        adding = self.session.draft_mode is DraftMode.ADDING
        if adding and previous_mode is not DraftMode.ADDING:
            self.add_form.load_draft(self.session.draft)
        self.add_form.setVisible(adding)

    def _rebuild_cards(self) -> None:
        while self.cards_layout.count():
            item = self.cards_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        self._edit_form = None
        self._empty_label = None
        self._delete_buttons = []

        questions = self.session.questions
        self.total_label.setText(QUESTIONS_TOTAL_TEMPLATE.format(count=len(questions)))
        if not questions:
            message = LOADING_MESSAGE if self.session.questions_loading else QUESTIONS_EMPTY_STATE
            self._empty_label = QLabel(message, self.cards_container)
            self._empty_label.setAlignment(Qt.AlignCenter)
            self.cards_layout.addWidget(self._empty_label)
            return

        for number, question in enumerate(questions, start=1):
            if question.id == self.session.editing_id:
                self._edit_form = QuestionForm(
                    self.session, EDIT_FORM_TITLE, UPDATE_QUESTION_BUTTON, self.cards_container
                )
                self._edit_form.load_draft(self.session.draft)
                self._edit_form.apply_font_size(self._font_size)
                self.cards_layout.addWidget(self._edit_form)
            else:
                self.cards_layout.addWidget(self._build_card(question, number))

    def _build_card(self, question: Question, number: int) -> QFrame:
        card = QFrame(self.cards_container)
        card.setFrameShape(QFrame.StyledPanel)
        card.setObjectName(QUESTION_CARD_OBJECT_NAME)
        card.setStyleSheet(Styles.get_question_card_style(self._theme))
        card_layout = QHBoxLayout()
        card.setLayout(card_layout)

        body = QLabel(render_question_card(question, number, self._theme), card)
        body.setTextFormat(Qt.RichText)
        body.setWordWrap(True)
        body.setStyleSheet(f"font-size: {self._font_size}pt;")
        card_layout.addWidget(body, stretch=1)

        button_column = QVBoxLayout()
        edit_button = QPushButton(EDIT_BUTTON, card)
        edit_button.clicked.connect(lambda: self.session.start_edit(question))
        button_column.addWidget(edit_button)
        delete_button = QPushButton(DELETE_BUTTON, card)
        delete_button.clicked.connect(lambda: self._handle_delete(question, number))
        button_column.addWidget(delete_button)
        button_column.addStretch()
        card_layout.addLayout(button_column)

        self._delete_buttons.append(delete_button)
        return card

    def _handle_add(self) -> None:
        self.session.start_add()
        # Reload even if the form was already open: start_add resets the draft.
        self.add_form.load_draft(self.session.draft)

    def _handle_delete(self, question: Question, number: int) -> None:
        self.session.delete_question(question.id, confirm=lambda: self.confirm_delete(question, number))

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme
        self.refresh_view()

    def apply_font_size(self, font_size: int) -> None:
        self._font_size = font_size
        style = f"font-size: {font_size}pt;"
        for button in (self.refresh_button, self.add_button):
            button.setStyleSheet(style)
        self.add_form.apply_font_size(font_size)
        self._snapshot = None
        self.refresh_view()
