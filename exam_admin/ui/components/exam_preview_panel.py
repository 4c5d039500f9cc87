"""Component previewing the question set an exam session receives."""

from __future__ import annotations

from collections.abc import Sequence

from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from exam_admin.constants.ui_constants import (
    LOADING_MESSAGE,
    PREVIEW_FALLBACK_TEMPLATE,
    PREVIEW_IDLE_MESSAGE,
    PREVIEW_LOAD_BUTTON,
    PREVIEW_REMOTE_TEMPLATE,
)
from exam_admin.core.api_client import ExamApiClient, ExamApiError
from exam_admin.core.dispatch import TaskDispatcher
from exam_admin.core.models import Question
from exam_admin.core.question_fetcher import fetch_exam_questions
from exam_admin.core.question_importer import load_fallback_questions
from exam_admin.core.question_renderer import render_question_list
from exam_admin.styling.color_palette import ColorPalette, Theme


class ExamPreviewPanel(QWidget):
    """Shows what ``fetch_exam_questions`` would hand to an exam session."""

    def __init__(
        self,
        client: ExamApiClient,
        dispatcher: TaskDispatcher,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.client = client
        self.dispatcher = dispatcher
        self._fallback: Sequence[Question] = load_fallback_questions()
        self._theme = Theme.LIGHT
        self._questions: Sequence[Question] = ()
        self._loading = False

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        action_row = QHBoxLayout()
        self.status_label = QLabel(PREVIEW_IDLE_MESSAGE, self)
        self.status_label.setWordWrap(True)
        action_row.addWidget(self.status_label, stretch=1)
        self.load_button = QPushButton(PREVIEW_LOAD_BUTTON, self)
        self.load_button.clicked.connect(self.load_preview)
        action_row.addWidget(self.load_button)
        layout.addLayout(action_row)

        self.preview_view = QTextBrowser(self)
        self.preview_view.setOpenExternalLinks(False)
        layout.addWidget(self.preview_view, stretch=1)

    def load_preview(self) -> None:
        if self._loading:
            return
        self._loading = True
        self.load_button.setEnabled(False)
        self.status_label.setText(LOADING_MESSAGE)
        self.dispatcher.submit(
            lambda: fetch_exam_questions(self.client, self._fallback),
            self._on_loaded,
        )

    def _on_loaded(self, result: Sequence[Question] | None, error: ExamApiError | None) -> None:
        self._loading = False
        self.load_button.setEnabled(True)
        # fetch_exam_questions never raises; an error here came from the task runner.
        self._questions = self._fallback if error is not None or result is None else result
        self._render()

    def _render(self) -> None:
        count = len(self._questions)
        if self._questions is self._fallback:
            self.status_label.setText(PREVIEW_FALLBACK_TEMPLATE.format(count=count))
            self.status_label.setStyleSheet(f"color: {ColorPalette.WARNING.get(self._theme)};")
        else:
            self.status_label.setText(PREVIEW_REMOTE_TEMPLATE.format(count=count))
            self.status_label.setStyleSheet("")
        self.preview_view.setHtml(render_question_list(self._questions, self._theme))

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme
        if self._questions:
            self._render()

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        self.load_button.setStyleSheet(style)
        self.preview_view.setStyleSheet(style)
