"""Form used for both adding a new question and editing an existing one."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QButtonGroup,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from exam_admin.constants.ui_constants import (
    CANCEL_BUTTON,
    CORRECT_RADIO_LABEL,
    PLACEHOLDER_QUESTION,
)
from exam_admin.core.admin_session import AdminSession
from exam_admin.core.models import OPTION_COUNT, DraftForm


class QuestionForm(QGroupBox):
    """Edits the session's draft; every keystroke is written straight through."""

    def __init__(
        self,
        session: AdminSession,
        title: str,
        save_label: str,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(title, parent)
        self.session = session
        self._loading = False

        self._build_ui(save_label)

    def _build_ui(self, save_label: str) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        layout.addWidget(QLabel("Question", self))
        self.question_input = QPlainTextEdit(self)
        self.question_input.setPlaceholderText(PLACEHOLDER_QUESTION)
        self.question_input.setMaximumHeight(100)
        self.question_input.textChanged.connect(self._on_question_changed)
        layout.addWidget(self.question_input)

        # Two columns of options, each with its own "Correct" radio button.
        options_grid = QGridLayout()
        self.option_inputs: list[QLineEdit] = []
        self.correct_group = QButtonGroup(self)
        self.correct_group.setExclusive(True)
        for index in range(OPTION_COUNT):
            cell = QVBoxLayout()
            header = QHBoxLayout()
            header.addWidget(QLabel(f"Option {index + 1}", self))
            radio = QRadioButton(CORRECT_RADIO_LABEL, self)
            self.correct_group.addButton(radio, index)
            header.addWidget(radio)
            header.addStretch()
            cell.addLayout(header)

            option_input = QLineEdit(self)
            option_input.setPlaceholderText(f"Option {index + 1}")
            option_input.textChanged.connect(
                lambda text, i=index: self._on_option_changed(i, text)
            )
            cell.addWidget(option_input)
            self.option_inputs.append(option_input)
            options_grid.addLayout(cell, index // 2, index % 2)
        self.correct_group.idToggled.connect(self._on_correct_toggled)
        layout.addLayout(options_grid)

        button_row = QHBoxLayout()
        self.save_button = QPushButton(save_label, self)
        self.save_button.setDefault(True)
        self.save_button.clicked.connect(self.session.save)
        button_row.addWidget(self.save_button)

        self.cancel_button = QPushButton(CANCEL_BUTTON, self)
        self.cancel_button.clicked.connect(self.session.cancel)
        button_row.addWidget(self.cancel_button)
        button_row.addStretch()
        layout.addLayout(button_row)

    def load_draft(self, draft: DraftForm) -> None:
        """Show ``draft`` in the inputs without echoing the values back."""
        self._loading = True
        try:
            self.question_input.setPlainText(draft.question)
            for field, text in zip(self.option_inputs, draft.options):
                field.setText(text)
            self.correct_group.button(draft.correct_answer).setChecked(True)
        finally:
            self._loading = False

    def set_submitting(self, submitting: bool) -> None:
        self.save_button.setEnabled(not submitting)

    def _on_question_changed(self) -> None:
        if not self._loading:
            self.session.set_question_text(self.question_input.toPlainText())

    def _on_option_changed(self, index: int, text: str) -> None:
        if not self._loading:
            self.session.set_option(index, text)

    def _on_correct_toggled(self, index: int, checked: bool) -> None:
        if checked and not self._loading:
            self.session.select_correct(index)

    def apply_font_size(self, font_size: int) -> None:
        self.setStyleSheet(f"font-size: {font_size}pt;")
