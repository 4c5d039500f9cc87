"""Component showing submitted exam responses."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QColor, QFont
from PySide6.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from exam_admin.constants.ui_constants import (
    REFRESH_BUTTON,
    REFRESHING_BUTTON,
    RESPONSES_COLUMNS,
    RESPONSES_EMPTY_STATE,
    RESPONSES_HEADER_TEMPLATE,
)
from exam_admin.core.admin_session import AdminSession
from exam_admin.core.models import ExamResponse, format_submitted_at
from exam_admin.styling.color_palette import ColorPalette, Theme, tier_color
from exam_admin.styling.styles import Styles

_SCORE_COLUMN = 4
_TAB_SWITCHED_COLUMN = 5


class ResponsesPanel(QWidget):
    """Read-only table of responses with an independent refresh."""

    def __init__(self, session: AdminSession, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.session = session
        self._theme = Theme.LIGHT
        self._snapshot: tuple[ExamResponse, ...] | None = None

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.header_label = QLabel(RESPONSES_HEADER_TEMPLATE.format(count=0), self)
        self.header_label.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(self.header_label)
        header_row.addStretch()
        self.refresh_button = QPushButton(REFRESH_BUTTON, self)
        self.refresh_button.clicked.connect(self.session.refresh_responses)
        header_row.addWidget(self.refresh_button)
        layout.addLayout(header_row)

        self.table = QTableWidget(0, len(RESPONSES_COLUMNS), self)
        self.table.setHorizontalHeaderLabels(list(RESPONSES_COLUMNS))
        self.table.setAlternatingRowColors(True)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        layout.addWidget(self.table, stretch=1)

        self.empty_label = QLabel(RESPONSES_EMPTY_STATE, self)
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setWordWrap(True)
        layout.addWidget(self.empty_label)

    def refresh_view(self) -> None:
        loading = self.session.responses_loading
        self.refresh_button.setEnabled(not loading)
        self.refresh_button.setText(REFRESHING_BUTTON if loading else REFRESH_BUTTON)

        responses = self.session.responses
        if responses == self._snapshot:
            return
        self._snapshot = responses
        self._populate(responses)

    def _populate(self, responses: tuple[ExamResponse, ...]) -> None:
        self.header_label.setText(RESPONSES_HEADER_TEMPLATE.format(count=len(responses)))
        has_rows = bool(responses)
        self.table.setVisible(has_rows)
        self.empty_label.setVisible(not has_rows)

        self.table.setRowCount(len(responses))
        bold = QFont()
        bold.setBold(True)
        for row, response in enumerate(responses):
            values = (
                response.roll_number,
                response.name,
                response.department,
                response.section,
                response.score_label,
                "Yes" if response.was_tab_switched else "No",
                format_submitted_at(response.submitted_at),
            )
            for column, value in enumerate(values):
                self.table.setItem(row, column, QTableWidgetItem(value))

            score_item = self.table.item(row, _SCORE_COLUMN)
            score_item.setForeground(QBrush(QColor(tier_color(response.tier, self._theme))))
            score_item.setFont(bold)

            switched_color = ColorPalette.ERROR if response.was_tab_switched else ColorPalette.SUCCESS
            self.table.item(row, _TAB_SWITCHED_COLUMN).setForeground(
                QBrush(QColor(switched_color.get(self._theme)))
            )

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme
        self._snapshot = None
        self.refresh_view()

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        self.refresh_button.setStyleSheet(style)
        self.table.setStyleSheet(style)
        self.empty_label.setStyleSheet(style)
