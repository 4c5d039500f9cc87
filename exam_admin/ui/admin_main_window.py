"""Qt main window hosting the responses, question management, and preview tabs."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from exam_admin.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from exam_admin.constants.ui_constants import (
    DEFAULT_UI_FONT_SIZE,
    NOTICE_TIMEOUT_MS,
    TAB_PREVIEW,
    TAB_QUESTIONS,
    TAB_RESPONSES,
    WINDOW_TITLE,
)
from exam_admin.core.admin_session import AdminSession, NoticeLevel
from exam_admin.core.api_client import ExamApiClient
from exam_admin.core.dispatch import TaskDispatcher
from exam_admin.styling.color_palette import ColorPalette, Theme
from exam_admin.styling.styles import Styles
from exam_admin.ui.components.exam_preview_panel import ExamPreviewPanel
from exam_admin.ui.components.questions_panel import QuestionsPanel
from exam_admin.ui.components.responses_panel import ResponsesPanel
from exam_admin.ui.dialog_helpers import confirm_delete_question, show_info
from exam_admin.ui.settings_dialog import SettingsDialog


class AdminMainWindow(QMainWindow):
    """Main Qt window wiring the admin session to its panels."""

    def __init__(
        self,
        session: AdminSession,
        client: ExamApiClient,
        dispatcher: TaskDispatcher,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(1100, 760)

        self.session = session
        self.client = client
        self.dispatcher = dispatcher

        self._ui_font_size: int = DEFAULT_UI_FONT_SIZE
        self._theme = Theme.LIGHT

        self._build_ui()
        self._apply_styles()

        self.session.set_notifier(self.show_notice)
        self.session.add_listener(self._on_session_changed)
        self._on_session_changed()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_top_buttons(root_layout)

        self.tabs = QTabWidget(self)
        self.responses_panel = ResponsesPanel(self.session, self)
        self.questions_panel = QuestionsPanel(
            self.session,
            confirm_delete=lambda question, number: confirm_delete_question(
                self, question, number, font_point_size=self._ui_font_size
            ),
            parent=self,
        )
        self.preview_panel = ExamPreviewPanel(self.client, self.dispatcher, self)
        self.tabs.addTab(self.responses_panel, TAB_RESPONSES)
        self.tabs.addTab(self.questions_panel, TAB_QUESTIONS)
        self.tabs.addTab(self.preview_panel, TAB_PREVIEW)
        root_layout.addWidget(self.tabs)

    def _build_top_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()
        title = QLabel("Admin Portal", self)
        title.setStyleSheet(Styles.get_large_label_style())
        button_row.addWidget(title)
        button_row.addStretch()

        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.settings_button = QPushButton("Settings", self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        layout.addLayout(button_row)

    def _on_session_changed(self) -> None:
        self.responses_panel.refresh_view()
        self.questions_panel.refresh_view()

    def show_notice(self, level: NoticeLevel, title: str, message: str) -> None:
        """Non-blocking notice in the status bar."""
        color = ColorPalette.ERROR if level is NoticeLevel.ERROR else ColorPalette.SUCCESS
        status_bar = self.statusBar()
        status_bar.setStyleSheet(Styles.get_notice_style(color.get(self._theme)))
        status_bar.showMessage(f"{title}: {message}", NOTICE_TIMEOUT_MS)

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}\n\n"
            f"Exam server: {self.client.base_url}"
        )
        show_info(self, f"About {APP_NAME}", details, font_point_size=self._ui_font_size)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT, font_point_size=self._ui_font_size)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._ui_font_size,
            self._theme,
            self.client.base_url,
        )
        if dialog.exec():
            self._ui_font_size = dialog.get_ui_font_size()
            self._theme = dialog.get_theme()
            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme))

        ui_style = f"font-size: {self._ui_font_size}pt;"
        for button in (self.about_button, self.help_button, self.settings_button):
            button.setStyleSheet(ui_style)
        self.tabs.setStyleSheet(ui_style)

        for panel in (self.responses_panel, self.questions_panel, self.preview_panel):
            panel.set_theme(self._theme)
            panel.apply_font_size(self._ui_font_size)
