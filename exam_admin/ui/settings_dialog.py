"""Settings dialog for session-only console preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QGroupBox,
    QLabel,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from exam_admin.styling.color_palette import Theme

FONT_SIZE_RANGE = (8, 24)
_THEME_LABELS = {Theme.LIGHT: "Light", Theme.DARK: "Dark"}


class SettingsDialog(QDialog):
    """Font size and theme. The server address is shown but not editable."""

    def __init__(
        self,
        parent: QWidget | None = None,
        ui_font_size: int = 10,
        theme: Theme = Theme.LIGHT,
        api_base_url: str = "",
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(420)

        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addWidget(self._build_appearance_group(ui_font_size, theme))
        layout.addWidget(self._build_server_group(api_base_url))

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel, self)
        buttons.button(QDialogButtonBox.Ok).setText("Apply")
        buttons.accepted.connect(self.accept)  # type: ignore[arg-type]
        buttons.rejected.connect(self.reject)  # type: ignore[arg-type]
        layout.addWidget(buttons)

    def _build_appearance_group(self, ui_font_size: int, theme: Theme) -> QGroupBox:
        group = QGroupBox("Appearance", self)
        form = QFormLayout()
        group.setLayout(form)

        self.ui_font_spinbox = QSpinBox(group)
        self.ui_font_spinbox.setRange(*FONT_SIZE_RANGE)
        self.ui_font_spinbox.setValue(ui_font_size)
        self.ui_font_spinbox.setSuffix(" pt")
        self.ui_font_spinbox.setToolTip("Font size for buttons, tables, and question cards")
        form.addRow("UI font size:", self.ui_font_spinbox)

        self.theme_combo = QComboBox(group)
        for option, label in _THEME_LABELS.items():
            self.theme_combo.addItem(label, option)
        self.theme_combo.setCurrentIndex(self.theme_combo.findData(theme))
        form.addRow("Theme:", self.theme_combo)
        return group

    def _build_server_group(self, api_base_url: str) -> QGroupBox:
        group = QGroupBox("Exam Server", self)
        form = QFormLayout()
        group.setLayout(form)
        url_label = QLabel(api_base_url or "(not configured)", group)
        url_label.setWordWrap(True)
        form.addRow("Base URL:", url_label)
        form.addRow(QLabel("Fixed at startup; restart to change.", group))
        return group

    def get_ui_font_size(self) -> int:
        return self.ui_font_spinbox.value()

    def get_theme(self) -> Theme:
        return self.theme_combo.currentData()
