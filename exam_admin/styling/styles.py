"""Qt stylesheets for the admin console, built from the theme palette."""

from .color_palette import ColorPalette, Theme

QUESTION_CARD_OBJECT_NAME = "questionCard"


def _resolve(theme: Theme) -> dict[str, str]:
    return {
        "text": ColorPalette.TEXT_PRIMARY.get(theme),
        "muted": ColorPalette.TEXT_SECONDARY.get(theme),
        "bg": ColorPalette.BACKGROUND_PRIMARY.get(theme),
        "bg_alt": ColorPalette.BACKGROUND_SECONDARY.get(theme),
        "border": ColorPalette.BORDER_PRIMARY.get(theme),
        "accent": ColorPalette.BUTTON_PRIMARY_BG.get(theme),
        "accent_text": ColorPalette.BUTTON_PRIMARY_TEXT.get(theme),
        "button": ColorPalette.BUTTON_SECONDARY_BG.get(theme),
        "hover": ColorPalette.BUTTON_HOVER_BG.get(theme),
    }


_BASE = """
QMainWindow, QDialog, QWidget {{
    background-color: {bg};
    color: {text};
    font-family: 'Segoe UI', 'Roboto', sans-serif;
}}
"""

_BUTTONS = """
QPushButton {{
    background-color: {button};
    border: 1px solid {border};
    border-radius: 4px;
    padding: 6px 12px;
}}
QPushButton:hover {{ background-color: {hover}; }}
QPushButton:default {{
    background-color: {accent};
    color: {accent_text};
    border-color: {accent};
}}
QPushButton:disabled {{ color: {muted}; }}
"""

_INPUTS = """
QLineEdit, QPlainTextEdit, QSpinBox {{
    border: 1px solid {border};
    border-radius: 4px;
    padding: 4px;
}}
"""

_VIEWS = """
QTableWidget, QTextBrowser, QScrollArea {{
    alternate-background-color: {bg_alt};
    border: 1px solid {border};
    border-radius: 4px;
}}
QHeaderView::section {{
    background-color: {bg_alt};
    border: none;
    border-bottom: 1px solid {border};
    padding: 4px;
    font-weight: bold;
}}
QTabBar::tab {{ padding: 6px 14px; }}
QTabBar::tab:selected {{
    background-color: {accent};
    color: {accent_text};
}}
QGroupBox {{
    border: 1px solid {border};
    border-radius: 6px;
    margin-top: 6px;
    padding-top: 10px;
}}
QGroupBox::title {{
    subcontrol-origin: margin;
    left: 10px;
    padding: 0 3px;
}}
"""


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        colors = _resolve(theme)
        return "".join(section.format(**colors) for section in (_BASE, _BUTTONS, _INPUTS, _VIEWS))

    @staticmethod
    def get_question_card_style(theme: Theme = Theme.LIGHT) -> str:
        """Applied to a card frame named ``QUESTION_CARD_OBJECT_NAME``."""
        colors = _resolve(theme)
        return (
            f"QFrame#{QUESTION_CARD_OBJECT_NAME} {{"
            f" background-color: {colors['bg_alt']};"
            f" border: 1px solid {colors['border']}; border-radius: 6px; }}"
        )

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_notice_style(level_color: str) -> str:
        return f"color: {level_color}; font-weight: bold;"
