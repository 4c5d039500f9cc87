"""Modal dialogs used by the admin window."""

from __future__ import annotations

from PySide6.QtGui import QFont
from PySide6.QtWidgets import QMessageBox, QWidget

from exam_admin.core.models import Question

CONFIRM_DELETE_TITLE = "Confirm Delete"
CONFIRM_DELETE_TEXT = "Are you sure you want to delete this question?"
_PREVIEW_CHARS = 120


def _apply_optional_font(widget: QWidget, font_point_size: int | None) -> None:
    if font_point_size is None or font_point_size <= 0:
        return

    font: QFont = widget.font()
    font.setPointSize(font_point_size)
    widget.setFont(font)


def _preview(text: str) -> str:
    flat = " ".join(text.split())
    if len(flat) <= _PREVIEW_CHARS:
        return flat
    return flat[: _PREVIEW_CHARS - 3] + "..."


def confirm_delete_question(
    parent: QWidget,
    question: Question,
    number: int,
    *,
    font_point_size: int | None = None,
) -> bool:
    """Ask before deleting a question.

    Args:
        parent: Parent widget for the dialog
        question: The question about to be deleted
        number: Its 1-based position in the list

    Returns:
        True only for an explicit Yes. Closing the dialog counts as No.
    """
    msg_box = QMessageBox(parent)
    msg_box.setIcon(QMessageBox.Question)
    msg_box.setWindowTitle(CONFIRM_DELETE_TITLE)
    msg_box.setText(CONFIRM_DELETE_TEXT)
    msg_box.setInformativeText(f"Q{number}: {_preview(question.question)}")
    msg_box.setStandardButtons(QMessageBox.Yes | QMessageBox.No)
    msg_box.setDefaultButton(QMessageBox.No)
    msg_box.setEscapeButton(QMessageBox.No)
    _apply_optional_font(msg_box, font_point_size)
    return msg_box.exec() == QMessageBox.Yes


def show_info(
    parent: QWidget,
    title: str,
    message: str,
    *,
    font_point_size: int | None = None,
) -> None:
    msg_box = QMessageBox(parent)
    msg_box.setIcon(QMessageBox.Information)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)
    msg_box.setStandardButtons(QMessageBox.Ok)
    _apply_optional_font(msg_box, font_point_size)
    msg_box.exec()
