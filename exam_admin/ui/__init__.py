"""Qt UI components for the exam admin console."""

from .admin_main_window import AdminMainWindow
from .dialog_helpers import confirm_delete_question, show_info
from .task_runner import QtTaskDispatcher

__all__ = [
    "AdminMainWindow",
    "QtTaskDispatcher",
    "confirm_delete_question",
    "show_info",
]
