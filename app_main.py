"""Application entry point for the exam admin console."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from exam_admin.constants.network_constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    WORKER_THREAD_COUNT,
)
from exam_admin.core.admin_session import AdminSession
from exam_admin.core.api_client import ApiConfig, ExamApiClient
from exam_admin.ui.admin_main_window import AdminMainWindow
from exam_admin.ui.task_runner import QtTaskDispatcher
from exam_admin.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, connect to the exam server, and launch the Qt UI."""
    logger = configure_logging()
    config = ApiConfig(
        base_url=DEFAULT_API_BASE_URL,
        timeout_seconds=DEFAULT_REQUEST_TIMEOUT_SECONDS,
    )
    logger.info("Starting exam admin console against %s", config.base_url)

    app = QApplication(sys.argv)
    client = ExamApiClient(config)
    dispatcher = QtTaskDispatcher(max_threads=WORKER_THREAD_COUNT)
    session = AdminSession(client, dispatcher=dispatcher)

    window = AdminMainWindow(session=session, client=client, dispatcher=dispatcher)
    window.show()
    session.load_all()

    exit_code = app.exec()
    dispatcher.wait_for_done(5000)
    client.close()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
