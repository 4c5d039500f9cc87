"""Static metadata describing the exam admin console."""

APP_NAME = "Exam Admin"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Exam Admin is a desktop console for an online exam server built with Qt. "
    "Use it to manage the multiple-choice question bank and review submitted exam responses."
)

HELP_TEXT = (
    "Exam Responses lists every submitted exam. Scores of 70% or more are shown in green, "
    "40% to 69% in yellow, and below 40% in red. Use Refresh to pull new submissions.\n\n"
    "Question Management lets you add, edit, and delete questions. Every question needs "
    "its text and all four options; pick the correct option with the radio buttons.\n\n"
    "Exam Preview shows the question set an exam session would receive. When the server "
    "is unreachable or has no questions, the bundled fallback set is shown instead."
)
