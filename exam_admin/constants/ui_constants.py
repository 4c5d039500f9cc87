"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Exam Admin Portal"
PLACEHOLDER_QUESTION: str = "Enter your question..."
NOTICE_TIMEOUT_MS: int = 5000
DEFAULT_UI_FONT_SIZE: int = 10

TAB_RESPONSES: str = "Exam Responses"
TAB_QUESTIONS: str = "Question Management"
TAB_PREVIEW: str = "Exam Preview"

REFRESH_BUTTON: str = "Refresh"
REFRESHING_BUTTON: str = "Refreshing..."
ADD_QUESTION_BUTTON: str = "Add Question"
ADD_FORM_TITLE: str = "Add New Question"
EDIT_FORM_TITLE: str = "Edit Question"
SAVE_QUESTION_BUTTON: str = "Save Question"
UPDATE_QUESTION_BUTTON: str = "Update"
CANCEL_BUTTON: str = "Cancel"
EDIT_BUTTON: str = "Edit"
DELETE_BUTTON: str = "Delete"
CORRECT_RADIO_LABEL: str = "Correct"
PREVIEW_LOAD_BUTTON: str = "Load Exam Questions"

RESPONSES_HEADER_TEMPLATE: str = "Exam Responses ({count})"
RESPONSES_COLUMNS: tuple[str, ...] = (
    "Roll Number",
    "Name",
    "Department",
    "Section",
    "Score",
    "Tab Switched",
    "Submitted At",
)
RESPONSES_EMPTY_STATE: str = (
    "No exam responses yet. Responses will appear here when students submit their exams."
)
QUESTIONS_EMPTY_STATE: str = "No questions found. Add your first question!"
QUESTIONS_TOTAL_TEMPLATE: str = "Total Questions: {count}"
LOADING_MESSAGE: str = "Loading..."
PREVIEW_REMOTE_TEMPLATE: str = "{count} question(s) served by the exam server."
PREVIEW_FALLBACK_TEMPLATE: str = (
    "Exam server unavailable or empty: showing {count} bundled fallback question(s)."
)
PREVIEW_IDLE_MESSAGE: str = "Load the question set an exam session would receive."
