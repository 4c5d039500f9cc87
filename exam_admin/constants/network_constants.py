"""Network configuration constants for the exam admin console."""

DEFAULT_API_BASE_URL: str = "https://exam-server-aynr.onrender.com/api"
# None delegates request timeouts to the transport.
DEFAULT_REQUEST_TIMEOUT_SECONDS: float | None = None
WORKER_THREAD_COUNT: int = 2
