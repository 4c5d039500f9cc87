import logging
import threading
import time

import pytest

from conftest import FakeResponse, FakeSession
from exam_admin.core.admin_session import AdminSession
from exam_admin.core.api_client import ApiConfig, ExamApiClient, ExamApiError
from exam_admin.core.models import Question

BASE_URL = "http://exam.test/api"

QUESTION_ROW = {"id": 7, "question": "2 + 2 = ?", "options": ["3", "4", "5", "22"], "correct_answer": 1}

RESPONSE_ROW = {
    "id": 1,
    "roll_number": "21CS001",
    "name": "Asha",
    "department": "CSE",
    "section": "A",
    "score": 8,
    "total_questions": 10,
    "was_tab_switched": False,
    "submitted_at": "2024-03-01T10:00:00Z",
}


@pytest.fixture
def client(fake_session):
    return ExamApiClient(ApiConfig(base_url=BASE_URL + "/"), session=fake_session)


class TestListQuestions:
    def test_parses_questions(self, client, fake_session):
        fake_session.queue(FakeResponse(body={"success": True, "data": [QUESTION_ROW]}))

        questions = client.list_questions()

        assert questions == [Question(id=7, question="2 + 2 = ?", options=("3", "4", "5", "22"), correct_answer=1)]
        call = fake_session.calls[0]
        assert call["method"] == "GET"
        assert call["url"] == f"{BASE_URL}/questions"
        assert call["timeout"] is None

    def test_accepts_camel_case_correct_answer(self, client, fake_session):
        row = {k: v for k, v in QUESTION_ROW.items() if k != "correct_answer"}
        row["correctAnswer"] = 3
        fake_session.queue(FakeResponse(body={"success": True, "data": [row]}))

        assert client.list_questions()[0].correct_answer == 3

    def test_preserves_server_order(self, client, fake_session):
        rows = [dict(QUESTION_ROW, id=i) for i in (5, 2, 9)]
        fake_session.queue(FakeResponse(body={"success": True, "data": rows}))

        assert [q.id for q in client.list_questions()] == [5, 2, 9]

    def test_missing_data_is_empty(self, client, fake_session):
        fake_session.queue(FakeResponse(body={"success": True}))
        assert client.list_questions() == []

    def test_failure_envelope_raises(self, client, fake_session):
        fake_session.queue(FakeResponse(body={"success": False, "message": "db down"}))
        with pytest.raises(ExamApiError, match="db down"):
            client.list_questions()

    def test_transport_error_raises(self, client, fake_session, connection_error):
        fake_session.queue(connection_error)
        with pytest.raises(ExamApiError):
            client.list_questions()

    def test_non_json_body_raises_with_status(self, client, fake_session):
        fake_session.queue(FakeResponse(status_code=502, raw="<html>Bad Gateway</html>"))
        with pytest.raises(ExamApiError) as excinfo:
            client.list_questions()
        assert excinfo.value.status_code == 502

    def test_malformed_question_is_skipped(self, client, fake_session, caplog):
        bad = dict(QUESTION_ROW, id=8, options=["only", "three", "options"])
        fake_session.queue(FakeResponse(body={"success": True, "data": [QUESTION_ROW, bad]}))

        with caplog.at_level(logging.WARNING, logger="exam_admin.api"):
            questions = client.list_questions()

        assert [q.id for q in questions] == [7]
        assert "index 1" in caplog.text

    def test_all_rows_malformed_is_empty(self, client, fake_session):
        fake_session.queue(FakeResponse(body={"success": True, "data": [{"id": 1}, "junk"]}))
        assert client.list_questions() == []

    def test_non_list_data_raises(self, client, fake_session):
        fake_session.queue(FakeResponse(body={"success": True, "data": {"id": 1}}))
        with pytest.raises(ExamApiError):
            client.list_questions()


class TestMutations:
    def test_create_posts_payload(self, client, fake_session):
        fake_session.queue(FakeResponse(status_code=201, body={"success": True}))
        payload = {"question": "Q", "options": ["a", "b", "c", "d"], "correct_answer": 2}

        client.create_question(payload)

        call = fake_session.calls[0]
        assert call["method"] == "POST"
        assert call["url"] == f"{BASE_URL}/questions"
        assert call["json"] == payload

    def test_update_puts_to_question_url(self, client, fake_session):
        fake_session.queue(FakeResponse(body={"success": True}))
        client.update_question(7, {"question": "Q", "options": ["a", "b", "c", "d"], "correct_answer": 0})

        call = fake_session.calls[0]
        assert call["method"] == "PUT"
        assert call["url"] == f"{BASE_URL}/questions/7"

    def test_delete(self, client, fake_session):
        fake_session.queue(FakeResponse(body={"success": True}))
        client.delete_question(7)

        call = fake_session.calls[0]
        assert call["method"] == "DELETE"
        assert call["url"] == f"{BASE_URL}/questions/7"
        assert call["json"] is None

    def test_rejected_update_raises(self, client, fake_session):
        fake_session.queue(FakeResponse(status_code=404, body={"success": False}))
        with pytest.raises(ExamApiError) as excinfo:
            client.update_question(99, {"question": "Q", "options": ["a", "b", "c", "d"], "correct_answer": 0})
        assert excinfo.value.status_code == 404

    def test_invalid_payload_is_not_sent(self, client, fake_session):
        with pytest.raises(ExamApiError):
            client.create_question({"question": "Q", "options": ["a", "b"], "correct_answer": 0})
        assert fake_session.calls == []


class TestListResponses:
    def test_parses_responses(self, client, fake_session):
        fake_session.queue(FakeResponse(body={"success": True, "data": [RESPONSE_ROW]}))

        [response] = client.list_responses()

        assert response.roll_number == "21CS001"
        assert response.score_label == "8/10"
        assert fake_session.calls[0]["url"] == f"{BASE_URL}/responses"

    def test_numeric_roll_number_becomes_text(self, client, fake_session):
        row = dict(RESPONSE_ROW, roll_number=1042, section=3)
        fake_session.queue(FakeResponse(body={"success": True, "data": [row]}))

        [response] = client.list_responses()

        assert response.roll_number == "1042"
        assert response.section == "3"

    def test_malformed_row_does_not_hide_the_others(self, client, fake_session):
        rows = [RESPONSE_ROW, dict(RESPONSE_ROW, id=2, section=None)]
        fake_session.queue(FakeResponse(body={"success": True, "data": rows}))

        assert [r.id for r in client.list_responses()] == [1]

    def test_score_above_total_is_rejected(self, client, fake_session):
        rows = [dict(RESPONSE_ROW, score=15), dict(RESPONSE_ROW, id=2, score=10)]
        fake_session.queue(FakeResponse(body={"success": True, "data": rows}))

        [response] = client.list_responses()

        assert response.id == 2
        assert response.score_label == "10/10"

    def test_session_shows_valid_rows(self, client, fake_session):
        rows = [RESPONSE_ROW, dict(RESPONSE_ROW, id=2, section=None)]
        fake_session.queue(FakeResponse(body={"success": True, "data": []}))
        fake_session.queue(FakeResponse(body={"success": True, "data": rows}))

        admin = AdminSession(client)
        admin.load_all()

        assert len(admin.responses) == 1


def test_timeout_is_passed_through(fake_session):
    client = ExamApiClient(ApiConfig(base_url=BASE_URL, timeout_seconds=4.5), session=fake_session)
    fake_session.queue(FakeResponse(body={"success": True, "data": []}))

    client.list_responses()

    assert fake_session.calls[0]["timeout"] == 4.5


def test_empty_base_url_is_rejected(fake_session):
    with pytest.raises(ValueError):
        ExamApiClient(ApiConfig(base_url=""), session=fake_session)


def test_close_closes_session(client, fake_session):
    client.close()
    assert fake_session.closed


class OverlapTrackingSession(FakeSession):
    """Replies slowly and records how many requests were running at once."""

    def __init__(self) -> None:
        super().__init__()
        self._guard = threading.Lock()
        self._active = 0
        self.max_active = 0

    def request(self, method, url, **kwargs):
        with self._guard:
            self._active += 1
            self.max_active = max(self.max_active, self._active)
        time.sleep(0.05)
        with self._guard:
            self._active -= 1
        return FakeResponse(body={"success": True, "data": []})


def test_concurrent_calls_do_not_share_the_session():
    session = OverlapTrackingSession()
    client = ExamApiClient(ApiConfig(base_url=BASE_URL), session=session)

    workers = [
        threading.Thread(target=client.list_questions),
        threading.Thread(target=client.list_responses),
    ]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()

    assert session.max_active == 1
