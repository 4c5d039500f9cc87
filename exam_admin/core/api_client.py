"""HTTP client for the remote exam API.

ENDPOINTS:
    GET    /questions        -> {success, data: [question, ...]}
    POST   /questions        -> {success}
    PUT    /questions/{id}   -> {success}
    DELETE /questions/{id}   -> {success}
    GET    /responses        -> {success, data: [response, ...]}

Transport failures, unparseable bodies, ``success: false`` envelopes and
outgoing payloads that fail validation are all raised as :class:`ExamApiError`;
callers do not need to distinguish them. Individual list rows that fail
validation are logged and skipped so the remaining rows stay visible.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from threading import Lock
from typing import Any

import requests
from pydantic import ValidationError

from exam_admin.core.models import ExamResponse, Question
from exam_admin.core.schemas import (
    ApiEnvelope,
    ExamResponseSchema,
    QuestionPayload,
    QuestionSchema,
)

logger = logging.getLogger("exam_admin.api")


def _parse_rows(items: list, schema: type[QuestionSchema] | type[ExamResponseSchema], what: str) -> list:
    """Convert each row to its domain model, skipping rows that fail validation."""
    parsed = []
    for position, item in enumerate(items):
        try:
            parsed.append(schema.model_validate(item).to_domain())
        except (ValidationError, ValueError) as exc:
            logger.warning("Skipping malformed %s at index %d: %s", what, position, exc)
    return parsed


class ExamApiError(Exception):
    """Raised when a request to the exam API does not succeed."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True, slots=True)
class ApiConfig:
    """Connection settings injected into every component that talks to the API."""

    base_url: str
    # None leaves timeouts to the transport.
    timeout_seconds: float | None = None


class ExamApiClient:
    """Thin wrapper around ``requests.Session`` for the exam endpoints."""

    def __init__(self, config: ApiConfig, session: requests.Session | None = None) -> None:
        if not config.base_url:
            raise ValueError("base_url is required")
        self._base_url = config.base_url.rstrip("/")
        self._timeout = config.timeout_seconds
        self._session = session or requests.Session()
        self._headers = {"Accept": "application/json"}
        self._lock = Lock()

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        self._session.close()

    # --- Questions ---

    def list_questions(self) -> list[Question]:
        envelope = self._request("GET", "/questions")
        items = self._expect_list(envelope, "questions")
        return _parse_rows(items, QuestionSchema, "question")

    def create_question(self, payload: Mapping[str, Any]) -> None:
        self._request("POST", "/questions", json=self._validate_payload(payload))

    def update_question(self, question_id: int, payload: Mapping[str, Any]) -> None:
        self._request("PUT", f"/questions/{int(question_id)}", json=self._validate_payload(payload))

    def delete_question(self, question_id: int) -> None:
        self._request("DELETE", f"/questions/{int(question_id)}")

    # --- Responses ---

    def list_responses(self) -> list[ExamResponse]:
        envelope = self._request("GET", "/responses")
        items = self._expect_list(envelope, "responses")
        return _parse_rows(items, ExamResponseSchema, "response record")

    # --- Internals ---

    def _request(self, method: str, path: str, json: dict | None = None) -> ApiEnvelope:
        url = f"{self._base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            # requests.Session is not thread-safe; pool workers share this client.
            with self._lock:
                resp = self._session.request(
                    method,
                    url,
                    json=json,
                    headers=self._headers,
                    timeout=self._timeout,
                )
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ExamApiError(f"Could not reach exam server: {exc}") from exc

        try:
            body = resp.json()
        except ValueError as exc:
            logger.warning("%s %s returned HTTP %s without a JSON body", method, url, resp.status_code)
            raise ExamApiError(
                f"Unexpected reply from exam server (HTTP {resp.status_code})",
                status_code=resp.status_code,
            ) from exc

        try:
            envelope = ApiEnvelope.model_validate(body)
        except ValidationError as exc:
            raise ExamApiError("Exam server reply is not a valid envelope", status_code=resp.status_code) from exc

        if not envelope.success:
            logger.warning("%s %s was rejected (HTTP %s): %s", method, url, resp.status_code, envelope.message)
            raise ExamApiError(
                envelope.message or f"{method} {path} was not successful",
                status_code=resp.status_code,
            )
        return envelope

    @staticmethod
    def _expect_list(envelope: ApiEnvelope, what: str) -> list:
        if envelope.data is None:
            return []
        if not isinstance(envelope.data, list):
            raise ExamApiError(f"Expected a list of {what} in response data")
        return envelope.data

    @staticmethod
    def _validate_payload(payload: Mapping[str, Any]) -> dict:
        try:
            return QuestionPayload.model_validate(dict(payload)).model_dump()
        except ValidationError as exc:
            raise ExamApiError(f"Invalid question payload: {exc}") from exc
