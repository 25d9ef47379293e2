"""
Student Roster TUI - Student API Service

HTTP adapter for the remote student service.

Every call returns an ApiResult instead of raising: failures are logged here
and handed back as data so callers can leave local state untouched.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import requests
from pydantic import ValidationError

from services.errors import NetworkError
from services.roster import Student, StudentId

logger = logging.getLogger(__name__)


@dataclass
class ApiResult:
    """Outcome of a single call to the student service."""
    operation: str
    data: Any = None
    error: Optional[NetworkError] = None
    success: bool = field(init=False)

    def __post_init__(self):
        self.success = self.error is None

    @classmethod
    def ok(cls, operation: str, data: Any = None) -> "ApiResult":
        return cls(operation=operation, data=data)

    @classmethod
    def failed(cls, error: NetworkError) -> "ApiResult":
        return cls(operation=error.operation, error=error)


class StudentApi:
    """
    Client for the /students resource.

    No timeout and no retry: a hung request suspends only the task awaiting it.
    """

    COLLECTION_PATH = "/students"

    def __init__(self, base_url: str, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self._session = session or requests.Session()

    def _collection_url(self) -> str:
        return f"{self.base_url}{self.COLLECTION_PATH}"

    def _item_url(self, student_id: StudentId) -> str:
        return f"{self._collection_url()}/{student_id}"

    def _request(self, operation: str, method: str, url: str, payload: Optional[dict] = None) -> requests.Response:
        """Perform one blocking request, mapping transport and status failures to NetworkError."""
        try:
            response = self._session.request(method, url, json=payload)
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise NetworkError(operation, str(e), status_code=status) from e
        except requests.RequestException as e:
            raise NetworkError(operation, str(e)) from e
        logger.debug("%s %s -> %s", method, url, response.status_code)
        return response

    def _decode(self, operation: str, response: requests.Response, parse: Callable[[Any], Any]) -> Any:
        try:
            return parse(response.json())
        except (ValueError, TypeError, ValidationError) as e:
            raise NetworkError(operation, f"unexpected response body: {e}", status_code=response.status_code) from e

    async def _call(self, operation: str, fn: Callable[[], Any]) -> ApiResult:
        """Run a blocking exchange off the event loop and wrap its outcome."""
        try:
            data = await asyncio.to_thread(fn)
        except NetworkError as e:
            logger.error("Error during %s: %s", operation, e, exc_info=e)
            return ApiResult.failed(e)
        return ApiResult.ok(operation, data)

    # === CRUD ===

    async def list_students(self) -> ApiResult:
        """GET /students -> list of Student."""
        def run() -> list[Student]:
            response = self._request("list", "GET", self._collection_url())
            return self._decode("list", response, lambda body: [Student.model_validate(item) for item in body])

        return await self._call("list", run)

    async def create_student(self, draft: Student) -> ApiResult:
        """POST /students -> the created Student with its server-assigned id."""
        def run() -> Student:
            response = self._request("create", "POST", self._collection_url(), draft.to_payload())
            return self._decode("create", response, Student.model_validate)

        return await self._call("create", run)

    async def update_student(self, student_id: StudentId, draft: Student) -> ApiResult:
        """PUT /students/{id} -> the Student as confirmed by the server."""
        def run() -> Student:
            response = self._request("update", "PUT", self._item_url(student_id), draft.to_payload())
            return self._decode("update", response, Student.model_validate)

        return await self._call("update", run)

    async def delete_student(self, student_id: StudentId) -> ApiResult:
        """DELETE /students/{id}. Success carries no payload."""
        def run() -> None:
            self._request("delete", "DELETE", self._item_url(student_id))

        return await self._call("delete", run)

    def close(self) -> None:
        self._session.close()
