"""
Student Roster TUI - Roster Controller

Owns the roster, the edit session and the API client. The UI calls into this
object for every user intent and re-renders from `roster.students`.
"""

import logging
from typing import Optional

from services.roster import RosterState, Student, StudentId
from services.session import EditSession, SessionMode
from services.student_api import ApiResult, StudentApi

logger = logging.getLogger(__name__)


class RosterController:
    def __init__(self, api: StudentApi, roster: Optional[RosterState] = None,
                 session: Optional[EditSession] = None):
        self.api = api
        self.roster = roster or RosterState()
        self.session = session or EditSession()

    async def load(self) -> ApiResult:
        """Replace the roster with the server's current list."""
        result = await self.api.list_students()
        self.roster.on_list(result)
        if result.success:
            logger.info("Loaded %d students", len(self.roster))
        return result

    # === Edit session ===

    def open_add(self) -> None:
        self.session.open_create()

    def open_edit(self, student: Student) -> None:
        self.session.open_edit(student)

    def edit_field(self, field: str, value: str) -> None:
        self.session.set_field(field, value)

    def cancel(self) -> None:
        self.session.close()

    async def save(self) -> ApiResult:
        """
        Create or update depending on the session mode, then close the session.

        The session closes whether or not the call succeeded. Mode, target and
        draft are read before the request goes out, and only the session that
        started this save is closed: a form opened while the call was in flight
        stays open.
        """
        mode = self.session.mode
        draft = self.session.draft
        target = self.session.target
        generation = self.session.generation
        if mode is SessionMode.CLOSED:
            raise RuntimeError("No edit session is open")

        try:
            if mode is SessionMode.EDITING:
                target_id = target.id
                logger.info("Updating student %s", target_id)
                result = await self.api.update_student(target_id, draft)
                self.roster.on_update(target_id, result)
            else:
                logger.info("Creating student %r", draft.name)
                result = await self.api.create_student(draft)
                self.roster.on_create(result)
        finally:
            self.session.close_if_current(generation)
        return result

    # === Delete ===

    async def delete(self, student_id: StudentId) -> ApiResult:
        logger.info("Deleting student %s", student_id)
        result = await self.api.delete_student(student_id)
        self.roster.on_delete(student_id, result)
        return result
