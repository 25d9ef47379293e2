"""
Student Roster TUI - Edit Session

Transient state behind the add/edit form.
"""

from enum import Enum
from typing import Optional

from services.roster import Student


class SessionMode(Enum):
    CLOSED = "closed"
    CREATING = "creating"
    EDITING = "editing"


class EditSession:
    """
    Tracks whether the form is open, for which record, and the draft values.

    CLOSED -> CREATING      open_create()
    CLOSED -> EDITING(rec)  open_edit(rec)
    CREATING/EDITING -> CLOSED  close()
    """

    def __init__(self):
        self._target: Optional[Student] = None
        self._draft = Student.empty()
        self._mode = SessionMode.CLOSED
        self._generation = 0

    @property
    def mode(self) -> SessionMode:
        return self._mode

    @property
    def target(self) -> Optional[Student]:
        """The record being edited, or None when creating or closed."""
        return self._target

    @property
    def draft(self) -> Student:
        return self._draft

    @property
    def generation(self) -> int:
        """Bumped every time a form is opened; identifies one open session."""
        return self._generation

    @property
    def is_open(self) -> bool:
        return self._mode is not SessionMode.CLOSED

    def open_create(self) -> None:
        self._generation += 1
        self._target = None
        self._draft = Student.empty()
        self._mode = SessionMode.CREATING

    def open_edit(self, student: Student) -> None:
        self._generation += 1
        self._target = student
        self._draft = student
        self._mode = SessionMode.EDITING

    def set_field(self, field: str, value: str) -> None:
        """Replace one draft field. No validation: any text is accepted."""
        if not self.is_open:
            raise RuntimeError("No edit session is open")
        self._draft = self._draft.with_field(field, value)

    def close(self) -> None:
        self._target = None
        self._draft = Student.empty()
        self._mode = SessionMode.CLOSED

    def close_if_current(self, generation: int) -> bool:
        """Close only if no other session was opened since `generation`."""
        if generation != self._generation:
            return False
        self.close()
        return True
