"""
Student Roster TUI - Roster State

Student record model and the reconciliation rules that keep the local roster
in step with the outcome of each API call.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict


StudentId = Union[int, str]

EDITABLE_FIELDS = ("name", "age", "grade")


class Student(BaseModel):
    """A student record as exchanged with the student service."""

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    id: Optional[StudentId] = None
    name: str = ""
    age: str = ""
    grade: str = ""

    @classmethod
    def empty(cls) -> "Student":
        return cls()

    def to_payload(self) -> dict[str, Any]:
        """Request body for create/update. The id travels in the URL, never the body."""
        return self.model_dump(exclude={"id"})

    def with_field(self, field: str, value: str) -> "Student":
        if field not in EDITABLE_FIELDS:
            raise KeyError(field)
        return self.model_copy(update={field: value})


Roster = tuple[Student, ...]


# === Reconciliation ===
#
# Each function takes the roster as it is now plus an ApiResult and returns the
# new roster. A failed result always returns the prior roster unchanged.

def apply_list(roster: Roster, result) -> Roster:
    if not result.success:
        return roster
    return tuple(result.data)


def apply_create(roster: Roster, result) -> Roster:
    if not result.success:
        return roster
    return roster + (result.data,)


def apply_update(roster: Roster, student_id: StudentId, result) -> Roster:
    """Replace the record addressed by the update with the server's version."""
    if not result.success:
        return roster
    updated: Student = result.data
    for index, student in enumerate(roster):
        if student.id == student_id:
            return roster[:index] + (updated,) + roster[index + 1:]
    return roster


def apply_delete(roster: Roster, student_id: StudentId, result) -> Roster:
    if not result.success:
        return roster
    return tuple(s for s in roster if s.id != student_id)


class RosterState:
    """
    Holds the current roster for the running session.

    Mutations go through the apply_* functions so the failure branch is the
    same everywhere: nothing changes.
    """

    def __init__(self, students: Optional[Roster] = None):
        self._students: Roster = tuple(students or ())

    @property
    def students(self) -> Roster:
        return self._students

    def __len__(self) -> int:
        return len(self._students)

    def on_list(self, result) -> Roster:
        self._students = apply_list(self._students, result)
        return self._students

    def on_create(self, result) -> Roster:
        self._students = apply_create(self._students, result)
        return self._students

    def on_update(self, student_id: StudentId, result) -> Roster:
        self._students = apply_update(self._students, student_id, result)
        return self._students

    def on_delete(self, student_id: StudentId, result) -> Roster:
        self._students = apply_delete(self._students, student_id, result)
        return self._students
