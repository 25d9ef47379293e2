"""
Student Roster TUI - Student Table Widget

Displays the roster, or an empty-state message when there are no students.
"""

from typing import Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import DataTable, Label

from services.roster import Roster, Student


class StudentTable(Widget):
    """
    Table widget displaying the roster.

    Columns:
    - name
    - age
    - grade
    """

    DEFAULT_CSS = """
    StudentTable {
        height: 1fr;
        width: 1fr;
    }

    StudentTable DataTable {
        height: 1fr;
        width: 1fr;
    }

    StudentTable #empty-state {
        width: 1fr;
        text-align: center;
        text-style: bold;
        margin-top: 1;
        color: #cdd6f4;
        display: none;
    }

    StudentTable.empty #empty-state {
        display: block;
    }

    StudentTable.empty DataTable {
        display: none;
    }
    """

    EMPTY_TEXT = "No students"

    students: reactive[Roster] = reactive(())

    class EditRequested(Message):
        """Message sent when a row is activated (enter / double click)."""
        def __init__(self, student: Student) -> None:
            self.student = student
            super().__init__()

    def __init__(self, students: Optional[Roster] = None, **kwargs):
        super().__init__(**kwargs)
        self.set_reactive(StudentTable.students, tuple(students or ()))

    def compose(self) -> ComposeResult:
        yield Label(self.EMPTY_TEXT, id="empty-state")
        yield DataTable(
            id="student-data-table",
            zebra_stripes=True,
            cursor_type="row",
            show_cursor=True,
        )

    def on_mount(self) -> None:
        table = self.query_one(DataTable)
        table.add_columns("Name", "Age", "Grade")
        self._populate_table()

    def watch_students(self, students: Roster) -> None:
        self._populate_table()

    def _populate_table(self) -> None:
        try:
            table = self.query_one(DataTable)
        except Exception:
            return

        self.set_class(not self.students, "empty")
        table.clear()
        for student in self.students:
            table.add_row(
                Text(student.name, style="bold"),
                f"{student.age} years",
                student.grade,
            )

    def is_showing_empty_state(self) -> bool:
        return self.has_class("empty")

    def get_selected_student(self) -> Optional[Student]:
        try:
            table = self.query_one(DataTable)
        except Exception:
            return None
        row = table.cursor_row
        if row is not None and 0 <= row < len(self.students):
            return self.students[row]
        return None

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        if event.cursor_row is not None and event.cursor_row < len(self.students):
            self.post_message(self.EditRequested(self.students[event.cursor_row]))

    def refresh_data(self, students: Roster) -> None:
        self.students = tuple(students)
