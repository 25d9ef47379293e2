#!/usr/bin/env python3
"""
Student Roster TUI - Main Application

A terminal UI for listing, adding, editing and deleting students held by a
remote student service.

Usage:
    python app.py

Keys:
    a - Add student
    e - Edit selected student
    d - Delete selected student
    r - Refresh
    q - Quit
"""

from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.screen import Screen
from textual.widgets import Button, Footer, Label

from services.config import Settings, configure_logging
from services.controller import RosterController
from services.roster import Student
from services.student_api import StudentApi
from widgets.student_form import StudentForm
from widgets.student_table import StudentTable


class RosterScreen(Screen):
    """
    Main roster screen.

    Shows the table of students with actions:
    - a Add
    - e Edit selected
    - d Delete selected
    - r Refresh
    - q Quit
    """

    DEFAULT_CSS = """
    RosterScreen {
        height: 1fr;
        width: 1fr;
        background: #1e1e2e;
        color: #cdd6f4;
    }

    RosterScreen .header {
        height: 3;
        background: #313244;
        color: #a6e3a1;
        content-align: center middle;
        text-style: bold;
    }

    RosterScreen .header Label {
        width: 1fr;
        text-align: center;
    }

    RosterScreen .status-bar {
        height: 1;
        background: #313244;
        padding: 0 1;
        color: #a6adc8;
    }

    RosterScreen .table-container {
        height: 1fr;
        width: 1fr;
        padding: 0 1;
    }

    RosterScreen .buttons {
        height: 3;
        align: center middle;
    }

    RosterScreen Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("a", "add_student", "Add"),
        Binding("e", "edit_student", "Edit"),
        Binding("d", "delete_student", "Delete"),
        Binding("r", "refresh", "Refresh"),
        Binding("q", "app.quit", "Quit"),
    ]

    def __init__(self, controller: RosterController, title: str, **kwargs):
        super().__init__(**kwargs)
        self._controller = controller
        self._heading = title

    def compose(self) -> ComposeResult:
        with Container(classes="header"):
            yield Label(self._heading, id="title-label")

        with Container(classes="status-bar"):
            yield Label("Ready", id="status-label")

        with Container(classes="table-container"):
            yield StudentTable(id="student-table")

        with Horizontal(classes="buttons"):
            yield Button("Add student", id="add-btn", variant="success")
            yield Button("Edit", id="edit-btn", variant="primary")
            yield Button("Delete", id="delete-btn", variant="error")

        yield Footer()

    def on_mount(self) -> None:
        self.action_refresh()

    def _update_status(self, message: str) -> None:
        try:
            self.query_one("#status-label", Label).update(message)
        except Exception:
            pass

    def _render_roster(self) -> None:
        """Push the controller's roster into the table."""
        students = self._controller.roster.students
        self.query_one(StudentTable).refresh_data(students)
        self._update_status(f"{len(students)} students")

    def _selected_student(self) -> Optional[Student]:
        return self.query_one(StudentTable).get_selected_student()

    # === Actions ===

    def action_refresh(self) -> None:
        """Reload the roster from the server."""
        self._update_status("Loading...")

        async def do_refresh():
            await self._controller.load()
            self._render_roster()

        self.run_worker(do_refresh(), group="roster")

    def action_add_student(self) -> None:
        self._controller.open_add()
        self._open_form()

    def action_edit_student(self) -> None:
        student = self._selected_student()
        if student is None:
            self._update_status("No student selected")
            return
        self._controller.open_edit(student)
        self._open_form()

    def action_delete_student(self) -> None:
        student = self._selected_student()
        if student is None:
            self._update_status("No student selected")
            return

        async def do_delete():
            await self._controller.delete(student.id)
            self._render_roster()

        self.run_worker(do_delete(), group="roster")

    def _open_form(self) -> None:
        form = StudentForm(controller=self._controller)

        def handle_form(save: Optional[bool]) -> None:
            if not save:
                self._controller.cancel()
                return
            self._update_status("Saving...")

            async def do_save():
                await self._controller.save()
                self._render_roster()

            self.run_worker(do_save(), group="roster")

        self.app.push_screen(form, handle_form)

    # === Event handlers ===

    def on_student_table_edit_requested(self, event: StudentTable.EditRequested) -> None:
        self._controller.open_edit(event.student)
        self._open_form()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add-btn":
            self.action_add_student()
        elif event.button.id == "edit-btn":
            self.action_edit_student()
        elif event.button.id == "delete-btn":
            self.action_delete_student()


class RosterApp(App):
    """
    Student Roster TUI Application.
    """

    CSS_PATH = None  # Screens carry their own DEFAULT_CSS

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("ctrl+c", "quit", "Quit"),
    ]

    def __init__(self, controller: Optional[RosterController] = None,
                 settings: Optional[Settings] = None, **kwargs):
        super().__init__(**kwargs)
        self.settings = settings or Settings()
        self.controller = controller or RosterController(StudentApi(self.settings.api_url))

    def on_mount(self) -> None:
        self.push_screen(RosterScreen(self.controller, self.settings.title))


def main():
    """Main entry point."""
    settings = Settings.from_env()
    configure_logging(settings)
    app = RosterApp(settings=settings)
    try:
        app.run()
    finally:
        app.controller.api.close()


if __name__ == "__main__":
    main()
