import pytest
from textual.app import App
from textual.widgets import Input

from services.controller import RosterController
from widgets.student_form import StudentForm
from widgets.student_table import StudentTable


class TableApp(App):
    def __init__(self, students=()):
        super().__init__()
        self._students = students

    def compose(self):
        yield StudentTable(self._students)


@pytest.mark.asyncio
async def test_student_form_mount_for_add(mock_api):
    """Test that StudentForm mounts with empty inputs when adding."""
    controller = RosterController(mock_api)
    controller.open_add()
    app = App()
    async with app.run_test():
        form = StudentForm(controller=controller)
        await app.push_screen(form)
        assert form.is_mounted
        assert form.query_one("#name-input", Input).value == ""
        assert form.query_one("#save-btn")


@pytest.mark.asyncio
async def test_student_form_mount_for_edit(mock_api, mia):
    """Test that StudentForm prefills inputs from the record being edited."""
    controller = RosterController(mock_api)
    controller.open_edit(mia)
    app = App()
    async with app.run_test():
        form = StudentForm(controller=controller)
        await app.push_screen(form)
        assert form.is_editing
        assert form.query_one("#name-input", Input).value == "Mia"
        assert form.query_one("#grade-input", Input).value == "4A"


@pytest.mark.asyncio
async def test_student_table_rows(ana, mia):
    app = TableApp((ana, mia))
    async with app.run_test() as pilot:
        table = pilot.app.query_one(StudentTable)
        assert table.query_one("#student-data-table").row_count == 2
        assert not table.is_showing_empty_state()
        assert table.get_selected_student() == ana


@pytest.mark.asyncio
async def test_student_table_empty_state():
    app = TableApp()
    async with app.run_test() as pilot:
        table = pilot.app.query_one(StudentTable)
        assert table.is_showing_empty_state()
        assert table.get_selected_student() is None
