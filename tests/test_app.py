"""
Pilot tests for the roster screen: load on mount, empty state, add, edit, delete.
"""

import asyncio

import pytest

from conftest import ok
from app import RosterApp, RosterScreen
from services.config import Settings
from services.controller import RosterController
from services.roster import Student
from widgets.student_form import StudentForm
from widgets.student_table import StudentTable


def make_app(mock_api):
    return RosterApp(controller=RosterController(mock_api), settings=Settings(title="Colegio"))


async def settle(pilot):
    await pilot.pause()
    await pilot.app.workers.wait_for_complete()
    await pilot.pause()


def status_text(app) -> str:
    return str(app.screen.query_one("#status-label").render())


@pytest.mark.asyncio
async def test_empty_roster_shows_empty_state(mock_api):
    app = make_app(mock_api)

    async with app.run_test() as pilot:
        await settle(pilot)

        assert isinstance(app.screen, RosterScreen)
        mock_api.list_students.assert_awaited_once()
        table = app.screen.query_one(StudentTable)
        assert table.is_showing_empty_state()
        assert "0 students" in status_text(app)


@pytest.mark.asyncio
async def test_delete_selected_student(mock_api, ana):
    mock_api.list_students.return_value = ok("list", [ana])
    app = make_app(mock_api)

    async with app.run_test() as pilot:
        await settle(pilot)
        table = app.screen.query_one(StudentTable)
        assert not table.is_showing_empty_state()
        assert app.screen.query_one("#student-data-table").row_count == 1

        await pilot.press("d")
        await settle(pilot)

        mock_api.delete_student.assert_awaited_once_with(1)
        assert app.controller.roster.students == ()
        assert table.is_showing_empty_state()


@pytest.mark.asyncio
async def test_add_student_through_form(mock_api):
    created = Student(id=7, name="luis", age="12", grade="6b")
    mock_api.create_student.return_value = ok("create", created)
    app = make_app(mock_api)

    async with app.run_test(size=(100, 40)) as pilot:
        await settle(pilot)

        await pilot.press("a")
        await pilot.pause()
        assert isinstance(app.screen, StudentForm)
        assert not app.screen.is_editing

        await pilot.press(*"luis")
        await pilot.press("tab")
        await pilot.press(*"12")
        await pilot.press("tab")
        await pilot.press(*"6b")
        await pilot.press("enter")
        await settle(pilot)

        draft = mock_api.create_student.await_args.args[0]
        assert draft.to_payload() == {"name": "luis", "age": "12", "grade": "6b"}
        assert isinstance(app.screen, RosterScreen)
        assert app.controller.roster.students == (created,)
        assert not app.controller.session.is_open


@pytest.mark.asyncio
async def test_edit_then_cancel_makes_no_calls(mock_api, ana, mia):
    mock_api.list_students.return_value = ok("list", [ana, mia])
    app = make_app(mock_api)

    async with app.run_test(size=(100, 40)) as pilot:
        await settle(pilot)

        await pilot.press("e")
        await pilot.pause()
        assert isinstance(app.screen, StudentForm)
        assert app.screen.is_editing
        assert app.controller.session.target == ana

        await pilot.press("escape")
        await settle(pilot)

        assert isinstance(app.screen, RosterScreen)
        assert not app.controller.session.is_open
        mock_api.update_student.assert_not_awaited()
        assert app.controller.roster.students == (ana, mia)


@pytest.mark.asyncio
async def test_edit_without_selection_reports_status(mock_api):
    app = make_app(mock_api)

    async with app.run_test() as pilot:
        await settle(pilot)

        await pilot.press("e")
        await pilot.pause()

        assert isinstance(app.screen, RosterScreen)
        assert "No student selected" in status_text(app)


@pytest.mark.asyncio
async def test_second_form_survives_slow_save(mock_api):
    gate = asyncio.Event()
    first = Student(id=7, name="luis", age="", grade="")
    second = Student(id=8, name="mia", age="", grade="")

    async def slow_create(draft):
        if draft.name == "luis":
            await gate.wait()
            return ok("create", first)
        return ok("create", second)

    mock_api.create_student.side_effect = slow_create
    app = make_app(mock_api)

    async with app.run_test(size=(100, 40)) as pilot:
        await settle(pilot)

        await pilot.press("a")
        await pilot.pause()
        await pilot.press(*"luis")
        await pilot.press("enter")
        await pilot.pause()

        await pilot.press("a")
        await pilot.pause()
        assert isinstance(app.screen, StudentForm)

        gate.set()
        await pilot.pause()
        assert app.controller.session.is_open

        await pilot.press(*"mia")
        await pilot.press("enter")
        await settle(pilot)

        drafts = [call.args[0].name for call in mock_api.create_student.await_args_list]
        assert drafts == ["luis", "mia"]
        assert {s.id for s in app.controller.roster.students} == {7, 8}
        assert not app.controller.session.is_open
