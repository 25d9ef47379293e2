"""
Student Roster TUI - Student Form

Modal form for adding a new student or editing an existing one.
"""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label

from services.controller import RosterController
from services.session import SessionMode


class StudentForm(ModalScreen[bool]):
    """
    Modal form bound to the controller's edit session.

    Fields:
    - name
    - age (numeric keyboard, not validated)
    - grade

    Every keystroke is written to the session draft. Dismisses with True when
    the user saves and False when they cancel.
    """

    BINDINGS = [
        Binding("escape", "close", "Cancel"),
    ]

    DEFAULT_CSS = """
    StudentForm {
        align: center middle;
        background: rgba(0, 0, 0, 0.7);
    }

    StudentForm > Container {
        width: 60;
        height: auto;
        background: #313244;
        border: thick #89b4fa;
        padding: 1 2;
    }

    StudentForm .title {
        text-style: bold;
        color: #89dceb;
        margin-bottom: 1;
    }

    StudentForm Input {
        width: 1fr;
        margin-bottom: 1;
    }

    StudentForm .buttons {
        height: 3;
        align: center middle;
    }

    StudentForm Button {
        margin: 0 1;
        min-width: 12;
    }
    """

    FIELD_INPUTS = {
        "name-input": "name",
        "age-input": "age",
        "grade-input": "grade",
    }

    def __init__(self, controller: RosterController, **kwargs):
        super().__init__(**kwargs)
        self._controller = controller

    @property
    def is_editing(self) -> bool:
        return self._controller.session.mode is SessionMode.EDITING

    def compose(self) -> ComposeResult:
        draft = self._controller.session.draft
        verb = "Edit" if self.is_editing else "Add"

        with Container():
            yield Label(f"{verb} Student", classes="title", id="form-title")
            yield Input(value=draft.name, placeholder="Name", id="name-input")
            yield Input(value=draft.age, placeholder="Age", id="age-input", type="number")
            yield Input(value=draft.grade, placeholder="Grade", id="grade-input")

            with Horizontal(classes="buttons"):
                yield Button("Update" if self.is_editing else "Add", id="save-btn", variant="primary")
                yield Button("Cancel", id="cancel-btn")

    def on_mount(self) -> None:
        self.query_one("#name-input", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        field = self.FIELD_INPUTS.get(event.input.id or "")
        if field and self._controller.session.is_open:
            self._controller.edit_field(field, event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.dismiss(True)

    def action_close(self) -> None:
        self.dismiss(False)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "save-btn":
            self.dismiss(True)
        elif event.button.id == "cancel-btn":
            self.dismiss(False)
