# views.py
#
# Description:
# This file contains all the UI components of the application, built using
# the Textual TUI framework. The widgets only draw what the Controller hands
# them and forward key presses and prompt answers back to it; all state lives
# in the Controller and the data file.
#

from typing import List, Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen, Screen
from textual.widgets import Button, Header, Input, Label, OptionList, Static
from textual.widgets.option_list import Option

from controller import Command, Controller, Prompt, PromptKind, TaskRow
from keybindings import APP_BINDINGS, CONFIRM_BINDINGS, DASHBOARD_BINDINGS, INPUT_BINDINGS
from selection import Focus
from status import DEFAULT_TIMEOUT, StatusLine, StatusTracker, Style
from task_manager import TaskManager

APP_CSS = """
Screen {
    layout: vertical;
}
#panes {
    height: 1fr;
}
Pane {
    height: 100%;
    border: round $panel;
}
Pane.focused {
    border: round $accent;
}
#categories {
    width: 25%;
}
#tasks {
    width: 75%;
}
StatusFooter {
    dock: bottom;
    height: 1;
    width: 100%;
    padding: 0 1;
}
StatusFooter.message {
    color: yellow;
    text-style: bold;
}
StatusFooter.error {
    background: red;
    color: white;
    text-style: bold;
}
InputPrompt, ConfirmPrompt {
    align: center middle;
}
#dialog {
    width: 50%;
    height: auto;
    border: round $accent;
    background: $surface;
    padding: 1 2;
}
#dialog Horizontal {
    height: auto;
    margin-top: 1;
}
#dialog Button {
    margin: 0 1;
}
"""


def render_task(row: TaskRow) -> Text:
    """Done rows get a green check mark."""
    if row.done:
        return Text.assemble("[", ("x", "bold green"), "] ", row.text)
    return Text(row.label)


# --- Custom Widgets ---

class Pane(OptionList, can_focus=False):
    """A list whose highlight follows the Controller's selection state."""

    def show_rows(self, rows: List[Text], selected: Optional[int], placeholder: str):
        self.clear_options()
        if rows:
            self.add_options(rows)
            self.highlighted = selected
        else:
            self.add_option(Option(Text(placeholder, style="dim"), disabled=True))
            self.highlighted = None


class StatusFooter(Static):
    """The status line: a hint, a message or an error."""

    def show_line(self, line: StatusLine):
        error = line.style is Style.ERROR
        self.set_class(error, "error")
        self.set_class(line.transient and not error, "message")
        self.update(Text(line.text))


# --- Modal Screens for Input ---

class InputPrompt(ModalScreen[Optional[str]]):
    """Asks for one line of text. Dismisses with None when cancelled."""
    BINDINGS = INPUT_BINDINGS

    def __init__(self, question: Prompt):
        super().__init__()
        self.question = question

    def compose(self) -> ComposeResult:
        yield Container(
            Label(Text(self.question.message)),
            Input(id="answer"),
            id="dialog",
        )

    def on_mount(self) -> None:
        self.query_one("#dialog").border_title = self.question.title
        self.query_one(Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.dismiss(event.value)

    def action_cancel(self) -> None:
        self.dismiss(None)


class ConfirmPrompt(ModalScreen[bool]):
    """A yes/no question."""
    BINDINGS = CONFIRM_BINDINGS

    def __init__(self, question: Prompt):
        super().__init__()
        self.question = question

    def compose(self) -> ComposeResult:
        yield Container(
            Label(Text(self.question.message)),
            Horizontal(
                Button("Yes", variant="error", id="yes"),
                Button("No", id="no"),
            ),
            id="dialog",
        )

    def on_mount(self) -> None:
        self.query_one("#dialog").border_title = self.question.title

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "yes")

    def action_confirm(self) -> None:
        self.dismiss(True)

    def action_decline(self) -> None:
        self.dismiss(False)


# --- Main Application Screen ---

class DashboardScreen(Screen):
    """Categories on the left, the selected category's tasks on the right."""
    BINDINGS = DASHBOARD_BINDINGS

    def compose(self) -> ComposeResult:
        self.category_pane = Pane(id="categories")
        self.task_pane = Pane(id="tasks")
        self.status_footer = StatusFooter(id="status")
        yield Header()
        yield Horizontal(self.category_pane, self.task_pane, id="panes")
        yield self.status_footer

    @property
    def controller(self) -> Controller:
        return self.app.controller

    def on_mount(self) -> None:
        """Draw the stored data when the screen is mounted."""
        self.category_pane.border_title = "Categories"
        self.task_pane.border_title = "Tasks"
        self.controller.status.on_change = self.status_footer.show_line
        self.refresh_view()

    def refresh_view(self) -> None:
        """Redraw both panes and the footer from a fresh snapshot."""
        snap = self.controller.snapshot()
        self.category_pane.show_rows(
            [Text(label) for label in snap.category_labels], snap.selected_category, "No categories"
        )
        self.task_pane.show_rows([render_task(row) for row in snap.tasks], snap.selected_task, "No tasks")
        self.category_pane.set_class(snap.pane_style(Focus.CATEGORIES) is Style.FOCUSED, "focused")
        self.task_pane.set_class(snap.pane_style(Focus.TASKS) is Style.FOCUSED, "focused")
        self.status_footer.show_line(snap.status)

    def run_command(self, command: Command) -> None:
        question = self.controller.handle(command)
        if self.controller.quitting:
            self.app.exit()
            return
        self.refresh_view()
        if question is None:
            return
        if question.kind is PromptKind.CONFIRM:
            self.app.push_screen(ConfirmPrompt(question), self._after_confirm)
        else:
            self.app.push_screen(InputPrompt(question), self._after_input)

    def _after_input(self, value: Optional[str]) -> None:
        self.controller.submit_text(value)
        self.refresh_view()

    def _after_confirm(self, ok: Optional[bool]) -> None:
        self.controller.resolve_confirmation(bool(ok))
        self.refresh_view()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Mouse clicks select rows directly."""
        focus = Focus.CATEGORIES if event.option_list is self.category_pane else Focus.TASKS
        self.controller.select(focus, event.option_index)
        self.refresh_view()

    def action_add(self) -> None:
        self.run_command(Command.ADD)

    def action_delete(self) -> None:
        self.run_command(Command.DELETE)

    def action_toggle(self) -> None:
        self.run_command(Command.TOGGLE)

    def action_activate(self) -> None:
        self.run_command(Command.ACTIVATE)

    def action_switch_focus(self) -> None:
        self.run_command(Command.SWITCH_FOCUS)

    def action_cursor_down(self) -> None:
        self.run_command(Command.CURSOR_DOWN)

    def action_cursor_up(self) -> None:
        self.run_command(Command.CURSOR_UP)

    def action_cursor_first(self) -> None:
        self.run_command(Command.CURSOR_FIRST)

    def action_cursor_last(self) -> None:
        self.run_command(Command.CURSOR_LAST)


# --- The Main App ---

class TuidoApp(App):
    """A two-pane terminal to-do dashboard."""

    TITLE = "TUIDO"
    CSS = APP_CSS
    BINDINGS = APP_BINDINGS

    # The dictionary holds the class types, not instances.
    SCREENS = {
        "dashboard": DashboardScreen,
    }

    def __init__(self, manager: TaskManager, status_timeout: float = DEFAULT_TIMEOUT):
        super().__init__()
        self.controller = Controller(manager, StatusTracker(self.set_timer, status_timeout))

    def on_mount(self) -> None:
        """Called when the app is first mounted."""
        self.push_screen("dashboard")

    async def action_quit(self) -> None:
        """Quit, unless a prompt is still waiting for an answer."""
        self.controller.handle(Command.QUIT)
        if self.controller.quitting:
            self.exit()
