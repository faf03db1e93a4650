# controller.py
#
# Description:
# The command state machine behind the dashboard. It turns discrete commands
# (add, delete, toggle, switch focus, quit, cursor moves) into TaskManager
# calls, keeps the selection valid and sets the status line. Modal prompts are
# explicit states: a command that needs input returns a Prompt and the
# controller waits for submit_text() or resolve_confirmation() before it
# accepts anything else.
#

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from errors import InvalidInput, NothingSelected
from selection import Focus, SelectionState
from status import StatusLine, StatusTracker, Style
from task_manager import Snapshot, Task, TaskManager, count_done, strip_quotes

logger = logging.getLogger(__name__)

CATEGORY_HINT = "[a] Add  [d] Delete  [Tab] Tasks  [q] Exit"
TASK_HINT = "[a] Add  [x] Done  [d] Delete  [Enter] Toggle  [Tab] Categories  [q] Exit"


class Command(str, Enum):
    ADD = "add"
    DELETE = "delete"
    TOGGLE = "toggle"
    ACTIVATE = "activate"
    SWITCH_FOCUS = "switch_focus"
    QUIT = "quit"
    CURSOR_UP = "cursor_up"
    CURSOR_DOWN = "cursor_down"
    CURSOR_FIRST = "cursor_first"
    CURSOR_LAST = "cursor_last"


class Mode(str, Enum):
    IDLE = "idle"
    AWAITING_CATEGORY_NAME = "awaiting_category_name"
    AWAITING_TASK_TEXT = "awaiting_task_text"
    AWAITING_CONFIRMATION = "awaiting_confirmation"


class PromptKind(str, Enum):
    TEXT = "text"
    CONFIRM = "confirm"


@dataclass(frozen=True)
class Prompt:
    """
    A modal question the projector must put to the user.

    Attributes:
        kind: Free text entry or a yes/no question.
        title: Label for the dialog border.
        message: The question itself.
        target: The category the answer applies to, if any.
    """
    kind: PromptKind
    title: str
    message: str
    target: Optional[str] = None


@dataclass(frozen=True)
class TaskRow:
    text: str
    done: bool

    @property
    def label(self) -> str:
        return f"[{'x' if self.done else ' '}] {self.text}"


@dataclass(frozen=True)
class DisplaySnapshot:
    """Everything the projector needs to draw one frame."""
    category_names: List[str]
    category_labels: List[str]
    tasks: List[TaskRow]
    selected_category: Optional[int]
    selected_task: Optional[int]
    focus: Focus
    status: StatusLine
    mode: Mode = Mode.IDLE

    def pane_style(self, pane: Focus) -> Style:
        return Style.FOCUSED if pane is self.focus else Style.NORMAL


def category_label(name: str, tasks: List[Task]) -> str:
    return f"{name} [{count_done(tasks)}/{len(tasks)}]"


def hint_for(focus: Focus) -> str:
    return CATEGORY_HINT if focus is Focus.CATEGORIES else TASK_HINT


class Controller:
    """
    Applies user commands to the store and the selection state.

    Every command reloads the store, so the view always shows what was last
    written. InvalidInput and NothingSelected end up as error-styled status
    messages; write failures propagate to the caller.
    """

    def __init__(
        self,
        manager: TaskManager,
        status: Optional[StatusTracker] = None,
        selection: Optional[SelectionState] = None,
    ):
        self.manager = manager
        self.status = status or StatusTracker()
        self.selection = selection or SelectionState()
        self.mode = Mode.IDLE
        self.pending: Optional[Prompt] = None
        self.quitting = False
        self.status.set_hint(hint_for(self.selection.focus))

    # --- Queries ---

    def snapshot(self) -> DisplaySnapshot:
        """Builds the display state from a fresh read of the store."""
        data = self.manager.load()
        names = list(data)
        selected = self.selection.clamp_category(len(names))
        tasks = data[names[selected]] if selected is not None else []
        return DisplaySnapshot(
            category_names=names,
            category_labels=[category_label(name, data[name]) for name in names],
            tasks=[TaskRow(task.text, task.done) for task in tasks],
            selected_category=selected,
            selected_task=self.selection.task_row(len(tasks)),
            focus=self.selection.focus,
            status=self.status.line,
            mode=self.mode,
        )

    def selected_category(self, data: Optional[Snapshot] = None) -> Optional[str]:
        if data is None:
            data = self.manager.load()
        names = list(data)
        selected = self.selection.clamp_category(len(names))
        return names[selected] if selected is not None else None

    # --- Commands ---

    def handle(self, command: Command) -> Optional[Prompt]:
        """
        Runs one command.

        Args:
            command: The command to run.

        Returns:
            A Prompt when the command needs an answer before it can finish.
        """
        if self.mode is not Mode.IDLE:
            logger.debug("Ignoring %s while %s", command.value, self.mode.value)
            return None
        handler = getattr(self, f"_cmd_{command.value}")
        logger.debug("Command %s (focus=%s)", command.value, self.selection.focus.value)
        try:
            return handler()
        except (InvalidInput, NothingSelected) as e:
            self.status.show(str(e), error=True)
            return None

    def select(self, focus: Focus, index: int):
        """Highlights a row directly, e.g. after a mouse click."""
        if self.mode is not Mode.IDLE:
            return
        if focus is Focus.CATEGORIES:
            self.selection.category_index = index
        else:
            self.selection.task_touched(index)

    def submit_text(self, value: Optional[str]):
        """
        Resumes an add command with the text the user entered.

        Args:
            value: The entered text, or None if the prompt was cancelled.
        """
        if self.mode not in (Mode.AWAITING_CATEGORY_NAME, Mode.AWAITING_TASK_TEXT):
            logger.warning("Text submitted with no text prompt pending")
            return
        mode, prompt = self.mode, self.pending
        self._resume()
        if value is None:
            self.status.show_hint()
            return
        try:
            if mode is Mode.AWAITING_CATEGORY_NAME:
                self._add_category(value)
            else:
                self._add_task(prompt.target, value)
        except (InvalidInput, NothingSelected) as e:
            self.status.show(str(e), error=True)

    def resolve_confirmation(self, ok: bool):
        """Resumes a category delete with the user's yes/no answer."""
        if self.mode is not Mode.AWAITING_CONFIRMATION:
            logger.warning("Confirmation received with no question pending")
            return
        name = self.pending.target
        self._resume()
        if not ok:
            self.status.show_hint()
            return
        if self.manager.remove_category(name):
            self.status.show(f'Category "{name}" deleted')
        else:
            self.status.show("No category selected", error=True)

    def _suspend(self, mode: Mode, prompt: Prompt) -> Prompt:
        self.mode = mode
        self.pending = prompt
        return prompt

    def _resume(self):
        self.mode = Mode.IDLE
        self.pending = None

    def _cmd_add(self) -> Prompt:
        if self.selection.focus is Focus.CATEGORIES:
            return self._suspend(
                Mode.AWAITING_CATEGORY_NAME,
                Prompt(PromptKind.TEXT, "Add category", "Category name:"),
            )
        category = self.selected_category()
        if category is None:
            raise NothingSelected("No category selected")
        return self._suspend(
            Mode.AWAITING_TASK_TEXT,
            Prompt(PromptKind.TEXT, "Add task", "Task name:", target=category),
        )

    def _cmd_delete(self) -> Optional[Prompt]:
        if self.selection.focus is Focus.CATEGORIES:
            category = self.selected_category()
            if category is None:
                raise NothingSelected("No category selected")
            return self._suspend(
                Mode.AWAITING_CONFIRMATION,
                Prompt(PromptKind.CONFIRM, "Confirm delete", f'Delete category "{category}"? (y/n)', target=category),
            )
        category, row, _ = self._highlighted_task()
        text = self.manager.remove_task(category, row)
        if text is None:
            raise NothingSelected("No task selected")
        self.selection.task_touched(row)
        self.status.show(f'Task "{text}" deleted')
        return None

    def _cmd_toggle(self) -> None:
        if self.selection.focus is not Focus.TASKS:
            self.status.show_hint()
            return None
        category, row, task = self._highlighted_task()
        text = self.manager.toggle_task(category, row)
        if text is None:
            raise NothingSelected("No task selected")
        self.selection.task_touched(row)
        self.status.show(f'Task "{text}" {"reopened" if task.done else "done"}')
        return None

    _cmd_activate = _cmd_toggle

    def _cmd_switch_focus(self) -> None:
        focus = self.selection.switch_focus()
        self.status.set_hint(hint_for(focus))
        self.status.show_hint()

    def _cmd_quit(self) -> None:
        logger.info("Quit requested")
        self.quitting = True

    def _cmd_cursor_up(self) -> None:
        self.selection.move(-1, *self._counts())

    def _cmd_cursor_down(self) -> None:
        self.selection.move(1, *self._counts())

    def _cmd_cursor_first(self) -> None:
        self.selection.jump(False, *self._counts())

    def _cmd_cursor_last(self) -> None:
        self.selection.jump(True, *self._counts())

    # --- Helpers ---

    def _add_category(self, name: str):
        name = name.strip()
        if not name:
            raise InvalidInput("Empty category name")
        index = self.manager.add_category(name)
        self.selection.category_added(index)
        self.status.show(f'Category "{name}" added')

    def _add_task(self, category: Optional[str], text: str):
        if not text or not strip_quotes(text).strip():
            raise InvalidInput("Empty task name")
        if category is None:
            raise NothingSelected("No category selected")
        index = self.manager.add_task(category, text)
        self.selection.task_added(index)
        self.status.show(f'Task "{strip_quotes(text)}" added')

    def _highlighted_task(self):
        """Returns (category, row, task) for the displayed task row."""
        data = self.manager.load()
        category = self.selected_category(data)
        tasks = data.get(category, []) if category is not None else []
        row = self.selection.task_row(len(tasks))
        if row is None:
            raise NothingSelected("No task selected")
        return category, row, tasks[row]

    def _counts(self):
        data = self.manager.load()
        category = self.selected_category(data)
        return len(data), len(data[category]) if category is not None else 0
