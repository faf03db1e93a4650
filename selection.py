# selection.py
#
# Description:
# Highlighted rows and pane focus for the dashboard. The indices are plain
# numbers; they are clamped against the current list sizes whenever the view
# is built, so they stay valid however the lists shrink.
#

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Focus(str, Enum):
    """The pane that receives commands."""
    CATEGORIES = "categories"
    TASKS = "tasks"


def clamp(index: int, count: int) -> Optional[int]:
    """Clamps index into [0, count - 1], or None for an empty list."""
    if count <= 0:
        return None
    return min(max(index, 0), count - 1)


@dataclass
class SelectionState:
    """
    Attributes:
        category_index: The highlighted category.
        task_index: The last task row touched. Kept as-is after a list shrinks
            and clamped only for display.
        focus: The pane receiving commands.
    """
    category_index: int = 0
    task_index: int = 0
    focus: Focus = Focus.CATEGORIES

    def clamp_category(self, count: int) -> Optional[int]:
        """Pulls the category index back into range and returns it."""
        selected = clamp(self.category_index, count)
        self.category_index = 0 if selected is None else selected
        return selected

    def task_row(self, count: int) -> Optional[int]:
        """The task row to display for a category holding count tasks."""
        return clamp(self.task_index, count)

    def switch_focus(self) -> Focus:
        self.focus = Focus.TASKS if self.focus is Focus.CATEGORIES else Focus.CATEGORIES
        return self.focus

    def category_added(self, index: int):
        self.category_index = index

    def task_added(self, index: int):
        self.task_index = index

    def task_touched(self, index: int):
        self.task_index = index

    def move(self, delta: int, category_count: int, task_count: int):
        """Moves the cursor of the focused pane by delta rows."""
        if self.focus is Focus.CATEGORIES:
            current = clamp(self.category_index, category_count)
            if current is not None:
                self.category_index = clamp(current + delta, category_count)
        else:
            current = self.task_row(task_count)
            if current is not None:
                self.task_index = clamp(current + delta, task_count)

    def jump(self, to_end: bool, category_count: int, task_count: int):
        """Moves the cursor of the focused pane to its first or last row."""
        if self.focus is Focus.CATEGORIES:
            if category_count:
                self.category_index = category_count - 1 if to_end else 0
        elif task_count:
            self.task_index = task_count - 1 if to_end else 0
