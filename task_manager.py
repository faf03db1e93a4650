# task_manager.py
#
# Description:
# This file contains the core logic for managing categories and their tasks.
# It defines the Task data structure and a TaskManager class that handles the
# add/toggle/remove operations. Every operation reloads the mapping from the
# storage backend, applies its change and writes it back, so nothing read from
# disk outlives a single call.
#

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

QUOTE_CHARS = ("'", '"')


@dataclass
class Task:
    """
    A single to-do item.

    Attributes:
        text: What needs doing. Surrounding quotes are stripped on entry.
        done: Whether the task has been completed.
    """
    text: str
    done: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "done": self.done}


# Category name -> ordered tasks. Dict order is the on-screen category order.
Snapshot = Dict[str, List[Task]]


def strip_quotes(text: str) -> str:
    """
    Removes one pair of matching quotes wrapping the whole text.

    Only a single pair is removed, so "''x''" becomes "'x'".
    """
    if len(text) >= 2 and text[0] in QUOTE_CHARS and text[-1] == text[0]:
        return text[1:-1]
    return text


def count_done(tasks: List[Task]) -> int:
    return sum(1 for task in tasks if task.done)


class TaskManager:
    """
    Handles all business logic for categories and tasks.
    Operations addressing a missing category or row are no-ops that report
    "not found" through their return value instead of raising.
    """
    def __init__(self, storage):
        """
        Initializes the TaskManager with a storage backend.

        Args:
            storage: An instance of a storage class (e.g., JsonStorage)
                     that has load() and save() methods.
        """
        self.storage = storage

    def load(self) -> Snapshot:
        """Returns a fresh snapshot from the storage backend."""
        return self.storage.load()

    def save(self, snapshot: Snapshot):
        """Writes a whole snapshot to the storage backend."""
        self.storage.save(snapshot)

    def add_category(self, name: str) -> int:
        """
        Adds an empty category unless one with this name already exists.
        The store is written either way.

        Args:
            name: The category name.

        Returns:
            The position of the category in display order.
        """
        data = self.load()
        if name not in data:
            data[name] = []
            logger.info("Added category %r", name)
        self.save(data)
        return list(data).index(name)

    def remove_category(self, name: str) -> bool:
        """
        Deletes a category and every task in it.

        Returns:
            True if the category existed. Nothing is written otherwise.
        """
        data = self.load()
        if name not in data:
            return False
        del data[name]
        self.save(data)
        logger.info("Removed category %r", name)
        return True

    def add_task(self, category: str, text: str) -> int:
        """
        Appends a pending task, creating the category if needed.

        Args:
            category: The category to append to.
            text: The task text; one pair of wrapping quotes is removed.

        Returns:
            The index of the new task within its category.
        """
        data = self.load()
        tasks = data.setdefault(category, [])
        tasks.append(Task(text=strip_quotes(text)))
        self.save(data)
        return len(tasks) - 1

    def toggle_task(self, category: str, index: int) -> Optional[str]:
        """
        Flips the done flag of one task.

        Returns:
            The task text, or None when the category or index is invalid.
        """
        data = self.load()
        task = _lookup(data, category, index)
        if task is None:
            return None
        task.done = not task.done
        self.save(data)
        return task.text

    def remove_task(self, category: str, index: int) -> Optional[str]:
        """
        Removes one task; later tasks move up by one.

        Returns:
            The removed text, or None when the category or index is invalid.
        """
        data = self.load()
        if _lookup(data, category, index) is None:
            return None
        removed = data[category].pop(index)
        self.save(data)
        return removed.text


def _lookup(data: Snapshot, category: Optional[str], index: Optional[int]) -> Optional[Task]:
    tasks = data.get(category) if category is not None else None
    if tasks is None or not isinstance(index, int) or isinstance(index, bool):
        return None
    if 0 <= index < len(tasks):
        return tasks[index]
    return None
