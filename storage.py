# storage.py
#
# Description:
# JSON file backend for the category -> tasks mapping. The whole mapping is
# read and written in one go; the TaskManager never keeps a copy between
# operations.
#

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Union

from errors import PersistenceUnavailable, PersistenceWriteFailure
from task_manager import Snapshot, Task

logger = logging.getLogger(__name__)


class JsonStorage:
    """Reads and writes a Snapshot as a human readable JSON object."""

    def __init__(self, path: Union[str, Path]):
        """
        Args:
            path: Location of the data file. It does not need to exist yet.
        """
        self.path = Path(path)

    def load(self) -> Snapshot:
        """
        Loads the stored mapping.

        A missing, unreadable or malformed file yields an empty mapping so the
        dashboard can always start.

        Returns:
            The categories in file order, each with its ordered task list.
        """
        try:
            return self._read()
        except PersistenceUnavailable as e:
            logger.warning("Ignoring data file %s: %s", self.path, e)
            return {}

    def _read(self) -> Snapshot:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise PersistenceUnavailable(str(e)) from e
        return _parse(raw)

    def save(self, snapshot: Snapshot):
        """
        Writes the full mapping, replacing the file in a single rename.

        Raises:
            PersistenceWriteFailure: If the file or its directory cannot be written.
        """
        payload = dump_snapshot(snapshot)
        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=directory)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(payload, f, indent=2, ensure_ascii=False)
                    f.write("\n")
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise PersistenceWriteFailure(f"Could not write {self.path}: {e}") from e
        logger.debug("Saved %d categories to %s", len(snapshot), self.path)


def _parse(raw: Any) -> Snapshot:
    """Validates decoded JSON and turns it into Task objects."""
    if not isinstance(raw, dict):
        raise PersistenceUnavailable("top level is not an object")
    snapshot: Snapshot = {}
    for name, items in raw.items():
        if not isinstance(items, list):
            raise PersistenceUnavailable(f"category {name!r} does not hold a list")
        tasks: List[Task] = []
        for item in items:
            if not isinstance(item, dict) or not isinstance(item.get("text"), str):
                raise PersistenceUnavailable(f"bad task entry in {name!r}")
            done = item.get("done", False)
            if not isinstance(done, bool):
                raise PersistenceUnavailable(f"bad done flag in {name!r}")
            tasks.append(Task(text=item["text"], done=done))
        snapshot[name] = tasks
    return snapshot


def dump_snapshot(snapshot: Snapshot) -> Dict[str, List[Dict[str, Any]]]:
    """Plain-data copy of a snapshot, handy for comparisons."""
    return {name: [task.to_dict() for task in tasks] for name, tasks in snapshot.items()}
