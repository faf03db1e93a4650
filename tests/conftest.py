# tests/conftest.py

from pathlib import Path
from typing import Callable, List

import pytest

from controller import Controller
from status import StatusTracker
from storage import JsonStorage
from task_manager import TaskManager


class FakeTimer:
    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        self.delay = delay
        self.callback = callback
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True


class FakeScheduler:
    """Stands in for App.set_timer; timers fire only when told to."""

    def __init__(self) -> None:
        self.timers: List[FakeTimer] = []

    def __call__(self, delay: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def live(self) -> List[FakeTimer]:
        return [t for t in self.timers if not t.stopped]

    def fire(self) -> None:
        for timer in self.live:
            timer.stopped = True
            timer.callback()


class CountingStorage(JsonStorage):
    """JsonStorage that records how many times it was written."""

    def __init__(self, path: Path) -> None:
        super().__init__(path)
        self.saves = 0

    def save(self, snapshot) -> None:
        self.saves += 1
        super().save(snapshot)


@pytest.fixture()
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def storage(data_file: Path) -> CountingStorage:
    return CountingStorage(data_file)


@pytest.fixture()
def manager(storage: CountingStorage) -> TaskManager:
    return TaskManager(storage)


@pytest.fixture()
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture()
def controller(manager: TaskManager, scheduler: FakeScheduler) -> Controller:
    return Controller(manager, StatusTracker(scheduler, timeout=2.0))
