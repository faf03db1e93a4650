# status.py
#
# Description:
# The one-line status footer. A message stays up until a timeout elapses and
# then gives way to the hint for the focused pane. Only one decay timer is
# ever pending.
#

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 2.0

# scheduler(delay, callback) -> handle with a stop() method, e.g. App.set_timer
Scheduler = Callable[[float, Callable[[], None]], Any]


class Style(str, Enum):
    """How the projector should paint a pane or the status line."""
    NORMAL = "normal"
    FOCUSED = "focused"
    ERROR = "error"


@dataclass(frozen=True)
class StatusLine:
    text: str
    style: Style = Style.NORMAL
    transient: bool = False


class StatusTracker:
    """Holds the current status line and the timer that clears it."""

    def __init__(self, scheduler: Optional[Scheduler] = None, timeout: float = DEFAULT_TIMEOUT):
        self.scheduler = scheduler
        self.timeout = timeout
        self.hint = ""
        self.line = StatusLine("")
        self.on_change: Optional[Callable[[StatusLine], None]] = None
        self._timer = None

    @property
    def pending(self) -> bool:
        """True while a decay timer is outstanding."""
        return self._timer is not None

    def show(self, message: str, error: bool = False):
        """Displays a transient message and restarts the decay timer."""
        self._cancel()
        self.line = StatusLine(message, Style.ERROR if error else Style.NORMAL, transient=True)
        logger.debug("Status %s: %s", self.line.style.value, message)
        if self.scheduler is not None:
            self._timer = self.scheduler(self.timeout, self._decay)

    def set_hint(self, hint: str):
        """Records the hint; it is shown at once unless a message is up."""
        self.hint = hint
        if not self.line.transient:
            self.line = StatusLine(hint)

    def show_hint(self):
        self._cancel()
        self.line = StatusLine(self.hint)

    def _cancel(self):
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def _decay(self):
        self._timer = None
        self.line = StatusLine(self.hint)
        if self.on_change is not None:
            self.on_change(self.line)
