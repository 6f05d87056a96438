"""Clipboard edge operations and the self-resetting "copied" flag.

Copying is fire-and-forget from the session's point of view: a failure is
logged and reported as `False`, never as a change of run state. After a
successful copy the caller's feedback flag is set and a timer resets it after
a fixed delay. A second copy inside that window starts its own timer; earlier
timers are not cancelled and simply reset the flag when they fire.
"""
from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

import pyperclip

from .config import DEFAULT_COPY_FEEDBACK_SECONDS
from .errors import ClipboardError

__all__ = ["CopyFeedback", "copy_text", "Scheduler"]

logger = logging.getLogger(__name__)

# (delay_seconds, callback) -> None
Scheduler = Callable[[float, Callable[[], None]], None]


def _thread_timer(delay: float, callback: Callable[[], None]) -> None:
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()


class CopyFeedback:
    """Mutable boolean with an externally scheduled reset."""

    def __init__(
        self,
        delay: float = DEFAULT_COPY_FEEDBACK_SECONDS,
        scheduler: Optional[Scheduler] = None,
        on_change: Optional[Callable[[bool], None]] = None,
    ) -> None:
        self.delay = delay
        self.active = False
        self._scheduler = scheduler or _thread_timer
        self._on_change = on_change

    def _set(self, value: bool) -> None:
        self.active = value
        if self._on_change is not None:
            self._on_change(value)

    def trigger(self) -> None:
        self._set(True)
        self._scheduler(self.delay, self.reset)

    def reset(self) -> None:
        self._set(False)


def copy_text(
    text: str,
    *,
    writer: Optional[Callable[[str], None]] = None,
) -> None:
    """Write `text` to the platform clipboard.

    Raises:
        ClipboardError: the clipboard backend is unavailable or the write failed
    """
    write = writer or pyperclip.copy
    try:
        write(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(f"clipboard unavailable: {e}") from e
    except Exception as e:
        raise ClipboardError(f"clipboard write failed: {e}") from e
    logger.debug("Copied %d character(s) to clipboard", len(text))
