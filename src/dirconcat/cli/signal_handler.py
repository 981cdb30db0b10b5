"""Interrupt tracking for the dirconcat CLI.

SIGPIPE and SIGINT do not terminate the process directly. The handlers only record
that the signal arrived; SafeWriter refuses further writes once either one is
recorded, and the entry point turns the recorded signal into the shell's
conventional exit status.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Optional

# 128 + signal number
SIGPIPE_EXIT_CODE = 141
SIGINT_EXIT_CODE = 130


class SignalHandler:
    """Records SIGPIPE and SIGINT for the writer and the entry point to act on.

    Each handler fires once. After recording its signal it reinstalls the handler
    that was active when this object was created, so a second Ctrl+C interrupts the
    process the usual way.

    Attributes:
        sigpipe_received: Set once the reader of stdout has gone away.
        sigint_received: Set once the user pressed Ctrl+C.
        original_sigpipe_handler: SIGPIPE disposition to restore.
        original_sigint_handler: SIGINT disposition to restore.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler = signal.getsignal(signal.SIGPIPE)
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)

    def _record(self, event: Event, signum: int, original: Any) -> None:
        event.set()
        signal.signal(signum, original)

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self._record(self.sigpipe_received, signal.SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self._record(self.sigint_received, signal.SIGINT, self.original_sigint_handler)

    def interrupted(self) -> bool:
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_code(self) -> Optional[int]:
        """Exit status for the recorded signal, or None if neither arrived.

        SIGPIPE takes precedence when both were received.
        """
        if self.sigpipe_received.is_set():
            return SIGPIPE_EXIT_CODE
        if self.sigint_received.is_set():
            return SIGINT_EXIT_CODE
        return None


signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the recording handlers of the module-level ``signal_handler``."""
    signal.signal(signal.SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Point stdout at the null device after an interruption.

    Runs at exit so that flushing a dead pipe during interpreter shutdown does not
    print a second error.
    """
    if not signal_handler.interrupted():
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
