"""Cooperative shutdown: a cancellation token set by signals and polled by the idle loop."""

import logging
import signal
import threading
from types import FrameType
from typing import Any

logger = logging.getLogger(__name__)


class CancellationToken:
    """One-shot flag requesting shutdown, safe to set from a signal handler."""

    def __init__(self) -> None:
        self._event = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    def wait(self, timeout: float) -> bool:
        """Block up to timeout seconds; return True once cancelled."""
        return self._event.wait(timeout)


def install_signal_handlers(token: CancellationToken) -> dict[int, Any]:
    """Cancel token on SIGINT or SIGTERM. Must be called from the main thread.

    Returns:
        The handlers that were replaced, for restore_signal_handlers()
    """

    def _handle(signum: int, _frame: FrameType | None) -> None:
        logger.info("Received %s, shutting down", signal.Signals(signum).name)
        token.cancel()

    previous: dict[int, Any] = {}
    for signum in (signal.SIGINT, signal.SIGTERM):
        previous[signum] = signal.signal(signum, _handle)
    return previous


def restore_signal_handlers(previous: dict[int, Any]) -> None:
    for signum, handler in previous.items():
        if handler is not None:
            signal.signal(signum, handler)


def run_until_cancelled(token: CancellationToken, poll_seconds: float) -> None:
    """Idle until token is cancelled, checking once per poll interval.

    In-flight bus handlers are never interrupted; they run on the bus
    runtime's threads.
    """
    while not token.wait(poll_seconds):
        pass
