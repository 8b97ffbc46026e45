"""
Tick Timer
==========

Cancellable fixed-cadence timer driving one session's ticks.
"""

import threading


class TickTimer:
    """
    Blocks the calling thread one interval per wait().

    cancel() may be called from any thread, any number of times; a
    pending wait() returns immediately.
    """

    def __init__(self, interval: float):
        self.interval = interval
        self._cancelled = threading.Event()

    def wait(self) -> bool:
        """
        Sleep one interval.

        Returns:
            True if the next tick is due, False once cancelled
        """
        return not self._cancelled.wait(self.interval)

    def cancel(self):
        """Stop the timer."""
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()
