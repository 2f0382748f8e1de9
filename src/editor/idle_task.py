import time
from typing import Callable


class IdleTask:
    """
    A cancellable task that becomes due after a period with no activity.

    Nothing runs in the background: the owner calls `is_due` whenever it gets
    the chance (for example from a GUI timer) and runs the work itself.  Each
    call to `touch` pushes the deadline back.  Once the task has fired it stays
    quiet until the next activity.
    """

    def __init__(self, timeout_ms: int = 500, clock: Callable[[], float] = time.monotonic) -> None:
        """
        Initialize the task.

        Args:
            timeout_ms: Milliseconds without activity before the task is due
            clock: Monotonic clock returning seconds
        """
        self._timeout = timeout_ms / 1000.0
        self._clock = clock
        self._last_activity = clock()
        self._armed = True
        self._stopped = False

    @property
    def timeout_ms(self) -> int:
        """Milliseconds without activity before the task is due."""
        return int(self._timeout * 1000)

    @property
    def stopped(self) -> bool:
        """True once the task has been stopped for good."""
        return self._stopped

    def touch(self) -> None:
        """Record activity, rescheduling the task."""
        if self._stopped:
            return

        self._last_activity = self._clock()
        self._armed = True

    def cancel(self) -> None:
        """Cancel the pending run; the next activity schedules it again."""
        self._armed = False

    def stop(self) -> None:
        """Stop the task permanently."""
        self._stopped = True
        self._armed = False

    def is_due(self) -> bool:
        """
        Check if the task should run now.

        Returns:
            True if the task is scheduled and its idle period has passed
        """
        if not self._armed:
            return False

        return self._clock() - self._last_activity >= self._timeout

    def fire(self) -> None:
        """Mark the task as run."""
        self._armed = False

    def time_remaining(self) -> float | None:
        """
        Get the time left until the task is due.

        Returns:
            Seconds until due (0 if already due), or None if nothing is scheduled
        """
        if not self._armed:
            return None

        return max(0.0, self._timeout - (self._clock() - self._last_activity))
