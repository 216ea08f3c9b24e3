# fitplanner/ticker.py
import logging
import threading
from typing import Callable

logger = logging.getLogger(__name__)


class TickHandle:
    def __init__(self):
        self._stop = threading.Event()
        self.thread = None

    @property
    def cancelled(self) -> bool:
        return self._stop.is_set()


class IntervalTicker:
    """
    Calls a callback once per interval on a daemon thread until cancelled.

    start(callback) -> handle, cancel(handle). No tick fires after cancel
    returns for a tick that has not already begun.
    """

    def __init__(self, interval: float = 1.0):
        self.interval = interval

    def start(self, callback: Callable[[], None]) -> TickHandle:
        handle = TickHandle()

        def _run():
            # Event.wait returns True once cancelled
            while not handle._stop.wait(self.interval):
                try:
                    callback()
                except Exception:
                    logger.exception("[ticker] tick callback failed")

        handle.thread = threading.Thread(target=_run, name="workout-ticker", daemon=True)
        handle.thread.start()
        return handle

    def cancel(self, handle: TickHandle) -> None:
        handle._stop.set()
