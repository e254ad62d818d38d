import threading
from collections.abc import Callable

from app.logging.logger import Log


class PeriodicTask:
    """Runs an action on a background thread with a fixed delay between runs.

    The first run happens right after `start()`. An exception in one run is
    logged and the timer keeps going. `stop()` wakes the thread and joins it;
    a run in progress is not interrupted.
    """

    def __init__(
        self,
        name: str,
        action: Callable[[], object],
        interval_seconds: float,
    ) -> None:
        self._name = name
        self._action = action
        self._interval_seconds = interval_seconds
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def name(self) -> str:
        return self._name

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_running():
            if self._stop.is_set():
                Log.warning(
                    f"Periodic task '{self._name}' is still finishing a run, not restarted"
                )
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._loop, name=self._name, daemon=True)
        self._thread.start()
        Log.info(f"Periodic task '{self._name}' started, interval {self._interval_seconds}s")

    def stop(self, timeout: float | None = None) -> None:
        """Signal the loop to end and wait up to `timeout` for it.

        If the current run outlives the timeout the thread handle is kept, so
        `start()` will not spawn a second loop next to it.
        """
        self._stop.set()
        if self._thread is not None and self._thread.is_alive():
            self._thread.join(timeout=timeout)
            if self._thread.is_alive():
                Log.warning(
                    f"Periodic task '{self._name}' still running after {timeout}s, stop pending"
                )
                return
        self._thread = None
        Log.info(f"Periodic task '{self._name}' stopped")

    def run_once(self) -> None:
        try:
            self._action()
        except Exception as exc:
            Log.exception(f"Periodic task '{self._name}' run failed: {exc}")

    def _loop(self) -> None:
        while not self._stop.is_set():
            self.run_once()
            self._stop.wait(self._interval_seconds)
