"""Background thread that runs a function repeatedly until stopped."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Repeater:
    """Run *fn* on a daemon thread, waiting *interval* seconds between runs.

    The first run happens immediately unless *wait_first* is set.
    :meth:`stop` is idempotent, wakes the thread from its wait and joins it,
    so a run in progress completes before ``stop`` returns.  Calling ``stop``
    from inside *fn* is allowed.

    An exception escaping *fn* is logged and ends the loop.
    """

    def __init__(
        self,
        interval: float,
        fn: Callable[[], None],
        name: Optional[str] = None,
        wait_first: bool = False,
    ) -> None:
        self._interval = interval
        self._fn = fn
        self._stop_event = threading.Event()
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None
        self._name = name or "repeater"
        self._wait_first = wait_first

    @property
    def stop_event(self) -> threading.Event:
        """Event set once :meth:`stop` has been requested."""
        return self._stop_event

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> "Repeater":
        with self._lock:
            if self._thread is not None:
                raise RuntimeError(f"{self._name} already started")
            self._thread = threading.Thread(target=self._run, name=self._name, daemon=True)
            self._thread.start()
        return self

    def _run(self) -> None:
        if self._wait_first and self._stop_event.wait(self._interval):
            return
        while not self._stop_event.is_set():
            try:
                self._fn()
            except Exception as exc:
                logger.error(
                    "Repeated function raised, stopping",
                    extra={"repeater": self._name, "error": str(exc)},
                    exc_info=True,
                )
                self._stop_event.set()
                raise
            if self._stop_event.wait(self._interval):
                break

    def stop(self) -> None:
        self._stop_event.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
