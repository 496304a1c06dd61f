"""Long-polling update receiver.

:class:`UpdatePoller` repeatedly calls getUpdates, sorts each batch by
``update_id``, hands the updates to a handler one at a time and then moves its
cursor past the batch.  Fetch errors are reported to the same handler as
``handler(None, error)`` and polling carries on with the cursor unchanged.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Iterator, List, Optional, Tuple

from telegrambot.enums import ALL_UPDATE_TYPES
from telegrambot.exceptions import RequestCancelledException
from telegrambot.models import Update
from telegrambot.params import GetUpdatesParams
from telegrambot.repeater import Repeater

logger = logging.getLogger(__name__)

DEFAULT_POLL_TIMEOUT = 2

UpdateHandler = Callable[[Optional[Update], Optional[Exception]], None]


def sort_updates(updates: List[Update]) -> List[Update]:
    """Return *updates* ordered by ascending ``update_id``."""
    return sorted(updates, key=lambda update: update.update_id)


def default_params(timeout: int = DEFAULT_POLL_TIMEOUT) -> GetUpdatesParams:
    """getUpdates parameters requesting every update kind."""
    return GetUpdatesParams(timeout=timeout, allowed_updates=list(ALL_UPDATE_TYPES))


class UpdatePoller:
    """Fetch-sort-deliver-advance loop over getUpdates.

    Args:
        api: Client used to call getUpdates.
        params: Base getUpdates parameters (timeout, limit, allowed_updates).
            Their ``offset`` seeds the cursor; afterwards the poller owns it.
    """

    def __init__(self, api, params: Optional[GetUpdatesParams] = None) -> None:
        self._api = api
        self._params = (params or default_params()).model_copy()
        self._offset: Optional[int] = self._params.offset
        self._stop_event = threading.Event()
        self._repeater: Optional[Repeater] = None

    # ── Cursor ───────────────────────────────────────────────────────────────

    @property
    def offset(self) -> Optional[int]:
        """Next ``update_id`` to request, ``None`` before the first batch."""
        return self._offset

    @offset.setter
    def offset(self, value: Optional[int]) -> None:
        if self._repeater is not None:
            raise RuntimeError("offset can only be seeded before the poller starts")
        self._offset = value

    def _advance(self, batch: List[Update]) -> None:
        next_offset = batch[-1].update_id + 1
        if self._offset is None or next_offset > self._offset:
            self._offset = next_offset

    # ── Fetch & deliver ──────────────────────────────────────────────────────

    def _fetch(self) -> List[Update]:
        params = self._params.model_copy(update={"offset": self._offset})
        return self._api.get_updates(params, cancel_event=self._stop_event)

    def _deliver(self, handler: UpdateHandler, update: Optional[Update], error: Optional[Exception]) -> None:
        # A failing handler must not end the polling session.
        try:
            handler(update, error)
        except Exception as exc:
            logger.error(
                "Update handler raised",
                extra={"update_id": update.update_id if update else None, "error": str(exc)},
                exc_info=True,
            )

    def poll_once(self, handler: UpdateHandler) -> int:
        """Run one fetch-sort-deliver-advance cycle.

        Errors raised by the fetch or by *handler* never propagate: fetch
        errors are passed to *handler* and handler errors are logged.

        Returns:
            Number of updates delivered.
        """
        try:
            batch = self._fetch()
        except RequestCancelledException:
            return 0
        except Exception as exc:
            logger.warning("getUpdates failed", extra={"offset": self._offset, "error": str(exc)})
            self._deliver(handler, None, exc)
            return 0

        if not batch:
            return 0

        batch = sort_updates(batch)
        for update in batch:
            self._deliver(handler, update, None)
        self._advance(batch)
        logger.debug("Delivered updates", extra={"update_count": len(batch), "offset": self._offset})
        return len(batch)

    def iter_updates(self) -> Iterator[Tuple[Optional[Update], Optional[Exception]]]:
        """Yield ``(update, error)`` pairs in delivery order until :meth:`stop`.

        The cursor advances once every update of a batch has been consumed, so
        a batch abandoned midway is fetched again.
        """
        while not self._stop_event.is_set():
            try:
                batch = self._fetch()
            except RequestCancelledException:
                return
            except Exception as exc:
                logger.warning("getUpdates failed", extra={"offset": self._offset, "error": str(exc)})
                yield None, exc
                continue
            if not batch:
                continue
            batch = sort_updates(batch)
            for update in batch:
                yield update, None
            self._advance(batch)

    # ── Lifecycle ────────────────────────────────────────────────────────────

    @property
    def running(self) -> bool:
        return self._repeater is not None and self._repeater.running

    def start(self, handler: UpdateHandler) -> "UpdatePoller":
        """Start polling on a background thread, delivering to *handler*."""
        if self._repeater is not None or self._stop_event.is_set():
            raise RuntimeError("poller already started or stopped")
        logger.info("Update poller starting", extra={"offset": self._offset})
        self._repeater = Repeater(0, lambda: self._cycle(handler), name="update-poller")
        self._repeater.start()
        return self

    def _cycle(self, handler: UpdateHandler) -> None:
        if self._stop_event.is_set():
            self._repeater.stop()
            return
        self.poll_once(handler)

    def stop(self) -> None:
        """Stop polling; waits for an in-flight delivery to finish.  Idempotent."""
        first = not self._stop_event.is_set()
        self._stop_event.set()
        if self._repeater is not None:
            self._repeater.stop()
        if first:
            logger.info("Update poller stopped", extra={"offset": self._offset})


def start_receiving_updates(
    api,
    receiver: UpdateHandler,
    params: Optional[GetUpdatesParams] = None,
) -> UpdatePoller:
    """Start polling every update kind and deliver them to *receiver*.

    Returns:
        The running poller; call :meth:`UpdatePoller.stop` to end it.
    """
    return UpdatePoller(api, params).start(receiver)
