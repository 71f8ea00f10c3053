"""View tracking – ViewReporter, the process-wide batching queue.

Lifecycle::

    Idle ──enqueue──▶ Accumulating ──timer fires / flush_now──▶ Idle

The timer is armed once by the first enqueue after the queue was drained and
is never extended by later enqueues. A flush takes its snapshot and clears the
queue before any I/O, so views enqueued while a request is in flight start a
new cycle. A failed flush is logged and the batch dropped: no retry, no
re-enqueue.
"""
from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

from folio_commons.application.view_tracking.item import REPORT_INTERVAL, ViewItem
from folio_commons.application.view_tracking.transport import ViewTransport
from folio_commons.observability.logging import get_logger

if TYPE_CHECKING:
    from folio_commons.application.view_tracking.tracker import ViewTracker

__all__ = ["ViewReporter"]


class ViewReporter:
    """Coalesce view events by ``type:id:path`` and flush them in one request.

    Construct one per running client (composition root) and hand it to every
    :class:`ViewTracker`. Tests build a fresh instance per case.

    Parameters
    ----------
    transport:
        Delivers a flushed batch; see :class:`HttpViewTransport`.
    interval:
        Seconds between the first enqueue of a cycle and its flush.
    logger:
        structlog-style logger; defaults to ``get_logger(__name__)``.
    """

    def __init__(
        self,
        transport: ViewTransport,
        *,
        interval: float = REPORT_INTERVAL,
        logger: Any = None,
    ) -> None:
        self._transport = transport
        self._interval = interval
        self._log = logger or get_logger(__name__)
        self._pending: dict[str, ViewItem] = {}
        self._timer: asyncio.TimerHandle | None = None
        self._tasks: set[asyncio.Task[list[ViewItem]]] = set()

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def transport(self) -> ViewTransport:
        return self._transport

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def pending(self) -> tuple[ViewItem, ...]:
        return tuple(self._pending.values())

    @property
    def is_idle(self) -> bool:
        return not self._pending and self._timer is None

    # ------------------------------------------------------------------
    # Queue
    # ------------------------------------------------------------------

    def enqueue(self, item: ViewItem) -> None:
        """Queue *item* unless its key is already pending, and arm the timer.

        Outside a running event loop the item is still queued; the timer is
        armed by :meth:`start`, by the next enqueue made inside a loop, or
        ``flush_now`` drains it.
        """
        self._pending.setdefault(item.key, item)
        if self._timer is None:
            self._arm()

    def enqueue_view(self, type_: str, id_: int = 0, path: str = "") -> None:
        self.enqueue(ViewItem(type=type_, id=id_, path=path))

    def tracker(
        self,
        type_: str,
        id_: int = 0,
        *,
        path: str,
        auto_track: bool = True,
    ) -> "ViewTracker":
        """Build a :class:`ViewTracker` bound to this reporter."""
        from folio_commons.application.view_tracking.tracker import ViewTracker

        return ViewTracker(self, type_, id_, path=path, auto_track=auto_track)

    def start(self) -> None:
        """Arm the timer for views queued before an event loop was running.

        Call from inside the loop; a no-op when nothing is pending or the
        timer is already armed.
        """
        if self._pending and self._timer is None:
            self._arm()

    def _arm(self) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._log.info("view_report.timer_deferred", pending=len(self._pending))
            return
        self._timer = loop.call_later(self._interval, self._on_timer)

    def _on_timer(self) -> None:
        self._timer = None
        # fire-and-forget: flush_now never raises for transport failures
        task = asyncio.get_running_loop().create_task(self.flush_now())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    # ------------------------------------------------------------------
    # Flush
    # ------------------------------------------------------------------

    async def flush_now(self) -> list[ViewItem]:
        """Drain the queue and send it in one request; return the drained items."""
        self._cancel_timer()
        if not self._pending:
            return []

        items = list(self._pending.values())
        self._pending.clear()

        try:
            await self._transport.send(items)
        except Exception as exc:  # noqa: BLE001
            self._log.warning("view_report.flush_failed", count=len(items), error=repr(exc))
        else:
            self._log.debug("view_report.flushed", count=len(items))
        return items

    def reset(self) -> None:
        """Drop everything pending and disarm the timer."""
        self._cancel_timer()
        self._pending.clear()

    async def aclose(self) -> None:
        """Flush what is pending, wait for flushes in flight, then close the transport."""
        await self.flush_now()
        if self._tasks:
            await asyncio.gather(*self._tasks)
        close = getattr(self._transport, "aclose", None)
        if close is not None:
            await close()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
