"""View tracking – ViewTracker, one tracking subject per mounted consumer."""
from __future__ import annotations

from typing import TYPE_CHECKING

from folio_commons.application.view_tracking.item import ViewItem

if TYPE_CHECKING:
    from folio_commons.application.view_tracking.reporter import ViewReporter

__all__ = ["ViewTracker"]


class ViewTracker:
    """Report one ``(type, id, path)`` view at most once over its lifetime.

    With ``auto_track`` the view is reported on construction ("mount");
    otherwise the owner calls :meth:`track`, e.g. when a list item scrolls
    into view. Global dedupe by key happens in the :class:`ViewReporter`,
    independently of this instance's flag.
    """

    def __init__(
        self,
        reporter: "ViewReporter",
        type_: str,
        id_: int = 0,
        *,
        path: str,
        auto_track: bool = True,
    ) -> None:
        self._reporter = reporter
        self._item = ViewItem(type=type_, id=id_, path=path)
        self._tracked = False
        if auto_track:
            self.track()

    @property
    def item(self) -> ViewItem:
        return self._item

    @property
    def has_tracked(self) -> bool:
        return self._tracked

    def track(self) -> bool:
        """Enqueue the view on the first call; later calls are no-ops.

        Returns ``True`` when this call enqueued.
        """
        if self._tracked:
            return False
        self._reporter.enqueue(self._item)
        self._tracked = True
        return True
