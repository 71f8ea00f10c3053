"""View tracking – ViewItem value object and report constants."""
from __future__ import annotations

import dataclasses
from typing import Any

VIEW_API_URL = "/api/view/report"
REPORT_INTERVAL = 3.0  # seconds

__all__ = ["REPORT_INTERVAL", "VIEW_API_URL", "ViewItem", "make_key"]


def make_key(type_: str, id_: int, path: str) -> str:
    """Composite dedupe key ``type:id:path``."""
    return f"{type_}:{id_}:{path}"


@dataclasses.dataclass(frozen=True)
class ViewItem:
    """One observation of a resource (``blog``, ``moment``, ``work``, ``page``) at a route path.

    ``id`` is 0 for page-level views.
    """

    type: str
    id: int = 0
    path: str = ""

    @property
    def key(self) -> str:
        return make_key(self.type, self.id, self.path)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "id": self.id, "path": self.path}
