"""Application pagination – offset page primitive."""
from folio_commons.application.pagination.page import Page

__all__ = ["Page"]
