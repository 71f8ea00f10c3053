"""Application – framework-agnostic building blocks used by the site's pages."""

from folio_commons.application.pagination import Page
from folio_commons.application.search import FilterConfig, FilteredData, FilterPredicates, QueryState, unique_values
from folio_commons.application.view_tracking import ViewItem, ViewReporter, ViewTracker, build_view_reporter

__all__ = [
    "FilterConfig",
    "FilterPredicates",
    "FilteredData",
    "Page",
    "QueryState",
    "ViewItem",
    "ViewReporter",
    "ViewTracker",
    "build_view_reporter",
    "unique_values",
]
