"""Application search – in-memory filter/search/pagination engine."""
from folio_commons.application.search.engine import FilteredData, as_mapping
from folio_commons.application.search.predicates import (
    DRAFT_LABELS,
    PUBLISHED_LABELS,
    FilterPredicate,
    FilterPredicates,
    default_predicates,
    equals,
    published_status_predicate,
)
from folio_commons.application.search.query import FilterConfig, QueryState
from folio_commons.application.search.values import unique_values

__all__ = [
    "DRAFT_LABELS",
    "FilterConfig",
    "FilterPredicate",
    "FilterPredicates",
    "FilteredData",
    "PUBLISHED_LABELS",
    "QueryState",
    "as_mapping",
    "default_predicates",
    "equals",
    "published_status_predicate",
    "unique_values",
]
