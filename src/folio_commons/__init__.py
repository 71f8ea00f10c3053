"""
folio_commons – Shared engines for the folio blog / portfolio / dashboard site.

Import path convention::

    from folio_commons.application.search import FilterConfig, FilteredData
    from folio_commons.application.view_tracking import ViewReporter, ViewTracker
    from folio_commons.application.view_tracking.ingest import ViewIngestor
    from folio_commons.adapters.http import HttpxHttpClient
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
