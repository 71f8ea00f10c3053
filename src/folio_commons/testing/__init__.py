"""Testing – doubles for consumers' own test suites."""

from folio_commons.testing.fakes import FakeClock, RecordingViewTransport

__all__ = ["FakeClock", "RecordingViewTransport"]
