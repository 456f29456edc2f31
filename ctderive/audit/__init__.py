"""Audit helpers: comparator call counting and tracing."""

from ctderive.audit.counting import CallMetrics, CountingComparator, instrument
