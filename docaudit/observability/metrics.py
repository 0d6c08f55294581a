"""Prometheus metrics for the audit handlers.

Labels are limited to collection name, audit mode and outcome so the
cardinality stays bounded by the number of audited collections.
"""

from prometheus_client import Counter, Histogram

EVENTS_PROCESSED = Counter(
    "docaudit_events_processed_total",
    "Change events handled, by outcome",
    labelnames=["collection", "mode", "outcome"],
)

RECORDS_WRITTEN = Counter(
    "docaudit_records_written_total",
    "Audit records appended to the audit store",
    labelnames=["collection", "mode"],
)

WRITE_FAILURES = Counter(
    "docaudit_write_failures_total",
    "Failed batch writes to the audit store",
    labelnames=["collection", "mode"],
)

RECORDS_PER_EVENT = Histogram(
    "docaudit_records_per_event",
    "Number of field change records produced per change event",
    labelnames=["operation_type"],
    buckets=(0, 1, 2, 5, 10, 20, 50, 100, 250),
)
