"""docaudit: audit trails derived from document change events."""

__version__ = "0.1.0"
