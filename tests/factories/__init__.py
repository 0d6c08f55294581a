"""Test factories for creating test data."""

from tests.factories.documents import nested_document
from tests.factories.events import FIXED_TIME, ChangeEventFactory

__all__ = [
    "ChangeEventFactory",
    "FIXED_TIME",
    "nested_document",
]
