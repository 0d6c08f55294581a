"""Auditor abstract interface."""

from abc import ABC, abstractmethod

from docaudit.audit.models import AuditResult, ChangeEvent


class Auditor(ABC):
    """One audit strategy: turns a change event into stored audit data."""

    mode: str

    @abstractmethod
    async def audit(self, event: ChangeEvent) -> AuditResult:
        """Audit one change event.

        Never raises for store failures; those come back as error results.
        """
        pass
