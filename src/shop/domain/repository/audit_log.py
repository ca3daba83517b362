"""Abstract audit log: one record per successful checkout."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.order import Order


class AuditLog(ABC):

    @abstractmethod
    def record_checkout(self, order: Order) -> None:
        """Append a record for *order*.

        Raises AuditLogError if the record could not be written.
        """
