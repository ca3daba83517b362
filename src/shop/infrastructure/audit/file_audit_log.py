"""Append-only text file implementation of AuditLog.

One line per checkout, e.g.::

    [2026-10-19 10:15:02] Order ID: ORD-000001 has been successfully checked out and paid using Cash.
"""

from __future__ import annotations

from pathlib import Path

from shop.domain.exceptions import AuditLogError
from shop.domain.model.order import Order
from shop.domain.repository.audit_log import AuditLog

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class FileAuditLog(AuditLog):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    @property
    def file_path(self) -> Path:
        return self._file_path

    def record_checkout(self, order: Order) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            with self._file_path.open("a", encoding="utf-8") as fh:
                fh.write(self.format_record(order) + "\n")
        except OSError as exc:
            raise AuditLogError(
                f"Unable to write audit log {self._file_path}: {exc.strerror or exc}"
            ) from exc

    @staticmethod
    def format_record(order: Order) -> str:
        timestamp = order.created_at.astimezone().strftime(TIMESTAMP_FORMAT)
        return (
            f"[{timestamp}] Order ID: {order.id} has been successfully "
            f"checked out and paid using {order.payment_method}."
        )
