"""Application service: Checkout use case.

Thin wrapper around the CheckoutService state machine that resolves the
customer's payment choice and maps the result to DTOs.  The interactive
CLI drives the steps one at a time (``begin`` / ``pay`` / ``cancel``) so
a declined payment can be retried with another method.
"""

from __future__ import annotations

from shop.application.dto import CheckoutResultDTO, order_to_dto
from shop.domain.model.payment import PaymentMethod, PaymentOption
from shop.domain.service.checkout_service import CheckoutReceipt, CheckoutService


class CheckoutHandler:

    def __init__(self, checkout_service: CheckoutService) -> None:
        self._service = checkout_service

    def begin(self) -> bool:
        """Returns False when there is nothing in the cart to check out."""
        return self._service.begin()

    def pay(self, payment: PaymentOption | PaymentMethod) -> CheckoutResultDTO:
        receipt = self._service.pay(self._resolve(payment))
        return self._to_dto(receipt)

    def cancel(self) -> None:
        self._service.cancel()

    def handle(self, payment: PaymentOption | PaymentMethod) -> CheckoutResultDTO | None:
        """One-shot checkout. Returns None for an empty cart."""
        receipt = self._service.checkout(self._resolve(payment))
        if receipt is None:
            return None
        return self._to_dto(receipt)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _resolve(payment: PaymentOption | PaymentMethod) -> PaymentMethod:
        if isinstance(payment, PaymentOption):
            return payment.create()
        return payment

    @staticmethod
    def _to_dto(receipt: CheckoutReceipt) -> CheckoutResultDTO:
        return CheckoutResultDTO(
            order=order_to_dto(receipt.order),
            audit_error=receipt.audit_error,
        )
