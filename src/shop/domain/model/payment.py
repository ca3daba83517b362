"""Payment methods accepted at checkout.

The set is closed: Cash, Card and GCash.  No money actually moves; a
payment is acknowledged by recording it in the application log.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum

from shop.domain.exceptions import ValidationError
from shop.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class PaymentMethod(ABC):
    """How a checkout is paid for.

    ``execute`` may raise ``PaymentError``; the checkout workflow treats
    that as recoverable and lets the customer choose again.
    """

    display_name: str

    @abstractmethod
    def execute(self, amount: Money) -> None:
        """Perform the payment of *amount*."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.display_name!r}>"


class CashPayment(PaymentMethod):
    display_name = "Cash"

    def execute(self, amount: Money) -> None:
        logger.info("Paid %s in cash", amount)


class CardPayment(PaymentMethod):
    display_name = "Credit / Debit Card"

    def execute(self, amount: Money) -> None:
        logger.info("Paid %s using Credit/Debit Card", amount)


class GCashPayment(PaymentMethod):
    display_name = "GCash"

    def execute(self, amount: Money) -> None:
        logger.info("Paid %s using GCash", amount)


class PaymentOption(Enum):
    """Menu choices for payment, numbered as presented to the customer."""

    CASH = 1
    CARD = 2
    GCASH = 3

    @property
    def display_name(self) -> str:
        return _METHODS[self].display_name

    def create(self) -> PaymentMethod:
        return _METHODS[self]()

    @staticmethod
    def from_choice(choice: int) -> PaymentOption:
        try:
            return PaymentOption(choice)
        except ValueError as exc:
            raise ValidationError(
                f"Invalid payment choice {choice!r}; expected 1-{len(PaymentOption)}"
            ) from exc


_METHODS: dict[PaymentOption, type[PaymentMethod]] = {
    PaymentOption.CASH: CashPayment,
    PaymentOption.CARD: CardPayment,
    PaymentOption.GCASH: GCashPayment,
}
