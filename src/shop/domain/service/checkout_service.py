"""Domain service: Checkout.

Turns the cart into an Order in five steps:

    IDLE -> AWAITING_PAYMENT_CHOICE -> PAYING -> ORDER_CREATED -> LOGGED -> IDLE

The cart is cleared only once the order has been built and appended to
the registry.  A failed payment, order construction or registry append
puts the workflow back in AWAITING_PAYMENT_CHOICE with the cart intact.
A failed audit write is reported on the receipt but does not undo the
order, which is already committed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from shop.domain.exceptions import AuditLogError, CheckoutStateError
from shop.domain.model.cart import Cart
from shop.domain.model.order import Order
from shop.domain.model.payment import PaymentMethod
from shop.domain.repository.audit_log import AuditLog
from shop.domain.repository.order_registry import OrderRegistry

logger = logging.getLogger(__name__)


class CheckoutState(Enum):
    IDLE = "IDLE"
    AWAITING_PAYMENT_CHOICE = "AWAITING_PAYMENT_CHOICE"
    PAYING = "PAYING"
    ORDER_CREATED = "ORDER_CREATED"
    LOGGED = "LOGGED"


@dataclass(frozen=True)
class CheckoutReceipt:
    """Outcome of a completed checkout."""

    order: Order
    audit_error: str | None = None


class CheckoutService:

    def __init__(
        self,
        cart: Cart,
        order_registry: OrderRegistry,
        audit_log: AuditLog,
    ) -> None:
        self._cart = cart
        self._order_registry = order_registry
        self._audit_log = audit_log
        self._state = CheckoutState.IDLE

    @property
    def state(self) -> CheckoutState:
        return self._state

    # --- Transitions ----------------------------------------------------------

    def begin(self) -> bool:
        """Start a checkout.

        Returns False (and stays IDLE) when the cart is empty.
        """
        self._require(CheckoutState.IDLE, "start checkout")
        if self._cart.is_empty():
            logger.info("Checkout requested with an empty cart; nothing to do")
            return False
        self._transition(CheckoutState.AWAITING_PAYMENT_CHOICE)
        return True

    def cancel(self) -> None:
        """Abandon a checkout that is waiting for a payment choice."""
        self._require(CheckoutState.AWAITING_PAYMENT_CHOICE, "cancel checkout")
        self._transition(CheckoutState.IDLE)

    def pay(self, method: PaymentMethod) -> CheckoutReceipt:
        """Pay for the cart with *method* and record the resulting order.

        Re-raises whatever the payment, the Order factory or the registry
        raised, after returning to AWAITING_PAYMENT_CHOICE.
        """
        self._require(CheckoutState.AWAITING_PAYMENT_CHOICE, "pay")

        # Phase 1: pay and commit the order.  Nothing here touches the cart.
        self._transition(CheckoutState.PAYING)
        try:
            total = self._cart.total()
            method.execute(total)
            order = Order.create(
                order_id=self._order_registry.next_id(),
                cart_lines=self._cart.lines(),
                payment_method=method.display_name,
            )
            self._order_registry.append(order)
        except Exception:
            logger.warning("Checkout with %s failed; cart left unchanged", method.display_name)
            self._transition(CheckoutState.AWAITING_PAYMENT_CHOICE)
            raise
        self._transition(CheckoutState.ORDER_CREATED)
        logger.info("Order %s registered (%s, %s)", order.id, order.total, order.payment_method)

        # Phase 2: best-effort audit record, then release the cart.
        audit_error: str | None = None
        try:
            self._audit_log.record_checkout(order)
        except AuditLogError as exc:
            audit_error = str(exc)
            logger.warning("Audit record for order %s not written: %s", order.id, exc)
        self._transition(CheckoutState.LOGGED)

        self._cart.clear()
        self._transition(CheckoutState.IDLE)
        return CheckoutReceipt(order=order, audit_error=audit_error)

    def checkout(self, method: PaymentMethod) -> CheckoutReceipt | None:
        """Run a whole checkout in one call. Returns None for an empty cart.

        If the payment fails the checkout is abandoned (back to IDLE) and
        the error re-raised, so the call can simply be repeated.
        """
        if not self.begin():
            return None
        try:
            return self.pay(method)
        except Exception:
            self.cancel()
            raise

    # --- Internal helpers -----------------------------------------------------

    def _require(self, expected: CheckoutState, action: str) -> None:
        if self._state != expected:
            raise CheckoutStateError(
                f"Cannot {action} — checkout is {self._state.value}, "
                f"expected {expected.value}"
            )

    def _transition(self, new_state: CheckoutState) -> None:
        logger.debug("Checkout %s -> %s", self._state.value, new_state.value)
        self._state = new_state
