"""Payment methods.

A closed set of three methods.  Charging is informational only; no money
moves anywhere, so a charge for a valid amount always succeeds.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from pos.domain.exceptions import InvalidSelectionError, ValidationError
from pos.domain.model.value_objects import Money


@dataclass(frozen=True)
class PaymentRecord:
    """How an amount was paid."""

    method_name: str
    amount: Money


class PaymentMethod(ABC):

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable label shown on orders and in the order log."""

    def charge(self, amount: Money) -> PaymentRecord:
        if not isinstance(amount, Money):
            raise ValidationError("Charge amount must be Money")
        return PaymentRecord(method_name=self.name, amount=amount)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CashPayment(PaymentMethod):

    @property
    def name(self) -> str:
        return "Cash"


class CardPayment(PaymentMethod):

    @property
    def name(self) -> str:
        return "Credit/Debit Card"


class GCashPayment(PaymentMethod):

    @property
    def name(self) -> str:
        return "GCash"


# Menu order: index 1 is the first entry.
PAYMENT_METHODS: tuple[type[PaymentMethod], ...] = (
    CashPayment,
    CardPayment,
    GCashPayment,
)


def payment_method_for(index: int) -> PaymentMethod:
    """Return the payment method for a 1-based menu index."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidSelectionError(f"Invalid payment selection: {index!r}")
    if not 1 <= index <= len(PAYMENT_METHODS):
        raise InvalidSelectionError(
            f"Invalid payment selection {index}; "
            f"choose 1 to {len(PAYMENT_METHODS)}"
        )
    return PAYMENT_METHODS[index - 1]()
