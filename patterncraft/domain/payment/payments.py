"""Payment methods and the factory that selects between them."""

from __future__ import annotations

import time
from dataclasses import dataclass, fields
from enum import Enum
from typing import Dict, Tuple, Type, Union

from typing_extensions import assert_never

from patterncraft.domain.core.exceptions import (
    MissingRequiredFieldError,
    OutOfRangeError,
    UnsupportedVariantError,
)
from patterncraft.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class PaymentType(str, Enum):
    """Supported payment types."""

    CREDIT_CARD = "credit_card"
    UPI = "upi"
    NETBANKING = "netbanking"

    @classmethod
    def parse(cls, value: str) -> PaymentType:
        """Look up a payment type case-insensitively."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise UnsupportedVariantError("payment type", value) from None


def _millis() -> int:
    return int(time.time() * 1000)


def _require_fields(payment: object) -> None:
    for f in fields(payment):
        if not getattr(payment, f.name):
            raise MissingRequiredFieldError(f.name)


def _check_amount(amount: float) -> None:
    if amount < 0:
        raise OutOfRangeError("amount", amount, ">= 0")


@dataclass(frozen=True)
class CreditCardPayment:
    card_number: str
    cvv: str

    def __post_init__(self):
        _require_fields(self)

    def process(self, amount: float) -> bool:
        _check_amount(amount)
        logger.info("Processing credit card payment", amount=amount, currency="USD")
        return True

    def transaction_id(self) -> str:
        return f"CC-{_millis()}"


@dataclass(frozen=True)
class UpiPayment:
    upi_id: str

    def __post_init__(self):
        _require_fields(self)

    def process(self, amount: float) -> bool:
        _check_amount(amount)
        logger.info("Processing UPI payment", amount=amount, currency="INR")
        return True

    def transaction_id(self) -> str:
        return f"UPI-{_millis()}"


@dataclass(frozen=True)
class NetBankingPayment:
    account_number: str
    ifsc: str

    def __post_init__(self):
        _require_fields(self)

    def process(self, amount: float) -> bool:
        _check_amount(amount)
        logger.info("Processing net banking payment", amount=amount, currency="INR")
        return True

    def transaction_id(self) -> str:
        return f"NB-{_millis()}"


Payment = Union[CreditCardPayment, UpiPayment, NetBankingPayment]

_PAYMENT_CLASSES: Dict[PaymentType, Type] = {
    PaymentType.CREDIT_CARD: CreditCardPayment,
    PaymentType.UPI: UpiPayment,
    PaymentType.NETBANKING: NetBankingPayment,
}


class PaymentFactory:
    """Creates and processes payments without callers naming concrete classes."""

    @staticmethod
    def required_fields(payment_type: Union[str, PaymentType]) -> Tuple[str, ...]:
        payment_class = _PAYMENT_CLASSES[PaymentType.parse(payment_type)]
        return tuple(f.name for f in fields(payment_class))

    @staticmethod
    def create_payment(payment_type: Union[str, PaymentType], *details: str) -> Payment:
        """
        Create a payment from positional details.

        Args:
            payment_type: One of ``credit_card``, ``upi`` or ``netbanking``
            *details: Field values in declaration order; extras are ignored

        Raises:
            UnsupportedVariantError: Unknown payment type
            MissingRequiredFieldError: Too few details for the selected type
        """
        parsed = PaymentType.parse(payment_type)
        names = PaymentFactory.required_fields(parsed)
        if len(details) < len(names):
            raise MissingRequiredFieldError(names[len(details)])

        payment = _PAYMENT_CLASSES[parsed](*details[: len(names)])
        logger.debug("Created payment", payment_type=parsed.value)
        return payment

    @staticmethod
    def process_payment(payment: Payment, amount: float) -> str:
        if not isinstance(payment, tuple(_PAYMENT_CLASSES.values())):
            raise UnsupportedVariantError("payment", type(payment).__name__)

        if isinstance(payment, CreditCardPayment):
            payment.process(amount)
            return f"Credit card processed: {payment.card_number}"
        elif isinstance(payment, UpiPayment):
            payment.process(amount)
            return f"UPI processed: {payment.upi_id}"
        elif isinstance(payment, NetBankingPayment):
            payment.process(amount)
            return f"Net banking processed: {payment.account_number}"
        else:
            assert_never(payment)
