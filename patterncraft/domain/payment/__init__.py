"""Payment bounded context."""

from .payments import (
    CreditCardPayment,
    NetBankingPayment,
    Payment,
    PaymentFactory,
    PaymentType,
    UpiPayment,
)

__all__ = [
    "Payment",
    "PaymentType",
    "PaymentFactory",
    "CreditCardPayment",
    "UpiPayment",
    "NetBankingPayment",
]
