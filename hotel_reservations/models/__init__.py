"""Models package - Pydantic domain models."""

from .customer import Customer
from .payment import (
    BankTransferPayment,
    CreditCardPayment,
    CryptocurrencyPayment,
    DebitCardPayment,
    PaymentMethod,
)
from .report import ReservationReport
from .room import Room, RoomCategory
from .reservation import (
    PREMIUM_DISCOUNT_RATE,
    Perks,
    PricingPolicy,
    Reservation,
    ReservationStatus,
)

__all__ = [
    "BankTransferPayment",
    "CreditCardPayment",
    "CryptocurrencyPayment",
    "Customer",
    "DebitCardPayment",
    "PaymentMethod",
    "PREMIUM_DISCOUNT_RATE",
    "Perks",
    "PricingPolicy",
    "Reservation",
    "ReservationReport",
    "ReservationStatus",
    "Room",
    "RoomCategory",
]
