"""Reservation domain model and lifecycle state machine."""

from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import TYPE_CHECKING, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, model_validator

from hotel_reservations.exceptions import (
    InvalidRangeError,
    InvalidStateError,
    PaymentFailedError,
    RoomUnavailableError,
)
from hotel_reservations.logging import get_logger
from hotel_reservations.models.customer import Customer
from hotel_reservations.models.payment import PaymentMethod
from hotel_reservations.models.room import Room

if TYPE_CHECKING:
    from hotel_reservations.storage.room_catalog import RoomCatalog

logger = get_logger(__name__)

PREMIUM_DISCOUNT_RATE = Decimal("0.15")
_CENTS = Decimal("0.01")


class ReservationStatus(str, Enum):
    """Reservation status enumeration."""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"


class PricingPolicy(str, Enum):
    """How the total amount is computed."""

    STANDARD = "STANDARD"
    PREMIUM = "PREMIUM"


class Perks(BaseModel):
    """Non-monetary benefits included with a premium reservation."""

    breakfast: bool = True
    room_service_24h: bool = True
    lounge_access: bool = True

    def active(self) -> list[str]:
        """Names of the perks that are switched on."""
        return [name for name, enabled in self.model_dump().items() if enabled]


class Reservation(BaseModel):
    """Reservation entity.

    Rooms are referenced by number; the catalog owns the Room objects and
    is passed into every transition that flips availability. ``standard`` and
    ``premium`` copy the payment method so each reservation owns its own. Premium
    reservations differ only in ``pricing``, ``discount_rate`` and
    ``perks``; every transition behaves the same for both.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    customer: Customer
    room_numbers: list[str] = Field(min_length=1, description="Keys into the room catalog")
    nightly_subtotal: Decimal = Field(ge=0, description="Sum of the rooms' nightly rates")
    check_in: date
    check_out: date
    payment_method: PaymentMethod
    status: ReservationStatus = Field(default=ReservationStatus.PENDING)
    pricing: PricingPolicy = Field(default=PricingPolicy.STANDARD)
    discount_rate: Decimal = Field(default=Decimal("0"), ge=0, lt=1)
    perks: Optional[Perks] = None
    total_amount: Decimal = Field(default=Decimal("0"), ge=0)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @model_validator(mode="after")
    def validate_dates_and_price(self) -> "Reservation":
        """Ensure check_in < check_out and derive total_amount."""
        if self.check_in >= self.check_out:
            raise InvalidRangeError(self.check_in, self.check_out)
        self.total_amount = self.calculate_total()
        return self

    @classmethod
    def standard(
        cls,
        customer: Customer,
        rooms: list[Room],
        check_in: date,
        check_out: date,
        payment_method: PaymentMethod,
    ) -> Reservation:
        """Build a Pending reservation billed at the full nightly rates."""
        return cls(
            customer=customer,
            room_numbers=[room.number for room in rooms],
            nightly_subtotal=sum((room.nightly_rate for room in rooms), Decimal("0")),
            check_in=check_in,
            check_out=check_out,
            payment_method=payment_method.model_copy(),
        )

    @classmethod
    def premium(
        cls,
        customer: Customer,
        rooms: list[Room],
        check_in: date,
        check_out: date,
        payment_method: PaymentMethod,
        discount_rate: Decimal = PREMIUM_DISCOUNT_RATE,
    ) -> Reservation:
        """Build a Pending premium reservation with discount and perks."""
        return cls(
            customer=customer,
            room_numbers=[room.number for room in rooms],
            nightly_subtotal=sum((room.nightly_rate for room in rooms), Decimal("0")),
            check_in=check_in,
            check_out=check_out,
            payment_method=payment_method.model_copy(),
            pricing=PricingPolicy.PREMIUM,
            discount_rate=discount_rate,
            perks=Perks(),
        )

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days

    @property
    def is_premium(self) -> bool:
        return self.pricing == PricingPolicy.PREMIUM

    def calculate_total(self) -> Decimal:
        """Nightly subtotal times nights, less the discount for premium pricing."""
        subtotal = self.nightly_subtotal * self.nights
        if self.is_premium:
            subtotal = subtotal * (Decimal("1") - self.discount_rate)
        return subtotal.quantize(_CENTS, rounding=ROUND_HALF_UP)

    def confirm(self, catalog: RoomCatalog) -> None:
        """
        Lock the rooms and charge the payment method.

        On a declined charge the rooms are released again and the status
        stays PENDING, so the reservation can be confirmed again later or
        cancelled.

        Raises:
            InvalidStateError: If the reservation is not PENDING
            RoomUnavailableError: If any room is already occupied
            PaymentFailedError: If the payment method declines the charge
        """
        if self.status != ReservationStatus.PENDING:
            raise InvalidStateError(self.id, self.status.value, "confirm")

        rooms = catalog.resolve(self.room_numbers)
        for room in rooms:
            if not room.is_available():
                raise RoomUnavailableError(room.number)

        for room in rooms:
            room.mark_occupied()

        if not self.payment_method.charge(self.total_amount):
            for room in rooms:
                room.mark_available()
            logger.warning(
                "reservation_payment_failed",
                reservation_id=self.id,
                amount=str(self.total_amount),
                payment_method=self.payment_method.display_name,
            )
            raise PaymentFailedError(self.id, self.payment_method.display_name)

        self.status = ReservationStatus.CONFIRMED
        self.updated_at = datetime.utcnow()
        logger.info(
            "reservation_confirmed",
            reservation_id=self.id,
            amount=str(self.total_amount),
        )

        if self.is_premium and self.perks is not None:
            logger.info(
                "premium_perks_activated",
                reservation_id=self.id,
                perks=self.perks.active(),
            )

    def cancel(self, catalog: RoomCatalog) -> None:
        """
        Release the rooms and mark the reservation CANCELLED.

        Raises:
            InvalidStateError: If the reservation is already CANCELLED
        """
        if self.status == ReservationStatus.CANCELLED:
            raise InvalidStateError(self.id, self.status.value, "cancel")

        for room in catalog.resolve(self.room_numbers):
            room.mark_available()

        self.status = ReservationStatus.CANCELLED
        self.updated_at = datetime.utcnow()
        logger.info("reservation_cancelled", reservation_id=self.id)

    def change_dates(self, new_check_in: date, new_check_out: date) -> None:
        """
        Move the stay and recompute the total.

        Room availability is not re-checked for the new range.

        Raises:
            InvalidStateError: If the reservation is CANCELLED
            InvalidRangeError: If new_check_in is not before new_check_out
        """
        if self.status == ReservationStatus.CANCELLED:
            raise InvalidStateError(self.id, self.status.value, "change dates of")
        if new_check_in >= new_check_out:
            raise InvalidRangeError(new_check_in, new_check_out)

        self.check_in = new_check_in
        self.check_out = new_check_out
        self.total_amount = self.calculate_total()
        self.updated_at = datetime.utcnow()
        logger.info(
            "reservation_dates_changed",
            reservation_id=self.id,
            check_in=new_check_in.isoformat(),
            check_out=new_check_out.isoformat(),
            total_amount=str(self.total_amount),
        )

    def summary(self, currency_symbol: str = "$") -> str:
        """One-line human-readable description."""
        text = (
            f"Reservation ID: {self.id} | Customer: {self.customer.name} | "
            f"Rooms: {len(self.room_numbers)} | Check-in: {self.check_in} | "
            f"Check-out: {self.check_out} | Status: {self.status.value} | "
            f"Total: {currency_symbol}{self.total_amount:.2f}"
        )
        if self.is_premium:
            text += f" [PREMIUM - Discount: {self.discount_rate * 100:.0f}%]"
        return text

    def __str__(self) -> str:
        return self.summary()
