"""Exceptions raised by the reservation lifecycle."""

from __future__ import annotations

from datetime import date
from typing import Optional


class HotelReservationError(Exception):
    """Base exception for all reservation errors."""


class InvalidRangeError(HotelReservationError):
    """Raised when check-in is not strictly before check-out."""

    def __init__(self, check_in: date, check_out: date):
        self.check_in = check_in
        self.check_out = check_out
        super().__init__(
            f"Check-in {check_in} must be before check-out {check_out}"
        )


class RoomUnavailableError(HotelReservationError):
    """Raised when a requested room is already occupied."""

    def __init__(self, room_number: str):
        self.room_number = room_number
        super().__init__(f"Room {room_number} is not available")


class InvalidStateError(HotelReservationError):
    """Raised when a transition is not allowed from the current status."""

    def __init__(self, reservation_id: str, status: str, action: str):
        self.reservation_id = reservation_id
        self.status = status
        self.action = action
        super().__init__(
            f"Cannot {action} reservation {reservation_id} in status {status}"
        )


class PaymentFailedError(HotelReservationError):
    """Raised when the payment method declines the charge."""

    def __init__(self, reservation_id: str, payment_method: Optional[str] = None):
        self.reservation_id = reservation_id
        self.payment_method = payment_method
        super().__init__(f"Payment failed for reservation {reservation_id}")


class ReservationNotFoundError(HotelReservationError):
    """Raised when no reservation exists for the given id."""

    def __init__(self, reservation_id: str):
        self.reservation_id = reservation_id
        super().__init__(f"Reservation not found: {reservation_id}")
