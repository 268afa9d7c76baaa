"""Batch confirmation service.

Confirms several reservations in one pass. A failure on one reservation
is logged and recorded, and the remaining reservations are still
processed.
"""

from typing import Iterable

from pydantic import BaseModel, Field

from hotel_reservations.exceptions import HotelReservationError
from hotel_reservations.logging import get_logger
from hotel_reservations.services.reservation_coordinator import ReservationCoordinator

logger = get_logger(__name__)


class BatchConfirmationResult(BaseModel):
    """Outcome of a batch confirmation."""

    confirmed: list[str] = Field(default_factory=list)
    failed: dict[str, str] = Field(
        default_factory=dict, description="Reservation ID -> error message"
    )

    @property
    def success(self) -> bool:
        return not self.failed


class BatchConfirmationService:
    """Confirms reservations one by one, tolerating per-item failures."""

    def __init__(self, coordinator: ReservationCoordinator):
        self.coordinator = coordinator

    def confirm_all(self, reservation_ids: Iterable[str]) -> BatchConfirmationResult:
        """
        Confirm each reservation in order.

        Args:
            reservation_ids: Reservations to confirm

        Returns:
            BatchConfirmationResult listing confirmed and failed ids
        """
        result = BatchConfirmationResult()

        for reservation_id in reservation_ids:
            try:
                self.coordinator.confirm_reservation(reservation_id)
            except HotelReservationError as e:
                logger.warning(
                    "batch_confirmation_item_failed",
                    reservation_id=reservation_id,
                    error_type=type(e).__name__,
                    error=str(e),
                )
                result.failed[reservation_id] = str(e)
                continue

            result.confirmed.append(reservation_id)

        logger.info(
            "batch_confirmation_completed",
            confirmed=len(result.confirmed),
            failed=len(result.failed),
        )
        return result

    def confirm_pending(self) -> BatchConfirmationResult:
        """Confirm every reservation that is still PENDING."""
        return self.confirm_all(
            [reservation.id for reservation in self.coordinator.pending_reservations()]
        )
