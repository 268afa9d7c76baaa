"""Integration tests for batch confirmation."""

from datetime import date
from decimal import Decimal

from hotel_reservations.models import ReservationStatus
from hotel_reservations.services import BatchConfirmationService

DEC_15 = date(2025, 12, 15)
DEC_20 = date(2025, 12, 20)


def test_batch_continues_after_failures(coordinator, customer, valid_card, declined_card):
    """Test one failing reservation does not stop the rest of the batch."""
    good = coordinator.create_reservation(
        customer, [coordinator.find_room_by_number("101")], DEC_15, DEC_20, valid_card
    )
    declined = coordinator.create_reservation(
        customer, [coordinator.find_room_by_number("102")], DEC_15, DEC_20, declined_card
    )
    also_good = coordinator.create_premium_reservation(
        customer, [coordinator.find_room_by_number("301")], DEC_15, DEC_20, valid_card
    )

    result = BatchConfirmationService(coordinator).confirm_all(
        [good.id, declined.id, "unknown-id", also_good.id]
    )

    assert result.confirmed == [good.id, also_good.id]
    assert set(result.failed) == {declined.id, "unknown-id"}
    assert "Payment failed" in result.failed[declined.id]
    assert "not found" in result.failed["unknown-id"]
    assert result.success is False
    assert declined.status == ReservationStatus.PENDING
    assert coordinator.total_revenue() == Decimal("1250.00")


def test_batch_records_invalid_state(coordinator, customer, valid_card):
    """Test confirming an already confirmed reservation is recorded as a failure."""
    reservation = coordinator.create_reservation(
        customer, [coordinator.find_room_by_number("101")], DEC_15, DEC_20, valid_card
    )
    service = BatchConfirmationService(coordinator)
    service.confirm_all([reservation.id])

    result = service.confirm_all([reservation.id])

    assert result.confirmed == []
    assert reservation.id in result.failed


def test_confirm_pending_only_touches_pending(coordinator, customer, valid_card):
    """Test confirm_pending skips confirmed and cancelled reservations."""
    pending = coordinator.create_reservation(
        customer, [coordinator.find_room_by_number("101")], DEC_15, DEC_20, valid_card
    )
    cancelled = coordinator.create_reservation(
        customer, [coordinator.find_room_by_number("102")], DEC_15, DEC_20, valid_card
    )
    coordinator.cancel_reservation(cancelled.id)

    result = BatchConfirmationService(coordinator).confirm_pending()

    assert result.confirmed == [pending.id]
    assert result.failed == {}
    assert result.success is True
    assert cancelled.status == ReservationStatus.CANCELLED


def test_empty_batch():
    """Test an empty batch succeeds trivially."""
    from hotel_reservations.services import ReservationCoordinator

    result = BatchConfirmationService(ReservationCoordinator()).confirm_all([])

    assert result.confirmed == []
    assert result.success is True
