"""Structured audit logging for reservation lifecycle actions.

Every state change of a room or reservation leaves one ``audit_event``
line so the booking history can be reconstructed from the logs.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from hotel_reservations.logging import get_logger

logger = get_logger(__name__)


class AuditEventType(str, Enum):
    """Types of auditable events."""

    # Catalog
    ROOM_REGISTERED = "room_registered"

    # Reservation lifecycle
    RESERVATION_CREATED = "reservation_created"
    RESERVATION_CONFIRMED = "reservation_confirmed"
    RESERVATION_CANCELLED = "reservation_cancelled"
    RESERVATION_DATES_CHANGED = "reservation_dates_changed"
    PREMIUM_PERKS_ACTIVATED = "premium_perks_activated"

    # Payments
    PAYMENT_FAILED = "payment_failed"


class AuditLogger:
    """Centralized audit logging service."""

    @staticmethod
    def log_event(
        event_type: AuditEventType,
        actor_id: str,
        resource_type: str,
        resource_id: str,
        action: str,
        success: bool = True,
        metadata: Optional[dict[str, Any]] = None,
        error: Optional[str] = None,
    ) -> None:
        """
        Log an auditable event with structured context.

        Args:
            event_type: Type of audit event
            actor_id: Customer document number, or "system" for catalog changes
            resource_type: Type of resource (room, reservation)
            resource_id: Room number or reservation ID
            action: Human-readable action description
            success: Whether the action succeeded
            metadata: Additional context (amounts, dates, payment method)
            error: Error message if action failed
        """
        audit_entry = {
            "event_type": event_type.value,
            "actor_id": actor_id,
            "resource_type": resource_type,
            "resource_id": resource_id,
            "action": action,
            "success": success,
            "timestamp": datetime.utcnow().isoformat(),
            "metadata": metadata or {},
        }

        if error:
            audit_entry["error"] = error

        logger.info(
            "audit_event",
            **audit_entry,
        )

    @staticmethod
    def log_room_registered(room_number: str, category: str, nightly_rate: Decimal) -> None:
        """Log room registration in the catalog."""
        AuditLogger.log_event(
            event_type=AuditEventType.ROOM_REGISTERED,
            actor_id="system",
            resource_type="room",
            resource_id=room_number,
            action=f"Registered room {room_number}",
            metadata={"category": category, "nightly_rate": str(nightly_rate)},
        )

    @staticmethod
    def log_reservation_created(
        actor_id: str,
        reservation_id: str,
        room_numbers: list[str],
        check_in: date,
        check_out: date,
        total_amount: Decimal,
        pricing: str,
    ) -> None:
        """Log reservation creation."""
        AuditLogger.log_event(
            event_type=AuditEventType.RESERVATION_CREATED,
            actor_id=actor_id,
            resource_type="reservation",
            resource_id=reservation_id,
            action=f"Created {pricing.lower()} reservation",
            metadata={
                "room_numbers": room_numbers,
                "check_in": check_in.isoformat(),
                "check_out": check_out.isoformat(),
                "total_amount": str(total_amount),
                "pricing": pricing,
            },
        )

    @staticmethod
    def log_reservation_confirmed(
        actor_id: str,
        reservation_id: str,
        amount: Decimal,
        payment_method: str,
    ) -> None:
        """Log successful confirmation and charge."""
        AuditLogger.log_event(
            event_type=AuditEventType.RESERVATION_CONFIRMED,
            actor_id=actor_id,
            resource_type="reservation",
            resource_id=reservation_id,
            action="Reservation confirmed",
            metadata={"amount": str(amount), "payment_method": payment_method},
        )

    @staticmethod
    def log_payment_failed(
        actor_id: str,
        reservation_id: str,
        amount: Decimal,
        payment_method: str,
    ) -> None:
        """Log a declined charge."""
        AuditLogger.log_event(
            event_type=AuditEventType.PAYMENT_FAILED,
            actor_id=actor_id,
            resource_type="reservation",
            resource_id=reservation_id,
            action="Payment declined, rooms released",
            success=False,
            metadata={"amount": str(amount), "payment_method": payment_method},
            error="Payment method declined the charge",
        )

    @staticmethod
    def log_reservation_cancelled(
        actor_id: str,
        reservation_id: str,
        previous_status: str,
    ) -> None:
        """Log reservation cancellation."""
        AuditLogger.log_event(
            event_type=AuditEventType.RESERVATION_CANCELLED,
            actor_id=actor_id,
            resource_type="reservation",
            resource_id=reservation_id,
            action="Reservation cancelled",
            metadata={"previous_status": previous_status},
        )

    @staticmethod
    def log_dates_changed(
        actor_id: str,
        reservation_id: str,
        changes: dict[str, Any],
    ) -> None:
        """Log a date change and the resulting total."""
        AuditLogger.log_event(
            event_type=AuditEventType.RESERVATION_DATES_CHANGED,
            actor_id=actor_id,
            resource_type="reservation",
            resource_id=reservation_id,
            action="Reservation dates changed",
            metadata={"changes": changes},
        )

    @staticmethod
    def log_perks_activated(
        actor_id: str,
        reservation_id: str,
        perks: list[str],
    ) -> None:
        """Log premium perk activation after confirmation."""
        AuditLogger.log_event(
            event_type=AuditEventType.PREMIUM_PERKS_ACTIVATED,
            actor_id=actor_id,
            resource_type="reservation",
            resource_id=reservation_id,
            action="Premium perks activated",
            metadata={"perks": perks},
        )
