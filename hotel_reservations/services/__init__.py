"""Services package."""

from .batch_confirmation import BatchConfirmationResult, BatchConfirmationService
from .reservation_coordinator import ReservationCoordinator

__all__ = [
    "BatchConfirmationResult",
    "BatchConfirmationService",
    "ReservationCoordinator",
]
