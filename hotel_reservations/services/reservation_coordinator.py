"""Reservation coordinator service.

Owns the room catalog and the reservation store. Validates requests,
delegates lifecycle transitions to the reservations and answers the
query/reporting operations. Mutating operations are serialized behind a
single re-entrant lock so one coordinator can be shared between threads.
"""

from datetime import date
from decimal import Decimal
from threading import RLock
from typing import Optional

from hotel_reservations.exceptions import (
    InvalidRangeError,
    PaymentFailedError,
    ReservationNotFoundError,
    RoomUnavailableError,
)
from hotel_reservations.logging import get_logger
from hotel_reservations.logging.audit import AuditLogger
from hotel_reservations.models.customer import Customer
from hotel_reservations.models.payment import PaymentMethod
from hotel_reservations.models.report import ReservationReport
from hotel_reservations.models.reservation import (
    PREMIUM_DISCOUNT_RATE,
    Reservation,
    ReservationStatus,
)
from hotel_reservations.models.room import Room
from hotel_reservations.storage.reservation_store import ReservationStore
from hotel_reservations.storage.room_catalog import RoomCatalog

logger = get_logger(__name__)


class ReservationCoordinator:
    """Central service for the reservation lifecycle."""

    def __init__(
        self,
        catalog: Optional[RoomCatalog] = None,
        store: Optional[ReservationStore] = None,
        premium_discount_rate: Decimal = PREMIUM_DISCOUNT_RATE,
    ):
        """
        Initialize the coordinator.

        Args:
            catalog: Room catalog (a new empty one by default)
            store: Reservation store (a new empty one by default)
            premium_discount_rate: Discount applied to premium reservations
        """
        self.catalog = catalog if catalog is not None else RoomCatalog()
        self.store = store if store is not None else ReservationStore()
        self.premium_discount_rate = premium_discount_rate
        self._lock = RLock()

    # Catalog

    def register_room(self, room: Room) -> Room:
        """Add a room to the catalog. Duplicate numbers are the caller's problem."""
        with self._lock:
            self.catalog.create(room)

        AuditLogger.log_room_registered(room.number, room.category.value, room.nightly_rate)
        return room

    def find_room_by_number(self, number: str) -> Optional[Room]:
        return self.catalog.get_by_id(number)

    def available_rooms(self, check_in: date, check_out: date) -> list[Room]:
        """
        Rooms whose availability flag is set.

        The dates are accepted for API symmetry but not used: there is no
        per-date occupancy ledger.
        """
        return self.catalog.available()

    def rooms_for(self, reservation: Reservation) -> list[Room]:
        """Catalog rooms held by a reservation."""
        return self.catalog.resolve(reservation.room_numbers)

    # Creation

    def create_reservation(
        self,
        customer: Customer,
        rooms: list[Room],
        check_in: date,
        check_out: date,
        payment_method: PaymentMethod,
    ) -> Reservation:
        """
        Create a PENDING reservation at standard pricing.

        Rooms are not marked occupied until the reservation is confirmed.

        Raises:
            InvalidRangeError: If check_in is not before check_out
            RoomUnavailableError: If a room is occupied or not in the catalog
        """
        with self._lock:
            catalog_rooms = self._validate_request(rooms, check_in, check_out)
            reservation = Reservation.standard(
                customer, catalog_rooms, check_in, check_out, payment_method
            )
            return self._store(reservation)

    def create_premium_reservation(
        self,
        customer: Customer,
        rooms: list[Room],
        check_in: date,
        check_out: date,
        payment_method: PaymentMethod,
    ) -> Reservation:
        """Same as create_reservation, with premium discount and perks."""
        with self._lock:
            catalog_rooms = self._validate_request(rooms, check_in, check_out)
            reservation = Reservation.premium(
                customer,
                catalog_rooms,
                check_in,
                check_out,
                payment_method,
                discount_rate=self.premium_discount_rate,
            )
            return self._store(reservation)

    def _validate_request(
        self, rooms: list[Room], check_in: date, check_out: date
    ) -> list[Room]:
        """Check the request and return the catalog rooms it refers to."""
        if check_in >= check_out:
            logger.warning(
                "reservation_invalid_range",
                check_in=check_in.isoformat(),
                check_out=check_out.isoformat(),
            )
            raise InvalidRangeError(check_in, check_out)

        catalog_rooms = self.catalog.resolve([room.number for room in rooms])
        for room in catalog_rooms:
            if not room.is_available():
                logger.warning("reservation_room_unavailable", room_number=room.number)
                raise RoomUnavailableError(room.number)
        return catalog_rooms

    def _store(self, reservation: Reservation) -> Reservation:
        self.store.create(reservation)
        logger.info(
            "reservation_created",
            reservation_id=reservation.id,
            customer=reservation.customer.document_number,
            rooms=len(reservation.room_numbers),
            total_amount=str(reservation.total_amount),
            pricing=reservation.pricing.value,
        )
        AuditLogger.log_reservation_created(
            actor_id=reservation.customer.document_number,
            reservation_id=reservation.id,
            room_numbers=reservation.room_numbers,
            check_in=reservation.check_in,
            check_out=reservation.check_out,
            total_amount=reservation.total_amount,
            pricing=reservation.pricing.value,
        )
        return reservation

    # Lifecycle

    def find_reservation(self, reservation_id: str) -> Optional[Reservation]:
        return self.store.get_by_id(reservation_id)

    def _get_or_raise(self, reservation_id: str) -> Reservation:
        reservation = self.store.get_by_id(reservation_id)
        if reservation is None:
            logger.warning("reservation_not_found", reservation_id=reservation_id)
            raise ReservationNotFoundError(reservation_id)
        return reservation

    def confirm_reservation(self, reservation_id: str) -> Reservation:
        """
        Confirm a reservation: lock its rooms and charge its payment method.

        Errors from the reservation propagate unchanged.

        Raises:
            ReservationNotFoundError: If no reservation has this id
        """
        with self._lock:
            reservation = self._get_or_raise(reservation_id)
            actor = reservation.customer.document_number
            payment_name = reservation.payment_method.display_name

            try:
                reservation.confirm(self.catalog)
            except PaymentFailedError:
                AuditLogger.log_payment_failed(
                    actor, reservation.id, reservation.total_amount, payment_name
                )
                raise

            AuditLogger.log_reservation_confirmed(
                actor, reservation.id, reservation.total_amount, payment_name
            )
            if reservation.is_premium and reservation.perks is not None:
                AuditLogger.log_perks_activated(actor, reservation.id, reservation.perks.active())
            return reservation

    def change_reservation_dates(
        self,
        reservation_id: str,
        new_check_in: date,
        new_check_out: date,
    ) -> Reservation:
        """
        Move a reservation to new dates and recompute its total.

        Raises:
            ReservationNotFoundError: If no reservation has this id
        """
        with self._lock:
            reservation = self._get_or_raise(reservation_id)
            previous = {
                "check_in": reservation.check_in.isoformat(),
                "check_out": reservation.check_out.isoformat(),
                "total_amount": str(reservation.total_amount),
            }

            reservation.change_dates(new_check_in, new_check_out)

            AuditLogger.log_dates_changed(
                reservation.customer.document_number,
                reservation.id,
                changes={
                    "before": previous,
                    "after": {
                        "check_in": new_check_in.isoformat(),
                        "check_out": new_check_out.isoformat(),
                        "total_amount": str(reservation.total_amount),
                    },
                },
            )
            return reservation

    def cancel_reservation(self, reservation_id: str) -> Reservation:
        """
        Cancel a reservation and release its rooms.

        Raises:
            ReservationNotFoundError: If no reservation has this id
        """
        with self._lock:
            reservation = self._get_or_raise(reservation_id)
            previous_status = reservation.status.value

            reservation.cancel(self.catalog)

            AuditLogger.log_reservation_cancelled(
                reservation.customer.document_number, reservation.id, previous_status
            )
            return reservation

    # Queries

    def reservations_for_customer(self, customer: Customer) -> list[Reservation]:
        return [r for r in self.store.list_all() if r.customer == customer]

    def confirmed_reservations(self) -> list[Reservation]:
        return self._with_status(ReservationStatus.CONFIRMED)

    def pending_reservations(self) -> list[Reservation]:
        return self._with_status(ReservationStatus.PENDING)

    def _with_status(self, status: ReservationStatus) -> list[Reservation]:
        return [r for r in self.store.list_all() if r.status == status]

    def total_revenue(self) -> Decimal:
        """Sum of totals over confirmed reservations only."""
        return sum(
            (r.total_amount for r in self.confirmed_reservations()),
            Decimal("0"),
        )

    def all_reservations(self) -> list[Reservation]:
        """Snapshot of every reservation; mutating the list does not affect the store."""
        return self.store.list_all()

    def summary(self) -> ReservationReport:
        reservations = self.store.list_all()
        counts = {status: 0 for status in ReservationStatus}
        for reservation in reservations:
            counts[reservation.status] += 1

        return ReservationReport(
            total_reservations=len(reservations),
            pending=counts[ReservationStatus.PENDING],
            confirmed=counts[ReservationStatus.CONFIRMED],
            cancelled=counts[ReservationStatus.CANCELLED],
            total_revenue=self.total_revenue(),
        )
