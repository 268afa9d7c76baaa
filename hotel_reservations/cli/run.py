"""Demo entry point: walks one hotel through the full reservation lifecycle."""

from datetime import date
from typing import Callable

from hotel_reservations.config import Settings, load_settings
from hotel_reservations.logging import get_logger, setup_logging
from hotel_reservations.models import (
    BankTransferPayment,
    CreditCardPayment,
    CryptocurrencyPayment,
    Customer,
    DebitCardPayment,
    ReservationReport,
    Room,
)
from hotel_reservations.services import BatchConfirmationService, ReservationCoordinator

Echo = Callable[[str], None]

RULE = "-" * 80


def register_rooms(coordinator: ReservationCoordinator) -> None:
    """Register the demo hotel's rooms."""
    for number in ("101", "102", "103"):
        coordinator.register_room(Room.standard(number))
    for number in ("201", "202"):
        coordinator.register_room(Room.double(number))
    for number in ("301", "302"):
        coordinator.register_room(Room.suite(number))
    for number in ("401", "402"):
        coordinator.register_room(Room.presidential_suite(number))


def _room(coordinator: ReservationCoordinator, number: str) -> Room:
    room = coordinator.find_room_by_number(number)
    if room is None:
        raise LookupError(f"Room {number} is not registered")
    return room


def run_demo(
    coordinator: ReservationCoordinator,
    echo: Echo = print,
    currency_symbol: str = "$",
) -> ReservationReport:
    """
    Run the demo scenario against a coordinator.

    Args:
        coordinator: Coordinator to populate (normally empty)
        echo: Sink for the human-readable step output
        currency_symbol: Symbol used when printing amounts

    Returns:
        Final reservation report
    """
    echo("\n1. REGISTERING ROOMS")
    echo(RULE)
    register_rooms(coordinator)
    for room in coordinator.catalog.list_all():
        echo(str(room))

    echo("\n2. CREATING CUSTOMERS")
    echo(RULE)
    juan = Customer(name="Juan Perez", email="juan@email.com", phone="1234567890", document_number="12345678")
    maria = Customer(name="Maria Garcia", email="maria@email.com", phone="0987654321", document_number="87654321")
    carlos = Customer(name="Carlos Lopez", email="carlos@email.com", phone="5555555555", document_number="55555555")
    for customer in (juan, maria, carlos):
        echo(str(customer))

    echo("\n3. CREATING RESERVATIONS WITH DIFFERENT PAYMENT METHODS")
    echo(RULE)
    credit_card = CreditCardPayment(
        card_number="4111111111111111", holder_name=juan.name, expiry="12/25", cvv="123"
    )
    first = coordinator.create_reservation(
        juan,
        [_room(coordinator, "101"), _room(coordinator, "102")],
        date(2025, 12, 15),
        date(2025, 12, 20),
        credit_card,
    )
    second = coordinator.create_reservation(
        maria,
        [_room(coordinator, "201")],
        date(2025, 12, 18),
        date(2025, 12, 22),
        DebitCardPayment(card_number="5555555555555555", holder_name=maria.name, pin="1234"),
    )
    third = coordinator.create_reservation(
        carlos,
        [_room(coordinator, "301")],
        date(2025, 12, 25),
        date(2025, 12, 27),
        CryptocurrencyPayment(currency="Bitcoin", wallet_address="1A1z7agoat2TP3z4JwHbqjK8Fs5P5xH3Z1"),
    )
    fourth = coordinator.create_reservation(
        juan,
        [_room(coordinator, "103")],
        date(2025, 12, 30),
        date(2026, 1, 5),
        BankTransferPayment(account_number="12345678901234567890", bank_name="National Bank", bank_code="0001"),
    )
    for reservation in (first, second, third, fourth):
        echo(f"{reservation.summary(currency_symbol)} via {reservation.payment_method.describe()}")

    echo("\n4. CREATING A PREMIUM RESERVATION")
    echo(RULE)
    premium = coordinator.create_premium_reservation(
        juan,
        [_room(coordinator, "401"), _room(coordinator, "402")],
        date(2026, 1, 10),
        date(2026, 1, 15),
        credit_card,
    )
    echo(premium.summary(currency_symbol))
    echo(f"  Perks: {', '.join(premium.perks.active())}")

    echo("\n5. CONFIRMING RESERVATIONS")
    echo(RULE)
    batch = BatchConfirmationService(coordinator).confirm_all(
        [r.id for r in (first, second, third, fourth, premium)]
    )
    for reservation_id in batch.confirmed:
        echo(f"Confirmed: {reservation_id}")
    for reservation_id, error in batch.failed.items():
        echo(f"Failed: {reservation_id} ({error})")

    echo("\n6. CHANGING RESERVATION DATES")
    echo(RULE)
    echo(f"Before: {first.summary(currency_symbol)}")
    coordinator.change_reservation_dates(first.id, date(2025, 12, 16), date(2025, 12, 21))
    echo(f"After:  {first.summary(currency_symbol)}")

    echo("\n7. QUERYING RESERVATIONS")
    echo(RULE)
    echo("Confirmed reservations:")
    for reservation in coordinator.confirmed_reservations():
        echo(f"  - {reservation.summary(currency_symbol)}")
    echo(f"Reservations for {juan.name}:")
    for reservation in coordinator.reservations_for_customer(juan):
        echo(f"  - {reservation.summary(currency_symbol)}")

    echo("\n8. CANCELLING A RESERVATION")
    echo(RULE)
    coordinator.cancel_reservation(second.id)
    echo(f"Cancelled: {second.id}")

    report = coordinator.summary()
    echo("\n9. SUMMARY")
    echo(RULE)
    echo(f"Total reservations: {report.total_reservations}")
    echo(f"Confirmed reservations: {report.confirmed}")
    echo(f"Cancelled reservations: {report.cancelled}")
    echo(f"Total revenue: {currency_symbol}{report.total_revenue:.2f}")
    return report


def main(settings: Settings | None = None) -> None:
    """Configure logging and run the demo scenario."""
    settings = settings or load_settings()
    setup_logging(settings.log_level)
    logger = get_logger(__name__)

    logger.info("Starting hotel reservations demo", environment=settings.environment)

    coordinator = ReservationCoordinator(
        premium_discount_rate=settings.premium_discount_rate
    )
    report = run_demo(coordinator, currency_symbol=settings.currency_symbol)

    logger.info(
        "demo_completed",
        reservations=report.total_reservations,
        revenue=str(report.total_revenue),
    )


if __name__ == "__main__":
    main()
