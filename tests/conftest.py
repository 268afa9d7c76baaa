"""Pytest configuration and shared fixtures."""

import sys
from datetime import date
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from hotel_reservations.models import (
    CreditCardPayment,
    Customer,
    Room,
)
from hotel_reservations.services import ReservationCoordinator
from hotel_reservations.storage import RoomCatalog


@pytest.fixture
def customer():
    """Sample customer fixture."""
    return Customer(
        name="Juan Perez",
        email="juan@email.com",
        phone="1234567890",
        document_number="12345678",
    )


@pytest.fixture
def other_customer():
    """Second customer fixture."""
    return Customer(
        name="Maria Garcia",
        email="maria@email.com",
        phone="0987654321",
        document_number="87654321",
    )


@pytest.fixture
def valid_card():
    """Credit card whose charges succeed."""
    return CreditCardPayment(
        card_number="4111111111111111",
        holder_name="Juan Perez",
        expiry="12/25",
        cvv="123",
    )


@pytest.fixture
def declined_card():
    """Credit card whose charges are declined (number too short)."""
    return CreditCardPayment(
        card_number="4111",
        holder_name="Juan Perez",
        expiry="12/25",
        cvv="123",
    )


@pytest.fixture
def check_in():
    return date(2025, 12, 15)


@pytest.fixture
def check_out():
    return date(2025, 12, 20)


@pytest.fixture
def catalog():
    """Catalog with one room per category."""
    catalog = RoomCatalog()
    catalog.create(Room.standard("101"))
    catalog.create(Room.double("201"))
    catalog.create(Room.suite("301"))
    catalog.create(Room.presidential_suite("401"))
    return catalog


@pytest.fixture
def coordinator():
    """Coordinator with a small registered catalog."""
    coordinator = ReservationCoordinator()
    coordinator.register_room(Room.standard("101"))
    coordinator.register_room(Room.standard("102"))
    coordinator.register_room(Room.double("201"))
    coordinator.register_room(Room.suite("301"))
    coordinator.register_room(Room.presidential_suite("401"))
    return coordinator
