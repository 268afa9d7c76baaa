"""Unit tests for Room model and room catalog."""

from decimal import Decimal

import pytest

from hotel_reservations.exceptions import RoomUnavailableError
from hotel_reservations.models.room import Room, RoomCategory
from hotel_reservations.storage.room_catalog import RoomCatalog


@pytest.mark.parametrize(
    "factory,category,rate",
    [
        (Room.standard, RoomCategory.STANDARD, Decimal("80.00")),
        (Room.double, RoomCategory.DOUBLE, Decimal("120.00")),
        (Room.suite, RoomCategory.SUITE, Decimal("200.00")),
        (Room.presidential_suite, RoomCategory.PRESIDENTIAL_SUITE, Decimal("500.00")),
    ],
)
def test_nightly_rate_fixed_per_category(factory, category, rate):
    """Test each category constructor sets category and rate."""
    room = factory("101")

    assert room.category == category
    assert room.nightly_rate == rate
    assert room.is_available() is True


def test_mark_occupied_and_available_are_idempotent():
    """Test availability setters can be called repeatedly."""
    room = Room.standard("101")

    room.mark_occupied()
    room.mark_occupied()
    assert room.is_available() is False

    room.mark_available()
    room.mark_available()
    assert room.is_available() is True


def test_room_str_shows_state():
    """Test human-readable room summary."""
    room = Room.suite("301")
    assert str(room) == "Suite #301 ($200.00/night) - Available"

    room.mark_occupied()
    assert "Occupied" in str(room)


def test_room_number_required():
    """Test room number cannot be empty."""
    with pytest.raises(ValueError):
        Room(number="", category=RoomCategory.STANDARD)


def test_catalog_preserves_insertion_order_and_first_match():
    """Test catalog lookups return the first room with a number."""
    catalog = RoomCatalog()
    first = catalog.create(Room.standard("101"))
    catalog.create(Room.double("201"))
    duplicate = catalog.create(Room.suite("101"))

    assert [room.number for room in catalog.list_all()] == ["101", "201", "101"]
    assert catalog.get_by_id("101") is first
    assert catalog.get_by_id("101") is not duplicate
    assert catalog.get_by_id("999") is None
    assert "201" in catalog
    assert len(catalog) == 3


def test_catalog_list_is_a_snapshot():
    """Test mutating the returned list does not touch the catalog."""
    catalog = RoomCatalog()
    catalog.create(Room.standard("101"))

    rooms = catalog.list_all()
    rooms.clear()

    assert len(catalog) == 1


def test_catalog_available_filters_occupied_rooms():
    """Test only available rooms are listed."""
    catalog = RoomCatalog()
    occupied = catalog.create(Room.standard("101"))
    catalog.create(Room.standard("102"))
    occupied.mark_occupied()

    assert [room.number for room in catalog.available()] == ["102"]


def test_catalog_resolve_unknown_room():
    """Test resolving a number outside the catalog fails."""
    catalog = RoomCatalog()
    catalog.create(Room.standard("101"))

    with pytest.raises(RoomUnavailableError) as exc_info:
        catalog.resolve(["101", "999"])

    assert exc_info.value.room_number == "999"
