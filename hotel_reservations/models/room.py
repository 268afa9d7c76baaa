"""Room domain model."""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field


class RoomCategory(str, Enum):
    """Room category enumeration."""

    STANDARD = "STANDARD"
    DOUBLE = "DOUBLE"
    SUITE = "SUITE"
    PRESIDENTIAL_SUITE = "PRESIDENTIAL_SUITE"

    @property
    def nightly_rate(self) -> Decimal:
        """Fixed price per night for this category."""
        return _NIGHTLY_RATES[self]

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_NIGHTLY_RATES = {
    RoomCategory.STANDARD: Decimal("80.00"),
    RoomCategory.DOUBLE: Decimal("120.00"),
    RoomCategory.SUITE: Decimal("200.00"),
    RoomCategory.PRESIDENTIAL_SUITE: Decimal("500.00"),
}

_DISPLAY_NAMES = {
    RoomCategory.STANDARD: "Standard Room",
    RoomCategory.DOUBLE: "Double Room",
    RoomCategory.SUITE: "Suite",
    RoomCategory.PRESIDENTIAL_SUITE: "Presidential Suite",
}


class Room(BaseModel):
    """Room entity registered in the catalog.

    ``available`` is the only booking gate. It is flipped by reservation
    transitions through the catalog and never checked against dates.
    """

    number: str = Field(min_length=1, description="Room number, unique within the catalog")
    category: RoomCategory
    available: bool = Field(default=True)

    @property
    def nightly_rate(self) -> Decimal:
        return self.category.nightly_rate

    def is_available(self) -> bool:
        return self.available

    def mark_occupied(self) -> None:
        self.available = False

    def mark_available(self) -> None:
        self.available = True

    @classmethod
    def standard(cls, number: str) -> "Room":
        return cls(number=number, category=RoomCategory.STANDARD)

    @classmethod
    def double(cls, number: str) -> "Room":
        return cls(number=number, category=RoomCategory.DOUBLE)

    @classmethod
    def suite(cls, number: str) -> "Room":
        return cls(number=number, category=RoomCategory.SUITE)

    @classmethod
    def presidential_suite(cls, number: str) -> "Room":
        return cls(number=number, category=RoomCategory.PRESIDENTIAL_SUITE)

    def __str__(self) -> str:
        state = "Available" if self.available else "Occupied"
        return (
            f"{self.category.display_name} #{self.number} "
            f"(${self.nightly_rate:.2f}/night) - {state}"
        )
