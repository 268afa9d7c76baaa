"""Room catalog: the single owner of Room instances."""

from typing import Optional

from hotel_reservations.exceptions import RoomUnavailableError
from hotel_reservations.models.room import Room
from hotel_reservations.storage.repository_base import RepositoryBase


class RoomCatalog(RepositoryBase[Room]):
    """Insertion-ordered room collection keyed by room number.

    Duplicate numbers are not rejected; lookups return the first match.
    """

    def __init__(self) -> None:
        self._rooms: list[Room] = []

    def get_by_id(self, id: str) -> Optional[Room]:
        return next((room for room in self._rooms if room.number == id), None)

    def create(self, entity: Room) -> Room:
        self._rooms.append(entity)
        return entity

    def list_all(self) -> list[Room]:
        return list(self._rooms)

    def available(self) -> list[Room]:
        return [room for room in self._rooms if room.is_available()]

    def resolve(self, room_numbers: list[str]) -> list[Room]:
        """
        Map room numbers to catalog rooms, preserving order.

        Raises:
            RoomUnavailableError: If a number is not in the catalog
        """
        rooms = []
        for number in room_numbers:
            room = self.get_by_id(number)
            if room is None:
                raise RoomUnavailableError(number)
            rooms.append(room)
        return rooms

    def __len__(self) -> int:
        return len(self._rooms)

    def __contains__(self, room_number: object) -> bool:
        return any(room.number == room_number for room in self._rooms)
