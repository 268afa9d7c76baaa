"""In-memory reservation store."""

from typing import Optional

from hotel_reservations.models.reservation import Reservation
from hotel_reservations.storage.repository_base import RepositoryBase


class ReservationStore(RepositoryBase[Reservation]):
    """Reservations keyed by id, iterated in creation order."""

    def __init__(self) -> None:
        self._reservations: dict[str, Reservation] = {}

    def get_by_id(self, id: str) -> Optional[Reservation]:
        return self._reservations.get(id)

    def create(self, entity: Reservation) -> Reservation:
        self._reservations[entity.id] = entity
        return entity

    def list_all(self) -> list[Reservation]:
        return list(self._reservations.values())

    def __len__(self) -> int:
        return len(self._reservations)
