"""In-memory storage for rooms and reservations."""

from .repository_base import RepositoryBase
from .reservation_store import ReservationStore
from .room_catalog import RoomCatalog

__all__ = ["RepositoryBase", "ReservationStore", "RoomCatalog"]
