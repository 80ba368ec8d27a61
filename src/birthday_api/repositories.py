from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from threading import RLock
from typing import List, Optional

from .errors import NotFoundError
from .models import BirthdayEntity
from .schemas import BirthdayCreate

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class BirthdayRepository(ABC):
    """Abstract repository contract for birthday record storage backends."""

    @abstractmethod
    def create(self, data: BirthdayCreate) -> BirthdayEntity:
        """Create and return a new BirthdayEntity with a fresh id."""

    @abstractmethod
    def get(self, birthday_id: int) -> Optional[BirthdayEntity]:
        """Return a BirthdayEntity by id, or None if not found."""

    @abstractmethod
    def update(self, birthday_id: int, data: BirthdayCreate) -> BirthdayEntity:
        """Replace all mutable fields of a record. Raise NotFoundError if the id is absent."""

    @abstractmethod
    def delete(self, birthday_id: int) -> bool:
        """Delete a record by id. Return True if deleted, False if it was already absent."""

    @abstractmethod
    def list(self) -> List[BirthdayEntity]:
        """
        Return all records ordered by (month, day) of the birthday.
        - The birth year is ignored for ordering
        - Ties keep insertion order
        """


class InMemoryBirthdayRepository(BirthdayRepository):
    """
    Thread-safe in-memory repository; the only storage backend of the service.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._items: dict[int, BirthdayEntity] = {}
        self._next_id = 1

    def _now(self) -> datetime:
        return datetime.now()

    def _allocate_id(self) -> int:
        with self._lock:
            i = self._next_id
            self._next_id += 1
            return i

    def create(self, data: BirthdayCreate) -> BirthdayEntity:
        with self._lock:
            entity: BirthdayEntity = {
                "id": self._allocate_id(),
                "first_name": data.first_name,
                "last_name": data.last_name,
                "birth_date": data.birth_date,
                "comment": data.comment,
                "created_at": self._now(),
            }
            self._items[entity["id"]] = entity
        logger.info("Created birthday %s", entity["id"])
        return entity.copy()

    def get(self, birthday_id: int) -> Optional[BirthdayEntity]:
        with self._lock:
            item = self._items.get(birthday_id)
            return None if item is None else item.copy()

    def update(self, birthday_id: int, data: BirthdayCreate) -> BirthdayEntity:
        with self._lock:
            existing = self._items.get(birthday_id)
            if existing is None:
                raise NotFoundError(birthday_id)

            # Full replace; id and created_at are fixed at insertion
            updated: BirthdayEntity = {
                "id": existing["id"],
                "first_name": data.first_name,
                "last_name": data.last_name,
                "birth_date": data.birth_date,
                "comment": data.comment,
                "created_at": existing["created_at"],
            }
            self._items[birthday_id] = updated
        logger.info("Updated birthday %s", birthday_id)
        return updated.copy()

    def delete(self, birthday_id: int) -> bool:
        with self._lock:
            removed = self._items.pop(birthday_id, None) is not None
        if removed:
            logger.info("Deleted birthday %s", birthday_id)
        return removed

    def list(self) -> List[BirthdayEntity]:
        with self._lock:
            # dict preserves insertion order and sorted() is stable, so ties stay in insertion order
            items = sorted(
                self._items.values(),
                key=lambda b: (b["birth_date"].month, b["birth_date"].day),
            )
            # Return copies to avoid external mutation
            return [b.copy() for b in items]
