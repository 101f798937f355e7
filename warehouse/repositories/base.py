"""Generic in-memory repository keyed on item identity."""

from __future__ import annotations

import logging
import threading
from typing import Generic, TypeVar

from warehouse.core.exceptions import DuplicateKeyError, InvalidQuantityError, NotFoundError
from warehouse.core.result import Failure, Result, Success
from warehouse.domain.base import InventoryItem

ItemT = TypeVar("ItemT", bound=InventoryItem)

logger = logging.getLogger(__name__)


class InventoryRepository(Generic[ItemT]):
    """Generic CRUD repository over a dict keyed by item id.

    Expected failures (duplicate id, missing id, negative quantity) come back as
    `Failure` values and leave the repository untouched. Stored items are
    immutable; quantity updates swap in a new instance.
    """

    model: type[ItemT]

    def __init__(self) -> None:
        self._items: dict[int, ItemT] = {}
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        """Re-entrant write lock; hold it to make a read-then-write sequence atomic."""
        return self._lock

    @property
    def kind(self) -> str:
        return getattr(self, "model", InventoryItem).__name__

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, item_id: int) -> Result[ItemT]:
        item = self._items.get(item_id)
        if item is None:
            return Failure(NotFoundError(item_id))
        return Success(item)

    def get_all(self) -> list[ItemT]:
        """Return a snapshot list; later writes to the repository do not affect it."""
        with self._lock:
            return list(self._items.values())

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def add(self, item: ItemT) -> Result[ItemT]:
        with self._lock:
            if item.id in self._items:
                return Failure(DuplicateKeyError(item.id))
            self._items[item.id] = item
        logger.debug("%s %s added", self.kind, item.id)
        return Success(item)

    def remove(self, item_id: int) -> Result[ItemT]:
        with self._lock:
            item = self._items.pop(item_id, None)
        if item is None:
            return Failure(NotFoundError(item_id, action="remove"))
        logger.debug("%s %s removed", self.kind, item_id)
        return Success(item)

    def update_quantity(self, item_id: int, new_quantity: int) -> Result[ItemT]:
        # Negativity is checked before existence
        if new_quantity < 0:
            return Failure(InvalidQuantityError())

        with self._lock:
            current = self._items.get(item_id)
            if current is None:
                return Failure(NotFoundError(item_id, action="update"))
            updated = current.with_quantity(new_quantity)
            self._items[item_id] = updated
        logger.debug("%s %s quantity %s -> %s", self.kind, item_id, current.quantity, new_quantity)
        return Success(updated)
