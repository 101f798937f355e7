"""Warehouse manager. Owns one repository per item kind and runs stock workflows.

Rule: every public method handles its own repository failures. Callers get an
OperationReport (or rendered lines) back; nothing raises out of here.
"""

from __future__ import annotations

import logging
from datetime import date

from warehouse.core.exceptions import InvalidQuantityError, UnexpectedError
from warehouse.core.result import Failure, Result
from warehouse.repositories.base import InventoryRepository
from warehouse.repositories.electronic import ElectronicRepository
from warehouse.repositories.grocery import GroceryRepository
from warehouse.schemas.report import OperationReport
from warehouse.services.reporter import Reporter
from warehouse.services.seed import SeedOutcome, sample_electronics, sample_groceries, seed_repository

logger = logging.getLogger(__name__)

_FAILURE_PREFIX = {
    "DUPLICATE_KEY": "Duplicate error",
    "NOT_FOUND": "Not found",
    "INVALID_QUANTITY": "Invalid quantity",
}


class WarehouseManager:
    def __init__(self, reporter: Reporter | None = None):
        self.electronics = ElectronicRepository()
        self.groceries = GroceryRepository()
        self.reporter = reporter or Reporter()

    # ------------------------------------------------------------------
    # Seeding / reporting
    # ------------------------------------------------------------------

    def seed_sample_data(self, today: date | None = None) -> list[SeedOutcome]:
        """Add the built-in sample items. Returns (item, result) pairs for every attempt."""
        outcomes = seed_repository(self.electronics, sample_electronics())
        outcomes += seed_repository(self.groceries, sample_groceries(today))
        failed = sum(1 for _, result in outcomes if result.is_failure)
        logger.info("Seeded %d items (%d failed)", len(outcomes) - failed, failed)
        return outcomes

    def print_all(self, repo: InventoryRepository, title: str | None = None) -> list[str]:
        """Render every item through the reporter.

        A reporter failure is logged and returned as the only line.
        """
        try:
            return self.reporter.write(repo.get_all(), title=title)
        except Exception as exc:
            logger.exception("Unexpected error while printing %s items", repo.kind)
            return [f"Unexpected error while printing items: {UnexpectedError(exc).message}"]

    # ------------------------------------------------------------------
    # Stock workflows
    # ------------------------------------------------------------------

    def increase_stock(self, repo: InventoryRepository, item_id: int, delta: int) -> OperationReport:
        def _apply(item) -> Result:
            if delta < 0:
                return Failure(InvalidQuantityError("Increase quantity must be non-negative."))
            return repo.update_quantity(item_id, item.quantity + delta)

        try:
            # Lookup and update must not interleave with another writer
            with repo.lock:
                result = repo.get_by_id(item_id).flat_map(_apply)
        except Exception as exc:
            logger.exception("Unexpected error while increasing stock of %s %s", repo.kind, item_id)
            result = Failure(UnexpectedError(exc))

        if result.is_success:
            new_qty = result.value.quantity
            return self._report(
                "increase_stock", result,
                f"Updated Item ID {item_id}: New Quantity = {new_qty}",
                item_id=item_id, quantity=new_qty,
            )
        return self._report(
            "increase_stock", result,
            self._failure_message(result, "Unexpected error while increasing stock"),
            item_id=item_id,
        )

    def remove_by_id(self, repo: InventoryRepository, item_id: int) -> OperationReport:
        try:
            result = repo.remove(item_id)
        except Exception as exc:
            logger.exception("Unexpected error while removing %s %s", repo.kind, item_id)
            result = Failure(UnexpectedError(exc))

        if result.is_success:
            message = f"Item with ID {item_id} removed successfully."
        elif result.code == "NOT_FOUND":
            # already reads "Cannot remove: item with ID ... not found."
            message = result.error.message
        else:
            message = self._failure_message(result, "Unexpected error while removing item")
        return self._report("remove_by_id", result, message, item_id=item_id)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _failure_message(result: Failure, unexpected_prefix: str) -> str:
        prefix = _FAILURE_PREFIX.get(result.code, unexpected_prefix)
        return f"{prefix}: {result.error.message}"

    @staticmethod
    def _report(operation: str, result: Result, message: str, **fields) -> OperationReport:
        report = OperationReport(
            operation=operation,
            ok=result.is_success,
            message=message,
            code=None if result.is_success else result.code,
            **fields,
        )
        logger.log(logging.INFO if report.ok else logging.WARNING, message)
        return report
