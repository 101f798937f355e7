"""Seed producers for built-in sample data and CSV/tabular rows.

Rows that fail model validation are rejected here and never reach the
repository; only the repository's own rules (duplicate id) can fail an add.
"""

from __future__ import annotations

import calendar
import csv
import logging
from collections.abc import Iterable, Mapping
from datetime import date
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from warehouse.core.config import settings
from warehouse.core.exceptions import UnexpectedError
from warehouse.core.result import Failure, Result
from warehouse.domain.electronic import ElectronicItem
from warehouse.domain.grocery import GroceryItem
from warehouse.repositories.base import InventoryRepository

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

SeedOutcome = tuple[object, Result]


def add_months(start: date, months: int) -> date:
    """Shift `start` by whole months, clamping to the last day of the target month."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


# ---------------------------------------------------------------------------
# Built-in sample data
# ---------------------------------------------------------------------------

def sample_electronics() -> list[ElectronicItem]:
    return [
        ElectronicItem(id=1, name="Laptop", quantity=10, brand="BrandA", warranty_months=24),
        ElectronicItem(id=2, name="Smartphone", quantity=25, brand="BrandB", warranty_months=12),
        ElectronicItem(id=3, name="Router", quantity=15, brand="BrandC", warranty_months=18),
    ]


def sample_groceries(
    today: date | None = None,
    shelf_life_months: tuple[int, int, int] | None = None,
) -> list[GroceryItem]:
    ref = today or date.today()
    rice, oil, beans = shelf_life_months or settings.grocery_shelf_life_months
    return [
        GroceryItem(id=101, name="Rice (5kg)", quantity=50, expiry_date=add_months(ref, rice)),
        GroceryItem(id=102, name="Palm Oil (1L)", quantity=30, expiry_date=add_months(ref, oil)),
        GroceryItem(id=103, name="Canned Beans", quantity=40, expiry_date=add_months(ref, beans)),
    ]


# ---------------------------------------------------------------------------
# Seeding
# ---------------------------------------------------------------------------

def seed_repository(repo: InventoryRepository, items: Iterable[object]) -> list[SeedOutcome]:
    """Best-effort bulk add. Failures are logged and seeding carries on."""
    outcomes: list[SeedOutcome] = []
    for item in items:
        try:
            result = repo.add(item)
        except Exception as exc:
            logger.exception("Unexpected error while seeding %s", repo.kind)
            result = Failure(UnexpectedError(exc))

        if result.is_failure:
            logger.warning("Error while seeding data: %s", result.error.message)
        outcomes.append((item, result))
    return outcomes


# ---------------------------------------------------------------------------
# Tabular producers
# ---------------------------------------------------------------------------

def parse_rows(rows: Iterable[Mapping[str, object]], model: type[ModelT]) -> list[ModelT]:
    """Validate each row through `model`; invalid rows are skipped with a warning."""
    items: list[ModelT] = []
    for line_no, row in enumerate(rows, start=1):
        # csv.DictReader files surplus columns under the None key
        if None in row:
            logger.warning("Skipping invalid %s row %d: too many columns", model.__name__, line_no)
            continue
        try:
            items.append(model.model_validate(dict(row)))
        except ValidationError as exc:
            logger.warning(
                "Skipping invalid %s row %d: %s",
                model.__name__, line_no, exc.errors(include_url=False),
            )
    return items


def load_csv(path: str | Path, model: type[ModelT]) -> list[ModelT]:
    """Read a CSV file with a header row whose columns match the model's fields."""
    with Path(path).open(newline="", encoding="utf-8") as fh:
        reader = csv.DictReader(fh, skipinitialspace=True)
        return parse_rows(reader, model)


def seed_from_rows(
    repo: InventoryRepository,
    rows: Iterable[Mapping[str, object]],
    model: type[ModelT],
) -> list[SeedOutcome]:
    """Validate rows through `model` and add the survivors to `repo`, best-effort."""
    return seed_repository(repo, parse_rows(rows, model))
