"""Shared fixtures for repository and manager tests."""

import io
from datetime import date

import pytest

from warehouse.domain.electronic import ElectronicItem
from warehouse.domain.grocery import GroceryItem
from warehouse.repositories.electronic import ElectronicRepository
from warehouse.repositories.grocery import GroceryRepository
from warehouse.services.reporter import Reporter
from warehouse.services.warehouse import WarehouseManager

SEED_DATE = date(2026, 1, 31)


@pytest.fixture
def laptop() -> ElectronicItem:
    return ElectronicItem(id=1, name="Laptop", quantity=10, brand="BrandA", warranty_months=24)


@pytest.fixture
def rice() -> GroceryItem:
    return GroceryItem(id=101, name="Rice (5kg)", quantity=50, expiry_date=date(2027, 1, 31))


@pytest.fixture
def electronics() -> ElectronicRepository:
    return ElectronicRepository()


@pytest.fixture
def groceries() -> GroceryRepository:
    return GroceryRepository()


@pytest.fixture
def report_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def manager(report_stream: io.StringIO) -> WarehouseManager:
    """Empty manager whose reporter writes into an in-memory stream."""
    return WarehouseManager(reporter=Reporter(report_stream))


@pytest.fixture
def seeded_manager(manager: WarehouseManager) -> WarehouseManager:
    manager.seed_sample_data(today=SEED_DATE)
    return manager
