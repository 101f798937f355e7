"""Warehouse demo: seeds the repositories and walks through the stock workflows."""


import logging
import sys

from warehouse.core.config import settings
from warehouse.domain.electronic import ElectronicItem
from warehouse.services.warehouse import WarehouseManager

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Set up structured logging for the application."""
    logging.basicConfig(
        level=settings.resolved_log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def run(manager: WarehouseManager) -> None:
    if settings.seed_on_startup:
        manager.seed_sample_data()

    manager.print_all(manager.groceries, title="=== Grocery Items ===")
    print()
    manager.print_all(manager.electronics, title="=== Electronic Items ===")
    print()

    # 1) Duplicate add goes straight to the repository
    print("Attempting to add duplicate electronic item (ID = 1)")
    result = manager.electronics.add(
        ElectronicItem(id=1, name="Laptop Duplicate", quantity=5, brand="BrandX", warranty_months=12)
    )
    if result.is_failure:
        print(f"Caught expected duplicate error: {result.error.message}")
    print()

    # 2) Missing item
    print("Attempting to remove non-existent grocery item (ID = 999)")
    print(manager.remove_by_id(manager.groceries, 999).message)
    print()

    # 3) Negative quantity, direct repository call
    print("Attempting to set invalid negative quantity for electronic item (ID = 2)")
    result = manager.electronics.update_quantity(2, -5)
    if result.is_failure:
        print(f"Caught expected invalid quantity error: {result.error.message}")
    print()

    # 4) Successful workflows
    print("Increasing stock of Grocery ID 101 by 20")
    print(manager.increase_stock(manager.groceries, 101, 20).message)
    print()

    print("Removing Electronic item ID 3")
    print(manager.remove_by_id(manager.electronics, 3).message)
    print()

    print("Final lists after operations:")
    manager.print_all(manager.groceries, title="Grocery Items:")
    print()
    manager.print_all(manager.electronics, title="Electronic Items:")

    if settings.report_path:
        path = manager.reporter.write_file(
            settings.report_path,
            {
                "Grocery Items:": manager.groceries.get_all(),
                "Electronic Items:": manager.electronics.get_all(),
            },
        )
        logger.info("Stock report written to %s", path)


def main() -> int:
    _configure_logging()
    logger.info("%s starting (env=%s)", settings.app_name, settings.app_env)
    run(WarehouseManager())
    return 0


if __name__ == "__main__":
    sys.exit(main())
