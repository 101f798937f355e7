"""End-to-end run of the demo entry point."""

import io

from warehouse import main as demo
from warehouse.services.reporter import Reporter
from warehouse.services.warehouse import WarehouseManager


def test_demo_walkthrough(capsys, monkeypatch, tmp_path):
    report_path = tmp_path / "stock.txt"
    monkeypatch.setattr(demo.settings, "report_path", str(report_path))
    manager = WarehouseManager(reporter=Reporter(io.StringIO()))

    demo.run(manager)

    out = capsys.readouterr().out
    assert "Caught expected duplicate error: Item with ID 1 already exists." in out
    assert "Cannot remove: item with ID 999 not found." in out
    assert "Not found: Cannot remove" not in out
    assert "Caught expected invalid quantity error: Quantity cannot be negative." in out
    assert "Updated Item ID 101: New Quantity = 70" in out
    assert "Item with ID 3 removed successfully." in out
    assert manager.groceries.get_by_id(101).value.quantity == 70
    assert 3 not in manager.electronics
    assert "Name=Router" not in report_path.read_text(encoding="utf-8")


def test_main_returns_zero(monkeypatch):
    monkeypatch.setattr(demo, "_configure_logging", lambda: None)
    monkeypatch.setattr(demo, "run", lambda manager: None)

    assert demo.main() == 0
