"""Grocery stock items (perishable, carry an expiry date)."""

from __future__ import annotations

from datetime import date

from warehouse.domain.base import StockItem


class GroceryItem(StockItem):
    expiry_date: date

    def describe(self) -> str:
        return (
            f"[Grocery] Id={self.id}, Name={self.name}, Qty={self.quantity}, "
            f"Expires={self.expiry_date:%Y-%m-%d}"
        )
