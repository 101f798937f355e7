"""Electronic stock items (brand + warranty)."""

from __future__ import annotations

from pydantic import Field

from warehouse.domain.base import StockItem


class ElectronicItem(StockItem):
    brand: str
    warranty_months: int = Field(ge=0)

    def describe(self) -> str:
        return (
            f"[Electronic] Id={self.id}, Name={self.name}, Qty={self.quantity}, "
            f"Brand={self.brand}, Warranty={self.warranty_months}m"
        )
