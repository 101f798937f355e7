"""Domain package — stock item models.

Folder intent:
  base.py        — InventoryItem capability protocol + StockItem base model
  electronic.py  — ElectronicItem (brand, warranty)
  grocery.py     — GroceryItem (expiry date)
"""

from warehouse.domain.base import InventoryItem, StockItem
from warehouse.domain.electronic import ElectronicItem
from warehouse.domain.grocery import GroceryItem

__all__ = [
    "ElectronicItem",
    "GroceryItem",
    "InventoryItem",
    "StockItem",
]
