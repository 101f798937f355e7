from warehouse.repositories.base import InventoryRepository
from warehouse.repositories.electronic import ElectronicRepository
from warehouse.repositories.grocery import GroceryRepository

__all__ = ["ElectronicRepository", "GroceryRepository", "InventoryRepository"]
