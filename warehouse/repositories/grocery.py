from warehouse.domain.grocery import GroceryItem
from warehouse.repositories.base import InventoryRepository


class GroceryRepository(InventoryRepository[GroceryItem]):
    model = GroceryItem
