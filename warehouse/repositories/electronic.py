"""Electronic item repository — REFERENCE pattern for all repositories.

How to add a new repository:
  1. Create warehouse/repositories/my_item.py
  2. class MyItemRepository(InventoryRepository[MyItem]):
         model = MyItem
  3. Add any kind-specific lookups as needed
"""


from warehouse.domain.electronic import ElectronicItem
from warehouse.repositories.base import InventoryRepository


class ElectronicRepository(InventoryRepository[ElectronicItem]):
    model = ElectronicItem
