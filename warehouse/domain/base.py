"""Entity capability contract and the shared stock-item base model."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, Field

_ItemT = TypeVar("_ItemT", bound="InventoryItem")


@runtime_checkable
class InventoryItem(Protocol):
    """What a record must expose to be stored in an InventoryRepository."""

    @property
    def id(self) -> int: ...

    @property
    def name(self) -> str: ...

    @property
    def quantity(self) -> int: ...

    def with_quantity(self: _ItemT, quantity: int) -> _ItemT: ...


class StockItem(BaseModel):
    """Immutable stock record. Quantity changes produce a new instance."""

    id: int
    name: str
    quantity: int = Field(ge=0)

    model_config = {"frozen": True}

    def with_quantity(self, quantity: int):
        # model_copy skips validation, so go through model_validate
        return type(self).model_validate({**self.model_dump(), "quantity": quantity})

    def describe(self) -> str:
        return f"Id={self.id}, Name={self.name}, Qty={self.quantity}"

    def __str__(self) -> str:
        return self.describe()
