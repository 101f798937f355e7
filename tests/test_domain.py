"""Tests for stock item models and the capability protocol."""

from datetime import date

import pytest
from pydantic import ValidationError

from warehouse.domain import ElectronicItem, GroceryItem, InventoryItem


class TestStockItems:
    def test_electronic_display_string(self, laptop):
        assert str(laptop) == "[Electronic] Id=1, Name=Laptop, Qty=10, Brand=BrandA, Warranty=24m"

    def test_grocery_display_string(self, rice):
        assert str(rice) == "[Grocery] Id=101, Name=Rice (5kg), Qty=50, Expires=2027-01-31"

    def test_negative_quantity_rejected_at_construction(self):
        with pytest.raises(ValidationError):
            GroceryItem(id=1, name="Milk", quantity=-1, expiry_date=date(2027, 1, 1))

    def test_items_are_frozen(self, laptop):
        with pytest.raises(ValidationError):
            laptop.quantity = 3

    def test_with_quantity_returns_new_instance(self, laptop):
        updated = laptop.with_quantity(15)

        assert updated is not laptop
        assert isinstance(updated, ElectronicItem)
        assert updated.quantity == 15
        assert updated.brand == laptop.brand
        assert laptop.quantity == 10

    def test_with_quantity_still_validates(self, rice):
        with pytest.raises(ValidationError):
            rice.with_quantity(-3)

    @pytest.mark.parametrize("fixture_name", ["laptop", "rice"])
    def test_items_satisfy_capability_protocol(self, request, fixture_name):
        item = request.getfixturevalue(fixture_name)

        assert isinstance(item, InventoryItem)
