"""
Tests for the low stock rule and dashboard totals.
"""

from inventory_tracker.models.product import Product
from inventory_tracker.services.dashboard import DEFAULT_LOW_STOCK_THRESHOLD, summarize_inventory


def make_product(sku: str, quantity=0, threshold=None) -> Product:
    return Product(name=f"Product {sku}", sku=sku, quantity_on_hand=quantity, low_stock_threshold=threshold)


def test_default_threshold_is_five():
    assert DEFAULT_LOW_STOCK_THRESHOLD == 5


def test_empty_catalog():
    summary = summarize_inventory([])
    assert summary.total_products == 0
    assert summary.total_quantity == 0
    assert summary.low_stock_items == []


def test_default_threshold_is_inclusive():
    at_threshold = make_product("A", quantity=5)
    above = make_product("B", quantity=6)

    summary = summarize_inventory([at_threshold, above])

    assert summary.low_stock_items == [at_threshold]


def test_product_threshold_overrides_default_and_is_inclusive():
    overridden = make_product("A", quantity=10, threshold=10)
    below_default_but_above_own = make_product("B", quantity=3, threshold=2)

    summary = summarize_inventory([overridden, below_default_but_above_own])

    assert summary.low_stock_items == [overridden]


def test_zero_threshold_is_not_treated_as_unset():
    product = make_product("A", quantity=1, threshold=0)
    assert summarize_inventory([product]).low_stock_items == []


def test_missing_quantity_counts_as_zero():
    products = [make_product("A", 3), make_product("B", None), make_product("C", 7)]

    summary = summarize_inventory(products)

    assert summary.total_products == 3
    assert summary.total_quantity == 10
    # the unset quantity is 0, which is at or below the default threshold
    assert products[1] in summary.low_stock_items


def test_low_stock_items_keep_input_order():
    products = [make_product(str(i), quantity=i) for i in range(8)]
    summary = summarize_inventory(products)
    assert [p.sku for p in summary.low_stock_items] == ["0", "1", "2", "3", "4", "5"]


def test_custom_default_threshold():
    products = [make_product("A", 8), make_product("B", 9)]
    summary = summarize_inventory(products, default_threshold=8)
    assert [p.sku for p in summary.low_stock_items] == ["A"]
