"""
Dashboard aggregation over a catalog snapshot
"""

from dataclasses import dataclass, field
from typing import Iterable, List

from inventory_tracker.models.product import Product

DEFAULT_LOW_STOCK_THRESHOLD = 5


@dataclass
class InventorySummary:
    total_products: int = 0
    total_quantity: int = 0
    low_stock_items: List[Product] = field(default_factory=list)


def summarize_inventory(
    products: Iterable[Product],
    default_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
) -> InventorySummary:
    """
    Count products, total their stock and collect low stock items.

    A product is low on stock when its quantity (unset counted as zero) is
    less than or equal to its own threshold, or to ``default_threshold``
    when it has none. Input order is preserved in ``low_stock_items``.
    """
    summary = InventorySummary()
    for product in products:
        summary.total_products += 1
        summary.total_quantity += product.stock_level()
        if product.is_low_stock(default_threshold):
            summary.low_stock_items.append(product)
    return summary
