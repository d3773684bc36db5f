"""
Pydantic schemas for the inventory dashboard
"""

from pydantic import Field
from typing import List

from inventory_tracker.schemas.base import CamelModel
from inventory_tracker.schemas.product import ProductResponse

class DashboardResponse(CamelModel):
    """Point-in-time inventory summary for one organization"""

    total_products: int = Field(..., description="Number of products in the catalog")
    total_quantity: int = Field(..., description="Sum of quantity on hand, unset counted as zero")
    low_stock_items: List[ProductResponse] = Field(
        default_factory=list,
        description="Products at or below their low stock threshold"
    )
