"""
Inventory dashboard endpoint
"""

from fastapi import APIRouter, Depends

from inventory_tracker.api.deps import get_catalog_service
from inventory_tracker.schemas.dashboard import DashboardResponse
from inventory_tracker.schemas.product import ProductResponse
from inventory_tracker.services.catalog import CatalogService

router = APIRouter()

@router.get("", response_model=DashboardResponse)
def get_dashboard(catalog: CatalogService = Depends(get_catalog_service)):
    """
    Product count, total stock and low stock items for the caller's organization
    """
    summary = catalog.dashboard()
    return DashboardResponse(
        total_products=summary.total_products,
        total_quantity=summary.total_quantity,
        low_stock_items=[ProductResponse.model_validate(p) for p in summary.low_stock_items],
    )
