"""
Product management endpoints
"""

from fastapi import APIRouter, Depends
from typing import List

from inventory_tracker.api.deps import get_catalog_service
from inventory_tracker.schemas.product import DeleteResponse, ProductCreate, ProductResponse, ProductUpdate
from inventory_tracker.services.catalog import CatalogService

router = APIRouter()

@router.post("", response_model=ProductResponse)
def create_product(product_data: ProductCreate, catalog: CatalogService = Depends(get_catalog_service)):
    """
    Create a product in the caller's organization
    """
    return catalog.create(product_data)

@router.get("", response_model=List[ProductResponse])
def list_products(catalog: CatalogService = Depends(get_catalog_service)):
    """
    Get all products for the caller's organization, newest first
    """
    return catalog.list()

@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    product_data: ProductUpdate,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """
    Partially update a product; fields left out of the body are unchanged
    """
    return catalog.update(product_id, product_data)

@router.delete("/{product_id}", response_model=DeleteResponse)
def delete_product(product_id: int, catalog: CatalogService = Depends(get_catalog_service)):
    """Delete a product"""
    catalog.delete(product_id)
    return DeleteResponse(success=True)
