"""
Pydantic schemas for Product validation
"""

from pydantic import Field
from typing import Optional
from datetime import datetime

from inventory_tracker.schemas.base import CamelModel

class ProductFields(CamelModel):
    """
    Writable product fields, all optional at the schema level
    Fields left out of a request are absent from model_fields_set
    """

    name: Optional[str] = Field(
        None,
        max_length=255,
        description="Product name",
        examples=["Cotton T-Shirt"]
    )

    sku: Optional[str] = Field(
        None,
        max_length=100,
        description="Stock keeping unit, unique within the organization",
        examples=["TS-001"]
    )

    description: Optional[str] = Field(
        None,
        description="Free-form product description"
    )

    quantity_on_hand: Optional[int] = Field(
        None,
        ge=0,
        description="Units in stock"
    )

    cost_price: Optional[float] = Field(
        None,
        ge=0,
        description="Unit cost"
    )

    selling_price: Optional[float] = Field(
        None,
        ge=0,
        description="Unit selling price"
    )

    low_stock_threshold: Optional[int] = Field(
        None,
        ge=0,
        description="Flag the product when stock is at or below this value"
    )

class ProductCreate(ProductFields):
    """Schema for creating a new product"""

class ProductUpdate(ProductFields):
    """Schema for partially updating an existing product"""

class ProductResponse(CamelModel):
    """Schema for product API responses"""

    id: int = Field(..., description="Unique product identifier")
    organization_id: int = Field(..., description="Organization owning this product")
    name: str = Field(..., description="Product name")
    sku: str = Field(..., description="Stock keeping unit")
    description: Optional[str] = Field(None, description="Product description")
    quantity_on_hand: Optional[int] = Field(None, description="Units in stock")
    cost_price: Optional[float] = Field(None, description="Unit cost")
    selling_price: Optional[float] = Field(None, description="Unit selling price")
    low_stock_threshold: Optional[int] = Field(None, description="Per-product low stock threshold")
    created_at: datetime = Field(..., description="Product creation timestamp")
    updated_at: datetime = Field(..., description="Product last update timestamp")

class DeleteResponse(CamelModel):
    """Acknowledgement of a deleted product"""

    success: bool = Field(True, description="Whether the product was deleted")
