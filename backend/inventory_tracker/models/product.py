"""
Product model for organization-scoped catalog items
"""

from sqlalchemy import Column, String, Text, Integer, Float, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship, validates

from inventory_tracker.models.base import BaseModel

class Product(BaseModel):
    """
    Product model representing a catalog item owned by one organization
    """
    __tablename__ = "products"

    # Foreign key to organization (set once at creation)
    organization_id = Column(
        Integer,
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Reference to the organization this product belongs to"
    )

    # Basic product information
    name = Column(
        String(255),
        nullable=False,
        comment="Product name"
    )

    sku = Column(
        String(100),
        nullable=False,
        index=True,
        comment="Stock keeping unit, unique within an organization"
    )

    description = Column(
        Text,
        nullable=True,
        comment="Free-form product description"
    )

    # Stock and pricing
    quantity_on_hand = Column(
        Integer,
        nullable=True,
        default=0,
        comment="Units currently in stock"
    )

    cost_price = Column(
        Float,
        nullable=True,
        comment="Unit cost, unset when unknown"
    )

    selling_price = Column(
        Float,
        nullable=True,
        comment="Unit selling price, unset when unknown"
    )

    low_stock_threshold = Column(
        Integer,
        nullable=True,
        comment="Per-product low stock threshold; system default applies when unset"
    )

    # Relationships
    organization = relationship("Organization", back_populates="products")

    __table_args__ = (
        UniqueConstraint("organization_id", "sku", name="uq_products_organization_sku"),
        {"comment": "Organization-scoped product catalog"}
    )

    @validates('organization_id')
    def validate_organization_id(self, key: str, organization_id: int) -> int:
        """Organization ownership is fixed at creation"""
        if self.organization_id is not None and organization_id != self.organization_id:
            raise ValueError("Product organization cannot be reassigned")
        return organization_id

    @validates('name', 'sku')
    def validate_required_text(self, key: str, value: str) -> str:
        """Name and SKU must be non-empty"""
        if value is None or not str(value).strip():
            raise ValueError(f"{key} is required")
        return value

    def effective_threshold(self, default_threshold: int) -> int:
        """Low stock threshold, falling back to the system default"""
        if self.low_stock_threshold is None:
            return default_threshold
        return self.low_stock_threshold

    def stock_level(self) -> int:
        """Quantity on hand, unset counted as zero"""
        return self.quantity_on_hand or 0

    def is_low_stock(self, default_threshold: int) -> bool:
        """Check if stock is at or below the effective threshold"""
        return self.stock_level() <= self.effective_threshold(default_threshold)

    def __repr__(self) -> str:
        """String representation of the product"""
        return f"<Product(id={self.id}, sku={self.sku})>"
