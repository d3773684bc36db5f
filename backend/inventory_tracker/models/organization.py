"""
Organization model, the tenant boundary for users and catalog data
"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from inventory_tracker.models.base import BaseModel

class Organization(BaseModel):
    """
    Organization created at signup; owns users and products
    """
    __tablename__ = "organizations"

    name = Column(
        String(255),
        nullable=False,
        comment="Display name of the organization"
    )

    # Relationships
    users = relationship("User", back_populates="organization", cascade="all, delete-orphan")
    products = relationship("Product", back_populates="organization", cascade="all, delete-orphan")

    __table_args__ = (
        {"comment": "Tenants owning users and product catalogs"}
    )

    def __repr__(self) -> str:
        return f"<Organization(id={self.id}, name={self.name})>"
