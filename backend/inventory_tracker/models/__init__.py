"""
Database models package
"""

from .base import Base, BaseModel
from .organization import Organization
from .user import User
from .product import Product

__all__ = [
    "Base", "BaseModel", "Organization", "User", "Product"
]
