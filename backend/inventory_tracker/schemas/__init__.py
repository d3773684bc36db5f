"""
Pydantic schemas for API request/response validation
"""

from .auth import LoginRequest, SignupRequest, TokenResponse
from .product import ProductCreate, ProductUpdate, ProductResponse, DeleteResponse
from .dashboard import DashboardResponse

__all__ = [
    # Auth schemas
    "LoginRequest", "SignupRequest", "TokenResponse",
    # Product schemas
    "ProductCreate", "ProductUpdate", "ProductResponse", "DeleteResponse",
    # Dashboard schemas
    "DashboardResponse"
]
