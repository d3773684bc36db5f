"""
Main API router that includes all endpoint routers
"""

from fastapi import APIRouter

from inventory_tracker.api.endpoints import auth, products, dashboard

# Create main API router
api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(auth.router, tags=["authentication"])
api_router.include_router(products.router, prefix="/products", tags=["products"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
