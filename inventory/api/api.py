"""
Inventory router aggregation
Combines all route modules under the inventory prefix
Reference: https://fastapi.tiangolo.com/tutorial/bigger-applications/
"""
from fastapi import APIRouter

from inventory.api.routes import brand, category, health, shoe, sku
from inventory.core.config import settings

# All routes are served under /inventory
api_router = APIRouter(prefix=settings.INVENTORY_PREFIX)

api_router.include_router(shoe.router)
api_router.include_router(brand.router)
api_router.include_router(category.router)
api_router.include_router(sku.router)
api_router.include_router(health.router)
