"""
Workflow service dependencies for route handlers
Reference: https://fastapi.tiangolo.com/tutorial/dependencies/
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from inventory.core.database import get_session_maker
from inventory.services.brand import BrandService
from inventory.services.category import CategoryService
from inventory.services.shoe import ShoeService
from inventory.services.sku import SKUService


def get_brand_service(
    session_maker: async_sessionmaker[AsyncSession] = Depends(get_session_maker),
) -> BrandService:
    return BrandService(session_maker)


def get_category_service(
    session_maker: async_sessionmaker[AsyncSession] = Depends(get_session_maker),
) -> CategoryService:
    return CategoryService(session_maker)


def get_shoe_service(
    session_maker: async_sessionmaker[AsyncSession] = Depends(get_session_maker),
) -> ShoeService:
    return ShoeService(session_maker)


def get_sku_service(
    session_maker: async_sessionmaker[AsyncSession] = Depends(get_session_maker),
) -> SKUService:
    return SKUService(session_maker)
