"""
Pytest configuration and shared fixtures.

Each test gets its own SQLite database file, so tests never share state.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from inventory.core.database import create_engine, create_session_maker, get_session_maker
from inventory.main import app
from inventory.models import Base
from inventory.services.brand import BrandService
from inventory.services.category import CategoryService
from inventory.services.results import Redirect
from inventory.services.shoe import ShoeService
from inventory.services.sku import SKUService


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'inventory.db'}"


@pytest.fixture
async def engine(database_url):
    engine = create_engine(database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return create_session_maker(engine)


@pytest.fixture
def brand_service(session_maker):
    return BrandService(session_maker)


@pytest.fixture
def category_service(session_maker):
    return CategoryService(session_maker)


@pytest.fixture
def shoe_service(session_maker):
    return ShoeService(session_maker)


@pytest.fixture
def sku_service(session_maker):
    return SKUService(session_maker)


@pytest.fixture
async def client(session_maker):
    """HTTP client for the app, wired to the test database."""
    app.dependency_overrides[get_session_maker] = lambda: session_maker
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


class Seed:
    """Creates entities through the workflows and returns their IDs."""

    def __init__(self, brands, categories, shoes, skus):
        self.brands = brands
        self.categories = categories
        self.shoes = shoes
        self.skus = skus

    @staticmethod
    def id_of(result) -> str:
        assert isinstance(result, Redirect), result
        return result.target.rsplit("/", 1)[-1]

    async def brand(self, name="Nike", desc=None) -> str:
        return self.id_of(await self.brands.create_post({"name": name, "desc": desc}))

    async def category(self, gender="mens", style="Sneakers") -> str:
        return self.id_of(await self.categories.create_post({"gender": gender, "style": style}))

    async def shoe(self, name, brand, category, desc=None) -> str:
        return self.id_of(await self.shoes.create_post(
            {"name": name, "brand": brand, "category": category, "desc": desc}
        ))

    async def sku(self, shoe, color="Red", size=9, price="49.99", qty=3) -> str:
        return self.id_of(await self.skus.create_post(
            {"shoe": shoe, "color": color, "size": size, "price": price, "qty": qty}
        ))


@pytest.fixture
def seed(brand_service, category_service, shoe_service, sku_service):
    return Seed(brand_service, category_service, shoe_service, sku_service)
