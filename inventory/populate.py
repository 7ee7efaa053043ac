"""
Command line tool that loads sample brands, categories, shoes and SKUs.

Everything goes through the workflows, so re-running the tool (or a
duplicated sample row) resolves to the existing entities instead of
inserting copies.

Usage:
    inventory-populate --database-url sqlite+aiosqlite:///./inventory.db
"""
import argparse
import asyncio
import logging
import sys

from inventory.core.config import settings
from inventory.core.database import create_engine, create_session_maker
from inventory.models import Base
from inventory.services.brand import BrandService
from inventory.services.category import CategoryService
from inventory.services.results import Redirect
from inventory.services.shoe import ShoeService
from inventory.services.sku import SKUService

logger = logging.getLogger(__name__)

BRANDS = [
    ("Nike", ""),
    ("Adidas", "adidas has just the right style for everyone. Whatever you're looking for, "
               "consider this your one-stop-shop for everything adidas."),
    ("New Balance", "From tried-and-true classic sneakers to need-right-now trends, find the latest "
                    "New Balance shoes and apparel for everyone in the family right here."),
    ("Nine West", ""),
]

CATEGORIES = [
    ("unisex", "Sandal"),
    ("mens", "Sneakers"),
    ("mens", "Oxfords"),
    ("womens", "Sneakers"),
    ("womens", "Heels"),
    ("kids", "Sneakers"),
]

# (name, brand index, category index, description)
SHOES = [
    ("Adilette Shower Slide Sandal", 1, 0,
     "Enjoy your after-pool sessions in the comfort of the Adidas Adilette Shower slide sandal."),
    ("Adilette CF+ Slide Sandal", 1, 0, ""),
    ("997H Sneaker", 2, 3, "Keep comfortable hitting the gym or the town. Womens"),
    ("997H Sneaker", 2, 1, "Keep comfortable hitting the gym or the town. Mens"),
    ("Pruce Sandal", 3, 4,
     "Featuring leather upper for a rich look, the Nine West Pruce sandal is just great to wear everyday."),
    ("Lite Racer Adapt 5.0 Sneaker", 1, 5,
     "Add comfort to their run-around days with the Lite Race Adapt 5.0 sneaker from Adidas."),
]

# (shoe index, size, color, qty, price)
SKUS = [
    (0, 7, "Blue", 5, "14.99"),
    (0, 8, "Blue", 5, "14.99"),
    (0, 9, "Blue", 5, "14.99"),
    (0, 10, "Black", 0, "19.99"),
    (1, 5, "Black", 3, "14.99"),
    (1, 8, "Black", 4, "14.99"),
    (2, 8, "Grey", 2, "49.99"),
    (2, 8, "Grey", 2, "49.99"),
    (3, 6, "Beige", 3, "83.99"),
    (4, 4, "Blue", 11, "67.99"),
]


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def created_id(result) -> str:
    """ID of the entity a create redirected to."""
    if not isinstance(result, Redirect):
        raise RuntimeError(f"Sample row rejected: {result.data.get('errors')}")
    return result.target.rsplit("/", 1)[-1]


async def populate(database_url: str) -> dict[str, int]:
    """
    Create the schema if needed and load the sample data.

    Returns:
        Number of rows of each kind after loading
    """
    engine = create_engine(database_url)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        session_maker = create_session_maker(engine)
        brand_service = BrandService(session_maker)
        category_service = CategoryService(session_maker)
        shoe_service = ShoeService(session_maker)
        sku_service = SKUService(session_maker)

        logger.info("Adding brands")
        brand_ids = [
            created_id(await brand_service.create_post({"name": name, "desc": desc}))
            for name, desc in BRANDS
        ]

        logger.info("Adding categories")
        category_ids = [
            created_id(await category_service.create_post({"gender": gender, "style": style}))
            for gender, style in CATEGORIES
        ]

        logger.info("Adding shoes")
        shoe_ids = [
            created_id(await shoe_service.create_post({
                "name": name,
                "brand": brand_ids[brand],
                "category": category_ids[category],
                "desc": desc,
            }))
            for name, brand, category, desc in SHOES
        ]

        logger.info("Adding SKUs")
        for shoe, size, color, qty, price in SKUS:
            created_id(await sku_service.create_post({
                "shoe": shoe_ids[shoe],
                "color": color,
                "size": size,
                "price": price,
                "qty": qty,
            }))

        index = await shoe_service.index()
        counts = {
            "brands": index.data["brand_count"],
            "categories": index.data["category_count"],
            "shoes": index.data["shoe_count"],
            "skus": index.data["sku_count"],
        }
        logger.info(f"Inventory now holds {counts}")
        return counts
    finally:
        await engine.dispose()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Load sample shoe inventory data")
    parser.add_argument(
        "--database-url",
        default=settings.DATABASE_URL,
        help="Async SQLAlchemy database URL (default: DATABASE_URL setting)",
    )
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    try:
        asyncio.run(populate(args.database_url))
    except Exception as e:
        logger.error(f"Populating inventory failed: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
