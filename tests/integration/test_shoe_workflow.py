"""
Integration tests for the shoe workflow and the inventory home counts.
"""

from decimal import Decimal

import pytest

from inventory.core.exceptions import NotFoundError
from inventory.services.results import DependencyConflict, Ok, Redirect, ValidationFailed


@pytest.fixture
async def nike(seed):
    return await seed.brand("Nike")


@pytest.fixture
async def sneakers(seed):
    return await seed.category("mens", "Sneakers")


@pytest.mark.integration
class TestShoeWorkflow:

    async def test_create_then_detail(self, shoe_service, seed, nike, sneakers):
        shoe_id = await seed.shoe("Air Max", nike, sneakers, "Cushioned")

        result = await shoe_service.detail(shoe_id)

        assert result.view == "shoe_detail"
        shoe = result.data["shoe"]
        assert (shoe.name, shoe.desc, shoe.brand_id, shoe.category_id) == (
            "Air Max", "Cushioned", nike, sneakers,
        )
        assert shoe.brand.name == "Nike"
        assert shoe.category.style == "Sneakers"
        assert result.data["skus"] == []

    async def test_detail_collects_sku_attributes(self, shoe_service, seed, nike, sneakers):
        shoe_id = await seed.shoe("Air Max", nike, sneakers)
        await seed.sku(shoe_id, color="Red", size=9, price="49.99")
        await seed.sku(shoe_id, color="Blue", size=9, price="59.99")
        await seed.sku(shoe_id, color="Red", size=10, price="49.99")

        result = await shoe_service.detail(shoe_id)

        assert len(result.data["skus"]) == 3
        assert sorted(result.data["colors"]) == ["Blue", "Red"]
        assert sorted(result.data["sizes"]) == [9, 10]
        assert sorted(result.data["prices"]) == [Decimal("49.99"), Decimal("59.99")]

    async def test_unknown_references_reported_per_field(self, shoe_service, nike):
        result = await shoe_service.create_post(
            {"name": "", "brand": "missing", "category": "missing"}
        )

        assert isinstance(result, ValidationFailed)
        assert [(e.field, e.message) for e in result.errors] == [
            ("name", "Name must not be empty."),
            ("brand", "Brand not found"),
            ("category", "Category not found"),
        ]
        assert [b.id for b in result.data["brand_list"]] == [nike]
        assert await shoe_service.shoes.count() == 0

    async def test_duplicate_create_resolves_to_first(self, shoe_service, seed, nike, sneakers):
        boots = await seed.category("mens", "Boots")
        first = await seed.shoe("Air Max", nike, sneakers)
        second = await seed.shoe("Air Max", nike, boots)

        assert first == second
        assert await shoe_service.shoes.count() == 1

    async def test_same_name_other_brand_is_distinct(self, shoe_service, seed, nike, sneakers):
        adidas = await seed.brand("Adidas")

        first = await seed.shoe("Runner", nike, sneakers)
        second = await seed.shoe("Runner", adidas, sneakers)

        assert first != second

    async def test_list_sorted_with_references(self, shoe_service, seed, nike, sneakers):
        await seed.shoe("Pegasus", nike, sneakers)
        await seed.shoe("Air Max", nike, sneakers)

        result = await shoe_service.list_all()

        shoes = result.data["shoe_list"]
        assert [s.name for s in shoes] == ["Air Max", "Pegasus"]
        assert shoes[0].brand.name == "Nike"
        assert shoes[0].category.style == "Sneakers"

    async def test_create_form_lists_choices(self, shoe_service, seed, nike):
        await seed.category("womens", "Boots")
        await seed.category("kids", "Boots")

        result = await shoe_service.create_get()

        assert result.view == "shoe_form"
        assert [b.name for b in result.data["brand_list"]] == ["Nike"]
        assert [c.gender.value for c in result.data["category_list"]] == ["kids", "womens"]
        assert result.data["shoe"] is None

    async def test_update(self, shoe_service, seed, nike, sneakers):
        adidas = await seed.brand("Adidas")
        shoe_id = await seed.shoe("Air Max", nike, sneakers)

        result = await shoe_service.update_post(
            shoe_id, {"name": "Superstar", "brand": adidas, "category": sneakers}
        )

        assert result == Redirect(f"/inventory/shoe/{shoe_id}")
        shoe = (await shoe_service.detail(shoe_id)).data["shoe"]
        assert (shoe.name, shoe.brand.name) == ("Superstar", "Adidas")

    async def test_invalid_update_leaves_shoe_unchanged(self, shoe_service, seed, nike, sneakers):
        shoe_id = await seed.shoe("Air Max", nike, sneakers)

        result = await shoe_service.update_post(
            shoe_id, {"name": "Renamed", "brand": "missing", "category": sneakers}
        )

        assert isinstance(result, ValidationFailed)
        assert [e.field for e in result.errors] == ["brand"]
        assert result.data["shoe"]["id"] == shoe_id
        assert (await shoe_service.detail(shoe_id)).data["shoe"].name == "Air Max"

    async def test_update_to_taken_name(self, shoe_service, seed, nike, sneakers):
        await seed.shoe("Air Max", nike, sneakers)
        pegasus = await seed.shoe("Pegasus", nike, sneakers)

        result = await shoe_service.update_post(
            pegasus, {"name": "Air Max", "brand": nike, "category": sneakers}
        )

        assert isinstance(result, ValidationFailed)
        assert [e.field for e in result.errors] == ["name"]

    async def test_update_form(self, shoe_service, seed, nike, sneakers):
        shoe_id = await seed.shoe("Air Max", nike, sneakers)

        result = await shoe_service.update_get(shoe_id)

        assert result.data["shoe"].id == shoe_id
        assert [b.id for b in result.data["brand_list"]] == [nike]

    async def test_missing_shoe(self, shoe_service, nike, sneakers):
        with pytest.raises(NotFoundError):
            await shoe_service.detail("missing")
        with pytest.raises(NotFoundError):
            await shoe_service.update_get("missing")
        with pytest.raises(NotFoundError):
            await shoe_service.update_post(
                "missing", {"name": "Air Max", "brand": nike, "category": sneakers}
            )
        assert await shoe_service.delete_get("missing") == Redirect("/inventory/shoes")

    async def test_delete_blocked_by_skus(self, shoe_service, seed, nike, sneakers):
        shoe_id = await seed.shoe("Air Max", nike, sneakers)
        sku_id = await seed.sku(shoe_id)

        result = await shoe_service.delete_post(shoe_id)

        assert isinstance(result, DependencyConflict)
        assert result.view == "shoe_delete"
        assert [s.id for s in result.dependents] == [sku_id]
        assert await shoe_service.shoes.find_by_id(shoe_id) is not None

    async def test_delete_confirmation(self, shoe_service, seed, nike, sneakers):
        shoe_id = await seed.shoe("Air Max", nike, sneakers)
        await seed.sku(shoe_id)

        result = await shoe_service.delete_get(shoe_id)

        assert result.view == "shoe_delete"
        assert result.data["shoe"].brand.name == "Nike"
        assert len(result.data["skus"]) == 1

    async def test_delete_cascade_order(self, brand_service, shoe_service, seed, sneakers):
        b1 = await seed.brand("Nike")
        s1 = await seed.shoe("Air", b1, sneakers)

        blocked = await brand_service.delete_post(b1)
        assert isinstance(blocked, DependencyConflict)
        assert [s.id for s in blocked.dependents] == [s1]

        assert await shoe_service.delete_post(s1) == Redirect("/inventory/shoes")
        assert await brand_service.delete_post(b1) == Redirect("/inventory/brands")
        assert await brand_service.brands.find_by_id(b1) is None


@pytest.mark.integration
class TestInventoryHome:

    async def test_empty_inventory(self, shoe_service):
        result = await shoe_service.index()

        assert isinstance(result, Ok)
        assert result.view == "index"
        assert result.data == {
            "title": "Home",
            "shoe_count": 0,
            "sku_count": 0,
            "sku_in_stock_count": 0,
            "brand_count": 0,
            "category_count": 0,
        }

    async def test_counts(self, shoe_service, seed, nike, sneakers):
        shoe_id = await seed.shoe("Air Max", nike, sneakers)
        await seed.sku(shoe_id, color="Red", size=9, qty=3)
        await seed.sku(shoe_id, color="Red", size=10, qty=0)

        data = (await shoe_service.index()).data

        assert data["shoe_count"] == 1
        assert data["sku_count"] == 2
        assert data["sku_in_stock_count"] == 1
        assert data["brand_count"] == 1
        assert data["category_count"] == 1


@pytest.mark.integration
class TestEscapedText:

    async def test_longest_names_are_stored_escaped(self, shoe_service, seed):
        brand_id = await seed.brand("'" * 100)
        category_id = await seed.category("mens", "<" * 100)
        shoe_id = await seed.shoe("&" * 98 + "ab", brand_id, category_id)

        shoe = (await shoe_service.detail(shoe_id)).data["shoe"]
        assert shoe.name == "&amp;" * 98 + "ab"
        assert shoe.brand.name == "&#x27;" * 100
        assert shoe.category.style == "&lt;" * 100
