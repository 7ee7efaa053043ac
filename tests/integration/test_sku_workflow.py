"""
Integration tests for the SKU workflow.
"""

from decimal import Decimal

import pytest

from inventory.core.exceptions import NotFoundError
from inventory.services.results import Redirect, ValidationFailed


@pytest.fixture
async def air_max(seed):
    nike = await seed.brand("Nike")
    sneakers = await seed.category("mens", "Sneakers")
    return await seed.shoe("Air Max", nike, sneakers)


@pytest.mark.integration
class TestSKUWorkflow:

    async def test_create_then_detail(self, sku_service, seed, air_max):
        sku_id = await seed.sku(air_max, color="Red", size=9, price="49.99", qty=3)

        result = await sku_service.detail(sku_id)

        sku = result.data["sku"]
        assert result.view == "sku_detail"
        assert (sku.shoe_id, sku.color, sku.size, sku.price, sku.qty) == (
            air_max, "Red", 9, Decimal("49.99"), 3,
        )
        assert sku.shoe.name == "Air Max"

    async def test_duplicate_create_resolves_to_first(self, sku_service, seed, air_max):
        first = await seed.sku(air_max, color="Red", size=9, price="49.99", qty=3)
        second = await seed.sku(air_max, color="Red", size=9, price="49.99", qty=3)

        assert first == second
        assert await sku_service.skus.count(shoe_id=air_max) == 1

    async def test_qty_defaults_to_zero(self, sku_service, air_max):
        result = await sku_service.create_post(
            {"shoe": air_max, "color": "Red", "size": "9", "price": "10"}
        )

        sku_id = result.target.rsplit("/", 1)[-1]
        assert (await sku_service.detail(sku_id)).data["sku"].qty == 0

    async def test_invalid_create_reports_every_field(self, sku_service, air_max):
        result = await sku_service.create_post(
            {"shoe": "missing", "color": "Re", "size": "0", "price": "-1", "qty": "x"}
        )

        assert isinstance(result, ValidationFailed)
        assert [e.field for e in result.errors] == ["shoe", "color", "size", "price", "qty"]
        assert result.data["selected_shoe"] == "missing"
        assert [s.id for s in result.data["shoe_list"]] == [air_max]
        assert await sku_service.skus.count() == 0

    async def test_shoe_choices_sorted_by_brand_then_name(self, sku_service, seed):
        sneakers = await seed.category("mens", "Sneakers")
        nike = await seed.brand("nike")
        adidas = await seed.brand("Adidas")
        await seed.shoe("pegasus", nike, sneakers)
        await seed.shoe("Air Max", nike, sneakers)
        await seed.shoe("Superstar", adidas, sneakers)

        shoes = await sku_service.shoe_choices()

        assert [(s.brand.name, s.name) for s in shoes] == [
            ("Adidas", "Superstar"),
            ("nike", "Air Max"),
            ("nike", "pegasus"),
        ]

    async def test_create_form(self, sku_service, air_max):
        result = await sku_service.create_get()

        assert result.view == "sku_form"
        assert [s.id for s in result.data["shoe_list"]] == [air_max]
        assert result.data["sku"] is None

    async def test_list_in_insertion_order(self, sku_service, seed, air_max):
        await seed.sku(air_max, color="Red", size=10)
        await seed.sku(air_max, color="Blue", size=8)

        result = await sku_service.list_all()

        skus = result.data["sku_list"]
        assert [(s.color, s.size) for s in skus] == [("Red", 10), ("Blue", 8)]
        assert skus[0].shoe.name == "Air Max"

    async def test_update(self, sku_service, seed, air_max):
        sku_id = await seed.sku(air_max, qty=3)

        result = await sku_service.update_post(
            sku_id, {"shoe": air_max, "color": "Red", "size": 9, "price": "39.50", "qty": 1}
        )

        assert result == Redirect(f"/inventory/sku/{sku_id}")
        sku = (await sku_service.detail(sku_id)).data["sku"]
        assert (sku.price, sku.qty) == (Decimal("39.50"), 1)

    async def test_invalid_update_leaves_sku_unchanged(self, sku_service, seed, air_max):
        sku_id = await seed.sku(air_max, color="Red", size=9, price="49.99", qty=3)

        result = await sku_service.update_post(
            sku_id, {"shoe": air_max, "color": "Red", "size": 9, "price": "-5", "qty": 7}
        )

        assert isinstance(result, ValidationFailed)
        assert [e.field for e in result.errors] == ["price"]
        assert result.data["sku"]["id"] == sku_id
        assert result.data["selected_shoe"] == air_max
        sku = (await sku_service.detail(sku_id)).data["sku"]
        assert (sku.price, sku.qty) == (Decimal("49.99"), 3)

    async def test_update_to_taken_variant(self, sku_service, seed, air_max):
        await seed.sku(air_max, color="Red", size=9)
        blue = await seed.sku(air_max, color="Blue", size=9)

        result = await sku_service.update_post(
            blue, {"shoe": air_max, "color": "Red", "size": 9, "price": "1", "qty": 1}
        )

        assert isinstance(result, ValidationFailed)
        assert [e.field for e in result.errors] == ["color"]

    async def test_update_form_offers_only_own_shoe(self, sku_service, seed, air_max):
        nike = await seed.brand("Nike")
        sneakers = await seed.category("mens", "Sneakers")
        await seed.shoe("Pegasus", nike, sneakers)
        sku_id = await seed.sku(air_max)

        result = await sku_service.update_get(sku_id)

        shoe_list = result.data["shoe_list"]
        assert [s.id for s in shoe_list] == [air_max]
        assert shoe_list[0].brand.name == "Nike"
        assert result.data["selected_shoe"] == air_max

    async def test_missing_sku(self, sku_service, air_max):
        with pytest.raises(NotFoundError):
            await sku_service.detail("missing")
        with pytest.raises(NotFoundError):
            await sku_service.update_get("missing")
        with pytest.raises(NotFoundError):
            await sku_service.update_post(
                "missing", {"shoe": air_max, "color": "Red", "size": 9, "price": "1"}
            )
        assert await sku_service.delete_get("missing") == Redirect("/inventory/skus")

    async def test_delete(self, sku_service, seed, air_max):
        sku_id = await seed.sku(air_max)

        confirmation = await sku_service.delete_get(sku_id)
        assert confirmation.data["sku"].id == sku_id

        assert await sku_service.delete_post(sku_id) == Redirect("/inventory/skus")
        assert await sku_service.skus.find_by_id(sku_id) is None
        assert await sku_service.delete_post(sku_id) == Redirect("/inventory/skus")

    async def test_out_of_range_numbers_rejected_before_storage(self, sku_service, air_max):
        result = await sku_service.create_post(
            {"shoe": air_max, "color": "Red", "size": "9", "price": "1e30", "qty": "99999999999999999999"}
        )

        assert isinstance(result, ValidationFailed)
        assert [e.field for e in result.errors] == ["price", "qty"]
        assert await sku_service.skus.count() == 0

    async def test_largest_accepted_values_are_stored(self, sku_service, seed, air_max):
        color = '"' * 50
        sku_id = await seed.sku(air_max, color=color, size=99, price="99999999.99", qty=2147483647)

        sku = (await sku_service.detail(sku_id)).data["sku"]
        assert sku.color == "&quot;" * 50
        assert (sku.size, sku.price, sku.qty) == (99, Decimal("99999999.99"), 2147483647)
