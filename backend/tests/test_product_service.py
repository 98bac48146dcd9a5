"""
Product API: Product Service Unit Tests
=========================================

What:  Tests for ProductService business rules (create, get, update, delete).
How:   Calls the service directly against real in-memory stores; no HTTP.

What we test:
    ✅ Create applies defaults and coerces price
    ✅ Create rejects missing or falsy name/price
    ✅ Unknown ids raise NotFoundError naming the id
    ✅ Update merges only the fields that were sent
    ✅ Delete succeeds once, then reports not found
"""

import pytest

from product_api.exceptions import NotFoundError, ValidationError
from product_api.schemas.product import ProductCreate
from product_api.services.product_service import ProductService, coerce_price


class TestCoercePrice:
    """Tests for the price coercion helper."""

    def test_int_passes_through(self):
        assert coerce_price(800) == 800
        assert isinstance(coerce_price(800), int)

    def test_float_passes_through(self):
        assert coerce_price(9.99) == 9.99

    def test_integer_string(self):
        result = coerce_price("15")
        assert result == 15
        assert isinstance(result, int)

    def test_decimal_string(self):
        assert coerce_price(" 9.5 ") == 9.5

    def test_non_numeric_string_rejected(self):
        with pytest.raises(ValidationError, match="Price must be a number."):
            coerce_price("cheap")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError):
            coerce_price("nan")


class TestProductServiceCreate:
    """Tests for create_product."""

    def setup_method(self):
        self.service = ProductService()

    @pytest.mark.asyncio
    async def test_create_applies_defaults(self, empty_store):
        """Omitted optional fields should get their documented defaults."""
        product = await self.service.create_product(
            empty_store, ProductCreate(name="Desk Lamp", price=35)
        )

        assert product.id
        assert product.name == "Desk Lamp"
        assert product.price == 35
        assert product.description == ""
        assert product.category == "miscellaneous"
        assert product.in_stock is True
        assert empty_store.find_by_id(product.id) == product

    @pytest.mark.asyncio
    async def test_create_keeps_supplied_fields(self, empty_store):
        payload = ProductCreate.model_validate(
            {
                "name": "Kettle",
                "description": "1.7L electric kettle",
                "price": "29.5",
                "category": "kitchen",
                "inStock": False,
            }
        )
        product = await self.service.create_product(empty_store, payload)

        assert product.description == "1.7L electric kettle"
        assert product.price == 29.5
        assert product.category == "kitchen"
        assert product.in_stock is False

    @pytest.mark.asyncio
    async def test_create_in_stock_null_is_false(self, empty_store):
        """An explicit null inStock counts as provided and falsy."""
        payload = ProductCreate.model_validate({"name": "Mug", "price": 5, "inStock": None})
        product = await self.service.create_product(empty_store, payload)
        assert product.in_stock is False

    @pytest.mark.asyncio
    async def test_create_in_stock_truthy_value(self, empty_store):
        payload = ProductCreate.model_validate({"name": "Mug", "price": 5, "inStock": "no"})
        product = await self.service.create_product(empty_store, payload)
        assert product.in_stock is True

    @pytest.mark.asyncio
    async def test_create_ignores_client_id(self, empty_store):
        payload = ProductCreate.model_validate({"id": "1", "name": "Mug", "price": 5})
        product = await self.service.create_product(empty_store, payload)
        assert product.id != "1"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"name": "Mug"},
            {"price": 5},
            {"name": "", "price": 5},
            {"name": "Mug", "price": 0},
            {"name": "Mug", "price": None},
        ],
    )
    async def test_create_requires_name_and_price(self, empty_store, body):
        with pytest.raises(ValidationError, match="Name and price are required fields."):
            await self.service.create_product(empty_store, ProductCreate.model_validate(body))
        assert len(empty_store) == 0

    @pytest.mark.asyncio
    async def test_create_rejects_non_numeric_price(self, empty_store):
        with pytest.raises(ValidationError, match="Price must be a number."):
            await self.service.create_product(
                empty_store, ProductCreate(name="Mug", price="free")
            )
        assert len(empty_store) == 0

    @pytest.mark.asyncio
    async def test_created_ids_are_unique(self, seeded_store):
        ids = set()
        for i in range(20):
            product = await self.service.create_product(
                seeded_store, ProductCreate(name=f"Item {i}", price=i + 1)
            )
            ids.add(product.id)
        assert len(ids) == 20
        assert ids.isdisjoint({"1", "2", "3"})


class TestProductServiceGet:
    """Tests for get_product and list_products."""

    def setup_method(self):
        self.service = ProductService()

    @pytest.mark.asyncio
    async def test_get_product_found(self, seeded_store):
        product = await self.service.get_product(seeded_store, "2")
        assert product.name == "smartphone"
        assert product.price == 800

    @pytest.mark.asyncio
    async def test_get_product_not_found(self, seeded_store):
        with pytest.raises(NotFoundError, match="Product with id 99 not found."):
            await self.service.get_product(seeded_store, "99")

    @pytest.mark.asyncio
    async def test_list_products_in_order(self, seeded_store):
        products = await self.service.list_products(seeded_store)
        assert [p.id for p in products] == ["1", "2", "3"]


class TestProductServiceUpdate:
    """Tests for update_product."""

    def setup_method(self):
        self.service = ProductService()

    @pytest.mark.asyncio
    async def test_update_preserves_unspecified_fields(self, seeded_store):
        updated = await self.service.update_product(seeded_store, "1", {"price": 999})

        assert updated.id == "1"
        assert updated.price == 999
        assert updated.name == "Laptop"
        assert updated.category == "electronics"
        assert updated.description == "High-performance laptop with 16GB RAM"
        assert updated.in_stock is True

    @pytest.mark.asyncio
    async def test_update_ignores_body_id_and_unknown_fields(self, seeded_store):
        body = {"id": "42", "color": "red", "name": "Notebook"}
        updated = await self.service.update_product(seeded_store, "1", body)

        assert updated.id == "1"
        assert updated.name == "Notebook"
        assert not hasattr(updated, "color")
        assert seeded_store.find_by_id("42") is None

    @pytest.mark.asyncio
    async def test_update_null_overwrites(self, seeded_store):
        body = {"description": None, "inStock": False, "price": None}
        updated = await self.service.update_product(seeded_store, "2", body)

        assert updated.description is None
        assert updated.in_stock is False
        assert updated.price is None
        assert updated.name == "smartphone"

    @pytest.mark.asyncio
    async def test_update_coerces_loose_values(self, seeded_store):
        body = {"name": 5, "price": "15", "inStock": 0}
        updated = await self.service.update_product(seeded_store, "1", body)

        assert updated.name == "5"
        assert updated.price == 15
        assert updated.in_stock is False

    @pytest.mark.asyncio
    async def test_update_non_object_body_changes_nothing(self, seeded_store):
        before = seeded_store.find_by_id("3")
        updated = await self.service.update_product(seeded_store, "3", ["price", 1])
        assert updated == before

        updated = await self.service.update_product(seeded_store, "3", None)
        assert updated == before

    @pytest.mark.asyncio
    @pytest.mark.parametrize("price", ["abc", float("nan"), float("inf")])
    async def test_update_rejects_non_numeric_price(self, seeded_store, price):
        with pytest.raises(ValidationError, match="Price must be a number."):
            await self.service.update_product(seeded_store, "1", {"price": price})

        assert seeded_store.find_by_id("1").price == 1200

    @pytest.mark.asyncio
    async def test_update_not_found(self, seeded_store):
        with pytest.raises(NotFoundError, match="Product with id 99 not found for update."):
            await self.service.update_product(seeded_store, "99", {"price": 1})

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{"price": "abc"}, {"name": 5}, {"price": float("nan")}])
    async def test_update_not_found_wins_over_bad_body(self, seeded_store, body):
        with pytest.raises(NotFoundError, match="Product with id nope not found for update."):
            await self.service.update_product(seeded_store, "nope", body)


class TestProductServiceDelete:
    """Tests for delete_product."""

    def setup_method(self):
        self.service = ProductService()

    @pytest.mark.asyncio
    async def test_delete_then_delete_again(self, seeded_store):
        result = await self.service.delete_product(seeded_store, "2")
        assert result.message == "Product with id 2 deleted successfully."
        assert seeded_store.find_by_id("2") is None

        with pytest.raises(NotFoundError, match="Product with id 2 not found for deletion."):
            await self.service.delete_product(seeded_store, "2")
