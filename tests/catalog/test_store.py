"""Tests for in-memory catalog stores."""

from decimal import Decimal

import pytest

from padaria.catalog.models import Category, Product
from padaria.catalog.store import InMemoryCategoryStore, InMemoryProductStore
from padaria.domain.exceptions import DuplicateKeyError, NotFoundError


def make_product(name: str = "Brigadeiro", category: str = "Doces", price: str = "2.00") -> Product:
    """Create a test product."""
    return Product.create(name=name, price=Decimal(price), category=category)


class TestInMemoryCategoryStore:
    """Tests for InMemoryCategoryStore."""

    @pytest.mark.asyncio
    async def test_add_and_get(self, category_store: InMemoryCategoryStore) -> None:
        """Added category can be read back by name."""
        await category_store.add(Category(name="Pães", description="Pães frescos"))

        category = await category_store.get("Pães")
        assert category is not None
        assert category.description == "Pães frescos"

    @pytest.mark.asyncio
    async def test_get_is_case_sensitive(self, category_store: InMemoryCategoryStore) -> None:
        """Lookup by name is an exact match."""
        await category_store.add(Category(name="Pães"))
        assert await category_store.get("pães") is None
        assert await category_store.exists("Pães")
        assert not await category_store.exists("PÃES")

    @pytest.mark.asyncio
    async def test_duplicate_name_rejected(self, category_store: InMemoryCategoryStore) -> None:
        """Duplicate name raises and leaves the store unchanged."""
        await category_store.add(Category(name="Pães", description="original"))

        with pytest.raises(DuplicateKeyError):
            await category_store.add(Category(name="Pães", description="outra"))

        assert await category_store.count() == 1
        stored = await category_store.get("Pães")
        assert stored is not None
        assert stored.description == "original"

    @pytest.mark.asyncio
    async def test_list_all_keeps_creation_order(self, category_store: InMemoryCategoryStore) -> None:
        """Categories are listed in creation order."""
        for name in ["Salgados", "Doces", "Bebidas"]:
            await category_store.add(Category(name=name))

        names = [c.name for c in await category_store.list_all()]
        assert names == ["Salgados", "Doces", "Bebidas"]

    @pytest.mark.asyncio
    async def test_list_all_returns_fresh_snapshot(self, category_store: InMemoryCategoryStore) -> None:
        """Mutating a listing does not affect later listings."""
        await category_store.add(Category(name="Doces"))

        first = await category_store.list_all()
        first[0].description = "changed"
        first.clear()

        second = await category_store.list_all()
        assert len(second) == 1
        assert second[0].description == ""


class TestInMemoryProductStore:
    """Tests for InMemoryProductStore."""

    @pytest.mark.asyncio
    async def test_add_and_get(self, product_store: InMemoryProductStore) -> None:
        """Added product can be read back by id."""
        product = await product_store.add(make_product())

        stored = await product_store.get(product.id)
        assert stored == product

    @pytest.mark.asyncio
    async def test_get_unknown_returns_none(self, product_store: InMemoryProductStore) -> None:
        """Unknown id returns None."""
        assert await product_store.get("missing") is None

    @pytest.mark.asyncio
    async def test_duplicate_id_rejected(self, product_store: InMemoryProductStore) -> None:
        """Adding the same id twice raises."""
        product = make_product()
        await product_store.add(product)

        with pytest.raises(DuplicateKeyError):
            await product_store.add(product)
        assert await product_store.count() == 1

    @pytest.mark.asyncio
    async def test_returned_records_are_detached(self, product_store: InMemoryProductStore) -> None:
        """Mutating a returned product does not change the store."""
        product = await product_store.add(make_product())
        product.price = Decimal("500")

        listed = await product_store.list_all()
        listed[0].name = "changed"

        stored = await product_store.get(product.id)
        assert stored is not None
        assert stored.price == Decimal("2.00")
        assert stored.name == "Brigadeiro"

    @pytest.mark.asyncio
    async def test_find_by_category(self, product_store: InMemoryProductStore) -> None:
        """Products are filtered by exact category name."""
        await product_store.add(make_product("Brigadeiro", "Doces"))
        await product_store.add(make_product("Coxinha", "Salgados"))
        await product_store.add(make_product("Beijinho", "Doces"))

        names = [p.name for p in await product_store.find_by_category("Doces")]
        assert names == ["Brigadeiro", "Beijinho"]
        assert await product_store.find_by_category("doces") == []

    @pytest.mark.asyncio
    async def test_replace_overwrites_fields(self, product_store: InMemoryProductStore) -> None:
        """Replace overwrites every mutable field and bumps updated_at."""
        product = await product_store.add(make_product())

        replacement = Product(
            id=product.id,
            name="Brigadeiro Gourmet",
            price=Decimal("5.00"),
            category="Doces",
            description="",
        )
        updated = await product_store.replace(replacement)

        assert updated.name == "Brigadeiro Gourmet"
        assert updated.price == Decimal("5.00")
        assert updated.created_at == product.created_at
        assert updated.updated_at >= product.updated_at

    @pytest.mark.asyncio
    async def test_replace_unknown_raises(self, product_store: InMemoryProductStore) -> None:
        """Replacing an unknown id raises NotFoundError."""
        await product_store.add(make_product())

        with pytest.raises(NotFoundError):
            await product_store.replace(make_product("Fantasma"))

        names = [p.name for p in await product_store.list_all()]
        assert names == ["Brigadeiro"]
