"""Catalog stores.

Each store exclusively owns the collection of one record type. The
abstract classes describe the contract; the in-memory implementations
keep state in insertion-ordered dicts for the lifetime of the process.
A persistent store can be swapped in by implementing the same contract.
"""

from abc import ABC, abstractmethod

import structlog

from padaria.catalog.models import Category, Product
from padaria.domain.exceptions import DuplicateKeyError, NotFoundError

logger = structlog.get_logger()


# ============================================================================
# Store Contracts
# ============================================================================


class CategoryStore(ABC):
    """Store for categories keyed by unique name.

    Reads return detached copies in creation order.
    """

    @abstractmethod
    async def add(self, category: Category) -> Category:
        """Insert a new category.

        Args:
            category: Category to insert.

        Returns:
            Copy of the stored category.

        Raises:
            DuplicateKeyError: A category with the same name exists.
        """

    @abstractmethod
    async def get(self, name: str) -> Category | None:
        """Get category by exact name.

        Args:
            name: Category name (case-sensitive).

        Returns:
            Category if found, None otherwise.
        """

    @abstractmethod
    async def list_all(self) -> list[Category]:
        """List all categories in creation order."""

    async def exists(self, name: str) -> bool:
        """Check whether a category with this exact name exists."""
        return await self.get(name) is not None

    async def count(self) -> int:
        """Count stored categories."""
        return len(await self.list_all())


class ProductStore(ABC):
    """Store for products keyed by generated id.

    Reads return detached copies in creation order.
    """

    @abstractmethod
    async def add(self, product: Product) -> Product:
        """Insert a new product.

        Args:
            product: Product with a freshly generated id.

        Returns:
            Copy of the stored product.

        Raises:
            DuplicateKeyError: A product with the same id exists.
        """

    @abstractmethod
    async def get(self, product_id: str) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product if found, None otherwise.
        """

    @abstractmethod
    async def list_all(self) -> list[Product]:
        """List all products in creation order."""

    @abstractmethod
    async def replace(self, product: Product) -> Product:
        """Overwrite the mutable fields of an existing product.

        Args:
            product: Product carrying the id to replace and the new values.

        Returns:
            Copy of the stored product after the overwrite.

        Raises:
            NotFoundError: No product with that id exists.
        """

    async def find_by_category(self, category: str) -> list[Product]:
        """List products whose category equals the given name exactly.

        Args:
            category: Category name (case-sensitive).

        Returns:
            Matching products in creation order, possibly empty.
        """
        return [p for p in await self.list_all() if p.category == category]

    async def count(self) -> int:
        """Count stored products."""
        return len(await self.list_all())


# ============================================================================
# In-Memory Stores
# ============================================================================


class InMemoryCategoryStore(CategoryStore):
    """In-memory category store."""

    def __init__(self) -> None:
        self._categories: dict[str, Category] = {}

    async def add(self, category: Category) -> Category:
        if category.name in self._categories:
            raise DuplicateKeyError("Category", category.name)
        stored = category.copy()
        self._categories[stored.name] = stored
        logger.debug("Category stored", category=stored.name)
        return stored.copy()

    async def get(self, name: str) -> Category | None:
        category = self._categories.get(name)
        return category.copy() if category else None

    async def list_all(self) -> list[Category]:
        return [c.copy() for c in self._categories.values()]

    async def count(self) -> int:
        return len(self._categories)


class InMemoryProductStore(ProductStore):
    """In-memory product store."""

    def __init__(self) -> None:
        self._products: dict[str, Product] = {}

    async def add(self, product: Product) -> Product:
        if product.id in self._products:
            raise DuplicateKeyError("Product", product.id)
        stored = product.copy()
        self._products[stored.id] = stored
        logger.debug("Product stored", product_id=stored.id, product_name=stored.name)
        return stored.copy()

    async def get(self, product_id: str) -> Product | None:
        product = self._products.get(product_id)
        return product.copy() if product else None

    async def list_all(self) -> list[Product]:
        return [p.copy() for p in self._products.values()]

    async def replace(self, product: Product) -> Product:
        stored = self._products.get(product.id)
        if stored is None:
            raise NotFoundError("Product", product.id)

        stored.name = product.name
        stored.price = product.price
        stored.category = product.category
        stored.description = product.description
        stored._touch()

        logger.debug("Product replaced", product_id=stored.id)
        return stored.copy()

    async def count(self) -> int:
        return len(self._products)
