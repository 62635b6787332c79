"""Catalog controllers.

Controllers validate incoming payloads and mediate access to the
stores. They hold no state of their own beyond the store references.

Example usage:
    categories = InMemoryCategoryStore()
    products = InMemoryProductStore()

    category_controller = CategoryController(categories)
    product_controller = ProductController(products, categories)

    await category_controller.create_category({"name": "Pães"})
    product = await product_controller.create_product(
        {"name": "Pão Francês", "price": 0.5, "category": "Pães"}
    )
"""

from collections.abc import Mapping
from typing import Any, TypeVar

import structlog
from pydantic import BaseModel, ValidationError

from padaria.catalog.models import Category, Product
from padaria.catalog.schemas import CategoryCreate, ProductCreate, ProductUpdate
from padaria.catalog.store import CategoryStore, ProductStore
from padaria.domain.exceptions import (
    CatalogValidationError,
    InvalidReferenceError,
    NotFoundError,
)

logger = structlog.get_logger()

M = TypeVar("M", bound=BaseModel)


def parse_payload(schema: type[M], data: Any, entity_type: str) -> M:
    """Validate a payload against a schema.

    Accepts an instance of the schema, a mapping, or any object exposing
    the schema's fields as attributes (e.g. a Product record).

    Args:
        schema: Pydantic model to validate against.
        data: Payload to validate.
        entity_type: Entity name used in the error.

    Returns:
        Validated schema instance.

    Raises:
        CatalogValidationError: The payload does not satisfy the schema.
    """
    if isinstance(data, schema):
        return data
    try:
        if isinstance(data, Mapping):
            return schema.model_validate(dict(data))
        return schema.model_validate(data, from_attributes=True)
    except ValidationError as exc:
        errors = [
            {
                "field": ".".join(str(part) for part in error["loc"]),
                "message": error["msg"],
            }
            for error in exc.errors()
        ]
        raise CatalogValidationError(entity_type, errors) from exc


# ============================================================================
# Category Controller
# ============================================================================


class CategoryController:
    """Mediates category creation and listing."""

    def __init__(self, categories: CategoryStore) -> None:
        """Initialize controller.

        Args:
            categories: Store owning the categories.
        """
        self.categories = categories

    async def create_category(self, data: CategoryCreate | Mapping[str, Any]) -> Category:
        """Create a category.

        Args:
            data: Category payload with name and description.

        Returns:
            The created category.

        Raises:
            CatalogValidationError: Payload is invalid.
            DuplicateKeyError: A category with the same name exists.
        """
        payload = parse_payload(CategoryCreate, data, "Category")
        category = await self.categories.add(
            Category(name=payload.name, description=payload.description)
        )
        logger.info("Category created", category=category.name)
        return category

    async def get_all_categories(self) -> list[Category]:
        """List all categories in creation order."""
        return await self.categories.list_all()

    async def get_category(self, name: str) -> Category:
        """Get category by exact name.

        Raises:
            NotFoundError: No category has this name.
        """
        category = await self.categories.get(name)
        if category is None:
            raise NotFoundError("Category", name)
        return category


# ============================================================================
# Product Controller
# ============================================================================


class ProductController:
    """Mediates product creation, listing, filtering and update."""

    def __init__(self, products: ProductStore, categories: CategoryStore) -> None:
        """Initialize controller.

        Args:
            products: Store owning the products.
            categories: Store used to check category references.
        """
        self.products = products
        self.categories = categories

    async def create_product(self, data: ProductCreate | Mapping[str, Any]) -> Product:
        """Create a product with a fresh id.

        Args:
            data: Product payload with name, price, category and description.

        Returns:
            The created product.

        Raises:
            CatalogValidationError: Payload is invalid.
            InvalidReferenceError: The category does not exist.
        """
        payload = parse_payload(ProductCreate, data, "Product")
        await self._check_category(payload.category)

        product = await self.products.add(
            Product.create(
                name=payload.name,
                price=payload.price,
                category=payload.category,
                description=payload.description,
            )
        )
        logger.info(
            "Product created",
            product_id=product.id,
            product_name=product.name,
            category=product.category,
        )
        return product

    async def get_all_products(self) -> list[Product]:
        """List all products in creation order."""
        return await self.products.list_all()

    async def get_products_by_category(self, category_name: str) -> list[Product]:
        """List products of one category.

        Unknown category names yield an empty list, not an error.
        """
        return await self.products.find_by_category(category_name)

    async def get_product(self, product_id: str) -> Product:
        """Get product by ID.

        Raises:
            NotFoundError: No product has this id.
        """
        product = await self.products.get(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    async def update_product(self, data: ProductUpdate | Product | Mapping[str, Any]) -> Product:
        """Overwrite every mutable field of an existing product.

        Args:
            data: Full product record including its id.

        Returns:
            The updated product.

        Raises:
            CatalogValidationError: Payload is invalid.
            NotFoundError: No product has the given id.
            InvalidReferenceError: The new category does not exist.
        """
        payload = parse_payload(ProductUpdate, data, "Product")
        if await self.products.get(payload.id) is None:
            raise NotFoundError("Product", payload.id)
        await self._check_category(payload.category)

        product = await self.products.replace(
            Product(
                id=payload.id,
                name=payload.name,
                price=payload.price,
                category=payload.category,
                description=payload.description,
            )
        )
        logger.info("Product updated", product_id=product.id, price=str(product.price))
        return product

    async def _check_category(self, name: str) -> None:
        if not await self.categories.exists(name):
            raise InvalidReferenceError("Category", "category", name)
