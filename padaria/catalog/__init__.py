"""Bakery catalog.

Provides category and product records, their stores, and the
controllers that validate and mediate catalog operations.
"""

from padaria.catalog.controllers import CategoryController, ProductController
from padaria.catalog.models import Category, Product
from padaria.catalog.schemas import CategoryCreate, ProductCreate, ProductUpdate
from padaria.catalog.store import (
    CategoryStore,
    InMemoryCategoryStore,
    InMemoryProductStore,
    ProductStore,
)

__all__ = [
    # Models
    "Category",
    "Product",
    # Schemas
    "CategoryCreate",
    "ProductCreate",
    "ProductUpdate",
    # Stores
    "CategoryStore",
    "InMemoryCategoryStore",
    "InMemoryProductStore",
    "ProductStore",
    # Controllers
    "CategoryController",
    "ProductController",
]
