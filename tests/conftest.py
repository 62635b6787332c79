"""Shared fixtures for catalog tests."""

from decimal import Decimal

import pytest
import pytest_asyncio

from padaria.application.bakery_system import BakerySystem
from padaria.catalog.controllers import CategoryController, ProductController
from padaria.catalog.models import Category
from padaria.catalog.store import InMemoryCategoryStore, InMemoryProductStore
from padaria.infrastructure.activity_log import ActivityLogger, MemoryLogSink
from padaria.infrastructure.config import Settings


DEFAULT_CATEGORY_NAMES = ["Pães", "Doces", "Salgados", "Bebidas"]


# ============================================================================
# Store & Controller Fixtures
# ============================================================================


@pytest.fixture
def category_store() -> InMemoryCategoryStore:
    """Create an empty category store."""
    return InMemoryCategoryStore()


@pytest.fixture
def product_store() -> InMemoryProductStore:
    """Create an empty product store."""
    return InMemoryProductStore()


@pytest.fixture
def category_controller(category_store: InMemoryCategoryStore) -> CategoryController:
    """Create category controller over the test store."""
    return CategoryController(category_store)


@pytest.fixture
def product_controller(
    product_store: InMemoryProductStore,
    category_store: InMemoryCategoryStore,
) -> ProductController:
    """Create product controller over the test stores."""
    return ProductController(product_store, category_store)


@pytest_asyncio.fixture
async def seeded_categories(category_controller: CategoryController) -> list[Category]:
    """Create the four default categories."""
    return [
        await category_controller.create_category({"name": name, "description": f"{name} da casa"})
        for name in DEFAULT_CATEGORY_NAMES
    ]


# ============================================================================
# Logging & System Fixtures
# ============================================================================


@pytest.fixture
def memory_sink() -> MemoryLogSink:
    """Create an in-memory log sink."""
    return MemoryLogSink()


@pytest.fixture
def activity(memory_sink: MemoryLogSink) -> ActivityLogger:
    """Create an activity logger writing only to memory."""
    return ActivityLogger(sinks=[memory_sink])


@pytest.fixture
def settings() -> Settings:
    """Create settings that ignore any local .env file."""
    return Settings(
        _env_file=None,
        price_increase=Decimal("10"),
        price_update_ceiling=Decimal("1000"),
    )


@pytest.fixture
def system(
    category_controller: CategoryController,
    product_controller: ProductController,
    activity: ActivityLogger,
    settings: Settings,
) -> BakerySystem:
    """Create a bakery system over empty stores."""
    return BakerySystem(
        categories=category_controller,
        products=product_controller,
        activity=activity,
        settings=settings,
    )
