"""Bakery system orchestration.

Seeds the default catalog, demonstrates the catalog operations and
prints a console report. Per-item failures are logged and skipped;
only a failure of the init sequence itself propagates to the caller.
"""

import asyncio
from dataclasses import dataclass, field, replace
from decimal import Decimal

import structlog

from padaria.catalog.controllers import CategoryController, ProductController
from padaria.catalog.models import Category, Product
from padaria.catalog.seed import DEFAULT_CATEGORIES, SAMPLE_PRODUCTS
from padaria.catalog.store import InMemoryCategoryStore, InMemoryProductStore
from padaria.domain.exceptions import DomainError, DuplicateKeyError
from padaria.infrastructure.activity_log import ActivityLogger
from padaria.infrastructure.config import Settings

logger = structlog.get_logger()


MENU_OPTIONS = [
    "1. Listar todos os produtos",
    "2. Listar todas as categorias",
    "3. Buscar produtos por categoria",
    "4. Criar novo produto",
    "5. Criar nova categoria",
    "6. Ver logs do sistema",
    "0. Sair",
]


# ============================================================================
# Result Types
# ============================================================================


@dataclass
class PriceUpdateResult:
    """Outcome of a batch price update.

    Attributes:
        updated: Products whose update was applied, in catalog order.
        errors: One entry per failed product with its id and the error.
    """

    updated: list[Product] = field(default_factory=list)
    errors: list[dict[str, str]] = field(default_factory=list)

    @property
    def updated_count(self) -> int:
        """Number of products actually updated."""
        return len(self.updated)


# ============================================================================
# Orchestration
# ============================================================================


class BakerySystem:
    """Console orchestration over the catalog controllers.

    Example usage:
        system = create_system(Settings())
        await system.init()
        system.show_menu()
    """

    def __init__(
        self,
        categories: CategoryController,
        products: ProductController,
        activity: ActivityLogger,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the system.

        Args:
            categories: Category controller.
            products: Product controller.
            activity: Activity logger receiving every outcome.
            settings: Display and demonstration settings.
        """
        self.categories = categories
        self.products = products
        self.activity = activity
        self.settings = settings or Settings()

    async def init(self, demonstrate: bool = True) -> None:
        """Run the startup sequence.

        Args:
            demonstrate: Whether to run the feature demonstration after seeding.

        Raises:
            Exception: Any failure of the sequence, after it has been logged.
        """
        print(f"=== {self.settings.app_name.upper()} ===")
        print("Inicializando sistema...")
        try:
            await self.activity.info("Sistema da padaria iniciado")
            await self.create_default_categories()
            await self.create_sample_products()
            if demonstrate:
                await self.demonstrate_features()
        except Exception as exc:
            await self.activity.error("Erro ao inicializar sistema", {"error": str(exc)})
            print(f"✗ Erro ao inicializar: {exc}")
            raise

        print()
        print("✓ Sistema inicializado com sucesso!")

    async def create_default_categories(self) -> list[Category]:
        """Seed the default categories.

        Existing categories are reported as warnings, not failures.

        Returns:
            Categories created by this call.
        """
        print()
        print("Criando categorias padrão...")

        created: list[Category] = []
        for data in DEFAULT_CATEGORIES:
            try:
                category = await self.categories.create_category(data)
            except DuplicateKeyError:
                print(f'  ⚠ Categoria "{data.name}" já existe')
                await self.activity.warning(f"Categoria já existe: {data.name}")
            except DomainError as exc:
                await self.activity.error(
                    f"Erro ao criar categoria {data.name}", {"error": exc.message}
                )
            except Exception as exc:
                logger.exception("Category seeding failed", category=data.name)
                await self.activity.error(
                    f"Erro ao criar categoria {data.name}", {"error": str(exc)}
                )
            else:
                created.append(category)
                await self.activity.success(f"Categoria criada: {category.name}")

        return created

    async def create_sample_products(self) -> list[Product]:
        """Seed the sample products.

        Returns:
            Products created by this call.
        """
        print()
        print("Criando produtos de exemplo...")

        created: list[Product] = []
        for data in SAMPLE_PRODUCTS:
            try:
                product = await self.products.create_product(data)
            except DomainError as exc:
                await self.activity.error(
                    f"Erro ao criar produto {data.name}", {"error": exc.message}
                )
            except Exception as exc:
                logger.exception("Product seeding failed", product_name=data.name)
                await self.activity.error(
                    f"Erro ao criar produto {data.name}", {"error": str(exc)}
                )
            else:
                created.append(product)
                await self.activity.success(f"Produto criado: {product.name}")

        return created

    async def demonstrate_features(self) -> PriceUpdateResult | None:
        """List, filter and update the catalog, printing each step.

        Returns:
            Result of the batch price update, or None if the demo failed.
        """
        print()
        print("Demonstrando funcionalidades...")
        try:
            print()
            print("Todos os produtos:")
            for product in await self.products.get_all_products():
                print(f"- {product.name} - {product.format_price(self.settings.currency_symbol)}")

            print()
            print("Todas as categorias:")
            for category in await self.categories.get_all_categories():
                print(f"- {category.name}")

            demo_category = self.settings.demo_category
            print()
            print(f'Produtos da categoria "{demo_category}":')
            matches = await self.products.get_products_by_category(demo_category)
            for product in matches:
                print(f"- {product.name} - {product.format_price(self.settings.currency_symbol)}")
            if not matches:
                print("  (nenhum produto)")

            print()
            print("Atualizando valores de preço...")
            result = await self.increase_prices(
                self.settings.price_increase,
                self.settings.price_update_ceiling,
            )
            if result.updated:
                print(f"✓ {result.updated_count} produtos atualizados com sucesso!")
            for error in result.errors:
                print(f"  ✗ {error['product_id']}: {error['error']}")

            await self.activity.success("Demonstração concluída com sucesso!")
            return result
        except DomainError as exc:
            print(f"✗ Erro durante demonstração: {exc.message}")
            await self.activity.error("Erro durante demonstração", {"error": exc.message})
            return None
        except Exception as exc:
            logger.exception("Demonstration failed")
            print(f"✗ Erro durante demonstração: {exc}")
            await self.activity.error("Erro durante demonstração", {"error": str(exc)})
            return None

    async def increase_prices(self, amount: Decimal, ceiling: Decimal) -> PriceUpdateResult:
        """Raise the price of every product priced below a ceiling.

        Updates run concurrently and are joined before reporting; the
        result lists only the updates that were applied. A failed update,
        whatever its cause, is recorded in the errors and does not discard
        the others.

        Args:
            amount: Amount added to each price.
            ceiling: Products priced at or above this are skipped.

        Returns:
            Applied updates and per-product failures.
        """
        targets = [p for p in await self.products.get_all_products() if p.price < ceiling]
        results = await asyncio.gather(
            *(self.products.update_product(replace(p, price=p.price + amount)) for p in targets),
            return_exceptions=True,
        )

        result = PriceUpdateResult()
        for product, outcome in zip(targets, results):
            if isinstance(outcome, Exception):
                message = outcome.message if isinstance(outcome, DomainError) else str(outcome)
                logger.warning(
                    "Price update failed",
                    product_id=product.id,
                    error=message,
                    error_type=type(outcome).__name__,
                )
                result.errors.append({"product_id": product.id, "error": message})
                await self.activity.error(
                    f"Erro ao atualizar produto {product.name}", {"error": message}
                )
            elif isinstance(outcome, BaseException):
                raise outcome
            else:
                result.updated.append(outcome)

        logger.info(
            "Prices updated",
            updated=result.updated_count,
            failed=len(result.errors),
        )
        return result

    def show_menu(self) -> None:
        """Print the system menu."""
        print()
        print("=== MENU DO SISTEMA ===")
        for option in MENU_OPTIONS:
            print(option)
        print("=" * 34)

    def show_logs(self, limit: int | None = None) -> None:
        """Print the most recent activity log entries.

        Args:
            limit: Maximum number of entries; None prints all.
        """
        entries = self.activity.entries()
        if limit is not None:
            entries = entries[-limit:] if limit > 0 else []

        print()
        print("=== LOGS DO SISTEMA ===")
        for entry in entries:
            print(entry.format())
        if not entries:
            print("(nenhum registro)")


def create_system(settings: Settings, activity: ActivityLogger | None = None) -> BakerySystem:
    """Wire a bakery system over fresh in-memory stores.

    Args:
        settings: Application settings.
        activity: Activity logger; a default one is created if omitted.

    Returns:
        Ready-to-run BakerySystem.
    """
    category_store = InMemoryCategoryStore()
    product_store = InMemoryProductStore()
    return BakerySystem(
        categories=CategoryController(category_store),
        products=ProductController(product_store, category_store),
        activity=activity or ActivityLogger(max_entries=settings.activity_log_size),
        settings=settings,
    )
