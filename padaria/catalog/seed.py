"""Default catalog data loaded at startup."""

from decimal import Decimal

from padaria.catalog.schemas import CategoryCreate, ProductCreate


DEFAULT_CATEGORIES: list[CategoryCreate] = [
    CategoryCreate(name="Pães", description="Pães frescos e artesanais"),
    CategoryCreate(name="Doces", description="Doces e sobremesas deliciosas"),
    CategoryCreate(name="Salgados", description="Salgados assados e fritos"),
    CategoryCreate(name="Bebidas", description="Bebidas quentes e frias"),
]

SAMPLE_PRODUCTS: list[ProductCreate] = [
    ProductCreate(
        name="Pão Francês",
        price=Decimal("0.50"),
        category="Pães",
        description="Pão francês tradicional",
    ),
    ProductCreate(
        name="Pão de Açúcar",
        price=Decimal("4.50"),
        category="Pães",
        description="Pão doce com açúcar",
    ),
    ProductCreate(
        name="Brigadeiro",
        price=Decimal("2.00"),
        category="Doces",
        description="Brigadeiro tradicional",
    ),
    ProductCreate(
        name="Coxinha",
        price=Decimal("3.50"),
        category="Salgados",
        description="Coxinha de frango tradicional",
    ),
    ProductCreate(
        name="Café Expresso",
        price=Decimal("2.50"),
        category="Bebidas",
        description="Café expresso tradicional",
    ),
]
