"""Catalog records.

Defines Category and Product as plain dataclasses held by the
in-memory stores.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any
from uuid import uuid4

from padaria.domain.base import Entity, Record


@dataclass(kw_only=True)
class Category(Record):
    """Product category.

    Categories are keyed by name; the name is unique and compared
    case-sensitively.

    Attributes:
        name: Category name.
        description: Free-form description.
    """

    name: str
    description: str = ""

    def __repr__(self) -> str:
        """String representation."""
        return f"<Category(name={self.name})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Dictionary representation.
        """
        return {
            "name": self.name,
            "description": self.description,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(kw_only=True)
class Product(Entity[str]):
    """Product entity in the catalog.

    Attributes:
        id: Unique product identifier (UUID string), generated by Product.create.
        name: Product name.
        price: Price in major currency units (e.g. 0.50 for fifty cents).
        category: Name of the category the product belongs to.
        description: Product description.
    """

    name: str
    price: Decimal
    category: str
    description: str = ""

    @classmethod
    def create(
        cls,
        name: str,
        price: Decimal,
        category: str,
        description: str = "",
    ) -> "Product":
        """Create a new product with a fresh identifier.

        Args:
            name: Product name.
            price: Price in major currency units.
            category: Name of an existing category.
            description: Product description.

        Returns:
            New Product instance.
        """
        return cls(
            id=str(uuid4()),
            name=name,
            price=price,
            category=category,
            description=description,
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, name={self.name[:30]}, price={self.price})>"

    def format_price(self, currency_symbol: str = "R$") -> str:
        """Format price with two decimal places.

        Args:
            currency_symbol: Symbol printed before the amount.

        Returns:
            Display string, e.g. "R$ 0.50".
        """
        return f"{currency_symbol} {self.price:.2f}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Dictionary representation.
        """
        return {
            "id": self.id,
            "name": self.name,
            "price": str(self.price),
            "category": self.category,
            "description": self.description,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
