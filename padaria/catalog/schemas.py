"""Catalog input schemas.

Pydantic models validating the payloads accepted by the controllers.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


NonBlankStr = Annotated[str, Field(min_length=1), AfterValidator(_not_blank)]


# ============================================================================
# Category Schemas
# ============================================================================


class CategoryCreate(BaseModel):
    """Payload to create a category."""

    name: NonBlankStr = Field(..., description="Unique category name")
    description: str = Field(default="", description="Category description")


# ============================================================================
# Product Schemas
# ============================================================================


class ProductCreate(BaseModel):
    """Payload to create a product.

    Prices always read back as Decimal. Floats are converted through their
    shortest decimal form, so 0.1 becomes Decimal("0.1"), not the binary
    expansion of the float.
    """

    name: NonBlankStr = Field(..., description="Product name")
    price: Decimal = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Price in major currency units",
    )
    category: NonBlankStr = Field(..., description="Existing category name")
    description: str = Field(default="", description="Product description")


class ProductUpdate(ProductCreate):
    """Full replacement of a product's mutable fields.

    Every field is required; this is an overwrite, not a partial patch.
    """

    id: NonBlankStr = Field(..., description="Identifier of the product to replace")
    description: str = Field(..., description="Product description")
