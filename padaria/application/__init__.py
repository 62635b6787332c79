"""Application layer - orchestration of catalog operations."""

from padaria.application.bakery_system import (
    BakerySystem,
    PriceUpdateResult,
    create_system,
)

__all__ = [
    "BakerySystem",
    "PriceUpdateResult",
    "create_system",
]
