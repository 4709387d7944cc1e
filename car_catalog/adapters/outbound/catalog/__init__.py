"""Car catalog repository adapters."""

from car_catalog.adapters.outbound.catalog.in_memory_car_catalog_repository import (
    InMemoryCarCatalogRepository,
)

__all__ = [
    "InMemoryCarCatalogRepository",
]
