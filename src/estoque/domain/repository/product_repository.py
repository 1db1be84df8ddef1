"""Abstract repository for the Product entity.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete in-memory store lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from estoque.domain.model.product import Product


class ProductRepository(ABC):
    """Owner of the product collection.

    Every method returns copies; callers never get a reference they
    could use to mutate the stored products.
    """

    @abstractmethod
    def create(self, name: str, description: str) -> Product:
        """Validate, assign a fresh id and append a new product."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in insertion order."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def update(self, product_id: str, name: str, description: str) -> Product:
        """Replace name/description in place, keeping id and position."""

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove the product with the given id."""
