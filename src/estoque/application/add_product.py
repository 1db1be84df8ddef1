"""Application service: Add Product use case."""

from __future__ import annotations

from estoque.application.dto import ProductDTO, ProductPayload
from estoque.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, payload: ProductPayload) -> ProductDTO:
        """Add a new product to the end of the collection."""
        product = self._product_repo.create(payload.name, payload.description)
        return ProductDTO.from_product(product)
