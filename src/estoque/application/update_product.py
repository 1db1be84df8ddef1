"""Application service: Update Product use case."""

from __future__ import annotations

from estoque.application.dto import ProductDTO, ProductPayload
from estoque.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, payload: ProductPayload) -> ProductDTO:
        """Replace a product's name and description.

        An unknown id raises EntityNotFoundError and nothing is written.
        """
        product = self._product_repo.update(
            product_id, payload.name, payload.description
        )
        return ProductDTO.from_product(product)
