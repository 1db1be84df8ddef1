"""In-process fakes for testing.

FakeProductApi implements the same abstract interface as the HTTP
client but talks straight to an in-memory repository. No sockets, no
server process.
"""

from __future__ import annotations

from estoque.application.dto import ProductDTO, ProductPayload
from estoque.client.product_api import ApiError, ProductApi
from estoque.domain.exceptions import EntityNotFoundError, ValidationError
from estoque.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


class FakeProductApi(ProductApi):

    def __init__(self, repo: InMemoryProductRepository | None = None) -> None:
        self.repo = repo or InMemoryProductRepository()
        self.calls: list[tuple] = []
        self.offline = False

    def list_products(self) -> list[ProductDTO]:
        self._record("list")
        return [ProductDTO.from_product(p) for p in self.repo.list_all()]

    def create_product(self, payload: ProductPayload) -> ProductDTO:
        self._record("create", payload)
        try:
            product = self.repo.create(payload.name, payload.description)
        except ValidationError:
            raise ApiError("Campos Inválidos", 400)
        return ProductDTO.from_product(product)

    def update_product(self, product_id: str, payload: ProductPayload) -> ProductDTO:
        self._record("update", product_id, payload)
        try:
            product = self.repo.update(product_id, payload.name, payload.description)
        except ValidationError:
            raise ApiError("Campos Inválidos", 400)
        except EntityNotFoundError:
            raise ApiError("Produto não encontrado", 404)
        return ProductDTO.from_product(product)

    def delete_product(self, product_id: str) -> None:
        self._record("delete", product_id)
        try:
            self.repo.delete(product_id)
        except EntityNotFoundError:
            raise ApiError("Produto não encontrado", 404)

    def _record(self, *call) -> None:
        if self.offline:
            raise ApiError("Falha ao contatar o servidor: connection refused")
        self.calls.append(call)
