"""In-memory implementation of ProductRepository.

The collection lives only as long as the process. All access, reads
included, goes through a single lock so a listing never observes a
half-applied write when the server handles requests on several threads.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import replace

from estoque.domain.exceptions import EntityNotFoundError
from estoque.domain.model.product import Product, new_product_id, require_text
from estoque.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class InMemoryProductRepository(ProductRepository):

    def __init__(self, id_factory: Callable[[], str] = new_product_id) -> None:
        self._products: list[Product] = []
        # Grows by one entry per product ever created; lives as long as the process.
        self._issued_ids: set[str] = set()
        self._id_factory = id_factory
        self._lock = threading.Lock()

    # --- ProductRepository interface ------------------------------------------

    def create(self, name: str, description: str) -> Product:
        name = require_text(name, "name")
        description = require_text(description, "description")

        with self._lock:
            product = Product(
                id=self._fresh_id(), name=name, description=description
            )
            self._products.append(product)
            logger.info("Product %s created", product.id)
            return replace(product)

    def list_all(self) -> list[Product]:
        with self._lock:
            return [replace(p) for p in self._products]

    def get_by_id(self, product_id: str) -> Product | None:
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                return None
            return replace(self._products[index])

    def update(self, product_id: str, name: str, description: str) -> Product:
        name = require_text(name, "name")
        description = require_text(description, "description")

        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

            product = self._products[index]
            product.update_details(name, description)
            logger.info("Product %s updated", product_id)
            return replace(product)

    def delete(self, product_id: str) -> None:
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

            del self._products[index]
            logger.info("Product %s deleted", product_id)

    # --- Helpers (caller holds the lock) ----------------------------------------

    def _index_of(self, product_id: str) -> int | None:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return None

    def _fresh_id(self) -> str:
        # Ids are never reused, not even those of deleted products.
        product_id = self._id_factory()
        while product_id in self._issued_ids:
            product_id = self._id_factory()
        self._issued_ids.add(product_id)
        return product_id
