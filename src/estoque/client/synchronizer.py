"""Client-side mirror of the server's product collection.

The synchronizer keeps a local copy of the last fetched listing and
decorates every product with a ``quantity`` counter. The counter lives
only here: it starts at 1 the first time a product is seen, survives
refreshes, and is never sent to the server.

Every successful write is followed by a full re-fetch. A failure of
any request is kept in ``error`` until the next successful operation,
and the local copy is left exactly as it was.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from estoque.application.dto import ProductDTO, ProductPayload
from estoque.client.product_api import ApiError, ProductApi
from estoque.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ActionInProgressError(Exception):
    """Another write is still waiting for the server."""


@dataclass(frozen=True)
class StockLine:
    """A product as the client shows it: server fields plus local quantity."""

    id: str
    name: str
    description: str
    quantity: int


class ProductSynchronizer:

    def __init__(self, api: ProductApi) -> None:
        self._api = api
        self._products: list[ProductDTO] = []
        self._quantities: dict[str, int] = {}
        self._in_flight = threading.Lock()
        self.error: str | None = None

    @property
    def lines(self) -> list[StockLine]:
        return [
            StockLine(p.id, p.name, p.description, self._quantities[p.id])
            for p in self._products
        ]

    @property
    def busy(self) -> bool:
        return self._in_flight.locked()

    def find(self, product_id: str) -> StockLine | None:
        for line in self.lines:
            if line.id == product_id:
                return line
        return None

    # --- Server round trips -----------------------------------------------------

    def refresh(self) -> None:
        """Fetch the full listing and replace the local copy."""
        self._call(self._reload)

    def add(self, name: str, description: str) -> ProductDTO:
        payload = ProductPayload.of(name, description)
        with self._single_action():
            created = self._call(self._api.create_product, payload)
            self._call(self._reload)
        return created

    def update(self, product_id: str, name: str, description: str) -> ProductDTO:
        payload = ProductPayload.of(name, description)
        with self._single_action():
            updated = self._call(self._api.update_product, product_id, payload)
            self._call(self._reload)
        return updated

    def delete(self, product_id: str, confirm: Callable[[str], bool]) -> bool:
        """Delete a product once ``confirm`` agrees.

        ``confirm`` gets a human-readable label and blocks until the
        user answers. Nothing is sent when it returns False.
        """
        line = self.find(product_id)
        label = line.name if line is not None else product_id
        if not confirm(label):
            return False

        with self._single_action():
            self._call(self._api.delete_product, product_id)
            self._call(self._reload)
        return True

    # --- Local-only quantity overlay --------------------------------------------

    def increment(self, product_id: str) -> int:
        self._require_tracked(product_id)
        self._quantities[product_id] += 1
        return self._quantities[product_id]

    def decrement(self, product_id: str) -> int:
        self._require_tracked(product_id)
        if self._quantities[product_id] > 1:
            self._quantities[product_id] -= 1
        return self._quantities[product_id]

    # --- Helpers ----------------------------------------------------------------

    def _reload(self) -> None:
        products = self._api.list_products()
        self._quantities = {
            p.id: self._quantities.get(p.id, 1) for p in products
        }
        self._products = products

    def _call(self, func, *args):
        try:
            result = func(*args)
        except ApiError as exc:
            self.error = str(exc)
            logger.warning("Synchronization failed: %s", exc)
            raise
        self.error = None
        return result

    @contextmanager
    def _single_action(self) -> Iterator[None]:
        if not self._in_flight.acquire(blocking=False):
            raise ActionInProgressError("Another operation is still in progress")
        try:
            yield
        finally:
            self._in_flight.release()

    def _require_tracked(self, product_id: str) -> None:
        if product_id not in self._quantities:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
