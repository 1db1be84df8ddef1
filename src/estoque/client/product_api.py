"""Client side of the ``/produto`` HTTP contract."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

import requests

from estoque.application.dto import ProductDTO, ProductPayload

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A request failed, either on the wire or with a non-2xx response.

    ``status_code`` is None when no response was received at all.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProductApi(ABC):

    @abstractmethod
    def list_products(self) -> list[ProductDTO]:
        """Fetch the whole collection."""

    @abstractmethod
    def create_product(self, payload: ProductPayload) -> ProductDTO:
        """Create a product and return it as stored by the server."""

    @abstractmethod
    def update_product(self, product_id: str, payload: ProductPayload) -> ProductDTO:
        """Replace name/description of an existing product."""

    @abstractmethod
    def delete_product(self, product_id: str) -> None:
        """Remove a product on the server."""


class HttpProductApi(ProductApi):

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    def list_products(self) -> list[ProductDTO]:
        response = self._request("GET", "/produto")
        return [ProductDTO.from_json(raw) for raw in response.json()]

    def create_product(self, payload: ProductPayload) -> ProductDTO:
        response = self._request("POST", "/produto", json=payload.to_json())
        return ProductDTO.from_json(response.json())

    def update_product(self, product_id: str, payload: ProductPayload) -> ProductDTO:
        response = self._request(
            "PUT", f"/produto/{product_id}", json=payload.to_json()
        )
        return ProductDTO.from_json(response.json())

    def delete_product(self, product_id: str) -> None:
        self._request("DELETE", f"/produto/{product_id}")

    def _request(
        self, method: str, path: str, json: dict[str, Any] | None = None
    ) -> requests.Response:
        url = f"{self._base_url}{path}"
        try:
            response = self._session.request(
                method, url, json=json, timeout=self._timeout
            )
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ApiError(f"Falha ao contatar o servidor: {exc}") from exc

        if not response.ok:
            message = _error_message(response)
            logger.warning("%s %s -> %s: %s", method, url, response.status_code, message)
            raise ApiError(message, response.status_code)
        return response


def _error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return response.text or f"HTTP {response.status_code}"
