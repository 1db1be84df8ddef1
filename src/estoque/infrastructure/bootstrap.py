"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from flask import Flask

from estoque.client.product_api import HttpProductApi
from estoque.client.synchronizer import ProductSynchronizer
from estoque.domain.repository.product_repository import ProductRepository
from estoque.infrastructure.config import Settings
from estoque.infrastructure.http.app import create_app
from estoque.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)

# One collection per process, discarded when the process exits.
_product_repository = InMemoryProductRepository()


def product_repository() -> ProductRepository:
    return _product_repository


def http_app() -> Flask:
    return create_app(product_repository())


def product_api(settings: Settings) -> HttpProductApi:
    return HttpProductApi(settings.api_url, timeout=settings.timeout)


def product_synchronizer(settings: Settings) -> ProductSynchronizer:
    return ProductSynchronizer(product_api(settings))
