"""HTTP gateway — maps each ``/produto`` request to one use case.

The gateway holds no state of its own between requests: everything it
needs comes from the repository handed to ``create_app``.
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from estoque.application.add_product import AddProductHandler
from estoque.application.delete_product import DeleteProductHandler
from estoque.application.dto import ProductPayload
from estoque.application.list_products import ListProductsHandler
from estoque.application.show_product import ShowProductHandler
from estoque.application.update_product import UpdateProductHandler
from estoque.domain.exceptions import EntityNotFoundError, ValidationError
from estoque.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

INVALID_FIELDS = "Campos Inválidos"
PRODUCT_NOT_FOUND = "Produto não encontrado"
PRODUCT_DELETED = "Produto removido com sucesso"


def create_app(product_repo: ProductRepository) -> Flask:
    app = Flask(__name__)
    app.json.ensure_ascii = False
    CORS(app)

    @app.post("/produto")
    def create_product():
        payload = ProductPayload.from_json(request.get_json(silent=True))
        dto = AddProductHandler(product_repo).handle(payload)
        return jsonify(dto.to_json()), 200

    @app.get("/produto")
    def list_products():
        dtos = ListProductsHandler(product_repo).handle()
        return jsonify([dto.to_json() for dto in dtos]), 200

    @app.get("/produto/<product_id>")
    def show_product(product_id: str):
        dto = ShowProductHandler(product_repo).handle(product_id)
        return jsonify(dto.to_json()), 200

    @app.put("/produto/<product_id>")
    def update_product(product_id: str):
        payload = ProductPayload.from_json(request.get_json(silent=True))
        dto = UpdateProductHandler(product_repo).handle(product_id, payload)
        return jsonify(dto.to_json()), 200

    @app.delete("/produto/<product_id>")
    def delete_product(product_id: str):
        DeleteProductHandler(product_repo).handle(product_id)
        return PRODUCT_DELETED, 201, {"Content-Type": "text/plain; charset=utf-8"}

    # --- Error mapping ----------------------------------------------------------

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        logger.warning("%s %s rejected: %s", request.method, request.path, exc)
        return jsonify(error=INVALID_FIELDS), 400

    @app.errorhandler(EntityNotFoundError)
    def handle_not_found(exc: EntityNotFoundError):
        logger.warning("%s %s rejected: %s", request.method, request.path, exc)
        return jsonify(error=PRODUCT_NOT_FOUND), 404

    @app.errorhandler(HTTPException)
    def handle_http_exception(exc: HTTPException):
        return jsonify(error=exc.description), exc.code

    return app
