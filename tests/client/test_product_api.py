"""Tests for the HTTP product client, served by the real Flask app."""

import pytest
import requests

from estoque.application.dto import ProductPayload
from estoque.client.product_api import ApiError, HttpProductApi
from estoque.infrastructure.http.app import create_app
from estoque.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)

BASE_URL = "http://estoque.test"


class FlaskSession:
    """Stands in for requests.Session, answering from a Flask test client."""

    def __init__(self, app):
        self._client = app.test_client()
        self.sent = []

    def request(self, method, url, json=None, timeout=None):
        self.sent.append((method, url, json, timeout))
        path = url[len(BASE_URL):]
        flask_response = self._client.open(path, method=method, json=json)

        response = requests.Response()
        response.status_code = flask_response.status_code
        response.headers["Content-Type"] = flask_response.content_type
        response.encoding = "utf-8"
        response._content = flask_response.get_data()
        response.url = url
        return response


class OfflineSession:

    def request(self, method, url, json=None, timeout=None):
        raise requests.ConnectionError("connection refused")


@pytest.fixture
def session():
    return FlaskSession(create_app(InMemoryProductRepository()))


@pytest.fixture
def api(session):
    return HttpProductApi(BASE_URL + "/", timeout=2.5, session=session)


class TestHttpProductApi:

    def test_round_trip(self, api):
        created = api.create_product(ProductPayload.of("Caneta", "Azul"))
        assert api.list_products() == [created]

        updated = api.update_product(created.id, ProductPayload.of("Lápis", "Preto"))
        assert (updated.id, updated.name, updated.description) == (created.id, "Lápis", "Preto")

        api.delete_product(created.id)
        assert api.list_products() == []

    def test_sends_wire_fields_and_timeout(self, api, session):
        api.create_product(ProductPayload.of("Caneta", "Azul"))
        assert session.sent == [
            ("POST", f"{BASE_URL}/produto", {"nome": "Caneta", "descricao": "Azul"}, 2.5)
        ]

    def test_not_found_raises_api_error(self, api):
        with pytest.raises(ApiError, match="Produto não encontrado") as excinfo:
            api.delete_product("missing")
        assert excinfo.value.status_code == 404

    def test_validation_error_raises_api_error(self, api):
        with pytest.raises(ApiError, match="Campos Inválidos") as excinfo:
            api.create_product(ProductPayload(name="", description=""))
        assert excinfo.value.status_code == 400

    def test_transport_failure_raises_api_error(self):
        api = HttpProductApi(BASE_URL, session=OfflineSession())
        with pytest.raises(ApiError, match="connection refused") as excinfo:
            api.list_products()
        assert excinfo.value.status_code is None
