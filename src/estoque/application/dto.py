"""Data Transfer Objects — plain containers that cross layer boundaries.

The wire format keeps the Portuguese field names (``nome``,
``descricao``) that existing clients already send and read.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from estoque.domain.exceptions import ValidationError
from estoque.domain.model.product import Product, require_text


@dataclass(frozen=True)
class ProductPayload:
    """Input: the body of a create or update request."""

    name: str
    description: str

    @classmethod
    def of(cls, name: object, description: object) -> ProductPayload:
        return cls(
            name=require_text(name, "name"),
            description=require_text(description, "description"),
        )

    @classmethod
    def from_json(cls, body: Any) -> ProductPayload:
        """Check the required fields of a decoded JSON body.

        Raises ValidationError for anything that is not an object with
        non-blank string ``nome`` and ``descricao``.
        """
        if not isinstance(body, dict):
            raise ValidationError("Request body must be a JSON object")
        return cls.of(body.get("nome"), body.get("descricao"))

    def to_json(self) -> dict[str, str]:
        return {"nome": self.name, "descricao": self.description}


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as it travels over the wire."""

    id: str
    name: str
    description: str

    @classmethod
    def from_product(cls, product: Product) -> ProductDTO:
        return cls(id=product.id, name=product.name, description=product.description)

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> ProductDTO:
        return cls(id=raw["id"], name=raw["nome"], description=raw["descricao"])

    def to_json(self) -> dict[str, str]:
        return {"id": self.id, "nome": self.name, "descricao": self.description}
