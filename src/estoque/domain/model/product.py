"""Product entity.

A product is the only record the stock service knows about. Its id is
assigned once, at creation, and never changes or gets reused.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from estoque.domain.exceptions import ValidationError


def require_text(value: object, field_name: str) -> str:
    """Return *value* if it is a non-blank string, else raise ValidationError."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Product {field_name} is required")
    return value


def new_product_id() -> str:
    return str(uuid.uuid4())


@dataclass
class Product:
    """A named, described item in the stock.

    Kept mutable because renaming / re-describing is a legitimate
    mutation; the id is never touched after construction.
    """

    id: str
    name: str
    description: str

    def update_details(self, name: str, description: str) -> None:
        """Replace name and description.

        Both values are checked before either is assigned, so a failed
        update leaves the product untouched.
        """
        name = require_text(name, "name")
        description = require_text(description, "description")
        self.name = name
        self.description = description
