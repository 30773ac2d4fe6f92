"""Catalog domain model.

Following Cosmic Python principles the product is an immutable value object;
identity is the catalog id, so equality and hashing look at ``id`` only.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Product(BaseModel):
    """A catalog entry with the text fields the search engine indexes.

    ``name``, ``description`` and ``category`` are indexed. ``price`` and
    ``image`` are carried for display only. Catalog feeds use ``title`` and
    ``thumbnail`` for the name and image, so both spellings are accepted.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    name: str = Field(default="", validation_alias=AliasChoices("name", "title"))
    description: str = ""
    category: str = ""
    price: float = 0.0
    image: str | None = Field(default=None, validation_alias=AliasChoices("image", "thumbnail"))

    @field_validator("name", "description", "category", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    def text_fields(self) -> tuple[str, str, str]:
        """Indexed fields in indexing order: name, description, category."""
        return (self.name, self.description, self.category)

    def searchable_text(self) -> str:
        return " ".join(self.text_fields())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"Product{{id={self.id}, name='{self.name}', category='{self.category}'}}"
