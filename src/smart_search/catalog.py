"""Product catalog storage and JSON loading.

The catalog is the id -> product lookup the search engine reads from. It is
filled once at startup and treated as read-only while queries run.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
import logging
from pathlib import Path
from typing import Any

import orjson
from pydantic import ValidationError

from smart_search.domain.model import Product


logger = logging.getLogger(__name__)


class CatalogLoadError(RuntimeError):
    """Raised when a catalog file cannot be converted into products."""


class Catalog:
    """Insertion-ordered mapping of product id to product."""

    def __init__(self, products: Iterable[Product] | None = None) -> None:
        self._products: dict[int, Product] = {}
        for product in products or ():
            self.add_product(product)

    def add_product(self, product: Product) -> None:
        """Add or replace a product by id."""
        self._products[product.id] = product

    def get_product_by_id(self, product_id: int) -> Product | None:
        return self._products.get(product_id)

    def all_products(self) -> list[Product]:
        return list(self._products.values())

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products.values())

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._products


def parse_products(payload: Any) -> list[Product]:
    """Validate the ``products`` array of a decoded catalog payload.

    Payloads without a ``products`` list yield no products.
    """
    if not isinstance(payload, dict):
        raise CatalogLoadError(f"Catalog root must be a JSON object, got {type(payload).__name__}")

    records = payload.get("products")
    if not isinstance(records, list):
        logger.warning("Catalog has no 'products' array; loading nothing")
        return []

    products: list[Product] = []
    for position, record in enumerate(records):
        try:
            products.append(Product.model_validate(record))
        except ValidationError as exc:
            raise CatalogLoadError(f"Invalid product record at index {position}: {exc}") from exc
    return products


def load_products_from_json(path: Path | str) -> list[Product]:
    """Load products from a JSON file shaped like ``{"products": [...]}``."""
    catalog_path = Path(path)
    try:
        payload = orjson.loads(catalog_path.read_bytes())
    except FileNotFoundError as exc:
        logger.error("Catalog file not found: %s", catalog_path)
        raise CatalogLoadError(f"Catalog file not found: {catalog_path}") from exc
    except orjson.JSONDecodeError as exc:
        logger.error("Catalog file %s is not valid JSON: %s", catalog_path, exc)
        raise CatalogLoadError(f"Catalog file {catalog_path} is not valid JSON: {exc}") from exc

    products = parse_products(payload)
    logger.info("Loaded %d products from %s", len(products), catalog_path)
    return products
