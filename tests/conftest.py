"""Shared test fixtures and configuration."""

import os

import pytest

from smart_search.catalog import Catalog
from smart_search.domain.model import Product
from smart_search.search.core import SearchCore
from smart_search.search.engine import SmartSearchEngine, build_search_engine
from smart_search.search.indexer import CatalogIndexer
from smart_search.search.inverted_index import InvertedIndex
from smart_search.search.trie import PrefixTrie


# Keep a developer's shell environment from leaking into Settings()
_ENV_PREFIX = "SMART_SEARCH_"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for key in list(os.environ):
        if key.upper().startswith(_ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def phone_products() -> list[Product]:
    """Two-product catalog used by the core behaviour scenarios."""
    return [
        Product(id=1, name="iPhone 14", description="Apple smartphone with great camera", category="Electronics"),
        Product(id=2, name="Samsung Galaxy", description="Android smartphone with AMOLED display", category="Electronics"),
    ]


@pytest.fixture
def core_products() -> list[Product]:
    return [
        Product(id=1, name="iPhone 14", description="Apple smartphone with great camera", category="Electronics"),
        Product(id=2, name="Samsung Galaxy", description="Android smartphone with AMOLED display", category="Electronics"),
        Product(id=3, name="MacBook Pro", description="Apple laptop with M2 processor", category="Computers"),
    ]


@pytest.fixture
def apple_products() -> list[Product]:
    return [
        Product(id=1, name="iPhone 14", description="Apple smartphone iPhone 14 with advanced camera", category="Electronics"),
        Product(id=2, name="Samsung Galaxy S23", description="Samsung flagship smartphone with great camera", category="Electronics"),
        Product(id=3, name="MacBook Pro", description="Apple laptop MacBook Pro with M2 chip", category="Computers"),
        Product(id=4, name="iPad Pro", description="Apple tablet iPad Pro with Liquid Retina display", category="Tablets"),
        Product(id=5, name="AirPods Pro", description="Apple wireless earbuds with noise cancellation", category="Accessories"),
    ]


@pytest.fixture
def phone_engine(phone_products) -> SmartSearchEngine:
    return build_search_engine(phone_products)


@pytest.fixture
def apple_engine(apple_products) -> SmartSearchEngine:
    return build_search_engine(apple_products)


@pytest.fixture
def search_core(core_products) -> SearchCore:
    catalog = Catalog(core_products)
    inverted_index = InvertedIndex()
    trie = PrefixTrie()
    CatalogIndexer(inverted_index, trie).index_products(catalog)
    return SearchCore(inverted_index, trie, catalog)
