"""Domain layer - pure business logic with no infrastructure dependencies.

Following Cosmic Python, this layer contains:
- Entities: Objects with identity (Product)
- Value Objects: Immutable objects defined by their attributes
  (QueryIntent, ScoredDocument, SearchAnalytics)
"""

from smart_search.domain.model import Product
from smart_search.domain.search import QueryIntent, QueryType, ScoredDocument, SearchAnalytics


__all__ = [
    "Product",
    "QueryIntent",
    "QueryType",
    "ScoredDocument",
    "SearchAnalytics",
]
