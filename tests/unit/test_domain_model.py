"""Unit tests for catalog and search domain models."""

from pydantic import ValidationError
import pytest

from smart_search.domain import Product, QueryIntent, QueryType, ScoredDocument, SearchAnalytics
from smart_search.domain.search import match_type_for, relevance_percentage_for


@pytest.mark.unit
class TestProduct:
    def test_feed_aliases(self):
        product = Product.model_validate(
            {"id": 4, "title": "iPad Pro", "thumbnail": "https://img/ipad.png", "rating": 4.9}
        )

        assert product.name == "iPad Pro"
        assert product.image == "https://img/ipad.png"
        assert not hasattr(product, "rating")

    def test_missing_text_fields_default_to_empty(self):
        product = Product.model_validate({"id": 1, "name": "Case", "description": None})

        assert product.description == ""
        assert product.category == ""
        assert product.price == 0.0
        assert product.searchable_text() == "Case  "

    def test_id_required(self):
        with pytest.raises(ValidationError):
            Product.model_validate({"name": "Nameless"})

    def test_equality_by_id(self):
        first = Product(id=1, name="iPhone 14")
        renamed = Product(id=1, name="iPhone 14 Pro")

        assert first == renamed
        assert hash(first) == hash(renamed)
        assert first != Product(id=2, name="iPhone 14")
        assert len({first, renamed}) == 1

    def test_immutable(self):
        product = Product(id=1, name="iPhone 14")
        with pytest.raises(ValidationError):
            product.name = "changed"

    def test_text_fields_order(self):
        product = Product(id=1, name="n", description="d", category="c")
        assert product.text_fields() == ("n", "d", "c")

    def test_str(self):
        product = Product(id=3, name="MacBook Pro", category="Computers")
        assert str(product) == "Product{id=3, name='MacBook Pro', category='Computers'}"


@pytest.mark.unit
class TestMatchType:
    @pytest.mark.parametrize(
        ("score", "expected"),
        [
            (0.0, "Low Relevance"),
            (0.99, "Low Relevance"),
            (1.0, "Medium Relevance"),
            (1.99, "Medium Relevance"),
            (2.0, "High Relevance"),
            (3.99, "High Relevance"),
            (4.0, "Exact Match"),
            (42.0, "Exact Match"),
        ],
    )
    def test_thresholds(self, score, expected):
        assert match_type_for(score) == expected


@pytest.mark.unit
class TestRelevancePercentage:
    @pytest.mark.parametrize(
        ("score", "expected"),
        [(0.0, 0), (0.05, 0), (3.5, 35), (5.55, 55), (9.99, 99), (10.0, 100), (25.0, 100)],
    )
    def test_scaled_floor_and_clip(self, score, expected):
        assert relevance_percentage_for(score) == expected

    def test_monotonic(self):
        scores = [step * 0.37 for step in range(60)]
        percentages = [relevance_percentage_for(score) for score in scores]
        assert percentages == sorted(percentages)


@pytest.mark.unit
class TestScoredDocument:
    def test_derived_fields(self):
        result = ScoredDocument(document=Product(id=1, name="iPhone 14"), relevance_score=2.5)

        assert result.match_type == "High Relevance"
        assert result.relevance_percentage == 25

    def test_negative_score_rejected(self):
        with pytest.raises(ValidationError):
            ScoredDocument(document=Product(id=1), relevance_score=-0.1)

    def test_to_dict(self):
        product = Product(id=1, name="iPhone 14", description="Apple smartphone", category="Electronics", price=999)
        payload = ScoredDocument(document=product, relevance_score=4.2).to_dict()

        assert payload == {
            "document": {
                "id": 1,
                "name": "iPhone 14",
                "description": "Apple smartphone",
                "category": "Electronics",
                "price": 999.0,
                "image": None,
            },
            "relevanceScore": 4.2,
            "matchType": "Exact Match",
            "relevancePercentage": 42,
        }


@pytest.mark.unit
class TestSearchAnalytics:
    def test_defaults(self):
        analytics = SearchAnalytics(query_intent=QueryIntent.empty())

        assert analytics.total_matches == 0
        assert analytics.search_strategy == "Basic search"

    @pytest.mark.parametrize(
        ("intent", "expected"),
        [
            (QueryIntent(exact_phrase=True, query_type=QueryType.EXACT_PHRASE), "Phrase-focused search"),
            (QueryIntent(has_keywords=True, query_type=QueryType.SINGLE_KEYWORD), "Single keyword + fuzzy search"),
            (QueryIntent(query_type=QueryType.SINGLE_KEYWORD), "Single keyword + fuzzy search"),
            (QueryIntent(has_keywords=True, query_type=QueryType.MULTI_KEYWORD), "Multi-algorithm hybrid search"),
            (QueryIntent(query_type=QueryType.COMPLEX_QUERY), "Basic search"),
        ],
    )
    def test_strategy(self, intent, expected):
        assert SearchAnalytics(query_intent=intent).search_strategy == expected

    def test_to_dict_and_report(self):
        analytics = SearchAnalytics(
            query_intent=QueryIntent(has_keywords=True, allows_fuzzy_search=True, query_type=QueryType.SINGLE_KEYWORD),
            keyword_matches=2,
            phrase_matches=1,
            fuzzy_matches=3,
            suggestions=4,
        )

        payload = analytics.to_dict()
        assert payload["totalMatches"] == 6
        assert payload["queryIntent"]["queryType"] == "SINGLE_KEYWORD"
        assert payload["searchStrategy"] == "Single keyword + fuzzy search"
        assert payload["suggestions"] == 4

        report = analytics.performance_report()
        assert "  - Total matches: 6" in report
        assert "  - Autocomplete suggestions: 4" in report
        assert report.endswith("\n")
