"""Centralized configuration for the smart search engine.

``RankingConfig`` is the immutable bundle of scoring constants handed to the
engine at construction. ``Settings`` loads the service configuration from
environment variables (prefix ``SMART_SEARCH_``) using Pydantic Settings.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from smart_search.search.analyzers import stopword_set


class RankingConfig(BaseModel):
    """Scoring weights and limits for the ranking engine.

    The defaults are the tuned constants of the engine; ranking parity
    depends on them, so override only deliberately.
    """

    model_config = ConfigDict(frozen=True)

    exact_match_boost: float = Field(default=2.0, ge=0.0, description="Whole-query substring boost (x2 for names)")
    phrase_match_boost: float = Field(default=1.5, ge=0.0, description="Quoted phrase containment boost")
    keyword_weight: float = Field(default=1.0, ge=0.0, description="Multiplier for keyword relevance")
    fuzzy_match_penalty: float = Field(default=0.5, ge=0.0, description="Multiplier for fuzzy relevance")
    max_fuzzy_distance: int = Field(default=2, ge=0, description="Maximum edit distance for fuzzy matches")
    max_results: int = Field(default=20, ge=1, description="Maximum ranked results returned")
    max_suggestions: int = Field(default=10, ge=1, description="Maximum autocomplete suggestions")
    suggestion_fuzzy_threshold: int = Field(
        default=5, ge=0, description="Trie suggestion count below which fuzzy prefixes are added"
    )
    suggestion_fuzzy_distance: int = Field(default=1, ge=0, description="Maximum edit distance for fuzzy prefixes")
    stopwords: frozenset[str] = Field(default_factory=lambda: stopword_set())

    @field_validator("stopwords", mode="before")
    @classmethod
    def _lowercase_stopwords(cls, value: object) -> object:
        if isinstance(value, (list, tuple, set, frozenset)):
            return stopword_set(value)
        return value


_RANKING_DEFAULTS = RankingConfig()


class Settings(BaseSettings):
    """Strictly typed service configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SMART_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    catalog_path: Path = Field(default=Path("products.json"), description="JSON catalog with a 'products' array")

    # Server settings
    host: str = Field(default="127.0.0.1", description="HTTP bind host")
    port: int = Field(default=8080, ge=1, le=65535, description="HTTP bind port")

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    json_logs: bool = Field(default=True, description="Emit structured JSON logs")

    # Ranking overrides, defaulting to RankingConfig
    exact_match_boost: float = Field(default=_RANKING_DEFAULTS.exact_match_boost, ge=0.0)
    phrase_match_boost: float = Field(default=_RANKING_DEFAULTS.phrase_match_boost, ge=0.0)
    keyword_weight: float = Field(default=_RANKING_DEFAULTS.keyword_weight, ge=0.0)
    fuzzy_match_penalty: float = Field(default=_RANKING_DEFAULTS.fuzzy_match_penalty, ge=0.0)
    max_fuzzy_distance: int = Field(default=_RANKING_DEFAULTS.max_fuzzy_distance, ge=0, le=5)
    max_results: int = Field(default=_RANKING_DEFAULTS.max_results, ge=1, le=1000)
    max_suggestions: int = Field(default=_RANKING_DEFAULTS.max_suggestions, ge=1, le=100)
    suggestion_fuzzy_threshold: int = Field(default=_RANKING_DEFAULTS.suggestion_fuzzy_threshold, ge=0)
    suggestion_fuzzy_distance: int = Field(default=_RANKING_DEFAULTS.suggestion_fuzzy_distance, ge=0, le=5)
    stopwords: frozenset[str] = Field(default=_RANKING_DEFAULTS.stopwords, description="JSON list in the environment")

    def ranking_config(self) -> RankingConfig:
        """Build the immutable ranking configuration from these settings."""
        return RankingConfig(**self.model_dump(include=set(RankingConfig.model_fields)))
