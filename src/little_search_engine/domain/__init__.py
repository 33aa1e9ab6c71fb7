"""Domain layer - value objects shared by the search engine and its CLI."""

from little_search_engine.domain.search import SearchResponse


__all__ = ["SearchResponse"]
