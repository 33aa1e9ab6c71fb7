"""Domain models for search results.

Value objects are immutable (frozen=True) so a response cannot drift from
the index state it was computed against.
"""

from pydantic import BaseModel, ConfigDict, Field


class SearchResponse(BaseModel):
    """Ranked documents for a two-keyword query."""

    model_config = ConfigDict(frozen=True)

    keywords: tuple[str, str]
    documents: list[str] = Field(default_factory=list)
    total_count: int = Field(default=0, ge=0)

    @property
    def has_matches(self) -> bool:
        return self.total_count > 0
