"""Search index record models."""

from __future__ import annotations

from typing import Any

from bs4.element import Tag
from pydantic import BaseModel, ConfigDict, Field


class CustomRanking(BaseModel):
    """Ranking signals biasing relevance by document position and structure.

    Attributes:
        position: Zero-based index of the record among surviving nodes.
        heading: Heading weight, 100 with no heading and 10 less per level.
    """

    position: int = Field(..., ge=0)
    heading: int


class Record(BaseModel):
    """One indexable content block with its structural metadata.

    ``node`` points back at the originating BeautifulSoup tag. It is never
    serialized and never takes part in ``object_id``.
    """

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    content: str
    html: str
    anchor: str | None = None
    headings: list[str] = Field(default_factory=list)
    custom_ranking: CustomRanking = Field(..., alias="customRanking")
    node: Tag | None = Field(default=None, exclude=True, repr=False)
    object_id: str = Field("", alias="objectID")

    def to_index_object(self) -> dict[str, Any]:
        """Return the payload handed to the search index, keyed as it expects."""
        return self.model_dump(by_alias=True)
