"""Page envelope definitions.

Every paginated Orb endpoint wraps its items in the same envelope:

    {"data": [...], "pagination_metadata": {"has_more": true, "next_cursor": "..."}}

A missing or null ``next_cursor`` marks the last page.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

T = TypeVar("T")

LIMIT_PARAM = "limit"
CURSOR_PARAM = "cursor"


class PaginationMetadata(BaseModel):
    """Cursor information for the page that carried it.

    Attributes:
        next_cursor: Opaque token for the next page, or None on the last page
        has_more: Server hint that more pages exist (informational only)
    """

    next_cursor: str | None = None
    has_more: bool = False

    model_config = ConfigDict(frozen=True, extra="ignore")


class Page(BaseModel, Generic[T]):
    """One decoded page of a list response."""

    data: list[T]
    pagination: PaginationMetadata = Field(
        default_factory=PaginationMetadata,
        validation_alias=AliasChoices("pagination_metadata", "pagination"),
    )

    model_config = ConfigDict(extra="ignore")

    @property
    def next_cursor(self) -> str | None:
        return self.pagination.next_cursor
