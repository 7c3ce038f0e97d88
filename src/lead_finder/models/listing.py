from typing import Any
from urllib.parse import urlparse

from pydantic import ConfigDict, Field

from .base import BaseLeadModel


class ListingResult(BaseLeadModel):
    """A single job-posting search result."""

    model_config = ConfigDict(frozen=True)

    title: str = Field("", description="Result title")
    link: str = Field("", description="Result URL")
    snippet: str = Field("", description="Short description from the search engine")
    source: str = Field("", description="Hostname of the result URL")

    @classmethod
    def from_search_item(cls, item: dict[str, Any]) -> "ListingResult":
        """Build a listing from a Custom Search API ``items`` entry."""
        link = item.get("link") or ""
        return cls(
            title=item.get("title") or "",
            link=link,
            snippet=item.get("snippet") or "",
            source=urlparse(link).hostname or "",
        )

    def as_row(self) -> list[str]:
        """Values in spreadsheet column order."""
        return [self.title, self.link, self.snippet, self.source]
