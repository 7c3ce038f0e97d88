"""Request and response bodies for the HTTP API."""

from pydantic import Field

from .base import BaseLeadModel
from .listing import ListingResult

DEFAULT_MAX_RESULTS = 50


class SearchRequest(BaseLeadModel):
    """
    Body of ``POST /api/search``.

    ``jobTitle`` is checked by the lead service, which answers a missing
    title with a 400 naming the parameter.
    """

    job_title: str | None = Field(None, alias="jobTitle")
    location: str | None = None
    max_results: int = Field(DEFAULT_MAX_RESULTS, alias="maxResults", ge=1, le=100)


class SpreadsheetSearchRequest(SearchRequest):
    """Body of ``POST /api/search-to-spreadsheet``."""

    spreadsheet_title: str | None = Field(None, alias="spreadsheetTitle")


class ExcelSearchRequest(SearchRequest):
    """Body of ``POST /api/search-to-excel``."""

    filename: str | None = None


class SpreadsheetRequest(BaseLeadModel):
    """Body of ``POST /api/spreadsheet``."""

    title: str = Field(..., min_length=1)
    data: list[ListingResult] = Field(default_factory=list)


class ExcelExportRequest(BaseLeadModel):
    """Body of ``POST /api/export-excel``."""

    data: list[ListingResult] | None = None
    filename: str = "job_listings.xlsx"


class SearchResponse(BaseLeadModel):
    results: list[ListingResult]


class SpreadsheetResult(BaseLeadModel):
    """Identifier and share link of a created spreadsheet."""

    spreadsheet_id: str = Field(alias="spreadsheetId")
    spreadsheet_url: str = Field(alias="spreadsheetUrl")
    total_results: int = Field(alias="totalResults")


class SpreadsheetSearchResponse(BaseLeadModel):
    message: str
    job_title: str = Field(alias="jobTitle")
    location: str
    total_results: int = Field(alias="totalResults")
    spreadsheet_id: str = Field(alias="spreadsheetId")
    spreadsheet_url: str = Field(alias="spreadsheetUrl")
