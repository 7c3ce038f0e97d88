"""
Lead search workflows.

Each composite operation runs the job-board search and hands its listings
straight to one export step.
"""

import logging
import re
from datetime import date

from lead_finder.exceptions import ValidationError
from lead_finder.exports.excel import build_workbook
from lead_finder.integrations.google.search_client import GoogleSearchClient
from lead_finder.integrations.google.sheets_client import GoogleSheetsClient
from lead_finder.models.listing import ListingResult
from lead_finder.models.requests import (
    ExcelSearchRequest,
    SearchRequest,
    SpreadsheetSearchRequest,
    SpreadsheetSearchResponse,
)

logger = logging.getLogger(__name__)

ANY_LOCATION = "Any location"


def _require_job_title(job_title: str | None) -> str:
    if not job_title or not job_title.strip():
        raise ValidationError("Missing required parameter: jobTitle is required")
    return job_title


def default_spreadsheet_title(
    job_title: str, location: str | None = None, today: date | None = None
) -> str:
    """Title such as ``"Nurse Jobs in Boston - 3/7/2025"``."""
    today = today or date.today()
    where = f" in {location}" if location else ""
    return f"{job_title} Jobs{where} - {today.month}/{today.day}/{today.year}"


def default_excel_filename(job_title: str, location: str | None = None) -> str:
    """Filename such as ``"Data_Engineer_New_York_jobs.xlsx"``."""
    name = re.sub(r"\s+", "_", job_title)
    if location:
        name += "_" + re.sub(r"\s+", "_", location)
    return f"{name}_jobs.xlsx"


class LeadService:
    """Compose the search client with the spreadsheet and workbook exports."""

    def __init__(
        self,
        search_client: GoogleSearchClient,
        sheets_client: GoogleSheetsClient,
    ):
        self.search_client = search_client
        self.sheets_client = sheets_client

    async def search(self, request: SearchRequest) -> list[ListingResult]:
        job_title = _require_job_title(request.job_title)
        return await self.search_client.search_listings(
            job_title, request.location, request.max_results
        )

    async def search_to_spreadsheet(
        self, request: SpreadsheetSearchRequest
    ) -> SpreadsheetSearchResponse:
        """Search and write the listings into a new shared spreadsheet."""
        job_title = _require_job_title(request.job_title)
        listings = await self.search(request)

        title = request.spreadsheet_title or default_spreadsheet_title(
            job_title, request.location
        )
        result = await self.sheets_client.create_spreadsheet(title, listings)

        return SpreadsheetSearchResponse(
            message="Search and spreadsheet creation successful",
            job_title=job_title,
            location=request.location or ANY_LOCATION,
            total_results=len(listings),
            spreadsheet_id=result.spreadsheet_id,
            spreadsheet_url=result.spreadsheet_url,
        )

    async def search_to_excel(self, request: ExcelSearchRequest) -> tuple[str, bytes]:
        """Search and serialize the listings into an ``.xlsx`` download."""
        job_title = _require_job_title(request.job_title)
        filename = request.filename or default_excel_filename(
            job_title, request.location
        )
        listings = await self.search(request)
        logger.info(f"Exporting {len(listings)} listings to {filename}")
        return filename, build_workbook(listings)
