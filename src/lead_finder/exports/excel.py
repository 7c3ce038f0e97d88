"""In-memory ``.xlsx`` export of job listings."""

import logging
from collections.abc import Sequence
from io import BytesIO

from openpyxl import Workbook

from lead_finder.exceptions import ValidationError
from lead_finder.models.listing import ListingResult

logger = logging.getLogger(__name__)

SHEET_TITLE = "Job Listings"
HEADER_ROW = ["Title", "Link", "Description", "Source"]
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def listing_rows(listings: Sequence[ListingResult]) -> list[list[str]]:
    """Header row followed by one row per listing."""
    return [HEADER_ROW, *(listing.as_row() for listing in listings)]


def build_workbook(listings: Sequence[ListingResult] | None) -> bytes:
    """
    Serialize listings into a single-sheet workbook.

    Raises:
        ValidationError: If listings is missing, not a list, or empty
    """
    if not listings or not isinstance(listings, list | tuple):
        raise ValidationError(
            "Invalid data format. Please provide an array of job listings."
        )

    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_TITLE
    for row in listing_rows(listings):
        sheet.append(row)

    buffer = BytesIO()
    workbook.save(buffer)
    logger.debug(f"Built workbook with {len(listings)} rows")
    return buffer.getvalue()
