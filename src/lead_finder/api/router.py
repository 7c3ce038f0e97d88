"""
FastAPI router for the lead search endpoints.
"""

import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from ..exports.excel import XLSX_MEDIA_TYPE, build_workbook
from ..integrations.google.search_client import GoogleSearchClient
from ..integrations.google.sheets_client import GoogleSheetsClient
from ..models.requests import (
    ExcelExportRequest,
    ExcelSearchRequest,
    SearchRequest,
    SearchResponse,
    SpreadsheetRequest,
    SpreadsheetResult,
    SpreadsheetSearchRequest,
    SpreadsheetSearchResponse,
)
from ..services.leads import LeadService
from ..settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["leads"])


def get_search_client(settings: Settings = Depends(get_settings)) -> GoogleSearchClient:
    """Dependency to get the Custom Search client."""
    return GoogleSearchClient(settings)


def get_sheets_client(settings: Settings = Depends(get_settings)) -> GoogleSheetsClient:
    """Dependency to get the Google Sheets client."""
    return GoogleSheetsClient(settings)


def get_lead_service(
    search_client: GoogleSearchClient = Depends(get_search_client),
    sheets_client: GoogleSheetsClient = Depends(get_sheets_client),
) -> LeadService:
    return LeadService(search_client, sheets_client)


def content_disposition(filename: str) -> str:
    """Attachment header with an ASCII fallback and an RFC 5987 UTF-8 name."""
    fallback = "".join(
        ch for ch in filename if 32 <= ord(ch) < 127 and ch not in '"\\'
    ).strip()
    if not fallback or fallback.startswith("."):
        fallback = "job_listings.xlsx"
    encoded = quote(filename, safe="")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{encoded}"


def _xlsx_response(filename: str, content: bytes) -> Response:
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": content_disposition(filename)},
    )


@router.post("/api/search", response_model=SearchResponse)
@router.post("/google_search", response_model=SearchResponse, include_in_schema=False)
async def search(
    request: SearchRequest,
    service: LeadService = Depends(get_lead_service),
):
    """Search job boards for listings."""
    results = await service.search(request)
    return SearchResponse(results=results)


@router.post("/api/search-to-spreadsheet", response_model=SpreadsheetSearchResponse)
async def search_to_spreadsheet(
    request: SpreadsheetSearchRequest,
    service: LeadService = Depends(get_lead_service),
):
    """Search job boards and write the listings into a new Google Sheet."""
    return await service.search_to_spreadsheet(request)


@router.post("/api/search-to-excel")
async def search_to_excel(
    request: ExcelSearchRequest,
    service: LeadService = Depends(get_lead_service),
):
    """Search job boards and download the listings as an Excel workbook."""
    filename, content = await service.search_to_excel(request)
    return _xlsx_response(filename, content)


@router.post("/api/spreadsheet", response_model=SpreadsheetResult)
async def create_spreadsheet(
    request: SpreadsheetRequest,
    client: GoogleSheetsClient = Depends(get_sheets_client),
):
    """Create a shared Google Sheet from already fetched listings."""
    return await client.create_spreadsheet(request.title, request.data)


@router.post("/api/export-excel")
async def export_excel(request: ExcelExportRequest):
    """Download already fetched listings as an Excel workbook."""
    content = build_workbook(request.data)
    return _xlsx_response(request.filename, content)
