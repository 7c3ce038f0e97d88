"""
Shared data models for Lead Finder.

This module provides the listing value object and the HTTP request and
response bodies built on top of it.
"""

from .listing import ListingResult
from .requests import (
    ExcelExportRequest,
    ExcelSearchRequest,
    SearchRequest,
    SearchResponse,
    SpreadsheetRequest,
    SpreadsheetResult,
    SpreadsheetSearchRequest,
    SpreadsheetSearchResponse,
)

__all__ = [
    # Value objects
    "ListingResult",
    # Input models
    "SearchRequest",
    "SpreadsheetSearchRequest",
    "ExcelSearchRequest",
    "SpreadsheetRequest",
    "ExcelExportRequest",
    # Output models
    "SearchResponse",
    "SpreadsheetResult",
    "SpreadsheetSearchResponse",
]
