"""Google Custom Search and Google Sheets integrations."""

from .search_client import GoogleSearchClient, build_query
from .sheets_client import GoogleSheetsClient

__all__ = ["GoogleSearchClient", "GoogleSheetsClient", "build_query"]
