"""Lead Finder - job-board search with Google Sheets and Excel export."""

__version__ = "1.0.0"
