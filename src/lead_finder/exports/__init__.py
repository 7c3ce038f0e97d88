from .excel import HEADER_ROW, XLSX_MEDIA_TYPE, build_workbook, listing_rows

__all__ = ["HEADER_ROW", "XLSX_MEDIA_TYPE", "build_workbook", "listing_rows"]
