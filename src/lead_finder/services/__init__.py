from .leads import LeadService, default_excel_filename, default_spreadsheet_title

__all__ = ["LeadService", "default_excel_filename", "default_spreadsheet_title"]
