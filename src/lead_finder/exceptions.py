"""
Exception taxonomy for Lead Finder.

Every error carries the HTTP status it maps to; the handlers registered in
``main`` turn them into ``{"error": message}`` responses.
"""


class LeadFinderError(Exception):
    """Base exception for all Lead Finder errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(LeadFinderError):
    """Raised when request input is missing or malformed."""

    status_code = 400


class CredentialError(LeadFinderError):
    """Raised when required credentials are missing or cannot be parsed."""

    pass


class UpstreamError(LeadFinderError):
    """Raised when a Google API call fails."""

    pass
