"""
Shared pytest configuration and fixtures for the test suite.

This module provides common fixtures, test markers, and configuration
for all test categories.
"""

import pytest

from lead_finder.models.listing import ListingResult
from lead_finder.settings import Settings

SERVICE_ACCOUNT_JSON = (
    '{"type": "service_account", "client_email": "bot@example.iam.gserviceaccount.com",'
    ' "private_key": "key", "token_uri": "https://oauth2.googleapis.com/token"}'
)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests (fast, isolated)"
    )
    config.addinivalue_line(
        "markers", "google: marks tests that interact with Google APIs"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        if "google" in str(item.fspath):
            item.add_marker(pytest.mark.google)


@pytest.fixture
def settings():
    """Settings with every Google credential configured."""
    return Settings(
        _env_file=None,
        google_api_key="test-key",
        google_cx="test-cx",
        google_sheets_credentials=SERVICE_ACCOUNT_JSON,
    )


@pytest.fixture
def sample_listings():
    """Two listings as returned by the search client."""
    return [
        ListingResult(
            title="Looking for Python Developer",
            link="https://www.linkedin.com/posts/acme-python",
            snippet="We are looking for a Python developer in Berlin.",
            source="www.linkedin.com",
        ),
        ListingResult(
            title="Senior Python Engineer",
            link="https://www.indeed.com/viewjob?jk=123",
            snippet="Remote friendly role.",
            source="www.indeed.com",
        ),
    ]
