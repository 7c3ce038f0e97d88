"""Tests for the Google Sheets client."""

from unittest.mock import MagicMock, patch

import pytest
from googleapiclient.errors import HttpError

from lead_finder.exceptions import CredentialError, UpstreamError
from lead_finder.integrations.google.sheets_client import GoogleSheetsClient
from lead_finder.settings import Settings

MODULE = "lead_finder.integrations.google.sheets_client"


@pytest.fixture
def services():
    """Mock Sheets and Drive services keyed by API name."""
    sheets = MagicMock()
    sheets.spreadsheets().create().execute.return_value = {"spreadsheetId": "abc123"}
    sheets.spreadsheets().values().update().execute.return_value = {}
    drive = MagicMock()
    drive.permissions().create().execute.return_value = {"id": "perm"}
    return {"sheets": sheets, "drive": drive}


@pytest.fixture
def client(settings, services):
    with (
        patch(f"{MODULE}.service_account.Credentials.from_service_account_info"),
        patch(
            f"{MODULE}.build",
            side_effect=lambda name, version, **kwargs: services[name],
        ),
    ):
        yield GoogleSheetsClient(settings)


class TestGoogleSheetsClient:
    """Test spreadsheet creation."""

    @pytest.mark.asyncio
    async def test_create_spreadsheet(self, client, services, sample_listings):
        result = await client.create_spreadsheet("Python Jobs", sample_listings)

        assert result.spreadsheet_id == "abc123"
        assert (
            result.spreadsheet_url
            == "https://docs.google.com/spreadsheets/d/abc123/edit?usp=sharing"
        )
        assert result.total_results == 2

        create_body = services["sheets"].spreadsheets().create.call_args.kwargs["body"]
        assert create_body["properties"]["title"] == "Python Jobs"
        grid = create_body["sheets"][0]["properties"]["gridProperties"]
        assert grid == {"rowCount": 3, "columnCount": 4}

        update_kwargs = (
            services["sheets"].spreadsheets().values().update.call_args.kwargs
        )
        assert update_kwargs["spreadsheetId"] == "abc123"
        assert update_kwargs["range"] == "Job Listings!A1"
        assert update_kwargs["valueInputOption"] == "RAW"
        values = update_kwargs["body"]["values"]
        assert values[0] == ["Title", "Link", "Description", "Source"]
        assert values[1] == sample_listings[0].as_row()

        permission_kwargs = services["drive"].permissions().create.call_args.kwargs
        assert permission_kwargs["fileId"] == "abc123"
        assert permission_kwargs["body"] == {"role": "writer", "type": "anyone"}

    @pytest.mark.asyncio
    async def test_permission_failure_raises_upstream_error(
        self, client, services, sample_listings
    ):
        resp = MagicMock(status=403, reason="Forbidden")
        services["drive"].permissions().create().execute.side_effect = HttpError(
            resp, b'{"error": {"message": "forbidden"}}'
        )

        with pytest.raises(UpstreamError, match="sharing spreadsheet"):
            await client.create_spreadsheet("Python Jobs", sample_listings)

        # The document was created and written before the failure
        services["sheets"].spreadsheets().values().update().execute.assert_called()

    @pytest.mark.asyncio
    async def test_write_failure_skips_sharing(
        self, client, services, sample_listings
    ):
        resp = MagicMock(status=500, reason="Internal Error")
        services["sheets"].spreadsheets().values().update().execute.side_effect = (
            HttpError(resp, b'{"error": {"message": "backend error"}}')
        )
        services["drive"].reset_mock()

        with pytest.raises(UpstreamError, match="writing rows"):
            await client.create_spreadsheet("Python Jobs", sample_listings)

        services["drive"].permissions.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_failure_raises_upstream_error(
        self, client, services, sample_listings
    ):
        services["sheets"].spreadsheets().create().execute.side_effect = RuntimeError(
            "quota exceeded"
        )

        with pytest.raises(UpstreamError, match="quota exceeded"):
            await client.create_spreadsheet("Python Jobs", sample_listings)


class TestCredentials:
    """Test service-account credential loading."""

    @pytest.mark.asyncio
    async def test_missing_credentials(self, sample_listings):
        client = GoogleSheetsClient(
            Settings(_env_file=None, google_sheets_credentials=None)
        )
        with pytest.raises(CredentialError, match="GOOGLE_SHEETS_CREDENTIALS"):
            await client.create_spreadsheet("Jobs", sample_listings)

    @pytest.mark.asyncio
    async def test_unparseable_credentials(self, sample_listings):
        client = GoogleSheetsClient(
            Settings(_env_file=None, google_sheets_credentials="{not json")
        )
        with pytest.raises(CredentialError, match="not valid JSON"):
            await client.create_spreadsheet("Jobs", sample_listings)

    @pytest.mark.asyncio
    async def test_invalid_service_account(self, sample_listings):
        client = GoogleSheetsClient(
            Settings(_env_file=None, google_sheets_credentials='{"type": "user"}')
        )
        with patch(
            f"{MODULE}.service_account.Credentials.from_service_account_info",
            side_effect=ValueError("missing client_email"),
        ):
            with pytest.raises(CredentialError, match="missing client_email"):
                await client.create_spreadsheet("Jobs", sample_listings)
