"""
Google Sheets client - creates shared spreadsheets of job listings.

Authentication uses a service account whose JSON key is supplied through the
GOOGLE_SHEETS_CREDENTIALS environment variable.
"""

import asyncio
import json
import logging
from collections.abc import Sequence
from typing import Any

from google.oauth2 import service_account  # type: ignore[import-untyped]
from googleapiclient.discovery import build  # type: ignore[import-untyped]
from googleapiclient.errors import HttpError  # type: ignore[import-untyped]

from lead_finder.exceptions import CredentialError, UpstreamError
from lead_finder.exports.excel import SHEET_TITLE, listing_rows
from lead_finder.models.listing import ListingResult
from lead_finder.models.requests import SpreadsheetResult
from lead_finder.settings import Settings, get_settings

logger = logging.getLogger(__name__)

SCOPES = [
    "https://www.googleapis.com/auth/spreadsheets",
    "https://www.googleapis.com/auth/drive",
]
SPREADSHEET_URL = (
    "https://docs.google.com/spreadsheets/d/{spreadsheet_id}/edit?usp=sharing"
)


class GoogleSheetsClient:
    """
    Google Sheets and Drive client backed by a service account.

    A created spreadsheet is not rolled back when a later step fails, so a
    failure while writing rows or sharing can leave an empty or private
    document behind.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self._credentials: Any = None
        self._sheets_service: Any = None
        self._drive_service: Any = None

    def _load_credentials(self) -> Any:
        """Parse the service-account payload from settings."""
        raw = self.settings.google_sheets_credentials
        if not raw:
            raise CredentialError(
                "Missing Google Sheets credentials. Set GOOGLE_SHEETS_CREDENTIALS "
                "environment variable."
            )
        try:
            info = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CredentialError(
                f"GOOGLE_SHEETS_CREDENTIALS is not valid JSON: {e}"
            ) from e
        if not isinstance(info, dict):
            raise CredentialError("GOOGLE_SHEETS_CREDENTIALS must be a JSON object")

        try:
            return service_account.Credentials.from_service_account_info(
                info, scopes=SCOPES
            )
        except (ValueError, KeyError) as e:
            raise CredentialError(
                f"Invalid Google Sheets service-account credentials: {e}"
            ) from e

    def _get_credentials(self) -> Any:
        if self._credentials is None:
            self._credentials = self._load_credentials()
        return self._credentials

    def _get_sheets_service(self) -> Any:
        """Get the Google Sheets API service instance."""
        if self._sheets_service is None:
            credentials = self._get_credentials()
            try:
                self._sheets_service = build(
                    "sheets", "v4", credentials=credentials, cache_discovery=False
                )
            except Exception as e:
                raise UpstreamError(f"Failed to create sheets service: {e}") from e
        return self._sheets_service

    def _get_drive_service(self) -> Any:
        """Get the Google Drive API service instance."""
        if self._drive_service is None:
            credentials = self._get_credentials()
            try:
                self._drive_service = build(
                    "drive", "v3", credentials=credentials, cache_discovery=False
                )
            except Exception as e:
                raise UpstreamError(f"Failed to create drive service: {e}") from e
        return self._drive_service

    async def _execute(self, request: Any, step: str) -> dict[str, Any]:
        try:
            return await asyncio.to_thread(request.execute)
        except HttpError as e:
            error_msg = f"Google Sheets API error while {step}: {e}"
            logger.error(error_msg)
            raise UpstreamError(error_msg) from e
        except Exception as e:
            error_msg = f"Failed {step}: {e}"
            logger.error(error_msg)
            raise UpstreamError(error_msg) from e

    async def create_spreadsheet(
        self, title: str, listings: Sequence[ListingResult]
    ) -> SpreadsheetResult:
        """
        Create a spreadsheet populated with listings and share it publicly.

        Args:
            title: Title of the new spreadsheet document
            listings: Listings to write below the header row

        Returns:
            Identifier and share URL of the created spreadsheet

        Raises:
            CredentialError: If the service-account payload is missing or invalid
            UpstreamError: If creating, writing or sharing the spreadsheet fails
        """
        sheets = self._get_sheets_service()
        drive = self._get_drive_service()

        body = {
            "properties": {"title": title},
            "sheets": [
                {
                    "properties": {
                        "title": SHEET_TITLE,
                        "gridProperties": {
                            "rowCount": len(listings) + 1,
                            "columnCount": 4,
                        },
                    }
                }
            ],
        }
        created = await self._execute(
            sheets.spreadsheets().create(body=body), "creating spreadsheet"
        )
        spreadsheet_id = created["spreadsheetId"]
        logger.info(f"Created spreadsheet {spreadsheet_id} titled {title!r}")

        await self._execute(
            sheets.spreadsheets()
            .values()
            .update(
                spreadsheetId=spreadsheet_id,
                range=f"{SHEET_TITLE}!A1",
                valueInputOption="RAW",
                body={"values": listing_rows(listings)},
            ),
            "writing rows",
        )

        await self._execute(
            drive.permissions().create(
                fileId=spreadsheet_id,
                body={"role": "writer", "type": "anyone"},
            ),
            "sharing spreadsheet",
        )
        logger.info(f"Wrote {len(listings)} rows to spreadsheet {spreadsheet_id}")

        return SpreadsheetResult(
            spreadsheet_id=spreadsheet_id,
            spreadsheet_url=SPREADSHEET_URL.format(spreadsheet_id=spreadsheet_id),
            total_results=len(listings),
        )
