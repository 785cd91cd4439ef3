"""
==============================================================================
Catalog Source Module
==============================================================================

Adapters that fetch the raw catalog cell grid.

The cache only depends on the CatalogSource protocol: ``fetch_rows()``
returns a list of rows of cell strings where row 0 is the header.

GoogleSheetsSource:
------------------
Reads ``{tab}!{range}`` from a spreadsheet with a read-only service
account. Credentials are checked on the first fetch, so a missing setting
surfaces as a CONFIGURATION_ERROR response instead of a failed startup.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Protocol

from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from pricecheck.config import Settings
from pricecheck.core import exceptions


# Module logger
logger = logging.getLogger(__name__)


SHEETS_READONLY_SCOPE = "https://www.googleapis.com/auth/spreadsheets.readonly"
GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"


class CatalogSource(Protocol):
    """Anything that can return the catalog as a 2-D cell grid."""

    def fetch_rows(self) -> List[List[Any]]:
        ...


class GoogleSheetsSource:
    """
    Catalog source backed by the Google Sheets v4 values API.

    Attributes:
        spreadsheet_id: Spreadsheet identifier
        tab_name: Sheet tab holding the catalog
        cell_range: A1 range within the tab

    Example:
        >>> source = GoogleSheetsSource.from_settings(get_settings())
        >>> values = source.fetch_rows()
        >>> values[0]
        ['Import Date', 'Description', 'ItemNumber', 'UPC Number', ...]
    """

    def __init__(
        self,
        spreadsheet_id: Optional[str],
        client_email: Optional[str],
        private_key: Optional[str],
        tab_name: str = "data",
        cell_range: str = "A1:K",
    ) -> None:
        self.spreadsheet_id = spreadsheet_id
        self.tab_name = tab_name
        self.cell_range = cell_range
        self._client_email = client_email
        self._private_key = private_key
        self._service = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "GoogleSheetsSource":
        """Build a source from application settings."""
        return cls(
            spreadsheet_id=settings.google_sheets_spreadsheet_id,
            client_email=settings.google_service_account_email,
            private_key=settings.google_service_account_private_key,
            tab_name=settings.google_sheets_tab_name,
            cell_range=settings.google_sheets_range,
        )

    @property
    def a1_range(self) -> str:
        return f"{self.tab_name}!{self.cell_range}"

    def fetch_rows(self) -> List[List[Any]]:
        """
        Fetch the tab's cell grid.

        Returns:
            List of rows; empty when the tab has no values

        Raises:
            AppException: CONFIGURATION_ERROR when a setting is missing,
                UPSTREAM_ERROR when the Sheets API call fails
        """
        if not self.spreadsheet_id:
            raise exceptions.missing_setting("GOOGLE_SHEETS_SPREADSHEET_ID")

        service = self._get_service()

        try:
            response = (
                service.spreadsheets()
                .values()
                .get(spreadsheetId=self.spreadsheet_id, range=self.a1_range)
                .execute()
            )
        except HttpError as e:
            logger.error(f"Sheets API error for {self.a1_range}: {e}")
            raise exceptions.upstream_error(f"Google Sheets request failed: {e}") from e
        except GoogleAuthError as e:
            logger.error(f"Service account authentication failed: {e}")
            raise exceptions.upstream_error(f"Google authentication failed: {e}") from e

        return response.get("values", [])

    def _get_service(self):
        """Build the Sheets service once and reuse it."""
        if self._service is not None:
            return self._service

        if not self._client_email:
            raise exceptions.missing_setting("GOOGLE_SERVICE_ACCOUNT_EMAIL")
        if not self._private_key:
            raise exceptions.missing_setting("GOOGLE_SERVICE_ACCOUNT_PRIVATE_KEY")

        try:
            credentials = service_account.Credentials.from_service_account_info(
                {
                    "type": "service_account",
                    "client_email": self._client_email,
                    "private_key": self._private_key,
                    "token_uri": GOOGLE_TOKEN_URI,
                },
                scopes=[SHEETS_READONLY_SCOPE],
            )
        except ValueError as e:
            raise exceptions.upstream_error(f"Invalid service account key: {e}") from e

        self._service = build("sheets", "v4", credentials=credentials, cache_discovery=False)
        return self._service
