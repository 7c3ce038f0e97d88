"""
Google Custom Search client for job-board listings.

Queries are restricted to a fixed set of job boards and look for the
"Looking for <job title>" phrase that recruiters tend to post.
"""

import asyncio
import logging
import math
from typing import Any

import httpx

from lead_finder.exceptions import CredentialError, UpstreamError
from lead_finder.models.listing import ListingResult
from lead_finder.settings import Settings, get_settings

logger = logging.getLogger(__name__)

JOB_BOARD_SITES = (
    "linkedin.com",
    "indeed.com",
    "glassdoor.com",
    "monster.com",
    "ziprecruiter.com",
)


def build_query(job_title: str, location: str | None = None) -> str:
    """Build the Custom Search ``q`` parameter for a job title and location."""
    site_filter = " OR ".join(f"site:{site}" for site in JOB_BOARD_SITES)
    query = f'{site_filter} "Looking for {job_title}"'
    if location:
        query += f' "{location}"'
    return query


def _error_message(response: httpx.Response) -> str:
    """Extract Google's error message from a failed response, if any."""
    try:
        payload = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return f"HTTP {response.status_code}"


class GoogleSearchClient:
    """Paginated client for the Google Custom Search JSON API."""

    SEARCH_URL = "https://www.googleapis.com/customsearch/v1"
    PAGE_SIZE = 10

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def _credentials(self) -> tuple[str, str]:
        missing = []
        if not self.settings.google_api_key:
            missing.append("GOOGLE_API_KEY")
        if not self.settings.google_cx:
            missing.append("GOOGLE_CX")
        if missing:
            raise CredentialError(
                f"Missing Google API credentials. Set {' and '.join(missing)} "
                "environment variables."
            )
        return self.settings.google_api_key, self.settings.google_cx

    async def _fetch_page(
        self, client: httpx.AsyncClient, params: dict[str, Any]
    ) -> list[dict[str, Any]]:
        try:
            resp = await client.get(self.SEARCH_URL, params=params)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            message = _error_message(e.response)
            logger.error(f"Google Search API error: {message}")
            raise UpstreamError(message) from e
        except httpx.HTTPError as e:
            message = str(e) or e.__class__.__name__
            logger.error(f"Google Search request failed: {message}")
            raise UpstreamError(message) from e
        except ValueError as e:
            logger.error(f"Google Search returned invalid JSON: {e}")
            raise UpstreamError(f"Invalid response from Google Search: {e}") from e

        return data.get("items") or []

    async def search_listings(
        self,
        job_title: str,
        location: str | None = None,
        max_results: int = 50,
    ) -> list[ListingResult]:
        """
        Search job boards for listings matching a job title.

        Args:
            job_title: Job title to look for
            location: Optional location phrase added to the query
            max_results: Maximum number of listings to return

        Returns:
            Up to ``max_results`` listings in search-engine order

        Raises:
            CredentialError: If GOOGLE_API_KEY or GOOGLE_CX is not configured
            UpstreamError: If any Custom Search request fails
        """
        api_key, cx = self._credentials()
        query = build_query(job_title, location)
        pages = math.ceil(max_results / self.PAGE_SIZE)

        listings: list[ListingResult] = []
        async with httpx.AsyncClient(timeout=self.settings.search_timeout) as client:
            for page in range(pages):
                params = {
                    "key": api_key,
                    "cx": cx,
                    "q": query,
                    "num": self.PAGE_SIZE,
                    "start": page * self.PAGE_SIZE + 1,
                }
                logger.debug(f"Fetching search page {page + 1} for {job_title!r}")
                items = await self._fetch_page(client, params)

                for item in items:
                    try:
                        listings.append(ListingResult.from_search_item(item))
                    except Exception as e:
                        logger.warning(f"Failed to parse search item: {e}")

                if len(listings) >= max_results or len(items) < self.PAGE_SIZE:
                    break

        logger.info(f"Found {len(listings)} listings for {job_title!r}")
        return listings[:max_results]


if __name__ == "__main__":
    results = asyncio.run(GoogleSearchClient().search_listings("Python Developer"))
    print(results)
