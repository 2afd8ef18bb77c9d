"""
HTTP fetcher for the data center listing page.

A single GET with a timeout.  No retries: a failed fetch surfaces as
FetchError and the caller decides what to do.
"""

from typing import Optional

import requests

from .config import Settings
from .exceptions import FetchError, ResponseBodyInvalid
from .logger import get_module_logger

logger = get_module_logger("fetcher")


class Fetcher:
    """Retrieves the data center page as UTF-8 text."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None
    ):
        self.settings = settings or Settings()
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = self.settings.user_agent

    def fetch(self, url: Optional[str] = None) -> str:
        """
        GET the page and return its body as text.

        Args:
            url: Page to fetch (defaults to settings.url)

        Returns:
            Response body decoded as UTF-8

        Raises:
            FetchError: request failed or returned an error status
            ResponseBodyInvalid: body is not valid UTF-8
        """
        url = url or self.settings.url
        logger.info(f"Fetching {url} (timeout {self.settings.timeout}s)")

        try:
            response = self.session.get(url, timeout=self.settings.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise FetchError(
                f"Request failed: {e}",
                url=url,
                details={"error": str(e), "error_type": type(e).__name__}
            ) from e

        # Decode ourselves; requests may guess ISO-8859-1 from the headers
        try:
            html = response.content.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.error(f"Response from {url} is not valid UTF-8: {e}")
            raise ResponseBodyInvalid(
                "Response body is not valid UTF-8",
                url=url,
                details={"error": str(e)}
            ) from e

        logger.debug(f"Fetched {len(html)} characters from {url}")
        return html
