"""Synchronous page fetcher built on httpx."""

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from .exceptions import FetchError

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30.0

HEADERS = {
    'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36',
    'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,image/apng,*/*;q=0.8',
    'Accept-Language': 'tr-TR,tr;q=0.9,en-US;q=0.8,en;q=0.7',
}


@dataclass(frozen=True)
class Page:
    """A downloaded document together with the URL it was finally served from."""
    url: str
    markup: str


class PageFetcher:
    """Download single pages, following redirects.

    No retries: any failure surfaces as a FetchError and ends the
    retrieval that asked for the page.
    """

    def __init__(self, client: Optional[httpx.Client] = None):
        """Initialize the fetcher.

        Args:
            client: Optional httpx client. If None, creates (and owns) a new one.
        """
        self._own_client = client is None
        self.client = client or httpx.Client(
            timeout=REQUEST_TIMEOUT,
            follow_redirects=True,
            headers=HEADERS,
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        if self._own_client:
            self.client.close()

    def fetch(self, url: str) -> Page:
        """Fetch ``url`` and return the final URL and body.

        A 404 is returned as a normal page: its markup holds no listing, so
        it reads as the end of the data.

        Raises:
            FetchError: on transport errors or any other non-success final status
        """
        logger.info("Fetching %s", url)
        try:
            response = self.client.get(url, follow_redirects=True)
            if response.status_code == httpx.codes.NOT_FOUND:
                logger.info("%s answered 404, treating it as an empty page", url)
            else:
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(url, f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise FetchError(url, str(e) or type(e).__name__) from e

        final_url = str(response.url)
        if final_url != url:
            logger.debug("Redirected %s -> %s", url, final_url)
        return Page(url=final_url, markup=response.text)
