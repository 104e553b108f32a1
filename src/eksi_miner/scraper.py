"""
Scraper for eksisozluk.com listings.

This module ties the page fetcher, the extractors and the pagination loop
together into the three retrieval entry points:

- get_entries: entries for a search term, paginated
- get_popular_topics: the "gündem" (popular topics) listing, paginated
- get_debe: the daily-top ("debe") listing, one page plus one nested
  fetch per topic

Target: https://eksisozluk.com
"""

import dataclasses
import logging
from typing import List, Optional
from urllib.parse import quote_plus

from tqdm import tqdm

from .extractors import BASE_URL, extract_entries, extract_topics
from .fetcher import PageFetcher
from .matchers import MATCHERS, Matchers
from .models import DebeRecord, Entry, RetrievalConfig, Topic
from .pagination import accumulate

logger = logging.getLogger(__name__)

SEARCH_PATH = "/?q="
POPULAR_PATH = "/basliklar/populer"
DEBE_PATH = "/debe"

# Appended to search page URLs when the "nice" ordering is requested
SUKELA_PARAM = "&a=nice"


class EksiScraper:
    """
    Retrieve entries and topics from eksisozluk.com.

    Every retrieval is sequential: one page is downloaded and extracted
    before the next page number is requested. A FetchError or ParseError
    raised for any page aborts the whole call.

    Usage:
        with EksiScraper() as scraper:
            topics = scraper.get_popular_topics(RetrievalConfig(limit=20))
    """

    def __init__(
        self,
        fetcher: Optional[PageFetcher] = None,
        matchers: Matchers = MATCHERS,
        base_url: str = BASE_URL,
    ):
        self._own_fetcher = fetcher is None
        self.fetcher = fetcher or PageFetcher()
        self.matchers = matchers
        self.base_url = base_url

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        if self._own_fetcher:
            self.fetcher.close()

    # Page level helpers
    # ------------------------------------------------------------

    def fetch_entries(self, url: str) -> List[Entry]:
        """Fetch one topic page and return the entries on it."""
        page = self.fetcher.fetch(url)
        return extract_entries(page.markup, self.matchers)

    def fetch_topics(self, url: str) -> List[Topic]:
        """Fetch one listing page and return the topics on it."""
        page = self.fetcher.fetch(url)
        return extract_topics(page.markup, self.matchers, self.base_url)

    # Retrieval entry points
    # ------------------------------------------------------------

    def search_url(self, text: str) -> str:
        return self.base_url + SEARCH_PATH + quote_plus(text)

    def get_entries(self, text: str, config: RetrievalConfig) -> List[Entry]:
        """
        Return up to ``config.limit`` entries for a search term.

        The site redirects a bare query to the canonical topic page, so the
        query is resolved first and pagination is applied to the redirected
        URL rather than to the query URL.
        """
        if config.limit == 0:
            return []

        redirected_url = self.fetcher.fetch(self.search_url(text)).url
        logger.info("Search '%s' resolved to %s", text, redirected_url)

        def page_url(page_number: int) -> str:
            url = f"{redirected_url}?p={page_number}"
            if config.sukela:
                url += SUKELA_PARAM
            return url

        return accumulate(
            lambda page_number: self.fetch_entries(page_url(page_number)),
            config.page_number,
            config.limit,
        )

    def get_popular_topics(self, config: RetrievalConfig) -> List[Topic]:
        """Return up to ``config.limit`` topics from the popular topics listing."""
        popular_url = self.base_url + POPULAR_PATH
        return accumulate(
            lambda page_number: self.fetch_topics(f"{popular_url}?p={page_number}"),
            config.page_number,
            config.limit,
        )

    def get_debe(self, config: RetrievalConfig, show_progress: bool = False) -> List[DebeRecord]:
        """
        Return up to ``config.limit`` daily-top records.

        The daily-top listing has a single page, so ``config.page_number`` is
        not used. Each topic on it is followed to its own page and paired with
        the first entry found there.
        """
        if config.limit == 0:
            return []

        topics = self.fetch_topics(self.base_url + DEBE_PATH)
        records: List[DebeRecord] = []

        with tqdm(total=len(topics), desc="Fetching debe entries",
                  disable=not show_progress) as pbar:
            for topic in topics:
                if len(records) >= config.limit:
                    break

                # The listing points at one highlighted entry per topic
                topic = dataclasses.replace(topic, count=1)

                entries = self.fetch_entries(topic.link)
                pbar.update(1)
                if not entries:
                    logger.warning("No entry found for debe topic '%s' (%s), skipping",
                                   topic.title, topic.link)
                    continue

                records.append(DebeRecord(topic=topic, entry=entries[0]))

            # Stopping at the limit leaves topics unvisited
            pbar.total = pbar.n
            pbar.refresh()

        return records
