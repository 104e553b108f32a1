"""
eksi-miner - Scraper Package

This package retrieves entries and topic listings from eksisozluk.com by
walking listing pages until the requested number of records is collected.

Main components:
- EksiScraper: Retrieval entry points (search entries, gündem, debe)
- Entry, Topic, DebeRecord: Data models for extracted records
- RetrievalConfig: Per-call settings (start page, limit, şükela ordering)
- accumulate: The bounded pagination loop shared by all listings

Usage:
    from eksi_miner import EksiScraper, RetrievalConfig

    with EksiScraper() as scraper:
        entries = scraper.get_entries("python", RetrievalConfig(limit=20))
"""

from .exceptions import FetchError, ParseError, ScraperError
from .models import DebeRecord, Entry, RetrievalConfig, Topic
from .pagination import accumulate
from .scraper import EksiScraper

__all__ = [
    'EksiScraper',
    'Entry',
    'Topic',
    'DebeRecord',
    'RetrievalConfig',
    'accumulate',
    'ScraperError',
    'FetchError',
    'ParseError',
]

__version__ = '1.0.0'
