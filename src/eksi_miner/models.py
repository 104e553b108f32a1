"""
Data models for eksi-miner.

This module defines typed data structures for the records pulled off
eksisozluk.com listing pages, plus the per-call retrieval settings.
Using dataclasses provides clear structure, type hints, and easy JSON serialization.
"""

from dataclasses import asdict, dataclass

# Number of records returned when the caller does not ask for a limit
DEFAULT_LIMIT = 10
DEFAULT_PAGE = 1


@dataclass(frozen=True)
class Entry:
    """
    Represents a single entry (post) under a topic.

    Attributes:
        id: Site-assigned entry identifier, e.g. "#12345"
        author: Display name of the author, empty if it could not be found
        date: Raw timestamp text as rendered by the site, empty if missing
        text: The body of the entry

    Example:
        entry = Entry(
            id="#12345",
            author="ssg",
            date="15.03.2020 14:22",
            text="pena gibi bir başlık..."
        )
    """
    id: str = ""
    author: str = ""
    date: str = ""
    text: str = ""

    def to_dict(self) -> dict:
        """Convert the entry to a dictionary for JSON serialization."""
        return asdict(self)


@dataclass(frozen=True)
class Topic:
    """
    Represents one row of a topic listing (gündem, debe, ...).

    Attributes:
        title: Topic title
        link: Absolute URL of the topic page
        count: Number of entries the listing reports for the topic
    """
    title: str
    link: str
    count: int = 0

    def to_dict(self) -> dict:
        """Convert the topic to a dictionary for JSON serialization."""
        return asdict(self)


@dataclass(frozen=True)
class DebeRecord:
    """
    One item of the daily-top ("debe") listing: a topic and its highlighted entry.

    The listing always points at exactly one entry per topic, so
    ``topic.count`` is 1 for every record built by the scraper.
    """
    topic: Topic
    entry: Entry

    def to_dict(self) -> dict:
        return {"topic": self.topic.to_dict(), "entry": self.entry.to_dict()}


@dataclass(frozen=True)
class RetrievalConfig:
    """
    Caller supplied settings for one retrieval call.

    Attributes:
        page_number: First listing page to fetch (1-indexed)
        limit: Maximum number of records to return
        sukela: Ask for the "nice" ordering (``&a=nice``) on search pages
    """
    page_number: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    sukela: bool = False

    def __post_init__(self):
        if self.page_number < 1:
            raise ValueError(f"page_number must be >= 1, got {self.page_number}")
        if self.limit < 0:
            raise ValueError(f"limit must be >= 0, got {self.limit}")
