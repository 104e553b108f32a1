"""Exceptions raised while retrieving pages from the site."""


class ScraperError(Exception):
    """Base class for every error that aborts a retrieval call."""


class FetchError(ScraperError):
    """A page could not be downloaded (transport failure or HTTP error status)."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class ParseError(ScraperError):
    """Downloaded markup could not be turned into a document tree."""
