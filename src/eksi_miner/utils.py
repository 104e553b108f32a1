"""
Utility functions for eksi-miner.

This module provides helpers for naming the files results are written to.
"""

import re
from typing import Optional


def output_filename(kind: str, text: Optional[str] = None, max_length: int = 50) -> str:
    """
    Generate a filesystem-safe JSON filename for a retrieval result.

    Args:
        kind: The kind of listing written (e.g. "entries", "gundem", "debe")
        text: Optional search term to include in the name
        max_length: Maximum length for the search term portion (default: 50 chars)

    Returns:
        "{kind}.json" or "{kind}_{slug}.json"

    Example:
        output_filename("gundem")
        # Returns: "gundem.json"

        output_filename("entries", "python: nasıl öğrenilir?")
        # Returns: "entries_python_nasıl_öğrenilir.json"
    """
    if not text:
        return f"{kind}.json"

    # Remove characters that are illegal on common filesystems
    slug = re.sub(r'[/\\:*?"<>|]', '', text)
    slug = re.sub(r'\s+', '_', slug.strip())

    if len(slug) > max_length:
        slug = slug[:max_length].rstrip('_')

    if not slug:
        return f"{kind}.json"
    return f"{kind}_{slug}.json"
