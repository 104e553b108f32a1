"""Configure test paths and shared fixtures."""
import sys
from pathlib import Path

import pytest

# Add src/ to path so tests can import the package
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pages import FakeSite  # noqa: E402


@pytest.fixture
def site():
    """An in-memory eksisozluk.com served through httpx.MockTransport."""
    fake = FakeSite()
    yield fake
    fake.close()
