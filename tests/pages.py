"""HTML builders and a fake site used across the test-suite (no network access required)."""

from typing import Dict, List, Optional, Sequence, Tuple

import httpx

from eksi_miner.fetcher import PageFetcher
from eksi_miner.scraper import EksiScraper

BASE = "https://eksisozluk.com"

EMPTY_PAGE_HTML = "<html><body><div id=\"content-body\"><p>bulunamadı</p></div></body></html>"

NOT_FOUND_HTML = "<html><body><div id=\"content-body\"><h1>böyle bir şey yok</h1></div></body></html>"


def entry_item(entry_id: str, author: str, date: str, text: str) -> str:
    return f"""
    <li data-id="{entry_id}">
      <div class="content">{text}</div>
      <footer>
        <div class="info">
          <a class="entry-date permalink" href="/entry/{entry_id}">{entry_id} {date}</a>
          <a class="entry-author" href="/biri/{author}">{author}</a>
        </div>
      </footer>
    </li>
    """


def entry_page(items: Sequence[str], title: str = "başlık") -> str:
    return f"""
    <html>
    <body>
    <div id="index-section"><ul class="topic-list"><li><a href="/solda">solda 3</a></li></ul></div>
    <div id="content-body">
      <h1 id="title"><a href="/baslik--1">{title}</a></h1>
      <ul id="entry-list">
        {''.join(items)}
      </ul>
    </div>
    </body>
    </html>
    """


def numbered_entries(start: int, count: int) -> List[str]:
    return [
        entry_item(str(n), f"yazar{n}", "15.03.2020 14:22", f"entry {n}")
        for n in range(start, start + count)
    ]


def topic_page(topics: Sequence[Tuple[str, str, Optional[int]]]) -> str:
    """Build a listing page from (title, href, count) rows; count None omits it."""
    rows = []
    for title, href, count in topics:
        small = f" <small>{count}</small>" if count is not None else ""
        rows.append(f'<li><a href="{href}">{title}{small}</a></li>')
    return f"""
    <html>
    <body>
    <div id="content-body">
      <ul class="topic-list partial">
        {''.join(rows)}
      </ul>
    </div>
    </body>
    </html>
    """


class FakeSite:
    """Serves registered pages.

    Unregistered URLs are recorded in ``unexpected`` and answered with a 500,
    which the fetcher treats as fatal, so a stray fetch fails the test.
    """

    def __init__(self):
        self.pages: Dict[str, str] = {}
        self.redirects: Dict[str, str] = {}
        self.statuses: Dict[str, int] = {}
        self.broken: set = set()
        self.requested: List[str] = []
        self.unexpected: List[str] = []
        self.client = httpx.Client(
            transport=httpx.MockTransport(self.handle),
            follow_redirects=True,
        )

    def handle(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested.append(url)

        if url in self.broken:
            raise httpx.ConnectError("connection refused", request=request)
        if url in self.redirects:
            return httpx.Response(302, headers={"Location": self.redirects[url]})
        if url in self.statuses:
            return httpx.Response(self.statuses[url], text=NOT_FOUND_HTML)
        if url in self.pages:
            return httpx.Response(200, text=self.pages[url])
        self.unexpected.append(url)
        return httpx.Response(500, text="")

    def scraper(self) -> EksiScraper:
        return EksiScraper(fetcher=PageFetcher(client=self.client), base_url=BASE)

    def close(self):
        self.client.close()
