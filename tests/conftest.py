import pytest

from iris_news.ingestion.fetcher import FetchResult


class FakeFetcher:
    """In-memory fetcher: url -> (status, body) or an exception message."""

    def __init__(self, pages=None, errors=None):
        self.pages = dict(pages or {})
        self.errors = dict(errors or {})
        self.calls = []

    def fetch(self, url, headers=None, max_age=None):
        self.calls.append({"url": url, "headers": headers, "max_age": max_age})
        if url in self.errors:
            return FetchResult(url=url, error=self.errors[url])
        if url not in self.pages:
            return FetchResult(url=url, status=404, body="Not Found")
        status, body = self.pages[url]
        return FetchResult(url=url, status=status, body=body)

    @property
    def fetched_urls(self):
        return [call["url"] for call in self.calls]


LISTING_URL = "https://iris.dive2ent.com/news/"


@pytest.fixture
def config():
    return {
        "listing_url": LISTING_URL,
        "base_url": "https://iris.dive2ent.com",
        "user_agent": "TestAgent/1.0",
        "max_links": 5,
        "max_content_length": 1000,
        "min_fallback_title_length": 10,
        "listing_max_age": 1800,
        "article_max_age": 3600,
        "timezone": "Asia/Tokyo",
    }


@pytest.fixture
def fake_fetcher():
    return FakeFetcher()
