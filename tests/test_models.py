import pytest
from pydantic import ValidationError

from iris_news.ingestion.models import (
    CandidateLink,
    FAILURE_CONTENT,
    NewsItem,
)


@pytest.fixture
def candidate():
    return CandidateLink(
        title="Story",
        href="/news/1",
        url="https://iris.dive2ent.com/news/1",
    )


def test_from_candidate(candidate):
    item = NewsItem.from_candidate(candidate, "Body", "2024/3/5")
    assert item.title == "Story"
    assert item.link == "https://iris.dive2ent.com/news/1"
    assert item.content == "Body"
    assert item.date == "2024/3/5"
    assert not item.is_failure_sentinel


def test_failure_sentinel():
    item = NewsItem.failure_sentinel("2024/3/5")
    assert item.title == "エラー"
    assert item.link == ""
    assert item.content == FAILURE_CONTENT
    assert item.is_failure_sentinel


def test_items_are_immutable(candidate):
    item = NewsItem.from_candidate(candidate, "Body", "2024/3/5")
    with pytest.raises(ValidationError):
        item.content = "changed"
    with pytest.raises(ValidationError):
        candidate.title = "changed"


def test_content_bounds(candidate):
    with pytest.raises(ValidationError):
        NewsItem.from_candidate(candidate, "", "2024/3/5")
    with pytest.raises(ValidationError):
        NewsItem.from_candidate(candidate, "x" * 1001, "2024/3/5")
    assert len(NewsItem.from_candidate(candidate, "x" * 1000, "d").content) == 1000


def test_candidate_title_required():
    with pytest.raises(ValidationError):
        CandidateLink(title="", href="/news/1", url="https://iris.dive2ent.com/news/1")


def test_to_record(candidate):
    record = NewsItem.from_candidate(candidate, "Body", "2024/3/5").to_record()
    assert record == {
        "title": "Story",
        "link": "https://iris.dive2ent.com/news/1",
        "content": "Body",
        "date": "2024/3/5",
    }
