from typing import Any, Dict
from pydantic import BaseModel, ConfigDict, Field


MAX_CONTENT_LENGTH = 1000

FETCHING_PLACEHOLDER = "コンテンツを取得中..."
EMPTY_CONTENT_PLACEHOLDER = "コンテンツを取得できませんでした"
ARTICLE_ERROR_PLACEHOLDER = "コンテンツの取得中にエラーが発生しました"

FAILURE_TITLE = "エラー"
FAILURE_CONTENT = (
    "ニュースの取得中にエラーが発生しました。"
    "ネットワーク接続を確認してください。"
)


class CandidateLink(BaseModel):
    """A discovered (title, URL) pair before content extraction."""
    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1, description="Trimmed anchor text.")
    href: str = Field(..., min_length=1, description="Raw href attribute.")
    url: str = Field(..., description="Resolved URL.")


class NewsItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    link: str = Field(..., description="Absolute URL, empty only for the failure sentinel.")
    content: str = Field(..., min_length=1, max_length=MAX_CONTENT_LENGTH)
    date: str = Field(..., description="Capture date, ja-JP short format.")

    @classmethod
    def from_candidate(cls, candidate: CandidateLink, content: str, date: str) -> "NewsItem":
        return cls(title=candidate.title, link=candidate.url, content=content, date=date)

    @classmethod
    def failure_sentinel(cls, date: str) -> "NewsItem":
        """Single item standing in for a listing page that could not be fetched."""
        return cls(title=FAILURE_TITLE, link="", content=FAILURE_CONTENT, date=date)

    @property
    def is_failure_sentinel(self) -> bool:
        return self.link == "" and self.title == FAILURE_TITLE

    def to_record(self) -> Dict[str, Any]:
        return self.model_dump()
