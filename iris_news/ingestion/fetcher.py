import logging
from dataclasses import dataclass
from typing import Dict, Optional

import httpx


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchResult:
    """Outcome of a single GET: either a status and body, or a transport error."""
    url: str
    status: Optional[int] = None
    body: str = ""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.status is not None and 200 <= self.status < 300


class HTMLFetcher:
    """
    Blocking HTML fetcher.

    A fresh httpx.Client is opened for every call so nothing is shared
    between fetches. Transport errors never escape: they come back as a
    FetchResult with ``status=None``.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
        follow_redirects: bool = True,
    ):
        self.timeout = timeout
        self.transport = transport
        self.follow_redirects = follow_redirects

    def _client_kwargs(self) -> Dict:
        kwargs = {"follow_redirects": self.follow_redirects}
        # httpx keeps its own default when no timeout is configured
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        if self.transport is not None:
            kwargs["transport"] = self.transport
        return kwargs

    def fetch(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        max_age: Optional[int] = None,
    ) -> FetchResult:
        request_headers = dict(headers or {})
        if max_age is not None:
            request_headers.setdefault("Cache-Control", f"max-age={int(max_age)}")

        try:
            with httpx.Client(**self._client_kwargs()) as client:
                response = client.get(url, headers=request_headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug(f"Request failed: {url} | Reason: {e!r}")
            return FetchResult(url=url, error=str(e) or e.__class__.__name__)

        return FetchResult(url=url, status=response.status_code, body=response.text)
