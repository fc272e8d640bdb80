"""
Blocking HTTP access to the GitHub contents API and raw content host.
"""

from __future__ import annotations

from datetime import datetime
from typing import NamedTuple, Optional

import httpx

from ..core.endpoints import build_api_url
from ..models import CopierConfig, GitHubReference
from ..infrastructure.error_handler import (
    NetworkError,
    NotFoundError,
    RateLimitError,
    handle_transport_error,
)
from ..infrastructure.logger import logger


RATE_LIMIT_STATUSES = (403, 429)


class FetchResponse(NamedTuple):
    """Successful (2xx) response."""

    status_code: int
    body: bytes
    url: str


####
##      GITHUB API SERVICE
#####
class GitHubAPIService:
    """
    Sequential fetcher for GitHub content.

    One ``httpx.Client`` is shared by every request of an invocation. No
    authentication is sent and nothing is retried: each non-success status
    is turned into the matching ``CopierError`` immediately.
    """

    def __init__(
        self,
        config: Optional[CopierConfig] = None,
        client: Optional[httpx.Client] = None
    ):
        self.config = config or CopierConfig()
        self._owns_client = client is None
        self.client = client or httpx.Client(
            timeout=self.config.timeout,
            headers={
                "Accept": "application/vnd.github.v3+json",
                "User-Agent": self.config.user_agent,
            },
            follow_redirects=True,
        )
        self.requests_made = 0

    def __enter__(self) -> "GitHubAPIService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying client if this service created it."""

        if self._owns_client:
            self.client.close()

    @handle_transport_error
    def get(self, url: str) -> FetchResponse:
        """
        Issue one GET request.

        Args:
            url: Absolute URL to fetch

        Returns:
            FetchResponse for any 2xx status

        Raises:
            NotFoundError: On 404
            RateLimitError: On 403 or 429
            NetworkError: On any other non-2xx status or transport failure
        """

        logger.debug(f"GET {url}")
        self.requests_made += 1
        response = self.client.get(url)
        logger.debug(f"GET {url} -> {response.status_code} ({len(response.content)} bytes)")

        status = response.status_code
        if 200 <= status < 300:
            return FetchResponse(status, response.content, str(response.url))
        if status == 404:
            raise NotFoundError(url)
        if status in RATE_LIMIT_STATUSES:
            raise RateLimitError(url, status, _reset_time(response.headers))

        reason = f" {response.reason_phrase}" if response.reason_phrase else ""
        raise NetworkError(
            f"HTTP {status}{reason}: {url}",
            status_code=status,
            url=url,
        )

    def get_contents(self, reference: GitHubReference) -> FetchResponse:
        """Fetch the contents API document for ``reference``."""

        return self.get(build_api_url(reference, self.config.api_base_url))

    def get_raw(self, url: str) -> bytes:
        """Fetch raw file bytes."""

        return self.get(url).body


def _reset_time(headers: httpx.Headers) -> Optional[datetime]:
    value = headers.get("x-ratelimit-reset")
    if not value:
        return None
    try:
        return datetime.fromtimestamp(int(value))
    except (ValueError, OverflowError, OSError):
        logger.debug(f"Ignoring malformed x-ratelimit-reset header: {value!r}")
        return None


__all__ = ["GitHubAPIService", "FetchResponse", "RATE_LIMIT_STATUSES"]
