"""HTTP transport used to fetch feed documents."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime
from typing import Protocol

import requests

from feedio.config import HTTP_TIMEOUT, USER_AGENT

HTTP_NOT_MODIFIED = 304


@dataclass
class ClientResponse:
    """Raw response of a fetch."""

    status_code: int
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_not_modified(self) -> bool:
        return self.status_code == HTTP_NOT_MODIFIED

    @property
    def last_modified(self) -> datetime | None:
        """The ``Last-Modified`` header as a datetime, None when absent or invalid."""
        value = self.headers.get("Last-Modified")
        if not value:
            return None
        try:
            return parsedate_to_datetime(value)
        except (TypeError, ValueError, IndexError):
            return None


class Client(Protocol):
    """Protocol for transports."""

    def fetch(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> ClientResponse:
        """Fetch a document.

        Args:
            url: Document URL
            headers: Extra request headers (e.g. conditional headers)
            timeout: Timeout in seconds, None for the client default

        Returns:
            ClientResponse, with status 304 when the document did not change
        """
        ...


def conditional_headers(modified_since: datetime | None) -> dict[str, str]:
    """Build the headers for a conditional fetch.

    Args:
        modified_since: Last known modification date, naive values are taken as UTC

    Returns:
        ``{"If-Modified-Since": ...}``, or an empty dict when no date is given
    """
    if modified_since is None:
        return {}
    if modified_since.tzinfo is None:
        modified_since = modified_since.replace(tzinfo=timezone.utc)
    return {
        "If-Modified-Since": format_datetime(
            modified_since.astimezone(timezone.utc), usegmt=True
        )
    }


class RequestsClient:
    """Client backed by a ``requests.Session``."""

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = HTTP_TIMEOUT,
        user_agent: str = USER_AGENT,
    ) -> None:
        self._session = session or requests.Session()
        self._timeout = timeout
        self._user_agent = user_agent

    def fetch(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> ClientResponse:
        """Fetch a document over HTTP.

        Raises:
            requests.HTTPError: If the server answers with an error status
        """
        request_headers = {"User-Agent": self._user_agent, **(headers or {})}
        response = self._session.get(
            url,
            headers=request_headers,
            timeout=self._timeout if timeout is None else timeout,
            allow_redirects=True,
        )
        if response.status_code == HTTP_NOT_MODIFIED:
            return ClientResponse(status_code=HTTP_NOT_MODIFIED, headers=response.headers)

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise requests.HTTPError(f"Failed to download feed from {url}: {e}") from e

        return ClientResponse(
            status_code=response.status_code,
            body=response.content,
            headers=response.headers,
        )
