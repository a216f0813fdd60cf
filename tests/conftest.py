"""
Pytest configuration and fixtures for feedio tests
"""
from unittest.mock import Mock

import pytest

from feedio.client import ClientResponse
from feedio.logging_config import null_logger
from feedio.service import FeedIo


RSS_DOCUMENT = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"
     xmlns:dc="http://purl.org/dc/elements/1.1/"
     xmlns:atom="http://www.w3.org/2005/Atom">
  <channel>
    <title>Example news</title>
    <link>https://example.com/</link>
    <description>Latest news from example.com</description>
    <atom:link href="https://example.com/feed.xml" rel="self" type="application/rss+xml"/>
    <language>en</language>
    <item>
      <title>First post</title>
      <link>https://example.com/first</link>
      <description>The first post</description>
      <guid>urn:example:1</guid>
      <pubDate>Mon, 06 Jan 2025 10:00:00 +0000</pubDate>
      <category>news</category>
      <dc:creator>Alice</dc:creator>
      <category>tech</category>
    </item>
    <item>
      <title>Second post</title>
      <link>https://example.com/second</link>
      <pubDate>Wed, 08 Jan 2025 12:30:00 +0000</pubDate>
      <enclosure url="https://example.com/second.mp3" length="1024" type="audio/mpeg"/>
    </item>
  </channel>
</rss>
"""

ATOM_DOCUMENT = b"""<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Example blog</title>
  <subtitle>Notes</subtitle>
  <id>urn:uuid:60a76c80-d399-11d9-b93C-0003939e0af6</id>
  <updated>2025-02-01T09:00:00Z</updated>
  <link href="https://example.org/"/>
  <link rel="self" href="https://example.org/atom.xml"/>
  <author><name>Bob</name></author>
  <entry>
    <title>Atom entry</title>
    <id>urn:example:entry:1</id>
    <updated>2025-01-31T08:00:00+01:00</updated>
    <link href="https://example.org/entry-1"/>
    <summary>Entry summary</summary>
    <category term="python"/>
  </entry>
</feed>
"""


class StubClient:
    """Client returning a fixed response and recording its calls."""

    def __init__(self, body: bytes = RSS_DOCUMENT, status_code: int = 200, headers=None):
        self.response = ClientResponse(
            status_code=status_code, body=body, headers=headers or {}
        )
        self.calls = []

    def fetch(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        return self.response


@pytest.fixture
def logger():
    """Logger discarding all records"""
    return null_logger()


@pytest.fixture
def rss_document() -> bytes:
    return RSS_DOCUMENT


@pytest.fixture
def atom_document() -> bytes:
    return ATOM_DOCUMENT


@pytest.fixture
def stub_client() -> StubClient:
    return StubClient()


@pytest.fixture
def make_client():
    """Factory fixture building StubClient instances.

    Usage:
        def test_example(make_client):
            client = make_client(b"<rss/>", status_code=304)
    """
    return StubClient


@pytest.fixture
def feed_io(stub_client, logger) -> FeedIo:
    """FeedIo with the default standards and fixers, reading the RSS document"""
    return FeedIo(stub_client, logger)


@pytest.fixture
def mock_http_response():
    """Factory fixture to create mock requests responses.

    Usage:
        def test_example(mock_http_response):
            response = mock_http_response(b"<rss/>", status_code=200)
    """

    def _create_response(content: bytes, status_code: int = 200, headers=None) -> Mock:
        response = Mock()
        response.content = content
        response.status_code = status_code
        response.headers = headers or {}
        response.raise_for_status = Mock()
        return response

    return _create_response
