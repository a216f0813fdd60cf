"""Reader fetching documents and dispatching them to the matching parser."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from lxml import etree

from feedio.client import conditional_headers
from feedio.dates import DateTimeBuilder
from feedio.models import Feed, Item
from feedio.parser import Parser

if TYPE_CHECKING:
    from feedio.client import Client
    from feedio.standards.protocols import Standard


class NoAccurateParserError(Exception):
    """Raised when no registered standard recognizes a document."""

    def __init__(self, url: str, root_tag: str = "") -> None:
        """Initialize the error.

        Args:
            url: The URL the document was read from
            root_tag: Tag of the document's root element
        """
        self.url = url
        self.root_tag = root_tag
        msg = f"No parser can handle the document at {url}"
        if root_tag:
            msg = f"{msg} (root element <{root_tag}>)"
        super().__init__(msg)


@dataclass
class Result:
    """Outcome of a read.

    ``modified`` is False when the server reported that the document did
    not change since ``modified_since``; the feed is then left as it was.
    """

    feed: Feed
    url: str
    modified: bool = True
    modified_since: datetime | None = None
    last_modified: datetime | None = None
    """Value of the transport's Last-Modified header, if any."""

    document: etree._Element | None = field(default=None, repr=False)

    def items_since(self, since: datetime | None = None) -> list[Item]:
        """Return the items newer than ``since`` (default: ``modified_since``).

        Items without a date are always included. Naive dates are read as UTC.
        """
        since = since or self.modified_since
        if since is None:
            return list(self.feed.items)
        normalize = DateTimeBuilder().normalize
        since = normalize(since)
        return [
            item
            for item in self.feed
            if item.last_modified is None or normalize(item.last_modified) > since
        ]


class Reader:
    """Fetches documents and parses them with the first parser able to.

    The reader subscribes to a StandardRegistry and keeps one parser per
    registered standard.
    """

    def __init__(self, client: Client, logger: logging.Logger) -> None:
        self.client = client
        self._logger = logger
        self._parsers: dict[str, Parser] = {}

    def standard_added(self, name: str, standard: Standard) -> None:
        self.add_parser(name, Parser(standard, self._logger))

    def standard_removed(self, name: str) -> None:
        self._parsers.pop(name, None)

    def add_parser(self, name: str, parser: Parser) -> Reader:
        """Register a parser under a standard name, replacing any previous one."""
        self._parsers[name] = parser
        return self

    @property
    def parsers(self) -> dict[str, Parser]:
        return dict(self._parsers)

    def get_accurate_parser(self, root: etree._Element, url: str = "") -> Parser:
        """Return the first parser recognizing the document.

        Raises:
            NoAccurateParserError: If no parser recognizes it
        """
        for parser in list(self._parsers.values()):
            if parser.can_handle(root):
                return parser
        tag = root.tag if isinstance(root.tag, str) else ""
        raise NoAccurateParserError(url, tag)

    def read(
        self,
        url: str,
        feed: Feed,
        modified_since: datetime | None = None,
        timeout: float | None = None,
    ) -> Result:
        """Fetch ``url`` and parse it into ``feed``.

        Args:
            url: Feed URL
            feed: Feed to populate in place
            modified_since: Last known modification date, sent as If-Modified-Since
            timeout: Passed unchanged to the client

        Returns:
            Result wrapping ``feed``

        Raises:
            requests.HTTPError: If the transport fails
            lxml.etree.XMLSyntaxError: If the document is not well-formed XML
            NoAccurateParserError: If no registered standard recognizes the document
        """
        self._logger.debug("start reading %s", url)
        response = self.client.fetch(url, conditional_headers(modified_since), timeout=timeout)

        if response.is_not_modified:
            self._logger.debug("%s not modified since %s", url, modified_since)
            return Result(
                feed=feed,
                url=url,
                modified=False,
                modified_since=modified_since,
                last_modified=response.last_modified,
            )

        xml_parser = etree.XMLParser(resolve_entities=False, no_network=True)
        root = etree.fromstring(response.body, parser=xml_parser)
        parser = self.get_accurate_parser(root, url)
        if feed.url is None:
            feed.url = url
        parser.parse(root, feed)

        self._logger.debug("%s parsed with the %s standard", url, parser.standard.name)
        return Result(
            feed=feed,
            url=url,
            modified=True,
            modified_since=modified_since,
            last_modified=response.last_modified,
            document=root,
        )
