"""
FeedIo facade

Top-level entry point for reading feeds in any registered dialect and
formatting them back into one.
"""

from __future__ import annotations

import logging
from datetime import datetime

from lxml import etree

from feedio.client import Client
from feedio.dates import DateTimeBuilder
from feedio.fixers import FixerPipeline, LastModifiedFixer, PublicIdFixer
from feedio.fixers.protocols import Fixer
from feedio.formatter import Formatter
from feedio.models import Feed
from feedio.reader import Reader, Result
from feedio.standards import Atom, Rss, StandardRegistry
from feedio.standards.protocols import Standard


class FeedIo:
    """Reads, normalizes and formats feeds"""

    def __init__(
        self,
        client: Client,
        logger: logging.Logger,
        *,
        load_defaults: bool = True,
        date_builder: DateTimeBuilder | None = None,
    ):
        """
        Initialize the facade

        Args:
            client: Transport used to fetch documents
            logger: Logger handed to every component
            load_defaults: Register the rss/atom standards and the base fixers
            date_builder: Date parser shared by the default standards
        """
        self.logger = logger
        self.date_builder = date_builder or DateTimeBuilder()
        self.registry = StandardRegistry(logger)
        self.fixer_pipeline = FixerPipeline(logger)
        self.reader = Reader(client, logger)
        self.registry.subscribe(self.reader)

        if load_defaults:
            for name, standard in self.get_common_standards().items():
                self.add_standard(name, standard)
            for fixer in self.get_base_fixers():
                self.add_fixer(fixer)

    def get_common_standards(self) -> dict[str, Standard]:
        return {
            "atom": Atom(self.date_builder),
            "rss": Rss(self.date_builder),
        }

    def get_base_fixers(self) -> list[Fixer]:
        return [LastModifiedFixer(date_builder=self.date_builder), PublicIdFixer()]

    def add_standard(self, name: str, standard: Standard) -> FeedIo:
        """
        Register a standard, making it available to read() and format()

        Args:
            name: Standard name, matched case-insensitively
            standard: The dialect standard
        """
        self.registry.add(name, standard)
        return self

    def add_fixer(self, fixer: Fixer) -> FeedIo:
        """Inject the logger into a fixer and append it to the pipeline"""
        fixer.set_logger(self.logger)
        self.fixer_pipeline.add(fixer)
        return self

    def get_standard(self, name: str) -> Standard:
        """
        Get a registered standard

        Raises:
            NotFoundError: If no standard is registered under that name
        """
        return self.registry.get(name)

    def read(
        self,
        url: str,
        feed: Feed | None = None,
        modified_since: datetime | None = None,
        timeout: float | None = None,
    ) -> Result:
        """
        Read a feed and run the fixers on it

        Fixers run even when the server reports the feed as not modified.

        Args:
            url: Feed URL
            feed: Feed to populate (default: a new Feed)
            modified_since: Last known modification date for a conditional fetch
            timeout: Transport timeout in seconds, passed through unchanged

        Returns:
            Result holding the corrected feed
        """
        if feed is None:
            feed = Feed()

        self.logger.debug("read access : %s into a %s instance", url, type(feed).__name__)
        result = self.reader.read(url, feed, modified_since, timeout=timeout)

        self.fixer_pipeline.correct(result.feed)

        return result

    def read_since(
        self, url: str, modified_since: datetime, timeout: float | None = None
    ) -> Result:
        """Read a feed into a new Feed, only if modified since the given date"""
        return self.read(url, Feed(), modified_since, timeout=timeout)

    def format(self, feed: Feed, standard_name: str) -> etree._ElementTree:
        """
        Format a feed in the given standard

        Raises:
            NotFoundError: If no standard is registered under that name
        """
        self.logger.debug("formatting a %s in %s format", type(feed).__name__, standard_name)

        formatter = Formatter(self.get_standard(standard_name), self.logger)

        return formatter.to_document(feed)

    def to_rss(self, feed: Feed) -> etree._ElementTree:
        return self.format(feed, "rss")

    def to_atom(self, feed: Feed) -> etree._ElementTree:
        return self.format(feed, "atom")
