"""Fixer deriving the feed's last modification date from its items."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from feedio.dates import DateTimeBuilder
from feedio.fixers.protocols import FixerBase

if TYPE_CHECKING:
    from feedio.models import Feed


class LastModifiedFixer(FixerBase):
    """Sets ``feed.last_modified`` to the newest item date when the feed has none.

    Naive item dates are read in the date builder's default timezone so
    they compare with the aware dates produced by the parsers.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        date_builder: DateTimeBuilder | None = None,
    ) -> None:
        super().__init__(logger)
        self.date_builder = date_builder or DateTimeBuilder()

    def correct(self, feed: Feed) -> None:
        if feed.last_modified is not None:
            return

        dates = [
            self.date_builder.normalize(item.last_modified)
            for item in feed
            if item.last_modified is not None
        ]
        if not dates:
            return

        feed.last_modified = max(dates)
        self.logger.debug(
            "last modified date of a %s instance set to %s",
            type(feed).__name__,
            feed.last_modified.isoformat(),
        )
