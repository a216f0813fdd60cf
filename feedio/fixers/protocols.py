"""Protocol and base class for post-parse fixers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from feedio.logging_config import null_logger

if TYPE_CHECKING:
    from feedio.models import Feed


class Fixer(Protocol):
    """Protocol for fixers.

    A fixer corrects or derives fields of an already parsed feed, in
    place. Fixers are expected to be idempotent.
    """

    def set_logger(self, logger: logging.Logger) -> None:
        """Inject the logger used by this fixer."""
        ...

    def correct(self, feed: Feed) -> None:
        """Correct the feed in place."""
        ...


class FixerBase:
    """Convenience base class holding the injected logger.

    Until a logger is injected the fixer logs nowhere.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger: logging.Logger = logger or null_logger()

    def set_logger(self, logger: logging.Logger) -> None:
        self.logger = logger

    def correct(self, feed: Feed) -> None:
        raise NotImplementedError
