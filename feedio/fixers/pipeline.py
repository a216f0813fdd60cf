"""Pipeline applying fixers to freshly parsed feeds."""

from __future__ import annotations

import copy
import logging
import threading
from dataclasses import fields
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from feedio.fixers.protocols import Fixer
    from feedio.models import Feed, Node


class FixerPipeline:
    """Ordered list of fixers.

    Fixers run in registration order on the same feed, each one seeing
    what the previous ones changed. A fixer that raises is skipped: the
    feed is restored in place to its state before that fixer and the
    failure is logged, unless ``fail_fast`` is set. A fixer is also skipped
    when the feed cannot be deep-copied, since it could not be rolled back.
    """

    def __init__(self, logger: logging.Logger, fail_fast: bool = False) -> None:
        """Initialize an empty pipeline.

        Args:
            logger: Logger for fixer failures
            fail_fast: Propagate the first fixer failure instead of skipping it
        """
        self._fixers: list[Fixer] = []
        self._logger = logger
        self._lock = threading.RLock()
        self.fail_fast = fail_fast

    @property
    def fixers(self) -> tuple[Fixer, ...]:
        with self._lock:
            return tuple(self._fixers)

    def add(self, fixer: Fixer) -> FixerPipeline:
        with self._lock:
            self._fixers.append(fixer)
        return self

    def correct(self, feed: Feed) -> Feed:
        """Apply every fixer to the feed, in place.

        Args:
            feed: The feed to correct

        Returns:
            The same feed instance
        """
        for fixer in self.fixers:
            if self.fail_fast:
                fixer.correct(feed)
                continue

            try:
                snapshot = _Snapshot(feed)
            except Exception:
                self._logger.exception(
                    "cannot snapshot a %s instance, skipping fixer %s",
                    type(feed).__name__,
                    type(fixer).__name__,
                )
                continue

            try:
                fixer.correct(feed)
            except Exception:
                self._logger.exception(
                    "fixer %s failed on a %s instance, skipping it",
                    type(fixer).__name__,
                    type(feed).__name__,
                )
                snapshot.restore()

        return feed


class _Snapshot:
    """Deep copy of a feed able to roll the original back in place.

    The feed, its items list and every item keep their identity: only
    their field values are restored, so references held by the caller
    stay attached to the feed.
    """

    def __init__(self, feed: Feed) -> None:
        self.feed = feed
        self.items = feed.items
        self.originals = list(feed.items)
        self.copy = copy.deepcopy(feed)

    def restore(self) -> None:
        for original, saved in zip(self.originals, self.copy.items):
            _restore_fields(original, saved)
        _restore_fields(self.feed, self.copy, skip=("items",))
        self.items[:] = self.originals
        self.feed.items = self.items


def _restore_fields(node: Node, saved: Node, skip: tuple[str, ...] = ()) -> None:
    """Copy every dataclass field of ``saved`` back onto ``node``."""
    for node_field in fields(node):
        if node_field.name not in skip:
            setattr(node, node_field.name, getattr(saved, node_field.name))
