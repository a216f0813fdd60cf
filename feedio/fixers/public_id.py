"""Fixer giving every item a public id."""

from __future__ import annotations

from typing import TYPE_CHECKING

from feedio.fixers.protocols import FixerBase

if TYPE_CHECKING:
    from feedio.models import Feed


class PublicIdFixer(FixerBase):
    """Uses an item's link as its public id when the dialect provided none."""

    def correct(self, feed: Feed) -> None:
        fixed = 0
        for item in feed:
            if item.public_id is None and item.link is not None:
                item.public_id = item.link
                fixed += 1

        if fixed:
            self.logger.debug("public id set from link on %d items of %s", fixed, feed.url)
