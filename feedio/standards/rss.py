"""RSS 2.0 standard."""

from __future__ import annotations

from lxml import etree

from feedio.config import RSS_VERSION
from feedio.dates import RFC822
from feedio.standards.base import XmlStandard
from feedio.standards.rules import DateRule, RuleSet, TextRule


class Rss(XmlStandard):
    """RSS 2.0: ``<rss><channel>...<item>...</item></channel></rss>``.

    The channel's ``lastBuildDate`` and each item's ``pubDate`` fill
    ``last_modified``. A channel ``pubDate`` stays an extension element.
    """

    name = "rss"
    namespace = None
    root_tag = "rss"
    item_tag = "item"
    channel_tag = "channel"

    def create_feed_rules(self) -> RuleSet:
        return (
            RuleSet()
            .register(TextRule("title", "title"))
            .register(TextRule("link", "link"))
            .register(TextRule("description", "description"))
            .register(DateRule("lastBuildDate", "last_modified", self.date_builder, RFC822))
        )

    def create_item_rules(self) -> RuleSet:
        return (
            RuleSet()
            .register(TextRule("title", "title"))
            .register(TextRule("link", "link"))
            .register(TextRule("description", "description"))
            .register(TextRule("guid", "public_id"))
            .register(DateRule("pubDate", "last_modified", self.date_builder, RFC822))
        )

    def get_main_element(self, root: etree._Element) -> etree._Element:
        channel = root.find(self.channel_tag)
        if channel is None:
            raise ValueError("Invalid RSS document: missing <channel> element")
        return channel

    def create_document(self) -> tuple[etree._Element, etree._Element]:
        root, _ = super().create_document()
        root.set("version", RSS_VERSION)
        channel = etree.SubElement(root, self.channel_tag)
        return root, channel
