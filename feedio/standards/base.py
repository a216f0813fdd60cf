"""Common behaviour for XML dialect standards."""

from __future__ import annotations

from lxml import etree

from feedio.config import EXTENSION_NAMESPACES
from feedio.dates import DateTimeBuilder
from feedio.standards.rules import RuleSet, get_tag_name, qualify


class XmlStandard:
    """Base class for standards whose documents have a single known root tag.

    Subclasses set the class attributes and build their rule sets in
    ``create_feed_rules`` / ``create_item_rules``.
    """

    name: str = ""
    namespace: str | None = None
    root_tag: str = ""
    item_tag: str = ""

    def __init__(self, date_builder: DateTimeBuilder | None = None) -> None:
        self.date_builder = date_builder or DateTimeBuilder()
        self._feed_rules = self.create_feed_rules()
        self._item_rules = self.create_item_rules()

    @property
    def feed_rules(self) -> RuleSet:
        return self._feed_rules

    @property
    def item_rules(self) -> RuleSet:
        return self._item_rules

    def create_feed_rules(self) -> RuleSet:
        raise NotImplementedError

    def create_item_rules(self) -> RuleSet:
        raise NotImplementedError

    def can_handle(self, root: etree._Element) -> bool:
        if not isinstance(root.tag, str):
            return False
        return (
            get_tag_name(root) == self.root_tag
            and etree.QName(root).namespace == self.namespace
        )

    def get_main_element(self, root: etree._Element) -> etree._Element:
        return root

    def create_document(self) -> tuple[etree._Element, etree._Element]:
        nsmap = {
            prefix: uri
            for prefix, uri in EXTENSION_NAMESPACES.items()
            if uri != self.namespace
        }
        if self.namespace:
            nsmap[None] = self.namespace
        root = etree.Element(self.qualify(self.root_tag), nsmap=nsmap)
        return root, root

    def qualify(self, tag: str) -> str:
        return qualify(tag, self.namespace)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
