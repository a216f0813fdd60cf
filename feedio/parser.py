"""Parser turning a dialect document into a Feed."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lxml import etree

from feedio.config import EXTENSION_NAMESPACES
from feedio.models import Element, Feed, Node
from feedio.standards.rules import get_tag_name, text_of

if TYPE_CHECKING:
    from feedio.standards.protocols import Standard
    from feedio.standards.rules import RuleSet

_PREFIXES = {uri: prefix for prefix, uri in EXTENSION_NAMESPACES.items()}


class Parser:
    """Parser bound to one standard.

    Elements in the standard's namespace that have a rule fill the
    mandatory fields. Everything else is kept as an extension element so
    dialect-specific data survives the round trip.
    """

    def __init__(self, standard: Standard, logger: logging.Logger) -> None:
        """Initialize the parser.

        Args:
            standard: The dialect this parser understands
            logger: Logger for parse events
        """
        self.standard = standard
        self._logger = logger

    def can_handle(self, root: etree._Element) -> bool:
        return self.standard.can_handle(root)

    def parse(self, root: etree._Element, feed: Feed) -> Feed:
        """Populate ``feed`` from a parsed document.

        Args:
            root: Root element of the document
            feed: Feed to populate in place

        Returns:
            The same feed instance

        Raises:
            ValueError: If the document lacks the standard's main element
        """
        main = self.standard.get_main_element(root)
        item_tag = self.standard.qualify(self.standard.item_tag)

        for child in main:
            if not isinstance(child.tag, str):
                continue
            if child.tag == item_tag:
                item = feed.new_item()
                self.parse_node(child, item, self.standard.item_rules)
                feed.add(item)
            else:
                self.handle_element(child, feed, self.standard.feed_rules)

        self._logger.debug(
            "parsed %d items into a %s instance using %s",
            len(feed.items),
            type(feed).__name__,
            self.standard.name,
        )
        return feed

    def parse_node(self, elem: etree._Element, node: Node, rules: RuleSet) -> Node:
        """Populate a node from the children of ``elem``."""
        for child in elem:
            if isinstance(child.tag, str):
                self.handle_element(child, node, rules)
        return node

    def handle_element(self, elem: etree._Element, node: Node, rules: RuleSet) -> None:
        """Apply the matching rule, or keep the element as an extension."""
        if etree.QName(elem).namespace == self.standard.namespace:
            rule = rules.get_rule(get_tag_name(elem))
            if rule is not None:
                rule.set_property(node, elem)
                return

        node.add_element(self.to_element(elem))

    def to_element(self, elem: etree._Element) -> Element:
        """Convert an XML element to an extension element.

        Foreign namespaces are kept as a prefix (e.g. ``dc:creator``).
        """
        qname = etree.QName(elem)
        name = qname.localname
        if qname.namespace and qname.namespace != self.standard.namespace:
            prefix = _PREFIXES.get(qname.namespace) or elem.prefix
            if prefix:
                name = f"{prefix}:{name}"

        attributes = {etree.QName(key).localname: value for key, value in elem.attrib.items()}
        return Element(name=name, value=text_of(elem), attributes=attributes)
