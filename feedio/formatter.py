"""Formatter turning a Feed into a dialect document."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from lxml import etree

from feedio.config import EXTENSION_NAMESPACES
from feedio.models import Element, Feed, Node

if TYPE_CHECKING:
    from feedio.standards.protocols import Standard
    from feedio.standards.rules import RuleSet


class Formatter:
    """Formatter bound to one standard.

    Mandatory fields are written through the standard's rules, followed by
    the node's extension elements in their original order.
    """

    def __init__(self, standard: Standard, logger: logging.Logger) -> None:
        self.standard = standard
        self._logger = logger

    def to_document(self, feed: Feed) -> etree._ElementTree:
        """Build the document for a feed.

        Args:
            feed: The feed to serialize

        Returns:
            lxml element tree in the standard's dialect
        """
        root, main = self.standard.create_document()
        self.add_node(main, feed, self.standard.feed_rules)

        item_tag = self.standard.qualify(self.standard.item_tag)
        for item in feed:
            self.add_node(etree.SubElement(main, item_tag), item, self.standard.item_rules)

        self._logger.debug(
            "formatted %d items of a %s instance as %s",
            len(feed.items),
            type(feed).__name__,
            self.standard.name,
        )
        return etree.ElementTree(root)

    def to_string(self, feed: Feed, pretty_print: bool = True) -> str:
        """Serialize a feed, including the XML declaration."""
        document = self.to_document(feed)
        return etree.tostring(
            document,
            xml_declaration=True,
            encoding="UTF-8",
            pretty_print=pretty_print,
        ).decode("utf-8")

    def add_node(self, parent: etree._Element, node: Node, rules: RuleSet) -> etree._Element:
        """Append a node's fields and extension elements to ``parent``."""
        for rule in rules:
            elem = rule.create_element(node)
            if elem is not None:
                parent.append(elem)

        for element in node.get_all_elements():
            parent.append(self.build_element(element))

        return parent

    def build_element(self, element: Element) -> etree._Element:
        """Convert an extension element back to XML.

        Known prefixes are resolved through EXTENSION_NAMESPACES; unknown
        prefixes are dropped and the name is put in the standard's namespace.
        """
        prefix, _, localname = element.name.rpartition(":")
        namespace = EXTENSION_NAMESPACES.get(prefix) if prefix else None
        if namespace:
            tag = etree.QName(namespace, localname).text
        else:
            tag = self.standard.qualify(localname)

        elem = etree.Element(tag)
        for key, value in element.attributes.items():
            elem.set(key, value)

        value = element.value
        if isinstance(value, datetime):
            elem.text = value.isoformat()
        elif value is not None:
            elem.text = str(value)
        return elem
