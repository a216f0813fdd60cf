"""Field rules mapping dialect tags onto node fields, and the rule set holding them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from lxml import etree

from feedio.dates import RFC3339, DateTimeBuilder
from feedio.models import Node
from feedio.standards.protocols import Rule


def get_tag_name(elem: etree._Element) -> str:
    """Get tag name without namespace prefix.

    Args:
        elem: XML element

    Returns:
        Tag name without namespace (e.g., "entry" not "{ns}entry")
    """
    tag = elem.tag
    if isinstance(tag, str) and "}" in tag:
        return tag.split("}")[-1]
    return tag if isinstance(tag, str) else ""


def text_of(elem: etree._Element) -> str | None:
    """Return the stripped text content of an element, None when empty."""
    text = "".join(elem.itertext()).strip()
    return text or None


def attributes_of(elem: etree._Element) -> dict[str, str]:
    """Return the element attributes keyed by local name."""
    return {etree.QName(key).localname: value for key, value in elem.attrib.items()}


def qualify(tag: str, namespace: str | None) -> str:
    """Return ``tag`` in Clark notation when a namespace is given."""
    if namespace:
        return etree.QName(namespace, tag).text
    return tag


@dataclass
class TextRule:
    """Maps an element's text onto a string field.

    An element without text (e.g. an Atom-style ``<link href="..."/>`` found
    in an RSS channel) never clears the field; it is kept as an extension
    element instead.
    """

    tag: str
    field: str
    namespace: str | None = None

    def set_property(self, node: Node, elem: etree._Element) -> None:
        text = text_of(elem)
        if text is None:
            node.add_element(node.new_element(self.tag, None, attributes_of(elem)))
            return
        node.set(self.field, text)

    def create_element(self, node: Node) -> etree._Element | None:
        value = node.get_value(self.field)
        if value is None:
            return None
        elem = etree.Element(qualify(self.tag, self.namespace))
        elem.text = str(value)
        return elem


@dataclass
class DateRule:
    """Maps an element's text onto a datetime field.

    Dates that cannot be parsed are kept as an extension element with the
    same tag so no information is lost.
    """

    tag: str
    field: str
    date_builder: DateTimeBuilder
    date_format: str = RFC3339
    namespace: str | None = None

    def set_property(self, node: Node, elem: etree._Element) -> None:
        text = text_of(elem)
        if text is None:
            return
        try:
            node.set(self.field, self.date_builder.convert_to_datetime(text))
        except ValueError:
            node.add_element(node.new_element(self.tag, text))

    def create_element(self, node: Node) -> etree._Element | None:
        value = node.get_value(self.field)
        if value is None:
            return None
        elem = etree.Element(qualify(self.tag, self.namespace))
        elem.text = self.date_builder.format(value, self.date_format)
        return elem


@dataclass
class LinkRule:
    """Maps Atom-style ``<link href="..."/>`` elements onto the link field.

    Only alternate links (or links without ``rel``) fill the field. Other
    relations (self, enclosure, ...) are kept as extension elements.
    """

    tag: str = "link"
    field: str = "link"
    namespace: str | None = None

    def set_property(self, node: Node, elem: etree._Element) -> None:
        rel = elem.get("rel", "alternate")
        if rel == "alternate" and node.get_value(self.field) is None:
            node.set(self.field, elem.get("href"))
            return
        node.add_element(node.new_element(self.tag, text_of(elem), attributes_of(elem)))

    def create_element(self, node: Node) -> etree._Element | None:
        value = node.get_value(self.field)
        if value is None:
            return None
        return etree.Element(
            qualify(self.tag, self.namespace), href=str(value), rel="alternate"
        )


class RuleSet:
    """Ordered registry mapping tag names to rules.

    Iteration follows registration order, which is the order fields are
    written in when formatting.
    """

    def __init__(self) -> None:
        """Initialize an empty rule set."""
        self._rules: dict[str, Rule] = {}

    def register(self, rule: Rule) -> RuleSet:
        """Register a rule under its tag name.

        Args:
            rule: The rule to register

        Returns:
            The rule set itself, for chaining
        """
        self._rules[rule.tag] = rule
        return self

    def get_rule(self, tag_name: str) -> Rule | None:
        """Return the rule for a tag name, None when there is none."""
        return self._rules.get(tag_name)

    def has_rule(self, tag_name: str) -> bool:
        return tag_name in self._rules

    def registered_tags(self) -> set[str]:
        """Return set of all registered tag names."""
        return set(self._rules.keys())

    def __iter__(self) -> Iterator[Rule]:
        return iter(list(self._rules.values()))
