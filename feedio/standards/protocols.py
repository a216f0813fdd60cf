"""Protocol definitions for dialect standards and their rules."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lxml import etree

    from feedio.models import Node
    from feedio.standards.rules import RuleSet


class Rule(Protocol):
    """Protocol for field rules.

    A rule maps one XML tag of a dialect onto one mandatory field of a
    node, in both directions.
    """

    @property
    def tag(self) -> str:
        """Return the tag name (without namespace) this rule handles."""
        ...

    def set_property(self, node: Node, elem: etree._Element) -> None:
        """Read the element and store its value on the node.

        Args:
            node: The feed or item being populated
            elem: The XML element matching ``tag``
        """
        ...

    def create_element(self, node: Node) -> etree._Element | None:
        """Build the XML element for the node's field.

        Args:
            node: The feed or item being serialized

        Returns:
            The element, or None when the field is not set
        """
        ...


class Standard(Protocol):
    """Protocol for dialect standards (RSS, Atom, ...).

    A standard knows how to recognize its documents, where feed metadata
    and items live, and which rules apply to feeds and items.
    """

    name: str
    namespace: str | None
    item_tag: str

    def can_handle(self, root: etree._Element) -> bool:
        """Check whether a parsed document belongs to this dialect."""
        ...

    def get_main_element(self, root: etree._Element) -> etree._Element:
        """Return the element holding feed metadata and items."""
        ...

    def create_document(self) -> tuple[etree._Element, etree._Element]:
        """Create an empty document.

        Returns:
            Tuple of (root element, main element)
        """
        ...

    def qualify(self, tag: str) -> str:
        """Return ``tag`` in the dialect namespace (Clark notation)."""
        ...

    @property
    def feed_rules(self) -> RuleSet:
        """Rules applied to feed-level elements."""
        ...

    @property
    def item_rules(self) -> RuleSet:
        """Rules applied to item-level elements."""
        ...
