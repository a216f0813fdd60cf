"""Data models for feeds, items and their extension elements."""

from __future__ import annotations

import copy
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, ClassVar


@dataclass(frozen=True)
class Element:
    """A single named field outside the mandatory schema.

    Several elements of one node may share a name (e.g. repeated
    ``category`` tags); their order is the order they were added in.
    """

    name: str
    value: Any = None
    attributes: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Element name must not be empty")
        # Read-only view over a private copy of the caller's mapping
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def __deepcopy__(self, memo: dict) -> Element:
        return Element(self.name, copy.deepcopy(self.value, memo), dict(self.attributes))

    def get_attribute(self, name: str, default: str | None = None) -> str | None:
        """Return an attribute value or ``default`` when it is not set."""
        return self.attributes.get(name, default)


@dataclass
class Node:
    """Shared shape of feeds and items.

    Each mandatory field is a plain attribute. Any other name is handled
    through the ordered sequence of extension elements.
    """

    MANDATORY_FIELDS: ClassVar[tuple[str, ...]] = (
        "title",
        "public_id",
        "last_modified",
        "link",
        "description",
    )

    title: str | None = None
    public_id: str | None = None
    last_modified: datetime | None = None
    link: str | None = None
    description: str | None = None
    _elements: list[Element] = field(default_factory=list, init=False, repr=False)

    def new_element(
        self,
        name: str,
        value: Any = None,
        attributes: dict[str, str] | None = None,
    ) -> Element:
        """Create an element that is not yet attached to this node."""
        return Element(name=name, value=value, attributes=attributes or {})

    def set(self, name: str, value: Any) -> Node:
        """Set a field by name.

        Mandatory fields are overwritten. Any other name appends a new
        extension element, even when one with that name already exists.

        Args:
            name: Field or extension element name
            value: Value to store

        Returns:
            The node itself, for chaining
        """
        if name in self.MANDATORY_FIELDS:
            setattr(self, name, value)
        else:
            self._elements.append(self.new_element(name, value))
        return self

    def get_value(self, name: str, default: Any = None) -> Any:
        """Get a mandatory field, or the value of the first extension named ``name``.

        Returns ``default`` when no such extension exists.
        """
        if name in self.MANDATORY_FIELDS:
            return getattr(self, name)
        for element in self._elements:
            if element.name == name:
                return element.value
        return default

    def add_element(self, element: Element) -> Node:
        """Append an extension element, regardless of existing names."""
        self._elements.append(element)
        return self

    def has_element(self, name: str) -> bool:
        return any(element.name == name for element in self._elements)

    def get_element_iterator(self, name: str) -> Iterator[Element]:
        """Iterate over the extension elements named ``name``, in insertion order.

        Every call returns a new iterator; it is empty when nothing matches.
        """
        return (element for element in self._elements if element.name == name)

    def get_all_elements(self) -> Iterator[Element]:
        """Iterate over all extension elements, in insertion order."""
        return iter(tuple(self._elements))

    def list_elements(self) -> set[str]:
        """Return the distinct extension element names."""
        return {element.name for element in self._elements}


@dataclass
class Item(Node):
    """One entry of a feed."""


@dataclass
class Feed(Node):
    """A feed: its own metadata plus an ordered list of items."""

    MANDATORY_FIELDS: ClassVar[tuple[str, ...]] = (*Node.MANDATORY_FIELDS, "url")

    url: str | None = None
    items: list[Item] = field(default_factory=list)

    def new_item(self) -> Item:
        """Create an item that is not yet part of this feed."""
        return Item()

    def add(self, item: Item) -> Feed:
        """Append an item. Duplicates are kept."""
        self.items.append(item)
        return self

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)
