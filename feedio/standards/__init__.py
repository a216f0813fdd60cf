"""Dialect standards (RSS, Atom) and the registry holding them."""

from feedio.standards.atom import Atom
from feedio.standards.base import XmlStandard
from feedio.standards.protocols import Rule, Standard
from feedio.standards.registry import NotFoundError, StandardObserver, StandardRegistry
from feedio.standards.rss import Rss
from feedio.standards.rules import DateRule, LinkRule, RuleSet, TextRule

__all__ = [
    "Atom",
    "DateRule",
    "LinkRule",
    "NotFoundError",
    "Rss",
    "Rule",
    "RuleSet",
    "Standard",
    "StandardObserver",
    "StandardRegistry",
    "TextRule",
    "XmlStandard",
]
