"""Atom 1.0 standard."""

from __future__ import annotations

from feedio.config import ATOM_NAMESPACE
from feedio.dates import RFC3339
from feedio.standards.base import XmlStandard
from feedio.standards.rules import DateRule, LinkRule, RuleSet, TextRule


class Atom(XmlStandard):
    """Atom 1.0: ``<feed xmlns="http://www.w3.org/2005/Atom">...<entry/>...</feed>``."""

    name = "atom"
    namespace = ATOM_NAMESPACE
    root_tag = "feed"
    item_tag = "entry"

    def create_feed_rules(self) -> RuleSet:
        return (
            RuleSet()
            .register(TextRule("title", "title", ATOM_NAMESPACE))
            .register(TextRule("id", "public_id", ATOM_NAMESPACE))
            .register(DateRule("updated", "last_modified", self.date_builder, RFC3339, ATOM_NAMESPACE))
            .register(LinkRule(namespace=ATOM_NAMESPACE))
            .register(TextRule("subtitle", "description", ATOM_NAMESPACE))
        )

    def create_item_rules(self) -> RuleSet:
        return (
            RuleSet()
            .register(TextRule("title", "title", ATOM_NAMESPACE))
            .register(TextRule("id", "public_id", ATOM_NAMESPACE))
            .register(DateRule("updated", "last_modified", self.date_builder, RFC3339, ATOM_NAMESPACE))
            .register(LinkRule(namespace=ATOM_NAMESPACE))
            .register(TextRule("summary", "description", ATOM_NAMESPACE))
        )
