#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Conversion rules: the rule contract and the baseline CommonMark rule set."""

from html2md.rules.base import ConversionContext, LinkReferences, Plugin, Rule, RuleResult, RuleSet
from html2md.rules.commonmark import commonmark_rules
from html2md.rules.text import text_rule

__all__ = [
    "ConversionContext",
    "LinkReferences",
    "Plugin",
    "Rule",
    "RuleResult",
    "RuleSet",
    "commonmark_rules",
    "text_rule",
]
