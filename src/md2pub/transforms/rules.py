#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2pub/transforms/rules.py
"""Pattern rewrite rules applied to sibling lists.

A :class:`RegexRule` pairs a compiled pattern with a ``re.sub`` replacement
template. Applying a rule to a sibling list rewrites the whole value of every
text, raw-markup or quote node the pattern matches, and re-tags the node as
raw markup so later stages emit it verbatim.

The rule tables below are consumed by the pipeline in a fixed order. That
order is part of the output contract: several rules consume text produced by
earlier ones (the footnote marker built by the splicer, the links built by the
anchor rules), so the tables must not be reordered.

Examples
--------
>>> from md2pub.ast import Text
>>> rule = RegexRule("em", r"「([^」]*?)」", r"「<em>\\1</em>」")
>>> rule.apply([Text(value="见「注」")])
[HTML(value='见「<em>注</em>」', ...)]

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Pattern, Sequence

from md2pub.ast.nodes import HTML, Node, get_node_value
from md2pub.constants import (
    FIGURE_REFERENCE_PATTERN,
    FIGURE_REFERENCE_TEMPLATE,
    REWRITE_CANDIDATE_TYPES,
    TABLE_REFERENCE_PATTERN,
    TABLE_REFERENCE_TEMPLATE,
)


@dataclass(frozen=True)
class RegexRule:
    """A named pattern and replacement template.

    Parameters
    ----------
    name : str
        Stage name used in logs and error messages
    pattern : str or Pattern
        Regular expression; compiled on construction
    template : str
        ``re.sub`` replacement template (``\\1`` style group references)

    """

    name: str
    pattern: Pattern[str] | str
    template: str

    def __post_init__(self) -> None:
        """Compile string patterns."""
        if isinstance(self.pattern, str):
            object.__setattr__(self, "pattern", re.compile(self.pattern))

    @property
    def regex(self) -> Pattern[str]:
        """The compiled pattern."""
        return self.pattern  # type: ignore[return-value]

    def rewrite(self, value: str) -> str:
        """Substitute every match in ``value``."""
        return self.regex.sub(self.template, value)

    def apply(self, children: Sequence[Node]) -> list[Node]:
        """Apply this rule to a sibling list. See :func:`apply_rule`."""
        return apply_rule(children, self)


def apply_rule(children: Sequence[Node], rule: RegexRule) -> list[Node]:
    """Rewrite a sibling list with one rule.

    Only text, raw-markup and quote nodes carrying a string value are
    examined; everything else is passed through untouched. A node whose value
    the rule leaves unchanged keeps its kind. A node whose value changes is
    replaced by a raw-markup node holding the fully substituted value and
    the original node's metadata.

    Parameters
    ----------
    children : sequence of Node
        The sibling list to rewrite
    rule : RegexRule
        Rule to apply

    Returns
    -------
    list of Node
        New sibling list, the same length as ``children``

    """
    result: list[Node] = []

    for child in children:
        value = get_node_value(child)
        if child.node_type not in REWRITE_CANDIDATE_TYPES or value is None:
            result.append(child)
            continue

        rewritten = rule.rewrite(value)
        if rewritten == value:
            result.append(child)
        else:
            result.append(HTML(value=rewritten, metadata=dict(child.metadata), source_location=child.source_location))

    return result


def apply_rules(children: Sequence[Node], rules: Sequence[RegexRule]) -> list[Node]:
    """Apply several rules in order, each consuming the previous output."""
    result = list(children)
    for rule in rules:
        result = apply_rule(result, rule)
    return result


def _escape_template(text: str) -> str:
    return text.replace("\\", r"\\")


def build_anchor_link_rules(post_url_prefix: str) -> tuple[RegexRule, ...]:
    """Build the ``[[target]]`` / ``[[target|description]]`` link rules.

    In-page targets start with ``#``; anything else is a cross-document link
    under ``post_url_prefix``. The cross-document patterns refuse a leading
    ``#`` so they never re-match the in-page form.

    """
    prefix = _escape_template(post_url_prefix)
    return (
        RegexRule("anchor-link-described", r"\[\[(#.*?)\|(.*?)\]\]", r'<a href="\1">\2</a>'),
        RegexRule("anchor-link", r"\[\[(#.*?)\]\]", r'<a href="\1">\1</a>'),
        RegexRule("post-link-described", r"\[\[(?!#)(.*?)\|(.*?)\]\]", f'<a href="{prefix}\\1">\\2</a>'),
        RegexRule("post-link", r"\[\[(?!#)(.*?)\]\]", f'<a href="{prefix}\\1">\\1</a>'),
    )


FIGURE_REFERENCE_RULE = RegexRule("figure-reference", FIGURE_REFERENCE_PATTERN, FIGURE_REFERENCE_TEMPLATE)

TABLE_REFERENCE_RULE = RegexRule("table-reference", TABLE_REFERENCE_PATTERN, TABLE_REFERENCE_TEMPLATE)

EMPHASIS_BRACKET_RULE = RegexRule("corner-bracket-emphasis", r"「([^」]*?)」", r"「<em>\1</em>」")

CJK_LATIN_SPACING_RULES = (
    RegexRule("cjk-latin-spacing", r"([一-龥])([a-zA-Z0-9])", r"\1 \2"),
    RegexRule("latin-cjk-spacing", r"([a-zA-Z0-9])([一-龥])", r"\1 \2"),
)

# The first group is the literal text "一-龥", not a character class; the
# published output depends on this, so the three passes are kept as-is.
_PUNCTUATION_SPACING_RULE = RegexRule("punctuation-spacing", r"(一-龥)\s+([一-龥])", r"\1\2")
PUNCTUATION_SPACING_RULES = (_PUNCTUATION_SPACING_RULE,) * 3

HIDDEN_QUOTE_RULE = RegexRule("hidden-white-corner-brackets", r"(『\s*|\s*』)", r'<span style="display: none;">\1</span>')

ATTRIBUTION_RULE = RegexRule(
    "attribution-right-align",
    r"—(——.*)",
    r'<p style="text-align: right; text-indent: 0; padding: 0 2px 0 0;">\1</p>',
)

ALIGNMENT_RULES = (
    RegexRule("align-right", r"^\.Right\{(.*)\}", r' <p style="text-align: right;  text-indent: 0;">\1</p>'),
    RegexRule("align-center", r"^\.Center\{(.*)\}", r'<p style="text-align: center; text-indent: 0;">\1</p>'),
    RegexRule("align-left", r"^\.Left\{(.*)\}", r'  <p style="text-align: left;   text-indent: 0;">\1</p>'),
    RegexRule(
        "align-right-italic",
        r"^\.right\{(.*)\}",
        r' <p style="font-style: italic; text-align: right;  text-indent: 0;">\1</p>',
    ),
    RegexRule(
        "align-center-italic",
        r"^\.center\{(.*)\}",
        r'<p style="font-style: italic; text-align: center; text-indent: 0;">\1</p>',
    ),
    RegexRule(
        "align-left-italic",
        r"^\.left\{(.*)\}",
        r'  <p style="font-style: italic; text-align: left;   text-indent: 0;">\1</p>',
    ),
)

# Everything that runs after table numbering, in order
TYPOGRAPHY_RULES: tuple[RegexRule, ...] = (
    EMPHASIS_BRACKET_RULE,
    *CJK_LATIN_SPACING_RULES,
    *PUNCTUATION_SPACING_RULES,
    HIDDEN_QUOTE_RULE,
    ATTRIBUTION_RULE,
    *ALIGNMENT_RULES,
)
