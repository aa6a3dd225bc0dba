#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2pub/transforms/splicer.py
"""Normalization of the ``^[[description](url)]`` footnote convention.

Markdown parsers see ``^[[note](https://example.com)]`` as three siblings: a
text node ending in ``^[``, a link, and a text node starting with ``]``. This
module splices such triples into a single text node holding the standard
``[^note]`` marker so the footnote collector can pick it up.
"""

from __future__ import annotations

import logging
from typing import Sequence

from md2pub.ast.nodes import Node, Text, get_node_children, get_node_value
from md2pub.ast.utils import is_text_node, merge_adjacent_text
from md2pub.constants import CUSTOM_FOOTNOTE_CLOSE, CUSTOM_FOOTNOTE_OPEN

logger = logging.getLogger(__name__)


def _matches_custom_footnote(first: Node | None, second: Node | None, third: Node | None) -> bool:
    """Check a three-node window for the ``^[`` + link + ``]`` pattern."""
    if not (is_text_node(first) and is_text_node(third)):
        return False
    if second is None or second.node_type != "link" or not get_node_children(second):
        return False
    return first.value.endswith(CUSTOM_FOOTNOTE_OPEN) and third.value.startswith(  # type: ignore[union-attr]
        CUSTOM_FOOTNOTE_CLOSE
    )


def splice_custom_footnotes(children: Sequence[Node]) -> list[Node]:
    """Rewrite ``^[`` + link + ``]`` sibling triples into ``[^text]`` markers.

    The scan keeps an index into a work list. When the window starting at the
    index matches, one text node is emitted and any text left after the
    closing ``]`` is put back at the index as a new text node, so patterns
    written back to back are all found. Otherwise the node at the index is
    emitted as-is and the index moves on. Adjacent text nodes are merged at
    the end.

    Parameters
    ----------
    children : sequence of Node
        The sibling list to scan

    Returns
    -------
    list of Node
        New sibling list

    """
    pending = list(children)
    result: list[Node] = []
    index = 0

    while index < len(pending):
        first = pending[index]
        second = pending[index + 1] if index + 1 < len(pending) else None
        third = pending[index + 2] if index + 2 < len(pending) else None

        if not _matches_custom_footnote(first, second, third):
            result.append(first)
            index += 1
            continue

        link_text = get_node_value(get_node_children(second)[0]) or ""  # type: ignore[arg-type]
        prefix = first.value[: -len(CUSTOM_FOOTNOTE_OPEN)]  # type: ignore[attr-defined]
        result.append(Text(value=f"{prefix}[^{link_text}]"))
        logger.debug("Spliced custom footnote marker for %r", link_text)

        remainder = third.value[len(CUSTOM_FOOTNOTE_CLOSE) :]  # type: ignore[union-attr]
        index += 3
        if remainder:
            index -= 1
            pending[index] = Text(value=remainder)

    return merge_adjacent_text(result)
