#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2pub/transforms/footnotes.py
"""Inline footnote collection.

Footnotes are written inline as ``[^body]``. Each marker is replaced by a
numbered forward reference, and its body is kept on the traversal state until
the end of the run, when :func:`render_footnote_section` lays all bodies out
after the document. ``[^图...]`` and ``[^表...]`` are figure and table
references, not footnotes, and are left for their own rules.
"""

from __future__ import annotations

import logging
import re
from typing import Sequence

from md2pub.ast.nodes import HTML, Node, Text, get_node_value
from md2pub.constants import (
    FOOTNOTE_ENTRY_TEMPLATE,
    FOOTNOTE_MARKER_PATTERN,
    FOOTNOTE_REFERENCE_TAG,
    FOOTNOTE_REFERENCE_TEMPLATE,
    FOOTNOTE_SECTION_TAG,
    FOOTNOTE_SEPARATOR_HTML,
    GENERATED_TAG_KEY,
)
from md2pub.transforms.state import FootnoteEntry, TraversalState

logger = logging.getLogger(__name__)

FOOTNOTE_MARKER_RE = re.compile(FOOTNOTE_MARKER_PATTERN)


def _footnote_reference(entry: FootnoteEntry) -> HTML:
    return HTML(
        value=FOOTNOTE_REFERENCE_TEMPLATE.format(number=entry.number),
        metadata={GENERATED_TAG_KEY: FOOTNOTE_REFERENCE_TAG},
    )


def collect_footnotes(children: Sequence[Node], state: TraversalState) -> list[Node]:
    """Replace ``[^body]`` markers with numbered forward references.

    Each text or raw-markup child holding at least one marker is split around
    its markers: the surrounding segments become text nodes (empty segments
    are dropped) and each marker becomes a reference link. Numbers come from
    ``state`` in the order markers are met, and the bodies are recorded on it.

    Parameters
    ----------
    children : sequence of Node
        The sibling list to scan
    state : TraversalState
        State of the current run

    Returns
    -------
    list of Node
        New sibling list

    """
    result: list[Node] = []

    for child in children:
        value = get_node_value(child)
        if child.node_type not in ("text", "html") or not value:
            result.append(child)
            continue

        matches = list(FOOTNOTE_MARKER_RE.finditer(value))
        if not matches:
            result.append(child)
            continue

        position = 0
        for match in matches:
            if match.start() > position:
                result.append(Text(value=value[position : match.start()]))
            entry = state.add_footnote(match.group(1))
            logger.debug("Collected footnote %d", entry.number)
            result.append(_footnote_reference(entry))
            position = match.end()
        if position < len(value):
            result.append(Text(value=value[position:]))

    return result


def render_footnote_section(entries: Sequence[FootnoteEntry]) -> list[Node]:
    """Build the nodes listing collected footnotes at the end of a document.

    Parameters
    ----------
    entries : sequence of FootnoteEntry
        Footnotes in numbering order

    Returns
    -------
    list of Node
        A divider followed by one entry per footnote, or an empty list when
        there are no footnotes. Footnote bodies are emitted verbatim.

    """
    if not entries:
        return []

    tag = {GENERATED_TAG_KEY: FOOTNOTE_SECTION_TAG}
    section: list[Node] = [HTML(value=FOOTNOTE_SEPARATOR_HTML, metadata=dict(tag))]
    for entry in entries:
        section.append(
            HTML(
                value=FOOTNOTE_ENTRY_TEMPLATE.format(number=entry.number, content=entry.content),
                metadata=dict(tag),
            )
        )
    return section
