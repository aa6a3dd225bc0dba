#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2pub/transforms/tables.py
"""Numbered table captions.

The text of a table's first cell is taken as the table's title: it is moved
into a ``表<numeral>：<title>`` caption and blanked in the cell. The caption is
placed after the table's rows; the site stylesheet positions it from there.
"""

from __future__ import annotations

import logging
from typing import Sequence

from md2pub.ast.nodes import HTML, Node, get_node_children, get_node_value
from md2pub.constants import GENERATED_TAG_KEY, TABLE_CAPTION_TAG, TABLE_CAPTION_TEMPLATE, TABLE_LABEL
from md2pub.transforms.ordinals import to_chinese_numeral
from md2pub.transforms.state import TraversalState

logger = logging.getLogger(__name__)


def render_table_caption(ordinal: int, title: str) -> HTML:
    """Render the caption of a table.

    Raises
    ------
    OrdinalRangeError
        If ``ordinal`` cannot be written as a numeral

    """
    label = TABLE_LABEL + to_chinese_numeral(ordinal)
    return HTML(
        value=TABLE_CAPTION_TEMPLATE.format(label=label, title=title),
        metadata={GENERATED_TAG_KEY: TABLE_CAPTION_TAG},
    )


def is_table_caption(node: Node) -> bool:
    """Check whether ``node`` is a caption emitted by :func:`number_tables`."""
    return node.node_type == "html" and node.metadata.get(GENERATED_TAG_KEY) == TABLE_CAPTION_TAG


def take_table_title(row: Node) -> str:
    """Read and blank the title held by the first cell of a header row.

    Parameters
    ----------
    row : Node
        The table's first row

    Returns
    -------
    str
        Value of the first inline node of the first cell, or ``""`` when the
        row, the cell or its first child is missing or holds no text

    """
    cells = get_node_children(row)
    if not cells:
        return ""
    inline = get_node_children(cells[0])
    if not inline:
        return ""

    title = get_node_value(inline[0]) or ""
    if get_node_value(inline[0]) is not None:
        inline[0].value = ""  # type: ignore[attr-defined]
    return title


class _TableCaptioner:
    """State machine placing one caption after each run of table rows."""

    def __init__(self, state: TraversalState):
        self.state = state
        self.output: list[Node] = []
        self.in_table = False
        self.first_row = True
        self.title = ""

    def feed(self, node: Node) -> None:
        if node.node_type == "tableRow":
            self.in_table = True
            if self.first_row:
                self.title = take_table_title(node)
                self.first_row = False
            self.output.append(node)
            return

        if self.in_table:
            self.close_table(already_captioned=is_table_caption(node))
        self.output.append(node)

    def close_table(self, already_captioned: bool = False) -> None:
        ordinal = self.state.next_table()
        if already_captioned:
            logger.debug("Table %d already captioned", ordinal)
        else:
            logger.debug("Numbering table %d (%r)", ordinal, self.title)
            self.output.append(render_table_caption(ordinal, self.title))
        self.in_table = False
        self.first_row = True
        self.title = ""

    def finish(self) -> list[Node]:
        if self.in_table:
            self.close_table()
        return self.output


def number_tables(children: Sequence[Node], state: TraversalState) -> list[Node]:
    """Append a numbered caption after each table in a sibling list.

    States are *outside* and *in-table*. A table row enters (or stays in) the
    table; the first row's first cell supplies the title. Any other node while
    in a table closes it: the table counter advances and the caption is
    emitted just before that node. A list ending inside a table closes it
    after the last row. A caption already emitted by an earlier run closes
    the table without adding a second one.

    Parameters
    ----------
    children : sequence of Node
        The sibling list to scan (the rows of a table node)
    state : TraversalState
        State of the current run

    Returns
    -------
    list of Node
        New sibling list

    """
    captioner = _TableCaptioner(state)
    for child in children:
        captioner.feed(child)
    return captioner.finish()
