#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2pub/ast/utils.py
"""Helpers for working with sibling lists."""

from __future__ import annotations

from typing import Sequence

from md2pub.ast.nodes import Node, get_node_children, get_node_value


def is_text_node(node: Node | None) -> bool:
    """Check whether ``node`` is a plain text node with a string value."""
    return node is not None and node.node_type == "text" and get_node_value(node) is not None


def merge_adjacent_text(children: Sequence[Node]) -> list[Node]:
    """Coalesce runs of adjacent text nodes into single text nodes.

    Text separated by any other node kind is left apart. The first node of
    each run absorbs the values of the following ones.

    Parameters
    ----------
    children : sequence of Node
        Sibling list to merge

    Returns
    -------
    list of Node
        New sibling list

    """
    merged: list[Node] = []
    for child in children:
        previous = merged[-1] if merged else None
        if is_text_node(previous) and is_text_node(child):
            previous.value += child.value  # type: ignore[union-attr]
        else:
            merged.append(child)
    return merged


def extract_text(node: Node) -> str:
    """Concatenate the string values of ``node`` and its descendants."""
    value = get_node_value(node)
    if value is not None:
        return value
    return "".join(extract_text(child) for child in get_node_children(node))
