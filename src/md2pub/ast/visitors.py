#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2pub/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class used to walk a document tree.
Every ``visit_*`` method defaults to :meth:`NodeVisitor.generic_visit`, which
descends into the node's children in document order. Subclasses override only
the node kinds they care about.

Children are read *after* a node's visit method has run, so a visitor that
replaces ``node.children`` has the replacement list traversed. The publishing
pipeline depends on this ordering.

"""

from __future__ import annotations

from typing import Any, Iterator

from md2pub.ast.nodes import (
    HTML,
    BlockQuote,
    Break,
    Code,
    Delete,
    Document,
    Emphasis,
    Heading,
    Image,
    InlineCode,
    InlineMath,
    Link,
    List,
    ListItem,
    Math,
    Node,
    Paragraph,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
    UnknownNode,
    get_node_children,
)


class NodeVisitor:
    """Base class for AST node visitors.

    Examples
    --------
    Count the paragraphs of a document:

        >>> class ParagraphCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_paragraph(self, node):
        ...         self.count += 1
        ...         self.generic_visit(node)
        ...
        >>> counter = ParagraphCounter()
        >>> document.accept(counter)
        >>> print(counter.count)

    """

    def visit(self, node: Node) -> Any:
        """Dispatch a node to its ``visit_*`` method."""
        return node.accept(self)

    def generic_visit(self, node: Node) -> Any:
        """Visit every child of ``node`` in order.

        The children list is looked up when this method runs, so replacements
        made by the caller beforehand are honoured.

        """
        for child in list(get_node_children(node)):
            child.accept(self)
        return None

    def visit_document(self, node: Document) -> Any:
        return self.generic_visit(node)

    def visit_paragraph(self, node: Paragraph) -> Any:
        return self.generic_visit(node)

    def visit_heading(self, node: Heading) -> Any:
        return self.generic_visit(node)

    def visit_block_quote(self, node: BlockQuote) -> Any:
        return self.generic_visit(node)

    def visit_list(self, node: List) -> Any:
        return self.generic_visit(node)

    def visit_list_item(self, node: ListItem) -> Any:
        return self.generic_visit(node)

    def visit_table(self, node: Table) -> Any:
        return self.generic_visit(node)

    def visit_table_row(self, node: TableRow) -> Any:
        return self.generic_visit(node)

    def visit_table_cell(self, node: TableCell) -> Any:
        return self.generic_visit(node)

    def visit_emphasis(self, node: Emphasis) -> Any:
        return self.generic_visit(node)

    def visit_strong(self, node: Strong) -> Any:
        return self.generic_visit(node)

    def visit_delete(self, node: Delete) -> Any:
        return self.generic_visit(node)

    def visit_link(self, node: Link) -> Any:
        return self.generic_visit(node)

    def visit_text(self, node: Text) -> Any:
        return self.generic_visit(node)

    def visit_html(self, node: HTML) -> Any:
        return self.generic_visit(node)

    def visit_inline_code(self, node: InlineCode) -> Any:
        return self.generic_visit(node)

    def visit_code(self, node: Code) -> Any:
        return self.generic_visit(node)

    def visit_inline_math(self, node: InlineMath) -> Any:
        return self.generic_visit(node)

    def visit_math(self, node: Math) -> Any:
        return self.generic_visit(node)

    def visit_image(self, node: Image) -> Any:
        return self.generic_visit(node)

    def visit_break(self, node: Break) -> Any:
        return self.generic_visit(node)

    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        return self.generic_visit(node)

    def visit_unknown(self, node: UnknownNode) -> Any:
        return self.generic_visit(node)


def iter_nodes(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all of its descendants in document (pre-)order.

    Parameters
    ----------
    node : Node
        Root of the subtree to walk

    Yields
    ------
    Node
        Each node in the subtree, parents before children

    """
    yield node
    for child in get_node_children(node):
        yield from iter_nodes(child)


def find_nodes(node: Node, node_type: str) -> list[Node]:
    """Collect every node of the given mdast type name under ``node``."""
    return [n for n in iter_nodes(node) if n.node_type == node_type]
