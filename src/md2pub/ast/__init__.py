#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2pub/ast/__init__.py
"""Document tree for md2pub.

The node classes follow mdast, the tree shape produced by remark/unified
markdown parsers, so trees can come from the bundled mistune front end or
from mdast JSON.

Examples
--------
Build a document by hand:

    >>> from md2pub.ast import Document, Paragraph, Text
    >>> doc = Document(children=[Paragraph(children=[Text(value="Hello")])])

Walk it:

    >>> from md2pub.ast import iter_nodes
    >>> [node.node_type for node in iter_nodes(doc)]
    ['root', 'paragraph', 'text']

"""

from md2pub.ast.nodes import (
    HTML,
    Alignment,
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
    SourceLocation,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
    UnknownNode,
    get_node_children,
    get_node_value,
    is_text_like,
)
from md2pub.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from md2pub.ast.visitors import NodeVisitor, find_nodes, iter_nodes

__all__ = [
    # Nodes
    "Alignment",
    "BlockQuote",
    "Break",
    "Code",
    "Delete",
    "Document",
    "Emphasis",
    "HTML",
    "Heading",
    "Image",
    "InlineCode",
    "InlineMath",
    "Link",
    "List",
    "ListItem",
    "Math",
    "Node",
    "Paragraph",
    "SourceLocation",
    "Strong",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "ThematicBreak",
    "UnknownNode",
    # Helpers
    "get_node_children",
    "get_node_value",
    "is_text_like",
    # Traversal
    "NodeVisitor",
    "find_nodes",
    "iter_nodes",
    # Serialization
    "ast_to_dict",
    "ast_to_json",
    "dict_to_ast",
    "json_to_ast",
]
