#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2pub/ast/nodes.py
"""AST node classes for document representation.

This module defines the node hierarchy used by the publishing pipeline. The
shape follows mdast (the markdown syntax tree used by remark/unified): parent
nodes own an ordered ``children`` list, literal nodes carry a string ``value``.
Each class exposes its mdast type name as the ``type`` class attribute, which
is what the rewrite passes and the JSON codec dispatch on.

Node Hierarchy
--------------
Parent nodes:
    - Document, Paragraph, Heading, BlockQuote, List, ListItem
    - Table, TableRow, TableCell
    - Emphasis, Strong, Delete, Link

Literal nodes:
    - Text, HTML (raw markup), InlineCode, Code, InlineMath, Math

Other nodes:
    - Image, Break, ThematicBreak
    - UnknownNode (any other mdast kind, passed through verbatim)

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal, Optional

Alignment = Literal["left", "center", "right"]


@dataclass
class SourceLocation:
    """Source location information for AST nodes.

    Mirrors the mdast ``position`` object.

    Parameters
    ----------
    line : int or None, default = None
        Start line (1-based)
    column : int or None, default = None
        Start column (1-based)
    end_line : int or None, default = None
        End line (1-based)
    end_column : int or None, default = None
        End column (1-based)
    offset : int or None, default = None
        Start offset in the source text
    end_offset : int or None, default = None
        End offset in the source text

    """

    line: Optional[int] = None
    column: Optional[int] = None
    end_line: Optional[int] = None
    end_column: Optional[int] = None
    offset: Optional[int] = None
    end_offset: Optional[int] = None


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for traversal.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node (mdast ``data``)
    source_location : SourceLocation or None, default = None
        Information about where this node came from in the source

    """

    type: ClassVar[str] = ""
    metadata: dict[str, Any]
    source_location: Optional[SourceLocation]

    @property
    def node_type(self) -> str:
        """Return the mdast type name of this node."""
        return self.type

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Parent Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    type: ClassVar[str] = "root"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)


@dataclass
class Paragraph(Node):
    """Paragraph block containing inline nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Inline nodes forming the paragraph
    metadata : dict, default = empty dict
        Additional metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    type: ClassVar[str] = "paragraph"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class Heading(Node):
    """Heading with level 1-6.

    Parameters
    ----------
    depth : int
        Heading level (1-6)
    children : list of Node, default = empty list
        Inline content of the heading
    metadata : dict, default = empty dict
        Additional metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    type: ClassVar[str] = "heading"

    depth: int = 1
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        """Validate heading depth."""
        if not 1 <= self.depth <= 6:
            raise ValueError(f"Heading depth must be 1-6, got {self.depth}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self)


@dataclass
class BlockQuote(Node):
    """Block quote containing block-level nodes."""

    type: ClassVar[str] = "blockquote"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block quote."""
        return visitor.visit_block_quote(self)


@dataclass
class List(Node):
    """Ordered or unordered list.

    Parameters
    ----------
    ordered : bool, default = False
        Whether the list is numbered
    start : int or None, default = None
        Starting number for ordered lists
    spread : bool, default = False
        Whether items are separated by blank lines (loose list)
    children : list of Node, default = empty list
        ListItem nodes

    """

    type: ClassVar[str] = "list"

    ordered: bool = False
    start: Optional[int] = None
    spread: bool = False
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """Single list item.

    Parameters
    ----------
    checked : bool or None, default = None
        Task list state, None for plain items
    spread : bool, default = False
        Whether the item's children are separated by blank lines
    children : list of Node, default = empty list
        Block-level content of the item

    """

    type: ClassVar[str] = "listItem"

    checked: Optional[bool] = None
    spread: bool = False
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass
class Table(Node):
    """Table whose children are TableRow nodes, header row first.

    Parameters
    ----------
    align : list of {"left", "center", "right", None}, default = empty list
        Column alignments
    children : list of Node, default = empty list
        TableRow nodes

    """

    type: ClassVar[str] = "table"

    align: list[Optional[Alignment]] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table."""
        return visitor.visit_table(self)


@dataclass
class TableRow(Node):
    """Table row whose children are TableCell nodes."""

    type: ClassVar[str] = "tableRow"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table row."""
        return visitor.visit_table_row(self)


@dataclass
class TableCell(Node):
    """Table cell containing inline nodes."""

    type: ClassVar[str] = "tableCell"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table cell."""
        return visitor.visit_table_cell(self)


@dataclass
class Emphasis(Node):
    """Emphasized (italic) inline content."""

    type: ClassVar[str] = "emphasis"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this emphasis."""
        return visitor.visit_emphasis(self)


@dataclass
class Strong(Node):
    """Strong (bold) inline content."""

    type: ClassVar[str] = "strong"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strong node."""
        return visitor.visit_strong(self)


@dataclass
class Delete(Node):
    """Strikethrough inline content."""

    type: ClassVar[str] = "delete"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strikethrough."""
        return visitor.visit_delete(self)


@dataclass
class Link(Node):
    """Hyperlink with inline content.

    Parameters
    ----------
    url : str
        Link target
    title : str or None, default = None
        Optional link title
    children : list of Node, default = empty list
        Inline content forming the link text

    """

    type: ClassVar[str] = "link"

    url: str = ""
    title: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_link(self)


# ============================================================================
# Literal Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text content.

    Parameters
    ----------
    value : str
        Text content
    metadata : dict, default = empty dict
        Additional metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    type: ClassVar[str] = "text"

    value: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text."""
        return visitor.visit_text(self)


@dataclass
class HTML(Node):
    """Raw markup fragment.

    The value is final, embeddable markup: renderers emit it verbatim and no
    pass re-escapes it.

    Parameters
    ----------
    value : str
        Markup content
    metadata : dict, default = empty dict
        Additional metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    type: ClassVar[str] = "html"

    value: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this markup fragment."""
        return visitor.visit_html(self)


@dataclass
class InlineCode(Node):
    """Inline code span."""

    type: ClassVar[str] = "inlineCode"

    value: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code span."""
        return visitor.visit_inline_code(self)


@dataclass
class Code(Node):
    """Fenced or indented code block.

    Parameters
    ----------
    value : str
        Code content
    lang : str or None, default = None
        Language identifier from the info string
    meta : str or None, default = None
        Remainder of the info string

    """

    type: ClassVar[str] = "code"

    value: str = ""
    lang: Optional[str] = None
    meta: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code(self)


@dataclass
class InlineMath(Node):
    """Inline math expression (LaTeX source)."""

    type: ClassVar[str] = "inlineMath"

    value: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this math expression."""
        return visitor.visit_inline_math(self)


@dataclass
class Math(Node):
    """Display math block (LaTeX source)."""

    type: ClassVar[str] = "math"

    value: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this math block."""
        return visitor.visit_math(self)


# ============================================================================
# Other Nodes
# ============================================================================


@dataclass
class Image(Node):
    """Image reference.

    Parameters
    ----------
    url : str
        Image source
    alt : str or None, default = None
        Alternative text
    title : str or None, default = None
        Optional title

    """

    type: ClassVar[str] = "image"

    url: str = ""
    alt: Optional[str] = None
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image."""
        return visitor.visit_image(self)


@dataclass
class Break(Node):
    """Hard line break."""

    type: ClassVar[str] = "break"

    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line break."""
        return visitor.visit_break(self)


@dataclass
class ThematicBreak(Node):
    """Horizontal rule."""

    type: ClassVar[str] = "thematicBreak"

    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this thematic break."""
        return visitor.visit_thematic_break(self)


@dataclass
class UnknownNode(Node):
    """Node of a kind this package does not model.

    Parsers emit many extension kinds (``definition``, ``yaml``,
    ``footnoteReference``...). They are kept verbatim so the pipeline can pass
    them through and the JSON codec can write them back unchanged.

    Parameters
    ----------
    kind : str
        The mdast type name
    properties : dict, default = empty dict
        Remaining fields of the mdast object
    children : list of Node or None, default = None
        Child nodes, when the kind is a parent
    value : str or None, default = None
        Literal value, when the kind is a literal

    """

    kind: str = ""
    properties: dict[str, Any] = field(default_factory=dict)
    children: Optional[list[Node]] = None
    value: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    @property
    def node_type(self) -> str:
        """Return the mdast type name carried by this node."""
        return self.kind

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node."""
        return visitor.visit_unknown(self)


def get_node_children(node: Node) -> list[Node]:
    """Return the children of a node, or an empty list for leaf nodes.

    Parameters
    ----------
    node : Node
        Node to inspect

    Returns
    -------
    list of Node
        The node's ``children`` list (not a copy), or a new empty list

    """
    children = getattr(node, "children", None)
    if isinstance(children, list):
        return children
    return []


def get_node_value(node: Node) -> Optional[str]:
    """Return the string value of a literal node, or None."""
    value = getattr(node, "value", None)
    return value if isinstance(value, str) else None


def is_text_like(node: Node) -> bool:
    """Check whether a node is a text or raw-markup node carrying a string value."""
    return node.node_type in ("text", "html") and get_node_value(node) is not None
