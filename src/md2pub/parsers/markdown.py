#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2pub/parsers/markdown.py
"""Markdown to AST converter.

This module builds md2pub document trees from markdown text using the mistune
parser. The resulting tree has the mdast shape the publishing pipeline
expects: tables hold their rows directly (header row first), soft line breaks
stay inside text values, and adjacent text runs are merged the way remark
emits them.

"""

from __future__ import annotations

import logging
from typing import Any, Optional

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
)
from md2pub.ast.utils import extract_text, merge_adjacent_text
from md2pub.constants import DEPS_MARKDOWN
from md2pub.exceptions import ParsingError
from md2pub.options import MarkdownParserOptions
from md2pub.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


class MarkdownToAstConverter:
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    >>> converter = MarkdownToAstConverter()
    >>> doc = converter.parse("# Hello\n\nThis is **bold**.")

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        self.options = options or MarkdownParserOptions()

    @requires_dependencies("markdown parsing", DEPS_MARKDOWN)
    def parse(self, markdown_content: str) -> Document:
        """Parse Markdown text into a Document.

        Parameters
        ----------
        markdown_content : str
            Markdown text

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        ParsingError
            If ``markdown_content`` is not a string
        DependencyError
            If mistune is not installed

        """
        if not isinstance(markdown_content, str):
            raise ParsingError(
                f"Markdown input must be str, got {type(markdown_content).__name__}", parsing_stage="input"
            )

        import mistune

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_math:
            plugins.append("math")

        markdown = mistune.create_markdown(plugins=plugins, renderer=None)
        tokens, _state = markdown.parse(markdown_content)

        children = self._process_tokens(tokens) if isinstance(tokens, list) else []
        logger.debug("Parsed markdown into %d top-level nodes", len(children))
        return Document(children=children)

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune block tokens into AST nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Optional[Node]:
        """Process a single mistune block token into an AST node."""
        token_type = token.get("type", "")

        if token_type in ("paragraph", "block_text"):
            return Paragraph(children=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "heading":
            return self._process_heading(token)
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTML(value=token.get("raw", ""))
        elif token_type == "block_math":
            return Math(value=token.get("raw", ""))

        # blank_line and anything unrecognised
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1
        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1
        return Heading(depth=level, children=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> Code:
        attrs = token.get("attrs", {})
        info_string = (attrs.get("info") or "").strip() if isinstance(attrs, dict) else ""
        lang = meta = None
        if info_string:
            parts = info_string.split(maxsplit=1)
            lang = parts[0]
            meta = parts[1] if len(parts) > 1 else None
        return Code(value=token.get("raw", ""), lang=lang, meta=meta)

    def _process_list(self, token: dict[str, Any]) -> List:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start", 1) if ordered else None
        tight = token.get("tight", attrs.get("tight", True))

        items = [
            self._process_list_item(child, tight)
            for child in token.get("children", [])
            if isinstance(child, dict) and child.get("type") in ("list_item", "task_list_item")
        ]
        return List(ordered=ordered, start=start, spread=not tight, children=items)

    def _process_list_item(self, token: dict[str, Any], tight: bool) -> ListItem:
        attrs = token.get("attrs", {})
        checked = attrs.get("checked") if isinstance(attrs, dict) else None
        return ListItem(checked=checked, spread=not tight, children=self._process_tokens(token.get("children", [])))

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Flatten mistune's head/body table tokens into a list of rows."""
        rows: list[Node] = []
        align: list[Any] = []

        for section in token.get("children", []):
            section_type = section.get("type", "")
            if section_type == "table_head":
                cells = self._process_table_cells(section.get("children", []))
                align = [cell_token.get("attrs", {}).get("align") for cell_token in section.get("children", [])]
                rows.append(TableRow(children=cells))
            elif section_type == "table_body":
                for row_token in section.get("children", []):
                    rows.append(TableRow(children=self._process_table_cells(row_token.get("children", []))))

        return Table(align=align, children=rows)

    def _process_table_cells(self, cell_tokens: list[dict[str, Any]]) -> list[Node]:
        return [
            TableCell(children=self._process_inline_tokens(cell_token.get("children", [])))
            for cell_token in cell_tokens
            if cell_token.get("type") == "table_cell"
        ]

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens, merging adjacent text runs."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)
        return merge_adjacent_text(nodes)

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        # alt is the plain text of the description, formatting dropped
        alt = "".join(extract_text(node) for node in self._process_inline_tokens(token.get("children", [])))
        return Image(url=attrs.get("url", ""), alt=alt, title=attrs.get("title"))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        return Link(
            url=attrs.get("url", ""),
            title=attrs.get("title"),
            children=self._process_inline_tokens(token.get("children", [])),
        )

    def _process_inline_token(self, token: dict[str, Any]) -> Optional[Node]:
        """Process a single inline token."""
        token_type = token.get("type", "")

        if token_type == "text":
            return Text(value=token.get("raw", ""))
        elif token_type == "softbreak":
            return Text(value="\n")
        elif token_type == "linebreak":
            return Break()
        elif token_type == "emphasis":
            return Emphasis(children=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "strong":
            return Strong(children=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "strikethrough":
            return Delete(children=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "codespan":
            return InlineCode(value=token.get("raw", ""))
        elif token_type == "inline_html":
            return HTML(value=token.get("raw", ""))
        elif token_type == "inline_math":
            return InlineMath(value=token.get("raw", ""))
        elif token_type == "link":
            return self._handle_link_token(token)
        elif token_type == "image":
            return self._handle_image_token(token)
        return None


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert a Markdown string to a Document.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> doc = markdown_to_ast("# Hello\n\nWorld")
    >>> len(doc.children)
    2

    """
    return MarkdownToAstConverter(options).parse(markdown_content)
