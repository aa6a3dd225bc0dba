#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2pub/ast/serialization.py
"""mdast JSON serialization and deserialization for AST nodes.

This module converts document trees to and from the JSON shape produced by
remark/unified parsers (``{"type": "root", "children": [...]}``), so trees can
be handed over from a JavaScript toolchain and returned to it.

Mapping
-------
- ``Node.metadata``  <->  mdast ``data``
- ``Node.source_location``  <->  mdast ``position``
- kinds without a dedicated class  <->  :class:`UnknownNode`

Examples
--------
>>> from md2pub.ast.serialization import json_to_ast, ast_to_json
>>> doc = json_to_ast('{"type": "root", "children": []}')
>>> ast_to_json(doc)
'{"type": "root", "children": []}'

"""

from __future__ import annotations

import json
from typing import Any, Callable, cast

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
    SourceLocation,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
    UnknownNode,
)
from md2pub.exceptions import ParsingError

_COMMON_KEYS = frozenset({"type", "children", "value", "data", "position"})


# ============================================================================
# Serialization
# ============================================================================


def _serialize_source_location(location: SourceLocation) -> dict[str, Any]:
    """Serialize a SourceLocation as an mdast position."""
    start: dict[str, Any] = {}
    end: dict[str, Any] = {}
    if location.line is not None:
        start["line"] = location.line
    if location.column is not None:
        start["column"] = location.column
    if location.offset is not None:
        start["offset"] = location.offset
    if location.end_line is not None:
        end["line"] = location.end_line
    if location.end_column is not None:
        end["column"] = location.end_column
    if location.end_offset is not None:
        end["offset"] = location.end_offset
    return {"start": start, "end": end}


def _node_fields(node: Node) -> dict[str, Any]:
    """Return the kind-specific fields of a node."""
    if isinstance(node, Heading):
        return {"depth": node.depth}
    if isinstance(node, List):
        return {"ordered": node.ordered, "start": node.start, "spread": node.spread}
    if isinstance(node, ListItem):
        return {"checked": node.checked, "spread": node.spread}
    if isinstance(node, Table):
        return {"align": list(node.align)}
    if isinstance(node, Link):
        return {"url": node.url, "title": node.title}
    if isinstance(node, Image):
        return {"url": node.url, "alt": node.alt, "title": node.title}
    if isinstance(node, Code):
        return {"lang": node.lang, "meta": node.meta}
    if isinstance(node, UnknownNode):
        return dict(node.properties)
    return {}


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node (and its subtree) to an mdast dictionary.

    Parameters
    ----------
    node : Node
        Node to convert

    Returns
    -------
    dict
        mdast object

    """
    result: dict[str, Any] = {"type": node.node_type}
    result.update(_node_fields(node))

    value = getattr(node, "value", None)
    if value is not None:
        result["value"] = value

    children = getattr(node, "children", None)
    if children is not None:
        result["children"] = [ast_to_dict(child) for child in children]

    if node.metadata:
        result["data"] = node.metadata
    if node.source_location:
        result["position"] = _serialize_source_location(node.source_location)
    return result


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize a node to an mdast JSON string.

    Parameters
    ----------
    node : Node
        Node to serialize
    indent : int or None, default = None
        JSON indentation

    Returns
    -------
    str
        JSON text; non-ASCII characters are written as-is

    """
    return json.dumps(ast_to_dict(node), indent=indent, ensure_ascii=False)


# ============================================================================
# Deserialization
# ============================================================================


def _deserialize_children(data: dict[str, Any]) -> list[Node]:
    children = data.get("children", [])
    if not isinstance(children, list):
        raise ParsingError(f"'children' of {data.get('type')!r} node must be a list", parsing_stage="node_shape")
    return [dict_to_ast(child) for child in children]


def _deserialize_source_location(data: dict[str, Any]) -> SourceLocation | None:
    position = data.get("position")
    if not isinstance(position, dict):
        return None
    start = position.get("start") or {}
    end = position.get("end") or {}
    return SourceLocation(
        line=start.get("line"),
        column=start.get("column"),
        end_line=end.get("line"),
        end_column=end.get("column"),
        offset=start.get("offset"),
        end_offset=end.get("offset"),
    )


def _common(data: dict[str, Any]) -> dict[str, Any]:
    return {
        "metadata": dict(data.get("data") or {}),
        "source_location": _deserialize_source_location(data),
    }


def _parent(cls: type) -> Callable[[dict[str, Any]], Node]:
    def build(data: dict[str, Any]) -> Node:
        return cast(Node, cls(children=_deserialize_children(data), **_common(data)))

    return build


def _literal(cls: type) -> Callable[[dict[str, Any]], Node]:
    def build(data: dict[str, Any]) -> Node:
        return cast(Node, cls(value=data.get("value") or "", **_common(data)))

    return build


def _void(cls: type) -> Callable[[dict[str, Any]], Node]:
    def build(data: dict[str, Any]) -> Node:
        return cast(Node, cls(**_common(data)))

    return build


def _deserialize_heading(data: dict[str, Any]) -> Heading:
    return Heading(depth=data.get("depth", 1), children=_deserialize_children(data), **_common(data))


def _deserialize_list(data: dict[str, Any]) -> List:
    return List(
        ordered=bool(data.get("ordered", False)),
        start=data.get("start"),
        spread=bool(data.get("spread", False)),
        children=_deserialize_children(data),
        **_common(data),
    )


def _deserialize_list_item(data: dict[str, Any]) -> ListItem:
    return ListItem(
        checked=data.get("checked"),
        spread=bool(data.get("spread", False)),
        children=_deserialize_children(data),
        **_common(data),
    )


def _deserialize_table(data: dict[str, Any]) -> Table:
    return Table(align=list(data.get("align") or []), children=_deserialize_children(data), **_common(data))


def _deserialize_link(data: dict[str, Any]) -> Link:
    return Link(
        url=data.get("url") or "", title=data.get("title"), children=_deserialize_children(data), **_common(data)
    )


def _deserialize_image(data: dict[str, Any]) -> Image:
    return Image(url=data.get("url") or "", alt=data.get("alt"), title=data.get("title"), **_common(data))


def _deserialize_code(data: dict[str, Any]) -> Code:
    return Code(value=data.get("value") or "", lang=data.get("lang"), meta=data.get("meta"), **_common(data))


def _deserialize_unknown(data: dict[str, Any]) -> UnknownNode:
    children = data.get("children")
    return UnknownNode(
        kind=data["type"],
        properties={key: val for key, val in data.items() if key not in _COMMON_KEYS},
        children=_deserialize_children(data) if children is not None else None,
        value=data.get("value"),
        **_common(data),
    )


_DESERIALIZERS: dict[str, Callable[[dict[str, Any]], Node]] = {
    "root": _parent(Document),
    "paragraph": _parent(Paragraph),
    "heading": _deserialize_heading,
    "blockquote": _parent(BlockQuote),
    "list": _deserialize_list,
    "listItem": _deserialize_list_item,
    "table": _deserialize_table,
    "tableRow": _parent(TableRow),
    "tableCell": _parent(TableCell),
    "emphasis": _parent(Emphasis),
    "strong": _parent(Strong),
    "delete": _parent(Delete),
    "link": _deserialize_link,
    "text": _literal(Text),
    "html": _literal(HTML),
    "inlineCode": _literal(InlineCode),
    "code": _deserialize_code,
    "inlineMath": _literal(InlineMath),
    "math": _literal(Math),
    "image": _deserialize_image,
    "break": _void(Break),
    "thematicBreak": _void(ThematicBreak),
}


def dict_to_ast(data: dict[str, Any]) -> Node:
    """Convert an mdast dictionary to a node.

    Parameters
    ----------
    data : dict
        mdast object

    Returns
    -------
    Node
        Deserialized node; kinds without a dedicated class become
        :class:`UnknownNode`

    Raises
    ------
    ParsingError
        If ``data`` is not an object with a string ``type``, or a field has the
        wrong shape

    """
    if not isinstance(data, dict):
        raise ParsingError(f"Expected an mdast object, got {type(data).__name__}", parsing_stage="node_shape")

    node_type = data.get("type")
    if not isinstance(node_type, str) or not node_type:
        raise ParsingError("mdast object is missing its 'type'", parsing_stage="node_type")

    deserializer = _DESERIALIZERS.get(node_type, _deserialize_unknown)
    try:
        return deserializer(data)
    except (TypeError, ValueError) as e:
        raise ParsingError(f"Invalid {node_type!r} node: {e}", parsing_stage="node_shape", original_error=e) from e


def json_to_ast(json_str: str) -> Document:
    """Deserialize mdast JSON into a document.

    Parameters
    ----------
    json_str : str
        JSON text whose top-level object is a ``root`` node

    Returns
    -------
    Document
        Deserialized document

    Raises
    ------
    ParsingError
        If the text is not valid JSON or its top-level node is not a root

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Invalid mdast JSON: {e}", parsing_stage="json_decode", original_error=e) from e

    node = dict_to_ast(data)
    if not isinstance(node, Document):
        raise ParsingError(f"Top-level mdast node must be 'root', got {node.node_type!r}", parsing_stage="node_type")
    return node
