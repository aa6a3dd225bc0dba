#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for mdast JSON serialization."""

import json

import pytest

from md2pub.ast import (
    HTML,
    Code,
    Document,
    Heading,
    Image,
    Link,
    List,
    ListItem,
    Paragraph,
    SourceLocation,
    Table,
    TableCell,
    TableRow,
    Text,
    UnknownNode,
    ast_to_dict,
    ast_to_json,
    dict_to_ast,
    json_to_ast,
)
from md2pub.exceptions import ParsingError


@pytest.fixture
def sample_document():
    """Create a document covering the common node kinds."""
    return Document(
        children=[
            Heading(depth=2, children=[Text(value="标题")]),
            Paragraph(
                children=[
                    Text(value="see ", source_location=SourceLocation(line=1, column=1, end_line=1, end_column=5)),
                    Link(url="https://example.com", title="t", children=[Text(value="link")]),
                    Image(url="attachments/a.png", alt="a"),
                ]
            ),
            List(ordered=True, start=3, children=[ListItem(children=[Paragraph(children=[Text(value="item")])])]),
            Table(align=["left", None], children=[TableRow(children=[TableCell(children=[Text(value="c")])])]),
            Code(value="print()", lang="python"),
            HTML(value="<hr>", metadata={"md2pub": "footnote-section"}),
        ]
    )


@pytest.mark.unit
class TestAstToDict:
    """Tests for converting nodes to mdast dictionaries."""

    def test_text(self):
        assert ast_to_dict(Text(value="x")) == {"type": "text", "value": "x"}

    def test_metadata_becomes_data(self):
        assert ast_to_dict(HTML(value="<b>", metadata={"k": "v"})) == {
            "type": "html",
            "value": "<b>",
            "data": {"k": "v"},
        }

    def test_position(self):
        node = Text(value="x", source_location=SourceLocation(line=2, column=3, end_line=2, end_column=4))

        assert ast_to_dict(node)["position"] == {"start": {"line": 2, "column": 3}, "end": {"line": 2, "column": 4}}

    def test_table_rows_use_mdast_names(self):
        result = ast_to_dict(Table(children=[TableRow(children=[TableCell()])]))

        assert result["children"][0]["type"] == "tableRow"
        assert result["children"][0]["children"][0]["type"] == "tableCell"

    def test_json_keeps_non_ascii(self):
        assert '"图一"' in ast_to_json(Text(value="图一"))


@pytest.mark.unit
class TestDictToAst:
    """Tests for building nodes from mdast dictionaries."""

    def test_round_trip(self, sample_document):
        restored = json_to_ast(ast_to_json(sample_document))

        assert restored == sample_document

    def test_unknown_kind_round_trip(self):
        data = {"type": "footnoteReference", "identifier": "1", "label": "1"}

        node = dict_to_ast(data)

        assert isinstance(node, UnknownNode)
        assert node.node_type == "footnoteReference"
        assert node.properties == {"identifier": "1", "label": "1"}
        assert ast_to_dict(node) == data

    def test_unknown_parent_keeps_children(self):
        node = dict_to_ast({"type": "footnoteDefinition", "children": [{"type": "text", "value": "x"}]})

        assert node.children == [Text(value="x")]

    def test_remark_tree(self):
        """Test a tree as remark-parse would emit it."""
        tree = {
            "type": "root",
            "children": [
                {
                    "type": "paragraph",
                    "children": [{"type": "text", "value": "hi", "position": {"start": {"line": 1, "column": 1}}}],
                    "position": {"start": {"line": 1, "column": 1}, "end": {"line": 1, "column": 3}},
                }
            ],
        }

        document = json_to_ast(json.dumps(tree))

        assert document.children[0].children[0].value == "hi"
        assert document.children[0].source_location.end_column == 3


@pytest.mark.unit
class TestDeserializationErrors:
    """Tests for malformed input."""

    def test_invalid_json(self):
        with pytest.raises(ParsingError) as exc_info:
            json_to_ast("{not json")

        assert exc_info.value.parsing_stage == "json_decode"

    def test_non_root_top_level(self):
        with pytest.raises(ParsingError) as exc_info:
            json_to_ast('{"type": "paragraph", "children": []}')

        assert exc_info.value.parsing_stage == "node_type"

    def test_missing_type(self):
        with pytest.raises(ParsingError) as exc_info:
            dict_to_ast({"children": []})

        assert exc_info.value.parsing_stage == "node_type"

    def test_children_not_a_list(self):
        with pytest.raises(ParsingError):
            dict_to_ast({"type": "paragraph", "children": "text"})

    def test_invalid_heading_depth(self):
        with pytest.raises(ParsingError) as exc_info:
            dict_to_ast({"type": "heading", "depth": 9, "children": []})

        assert exc_info.value.parsing_stage == "node_shape"
        assert isinstance(exc_info.value.original_error, ValueError)
