#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Integration tests publishing markdown source end to end."""

import pytest

from md2pub import markdown_to_ast, transform_document
from md2pub.ast import Table, find_nodes
from md2pub.transforms.tables import is_table_caption

pytest.importorskip("mistune")

POST = """参见[[Other Post]]。

正文^[[来源](https://example.com)]继续

![猫](../notes/attachments/cat.png)

| Results | Value |
| --- | --- |
| a | 1 |

如[^图一]与[^表一]所示
"""


@pytest.mark.integration
class TestMarkdownPublishing:
    """Tests running the markdown front end and the pipeline together."""

    @pytest.fixture
    def published(self):
        return transform_document(markdown_to_ast(POST))

    def test_cross_document_link(self, published):
        assert published.children[0].children[0].value == '参见<a href="/post/Other Post">Other Post</a>。'

    def test_custom_footnote(self, published):
        paragraph = published.children[1]

        assert [node.node_type for node in paragraph.children] == ["text", "html", "text"]
        assert paragraph.children[0].value == "正文"
        assert paragraph.children[2].value == "继续"
        assert '<td class="comment">来源</td>' in published.children[-1].value

    def test_figure(self, published):
        figure = published.children[2].children[0]

        assert figure.metadata == {"md2pub": "figure"}
        assert 'src="/attachments/cat.png"' in figure.value

    def test_table_caption(self, published):
        table = published.children[3]

        assert isinstance(table, Table)
        assert is_table_caption(table.children[-1])
        assert "表一</a>：Results" in table.children[-1].value
        assert table.children[0].children[0].children[0].value == ""

    def test_references_and_trailing_mark(self, published):
        value = published.children[4].children[-1].value

        assert 'id="img_forward_link_图一"' in value
        assert 'id="tbl_forward_link_表一"' in value
        assert value.endswith("¶")

    def test_single_footnote_section(self, published):
        separators = [node for node in find_nodes(published, "html") if "footnote-separator" in node.value]

        assert len(separators) == 1
        assert len(published.children) == 7
