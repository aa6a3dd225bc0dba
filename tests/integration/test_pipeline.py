#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Integration tests for the publishing pipeline."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from md2pub.ast import (
    BlockQuote,
    Document,
    Emphasis,
    Heading,
    Image,
    Link,
    List,
    ListItem,
    Paragraph,
    Text,
    find_nodes,
)
from md2pub.exceptions import OrdinalRangeError, TransformError
from md2pub.options import PublishOptions
from md2pub.transforms.pipeline import PipelineStage, PublishPipeline, markdown_replace, transform_document
from md2pub.transforms.tables import is_table_caption


def figure_count(document):
    return sum(1 for node in find_nodes(document, "html") if node.metadata.get("md2pub") == "figure")


def caption_count(document):
    return sum(1 for node in find_nodes(document, "html") if is_table_caption(node))


@pytest.mark.integration
class TestPublishPipeline:
    """End-to-end tests of a full publishing run."""

    def test_stage_order(self):
        assert PublishPipeline().stage_names == [
            "decode-percent-spaces",
            "custom-footnotes",
            "anchor-link-described",
            "anchor-link",
            "post-link-described",
            "post-link",
            "footnotes",
            "figures",
            "figure-reference",
            "tables",
            "table-reference",
            "corner-bracket-emphasis",
            "cjk-latin-spacing",
            "latin-cjk-spacing",
            "punctuation-spacing",
            "punctuation-spacing",
            "punctuation-spacing",
            "hidden-white-corner-brackets",
            "attribution-right-align",
            "align-right",
            "align-center",
            "align-left",
            "align-right-italic",
            "align-center-italic",
            "align-left-italic",
        ]

    def test_blog_document(self, blog_document):
        state = PublishPipeline().run(blog_document)
        links, footnoted, figure, table, references = blog_document.children[:5]

        assert links.children[0].value == (
            '参见<a href="#intro">简介</a>与<a href="/post/Other Post">Other Post</a>。'
        )

        assert [node.node_type for node in footnoted.children] == ["text", "html", "text", "html"]
        assert footnoted.children[0].value == "正文"
        assert "comment_forward_link_1" in footnoted.children[1].value
        assert footnoted.children[2].value == "继续"
        assert "comment_forward_link_2" in footnoted.children[3].value

        assert 'src="/attachments/cat.png"' in figure.children[0].value
        assert "图一</a>：猫" in figure.children[0].value

        assert table.children[0].children[0].children[0].value == ""
        assert is_table_caption(table.children[-1])
        assert "表一</a>：Results" in table.children[-1].value

        assert references.children[0].value == (
            '如<a href="#img_backward_link_图一" id="img_forward_link_图一">图一</a>'
            '与<a href="#tbl_backward_link_表一" id="tbl_forward_link_表一">表一</a>所示¶'
        )

        section = blog_document.children[5:]
        assert len(section) == 3
        assert "footnote-separator" in section[0].value
        assert '<td class="comment">来源</td>' in section[1].value
        assert '<td class="comment">补充说明</td>' in section[2].value

        assert state.summary() == {"images": 1, "tables": 1, "footnotes": 2}

    def test_second_run(self, blog_document):
        """Test that re-running adds no footnotes, figures or captions."""
        transform_document(blog_document)
        length = len(blog_document.children)
        figures = figure_count(blog_document)

        state = PublishPipeline().run(blog_document)

        assert state.footnote_count == 0
        assert state.image_count == 0
        assert state.table_count == 1
        assert len(blog_document.children) == length
        assert figure_count(blog_document) == figures
        assert caption_count(blog_document) == 1

    def test_markers_in_alt_text_never_collected(self):
        """Test that a figure's alt text yields no footnotes on the first run or on a re-run."""
        document = Document(
            children=[
                Paragraph(children=[Image(url="attachments/a.png", alt="猫[^z]")]),
                Paragraph(children=[Text(value="正文")]),
            ]
        )

        first = PublishPipeline().run(document)
        second = PublishPipeline().run(document)

        assert first.summary() == {"images": 1, "tables": 0, "footnotes": 0}
        assert second.summary() == {"images": 0, "tables": 0, "footnotes": 0}
        assert len(document.children) == 2

    def test_nested_paragraphs_processed(self):
        document = Document(
            children=[
                BlockQuote(children=[Paragraph(children=[Text(value="「重点」")])]),
                List(children=[ListItem(children=[Paragraph(children=[Text(value="[[#a]]")])])]),
            ]
        )

        transform_document(document)

        assert document.children[0].children[0].children[0].value == "「<em>重点</em>」"
        assert document.children[1].children[0].children[0].children[0].value == '<a href="#a">#a</a>'

    def test_only_direct_children_rewritten(self):
        emphasis = Emphasis(children=[Text(value="[[x]]")])
        document = Document(children=[Paragraph(children=[emphasis])])

        transform_document(document)

        assert emphasis.children[0].value == "[[x]]"

    def test_headings_untouched(self):
        document = Document(children=[Heading(depth=1, children=[Text(value="用Python写")])])

        transform_document(document)

        assert document.children[0].children[0].value == "用Python写"

    def test_percent_encoded_spaces(self):
        document = Document(children=[Paragraph(children=[Text(value="[[My%20Post]]")])])

        transform_document(document)

        assert document.children[0].children[0].value == '<a href="/post/My Post">My Post</a>¶'

    def test_figures_numbered_across_paragraphs(self):
        document = Document(
            children=[Paragraph(children=[Image(url=f"attachments/{n}.png", alt=str(n))]) for n in range(3)]
        )

        state = PublishPipeline().run(document)

        values = [paragraph.children[0].value for paragraph in document.children]
        assert "图一" in values[0] and "float-right" in values[0]
        assert "图二" in values[1] and "float-left" in values[1]
        assert "图三" in values[2] and "float-right" in values[2]
        assert state.image_count == 3


@pytest.mark.integration
class TestTrailingMark:
    """Tests for the trailing mark."""

    def test_last_top_level_paragraph(self):
        document = Document(
            children=[
                Paragraph(children=[Text(value="first")]),
                Paragraph(children=[Text(value="last")]),
                Heading(depth=2, children=[Text(value="heading")]),
            ]
        )

        transform_document(document)

        assert document.children[0].children[0].value == "first"
        assert document.children[1].children[0].value == "last¶"

    def test_empty_paragraphs_skipped(self):
        document = Document(children=[Paragraph(children=[Text(value="text")]), Paragraph()])

        transform_document(document)

        assert document.children[0].children[0].value == "text¶"

    def test_non_text_last_child(self):
        link = Link(url="u", children=[Text(value="link")])
        document = Document(children=[Paragraph(children=[Text(value="text"), link])])

        transform_document(document)

        assert document.children[0].children[0].value == "text"
        assert link.children[0].value == "link"

    def test_nested_paragraphs_ignored(self):
        document = Document(children=[BlockQuote(children=[Paragraph(children=[Text(value="quote")])])])

        transform_document(document)

        assert document.children[0].children[0].children[0].value == "quote"

    def test_disabled(self):
        document = Document(children=[Paragraph(children=[Text(value="text")])])

        PublishPipeline(PublishOptions(trailing_mark="")).run(document)

        assert document.children[0].children[0].value == "text"


@pytest.mark.integration
class TestPipelineOptions:
    """Tests for pipeline configuration."""

    def test_footnote_section_disabled(self):
        document = Document(children=[Paragraph(children=[Text(value="a[^n]")])])

        state = PublishPipeline(PublishOptions(emit_footnote_section=False)).run(document)

        assert len(document.children) == 1
        assert state.footnotes[0].content == "n"

    def test_post_url_prefix(self):
        document = Document(children=[Paragraph(children=[Text(value="[[Post]]")])])

        PublishPipeline(PublishOptions(post_url_prefix="/notes/", trailing_mark="")).run(document)

        assert document.children[0].children[0].value == '<a href="/notes/Post">Post</a>'

    def test_markdown_replace_runs_are_independent(self):
        transformer = markdown_replace()
        first = Document(children=[Paragraph(children=[Image(url="a.png")])])
        second = Document(children=[Paragraph(children=[Image(url="b.png")])])

        transformer(first)
        result = transformer(second)

        assert result is second
        assert "图一" in second.children[0].children[0].value

    def test_concurrent_documents(self):
        """Test that runs on separate documents in parallel do not share counters."""

        def publish(index):
            document = Document(
                children=[Paragraph(children=[Image(url=f"{index}-{n}.png") for n in range(3)])]
            )
            return PublishPipeline().run(document).image_count

        with ThreadPoolExecutor(max_workers=4) as executor:
            counts = list(executor.map(publish, range(16)))

        assert counts == [3] * 16


@pytest.mark.integration
class TestPipelineErrors:
    """Tests for error propagation."""

    def test_unexpected_errors_wrapped(self):
        def explode(children, state):
            raise RuntimeError("boom")

        pipeline = PublishPipeline()
        pipeline.stages = (PipelineStage("explode", explode),)
        document = Document(children=[Paragraph(children=[Text(value="x")])])

        with pytest.raises(TransformError) as exc_info:
            pipeline.run(document)

        assert exc_info.value.transform_name == "explode"
        assert isinstance(exc_info.value.original_error, RuntimeError)

    def test_too_many_figures(self):
        document = Document(children=[Paragraph(children=[Image(url=f"{n}.png") for n in range(100)])])

        with pytest.raises(OrdinalRangeError):
            transform_document(document)

    def test_ninety_nine_figures(self):
        document = Document(children=[Paragraph(children=[Image(url=f"{n}.png") for n in range(99)])])

        transform_document(document)

        assert "图九十九" in document.children[0].children[-1].value
