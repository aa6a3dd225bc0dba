#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for figure numbering."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from md2pub.ast import HTML, Image, Text
from md2pub.exceptions import OrdinalRangeError
from md2pub.options import PublishOptions
from md2pub.transforms.figures import float_class_for, number_figures, rewrite_attachment_url
from md2pub.transforms.state import TraversalState


@pytest.mark.unit
class TestRewriteAttachmentUrl:
    """Tests for rewrite_attachment_url."""

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("sub/dir/attachments/pic.png", "/attachments/pic.png"),
            ("../notes/attachments/2024/pic.png", "/attachments/2024/pic.png"),
            ("attachments/a b.png", "/attachments/a b.png"),
            ("https://example.com/pic.png", "https://example.com/pic.png"),
            ("", ""),
        ],
    )
    def test_default_options(self, url, expected):
        assert rewrite_attachment_url(url) == expected

    def test_custom_options(self):
        options = PublishOptions(attachments_marker="assets/", attachments_root="https://cdn.example.com/")

        assert rewrite_attachment_url("x/assets/pic.png", options) == "https://cdn.example.com/pic.png"
        assert rewrite_attachment_url("x/attachments/pic.png", options) == "x/attachments/pic.png"


@pytest.mark.unit
class TestNumberFigures:
    """Tests for number_figures."""

    def test_full_markup(self):
        state = TraversalState()

        result = number_figures([Image(url="attachments/cat.png", alt="猫")], state)

        assert isinstance(result[0], HTML)
        assert result[0].value == (
            "\n"
            '<figure class="image-wrap float-right">\n'
            '  <img src="/attachments/cat.png" alt="猫">\n'
            "  <figcaption>\n"
            '    <a href="#img_forward_link_图一" id="img_backward_link_图一">图一</a>：猫\n'
            "  </figcaption>\n"
            "</figure>"
        )
        assert result[0].metadata == {"md2pub": "figure"}
        assert state.image_count == 1

    def test_floats_alternate(self):
        state = TraversalState()
        images = [Image(url=f"{n}.png", alt=str(n)) for n in range(3)]

        result = number_figures(images, state)

        assert 'class="image-wrap float-right"' in result[0].value
        assert 'class="image-wrap float-left"' in result[1].value
        assert 'class="image-wrap float-right"' in result[2].value
        assert "图三" in result[2].value

    def test_alt_quotes_escaped_in_attribute_only(self):
        result = number_figures([Image(url="p.png", alt='say "hi"')], TraversalState())

        assert 'alt="say &quot;hi&quot;"' in result[0].value
        assert '</a>：say "hi"\n' in result[0].value

    def test_alt_markers_escaped(self):
        """Test that footnote and reference openings in alt text become character references."""
        result = number_figures([Image(url="p.png", alt="猫[^z]与[^图二]")], TraversalState())

        assert "[^" not in result[0].value
        assert 'alt="猫&#91;^z]与&#91;^图二]"' in result[0].value
        assert "</a>：猫&#91;^z]与&#91;^图二]\n" in result[0].value

    def test_missing_alt(self):
        result = number_figures([Image(url="p.png")], TraversalState())

        assert 'alt=""' in result[0].value
        assert "</a>：\n" in result[0].value

    def test_other_nodes_pass_through(self):
        text = Text(value="caption")
        state = TraversalState()

        result = number_figures([text], state)

        assert result == [text]
        assert state.image_count == 0

    def test_counter_continues_from_state(self):
        state = TraversalState(image_count=9)

        result = number_figures([Image(url="p.png", alt="")], state)

        assert "图十<" in result[0].value
        assert "float-left" in result[0].value

    def test_hundredth_figure_fails(self):
        state = TraversalState(image_count=99)

        with pytest.raises(OrdinalRangeError):
            number_figures([Image(url="p.png")], state)


@pytest.mark.unit
@given(st.integers(min_value=1, max_value=99))
def test_float_class_parity(ordinal):
    """Property: odd ordinals float right, even ones float left."""
    expected = "float-right" if ordinal % 2 == 1 else "float-left"
    assert float_class_for(ordinal) == expected


@pytest.mark.unit
@given(st.text(alphabet="abc/._-", max_size=20), st.text(alphabet="abc/._-", max_size=20))
def test_attachment_rewrite_keeps_suffix(prefix, suffix):
    """Property: everything after the first marker is kept under the root."""
    url = f"{prefix}attachments/{suffix}"
    expected_suffix = url[url.find("attachments/") + len("attachments/") :]

    assert rewrite_attachment_url(url) == "/attachments/" + expected_suffix
