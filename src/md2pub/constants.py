#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2pub/constants.py
"""Constants shared across md2pub.

Defaults for the option classes, the markup fragments emitted by the numbering
passes, and the regular expressions of the rewrite rules.
"""

from __future__ import annotations

# =============================================================================
# Ordinals
# =============================================================================

CJK_DIGITS = ("零", "一", "二", "三", "四", "五", "六", "七", "八", "九")
CJK_TEN = "十"
MIN_ORDINAL = 1
MAX_ORDINAL = 99

FIGURE_LABEL = "图"
TABLE_LABEL = "表"

# =============================================================================
# Publish option defaults
# =============================================================================

DEFAULT_ATTACHMENTS_MARKER = "attachments/"
DEFAULT_ATTACHMENTS_ROOT = "/attachments/"
DEFAULT_POST_URL_PREFIX = "/post/"
DEFAULT_TRAILING_MARK = "¶"
DEFAULT_EMIT_FOOTNOTE_SECTION = True

# =============================================================================
# Markdown parser defaults
# =============================================================================

DEFAULT_PARSE_TABLES = True
DEFAULT_PARSE_STRIKETHROUGH = True
DEFAULT_PARSE_MATH = True

DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]

# =============================================================================
# Node kinds
# =============================================================================

# Kinds the pipeline runs its passes on
PIPELINE_NODE_TYPES = frozenset({"paragraph", "table", "tableCell"})

# Kinds considered by the pattern rewriter
REWRITE_CANDIDATE_TYPES = frozenset({"text", "html", "blockquote"})

# Metadata tag placed on nodes emitted by the numbering passes
GENERATED_TAG_KEY = "md2pub"
TABLE_CAPTION_TAG = "table-caption"
FIGURE_TAG = "figure"
FOOTNOTE_REFERENCE_TAG = "footnote-reference"
FOOTNOTE_SECTION_TAG = "footnote-section"

# =============================================================================
# Markup fragments
# =============================================================================

FLOAT_RIGHT_CLASS = "float-right"
FLOAT_LEFT_CLASS = "float-left"

FIGURE_TEMPLATE = (
    "\n"
    '<figure class="image-wrap {float_class}">\n'
    '  <img src="{src}" alt="{alt}">\n'
    "  <figcaption>\n"
    '    <a href="#img_forward_link_{label}" id="img_backward_link_{label}">{label}</a>：{caption}\n'
    "  </figcaption>\n"
    "</figure>"
)

TABLE_CAPTION_TEMPLATE = (
    '<p class="tbl_title"><a href="#tbl_forward_link_{label}" id="tbl_backward_link_{label}">{label}</a>：{title}</p>'
)

FOOTNOTE_REFERENCE_TEMPLATE = (
    '<a class="comment_forward_link" href="#comment_backward_link_{number}" '
    'id="comment_forward_link_{number}">[{number}]</a>'
)

FOOTNOTE_SEPARATOR_HTML = "<hr style='margin: 1.5em 0 1.5em 0;' class='footnote-separator'>"

FOOTNOTE_ENTRY_TEMPLATE = (
    '<table class="comment"><tr class="comment"><td class="comment">'
    '<a href="#comment_forward_link_{number}" id="comment_backward_link_{number}">[{number}]</a>'
    '</td><td class="comment">{content}</td></tr></table>'
)

# =============================================================================
# Patterns
# =============================================================================

PERCENT_ENCODED_SPACE = "%20"

CUSTOM_FOOTNOTE_OPEN = "^["
CUSTOM_FOOTNOTE_CLOSE = "]"

# Marker opening as written in generated figure markup; the footnote and
# reference patterns do not match the escaped form
MARKER_OPEN = "[^"
ESCAPED_MARKER_OPEN = "&#91;^"

# [^content], excluding figure and table references
FOOTNOTE_MARKER_PATTERN = r"\[\^(?!表|图)([^\]]*?)\]"

FIGURE_REFERENCE_PATTERN = r"\[\^(图.*?)\]"
FIGURE_REFERENCE_TEMPLATE = r'<a href="#img_backward_link_\1" id="img_forward_link_\1">\1</a>'

TABLE_REFERENCE_PATTERN = r"\[\^(表.*?)\]"
TABLE_REFERENCE_TEMPLATE = r'<a href="#tbl_backward_link_\1" id="tbl_forward_link_\1">\1</a>'
