#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2pub/__init__.py
"""md2pub - publish markdown document trees for a blog.

md2pub rewrites a parsed markdown tree (mdast shape) into the form a blog
publishes: wiki-style links become anchors, inline ``[^...]`` footnotes are
numbered and collected at the end, images become numbered floating figures,
tables get numbered captions, and a set of typographic fixes is applied to
mixed Chinese and Latin text.

Examples
--------
Publish a markdown string:

    >>> from md2pub import markdown_to_ast, transform_document
    >>> doc = transform_document(markdown_to_ast("正文[^注释]"))

Use a custom configuration:

    >>> from md2pub import PublishOptions, PublishPipeline
    >>> pipeline = PublishPipeline(PublishOptions(trailing_mark=""))
    >>> state = pipeline.run(doc)

"""

import sys

# Check Python version before any imports
if sys.version_info < (3, 10):
    raise ImportError(
        "md2pub requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from md2pub.ast import Document, ast_to_json, json_to_ast  # noqa: E402
from md2pub.exceptions import (  # noqa: E402
    DependencyError,
    Md2PubError,
    OrdinalRangeError,
    ParsingError,
    TransformError,
    ValidationError,
)
from md2pub.options import MarkdownParserOptions, PublishOptions  # noqa: E402
from md2pub.parsers.markdown import markdown_to_ast  # noqa: E402
from md2pub.transforms.ordinals import to_chinese_numeral  # noqa: E402
from md2pub.transforms.pipeline import PublishPipeline, markdown_replace, transform_document  # noqa: E402
from md2pub.transforms.state import TraversalState  # noqa: E402

__all__ = [
    "__version__",
    "DependencyError",
    "Document",
    "MarkdownParserOptions",
    "Md2PubError",
    "OrdinalRangeError",
    "ParsingError",
    "PublishOptions",
    "PublishPipeline",
    "TransformError",
    "TraversalState",
    "ValidationError",
    "ast_to_json",
    "json_to_ast",
    "markdown_replace",
    "markdown_to_ast",
    "to_chinese_numeral",
    "transform_document",
]
