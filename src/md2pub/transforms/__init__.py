#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2pub/transforms/__init__.py
"""Rewrite passes and the publishing pipeline.

This package provides:

- the pipeline orchestrator and its single entry point
- the stateful passes: footnote collection, figure and table numbering
- the pattern rewrite primitives and the ordered rule tables

Examples
--------
Publish a tree with the defaults:

    >>> from md2pub.transforms import transform_document
    >>> transform_document(doc)

Configure the pipeline:

    >>> from md2pub.options import PublishOptions
    >>> from md2pub.transforms import PublishPipeline
    >>> pipeline = PublishPipeline(PublishOptions(post_url_prefix="/notes/"))
    >>> state = pipeline.run(doc)

"""

from md2pub.transforms.figures import number_figures, rewrite_attachment_url
from md2pub.transforms.footnotes import collect_footnotes, render_footnote_section
from md2pub.transforms.ordinals import to_chinese_numeral
from md2pub.transforms.pipeline import PipelineStage, PublishPipeline, markdown_replace, transform_document
from md2pub.transforms.rules import RegexRule, apply_rule, apply_rules
from md2pub.transforms.splicer import splice_custom_footnotes
from md2pub.transforms.state import FootnoteEntry, TraversalState
from md2pub.transforms.tables import number_tables

__all__ = [
    "FootnoteEntry",
    "PipelineStage",
    "PublishPipeline",
    "RegexRule",
    "TraversalState",
    "apply_rule",
    "apply_rules",
    "collect_footnotes",
    "markdown_replace",
    "number_figures",
    "number_tables",
    "render_footnote_section",
    "rewrite_attachment_url",
    "splice_custom_footnotes",
    "to_chinese_numeral",
    "transform_document",
]
