#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2pub/transforms/pipeline.py
"""Pipeline orchestration for publishing a document tree.

This module provides the single entry point of the engine. One run:

1. creates a fresh :class:`~md2pub.transforms.state.TraversalState`;
2. visits every paragraph, table and table cell in document order and runs
   the rewrite stages over the node's children, in the order listed by
   :attr:`PublishPipeline.stage_names`;
3. appends the trailing mark to the last top-level paragraph;
4. appends the collected footnotes after the document.

Examples
--------
Transform a tree in place:

    >>> from md2pub.ast import Document, Paragraph, Text
    >>> doc = Document(children=[Paragraph(children=[Text(value="见[^注释]")])])
    >>> transform_document(doc)
    >>> doc.children[-1].value
    '<table class="comment">...'

Inspect the counts of a run:

    >>> state = PublishPipeline().run(doc)
    >>> state.footnote_count

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from md2pub.ast.nodes import Document, Node, Paragraph, Table, TableCell, get_node_children, is_text_like
from md2pub.ast.visitors import NodeVisitor
from md2pub.constants import PERCENT_ENCODED_SPACE
from md2pub.exceptions import Md2PubError, TransformError
from md2pub.options import PublishOptions
from md2pub.transforms.figures import number_figures
from md2pub.transforms.footnotes import collect_footnotes, render_footnote_section
from md2pub.transforms.rules import (
    FIGURE_REFERENCE_RULE,
    TABLE_REFERENCE_RULE,
    TYPOGRAPHY_RULES,
    RegexRule,
    build_anchor_link_rules,
)
from md2pub.transforms.splicer import splice_custom_footnotes
from md2pub.transforms.state import TraversalState
from md2pub.transforms.tables import number_tables
from md2pub.utils.decorators import debug_timer

logger = logging.getLogger(__name__)

StageFunction = Callable[[Sequence[Node], TraversalState], list[Node]]


@dataclass(frozen=True)
class PipelineStage:
    """A named rewrite of a sibling list.

    Parameters
    ----------
    name : str
        Stage name used in logs and in :class:`TransformError`
    apply : callable
        ``apply(children, state) -> new_children``

    """

    name: str
    apply: StageFunction


def _rule_stage(rule: RegexRule) -> PipelineStage:
    return PipelineStage(rule.name, lambda children, state: rule.apply(children))


def decode_percent_spaces(children: Sequence[Node]) -> list[Node]:
    """Turn ``%20`` back into spaces in text and raw-markup values, in place.

    Link syntax copied from file managers often carries encoded spaces that
    would keep the rewrite patterns from matching.

    """
    for child in children:
        if is_text_like(child) and child.value:  # type: ignore[attr-defined]
            child.value = child.value.replace(PERCENT_ENCODED_SPACE, " ")  # type: ignore[attr-defined]
    return list(children)


class PublishPipeline:
    """Ordered rewrite pipeline turning a parsed tree into a publishable one.

    The pipeline object keeps only its configuration; all per-run state lives
    in the :class:`TraversalState` created by :meth:`run`, so one pipeline can
    serve many documents, including from several threads.

    Parameters
    ----------
    options : PublishOptions, optional
        Pipeline configuration; defaults reproduce the site output

    """

    def __init__(self, options: Optional[PublishOptions] = None):
        """Initialize the pipeline and build its stage list."""
        self.options = options or PublishOptions()
        self.stages: tuple[PipelineStage, ...] = self._build_stages()

    def _build_stages(self) -> tuple[PipelineStage, ...]:
        options = self.options
        return (
            PipelineStage("decode-percent-spaces", lambda children, state: decode_percent_spaces(children)),
            PipelineStage("custom-footnotes", lambda children, state: splice_custom_footnotes(children)),
            *(_rule_stage(rule) for rule in build_anchor_link_rules(options.post_url_prefix)),
            PipelineStage("footnotes", collect_footnotes),
            PipelineStage("figures", lambda children, state: number_figures(children, state, options)),
            _rule_stage(FIGURE_REFERENCE_RULE),
            PipelineStage("tables", number_tables),
            _rule_stage(TABLE_REFERENCE_RULE),
            *(_rule_stage(rule) for rule in TYPOGRAPHY_RULES),
        )

    @property
    def stage_names(self) -> list[str]:
        """Names of the stages in execution order."""
        return [stage.name for stage in self.stages]

    def process_children(self, node: Node, state: TraversalState) -> None:
        """Run every stage over the children of one node, replacing them.

        Parameters
        ----------
        node : Node
            A paragraph, table or table cell
        state : TraversalState
            State of the current run

        Raises
        ------
        Md2PubError
            Library errors raised by a stage propagate unchanged
        TransformError
            If a stage fails with any other exception

        """
        children = list(get_node_children(node))
        for stage in self.stages:
            try:
                children = stage.apply(children, state)
            except Md2PubError:
                raise
            except Exception as e:
                logger.error(f"Stage {stage.name} failed on {node.node_type}: {e}", exc_info=True)
                raise TransformError(
                    f"Stage '{stage.name}' failed: {e}", transform_name=stage.name, original_error=e
                ) from e
        node.children = children  # type: ignore[attr-defined]

    def run(self, document: Document) -> TraversalState:
        """Transform ``document`` in place and return the run's state.

        Parameters
        ----------
        document : Document
            Tree to transform

        Returns
        -------
        TraversalState
            Counters and footnotes collected during this run

        """
        state = TraversalState()
        logger.debug("Starting publish run")

        with debug_timer(logger, "Publish run"):
            document.accept(_PublishVisitor(self, state))
            self._append_trailing_mark(document)
            if self.options.emit_footnote_section:
                document.children.extend(render_footnote_section(state.footnotes))

        logger.debug("Publish run complete: %s", state.summary())
        return state

    def transform(self, document: Document) -> Document:
        """Transform ``document`` in place and return it."""
        self.run(document)
        return document

    def _append_trailing_mark(self, document: Document) -> None:
        """Append the trailing mark to the last non-empty top-level paragraph."""
        if not self.options.trailing_mark:
            return

        for node in reversed(document.children):
            if isinstance(node, Paragraph) and node.children:
                last = node.children[-1]
                if is_text_like(last):
                    last.value += self.options.trailing_mark  # type: ignore[attr-defined]
                return


class _PublishVisitor(NodeVisitor):
    """Visits paragraphs, tables and table cells, processing each before descending."""

    def __init__(self, pipeline: PublishPipeline, state: TraversalState):
        self.pipeline = pipeline
        self.state = state

    def _process(self, node: Node) -> None:
        logger.debug("Processing %s", node.node_type)
        self.pipeline.process_children(node, self.state)
        self.generic_visit(node)

    def visit_paragraph(self, node: Paragraph) -> None:
        self._process(node)

    def visit_table(self, node: Table) -> None:
        self._process(node)

    def visit_table_cell(self, node: TableCell) -> None:
        self._process(node)


def transform_document(document: Document) -> Document:
    """Publish a document tree with the default configuration.

    This is the engine's single entry point: it runs the full traversal and
    finalization on ``document``, mutating it, and returns it.

    Parameters
    ----------
    document : Document
        Tree produced by a markdown parser

    Returns
    -------
    Document
        The same tree, transformed

    Raises
    ------
    OrdinalRangeError
        If the document holds more than 99 figures or tables
    TransformError
        If a stage fails unexpectedly

    """
    return PublishPipeline().transform(document)


def markdown_replace(options: Optional[PublishOptions] = None) -> Callable[[Document], Document]:
    """Return a tree transformer bound to one configuration.

    Parameters
    ----------
    options : PublishOptions, optional
        Pipeline configuration

    Returns
    -------
    callable
        ``transformer(tree) -> tree``; every call is an independent run

    """
    return PublishPipeline(options).transform
