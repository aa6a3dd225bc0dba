#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2pub/transforms/figures.py
"""Numbered figures.

Every image becomes a ``<figure>`` block captioned ``图<numeral>：<alt>``.
Figures float alternately: odd ordinals to the right, even ones to the left.
"""

from __future__ import annotations

import logging
from typing import Sequence

from md2pub.ast.nodes import HTML, Image, Node
from md2pub.constants import (
    ESCAPED_MARKER_OPEN,
    FIGURE_LABEL,
    FIGURE_TAG,
    FIGURE_TEMPLATE,
    FLOAT_LEFT_CLASS,
    FLOAT_RIGHT_CLASS,
    GENERATED_TAG_KEY,
    MARKER_OPEN,
)
from md2pub.options import PublishOptions
from md2pub.transforms.ordinals import to_chinese_numeral
from md2pub.transforms.state import TraversalState

logger = logging.getLogger(__name__)


def rewrite_attachment_url(url: str, options: PublishOptions | None = None) -> str:
    """Point a relative attachment path at the site's attachments root.

    Parameters
    ----------
    url : str
        Image URL as written in the document
    options : PublishOptions, optional
        Supplies the marker segment and root; defaults are used when omitted

    Returns
    -------
    str
        ``/attachments/<rest>`` when the URL contains ``attachments/``,
        otherwise ``url`` unchanged

    Examples
    --------
    >>> rewrite_attachment_url("../notes/attachments/pic.png")
    '/attachments/pic.png'
    >>> rewrite_attachment_url("https://example.com/pic.png")
    'https://example.com/pic.png'

    """
    options = options or PublishOptions()
    marker_index = url.find(options.attachments_marker)
    if marker_index == -1:
        return url
    return options.attachments_root + url[marker_index + len(options.attachments_marker) :]


def float_class_for(ordinal: int) -> str:
    """Return the float class of a figure ordinal."""
    return FLOAT_RIGHT_CLASS if ordinal % 2 else FLOAT_LEFT_CLASS


def render_figure(image: Image, ordinal: int, options: PublishOptions | None = None) -> HTML:
    """Render one image as a numbered figure block.

    Parameters
    ----------
    image : Image
        The image node to replace
    ordinal : int
        Figure number, 1-99
    options : PublishOptions, optional
        Controls the attachment URL rewrite

    Returns
    -------
    HTML
        Raw-markup node holding the ``<figure>`` block
        with ``[^`` in the alt text written as ``&#91;^``

    Raises
    ------
    OrdinalRangeError
        If ``ordinal`` cannot be written as a numeral

    """
    alt = (image.alt or "").replace(MARKER_OPEN, ESCAPED_MARKER_OPEN)
    label = FIGURE_LABEL + to_chinese_numeral(ordinal)
    markup = FIGURE_TEMPLATE.format(
        float_class=float_class_for(ordinal),
        src=rewrite_attachment_url(image.url, options),
        alt=alt.replace('"', "&quot;"),
        label=label,
        caption=alt,
    )
    return HTML(value=markup, metadata={GENERATED_TAG_KEY: FIGURE_TAG}, source_location=image.source_location)


def number_figures(
    children: Sequence[Node], state: TraversalState, options: PublishOptions | None = None
) -> list[Node]:
    """Replace each image in a sibling list with a numbered figure.

    Parameters
    ----------
    children : sequence of Node
        The sibling list to scan
    state : TraversalState
        State of the current run; its image counter is advanced per image
    options : PublishOptions, optional
        Controls the attachment URL rewrite

    Returns
    -------
    list of Node
        New sibling list

    """
    result: list[Node] = []
    for child in children:
        if not isinstance(child, Image):
            result.append(child)
            continue

        ordinal = state.next_image()
        logger.debug("Numbering figure %d (%s)", ordinal, child.url)
        result.append(render_figure(child, ordinal, options))
    return result
