#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the publishing pipeline and the markdown front end.

Both option classes are frozen dataclasses; use ``create_updated`` to derive a
modified copy.
"""
# src/md2pub/options.py

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from md2pub.constants import (
    DEFAULT_ATTACHMENTS_MARKER,
    DEFAULT_ATTACHMENTS_ROOT,
    DEFAULT_EMIT_FOOTNOTE_SECTION,
    DEFAULT_PARSE_MATH,
    DEFAULT_PARSE_STRIKETHROUGH,
    DEFAULT_PARSE_TABLES,
    DEFAULT_POST_URL_PREFIX,
    DEFAULT_TRAILING_MARK,
)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class PublishOptions(CloneFrozenMixin):
    """Configuration for :class:`~md2pub.transforms.pipeline.PublishPipeline`.

    The defaults reproduce the site's published output exactly.

    Parameters
    ----------
    attachments_marker : str, default "attachments/"
        Path segment identifying a local attachment in an image URL
    attachments_root : str, default "/attachments/"
        Root-relative prefix that replaces everything up to and including
        the marker
    post_url_prefix : str, default "/post/"
        Prefix of cross-document ``[[post]]`` links
    trailing_mark : str, default "¶"
        Mark appended to the last paragraph of the document; empty to disable
    emit_footnote_section : bool, default True
        Whether collected footnotes are appended to the document

    """

    attachments_marker: str = field(
        default=DEFAULT_ATTACHMENTS_MARKER,
        metadata={"help": "Path segment marking a local attachment in image URLs"},
    )
    attachments_root: str = field(
        default=DEFAULT_ATTACHMENTS_ROOT,
        metadata={"help": "Root-relative prefix for rewritten attachment URLs"},
    )
    post_url_prefix: str = field(
        default=DEFAULT_POST_URL_PREFIX,
        metadata={"help": "URL prefix for [[post-title]] links"},
    )
    trailing_mark: str = field(
        default=DEFAULT_TRAILING_MARK,
        metadata={"help": "Mark appended to the last paragraph (empty string disables)"},
    )
    emit_footnote_section: bool = field(
        default=DEFAULT_EMIT_FOOTNOTE_SECTION,
        metadata={"help": "Append the collected footnotes at the end of the document"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If the attachments marker is empty.

        """
        if not self.attachments_marker:
            raise ValueError("attachments_marker must be a non-empty path segment")


@dataclass(frozen=True)
class MarkdownParserOptions(CloneFrozenMixin):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).
    parse_math : bool, default True
        Whether to parse inline ($...$) and block ($$...$$) math.

    """

    parse_tables: bool = field(default=DEFAULT_PARSE_TABLES, metadata={"help": "Parse GFM pipe tables"})
    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH, metadata={"help": "Parse ~~strikethrough~~ syntax"}
    )
    parse_math: bool = field(default=DEFAULT_PARSE_MATH, metadata={"help": "Parse $inline$ and $$block$$ math"})
