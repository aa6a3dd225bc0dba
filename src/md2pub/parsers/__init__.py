#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2pub/parsers/__init__.py
"""Front ends building document trees from source text."""

from md2pub.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = ["MarkdownToAstConverter", "markdown_to_ast"]
