#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2pub/transforms/state.py
"""Per-run state threaded through the pipeline passes."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FootnoteEntry:
    """A collected footnote.

    Parameters
    ----------
    number : int
        Document-wide footnote number, starting at 1
    content : str
        Raw footnote body, emitted verbatim

    """

    number: int
    content: str


@dataclass
class TraversalState:
    """Counters and collected footnotes for one full-document run.

    A fresh instance is created by the pipeline for every run and handed to
    each pass. It is never shared between runs, so documents processed
    concurrently by separate calls cannot interfere.

    Parameters
    ----------
    image_count : int, default 0
        Number of figures numbered so far
    table_count : int, default 0
        Number of tables numbered so far
    footnote_count : int, default 0
        Number of footnotes collected so far
    footnotes : list of FootnoteEntry, default empty
        Collected footnotes in assignment order

    """

    image_count: int = 0
    table_count: int = 0
    footnote_count: int = 0
    footnotes: list[FootnoteEntry] = field(default_factory=list)

    def next_image(self) -> int:
        """Advance the figure counter and return the new ordinal."""
        self.image_count += 1
        return self.image_count

    def next_table(self) -> int:
        """Advance the table counter and return the new ordinal."""
        self.table_count += 1
        return self.table_count

    def add_footnote(self, content: str) -> FootnoteEntry:
        """Number a footnote body and record it.

        Parameters
        ----------
        content : str
            Raw footnote body

        Returns
        -------
        FootnoteEntry
            The recorded entry

        """
        self.footnote_count += 1
        entry = FootnoteEntry(number=self.footnote_count, content=content)
        self.footnotes.append(entry)
        return entry

    def summary(self) -> dict[str, int]:
        """Return the counters as a dictionary (used for logging)."""
        return {"images": self.image_count, "tables": self.table_count, "footnotes": self.footnote_count}
