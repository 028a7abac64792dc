"""Source span tracking for tokens and errors.

Provides the Span dataclass locating a token inside the scanned document.
Used by tokens, attribute errors, and the tree extractor.

Thread Safety:
Span is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """A ``(start, length)`` pair over the source document.

    Offsets are ``str`` indices into the document the processor was
    created with.

    Attributes:
        start: Offset of the first character covered by the span
        length: Number of characters covered by the span

    Examples:
            >>> span = Span(14, 2)
            >>> span.end
            16
            >>> span.slice("<!-- wp:pw --><><!-- /wp:pw -->")
            '<>'

    """

    start: int
    length: int

    @property
    def end(self) -> int:
        """Offset just past the last character of the span."""
        return self.start + self.length

    def slice(self, source: str) -> str:
        """Return the text covered by this span."""
        return source[self.start : self.start + self.length]

    def __str__(self) -> str:
        return f"{self.start}+{self.length}"
