"""Token and scan outcome definitions for the block processor.

The processor produces one outcome per scan step: a Token when it found
something, EndOfInput when the document is exhausted, or ScanError when it
stopped on a terminal condition. Only Token is truthy, so callers can loop
with ``while processor.next_token(): ...`` and inspect the outcome after.

Thread Safety:
Token and the outcome types are frozen (immutable) and safe to share.
DelimiterType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from blockscan.errors import ErrorKind
from blockscan.names import BlockName
from blockscan.span import Span


class DelimiterType(Enum):
    """Kinds of block delimiter.

    Freeform HTML is reported as an implicit VOID with no block name.

    """

    OPENER = "opener"  # <!-- wp:name -->
    CLOSER = "closer"  # <!-- /wp:name -->
    VOID = "void"  # <!-- wp:name /-->


@dataclass(frozen=True, slots=True)
class Token:
    """A single delimiter or HTML span found by the processor.

    Attributes:
        delimiter_type: Opener, closer or void
        block_name: Block type, or None for an HTML span
        has_closing_flag: Whether ``/wp:`` was present, independent of type
        span: Location of the whole delimiter or HTML run
        attributes_span: Location of the raw JSON attributes, if any
        is_whitespace_only: HTML span contains only HTML whitespace

    """

    delimiter_type: DelimiterType
    block_name: BlockName | None
    has_closing_flag: bool
    span: Span
    attributes_span: Span | None = None
    is_whitespace_only: bool = False

    @property
    def is_html(self) -> bool:
        """True for spans of non-delimiter content."""
        return self.block_name is None

    @property
    def block_type(self) -> str | None:
        """Fully-qualified block type, or None for HTML."""
        return None if self.block_name is None else str(self.block_name)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.block_name is None:
            return f"Token(HTML, {self.span})"
        flag = ", closing-flag" if self.has_closing_flag else ""
        return f"Token({self.delimiter_type.name}, {self.block_name}{flag}, {self.span})"


@dataclass(frozen=True, slots=True)
class EndOfInput:
    """Outcome when the whole document has been scanned."""

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class ScanError:
    """Outcome when scanning stopped on a terminal condition.

    Attributes:
        kind: What went wrong
        at: Offset where the offending text starts

    """

    kind: ErrorKind
    at: int

    def __bool__(self) -> bool:
        return False


END_OF_INPUT = EndOfInput()

ScanResult: TypeAlias = Token | EndOfInput | ScanError

__all__ = [
    "END_OF_INPUT",
    "DelimiterType",
    "EndOfInput",
    "ErrorKind",
    "ScanError",
    "ScanResult",
    "Token",
]
