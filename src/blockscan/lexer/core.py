"""Streaming block delimiter processor.

Walks a document once, left to right, reporting each block delimiter and
each run of HTML between them as a token. The processor only ever looks at
the current token: accessors describe it until the next advance.

No regex in the hot path. Every offset is visited a bounded number of
times: a failed delimiter probe is never repeated for the same offset, and
the probe that ends an HTML run is reused as the next token.

Thread Safety:
Processor instances are single-use. Create one per document.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from blockscan.attributes import JsonError, ParsedAttributes
from blockscan.attributes import parse_attributes as decode_attributes
from blockscan.config import ScanConfig, get_scan_config
from blockscan.errors import ErrorKind, UnsupportedOperationError
from blockscan.lexer.breadcrumbs import BreadcrumbStack
from blockscan.lexer.extract import BlockExtractorMixin
from blockscan.lexer.matcher import find_candidate, match_delimiter
from blockscan.lexer.modes import HTML_WHITESPACE, MatchStatus, ScanState
from blockscan.names import FREEFORM, INNER_HTML_LABEL, BlockName
from blockscan.span import Span
from blockscan.tokens import (
    END_OF_INPUT,
    DelimiterType,
    ScanError,
    ScanResult,
    Token,
)
from blockscan.utils.logger import get_logger

logger = get_logger(__name__)

# Block type query matching any block, including top-level freeform HTML
ANY_BLOCK = "*"


def _is_html_whitespace(source: str, start: int, end: int) -> bool:
    for index in range(start, end):
        if source[index] not in HTML_WHITESPACE:
            return False
    return True


class BlockProcessor(BlockExtractorMixin):
    """Single-pass scanner over block delimiters and the HTML between them.

    Usage:
            >>> processor = BlockProcessor("<!-- wp:image /--><p>Hi</p>")
            >>> while processor.next_token():
            ...     print(processor.get_printable_block_type())
        core/image
        core/freeform

    Thread Safety:
        Processor instances are single-use. Create one per document.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",  # Offset just past the current token
        "_state",
        "_config",  # Snapshot of the active ScanConfig
        "_token",
        "_breadcrumbs",
        "_error",  # Sticky ScanError once ERRORED
        "_lookahead",  # (offset, probe result) that ended the last HTML run
        "_parsed",  # Memoized attribute decode for the current token
        "_last_json_error",
    )

    def __init__(self, source: str, config: ScanConfig | None = None) -> None:
        """Initialize processor over a whole document.

        Args:
            source: Document text
            config: Overrides the active ScanConfig
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._state = ScanState.SCANNING
        self._config = config if config is not None else get_scan_config()

        self._token: Token | None = None
        self._breadcrumbs = BreadcrumbStack()
        self._error: ScanError | None = None
        self._lookahead: tuple[int, Token | MatchStatus] | None = None
        self._parsed: ParsedAttributes | None = None
        self._last_json_error: JsonError | None = None

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        """Offset where the next token will start."""
        return self._pos

    @property
    def open_depth(self) -> int:
        """Blocks opened and not yet closed, whatever the current token is."""
        return self._breadcrumbs.depth()

    @property
    def config(self) -> ScanConfig:
        return self._config

    # =========================================================================
    # Advancing
    # =========================================================================

    def next_token(self) -> ScanResult:
        """Advance to the next delimiter or HTML run.

        Returns:
            The new current Token, END_OF_INPUT once the document is
            consumed, or a ScanError if the document ends inside what
            could still be a delimiter. Both terminal outcomes repeat on
            every later call.

        Complexity: amortized O(n) over the whole document
        """
        if self._state is ScanState.ERRORED:
            return self._error
        if self._state is ScanState.END_OF_INPUT:
            return END_OF_INPUT

        self._token = None
        self._parsed = None

        at = self._pos
        if at >= self._source_len:
            self._state = ScanState.END_OF_INPUT
            return END_OF_INPUT

        probe = self._probe(at)
        if isinstance(probe, Token):
            self._breadcrumbs.apply(probe)
            return self._commit(probe)

        if probe is MatchStatus.INCOMPLETE:
            self._state = ScanState.ERRORED
            self._error = ScanError(ErrorKind.INCOMPLETE_INPUT, at)
            logger.debug(
                "Input ends inside a possible block delimiter at offset %d", at
            )
            return self._error

        end = self._find_html_end(at + 1)
        token = Token(
            delimiter_type=DelimiterType.VOID,
            block_name=None,
            has_closing_flag=False,
            span=Span(at, end - at),
            is_whitespace_only=_is_html_whitespace(self._source, at, end),
        )
        return self._commit(token)

    def next_delimiter(self, block_type: str | None = None) -> ScanResult:
        """Advance to the next explicit delimiter, skipping HTML.

        With ``block_type``, advance to the next token of that type
        instead; ``"*"`` and ``"core/freeform"`` also stop on top-level
        HTML.
        """
        while token := self.next_token():
            if block_type is None:
                if not token.is_html:
                    return token
            elif self.is_block_type(block_type):
                return token
        return token

    def next_block(self, block_type: str | None = None) -> ScanResult:
        """Advance to the next token that opens a block.

        Closers never qualify; with no ``block_type`` top-level freeform
        HTML does.
        """
        types = () if block_type is None else (block_type,)
        while token := self.next_token():
            if self.opens_block(*types):
                return token
        return token

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens until end of input or error."""
        while token := self.next_token():
            yield token

    def _probe(self, at: int) -> Token | MatchStatus:
        lookahead = self._lookahead
        if lookahead is not None and lookahead[0] == at:
            self._lookahead = None
            return lookahead[1]
        return match_delimiter(self._source, at)

    def _find_html_end(self, start: int) -> int:
        """Find where the HTML run ends: the next offset whose probe is not NO_MATCH.

        The deciding probe is cached so the next token reuses it.
        """
        source = self._source
        candidate = find_candidate(source, start)
        while candidate != -1:
            probe = match_delimiter(source, candidate)
            if probe is not MatchStatus.NO_MATCH:
                self._lookahead = (candidate, probe)
                return candidate
            candidate = find_candidate(source, candidate + 1)
        return self._source_len

    def _commit(self, token: Token) -> Token:
        self._token = token
        self._pos = token.span.end
        return token

    # =========================================================================
    # Current token
    # =========================================================================

    def get_token(self) -> Token | None:
        return self._token

    def get_delimiter_type(self) -> DelimiterType | None:
        """Delimiter type of the current token (VOID for HTML)."""
        return None if self._token is None else self._token.delimiter_type

    def get_block_name(self) -> BlockName | None:
        return None if self._token is None else self._token.block_name

    def get_block_type(self) -> str | None:
        """Fully-qualified type of the current delimiter; None for HTML."""
        return None if self._token is None else self._token.block_type

    def get_printable_block_type(self) -> str | None:
        """Like get_block_type(), but labels HTML by where it sits.

        Top-level HTML is ``core/freeform``; HTML inside a block is
        ``#innerHTML``.
        """
        token = self._token
        if token is None:
            return None
        if token.is_html:
            return str(FREEFORM) if self._breadcrumbs.depth() == 0 else INNER_HTML_LABEL
        return token.block_type

    def has_closing_flag(self) -> bool:
        return self._token is not None and self._token.has_closing_flag

    def get_span(self) -> Span | None:
        return None if self._token is None else self._token.span

    def is_html(self) -> bool:
        return self._token is not None and self._token.is_html

    def is_non_whitespace_html(self) -> bool:
        token = self._token
        return token is not None and token.is_html and not token.is_whitespace_only

    def is_freeform(self) -> bool:
        """True for HTML outside any block."""
        return self.is_html() and self._breadcrumbs.depth() == 0

    def get_html_content(self) -> str | None:
        """Text of the current HTML run; None for delimiters."""
        token = self._token
        if token is None or not token.is_html:
            return None
        return token.span.slice(self._source)

    def _on_explicit_void(self) -> bool:
        token = self._token
        return (
            token is not None
            and not token.is_html
            and token.delimiter_type is DelimiterType.VOID
        )

    def get_depth(self) -> int:
        """Number of open blocks as of the current token.

        An opener counts itself, a closer does not, and an explicit void
        counts itself while it is the current token.
        """
        if self._token is None:
            return 0
        depth = self._breadcrumbs.depth()
        return depth + 1 if self._on_explicit_void() else depth

    def get_breadcrumbs(self) -> list[str]:
        """Types of the open blocks, outermost first, as of the current token."""
        if self._token is None:
            return []
        breadcrumbs = self._breadcrumbs.breadcrumbs()
        if self._on_explicit_void():
            breadcrumbs.append(self._token.block_type)
        return breadcrumbs

    # =========================================================================
    # Attributes
    # =========================================================================

    def get_raw_attributes(self) -> str | None:
        """Attribute JSON of the current delimiter exactly as written."""
        token = self._token
        if token is None or token.attributes_span is None:
            return None
        return token.attributes_span.slice(self._source)

    def parse_attributes(self) -> dict[str, Any] | None:
        """Decode the current delimiter's attributes.

        Returns:
            The decoded mapping, or None when there is no current
            delimiter or the JSON is invalid (see get_last_json_error()).
            A delimiter without attributes gives an empty mapping.
            The result is memoized per token and is not copied.
        """
        token = self._token
        if token is None or token.is_html:
            return None
        if self._parsed is None:
            attributes_span = token.attributes_span
            if attributes_span is None:
                self._parsed = ParsedAttributes({})
            else:
                self._parsed = decode_attributes(
                    attributes_span.slice(self._source),
                    offset=attributes_span.start,
                    config=self._config,
                )
                self._last_json_error = self._parsed.error
        return self._parsed.values

    def get_attributes(self) -> Any:
        """Lazily decoded attributes.

        Raises:
            UnsupportedOperationError: Always; use parse_attributes().
        """
        raise UnsupportedOperationError(
            "get_attributes", "Lazy attribute parsing not yet supported"
        )

    def get_last_json_error(self) -> JsonError | None:
        """Error from the most recent attribute decode that read JSON.

        Cleared by the next successful decode, not by advancing.
        """
        return self._last_json_error

    def get_last_error(self) -> ErrorKind | None:
        """Kind of the terminal error, once the processor has stopped on one."""
        return None if self._error is None else self._error.kind

    # =========================================================================
    # Queries
    # =========================================================================

    def is_block_type(self, block_type: str) -> bool:
        """Check the current token against a block type query.

        ``"*"`` matches any delimiter and top-level freeform HTML.
        ``"freeform"`` or ``"core/freeform"`` match top-level HTML only.
        Other queries compare fully-qualified names, with a bare name
        meaning the core namespace. HTML inside a block matches nothing.
        """
        token = self._token
        if token is None:
            return False
        if token.is_html:
            if self._breadcrumbs.depth() > 0:
                return False
            return block_type == ANY_BLOCK or FREEFORM.matches(block_type)
        if block_type == ANY_BLOCK:
            return True
        return token.block_name.matches(block_type)

    def opens_block(self, *block_types: str) -> bool:
        """Check whether the current token starts a block.

        Openers, voids and top-level freeform HTML start a block; closers
        never do. With ``block_types``, the token must also match one of
        them.
        """
        token = self._token
        if token is None:
            return False
        if token.delimiter_type is DelimiterType.CLOSER:
            return False
        if token.is_html and self._breadcrumbs.depth() > 0:
            return False
        if not block_types:
            return True
        return any(self.is_block_type(block_type) for block_type in block_types)

    def __repr__(self) -> str:
        return (
            f"BlockProcessor(pos={self._pos}, state={self._state.name}, "
            f"token={self._token!r})"
        )


__all__ = ["ANY_BLOCK", "BlockProcessor"]
