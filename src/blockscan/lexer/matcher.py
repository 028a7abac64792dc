"""Delimiter matcher.

Recognizes one block delimiter at a given offset. The grammar is walked
token by token; running out of input before any check fails means the text
might still become a delimiter (INCOMPLETE), while any failed check means it
never can (NO_MATCH).

    <!-- wp:ns/name {"json": true} -->    opener
    <!-- wp:ns/name {"json": true} /-->   void
    <!-- /wp:ns/name -->                  closer

No regex. Every helper returns either the offset after what it consumed or
a negative status code, so a match attempt allocates nothing until it
succeeds.

Thread Safety:
Pure functions over immutable strings.

"""

from __future__ import annotations

from blockscan.lexer.modes import (
    COMMENT_CLOSER,
    COMMENT_OPENER,
    DELIMITER_PREFIX,
    VOID_CLOSER,
    MatchStatus,
)
from blockscan.names import DEFAULT_NAMESPACE, NAME_CHARS, NAME_START_CHARS, BlockName
from blockscan.span import Span
from blockscan.tokens import DelimiterType, Token

# Negative offsets stand in for MatchStatus inside the walk
_NO_MATCH = -1
_INCOMPLETE = -2


def _status(code: int) -> MatchStatus:
    return MatchStatus.INCOMPLETE if code == _INCOMPLETE else MatchStatus.NO_MATCH


def _expect(source: str, pos: int, literal: str) -> int:
    """Consume ``literal`` at ``pos``.

    A remainder that is a strict prefix of ``literal`` is incomplete.
    """
    if source.startswith(literal, pos):
        return pos + len(literal)
    remaining = len(source) - pos
    if remaining < len(literal) and literal.startswith(source[pos:]):
        return _INCOMPLETE
    return _NO_MATCH


def _scan_segment(source: str, pos: int) -> int:
    """Consume one namespace or name segment: [a-z][a-z0-9]*(-[a-z0-9]+)*.

    A segment reaching the end of input is incomplete, since more
    characters or the following separator may still arrive.
    """
    end = len(source)
    if pos >= end:
        return _INCOMPLETE
    if source[pos] not in NAME_START_CHARS:
        return _NO_MATCH
    pos += 1
    while pos < end:
        char = source[pos]
        if char in NAME_CHARS:
            pos += 1
        elif char == "-":
            if pos + 1 >= end:
                return _INCOMPLETE
            if source[pos + 1] not in NAME_CHARS:
                return _NO_MATCH
            pos += 2
        else:
            return pos
    return _INCOMPLETE


def _scan_attributes_end(source: str, pos: int) -> tuple[int, int, bool]:
    """Find the end of a JSON attributes blob starting at ``pos``.

    The blob runs to the first comment closer, which must be preceded by
    ``} `` or ``} /``.

    Returns:
        (blob_end, delimiter_end, is_void); blob_end is a status code on failure.
    """
    closer_at = source.find(COMMENT_CLOSER, pos)
    if closer_at == -1:
        return _INCOMPLETE, 0, False

    is_void = source[closer_at - 1] == "/"
    space_at = closer_at - 2 if is_void else closer_at - 1
    if (
        space_at - pos < 2
        or source[space_at] != " "
        or source[space_at - 1] != "}"
    ):
        return _NO_MATCH, 0, False
    return space_at, closer_at + len(COMMENT_CLOSER), is_void


def match_delimiter(source: str, at: int) -> Token | MatchStatus:
    """Try to recognize a block delimiter starting at ``at``.

    Args:
        source: The whole document
        at: Offset to probe

    Returns:
        A Token on success, otherwise MatchStatus.NO_MATCH when the
        text can never be a delimiter or MatchStatus.INCOMPLETE when the
        document ends inside what could still become one.

    Example:
        >>> match_delimiter("<!-- wp:paragraph -->", 0).block_name
        BlockName(namespace='core', name='paragraph')
        >>> match_delimiter("<!-- wp:paragraph", 0)
        <MatchStatus.INCOMPLETE: 2>

    """
    pos = _expect(source, at, COMMENT_OPENER)
    if pos < 0:
        return _status(pos)

    pos = _expect(source, pos, " ")
    if pos < 0:
        return _status(pos)

    if pos >= len(source):
        return MatchStatus.INCOMPLETE
    has_closing_flag = source[pos] == "/"
    if has_closing_flag:
        pos += 1

    pos = _expect(source, pos, DELIMITER_PREFIX)
    if pos < 0:
        return _status(pos)

    # namespace/name or bare name
    first_at = pos
    pos = _scan_segment(source, pos)
    if pos < 0:
        return _status(pos)
    if source[pos] == "/":
        name_at = pos + 1
        pos = _scan_segment(source, name_at)
        if pos < 0:
            return _status(pos)
        block_name = BlockName(source[first_at : name_at - 1], source[name_at:pos])
    else:
        block_name = BlockName(DEFAULT_NAMESPACE, source[first_at:pos])

    pos = _expect(source, pos, " ")
    if pos < 0:
        return _status(pos)
    if pos >= len(source):
        return MatchStatus.INCOMPLETE

    attributes_span = None
    is_void = False
    char = source[pos]
    if char == "{":
        if has_closing_flag:
            return MatchStatus.NO_MATCH
        blob_end, end, is_void = _scan_attributes_end(source, pos)
        if blob_end < 0:
            return _status(blob_end)
        attributes_span = Span(pos, blob_end - pos)
    elif char == "/":
        is_void = True
        end = _expect(source, pos, VOID_CLOSER)
    else:
        end = _expect(source, pos, COMMENT_CLOSER)
    if end < 0:
        return _status(end)

    if is_void:
        delimiter_type = DelimiterType.VOID
    elif has_closing_flag:
        delimiter_type = DelimiterType.CLOSER
    else:
        delimiter_type = DelimiterType.OPENER

    return Token(
        delimiter_type=delimiter_type,
        block_name=block_name,
        has_closing_flag=has_closing_flag,
        span=Span(at, end - at),
        attributes_span=attributes_span,
    )


def find_candidate(source: str, start: int) -> int:
    """Find the next offset at or after ``start`` where a delimiter could begin.

    That is the next ``<!--``, or a tail of the document that is a strict
    prefix of it (``<``, ``<!``, ``<!-``). Returns -1 if there is none.
    """
    found = source.find(COMMENT_OPENER, start)
    if found != -1:
        return found
    end = len(source)
    for size in range(len(COMMENT_OPENER) - 1, 0, -1):
        tail_at = end - size
        if tail_at >= start and source.startswith(COMMENT_OPENER[:size], tail_at):
            return tail_at
    return -1


__all__ = ["find_candidate", "match_delimiter"]
