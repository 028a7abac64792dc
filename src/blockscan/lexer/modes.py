"""Processor states and delimiter grammar constants.

This module defines the finite state machine states for the processor
and the literal pieces of the block delimiter grammar.
"""

from __future__ import annotations

from enum import Enum, auto


class ScanState(Enum):
    """Processor states.

    SCANNING moves to SCANNING, END_OF_INPUT or ERRORED:
    - SCANNING: More tokens may follow
    - END_OF_INPUT: The whole document was consumed
    - ERRORED: Stopped on incomplete input (sticky)

    """

    SCANNING = auto()
    END_OF_INPUT = auto()
    ERRORED = auto()


class MatchStatus(Enum):
    """Delimiter matcher outcomes other than a match."""

    NO_MATCH = auto()  # Can never become a delimiter
    INCOMPLETE = auto()  # Could become a delimiter with more input


# Delimiter grammar literals
COMMENT_OPENER = "<!--"
COMMENT_CLOSER = "-->"
VOID_CLOSER = "/-->"
DELIMITER_PREFIX = "wp:"

# Whitespace as defined by HTML (no vertical tab)
HTML_WHITESPACE: frozenset[str] = frozenset(" \t\n\f\r")
