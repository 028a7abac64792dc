"""Streaming block delimiter scanner.

This package provides a single-pass processor over documents containing
HTML-comment block delimiters. It reports each delimiter and each run of
HTML between them as a token, tracks nesting, and can extract whole blocks.

Architecture:
lexer/
├── __init__.py          # Re-exports BlockProcessor, ScanState, MatchStatus
├── core.py              # BlockProcessor (advancing, accessors, queries)
├── extract.py           # Whole-block extraction mixin
├── matcher.py           # Delimiter recognition at one offset
├── breadcrumbs.py       # Stack of open blocks
└── modes.py             # ScanState, MatchStatus, grammar literals

Usage:
    >>> from blockscan.lexer import BlockProcessor
    >>> processor = BlockProcessor("<!-- wp:paragraph --><p>Hi</p><!-- /wp:paragraph -->")
    >>> for token in processor:
    ...     print(token, processor.get_depth())
Token(OPENER, core/paragraph, 0+21) 1
Token(HTML, 21+9) 1
Token(CLOSER, core/paragraph, closing-flag, 30+22) 0

"""

from blockscan.lexer.breadcrumbs import BreadcrumbStack
from blockscan.lexer.core import ANY_BLOCK, BlockProcessor
from blockscan.lexer.matcher import find_candidate, match_delimiter
from blockscan.lexer.modes import MatchStatus, ScanState

__all__ = [
    "ANY_BLOCK",
    "BlockProcessor",
    "BreadcrumbStack",
    "MatchStatus",
    "ScanState",
    "find_candidate",
    "match_delimiter",
]
