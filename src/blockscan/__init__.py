"""
Blockscan: Streaming Block Delimiter Scanner for Python 3.12+

Scans documents made of HTML interleaved with block delimiters written as
HTML comments, such as ``<!-- wp:paragraph -->``. Features a single-pass
O(n) processor, a legacy-compatible block tree, and zero runtime
dependencies.

Quick Start:
    >>> from blockscan import parse_blocks, serialize_blocks
    >>> blocks = parse_blocks('<!-- wp:paragraph --><p>Hi</p><!-- /wp:paragraph -->')
    >>> blocks[0].block_name
    'core/paragraph'
    >>> serialize_blocks(blocks)
    '<!-- wp:paragraph --><p>Hi</p><!-- /wp:paragraph -->'

    >>> # Or walk the delimiters yourself
    >>> from blockscan import BlockProcessor
    >>> processor = BlockProcessor('<!-- wp:image {"id":7} /-->')
    >>> processor.next_delimiter()
    Token(VOID, core/image, 0+27)
    >>> processor.parse_attributes()
    {'id': 7}

Installation:
    pip install blockscan
"""

from blockscan.attributes import JsonError, ParsedAttributes, parse_attributes
from blockscan.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from blockscan.errors import (
    BlockscanError,
    ErrorKind,
    InvalidBlockNameError,
    UnsupportedOperationError,
)
from blockscan.lexer import ANY_BLOCK, BlockProcessor, MatchStatus, ScanState
from blockscan.names import FREEFORM, BlockName
from blockscan.nodes import BlockNode
from blockscan.parser import parse_blocks
from blockscan.serialization import (
    from_dict,
    from_json,
    get_comment_delimited_block_content,
    serialize_block,
    serialize_block_attributes,
    serialize_blocks,
    strip_core_block_namespace,
    to_dict,
    to_json,
)
from blockscan.span import Span
from blockscan.tokens import (
    END_OF_INPUT,
    DelimiterType,
    EndOfInput,
    ScanError,
    ScanResult,
    Token,
)

__version__ = "0.1.0"

__all__ = [
    "ANY_BLOCK",
    "END_OF_INPUT",
    "FREEFORM",
    "BlockName",
    "BlockNode",
    "BlockProcessor",
    "BlockscanError",
    "DelimiterType",
    "EndOfInput",
    "ErrorKind",
    "InvalidBlockNameError",
    "JsonError",
    "MatchStatus",
    "ParsedAttributes",
    "ScanConfig",
    "ScanError",
    "ScanResult",
    "ScanState",
    "Span",
    "Token",
    "UnsupportedOperationError",
    "__version__",
    "from_dict",
    "from_json",
    "get_comment_delimited_block_content",
    "get_scan_config",
    "parse_attributes",
    "parse_blocks",
    "reset_scan_config",
    "scan_config_context",
    "serialize_block",
    "serialize_block_attributes",
    "serialize_blocks",
    "set_scan_config",
    "strip_core_block_namespace",
    "to_dict",
    "to_json",
]
