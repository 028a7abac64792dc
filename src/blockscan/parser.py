"""Whole-document block parser.

Turns a document into its list of top-level blocks, the way the legacy
array-based parser does, by driving a BlockProcessor and extracting each
block it stops on.

Content is never dropped: HTML outside any block becomes freeform nodes,
and a document that ends inside a possible delimiter keeps its unscanned
tail: inside the innermost block still open, or as a final freeform node
when no block is open.

Thread Safety:
parse_blocks() creates its own processor per call.

"""

from __future__ import annotations

from blockscan.config import ScanConfig, get_scan_config
from blockscan.lexer.core import ANY_BLOCK, BlockProcessor
from blockscan.nodes import BlockNode
from blockscan.tokens import ScanError
from blockscan.utils.logger import get_logger

logger = get_logger(__name__)


def parse_blocks(document: str, *, config: ScanConfig | None = None) -> list[BlockNode]:
    """Parse a document into top-level blocks.

    Closers with no open block are skipped. Top-level whitespace between
    blocks is kept as freeform nodes unless the config asks to skip it.

    Args:
        document: Document text
        config: Overrides the active ScanConfig

    Returns:
        Top-level blocks in document order.

    Example:
        >>> blocks = parse_blocks("<!-- wp:spacer /-->\\n<p>Bye</p>")
        >>> [block.block_name for block in blocks]
        ['core/spacer', None]

    """
    if config is None:
        config = get_scan_config()

    processor = BlockProcessor(document, config)
    blocks: list[BlockNode] = []

    while outcome := processor.next_block(ANY_BLOCK):
        if (
            config.skip_whitespace_freeform
            and processor.is_freeform()
            and not processor.is_non_whitespace_html()
        ):
            continue
        block = processor.extract_full_block_and_advance()
        if block is not None:
            blocks.append(block)

    if isinstance(outcome, ScanError):
        logger.warning(
            "Document ends inside a possible block delimiter at offset %d; "
            "keeping the remainder as HTML",
            outcome.at,
        )
        if processor.open_depth == 0:
            blocks.append(BlockNode.freeform(document[outcome.at :]))

    return blocks


__all__ = ["parse_blocks"]
