"""Block extraction mixin.

Builds a BlockNode for the block at the current token by scanning forward
through its inner content and its closer. Nested blocks are extracted
recursively, so a closer seen at this level always belongs to the block
being built.
"""

from __future__ import annotations

from typing import Any

from blockscan.lexer.breadcrumbs import BreadcrumbStack
from blockscan.nodes import BlockNode, InnerContent
from blockscan.tokens import DelimiterType, ScanError, ScanResult, Token


class BlockExtractorMixin:
    """Mixin providing whole-block extraction for the processor."""

    # These will be set by the BlockProcessor class
    _source: str
    _token: Token | None
    _breadcrumbs: BreadcrumbStack

    def next_token(self) -> ScanResult:
        """Advance to the next token. Implemented by BlockProcessor."""
        raise NotImplementedError

    def get_html_content(self) -> str | None:
        """Text of the current HTML token. Implemented by BlockProcessor."""
        raise NotImplementedError

    def parse_attributes(self) -> dict[str, Any] | None:
        """Decoded attributes of the current token. Implemented by BlockProcessor."""
        raise NotImplementedError

    def extract_full_block_and_advance(self) -> BlockNode | None:
        """Build the block starting at the current token and move past it.

        - Opener: collects inner HTML and nested blocks up to the matching
          closer, leaving the processor on that closer. If the document
          ends inside a possible delimiter, the innermost open block keeps
          the unscanned remainder as its last run of HTML.
        - Void: an empty block, processor stays put.
        - Top-level HTML: a freeform node holding that HTML.

        Returns:
            The extracted node, or None when there is no current token or
            it is a closer or HTML inside a block.

        Example:
            >>> processor = BlockProcessor('<!-- wp:quote --><p>Hi</p><!-- /wp:quote -->')
            >>> processor.next_block()
            Token(OPENER, core/quote, 0+17)
            >>> processor.extract_full_block_and_advance().inner_html
            '<p>Hi</p>'

        """
        token = self._token
        if token is None:
            return None

        if token.is_html:
            if self._breadcrumbs.depth() > 0:
                return None
            return BlockNode.freeform(self.get_html_content() or "")

        if token.delimiter_type is DelimiterType.CLOSER:
            return None

        block_type = token.block_type
        attributes = self.parse_attributes() or {}
        if token.delimiter_type is DelimiterType.VOID:
            return BlockNode(block_type, attributes)

        level = self._breadcrumbs.depth()
        inner_blocks: list[BlockNode] = []
        inner_content: list[InnerContent] = []
        html_parts: list[str] = []

        while step := self.next_token():
            if step.is_html:
                html = self.get_html_content() or ""
                html_parts.append(html)
                inner_content.append(html)
            elif step.delimiter_type is DelimiterType.CLOSER:
                break
            else:
                child = self.extract_full_block_and_advance()
                if child is not None:
                    inner_blocks.append(child)
                    inner_content.append(None)

        if isinstance(step, ScanError) and self._breadcrumbs.depth() == level:
            tail = self._source[step.at :]
            html_parts.append(tail)
            if inner_content and isinstance(inner_content[-1], str):
                inner_content[-1] += tail
            else:
                inner_content.append(tail)

        return BlockNode(
            block_type,
            attributes,
            tuple(inner_blocks),
            "".join(html_parts),
            tuple(inner_content),
        )


__all__ = ["BlockExtractorMixin"]
