"""Depth and breadcrumb tracking.

An explicit stack of the blocks currently open at the scan position.
Openers push, closers pop, voids leave it alone. Closer names are not
checked against the opener they close: the stack is structural only, so
imbalanced documents are tracked rather than rejected.
"""

from __future__ import annotations

from blockscan.names import BlockName
from blockscan.tokens import DelimiterType, Token


class BreadcrumbStack:
    """Stack of open block names, oldest first.

    Usage:
            >>> stack = BreadcrumbStack()
            >>> stack.push(BlockName("core", "group"))
            >>> stack.push(BlockName("core", "columns"))
            >>> stack.breadcrumbs()
            ['core/group', 'core/columns']
            >>> stack.pop()
            BlockName(namespace='core', name='columns')
            >>> stack.depth()
            1

    """

    __slots__ = ("_open",)

    def __init__(self) -> None:
        self._open: list[BlockName] = []

    def push(self, name: BlockName) -> None:
        self._open.append(name)

    def pop(self) -> BlockName | None:
        """Close the innermost block; a closer with nothing open is ignored."""
        if not self._open:
            return None
        return self._open.pop()

    def apply(self, token: Token) -> None:
        """Update the stack for a delimiter token. HTML and voids are no-ops."""
        if token.block_name is None:
            return
        if token.delimiter_type is DelimiterType.OPENER:
            self.push(token.block_name)
        elif token.delimiter_type is DelimiterType.CLOSER:
            self.pop()

    def depth(self) -> int:
        return len(self._open)

    def names(self) -> list[BlockName]:
        """Copy of the open block names."""
        return list(self._open)

    def breadcrumbs(self) -> list[str]:
        """Copy of the open block types as fully-qualified strings."""
        return [str(name) for name in self._open]

    def __len__(self) -> int:
        return len(self._open)

    def __repr__(self) -> str:
        return f"BreadcrumbStack({self.breadcrumbs()!r})"
