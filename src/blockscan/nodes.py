"""Block tree nodes.

BlockNode mirrors the legacy array-based block representation field for
field, so trees built by the extractor can be handed to code expecting
that shape via :meth:`BlockNode.to_dict`:

    {
        "blockName": "core/paragraph" | None,
        "attrs": {...},
        "innerBlocks": [...],
        "innerHTML": "...",
        "innerContent": ["html", None, "html"],
    }

In ``inner_content`` each ``None`` is a placeholder for the next entry of
``inner_blocks``; the interleaving is what lets a serializer reproduce the
original markup.

Thread Safety:
Nodes are frozen. Attribute mappings are owned by their node and are not
shared between nodes.

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, TypeAlias

InnerContent: TypeAlias = str | None


@dataclass(frozen=True, slots=True)
class BlockNode:
    """A parsed block and everything inside it.

    Attributes:
        block_name: Fully-qualified block type, or None for freeform HTML
        attributes: Decoded JSON attributes (empty when absent or invalid)
        inner_blocks: Child blocks in document order
        inner_html: HTML directly inside this block, children excluded
        inner_content: HTML chunks interleaved with None placeholders

    """

    block_name: str | None
    attributes: dict[str, Any] = field(default_factory=dict)
    inner_blocks: tuple[BlockNode, ...] = ()
    inner_html: str = ""
    inner_content: tuple[InnerContent, ...] = ()

    @classmethod
    def freeform(cls, html: str) -> BlockNode:
        """Node for top-level content outside any block."""
        return cls(None, {}, (), html, (html,))

    @classmethod
    def create(
        cls,
        block_name: str | None,
        attributes: Mapping[str, Any] | None = None,
        content: Sequence[str | BlockNode] = (),
    ) -> BlockNode:
        """Build a node from mixed HTML and child nodes.

        Example:
            >>> node = BlockNode.create(
            ...     "core/group", content=["<div>", BlockNode.create("core/spacer"), "</div>"]
            ... )
            >>> node.inner_content
            ('<div>', None, '</div>')
            >>> node.inner_html
            '<div></div>'

        """
        inner_blocks: list[BlockNode] = []
        inner_content: list[InnerContent] = []
        html_parts: list[str] = []
        for part in content:
            if isinstance(part, BlockNode):
                inner_blocks.append(part)
                inner_content.append(None)
            else:
                html_parts.append(part)
                inner_content.append(part)
        return cls(
            block_name,
            dict(attributes or {}),
            tuple(inner_blocks),
            "".join(html_parts),
            tuple(inner_content),
        )

    @property
    def is_freeform(self) -> bool:
        return self.block_name is None

    def iter_inner_content(self) -> Iterator[str | BlockNode]:
        """Yield HTML chunks and child nodes in document order."""
        children = iter(self.inner_blocks)
        for chunk in self.inner_content:
            yield next(children) if chunk is None else chunk

    def to_dict(self) -> dict[str, Any]:
        """Convert to the legacy array form."""
        return {
            "blockName": self.block_name,
            "attrs": dict(self.attributes),
            "innerBlocks": [child.to_dict() for child in self.inner_blocks],
            "innerHTML": self.inner_html,
            "innerContent": list(self.inner_content),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BlockNode:
        """Reconstruct a node from the legacy array form.

        Raises:
            ValueError: If a legacy key is missing or placeholders and
                inner blocks disagree.

        """
        missing = [
            key
            for key in ("blockName", "attrs", "innerBlocks", "innerHTML", "innerContent")
            if key not in data
        ]
        if missing:
            msg = f"Missing legacy block keys: {', '.join(missing)}"
            raise ValueError(msg)

        inner_blocks = tuple(cls.from_dict(child) for child in data["innerBlocks"])
        inner_content = tuple(data["innerContent"])
        placeholders = sum(1 for chunk in inner_content if chunk is None)
        if placeholders != len(inner_blocks):
            msg = (
                f"innerContent has {placeholders} placeholders "
                f"but there are {len(inner_blocks)} innerBlocks"
            )
            raise ValueError(msg)

        return cls(
            data["blockName"],
            dict(data["attrs"] or {}),
            inner_blocks,
            data["innerHTML"],
            inner_content,
        )
