"""Block serialization: BlockNode trees back to delimited markup, and JSON.

serialize_blocks() is the inverse of parse_blocks() for markup it produced
itself:

    >>> from blockscan import parse_blocks
    >>> markup = '<!-- wp:heading {"level":2} --><h2>Hi</h2><!-- /wp:heading -->'
    >>> serialize_blocks(parse_blocks(markup)) == markup
    True

Attribute JSON is encoded so that it can never end the surrounding HTML
comment early or be mistaken for markup: ``--``, ``<``, ``>``, ``&`` and
escaped quotes and backslashes are written as unicode escapes.

to_json()/from_json() store trees in the legacy array form, e.g. for
caching parsed documents.

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
import re
from collections.abc import Iterable, Mapping
from typing import Any

from blockscan.names import DEFAULT_NAMESPACE, BlockName
from blockscan.nodes import BlockNode

_CORE_PREFIX = f"{DEFAULT_NAMESPACE}/"

# JSON-escaped backslash or quote, comment dashes, and markup characters
_UNSAFE_JSON = re.compile(r'\\\\|\\"|--|[<>&]')


def _unicode_escape(match: re.Match[str]) -> str:
    text = match.group()
    if text.startswith("\\"):
        # Drop the JSON escape and re-escape the character it stands for
        text = text[1:]
    return "".join("\\u%04x" % ord(char) for char in text)


def strip_core_block_namespace(block_name: str | None) -> str | None:
    """Drop the implicit ``core/`` namespace from a block type.

    Example:
        >>> strip_core_block_namespace("core/paragraph")
        'paragraph'
        >>> strip_core_block_namespace("my-plugin/card")
        'my-plugin/card'

    """
    if block_name is not None and block_name.startswith(_CORE_PREFIX):
        return block_name[len(_CORE_PREFIX) :]
    return block_name


def serialize_block_attributes(attributes: Mapping[str, Any]) -> str:
    """Encode block attributes as JSON safe to embed in an HTML comment.

    Raises:
        ValueError: If a value is NaN or infinite, which would not scan back
            as JSON.

    Example:
        >>> serialize_block_attributes({"url": "https://example.com/a"})
        '{"url":"https://example.com/a"}'

    """
    encoded = json.dumps(
        attributes, ensure_ascii=False, separators=(",", ":"), allow_nan=False
    )
    return _UNSAFE_JSON.sub(_unicode_escape, encoded)


def get_comment_delimited_block_content(
    block_name: str | None,
    attributes: Mapping[str, Any],
    content: str,
) -> str:
    """Wrap block content in its delimiters.

    Freeform content (no block name) is returned as is. Empty content
    gives a void delimiter. Empty attributes are left out.

    Raises:
        InvalidBlockNameError: If the block name would not scan back.

    Example:
        >>> get_comment_delimited_block_content("core/separator", {}, "")
        '<!-- wp:separator /-->'

    """
    if block_name is None:
        return content

    BlockName.from_string(block_name, strict=True)
    serialized_name = strip_core_block_namespace(block_name)
    serialized_attributes = (
        f"{serialize_block_attributes(attributes)} " if attributes else ""
    )

    if not content:
        return f"<!-- wp:{serialized_name} {serialized_attributes}/-->"

    return (
        f"<!-- wp:{serialized_name} {serialized_attributes}-->"
        f"{content}"
        f"<!-- /wp:{serialized_name} -->"
    )


def serialize_block(block: BlockNode) -> str:
    """Serialize one block and everything inside it."""
    content = "".join(
        part if isinstance(part, str) else serialize_block(part)
        for part in block.iter_inner_content()
    )
    return get_comment_delimited_block_content(
        block.block_name, block.attributes, content
    )


def serialize_blocks(blocks: Iterable[BlockNode]) -> str:
    """Serialize a sequence of top-level blocks into a document."""
    return "".join(serialize_block(block) for block in blocks)


def to_dict(block: BlockNode) -> dict[str, Any]:
    """Convert a block to the legacy array form."""
    return block.to_dict()


def from_dict(data: Mapping[str, Any]) -> BlockNode:
    """Reconstruct a block from the legacy array form.

    Raises:
        ValueError: If the data is not a legacy block.

    """
    return BlockNode.from_dict(data)


def to_json(blocks: Iterable[BlockNode], *, indent: int | None = None) -> str:
    """Serialize blocks to a JSON string in the legacy array form.

    Attribute order is preserved, so serializing the restored tree gives
    the same markup as serializing the original.

    Args:
        blocks: Top-level blocks.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps([to_dict(block) for block in blocks], indent=indent)


def from_json(data: str) -> list[BlockNode]:
    """Deserialize blocks from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        Top-level blocks.

    Raises:
        ValueError: If the JSON is not a list of legacy blocks.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a list of blocks, got {type(raw).__name__}"
        raise ValueError(msg)
    return [from_dict(item) for item in raw]


__all__ = [
    "from_dict",
    "from_json",
    "get_comment_delimited_block_content",
    "serialize_block",
    "serialize_block_attributes",
    "serialize_blocks",
    "strip_core_block_namespace",
    "to_dict",
    "to_json",
]
