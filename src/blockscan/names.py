"""Block type names and the character rules that govern them.

A block type is written ``namespace/name`` inside a delimiter. The namespace
is optional and defaults to ``core``, so ``paragraph`` and ``core/paragraph``
name the same block.

Each segment follows ``[a-z][a-z0-9]*(-[a-z0-9]+)*``: it starts with a
lowercase letter, and dashes only appear between alphanumerics.

Thread Safety:
BlockName is frozen (immutable) and safe to share across threads.
Character sets are module-level frozensets.

"""

from __future__ import annotations

from dataclasses import dataclass

from blockscan.errors import InvalidBlockNameError

DEFAULT_NAMESPACE = "core"

# Segment start: lowercase ASCII letter
NAME_START_CHARS: frozenset[str] = frozenset("abcdefghijklmnopqrstuvwxyz")

# Segment body (dashes handled separately)
NAME_CHARS: frozenset[str] = NAME_START_CHARS | frozenset("0123456789")


def is_valid_segment(segment: str) -> bool:
    """Check whether ``segment`` is a well-formed namespace or name."""
    if not segment or segment[0] not in NAME_START_CHARS:
        return False
    previous_dash = False
    for char in segment[1:]:
        if char == "-":
            if previous_dash:
                return False
            previous_dash = True
        elif char in NAME_CHARS:
            previous_dash = False
        else:
            return False
    return not previous_dash


@dataclass(frozen=True, slots=True)
class BlockName:
    """A fully-qualified block type.

    Comparisons against user queries go through :meth:`matches`, which
    applies namespace defaulting instead of concatenating strings at each
    call site.

    Attributes:
        namespace: Namespace segment (``core`` when omitted in the source)
        name: Name segment

    Examples:
            >>> BlockName.from_string("paragraph")
            BlockName(namespace='core', name='paragraph')
            >>> str(BlockName("my-plugin", "card"))
            'my-plugin/card'
            >>> BlockName("core", "group").matches("group")
            True

    """

    namespace: str
    name: str

    @classmethod
    def from_string(cls, block_type: str, *, strict: bool = False) -> BlockName:
        """Split ``block_type`` into namespace and name.

        Args:
            block_type: ``name`` or ``namespace/name``
            strict: Validate both segments against the delimiter grammar

        Raises:
            InvalidBlockNameError: If ``strict`` and the name would not scan.
        """
        namespace, slash, name = block_type.partition("/")
        if not slash:
            namespace, name = DEFAULT_NAMESPACE, block_type
        if strict and not (is_valid_segment(namespace) and is_valid_segment(name)):
            raise InvalidBlockNameError(block_type)
        return cls(namespace, name)

    @property
    def is_core(self) -> bool:
        return self.namespace == DEFAULT_NAMESPACE

    def matches(self, query: str) -> bool:
        """Check this name against a bare or fully-qualified query."""
        namespace, slash, name = query.partition("/")
        if not slash:
            return self.namespace == DEFAULT_NAMESPACE and self.name == query
        return self.namespace == namespace and self.name == name

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}"


# Implicit type of top-level non-block content
FREEFORM = BlockName(DEFAULT_NAMESPACE, "freeform")

# Printable stand-in for HTML found inside a block
INNER_HTML_LABEL = "#innerHTML"
