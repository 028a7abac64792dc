"""Exception classes for blockscan.

Malformed input is never an exception: incomplete delimiters and invalid
attribute JSON are reported as values by the processor. The classes here
cover caller mistakes only.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Conditions the processor can report.

    - INCOMPLETE_INPUT: the document ends partway through a possible delimiter
    - JSON_ERROR: a matched delimiter carries undecodable attributes
    - UNSUPPORTED: an unimplemented operation was called

    """

    INCOMPLETE_INPUT = "incomplete-input"
    JSON_ERROR = "json-error"
    UNSUPPORTED = "unsupported"


class BlockscanError(Exception):
    """Base exception for all blockscan errors.

    Subclass this for specific error categories.
    """

    pass


class UnsupportedOperationError(BlockscanError, NotImplementedError):
    """An operation that exists on the public surface but is not implemented.

    Raised by the lazy attribute accessor, which is kept as an explicit
    extension point rather than silently falling back to eager parsing.
    """

    def __init__(self, operation: str, message: str) -> None:
        """Initialize unsupported-operation error.

        Args:
            operation: Name of the method that was called
            message: Description of what is unsupported
        """
        self.operation = operation
        self.kind = ErrorKind.UNSUPPORTED
        super().__init__(message)


class InvalidBlockNameError(BlockscanError, ValueError):
    """A block type that cannot be written as a delimiter.

    Raised when strict validation is requested, e.g. by the serializer,
    so that serialized output always scans back to the same block type.
    """

    def __init__(self, block_type: str) -> None:
        self.block_type = block_type
        super().__init__(
            f"Invalid block type {block_type!r}: expected 'name' or 'namespace/name' "
            "made of lowercase letters, digits and single inner dashes"
        )
