"""Attribute parsing for block delimiters.

The matcher only checks that the attributes blob is bracketed by ``{`` and
``}``; decoding happens here, on request, and never affects whether the
delimiter itself matched. Malformed JSON produces a JsonError value instead
of an exception.

Thread Safety:
All functions are pure. Results are frozen dataclasses.

"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any

from blockscan.config import ScanConfig, get_scan_config
from blockscan.errors import ErrorKind
from blockscan.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class JsonError:
    """Why an attributes blob could not be decoded.

    Attributes:
        message: Decoder message
        position: Offset in the document where decoding failed

    """

    message: str
    position: int

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.JSON_ERROR

    def __str__(self) -> str:
        return f"{self.message} (at offset {self.position})"


@dataclass(frozen=True, slots=True)
class ParsedAttributes:
    """Result of decoding an attributes blob.

    Exactly one of ``values`` and ``error`` is set.
    """

    values: dict[str, Any] | None
    error: JsonError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _reject_non_finite(constant: str) -> float:
    raise ValueError(f"{constant} is not a valid JSON number")


def _finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"{literal} is out of range for a JSON number")
    return value


def _nesting_depth(value: Any) -> int:
    """Deepest object/array nesting in a decoded value (iterative)."""
    deepest = 0
    stack: list[tuple[Any, int]] = [(value, 1)]
    while stack:
        current, depth = stack.pop()
        if isinstance(current, dict):
            children = current.values()
        elif isinstance(current, list):
            children = current
        else:
            continue
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in children)
    return deepest


def _failure(message: str, position: int) -> ParsedAttributes:
    logger.debug("Could not decode block attributes: %s at offset %d", message, position)
    return ParsedAttributes(None, JsonError(message, position))


def parse_attributes(
    raw: str,
    *,
    offset: int = 0,
    config: ScanConfig | None = None,
) -> ParsedAttributes:
    """Decode a raw attributes blob as a strict JSON object.

    Args:
        raw: Attribute text, starting with ``{`` and ending with ``}``
        offset: Document offset of ``raw``, used for error positions
        config: Overrides the active ScanConfig

    Returns:
        ParsedAttributes holding either the decoded mapping or a JsonError.

    Example:
        >>> parse_attributes('{"level":2}').values
        {'level': 2}
        >>> parse_attributes('{"level": 14e6e7-3}').values is None
        True

    """
    if config is None:
        config = get_scan_config()

    if config.allow_non_finite_numbers:
        parse_constant = parse_float = None
    else:
        parse_constant, parse_float = _reject_non_finite, _finite_float
    try:
        values = json.loads(
            raw, parse_constant=parse_constant, parse_float=parse_float
        )
    except json.JSONDecodeError as exc:
        return _failure(exc.msg, offset + exc.pos)
    except ValueError as exc:
        return _failure(str(exc), offset)
    except RecursionError:
        return _failure("Maximum nesting depth exceeded", offset)

    if not isinstance(values, dict):
        return _failure("Block attributes must be a JSON object", offset)

    if _nesting_depth(values) > config.max_attribute_depth:
        return _failure(
            f"Nesting deeper than {config.max_attribute_depth} levels", offset
        )

    return ParsedAttributes(values)


__all__ = ["JsonError", "ParsedAttributes", "parse_attributes"]
