"""Tests for block names, spans and token values."""

import pytest

from blockscan import (
    END_OF_INPUT,
    FREEFORM,
    BlockName,
    DelimiterType,
    ErrorKind,
    InvalidBlockNameError,
    ScanError,
    Span,
    Token,
)
from blockscan.names import is_valid_segment


class TestBlockName:
    """Namespace defaulting and matching."""

    def test_bare_name_defaults_to_core(self) -> None:
        assert BlockName.from_string("paragraph") == BlockName("core", "paragraph")

    def test_qualified_name(self) -> None:
        name = BlockName.from_string("my-plugin/card")
        assert name.namespace == "my-plugin"
        assert str(name) == "my-plugin/card"
        assert not name.is_core

    @pytest.mark.parametrize("query", ["group", "core/group"])
    def test_core_matches_bare_and_qualified(self, query: str) -> None:
        assert BlockName("core", "group").matches(query)

    def test_namespace_must_match(self) -> None:
        assert not BlockName("my", "group").matches("group")
        assert not BlockName("core", "group").matches("my/group")

    def test_freeform(self) -> None:
        assert str(FREEFORM) == "core/freeform"
        assert FREEFORM.matches("freeform")

    @pytest.mark.parametrize("block_type", ["Paragraph", "3d/block", "a--b", "core/", "a/b/c", "-x"])
    def test_strict_rejects(self, block_type: str) -> None:
        with pytest.raises(InvalidBlockNameError) as exc_info:
            BlockName.from_string(block_type, strict=True)
        assert exc_info.value.block_type == block_type

    def test_strict_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            BlockName.from_string("Bad", strict=True)

    def test_lenient_accepts_anything(self) -> None:
        assert BlockName.from_string("Bad Name").name == "Bad Name"


class TestSegments:
    """Segment grammar."""

    @pytest.mark.parametrize("segment", ["a", "core", "my-plugin", "the-5", "h1", "a-b-c"])
    def test_valid(self, segment: str) -> None:
        assert is_valid_segment(segment)

    @pytest.mark.parametrize("segment", ["", "5a", "a-", "-a", "a--b", "A", "a_b", "a/b"])
    def test_invalid(self, segment: str) -> None:
        assert not is_valid_segment(segment)


class TestSpan:
    """Span arithmetic."""

    def test_end_and_slice(self) -> None:
        span = Span(14, 2)
        assert span.end == 16
        assert span.slice("<!-- wp:pw --><><!-- /wp:pw -->") == "<>"

    def test_str(self) -> None:
        assert str(Span(3, 4)) == "3+4"


class TestTokens:
    """Token values and scan outcomes."""

    def test_html_token(self) -> None:
        token = Token(DelimiterType.VOID, None, False, Span(0, 4))
        assert token.is_html
        assert token.block_type is None
        assert repr(token) == "Token(HTML, 0+4)"

    def test_delimiter_token_repr(self) -> None:
        token = Token(DelimiterType.CLOSER, BlockName("core", "group"), True, Span(5, 18))
        assert token.block_type == "core/group"
        assert repr(token) == "Token(CLOSER, core/group, closing-flag, 5+18)"

    def test_token_is_truthy(self) -> None:
        assert Token(DelimiterType.VOID, None, False, Span(0, 1))

    def test_terminal_outcomes_are_falsy(self) -> None:
        assert not END_OF_INPUT
        assert not ScanError(ErrorKind.INCOMPLETE_INPUT, 0)

    def test_tokens_are_frozen(self) -> None:
        token = Token(DelimiterType.VOID, None, False, Span(0, 1))
        with pytest.raises(AttributeError):
            token.span = Span(1, 1)  # type: ignore[misc]
