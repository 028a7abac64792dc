"""Tests for the exception hierarchy."""

import pytest

from blockscan import (
    BlockscanError,
    ErrorKind,
    InvalidBlockNameError,
    UnsupportedOperationError,
)


class TestHierarchy:
    """Every package error derives from BlockscanError."""

    @pytest.mark.parametrize("error_class", [UnsupportedOperationError, InvalidBlockNameError])
    def test_subclass(self, error_class: type[Exception]) -> None:
        assert issubclass(error_class, BlockscanError)

    def test_unsupported_operation(self) -> None:
        error = UnsupportedOperationError("get_attributes", "not yet")
        assert isinstance(error, NotImplementedError)
        assert error.operation == "get_attributes"
        assert error.kind is ErrorKind.UNSUPPORTED
        assert str(error) == "not yet"

    def test_invalid_block_name_message(self) -> None:
        error = InvalidBlockNameError("Bad/Name")
        assert isinstance(error, ValueError)
        assert "'Bad/Name'" in str(error)


class TestErrorKind:
    """Error kinds carry stable string values."""

    def test_values(self) -> None:
        assert ErrorKind.INCOMPLETE_INPUT.value == "incomplete-input"
        assert ErrorKind.JSON_ERROR.value == "json-error"
        assert ErrorKind.UNSUPPORTED.value == "unsupported"
