"""Tests for the conversion error taxonomy."""

import pytest

from codepage_strings import (
    ConvertError,
    ResolutionError,
    StringDecodingError,
    StringEncodingError,
    UnknownCodepageError,
    UnsupportedCodepageError,
)


class TestErrorMessages:
    """Tests for error messages."""

    @pytest.mark.parametrize(
        ("error_cls", "message"),
        [
            (StringEncodingError, "string codepage encoding error"),
            (StringDecodingError, "string decoding error"),
            (UnknownCodepageError, "invalid / unknown Windows code page"),
            (UnsupportedCodepageError, "cannot transcode this Windows code page"),
        ],
    )
    def test_default_message(self, error_cls: type[ConvertError], message: str) -> None:
        assert str(error_cls()) == message

    def test_message_with_codepage(self) -> None:
        err = UnsupportedCodepageError(65000)
        assert err.codepage == 65000
        assert str(err) == "cannot transcode this Windows code page: 65000"

    def test_message_override(self) -> None:
        err = UnknownCodepageError(message="invalid / unknown Windows code page 'latin1'")
        assert err.codepage is None
        assert str(err) == "invalid / unknown Windows code page 'latin1'"


class TestErrorHierarchy:
    """Tests for exception base classes."""

    def test_resolution_errors_are_lookup_errors(self) -> None:
        assert issubclass(ResolutionError, LookupError)
        assert issubclass(UnknownCodepageError, ConvertError)

    def test_string_errors_are_value_errors(self) -> None:
        assert issubclass(StringEncodingError, ValueError)
        assert issubclass(StringDecodingError, ValueError)
        assert not issubclass(StringEncodingError, ResolutionError)

    def test_catch_all_with_base(self) -> None:
        with pytest.raises(ConvertError):
            raise StringDecodingError(869)
