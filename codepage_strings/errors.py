"""Exceptions raised by code page resolution and conversion."""

from __future__ import annotations


class ConvertError(Exception):
    """Base class for all code page conversion errors."""

    message = "code page conversion error"

    def __init__(self, codepage: int | None = None, message: str | None = None) -> None:
        """Initialize the error.

        Args:
            codepage: Code page the failed operation was working with, if known.
            message: Override for the default message of the error class.
        """
        self.codepage = codepage
        if message is not None:
            self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.codepage is None:
            return self.message
        return f"{self.message}: {self.codepage}"


class ResolutionError(ConvertError, LookupError):
    """A code page number could not be resolved to a coding."""


class UnknownCodepageError(ResolutionError):
    """No backend recognizes the requested code page."""

    message = "invalid / unknown Windows code page"


class UnsupportedCodepageError(ResolutionError):
    """The code page is recognized but deliberately not implemented."""

    message = "cannot transcode this Windows code page"


class StringEncodingError(ConvertError, ValueError):
    """At least one character has no representation in the code page."""

    message = "string codepage encoding error"


class StringDecodingError(ConvertError, ValueError):
    """At least one byte sequence is invalid in the code page."""

    message = "string decoding error"
