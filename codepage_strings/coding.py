"""Resolve Windows code pages and transcode strings with them.

A code page number is resolved once into an immutable Coding, which is then
reused for any number of encode/decode calls. A Coding is one of four kinds:

1. IDENTITY: code page 65001, bytes are UTF-8.
2. UTF16: code pages 1200 (little-endian) and 1201 (big-endian).
3. LARGE_TABLE: a codec from the Python codec registry (Windows, ISO 8859,
   Mac and KOI8 pages), see codepage_mapping.
4. OEM_TABLE: an exact single-byte lookup table pair for DOS OEM pages,
   see oem_tables.

Decoding comes in two flavours that callers choose explicitly: decode()
fails on any invalid input, decode_lossy() substitutes U+FFFD for each
invalid unit and never fails.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from enum import Enum
import logging

from .codepage_mapping import CODEPAGE_TO_CODEC, lookup_codec
from .config import validate_codepage
from .const import (
    CP_UTF8,
    CP_UTF16BE,
    CP_UTF16LE,
    ERRORS_REPLACE,
    ERRORS_STRICT,
    REPLACEMENT_CHARACTER,
    UNSUPPORTED_CODEPAGES,
)
from .errors import (
    StringDecodingError,
    StringEncodingError,
    UnknownCodepageError,
    UnsupportedCodepageError,
)
from .oem_tables import OemTables, get_decoding_table, get_encoding_table, get_oem_codepages

_LOGGER = logging.getLogger(__name__)

BytesLike = bytes | bytearray | memoryview


class CodingKind(Enum):
    """Backend kind a code page resolved to."""

    LARGE_TABLE = "large_table"
    OEM_TABLE = "oem_table"
    UTF16 = "utf16"
    IDENTITY = "identity"


class ByteOrder(Enum):
    """Byte order of 16-bit code units."""

    LITTLE = "little"
    BIG = "big"


_UTF8_CODEC = codecs.lookup("utf-8")
_UTF16_CODECS: dict[ByteOrder, codecs.CodecInfo] = {
    ByteOrder.LITTLE: codecs.lookup("utf-16-le"),
    ByteOrder.BIG: codecs.lookup("utf-16-be"),
}


@dataclass(frozen=True)
class Coding:
    """Coding information derived from a Windows code page.

    Exactly one payload matching `kind` is populated: `codec` for
    LARGE_TABLE, `tables` for OEM_TABLE, `byte_order` for UTF16 and none
    for IDENTITY. Use resolve() (or Coding.new()) to create one.
    """

    kind: CodingKind
    codepage: int
    codec: codecs.CodecInfo | None = field(default=None, compare=False, repr=False)
    tables: OemTables | None = field(default=None, compare=False, repr=False)
    byte_order: ByteOrder | None = None

    @classmethod
    def new(cls, codepage: int) -> Coding:
        """Get a coding for the given code page (alias for resolve)."""
        return resolve(codepage)

    @property
    def name(self) -> str:
        """Descriptive encoding name, e.g. "cp1257" or "utf-16-le"."""
        if self.kind is CodingKind.OEM_TABLE:
            return f"cp{self.codepage}"
        return self._codec_info().name

    def _codec_info(self) -> codecs.CodecInfo:
        """Python codec backing every kind except OEM_TABLE."""
        if self.kind is CodingKind.IDENTITY:
            return _UTF8_CODEC
        if self.kind is CodingKind.UTF16:
            return _UTF16_CODECS[self.byte_order]  # type: ignore[index]
        return self.codec  # type: ignore[return-value]

    def encode(self, text: str) -> bytes:
        """Encode a string into bytes according to this coding.

        Args:
            text: Text to encode.

        Returns:
            Encoded bytes.

        Raises:
            StringEncodingError: If any character cannot be encoded. No
                partial output is produced.
        """
        if self.kind is CodingKind.OEM_TABLE:
            return self._encode_oem(text)

        # Lone surrogates are rejected by every codec-backed kind
        try:
            return self._codec_info().encode(text, ERRORS_STRICT)[0]
        except UnicodeEncodeError as err:
            raise StringEncodingError(self.codepage) from err

    def decode(self, data: BytesLike) -> str:
        """Decode bytes into a string according to this coding.

        Args:
            data: Bytes to decode.

        Returns:
            Decoded text.

        Raises:
            StringDecodingError: If any byte sequence cannot be decoded.
        """
        data = bytes(data)
        if self.kind is CodingKind.OEM_TABLE:
            return self._decode_oem(data, lossy=False)

        if self.kind is CodingKind.UTF16 and len(data) % 2:
            raise StringDecodingError(self.codepage)

        try:
            return self._codec_info().decode(data, ERRORS_STRICT)[0]
        except UnicodeDecodeError as err:
            raise StringDecodingError(self.codepage) from err

    def decode_lossy(self, data: BytesLike) -> str:
        """Decode bytes into a string, replacing undecodable input.

        Each invalid unit (an unmapped byte, an invalid UTF-8 sequence, an
        unpaired UTF-16 surrogate or a dangling trailing UTF-16 byte) is
        replaced by one U+FFFD replacement character.

        Args:
            data: Bytes to decode.

        Returns:
            Decoded text.
        """
        data = bytes(data)
        if self.kind is CodingKind.OEM_TABLE:
            return self._decode_oem(data, lossy=True)

        if self.kind is CodingKind.UTF16 and len(data) % 2:
            # The dangling byte is one invalid unit whatever the byte order
            text = self._codec_info().decode(data[:-1], ERRORS_REPLACE)[0]
            return text + REPLACEMENT_CHARACTER

        return self._codec_info().decode(data, ERRORS_REPLACE)[0]

    def _encode_oem(self, text: str) -> bytes:
        table = self.tables.encode  # type: ignore[union-attr]
        out = bytearray()
        for char in text:
            value = table.get(char)
            if value is None:
                raise StringEncodingError(self.codepage)
            out.append(value)
        return bytes(out)

    def _decode_oem(self, data: bytes, lossy: bool) -> str:
        table = self.tables.decode  # type: ignore[union-attr]
        result: list[str] = []
        for value in data:
            char = table[value]
            if char is None:
                if not lossy:
                    raise StringDecodingError(self.codepage)
                char = REPLACEMENT_CHARACTER
            result.append(char)
        return "".join(result)


def resolve(codepage: int) -> Coding:
    """Get a coding for the given Windows code page.

    Resolution order, first match wins:
    1. 65001 is UTF-8 (identity).
    2. 1200 and 1201 are UTF-16 little- and big-endian.
    3. Recognized pages that are not implemented (UTF-32, UTF-7, multibyte
       CJK, EBCDIC) are refused.
    4. Pages known to the large table family use a Python codec.
    5. Pages with both OEM tables use table lookup.

    Args:
        codepage: Windows code page number (0-65535).

    Returns:
        Immutable coding for the code page.

    Raises:
        UnknownCodepageError: If no backend recognizes the code page.
        UnsupportedCodepageError: If the code page is deliberately unsupported.
    """
    codepage = validate_codepage(codepage)

    if codepage == CP_UTF8:
        return _resolved(Coding(CodingKind.IDENTITY, codepage))
    if codepage == CP_UTF16LE:
        return _resolved(Coding(CodingKind.UTF16, codepage, byte_order=ByteOrder.LITTLE))
    if codepage == CP_UTF16BE:
        return _resolved(Coding(CodingKind.UTF16, codepage, byte_order=ByteOrder.BIG))

    if codepage in UNSUPPORTED_CODEPAGES:
        _LOGGER.debug("Code page %d is recognized but not supported", codepage)
        raise UnsupportedCodepageError(codepage)

    codec = lookup_codec(codepage)
    if codec is not None:
        return _resolved(Coding(CodingKind.LARGE_TABLE, codepage, codec=codec))

    # Both directions are looked up independently and must agree
    encode = get_encoding_table(codepage)
    decode = get_decoding_table(codepage)
    if encode is None or decode is None:
        if (encode is None) != (decode is None):
            _LOGGER.warning("OEM tables for code page %d are incomplete", codepage)
        _LOGGER.debug("Code page %d is unknown", codepage)
        raise UnknownCodepageError(codepage)

    return _resolved(Coding(CodingKind.OEM_TABLE, codepage, tables=OemTables(encode, decode)))


def _resolved(coding: Coding) -> Coding:
    _LOGGER.debug("Resolved code page %d to %s", coding.codepage, coding.kind.value)
    return coding


def is_supported(codepage: int) -> bool:
    """Check whether a code page can be resolved.

    Args:
        codepage: Windows code page number.

    Returns:
        True if resolve() would succeed for the code page.
    """
    try:
        resolve(codepage)
    except (UnknownCodepageError, UnsupportedCodepageError):
        return False
    return True


def supported_codepages() -> list[int]:
    """Get all code pages that resolve() accepts.

    Returns:
        Sorted list of code page numbers.
    """
    pages = {CP_UTF8, CP_UTF16LE, CP_UTF16BE}
    pages.update(cp for cp in CODEPAGE_TO_CODEC if lookup_codec(cp) is not None)
    pages.update(get_oem_codepages())
    return sorted(pages - UNSUPPORTED_CODEPAGES)


def unsupported_codepages() -> list[int]:
    """Get the recognized code pages that are deliberately not supported.

    Returns:
        Sorted list of code page numbers.
    """
    return sorted(UNSUPPORTED_CODEPAGES)
