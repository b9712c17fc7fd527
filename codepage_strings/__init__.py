"""Encode and decode strings using Windows code pages.

Windows code pages are still baked into a lot of binary file formats (RIFF
being a prominent example) to mark how internationalized text fields are
coded. This package resolves such a numeric code page into a reusable
Coding that encodes str to bytes and decodes bytes to str, strictly or
lossily.

Supported:
- 65001 (UTF-8), handled as an identity transformation.
- 1200 / 1201 (UTF-16LE / UTF-16BE).
- Windows, ISO 8859, Mac and KOI8 single-byte pages via Python codecs.
- DOS OEM single-byte pages via exact lookup tables.

UTF-32 (12000, 12001), UTF-7 (65000), multibyte CJK and EBCDIC code pages
are recognized but not supported.

Example, code page 869 (alternate Greek):

    >>> coding = Coding.new(869)
    >>> coding.encode("αβ")
    b'\\xd6\\xd7'
    >>> coding.decode(bytes([214, 215]))
    'αβ'
    >>> coding.decode_lossy(bytes([214, 147]))
    'α\\ufffd'
"""

from __future__ import annotations

from .codepage_mapping import CODEPAGE_TO_CODEC, get_codec_name
from .coding import (
    ByteOrder,
    Coding,
    CodingKind,
    is_supported,
    resolve,
    supported_codepages,
    unsupported_codepages,
)
from .config import CODEPAGE_SCHEMA, CODING_SCHEMA, parse_codepage, validate_coding_config
from .const import REPLACEMENT_CHARACTER, UNSUPPORTED_CODEPAGES
from .errors import (
    ConvertError,
    ResolutionError,
    StringDecodingError,
    StringEncodingError,
    UnknownCodepageError,
    UnsupportedCodepageError,
)
from .oem_tables import OEM_CODEPAGE_SOURCES, clear_table_cache

__all__ = [
    "CODEPAGE_SCHEMA",
    "CODEPAGE_TO_CODEC",
    "CODING_SCHEMA",
    "OEM_CODEPAGE_SOURCES",
    "REPLACEMENT_CHARACTER",
    "UNSUPPORTED_CODEPAGES",
    "ByteOrder",
    "Coding",
    "CodingKind",
    "ConvertError",
    "ResolutionError",
    "StringDecodingError",
    "StringEncodingError",
    "UnknownCodepageError",
    "UnsupportedCodepageError",
    "clear_table_cache",
    "get_codec_name",
    "is_supported",
    "parse_codepage",
    "resolve",
    "supported_codepages",
    "unsupported_codepages",
    "validate_coding_config",
]
