"""OEM single-byte code page tables.

DOS "OEM" code pages that the large table family does not cover are handled
with a pair of exact lookup tables per page: character to byte for encoding
and byte to character for decoding. The tables are built from the charmap
codecs shipped with Python on first use and then shared read-only for the
life of the process.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
import logging
from types import MappingProxyType

_LOGGER = logging.getLogger(__name__)

# Source charmap codec for each OEM code page
OEM_CODEPAGE_SOURCES: dict[int, str] = {
    437: "cp437",  # OEM United States
    720: "cp720",  # Arabic (Transparent ASMO); Arabic (DOS)
    737: "cp737",  # OEM Greek (formerly 437G); Greek (DOS)
    775: "cp775",  # OEM Baltic; Baltic (DOS)
    850: "cp850",  # OEM Multilingual Latin 1; Western European (DOS)
    852: "cp852",  # OEM Latin 2; Central European (DOS)
    855: "cp855",  # OEM Cyrillic (primarily Russian)
    857: "cp857",  # OEM Turkish; Turkish (DOS)
    858: "cp858",  # OEM Multilingual Latin 1 + Euro symbol
    860: "cp860",  # OEM Portuguese; Portuguese (DOS)
    861: "cp861",  # OEM Icelandic; Icelandic (DOS)
    862: "cp862",  # OEM Hebrew; Hebrew (DOS)
    863: "cp863",  # OEM French Canadian; French Canadian (DOS)
    864: "cp864",  # OEM Arabic; Arabic (864)
    865: "cp865",  # OEM Nordic; Nordic (DOS)
    869: "cp869",  # OEM Modern Greek; Greek, Modern (DOS)
}

EncodingTable = Mapping[str, int]
DecodingTable = tuple[str | None, ...]


@dataclass(frozen=True)
class OemTables:
    """Encode and decode tables for one OEM code page."""

    encode: EncodingTable
    decode: DecodingTable


def _build_decoding_table(codec: str) -> DecodingTable:
    """Decode every upper byte value on its own, keeping None for undefined bytes.

    Bytes below 0x80 are ASCII on every OEM page. Some charmap codecs
    deviate there (cp864 maps 0x25 to ARABIC PERCENT SIGN), so the lower
    half is not taken from the codec.
    """
    table: list[str | None] = [chr(value) for value in range(0x80)]
    for value in range(0x80, 0x100):
        try:
            table.append(bytes((value,)).decode(codec))
        except UnicodeDecodeError:
            table.append(None)
    return tuple(table)


@lru_cache(maxsize=1)
def _get_decoding_tables() -> Mapping[int, DecodingTable]:
    """Build the byte to character tables for all OEM code pages (cached).

    Returns:
        Read-only mapping from code page number to a 256 entry tuple.
        Pages whose source codec is missing are left out.
    """
    tables: dict[int, DecodingTable] = {}
    for codepage, codec in OEM_CODEPAGE_SOURCES.items():
        try:
            tables[codepage] = _build_decoding_table(codec)
        except LookupError:
            _LOGGER.warning("Codec '%s' for OEM code page %d is not available", codec, codepage)
    _LOGGER.debug("Built OEM decoding tables for %d code pages", len(tables))
    return MappingProxyType(tables)


@lru_cache(maxsize=1)
def _get_encoding_tables() -> Mapping[int, EncodingTable]:
    """Build the character to byte tables for all OEM code pages (cached).

    Each table is the exact inverse of the decoding table of the same page,
    so both families always share one key set.

    Returns:
        Read-only mapping from code page number to a character to byte map.
    """
    tables: dict[int, EncodingTable] = {}
    for codepage, decoding in _get_decoding_tables().items():
        encoding: dict[str, int] = {}
        for value, char in enumerate(decoding):
            if char is not None:
                encoding.setdefault(char, value)
        tables[codepage] = MappingProxyType(encoding)
    _LOGGER.debug("Built OEM encoding tables for %d code pages", len(tables))
    return MappingProxyType(tables)


def get_encoding_table(codepage: int) -> EncodingTable | None:
    """Get the character to byte table for an OEM code page, if any."""
    return _get_encoding_tables().get(codepage)


def get_decoding_table(codepage: int) -> DecodingTable | None:
    """Get the byte to character table for an OEM code page, if any."""
    return _get_decoding_tables().get(codepage)


def get_oem_codepages() -> list[int]:
    """Get all code pages served by the OEM tables.

    Returns:
        Sorted list of code page numbers with both tables present.
    """
    encoding = _get_encoding_tables()
    return sorted(cp for cp in _get_decoding_tables() if cp in encoding)


def clear_table_cache() -> None:
    """Clear the OEM table caches.

    Useful for testing.
    """
    _get_encoding_tables.cache_clear()
    _get_decoding_tables.cache_clear()
