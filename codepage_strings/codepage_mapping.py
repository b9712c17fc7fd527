"""Windows code page to Python codec mapping.

This module provides the CODEPAGE_TO_CODEC dictionary and get_codec_name function
for the "large table" family: code pages handled by a codec from the Python
codec registry. DOS OEM pages the family does not list are served by
oem_tables instead.
"""

from __future__ import annotations

import codecs
import logging

_LOGGER = logging.getLogger(__name__)

# Mapping from Windows code page numbers to Python codec names
CODEPAGE_TO_CODEC: dict[int, str] = {
    866: "cp866",  # OEM Russian; Cyrillic (DOS)
    874: "cp874",  # Thai (Windows)
    1250: "cp1250",  # Central European (Windows)
    1251: "cp1251",  # Cyrillic (Windows)
    1252: "cp1252",  # Western European (Windows)
    1253: "cp1253",  # Greek (Windows)
    1254: "cp1254",  # Turkish (Windows)
    1255: "cp1255",  # Hebrew (Windows)
    1256: "cp1256",  # Arabic (Windows)
    1257: "cp1257",  # Baltic (Windows)
    1258: "cp1258",  # Vietnamese (Windows)
    10000: "mac_roman",  # Western European (Mac)
    10006: "mac_greek",  # Greek (Mac)
    10007: "mac_cyrillic",  # Cyrillic (Mac)
    10029: "mac_latin2",  # Central European (Mac)
    10079: "mac_iceland",  # Icelandic (Mac)
    10081: "mac_turkish",  # Turkish (Mac)
    20127: "ascii",  # US-ASCII (7-bit)
    20866: "koi8_r",  # Russian (KOI8-R)
    21866: "koi8_u",  # Ukrainian (KOI8-U)
    28591: "latin_1",  # ISO 8859-1 Western European
    28592: "iso8859_2",  # ISO 8859-2 Central European
    28593: "iso8859_3",  # ISO 8859-3 Latin 3
    28594: "iso8859_4",  # ISO 8859-4 Baltic
    28595: "iso8859_5",  # ISO 8859-5 Cyrillic
    28596: "iso8859_6",  # ISO 8859-6 Arabic
    28597: "iso8859_7",  # ISO 8859-7 Greek
    28598: "iso8859_8",  # ISO 8859-8 Hebrew; Hebrew (ISO-Visual)
    28599: "iso8859_9",  # ISO 8859-9 Turkish
    28603: "iso8859_13",  # ISO 8859-13 Estonian
    28605: "iso8859_15",  # ISO 8859-15 Latin 9
    38598: "iso8859_8",  # ISO 8859-8 Hebrew; Hebrew (ISO-Logical)
}


def get_codec_name(codepage: int) -> str | None:
    """Get Python codec name for a code page.

    Args:
        codepage: Windows code page number (e.g., 1252).

    Returns:
        Python codec name, or None if the code page is not in the family.
    """
    return CODEPAGE_TO_CODEC.get(codepage)


def lookup_codec(codepage: int) -> codecs.CodecInfo | None:
    """Look up the Python codec for a code page in the large table family.

    Args:
        codepage: Windows code page number.

    Returns:
        CodecInfo for the code page, or None if the family does not know it
        or the running interpreter lacks the codec.
    """
    name = get_codec_name(codepage)
    if name is None:
        return None

    try:
        return codecs.lookup(name)
    except LookupError:
        _LOGGER.warning("Codec '%s' for code page %d is not available", name, codepage)
        return None
