"""Constants for Windows code page transcoding."""

from __future__ import annotations

# Valid range for a Windows code page identifier (unsigned 16-bit)
CODEPAGE_MIN = 0
CODEPAGE_MAX = 0xFFFF

# Code pages handled without any table
CP_UTF16LE = 1200
CP_UTF16BE = 1201
CP_UTF8 = 65001

# Recognized Unicode code pages that are deliberately not implemented
CP_UTF32LE = 12000
CP_UTF32BE = 12001
CP_UTF7 = 65000

UNSUPPORTED_UNICODE_CODEPAGES: frozenset[int] = frozenset({CP_UTF32LE, CP_UTF32BE, CP_UTF7})

# Multibyte CJK code pages (not supported)
UNSUPPORTED_CJK_CODEPAGES: frozenset[int] = frozenset(
    {
        932,  # Shift_JIS
        936,  # GBK
        949,  # Korean Unified Hangul Code
        950,  # Big5
        1361,  # Korean Johab
        20932,  # EUC-JP (JIS 0208-1990 and 0212-1990)
        50220,  # ISO-2022-JP
        50221,  # ISO-2022-JP with halfwidth katakana
        50222,  # ISO-2022-JP JIS X 0201-1989
        50225,  # ISO-2022-KR
        51932,  # EUC-JP
        51936,  # EUC-CN
        51949,  # EUC-KR
        52936,  # HZ-GB2312
        54936,  # GB18030
    }
)

# EBCDIC code pages (not supported)
UNSUPPORTED_EBCDIC_CODEPAGES: frozenset[int] = frozenset(
    {
        37,  # IBM EBCDIC US-Canada
        500,  # IBM EBCDIC International
        875,  # IBM EBCDIC Greek Modern
        1026,  # IBM EBCDIC Turkish (Latin 5)
        1047,  # IBM EBCDIC Latin 1/Open System
        1140,  # IBM EBCDIC US-Canada with Euro
        20273,  # IBM EBCDIC Germany
        20424,  # IBM EBCDIC Hebrew
    }
)

UNSUPPORTED_CODEPAGES: frozenset[int] = (
    UNSUPPORTED_UNICODE_CODEPAGES | UNSUPPORTED_CJK_CODEPAGES | UNSUPPORTED_EBCDIC_CODEPAGES
)

# Unicode replacement character used by lossy decoding
REPLACEMENT_CHARACTER = "\ufffd"

# Configuration keys
CONF_CODEPAGE = "codepage"
CONF_ERRORS = "errors"

# Decoding error modes
ERRORS_STRICT = "strict"
ERRORS_REPLACE = "replace"
ERRORS_MODES: list[str] = [ERRORS_STRICT, ERRORS_REPLACE]
DEFAULT_ERRORS = ERRORS_STRICT

# Prefixes accepted in front of a code page number, longest first
CODEPAGE_NAME_PREFIXES: tuple[str, ...] = ("WINDOWS", "IBM", "CP")
