"""
Built-in filter functions and the default specifier table.

Every filter takes and returns ``str``. Byte-oriented filters (hashes,
base64, percent-encoding) operate on the UTF-8 encoding of their input.
"""

import base64
import hashlib
import json
import re
import zlib
from html.entities import codepoint2name
from typing import Callable, Dict
from urllib.parse import quote, quote_plus

_WS_RX = re.compile(r'\s+', re.ASCII)
_NON_ALPHA_RX = re.compile(r'[^A-Za-z]')
_NON_DIGIT_RX = re.compile(r'[^0-9]')

_TRIM_CHARS = ' \t\n\r\0\x0b'

_HTML_SPECIAL = str.maketrans({
    '&': '&amp;',
    '"': '&quot;',
    "'": '&#039;',
    '<': '&lt;',
    '>': '&gt;',
})
_HTML_ENTITIES = str.maketrans(
    {**{chr(cp): f'&{name};' for cp, name in codepoint2name.items()}, "'": '&#039;'}
)

_REGEX_META = frozenset('.\\+*?[^]$(){}=!<>|:-#')

_ASCII_UPPER = str.maketrans(
    'abcdefghijklmnopqrstuvwxyz', 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
)
_ASCII_LOWER = str.maketrans(
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ', 'abcdefghijklmnopqrstuvwxyz'
)


def _bzip2_crc_table() -> tuple:
    table = []
    for i in range(256):
        c = i << 24
        for _ in range(8):
            c = ((c << 1) ^ 0x04C11DB7) if c & 0x80000000 else (c << 1)
        table.append(c & 0xFFFFFFFF)
    return tuple(table)


_BZIP2_TABLE = _bzip2_crc_table()


def _utf8(s: str) -> bytes:
    return s.encode('utf-8', 'surrogatepass')


def alpha_only(s: str) -> str:
    return _NON_ALPHA_RX.sub('', s)


def digits_only(s: str) -> str:
    return _NON_DIGIT_RX.sub('', s)


def base64_encode(s: str) -> str:
    return base64.b64encode(_utf8(s)).decode('ascii')


def base64_url_encode(s: str) -> str:
    """URL-safe alphabet, without '=' padding."""
    return base64.urlsafe_b64encode(_utf8(s)).decode('ascii').rstrip('=')


def crc32_bzip2(s: str) -> str:
    """CRC-32/BZIP2, digest bytes written least-significant first.

    This is the layout produced by ``hash('crc32', ...)`` in PHP, so
    "123456789" hashes to ``181989fc``.
    """
    crc = 0xFFFFFFFF
    for byte in _utf8(s):
        crc = ((crc << 8) & 0xFFFFFFFF) ^ _BZIP2_TABLE[((crc >> 24) ^ byte) & 0xFF]
    crc ^= 0xFFFFFFFF
    return crc.to_bytes(4, 'little').hex()


def crc32b(s: str) -> str:
    return '%08x' % (zlib.crc32(_utf8(s)) & 0xFFFFFFFF)


def shell_escape(s: str) -> str:
    return "'" + s.replace("'", "'\\''") + "'"


def raw_url_encode(s: str) -> str:
    """RFC 3986 percent-encoding; only ``A-Za-z0-9-_.~`` pass through."""
    return quote(_utf8(s), safe='')


def url_encode(s: str) -> str:
    """Form encoding: space becomes '+', '~' is encoded."""
    return quote_plus(_utf8(s), safe='').replace('~', '%7E')


def path_encode(s: str) -> str:
    return '/'.join(raw_url_encode(part) for part in s.split('/'))


def html_special_chars(s: str) -> str:
    return s.translate(_HTML_SPECIAL)


def html_entities(s: str) -> str:
    return s.translate(_HTML_ENTITIES)


def json_escape(s: str) -> str:
    # '/' never occurs inside an escape sequence, so a blanket replace is safe.
    return json.dumps(s, ensure_ascii=True).replace('/', '\\/')


def lower(s: str) -> str:
    return s.lower()


def ascii_lower(s: str) -> str:
    return s.translate(_ASCII_LOWER)


def upper(s: str) -> str:
    return s.upper()


def ascii_upper(s: str) -> str:
    return s.translate(_ASCII_UPPER)


def md5_hex(s: str) -> str:
    return hashlib.md5(_utf8(s)).hexdigest()


def sha1_hex(s: str) -> str:
    return hashlib.sha1(_utf8(s)).hexdigest()


def sha256_hex(s: str) -> str:
    return hashlib.sha256(_utf8(s)).hexdigest()


def regex_escape(s: str) -> str:
    out = []
    for ch in s:
        if ch in _REGEX_META:
            out.append('\\' + ch)
        elif ch == '\0':
            out.append('\\000')
        else:
            out.append(ch)
    return ''.join(out)


def trim(s: str) -> str:
    return s.strip(_TRIM_CHARS)


def collapse_whitespace(s: str) -> str:
    return _WS_RX.sub(' ', s)


def strip_whitespace(s: str) -> str:
    return _WS_RX.sub('', s)


_DEFAULT_FILTERS: Dict[str, Callable[[str], str]] = {
    'a': alpha_only,
    'b': base64_encode,
    'B': base64_url_encode,
    'c': crc32_bzip2,
    'C': crc32b,
    'd': digits_only,
    'e': shell_escape,
    'f': path_encode,
    'h': html_special_chars,
    'H': html_entities,
    'j': json_escape,
    'l': lower,
    'L': ascii_lower,
    'm': md5_hex,
    'p': regex_escape,
    'r': raw_url_encode,
    'R': url_encode,
    's': sha1_hex,
    'S': sha256_hex,
    't': trim,
    'u': upper,
    'U': ascii_upper,
    'w': collapse_whitespace,
    'W': strip_whitespace,
}


def default_filters() -> Dict[str, Callable[[str], str]]:
    """Return a fresh copy of the default specifier → filter table."""
    return dict(_DEFAULT_FILTERS)
