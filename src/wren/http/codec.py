"""Percent-encoding for query string components.

Thin layer over stdlib ``urllib.parse`` that pins down the query
parameter character set and turns lenient stdlib behavior (unknown
codecs, stray ``%`` signs) into wren errors.
"""

import codecs
import logging
import re
from urllib.parse import quote_from_bytes, unquote_plus

from wren.errors import DecodeError, EncodeError, UnsupportedEncodingError

logger = logging.getLogger("wren.http")

DEFAULT_ENCODING = "UTF-8"

# Left verbatim in a query parameter on top of the unreserved set
# (A-Z a-z 0-9 - . _ ~). Excludes '&', '=' and '+', which carry meaning
# inside a query string.
QUERY_PARAM_SAFE = "!$'()*,;:@/?"

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def lookup_encoding(encoding: str) -> str:
    """Return the canonical codec name for *encoding*.

    Raises:
        UnsupportedEncodingError: If Python has no codec by that name, or the
            codec is a bytes-to-bytes or text-to-text transform (``hex``,
            ``base64``, ``rot13``) rather than a character encoding.
    """
    try:
        info = codecs.lookup(encoding)
    except (LookupError, TypeError):
        raise UnsupportedEncodingError(encoding) from None
    if not getattr(info, "_is_text_encoding", True):
        raise UnsupportedEncodingError(encoding)
    return info.name


def encode_query_param(value: str, encoding: str = DEFAULT_ENCODING) -> str:
    """Percent-encode *value* for use as a query parameter name or value.

    The text is first encoded to bytes with *encoding*; every byte outside
    the unreserved set and ``QUERY_PARAM_SAFE`` becomes an upper-case
    ``%XX`` escape. Spaces become ``%20``.

    Examples::

        >>> encode_query_param("a b&c=d+e")
        'a%20b%26c%3Dd%2Be'
        >>> encode_query_param("/path?x")
        '/path?x'
    """
    codec = lookup_encoding(encoding)
    try:
        data = value.encode(codec)
    except UnicodeEncodeError:
        raise EncodeError(value, encoding) from None
    return quote_from_bytes(data, safe=QUERY_PARAM_SAFE)


def decode_query(value: str, encoding: str = DEFAULT_ENCODING) -> str:
    """Decode a query component: ``+`` becomes a space, ``%XX`` a byte.

    Raises:
        DecodeError: If a ``%`` is not followed by two hex digits, or the
            escaped bytes are not valid in *encoding*.
        UnsupportedEncodingError: If *encoding* is unknown.
    """
    codec = lookup_encoding(encoding)
    match = _BAD_ESCAPE.search(value)
    if match is not None:
        logger.debug("Rejecting malformed escape in %r at index %d", value, match.start())
        raise DecodeError(value, match.start())
    try:
        return unquote_plus(value, encoding=codec, errors="strict")
    except UnicodeDecodeError as exc:
        raise DecodeError(value, reason=f"invalid {codec} byte sequence") from exc
