"""HTTP header names and header value parameters.

Canonical header-name constants, ``Content-Type`` and ``Keep-Alive``
parameter extraction, and the capitalization rule for header names
received in lower case.

Usage::

    from wren.http.headers import extract_content_type_charset

    charset = extract_content_type_charset("text/html; charset=utf-8")  # "utf-8"
"""

import logging

logger = logging.getLogger("wren.http")

HEADER_ACCEPT = "Accept"
HEADER_ACCEPT_ENCODING = "Accept-Encoding"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONNECTION = "Connection"
HEADER_CONTENT_ENCODING = "Content-Encoding"
HEADER_CONTENT_LENGTH = "Content-Length"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_ETAG = "ETag"
HEADER_HOST = "Host"
HEADER_IF_MATCH = "If-Match"
HEADER_IF_NONE_MATCH = "If-None-Match"
HEADER_KEEP_ALIVE = "Keep-Alive"
HEADER_LOCATION = "Location"
HEADER_REFERER = "Referer"
HEADER_USER_AGENT = "User-Agent"
HEADER_WWW_AUTHENTICATE = "WWW-Authenticate"

# Connection header tokens
HEADER_KEEP_ALIVE_VALUE = "keep-alive"
HEADER_CLOSE = "close"

# Exact, case-sensitive matches that the capitalization rule gets wrong
_SPECIAL_NAMES: dict[str, str] = {
    "etag": HEADER_ETAG,
    "www-authenticate": HEADER_WWW_AUTHENTICATE,
}


def _convert_case(char: str, upper: bool) -> str:
    converted = char.upper() if upper else char.lower()
    # One character in, one out (e.g. "ß".upper() is "SS")
    return converted if len(converted) == 1 else char


def prepare_header_parameter_name(name: str) -> str:
    """Capitalize a header name: ``content-type`` → ``Content-Type``.

    The first character and every character after a ``-`` are upper-cased,
    all others lower-cased; hyphens are kept as they are. ``etag`` and
    ``www-authenticate`` map to ``ETag`` and ``WWW-Authenticate``.
    """
    special = _SPECIAL_NAMES.get(name)
    if special is not None:
        return special

    chars: list[str] = []
    capitalize = True
    for char in name:
        if char == "-":
            capitalize = True
            chars.append(char)
            continue
        chars.append(_convert_case(char, capitalize))
        capitalize = False
    return "".join(chars)


def extract_media_type(content_type: str) -> str:
    """Return the media type of a ``Content-Type`` value (text before ``;``).

    The value is returned untrimmed.
    """
    return content_type.partition(";")[0]


def extract_header_parameter(header: str, parameter: str, separator: str) -> str | None:
    """Return the value of ``parameter=value`` inside a header value.

    Only text following *separator* is searched, so the leading segment
    (e.g. the media type of a ``Content-Type``) is never a match. Spaces
    after the separator are skipped and names compare case-insensitively.
    The value ends at the next ``;`` (whatever the separator) or at the
    end of the header.

    Returns ``None`` when the parameter is absent, or when a separator is
    not followed by any ``=``.

    Examples::

        >>> extract_header_parameter("a=1;b=2", "b", ";")
        '2'
        >>> extract_header_parameter("text/html; Charset=latin1", "charset", ";")
        'latin1'
        >>> extract_header_parameter("text/html", "charset", ";") is None
        True
    """
    wanted = parameter.lower()
    length = len(header)
    index = 0

    while True:
        index = header.find(separator, index)
        if index == -1:
            return None
        index += len(separator)

        while index < length and header[index] == " ":
            index += 1

        eq_index = header.find("=", index)
        if eq_index == -1:
            logger.debug("No '=' after %r at index %d in header %r", separator, index, header)
            return None

        name = header[index:eq_index]
        eq_index += 1
        if name.lower() != wanted:
            index = eq_index
            continue

        end = header.find(";", eq_index)
        if end == -1:
            return header[eq_index:]
        return header[eq_index:end]


def _extract_list_parameter(header: str, parameter: str, separator: str) -> str | None:
    # Each entry is scanned on its own, so one entry's value cannot run
    # into the next. A later entry with no "=" still ends the search.
    for position, entry in enumerate(header.split(separator)):
        if position and "=" not in entry:
            logger.debug("No '=' in entry %r of header %r", entry, header)
            return None
        value = extract_header_parameter(separator + entry, parameter, separator)
        if value is not None:
            return value
    return None


def extract_content_type_charset(content_type: str) -> str | None:
    """Return the ``charset`` parameter of a ``Content-Type`` value, if any."""
    return extract_header_parameter(content_type, "charset", ";")


def extract_keep_alive_timeout(keep_alive: str) -> str | None:
    """Return the ``timeout`` parameter of a ``Keep-Alive`` value, if any."""
    return _extract_list_parameter(keep_alive, "timeout", ",")


def extract_keep_alive_max(keep_alive: str) -> str | None:
    """Return the ``max`` parameter of a ``Keep-Alive`` value, if any."""
    return _extract_list_parameter(keep_alive, "max", ",")
