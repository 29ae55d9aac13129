"""Absolute versus relative URL classification.

Follows RFC 3986 §4.2: a reference starting with ``/`` is an
absolute-path reference (still relative to the base URL), and a colon
in the first path segment would be read as a scheme separator.

Usage::

    from wren.http.urls import is_absolute_url

    if not is_absolute_url(location):
        location = base_url + location
"""


def is_absolute_url(url: str) -> bool:
    """Check whether *url* carries a scheme and a path (``http://host/...``).

    A URL is considered absolute when:

    - It does **not** start with ``/``
    - It contains a ``:``
    - It contains a ``/``, and the first ``:`` comes before it

    A scheme with no ``/`` at all (``mailto:x``) is not absolute.

    Examples::

        >>> is_absolute_url("http://host/path")
        True
        >>> is_absolute_url("this:that/path")
        True
        >>> is_absolute_url("/path")
        False
        >>> is_absolute_url("seg/this:that")
        False
        >>> is_absolute_url("path")
        False
        >>> is_absolute_url("mailto:x")
        False
    """
    if url.startswith("/"):
        return False
    colon_index = url.find(":")
    if colon_index == -1:
        return False
    # No slash leaves slash_index at -1, which every colon index exceeds
    slash_index = url.find("/")
    return colon_index < slash_index
