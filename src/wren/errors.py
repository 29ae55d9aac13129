"""Wren exception hierarchy.

Shared across the codec, query and config modules so every helper
raises and callers catch the same types.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when a ``QueryConfig`` is invalid.

    Typically raised from ``QueryConfig.__post_init__`` at construction.
    """


class UnsupportedEncodingError(WrenError, LookupError):
    """The named character encoding is not known to Python's codec registry."""

    def __init__(self, encoding: str) -> None:
        self.encoding = encoding
        super().__init__(f"Unsupported encoding: {encoding!r}")


class EncodeError(WrenError, ValueError):
    """Text cannot be represented in the requested encoding."""

    def __init__(self, value: str, encoding: str) -> None:
        self.value = value
        self.encoding = encoding
        super().__init__(f"Cannot encode {value!r} as {encoding}")


class DecodeError(WrenError, ValueError):
    """A percent-encoded query component is malformed.

    ``position`` is the index of the offending ``%`` escape, or ``None``
    when the escapes were well-formed but the resulting bytes are not
    valid in the requested encoding.
    """

    def __init__(self, value: str, position: int | None = None, reason: str = "") -> None:
        self.value = value
        self.position = position
        detail = reason or "malformed percent-encoding"
        if position is not None:
            detail = f"{detail} at index {position}"
        super().__init__(f"Cannot decode {value!r}: {detail}")
