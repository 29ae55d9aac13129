"""Query handling configuration.

QueryConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from wren.errors import ConfigurationError, UnsupportedEncodingError
from wren.http.codec import DEFAULT_ENCODING, lookup_encoding


@dataclass(frozen=True, slots=True)
class QueryConfig:
    """How query strings are decoded and rebuilt. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = QueryConfig(encoding="ISO-8859-1", decode=False)
    """

    # Charset for percent-escapes, both directions
    encoding: str = DEFAULT_ENCODING

    # Percent-decode names and values while parsing
    decode: bool = True

    # Exact-case name lookups instead of case-insensitive ones
    case_sensitive: bool = False

    def __post_init__(self) -> None:
        try:
            lookup_encoding(self.encoding)
        except UnsupportedEncodingError as exc:
            msg = f"QueryConfig.encoding: {exc}"
            raise ConfigurationError(msg) from exc
