"""Query string building and parsing.

``build_query`` and ``parse_query`` are the two directions;
``QueryParams`` is an immutable ``Mapping[str, str]`` view over a parsed
query string that also implements the ``MultiValueMapping`` protocol.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import TypeAlias

from wren._internal.multimap import QueryCollection
from wren.config import QueryConfig
from wren.http.codec import DEFAULT_ENCODING, decode_query, encode_query_param, lookup_encoding
from wren.http.multimap import HttpMultiMap

QueryInput: TypeAlias = QueryCollection | Mapping[str, object] | Iterable[tuple[str, object]]


def _entries(query_map: QueryInput) -> list[tuple[str, object | None]]:
    if isinstance(query_map, Mapping):
        return list(query_map.items())
    items = getattr(query_map, "items", None)
    if callable(items):
        return list(items())
    return list(query_map)  # type: ignore[arg-type]


def _is_blank(text: str) -> bool:
    # Control characters and spaces only; Unicode spaces such as U+2003 are content
    return all(char <= " " for char in text)


def build_query(query_map: QueryInput, encoding: str = DEFAULT_ENCODING) -> str:
    """Build a query string (without the leading ``?``) from *query_map*.

    Entries are emitted in iteration order. A ``None`` value emits the
    encoded name alone, anything else emits ``name=value`` with
    ``str(value)`` encoded. Returns ``""`` for an empty collection.

    Raises:
        UnsupportedEncodingError: If *encoding* is unknown.
        EncodeError: If a name or value cannot be represented in *encoding*.
    """
    entries = _entries(query_map)
    if not entries:
        return ""

    lookup_encoding(encoding)
    tokens: list[str] = []
    for key, value in entries:
        name = encode_query_param(key, encoding)
        if value is None:
            tokens.append(name)
        else:
            tokens.append(f"{name}={encode_query_param(str(value), encoding)}")
    return "&".join(tokens)


def parse_query(
    query: str,
    decode: bool = True,
    encoding: str = DEFAULT_ENCODING,
    *,
    case_sensitive: bool = False,
) -> HttpMultiMap:
    """Parse a raw query string (no leading ``?``) into an ``HttpMultiMap``.

    Tokens are split on ``&`` and then on their first ``=``. A token with
    no ``=`` becomes a name with a ``None`` value and is kept verbatim,
    even when empty: ``"a&&b"`` yields ``a``, ``""`` and ``b``. A trailing
    ``&`` adds nothing. With *decode*, names and values are
    query-decoded (``+`` is a space).

    Raises:
        DecodeError: If *decode* is set and a component is malformed.
        UnsupportedEncodingError: If *decode* is set and *encoding* is unknown.
    """
    result = HttpMultiMap(case_sensitive=case_sensitive)
    if _is_blank(query):
        return result
    if decode:
        lookup_encoding(encoding)

    length = len(query)
    start = 0
    while start < length:
        end = query.find("&", start)
        if end == -1:
            end = length

        token = query[start:end]
        name, eq, value = token.partition("=")
        if not eq:
            result.add(token, None)
        else:
            if decode:
                name = decode_query(name, encoding)
                value = decode_query(value, encoding)
            result.add(name, value)

        start = end + 1

    return result


class QueryParams(Mapping[str, str]):
    """Immutable query string parameters.

    Attributes:
        _multi: Parsed entries, in order, duplicates included.
        _raw: Raw query string, without a leading ``?``.
        _config: Decoding and lookup settings used to parse ``_raw``.

    ``__getitem__`` returns the first value for a key; a name given
    without ``=`` reads as ``""``. ``get_list`` returns all values.
    Lookups are case-insensitive unless ``config.case_sensitive`` is set.
    """

    _multi: HttpMultiMap
    _raw: str
    _config: QueryConfig

    __slots__ = ("_config", "_multi", "_raw")

    def __init__(self, query_string: str | bytes = "", config: QueryConfig | None = None) -> None:
        if config is None:
            config = QueryConfig()
        if isinstance(query_string, bytes):
            query_string = query_string.decode("latin-1")
        raw = query_string.removeprefix("?")
        object.__setattr__(self, "_raw", raw)
        object.__setattr__(self, "_config", config)
        parsed = parse_query(
            raw,
            decode=config.decode,
            encoding=config.encoding,
            case_sensitive=config.case_sensitive,
        )
        object.__setattr__(self, "_multi", parsed)

    def __getitem__(self, key: str) -> str:
        value = self._multi[key]
        return "" if value is None else value

    def __contains__(self, key: object) -> bool:
        return key in self._multi

    def __iter__(self) -> Iterator[str]:
        return iter(self._multi.keys())

    def __len__(self) -> int:
        return len(self._multi.keys())

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"QueryParams({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        if key not in self._multi:
            return default
        return self[key]

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        return ["" if value is None else value for value in self._multi.get_list(key)]

    def get_int(self, key: str, default: int | None = None) -> int | None:
        """Return value as int, or *default* if missing or not numeric."""
        value = self.get(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def get_bool(self, key: str, default: bool | None = None) -> bool | None:
        """Return value as bool (``true``/``1``/``yes``/``on`` → True)."""
        value = self.get(key)
        if value is None:
            return default
        return value.lower() in ("true", "1", "yes", "on")

    @property
    def multi(self) -> HttpMultiMap:
        """The parsed entries, ``None`` values and duplicates included."""
        return self._multi

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def config(self) -> QueryConfig:
        return self._config

    def to_query_string(self) -> str:
        """Re-encode the parameters with the configured encoding."""
        return build_query(self._multi, self._config.encoding)
