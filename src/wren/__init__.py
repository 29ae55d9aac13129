"""Wren — small, pure helpers for HTTP clients.

Builds and parses query strings, normalizes header names, pulls
parameters out of header values, and tells absolute URLs from
relative ones. No I/O, no state.

Basic usage::

    from wren import HttpMultiMap, build_query, parse_query

    query = build_query(HttpMultiMap().add("q", "hello world").add("flag", None))
    # "q=hello%20world&flag"

    params = parse_query("q=hello+world&flag")
    params.get("q")  # "hello world"
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DecodeError",
    "EncodeError",
    "HttpMultiMap",
    "QueryConfig",
    "QueryParams",
    "UnsupportedEncodingError",
    "WrenError",
    "build_query",
    "decode_query",
    "encode_query_param",
    "extract_content_type_charset",
    "extract_header_parameter",
    "extract_keep_alive_max",
    "extract_keep_alive_timeout",
    "extract_media_type",
    "is_absolute_url",
    "parse_query",
    "prepare_header_parameter_name",
]

# Public name -> defining module. Resolved on first attribute access.
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "wren.errors",
    "DecodeError": "wren.errors",
    "EncodeError": "wren.errors",
    "UnsupportedEncodingError": "wren.errors",
    "WrenError": "wren.errors",
    "QueryConfig": "wren.config",
    "HttpMultiMap": "wren.http.multimap",
    "decode_query": "wren.http.codec",
    "encode_query_param": "wren.http.codec",
    "QueryParams": "wren.http.query",
    "build_query": "wren.http.query",
    "parse_query": "wren.http.query",
    "extract_content_type_charset": "wren.http.headers",
    "extract_header_parameter": "wren.http.headers",
    "extract_keep_alive_max": "wren.http.headers",
    "extract_keep_alive_timeout": "wren.http.headers",
    "extract_media_type": "wren.http.headers",
    "prepare_header_parameter_name": "wren.http.headers",
    "is_absolute_url": "wren.http.urls",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
