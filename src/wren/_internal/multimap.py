"""Multi-valued mapping protocols shared by ``HttpMultiMap`` and ``QueryParams``.

Structural protocols so query helpers can accept any ordered
multi-valued collection without coupling to the concrete type.
"""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class MultiValueMapping(Protocol):
    """A read-only string mapping where keys can have multiple values.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.

    Structurally compatible with ``Mapping[str, str]`` plus ``get_list``.
    Defined with explicit dunder methods because Python 3.14 Protocols
    cannot inherit from non-Protocol ABCs like ``Mapping``.
    """

    def __getitem__(self, key: str) -> str: ...
    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def __len__(self) -> int: ...
    def get(self, key: str, default: str | None = None) -> str | None: ...
    def get_list(self, key: str) -> list[str]: ...


@runtime_checkable
class QueryCollection(Protocol):
    """An ordered list of ``(name, value)`` entries with duplicates allowed.

    What ``build_query`` reads and ``parse_query`` fills. A ``None``
    value means the name appeared without ``=``.
    """

    def add(self, key: str, value: object | None) -> "QueryCollection": ...
    def items(self) -> Iterator[tuple[str, object | None]]: ...
    def __len__(self) -> int: ...
