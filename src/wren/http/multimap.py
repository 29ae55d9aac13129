"""Ordered, case-insensitive HTTP multi-map.

Holds query parameters (or any name/value list) in insertion order,
duplicates included. Names are stored as given and compared
case-insensitively unless the map is created with ``case_sensitive=True``.
Satisfies the ``QueryCollection`` protocol.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

_MISSING = object()


class HttpMultiMap:
    """Ordered multi-map of ``str`` names to ``str | None`` values.

    Iterating yields ``(name, value)`` entries; ``len()`` counts entries,
    not distinct names. Use ``keys()`` for distinct names and
    ``get_list`` for every value of one name.

    Usage::

        params = HttpMultiMap().add("tag", "a").add("TAG", "b")
        params.get_list("tag")  # ["a", "b"]
    """

    __slots__ = ("_case_sensitive", "_entries")

    def __init__(
        self,
        entries: Mapping[str, str | None] | Iterable[tuple[str, str | None]] = (),
        *,
        case_sensitive: bool = False,
    ) -> None:
        self._case_sensitive = case_sensitive
        self._entries: list[tuple[str, str | None]] = []
        pairs = entries.items() if isinstance(entries, Mapping) else entries
        for key, value in pairs:
            self.add(key, value)

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    def _fold(self, key: str) -> str:
        return key if self._case_sensitive else key.lower()

    # -- Mutation --

    def add(self, key: str, value: str | None) -> HttpMultiMap:
        """Append an entry, keeping any existing values for *key*."""
        self._entries.append((key, value))
        return self

    def set(self, key: str, value: str | None) -> HttpMultiMap:
        """Replace every entry for *key* with a single one, appended last."""
        self.remove(key)
        return self.add(key, value)

    def remove(self, key: str) -> HttpMultiMap:
        """Drop every entry for *key*. Missing keys are ignored."""
        folded = self._fold(key)
        self._entries = [(k, v) for k, v in self._entries if self._fold(k) != folded]
        return self

    def clear(self) -> HttpMultiMap:
        self._entries.clear()
        return self

    # -- Lookup --

    def __getitem__(self, key: str) -> str | None:
        value = self.get(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value  # type: ignore[return-value]

    def get(self, key: str, default: object = None) -> str | None:
        """Return the first value for *key*, or *default* if missing.

        A name that was added without a value yields ``None``.
        """
        folded = self._fold(key)
        for name, value in self._entries:
            if self._fold(name) == folded:
                return value
        return default  # type: ignore[return-value]

    def get_list(self, key: str) -> list[str | None]:
        """Return all values for *key*, in insertion order."""
        folded = self._fold(key)
        return [value for name, value in self._entries if self._fold(name) == folded]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        folded = self._fold(key)
        return any(self._fold(name) == folded for name, _ in self._entries)

    def keys(self) -> list[str]:
        """Distinct names in first-seen order, with their stored casing."""
        seen: set[str] = set()
        names: list[str] = []
        for name, _ in self._entries:
            folded = self._fold(name)
            if folded not in seen:
                seen.add(folded)
                names.append(name)
        return names

    def items(self) -> Iterator[tuple[str, str | None]]:
        """Iterate over every ``(name, value)`` entry in insertion order."""
        return iter(list(self._entries))

    # -- Container protocol --

    def __iter__(self) -> Iterator[tuple[str, str | None]]:
        return self.items()

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpMultiMap):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        items = ", ".join(f"({k!r}, {v!r})" for k, v in self._entries)
        return f"HttpMultiMap([{items}])"
