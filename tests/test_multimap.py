"""Tests for wren.http.multimap — ordered, case-insensitive HttpMultiMap."""

import pytest

from wren._internal.multimap import QueryCollection
from wren.http.multimap import HttpMultiMap


class TestHttpMultiMap:
    def test_add_and_get(self) -> None:
        m = HttpMultiMap().add("Accept", "*/*")
        assert m.get("Accept") == "*/*"

    def test_case_insensitive(self) -> None:
        m = HttpMultiMap().add("Content-Type", "text/html")
        assert m.get("content-type") == "text/html"
        assert m["CONTENT-TYPE"] == "text/html"
        assert "content-TYPE" in m

    def test_case_sensitive(self) -> None:
        m = HttpMultiMap(case_sensitive=True).add("Name", "1")
        assert m.get("name") is None
        assert m.get("Name") == "1"
        assert m.case_sensitive is True

    def test_keys_keep_stored_casing(self) -> None:
        m = HttpMultiMap().add("X-Id", "1").add("x-id", "2").add("B", "3")
        assert m.keys() == ["X-Id", "B"]

    def test_duplicates_in_order(self) -> None:
        m = HttpMultiMap().add("tag", "a").add("other", "x").add("TAG", "b")
        assert m.get_list("tag") == ["a", "b"]
        assert m.get("tag") == "a"

    def test_none_value(self) -> None:
        m = HttpMultiMap().add("flag", None)
        assert "flag" in m
        assert m["flag"] is None
        assert m.get("flag", "fallback") is None

    def test_missing_key_raises(self) -> None:
        m = HttpMultiMap()
        with pytest.raises(KeyError):
            m["missing"]

    def test_get_default(self) -> None:
        assert HttpMultiMap().get("missing", "fallback") == "fallback"

    def test_get_list_missing(self) -> None:
        assert HttpMultiMap().get_list("missing") == []

    def test_contains_rejects_non_str(self) -> None:
        m = HttpMultiMap().add("a", "1")
        assert 42 not in m  # type: ignore[operator]

    def test_iteration_yields_entries(self) -> None:
        m = HttpMultiMap().add("a", "1").add("b", None).add("a", "2")
        assert list(m) == [("a", "1"), ("b", None), ("a", "2")]
        assert list(m.items()) == [("a", "1"), ("b", None), ("a", "2")]

    def test_len_counts_entries(self) -> None:
        m = HttpMultiMap().add("a", "1").add("a", "2")
        assert len(m) == 2

    def test_empty_is_falsy(self) -> None:
        assert not HttpMultiMap()
        assert HttpMultiMap().add("a", None)

    def test_set_replaces_all(self) -> None:
        m = HttpMultiMap().add("a", "1").add("b", "2").add("A", "3")
        m.set("a", "9")
        assert list(m) == [("b", "2"), ("a", "9")]

    def test_remove(self) -> None:
        m = HttpMultiMap().add("a", "1").add("b", "2").add("A", "3")
        m.remove("a")
        assert list(m) == [("b", "2")]
        m.remove("missing")
        assert len(m) == 1

    def test_clear(self) -> None:
        m = HttpMultiMap().add("a", "1")
        assert len(m.clear()) == 0

    def test_from_mapping(self) -> None:
        m = HttpMultiMap({"a": "1", "b": None})
        assert list(m) == [("a", "1"), ("b", None)]

    def test_from_pairs(self) -> None:
        m = HttpMultiMap([("a", "1"), ("a", "2")])
        assert m.get_list("a") == ["1", "2"]

    def test_equality(self) -> None:
        assert HttpMultiMap([("a", "1")]) == HttpMultiMap().add("a", "1")
        assert HttpMultiMap([("a", "1")]) != HttpMultiMap([("A", "1")])

    def test_iteration_snapshot(self) -> None:
        m = HttpMultiMap().add("a", "1")
        for _ in m:
            m.add("b", "2")
        assert len(m) == 2

    def test_satisfies_query_collection(self) -> None:
        assert isinstance(HttpMultiMap(), QueryCollection)

    def test_repr(self) -> None:
        m = HttpMultiMap().add("q", "hello")
        assert repr(m) == "HttpMultiMap([('q', 'hello')])"
