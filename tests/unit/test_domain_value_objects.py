"""Tests for domain value objects (query options, arguments, search results)."""

import hashlib

import pytest

from sidebyside.domain.value_objects.core import (
    HostQueryArgsPair,
    QueryArguments,
    QueryOptions,
    SearchResult,
)


def _result(**overrides: object) -> SearchResult:
    fields = {
        "url": "http://example.com/a",
        "title": "A",
        "snippet": "about a",
        "size": "3k",
        "crowded": False,
    }
    fields.update(overrides)
    return SearchResult(**fields)


class TestQueryOptions:
    """QueryOptions: string query (may be empty), positive result count."""

    def test_valid(self) -> None:
        options = QueryOptions("cats", 10)
        assert options.query == "cats"
        assert options.num_results == 10

    def test_empty_query_allowed(self) -> None:
        assert QueryOptions("", 1).query == ""

    def test_none_query_rejected(self) -> None:
        with pytest.raises(ValueError, match="Query"):
            QueryOptions(None, 10)  # type: ignore[arg-type]

    def test_zero_results_rejected(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            QueryOptions("cats", 0)

    def test_negative_results_rejected(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            QueryOptions("cats", -5)

    def test_non_integer_results_rejected(self) -> None:
        with pytest.raises(ValueError, match="integer"):
            QueryOptions("cats", "10")  # type: ignore[arg-type]
        with pytest.raises(ValueError, match="integer"):
            QueryOptions("cats", True)  # type: ignore[arg-type]

    def test_immutable(self) -> None:
        options = QueryOptions("cats", 10)
        with pytest.raises(AttributeError):
            options.query = "dogs"  # type: ignore[misc]


class TestQueryArguments:
    """QueryArguments: three required strings; empty is meaningful."""

    def test_empty_strings_allowed(self) -> None:
        args = QueryArguments("", "", "")
        assert (args.collection, args.frontend, args.extra_params) == ("", "", "")

    def test_none_rejected(self) -> None:
        with pytest.raises(ValueError, match="Collection"):
            QueryArguments(None, "", "")  # type: ignore[arg-type]
        with pytest.raises(ValueError, match="Frontend"):
            QueryArguments("", None, "")  # type: ignore[arg-type]
        with pytest.raises(ValueError, match="Extra params"):
            QueryArguments("", "", None)  # type: ignore[arg-type]

    def test_structural_equality(self) -> None:
        assert QueryArguments("c", "f", "x=1") == QueryArguments("c", "f", "x=1")
        assert hash(QueryArguments("c", "f", "x=1")) == hash(QueryArguments("c", "f", "x=1"))
        assert QueryArguments("c", "f", "x=1") != QueryArguments("c", "f", "x=2")


class TestHostQueryArgsPair:
    """HostQueryArgsPair: host string plus QueryArguments."""

    def test_structural_equality(self) -> None:
        a = HostQueryArgsPair("gsa.local", QueryArguments("c", "f", ""))
        b = HostQueryArgsPair("gsa.local", QueryArguments("c", "f", ""))
        assert a == b
        assert hash(a) == hash(b)
        assert a != HostQueryArgsPair("gsa.remote", QueryArguments("c", "f", ""))

    def test_none_host_rejected(self) -> None:
        with pytest.raises(ValueError, match="Host"):
            HostQueryArgsPair(None, QueryArguments("", "", ""))  # type: ignore[arg-type]

    def test_missing_query_arguments_rejected(self) -> None:
        with pytest.raises(ValueError, match="Query arguments"):
            HostQueryArgsPair("gsa.local", None)  # type: ignore[arg-type]


class TestSearchResult:
    """SearchResult: required text fields, structural equality, fingerprint contribution."""

    def test_none_fields_rejected(self) -> None:
        for name in ("url", "title", "snippet", "size"):
            with pytest.raises(ValueError):
                _result(**{name: None})

    def test_structural_equality(self) -> None:
        assert _result() == _result()
        assert hash(_result()) == hash(_result())
        assert _result() != _result(crowded=True)

    def test_update_hasher_feeds_fields_in_order(self) -> None:
        result = _result(title="Tïtle", crowded=True)
        received: list[bytes] = []

        class _Recorder:
            def update(self, data: bytes) -> None:
                received.append(data)

        result.update_hasher(_Recorder())
        assert received == [
            b"http://example.com/a",
            "Tïtle".encode("utf-8"),
            b"about a",
            b"3k",
            b"true",
        ]

    def test_update_hasher_with_hashlib(self) -> None:
        hasher = hashlib.sha1()
        _result().update_hasher(hasher)
        expected = hashlib.sha1(b"http://example.com/aAabout a3kfalse").hexdigest()
        assert hasher.hexdigest() == expected
