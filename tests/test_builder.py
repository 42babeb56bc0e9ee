"""Tests for sprig.routing.builder — path substitution and query serialization."""

from typing import Any

import pytest

from sprig.errors import MissingParameterError, ValidationError
from sprig.routing.builder import build_path, encode_query
from sprig.routing.pattern import compile_tokens
from sprig.validation import required, search_schema


def _build(pattern: str, params: dict[str, Any] | None = None, search: Any = None) -> str:
    return build_path(pattern, compile_tokens(pattern), search, params)


class TestPathSubstitution:
    def test_single_param(self) -> None:
        assert _build("/a/:b", {"b": "B"}) == "/a/B"

    def test_multiple_params(self) -> None:
        assert _build("/a/:b/c/:d", {"b": "B", "d": "D"}) == "/a/B/c/D"

    def test_static_pattern(self) -> None:
        assert _build("/users") == "/users"

    def test_extra_params_ignored_without_search(self) -> None:
        assert _build("/a/:b", {"b": "B", "z": "Z"}) == "/a/B"

    def test_optional_omitted(self) -> None:
        assert _build("/a/:b/c/:d?", {"b": "B"}) == "/a/B/c/"

    def test_optional_present(self) -> None:
        assert _build("/a/:b/c/:d?", {"b": "B", "d": "D"}) == "/a/B/c/D"

    def test_optional_only_with_no_params(self) -> None:
        assert _build("/a/e/:f?") == "/a/e/"

    def test_values_are_percent_encoded(self) -> None:
        path = _build("/users/:userId", {"userId": "user/with/slashes"})
        assert path == "/users/user%2Fwith%2Fslashes"

    def test_non_string_values(self) -> None:
        assert _build("/page/:n", {"n": 2}) == "/page/2"

    def test_repeated_name_gets_same_value(self) -> None:
        assert _build("/a/:x/b/:x", {"x": "1"}) == "/a/1/b/1"

    def test_name_prefix_does_not_collide(self) -> None:
        assert _build("/a/:id/:idx", {"id": "1", "idx": "2"}) == "/a/1/2"


class TestMissingParameters:
    def test_missing_required(self) -> None:
        with pytest.raises(MissingParameterError) as exc_info:
            _build("/a/:b", {})
        assert exc_info.value.name == "b"
        assert exc_info.value.pattern == "/a/:b"
        assert 'Missing parameter "b"' in str(exc_info.value)

    def test_no_params_at_all(self) -> None:
        with pytest.raises(MissingParameterError, match='"b"'):
            _build("/a/:b")

    def test_first_missing_in_declared_order(self) -> None:
        with pytest.raises(MissingParameterError) as exc_info:
            _build("/a/:b/:c", {})
        assert exc_info.value.name == "b"

    def test_none_counts_as_missing(self) -> None:
        with pytest.raises(MissingParameterError):
            _build("/a/:b", {"b": None})

    def test_optional_never_missing(self) -> None:
        assert _build("/a/:b?", {"b": None}) == "/a/"


class TestSearchParams:
    def test_required_search_field(self) -> None:
        schema = search_schema({"z": [required]})
        path = _build("/a/:b/c/:d", {"b": "B", "d": "D", "z": "Z"}, schema)
        assert path == "/a/B/c/D?z=Z"

    def test_absent_optional_field_omitted(self) -> None:
        schema = search_schema({"z": [required], "q": []})
        path = _build("/a/:b/c/:d", {"b": "B", "d": "D", "z": "Z", "q": None}, schema)
        assert path == "/a/B/c/D?z=Z"

    def test_optional_field_present(self) -> None:
        schema = search_schema({"z": [required], "q": []})
        path = _build("/a/:b/c/:d", {"b": "B", "d": "D", "z": "Z", "q": "Q"}, schema)
        assert path == "/a/B/c/D?z=Z&q=Q"

    def test_optional_path_param_with_search(self) -> None:
        schema = search_schema({"z": [required]})
        assert _build("/a/:b/c/:d?", {"b": "B", "z": "Z"}, schema) == "/a/B/c/?z=Z"
        assert _build("/a/e/:f?", {"f": "F", "z": "Z"}, schema) == "/a/e/F?z=Z"

    def test_empty_query_gives_bare_path(self) -> None:
        schema = search_schema({"q": []})
        assert _build("/a", {}, schema) == "/a"
        assert _build("/a", None, schema) == "/a"

    def test_record_order_is_preserved(self) -> None:
        def capability(raw: Any) -> dict[str, Any]:
            return {"b": 2, "a": 1}

        assert _build("/x", {}, capability) == "/x?b=2&a=1"

    def test_capability_receives_whole_bag(self) -> None:
        seen: list[Any] = []

        def capability(raw: Any) -> dict[str, Any]:
            seen.append(raw)
            return {}

        _build("/a/:b", {"b": "B", "z": "Z"}, capability)
        assert seen == [{"b": "B", "z": "Z"}]

    def test_validation_failure_propagates_unchanged(self) -> None:
        class Rejected(Exception):
            pass

        def capability(raw: Any) -> dict[str, Any]:
            raise Rejected("nope")

        with pytest.raises(Rejected, match="nope"):
            _build("/a", {}, capability)

    def test_schema_rejection(self) -> None:
        schema = search_schema({"z": [required]})
        with pytest.raises(ValidationError) as exc_info:
            _build("/a/:b", {"b": "B"}, schema)
        assert "z" in exc_info.value.errors

    def test_missing_path_param_checked_before_search(self) -> None:
        schema = search_schema({"z": [required]})
        with pytest.raises(MissingParameterError):
            _build("/a/:b", {}, schema)


class TestEncodeQuery:
    def test_skips_none(self) -> None:
        assert encode_query({"a": "1", "b": None, "c": "3"}) == "a=1&c=3"

    def test_percent_encodes_keys_and_values(self) -> None:
        assert encode_query({"q": "a b&c", "k/x": "v"}) == "q=a%20b%26c&k%2Fx=v"

    def test_empty(self) -> None:
        assert encode_query({}) == ""

    def test_falsy_values_kept(self) -> None:
        assert encode_query({"page": 0, "q": ""}) == "page=0&q="
