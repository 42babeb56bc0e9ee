"""Tests for sprig.routing.route_map — immutable pattern table."""

import pytest

from sprig.errors import ConfigurationError
from sprig.routing.flatten import flatten
from sprig.routing.route import Location, RouteDeclaration, RouteEntry
from sprig.routing.route_map import RouteMap
from sprig.testing import MemoryNavigator


def _routes() -> RouteMap:
    return flatten(
        RouteDeclaration(
            path="users",
            name="users",
            children=(RouteDeclaration(path=":userId", name="user"),),
        )
    )


class TestMapping:
    def test_len_and_iter(self) -> None:
        routes = _routes()
        assert len(routes) == 2
        assert list(routes) == ["/users", "/users/:userId"]

    def test_contains(self) -> None:
        routes = _routes()
        assert "/users/:userId" in routes
        assert "/posts" not in routes

    def test_missing_pattern_raises(self) -> None:
        with pytest.raises(KeyError):
            _routes()["/posts"]

    def test_patterns(self) -> None:
        assert _routes().patterns == ("/users", "/users/:userId")

    def test_repr(self) -> None:
        assert repr(_routes()) == "RouteMap(['/users', '/users/:userId'])"

    def test_empty(self) -> None:
        assert len(RouteMap()) == 0


class TestImmutability:
    def test_no_item_assignment(self) -> None:
        routes = _routes()
        with pytest.raises(TypeError):
            routes["/x"] = RouteEntry.for_pattern("/x")  # type: ignore[index]

    def test_no_attribute_assignment(self) -> None:
        routes = _routes()
        with pytest.raises(AttributeError):
            routes._entries = {}  # type: ignore[misc]

    def test_key_must_match_pattern(self) -> None:
        with pytest.raises(ConfigurationError, match="does not match"):
            RouteMap({"/a": RouteEntry.for_pattern("/b")})


class TestNamed:
    def test_named_lookup(self) -> None:
        assert _routes().named("user").pattern == "/users/:userId"

    def test_unknown_name(self) -> None:
        with pytest.raises(KeyError):
            _routes().named("nope")


class TestBind:
    def test_bind_returns_new_map(self) -> None:
        routes = _routes()
        history = MemoryNavigator()
        bound = routes.bind(history, history.location)

        assert bound is not routes
        assert list(bound) == list(routes)
        assert bound["/users/:userId"].navigator is history

    def test_original_stays_unbound(self) -> None:
        routes = _routes()
        routes.bind(MemoryNavigator())
        with pytest.raises(ConfigurationError, match="not bound"):
            routes["/users"].navigate()

    def test_partial_bind_keeps_existing(self) -> None:
        history = MemoryNavigator("/users/9")
        bound = _routes().bind(history, history.location).bind(location_source=lambda: Location("/users/3"))
        entry = bound["/users/:userId"]
        assert entry.navigator is history
        assert entry.read_params() == {"userId": "3"}
