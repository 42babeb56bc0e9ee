"""RouteDeclaration, RouteEntry, and Location frozen dataclasses."""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeAlias

from sprig._internal.types import NavigationOptions, Params, SearchParamsContract
from sprig.errors import ConfigurationError
from sprig.routing.builder import build_path
from sprig.routing.extractor import read_params
from sprig.routing.pattern import ParamToken, compile_tokens


@dataclass(frozen=True, slots=True)
class RouteDeclaration:
    """One node of a route declaration tree.

    ``path`` may hold several segments (``"a/:b"``).  A node without a
    path is a transparent grouping node: its children keep the parent's
    prefix.

    ``search_params`` is any callable that validates raw query input and
    returns a record, raising on rejection.
    """

    path: str | None = None
    children: tuple["RouteDeclaration", ...] = ()
    search_params: SearchParamsContract | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(RouteDeclaration.coerce(c) for c in self.children))

    @classmethod
    def coerce(cls, node: "RouteDeclaration | Mapping[str, Any]") -> "RouteDeclaration":
        """Accept a declaration or a plain mapping with the same keys.

        Mappings may spell the capability ``searchParams``.  Children are
        coerced recursively.
        """
        if isinstance(node, RouteDeclaration):
            return node
        if not isinstance(node, Mapping):
            msg = f"Route declarations must be RouteDeclaration or mapping, got {type(node).__name__}"
            raise ConfigurationError(msg)

        unknown = set(node) - {"path", "children", "search_params", "searchParams", "name"}
        if unknown:
            msg = f"Unknown route declaration keys: {', '.join(sorted(unknown))}"
            raise ConfigurationError(msg)

        children = node.get("children") or ()
        if isinstance(children, (str, Mapping)) or not isinstance(children, Sequence):
            msg = f"Route children must be a sequence, got {type(children).__name__}"
            raise ConfigurationError(msg)

        return cls(
            path=node.get("path"),
            children=tuple(children),
            search_params=node.get("search_params", node.get("searchParams")),
            name=node.get("name"),
        )


@dataclass(frozen=True, slots=True)
class Location:
    """A concrete location: percent-encoded pathname plus query string."""

    pathname: str = "/"
    query: str = ""

    @property
    def url(self) -> str:
        query = self.query.removeprefix("?")
        return f"{self.pathname}?{query}" if query else self.pathname


class Navigator(Protocol):
    """The external navigation primitive a route map can be bound to."""

    def navigate(self, url: str, options: NavigationOptions | None = None) -> None: ...


LocationSource: TypeAlias = Callable[[], Location]


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """A flattened route: one absolute pattern and its build/read pair.

    Created by ``flatten()``; immutable.  ``navigator`` and
    ``location_source`` are set only on entries returned by
    ``bind_router()``.

    Usage::

        entry = routes["/users/:userId"]
        entry.build({"userId": "42"})        # "/users/42"
        entry({"userId": "42"})              # same
        entry.read_params(location=Location("/users/42"))
    """

    pattern: str
    tokens: tuple[ParamToken, ...]
    search_params: SearchParamsContract | None = None
    declaration: RouteDeclaration | None = field(default=None, compare=False, repr=False)
    navigator: Navigator | None = field(default=None, compare=False, repr=False)
    location_source: LocationSource | None = field(default=None, compare=False, repr=False)

    @classmethod
    def for_pattern(
        cls,
        pattern: str,
        search_params: SearchParamsContract | None = None,
        declaration: RouteDeclaration | None = None,
    ) -> "RouteEntry":
        return cls(
            pattern=pattern,
            tokens=compile_tokens(pattern),
            search_params=search_params,
            declaration=declaration,
        )

    @property
    def param_names(self) -> tuple[str, ...]:
        """Token names in declared order, without duplicates."""
        return tuple(dict.fromkeys(token.name for token in self.tokens))

    @property
    def required_params(self) -> frozenset[str]:
        return frozenset(token.name for token in self.tokens if not token.optional)

    @property
    def name(self) -> str | None:
        return self.declaration.name if self.declaration is not None else None

    def build(self, params: Params | None = None) -> str:
        """Get the concrete location for this route from *params*."""
        return build_path(self.pattern, self.tokens, self.search_params, params)

    __call__ = build

    def read_params(
        self,
        fallback: Mapping[str, Any] | None = None,
        *,
        location: Location | None = None,
    ) -> dict[str, Any]:
        """Recover this route's parameters from *location*.

        Without an explicit *location*, the bound location source is read.
        Raises ``ConfigurationError`` when neither is available.
        """
        if location is None:
            if self.location_source is None:
                msg = f'No location given and route "{self.pattern}" has no location source bound'
                raise ConfigurationError(msg)
            location = self.location_source()
        return read_params(
            self.pattern,
            self.tokens,
            self.search_params,
            location.pathname,
            location.query,
            fallback,
        )

    def navigate(
        self,
        params: Params | None = None,
        options: NavigationOptions | None = None,
    ) -> None:
        """Forward ``build(params)`` to the bound navigation primitive."""
        if self.navigator is None:
            msg = f'Route "{self.pattern}" is not bound to a navigator'
            raise ConfigurationError(msg)
        self.navigator.navigate(self.build(params), options)
