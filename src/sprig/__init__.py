"""Sprig — route trees flattened into typed path builders.

Declare routes as a tree, flatten once, then build concrete URLs from
parameters and read parameters back from the current location.

Basic usage::

    from sprig import RouteDeclaration, flatten
    from sprig.validation import required, search_schema

    ROUTES = flatten(
        RouteDeclaration(
            path="a/:b",
            children=(
                RouteDeclaration(path="c/:d", search_params=search_schema({"z": [required]})),
            ),
        )
    )

    ROUTES["/a/:b/c/:d"].build({"b": "B", "d": "D", "z": "Z"})  # "/a/B/c/D?z=Z"

Navigation (bind an external ``navigate(url, options)`` primitive)::

    from sprig import create_router

    routes = create_router([...], navigator=history)
    routes["/a/:b"].navigate({"b": "B"})
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Location",
    "MissingParameterError",
    "RouteDeclaration",
    "RouteEntry",
    "RouteMap",
    "RouterConfig",
    "SprigError",
    "ValidationError",
    "bind_router",
    "create_router",
    "flatten",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import sprig`` fast while providing a clean top-level API.
    """
    if name in ("RouteDeclaration", "RouteEntry", "Location"):
        from sprig.routing import route as _route

        return getattr(_route, name)

    if name == "RouteMap":
        from sprig.routing.route_map import RouteMap

        return RouteMap

    if name == "flatten":
        from sprig.routing.flatten import flatten

        return flatten

    if name in ("bind_router", "create_router"):
        from sprig import navigation as _nav

        return getattr(_nav, name)

    if name == "RouterConfig":
        from sprig.config import RouterConfig

        return RouterConfig

    if name in ("SprigError", "ConfigurationError", "MissingParameterError", "ValidationError"):
        from sprig import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
