"""Declaration tree flattening.

Walks a route declaration tree depth-first, accumulating absolute
patterns, and registers one ``RouteEntry`` per reachable pattern::

    routes = flatten(
        RouteDeclaration(path="a/:b", children=(RouteDeclaration(path="c/:d"),))
    )
    list(routes)  # ["/a/:b", "/a/:b/c/:d"]
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, TypeAlias

from sprig.config import RouterConfig
from sprig.errors import ConfigurationError
from sprig.routing.pattern import is_route_pattern, join_pattern
from sprig.routing.route import RouteDeclaration, RouteEntry
from sprig.routing.route_map import RouteMap

logger = logging.getLogger("sprig.routing")

Declarations: TypeAlias = RouteDeclaration | Mapping[str, Any] | Sequence[RouteDeclaration | Mapping[str, Any]]


def _roots(root: Declarations) -> tuple[RouteDeclaration, ...]:
    if isinstance(root, (RouteDeclaration, Mapping)):
        return (RouteDeclaration.coerce(root),)
    if isinstance(root, str) or not isinstance(root, Sequence):
        msg = f"Cannot flatten {type(root).__name__}; expected a declaration or a sequence of them"
        raise ConfigurationError(msg)
    return tuple(RouteDeclaration.coerce(node) for node in root)


def _register(
    entries: dict[str, RouteEntry],
    node: RouteDeclaration,
    pattern: str,
    config: RouterConfig,
) -> None:
    if pattern in entries:
        if config.on_duplicate == "error":
            msg = f"Duplicate route pattern {pattern!r}"
            raise ConfigurationError(msg)
        logger.warning("Route %s declared more than once; last declaration wins", pattern)

    entries[pattern] = RouteEntry.for_pattern(pattern, node.search_params, node)
    logger.debug("Registered route %s", pattern)


def _walk(
    nodes: Sequence[RouteDeclaration],
    prefix: str,
    entries: dict[str, RouteEntry],
    config: RouterConfig,
) -> None:
    for node in nodes:
        path = prefix
        if node.path is not None:
            path = join_pattern(prefix, node.path)
            if is_route_pattern(path):
                _register(entries, node, path, config)
        if node.children:
            _walk(node.children, path, entries, config)


def flatten(
    root: Declarations,
    basename: str = "",
    *,
    config: RouterConfig | None = None,
) -> RouteMap:
    """Flatten a declaration tree into a ``RouteMap``.

    Args:
        root: A declaration, a mapping with declaration keys, or a
            sequence of either.  A root with a path is itself registered.
        basename: Extra root segment prepended to every pattern.
            Overrides ``config.basename`` when non-empty.
        config: Router configuration; defaults to ``RouterConfig()``.

    Raises:
        ConfigurationError: The tree is malformed, or a pattern repeats
            while ``config.on_duplicate == "error"``.
    """
    if config is None:
        config = RouterConfig(basename=basename)
    elif basename:
        config = RouterConfig(basename=basename, on_duplicate=config.on_duplicate)

    entries: dict[str, RouteEntry] = {}
    _walk(_roots(root), config.basename, entries, config)
    return RouteMap(entries)
