"""Navigation binding — attach an external navigation primitive to a route map.

The navigation subsystem only needs ``navigate(url, options)``; every
bound entry gains ``entry.navigate(params, options)``, which builds the
URL and forwards it::

    routes = create_router(
        [RouteDeclaration(path="users/:userId")],
        navigator=history,
    )
    routes["/users/:userId"].navigate({"userId": "42"})
    # history.navigate("/users/42", None)

When the navigator also exposes ``location()``, bound entries read it
in ``read_params()``.
"""

import logging
from typing import Any

from sprig._internal.types import NavigationOptions
from sprig.config import RouterConfig
from sprig.routing.flatten import Declarations, flatten
from sprig.routing.route import LocationSource, Navigator
from sprig.routing.route_map import RouteMap

logger = logging.getLogger("sprig.navigation")


class _LoggingNavigator:
    """Forwards to the wrapped navigator, logging each transition."""

    __slots__ = ("_navigator",)

    def __init__(self, navigator: Navigator) -> None:
        self._navigator = navigator

    def navigate(self, url: str, options: NavigationOptions | None = None) -> None:
        logger.debug("Navigating to %s", url)
        self._navigator.navigate(url, options)


def bind_router(
    navigator: Navigator,
    routes: RouteMap,
    *,
    location_source: LocationSource | None = None,
) -> RouteMap:
    """Return a copy of *routes* whose entries navigate through *navigator*.

    *location_source* defaults to ``navigator.location`` when the
    navigator has a callable ``location`` attribute.
    """
    if location_source is None:
        candidate: Any = getattr(navigator, "location", None)
        if callable(candidate):
            location_source = candidate
    return routes.bind(_LoggingNavigator(navigator), location_source)


def create_router(
    declarations: Declarations,
    navigator: Navigator,
    config: RouterConfig | None = None,
    *,
    location_source: LocationSource | None = None,
) -> RouteMap:
    """Flatten *declarations* and bind the result to *navigator*.

    This is the composition root: build it once at startup and pass the
    returned ``RouteMap`` to whatever needs to link or navigate.
    """
    routes = flatten(declarations, config=config)
    logger.debug("Router created with %d routes", len(routes))
    return bind_router(navigator, routes, location_source=location_source)
