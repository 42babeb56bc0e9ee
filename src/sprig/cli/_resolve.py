"""Route map import resolution — resolves ``"module:attribute"`` strings.

Accepts a ``RouteMap``, a declaration tree (flattened on the fly), or a
factory returning either.
"""

import importlib
from collections.abc import Mapping, Sequence

from sprig.errors import ConfigurationError
from sprig.routing.flatten import flatten
from sprig.routing.route import RouteDeclaration
from sprig.routing.route_map import RouteMap


def resolve_routes(import_string: str, basename: str = "") -> RouteMap:
    """Resolve an import string to a ``RouteMap``.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"routes"`` (e.g. ``"myapp"`` resolves to
    ``myapp.routes``).

    Args:
        import_string: Dotted module path with optional ``:attribute``
            suffix (e.g. ``"myapp:ROUTES"``, ``"myapp.nav:build_routes"``).
        basename: Applied when the target is a declaration tree.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is neither a route map nor a
            declaration tree.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "routes"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, (RouteMap, RouteDeclaration)):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if isinstance(obj, RouteMap):
        return obj

    if isinstance(obj, (RouteDeclaration, Mapping)) or (
        isinstance(obj, Sequence) and not isinstance(obj, str)
    ):
        try:
            return flatten(obj, basename)
        except ConfigurationError as exc:
            msg = f"{import_string!r} is not a valid declaration tree: {exc}"
            raise TypeError(msg) from exc

    msg = f"{import_string!r} resolved to {type(obj).__name__}, not a RouteMap or declaration tree"
    raise TypeError(msg)
