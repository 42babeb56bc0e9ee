"""Immutable pattern -> RouteEntry table produced by ``flatten()``.

Implements ``Mapping[str, RouteEntry]``.  Iteration follows registration
order (depth-first, declared child order).
"""

import dataclasses
from collections.abc import Iterator, Mapping

from sprig.errors import ConfigurationError
from sprig.routing.route import LocationSource, Navigator, RouteEntry


class RouteMap(Mapping[str, RouteEntry]):
    """Immutable mapping from absolute pattern to route entry.

    Attributes:
        _entries: Pattern -> entry, in registration order.
        _names: Declaration name -> pattern, for named lookups.

    Every key equals its entry's ``pattern``.
    """

    _entries: dict[str, RouteEntry]
    _names: dict[str, str]

    __slots__ = ("_entries", "_names")

    def __init__(self, entries: Mapping[str, RouteEntry] | None = None) -> None:
        data = dict(entries or {})
        for pattern, entry in data.items():
            if entry.pattern != pattern:
                msg = f"RouteMap key {pattern!r} does not match entry pattern {entry.pattern!r}"
                raise ConfigurationError(msg)
        names = {entry.name: pattern for pattern, entry in data.items() if entry.name}
        object.__setattr__(self, "_entries", data)
        object.__setattr__(self, "_names", names)

    def __setattr__(self, name: str, value: object) -> None:
        msg = "RouteMap is immutable"
        raise AttributeError(msg)

    def __getitem__(self, pattern: str) -> RouteEntry:
        return self._entries[pattern]

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"RouteMap({list(self._entries)!r})"

    @property
    def patterns(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def named(self, name: str) -> RouteEntry:
        """Return the entry whose declaration carries *name*.

        Raises ``KeyError`` if no declaration has that name.
        """
        return self._entries[self._names[name]]

    def bind(
        self,
        navigator: Navigator | None = None,
        location_source: LocationSource | None = None,
    ) -> "RouteMap":
        """Return a copy whose entries forward to *navigator* and *location_source*.

        Arguments left as ``None`` keep whatever the entries already hold.
        """
        changes: dict[str, object] = {}
        if navigator is not None:
            changes["navigator"] = navigator
        if location_source is not None:
            changes["location_source"] = location_source
        return RouteMap(
            {pattern: dataclasses.replace(entry, **changes) for pattern, entry in self._entries.items()}
        )
