"""Testing helpers — an in-memory navigation primitive.

``MemoryNavigator`` stands in for a browser history: it records every
URL it is asked to navigate to and reports the latest one as the
current location::

    history = MemoryNavigator()
    routes = create_router(declarations, history)

    routes["/a/:b"].navigate({"b": "B"})
    assert history.location() == Location("/a/B")
    assert routes["/a/:b"].read_params() == {"b": "B"}
"""

from sprig._internal.types import NavigationOptions
from sprig.routing.extractor import split_location
from sprig.routing.route import Location


class MemoryNavigator:
    """Navigation primitive backed by a list of visited URLs."""

    __slots__ = ("entries", "options")

    def __init__(self, initial_url: str = "/") -> None:
        self.entries: list[str] = [initial_url]
        self.options: list[NavigationOptions | None] = [None]

    def navigate(self, url: str, options: NavigationOptions | None = None) -> None:
        if options and options.get("replace"):
            self.entries[-1] = url
            self.options[-1] = options
            return
        self.entries.append(url)
        self.options.append(options)

    def location(self) -> Location:
        pathname, query = split_location(self.entries[-1])
        return Location(pathname=pathname, query=query)

    @property
    def url(self) -> str:
        return self.entries[-1]
