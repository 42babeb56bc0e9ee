"""Pattern parsing — parameter token classification for absolute patterns.

A pattern is an absolute path template such as ``/users/:userId/:tab?``.
Segments starting with ``:`` are parameter tokens; a trailing ``?``
marks the token optional.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParamToken:
    """A parameter segment of a pattern.

    Required:  ``/:id``   (name="id", optional=False)
    Optional:  ``/:tab?`` (name="tab", optional=True)

    ``index`` is the segment position in ``pattern.split("/")``, so
    ``/users/:id`` puts ``id`` at index 2.
    """

    name: str
    optional: bool
    index: int

    @property
    def placeholder(self) -> str:
        """The literal segment this token occupies in the pattern."""
        return f":{self.name}?" if self.optional else f":{self.name}"


def is_route_pattern(pattern: str) -> bool:
    """Return True if *pattern* is absolute (starts with ``/``)."""
    return pattern.startswith("/")


def compile_tokens(pattern: str) -> tuple[ParamToken, ...]:
    """Parse the parameter tokens of *pattern*, left to right.

    Examples::

        "/a/:b/c/:d?" -> (ParamToken("b", False, 2), ParamToken("d", True, 4))
        "/users"      -> ()

    Static segments are skipped.  Repeated names are kept as separate
    tokens; each one receives the same value when a path is built.
    """
    tokens: list[ParamToken] = []
    for index, segment in enumerate(pattern.split("/")):
        if not segment.startswith(":"):
            continue
        name = segment[1:]
        optional = name.endswith("?")
        if optional:
            name = name[:-1]
        tokens.append(ParamToken(name=name, optional=optional, index=index))
    return tuple(tokens)


def join_pattern(prefix: str, segment: str) -> str:
    """Append *segment* to *prefix*, collapsing leading slashes to one.

    Examples::

        join_pattern("", "a")       -> "/a"
        join_pattern("/a", "b/:c")  -> "/a/b/:c"
        join_pattern("", "/")       -> "/"
        join_pattern("/app", "/")   -> "/app//"
        join_pattern("app", "x")    -> "app/x"   (not a pattern)

    Only the leading run of slashes is collapsed.  A ``"/"`` root under a
    basename therefore keeps its slashes, and the pattern ``"/app//"``
    builds to exactly that path.
    """
    candidate = f"{prefix}/{segment}"
    if candidate.startswith("//"):
        candidate = "/" + candidate.lstrip("/")
    return candidate


def normalize_basename(basename: str) -> str:
    """Normalize a basename to ``""`` or ``/segment[/segment...]``."""
    stripped = basename.strip("/")
    if not stripped:
        return ""
    return f"/{stripped}"
