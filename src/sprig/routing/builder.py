"""Path building — substitute a parameter bag into a pattern.

The same bag feeds both the path tokens and, when the route declares a
search-parameter capability, the query string::

    build_path("/a/:b/c/:d", tokens, schema, {"b": "B", "d": "D", "z": "Z"})
    # -> "/a/B/c/D?z=Z"
"""

from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import quote, urlencode

from sprig._internal.types import Params, SearchParamsContract
from sprig.errors import MissingParameterError
from sprig.routing.pattern import ParamToken


def encode_query(record: Mapping[str, Any]) -> str:
    """Serialize a validated search record into a query string.

    Keys keep the record's own iteration order.  ``None`` values are
    skipped; everything else is ``str()``-ed and percent-encoded.
    """
    pairs = [(key, str(value)) for key, value in record.items() if value is not None]
    return urlencode(pairs, quote_via=quote)


def _first_missing(tokens: Iterable[ParamToken], params: Params) -> ParamToken | None:
    for token in tokens:
        if not token.optional and params.get(token.name) is None:
            return token
    return None


def build_path(
    pattern: str,
    tokens: tuple[ParamToken, ...],
    search_params: SearchParamsContract | None,
    params: Params | None = None,
) -> str:
    """Build a concrete location for *pattern* from *params*.

    Raises ``MissingParameterError`` naming the first required token
    (in declared order) with no value.  A failure raised by
    *search_params* propagates unchanged.
    """
    params = params if params is not None else {}

    missing = _first_missing(tokens, params)
    if missing is not None:
        raise MissingParameterError(missing.name, pattern)

    segments = pattern.split("/")
    for token in tokens:
        value = params.get(token.name)
        segments[token.index] = "" if value is None else quote(str(value), safe="")
    path = "/".join(segments)

    if search_params is None:
        return path

    query = encode_query(search_params(params))
    if query:
        return f"{path}?{query}"
    return path
