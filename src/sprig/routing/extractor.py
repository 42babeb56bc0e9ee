"""Parameter extraction — recover a parameter record from a location.

Pattern and pathname are aligned segment by segment; there is no
backtracking and no wildcard.  Values recovered from the location win
over the caller's fallback, and validated search values win over path
values of the same name.

Usage::

    read_params("/users/:userId", tokens, None, "/users/42", "")
    # -> {"userId": "42"}

    read_params("/users/:userId", tokens, None, "/users/", "", {"userId": "me"})
    # -> {"userId": "me"}
"""

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import unquote

from sprig._internal.types import SearchParamsContract
from sprig.errors import MissingParameterError, ValidationError
from sprig.http.query import QueryParams
from sprig.routing.pattern import ParamToken

logger = logging.getLogger("sprig.routing")


def split_location(url: str) -> tuple[str, str]:
    """Split a concrete URL into ``(pathname, query)``.

    A fragment is dropped.  The query is returned without its ``?``.
    """
    url, _, _ = url.partition("#")
    pathname, _, query = url.partition("?")
    return pathname, query


def _extract_path(
    tokens: tuple[ParamToken, ...],
    pathname: str,
) -> tuple[dict[str, str], list[ParamToken]]:
    """Collect non-empty token values and the required tokens left empty."""
    parts = pathname.split("/")
    values: dict[str, str] = {}
    missing: list[ParamToken] = []

    for token in tokens:
        raw = parts[token.index] if token.index < len(parts) else ""
        value = unquote(raw)
        if value:
            values[token.name] = value
        elif not token.optional:
            missing.append(token)

    return values, missing


def _validate_search(
    pattern: str,
    search_params: SearchParamsContract,
    query: str,
    fallback: Mapping[str, Any] | None,
) -> Mapping[str, Any]:
    """Validate the live query, retrying with *fallback* on failure.

    Without a *fallback* there is nothing to retry, so a rejected query
    fails immediately.
    """
    raw = QueryParams(query).to_dict()
    try:
        return search_params(raw)
    except Exception as location_exc:
        msg = f'Invalid search parameters for route "{pattern}"'
        errors = getattr(location_exc, "errors", None)
        if not isinstance(errors, Mapping):
            errors = None

        if fallback is None:
            raise ValidationError(
                msg, errors=errors, pattern=pattern, location_error=location_exc
            ) from location_exc

        logger.debug(
            "Search params for %s rejected (%s), validating fallback", pattern, location_exc
        )
        try:
            return search_params(dict(fallback))
        except Exception as fallback_exc:
            raise ValidationError(
                msg,
                errors=errors,
                pattern=pattern,
                location_error=location_exc,
                fallback_error=fallback_exc,
            ) from fallback_exc


def read_params(
    pattern: str,
    tokens: tuple[ParamToken, ...],
    search_params: SearchParamsContract | None,
    pathname: str,
    query: str = "",
    fallback: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Recover the parameter record for *pattern* from a concrete location.

    Args:
        pattern: The absolute pattern, e.g. ``"/a/:b/c/:d?"``.
        tokens: The pattern's compiled tokens.
        search_params: The route's validation capability, or ``None``.
            Without one, *query* is ignored.
        pathname: The location path, percent-encoded.
        query: The location query string, with or without ``?``.
        fallback: Defaults used for tokens the location leaves empty and
            for search validation when the live query is rejected.

    Raises:
        MissingParameterError: A required token is empty in *pathname*
            and absent from *fallback*.
        ValidationError: *search_params* rejected the live query and
            either no *fallback* was given or it was rejected too.
    """
    values, missing = _extract_path(tokens, pathname)

    for token in missing:
        if fallback is None or token.name not in fallback:
            raise MissingParameterError(token.name, pattern)

    result: dict[str, Any] = dict(fallback) if fallback else {}
    result.update(values)

    if search_params is not None:
        validated = _validate_search(pattern, search_params, query, fallback)
        result.update({key: value for key, value in validated.items() if value is not None})

    return result
