"""Sprig exception hierarchy.

Shared across the flattener, builder, extractor, and navigation binder
so every module raises and catches the same types.
"""

from collections.abc import Mapping


class SprigError(Exception):
    """Base for all sprig-specific errors."""


class ConfigurationError(SprigError):
    """Raised when a declaration tree or router configuration is invalid.

    Typically raised while flattening, before any route is used.
    """


class MissingParameterError(SprigError, LookupError):
    """A required path parameter has no value.

    Raised by ``build`` when the parameter bag lacks a required token and
    by ``read_params`` when neither the location nor the fallback
    supplies one.
    """

    def __init__(self, name: str, pattern: str) -> None:
        self.name = name
        self.pattern = pattern
        super().__init__(f'Missing parameter "{name}" for route "{pattern}"')


class ValidationError(SprigError, ValueError):
    """Search parameters were rejected by a route's validation capability.

    ``errors`` maps field names to messages when the capability reports
    them.  On the read path ``location_error`` and ``fallback_error``
    hold the two underlying failures.
    """

    def __init__(
        self,
        detail: str,
        *,
        errors: Mapping[str, list[str]] | None = None,
        pattern: str | None = None,
        location_error: BaseException | None = None,
        fallback_error: BaseException | None = None,
    ) -> None:
        self.detail = detail
        self.errors = dict(errors or {})
        self.pattern = pattern
        self.location_error = location_error
        self.fallback_error = fallback_error
        super().__init__(detail)

    def __str__(self) -> str:
        if not self.errors:
            return self.detail
        fields = "; ".join(f"{name}: {', '.join(msgs)}" for name, msgs in self.errors.items())
        return f"{self.detail} ({fields})"
