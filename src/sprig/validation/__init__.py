"""Search-parameter validation — field rules turned into a route capability.

Usage::

    from sprig.routing.route import RouteDeclaration
    from sprig.validation import at_least, integer, one_of, required, search_schema

    products = RouteDeclaration(
        path="products/:productId",
        search_params=search_schema(
            {
                "page": [integer, at_least(1)],
                "sort": [one_of("price", "name")],
                "q": [required],
            }
        ),
    )

    products.search_params({"page": "2", "q": "tv", "utm": "x"})
    # -> {"page": 2, "q": "tv"}

Any callable with the same ``(raw) -> record`` shape, raising on bad
input, can stand in for ``search_schema``.
"""

from collections.abc import Mapping
from typing import Any

from sprig.errors import ValidationError
from sprig.validation.result import ValidationResult
from sprig.validation.rules import (
    Rule,
    at_least,
    integer,
    matches,
    max_length,
    number,
    one_of,
    required,
)

__all__ = [
    "Rule",
    "SearchSchema",
    "ValidationResult",
    "at_least",
    "integer",
    "matches",
    "max_length",
    "number",
    "one_of",
    "required",
    "search_schema",
    "validate",
]


def validate(data: Mapping[str, Any], rules: Mapping[str, list[Rule]]) -> ValidationResult:
    """Run each field's rule chain over *data*.

    Fields listing ``required`` must be present and non-blank; the rest
    are skipped when missing or blank.  A field's chain stops at its
    first rejection.  Keys of *data* not named in *rules* are dropped.
    """
    record: dict[str, Any] = {}
    errors: dict[str, list[str]] = {}

    for field_name, chain in rules.items():
        value = data.get(field_name)
        if value is None or not str(value).strip():
            if required in chain:
                errors[field_name] = ["This field is required"]
            continue
        try:
            for rule in chain:
                value = rule(value)
        except ValueError as exc:
            errors[field_name] = [str(exc)]
        else:
            record[field_name] = value

    return ValidationResult(record=record, errors=errors)


class SearchSchema:
    """A search-parameter capability built from field rules.

    Calling the schema returns the typed record or raises
    ``ValidationError`` with per-field messages.
    """

    __slots__ = ("rules",)

    def __init__(self, rules: Mapping[str, list[Rule]]) -> None:
        self.rules = dict(rules)

    def __repr__(self) -> str:
        return f"SearchSchema({list(self.rules)!r})"

    def __call__(self, raw: Any) -> dict[str, Any]:
        if not isinstance(raw, Mapping):
            msg = f"Search parameters must be a mapping, got {type(raw).__name__}"
            raise ValidationError(msg)
        return validate(raw, self.rules).unwrap()


def search_schema(rules: Mapping[str, list[Rule]]) -> SearchSchema:
    """Build a search-parameter capability from field *rules*."""
    return SearchSchema(rules)
