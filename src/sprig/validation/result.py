"""Outcome of running search-field rules over a raw query record."""

from dataclasses import dataclass
from typing import Any

from sprig.errors import ValidationError


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The typed search record, or the per-field reasons it was rejected.

    ``record`` holds the converted value of every present field in rule
    order; optional fields missing from the input are left out, so a
    record merged over fallback values never blanks them.  It is only
    meaningful when ``errors`` is empty.
    """

    record: dict[str, Any]
    errors: dict[str, list[str]]

    def __bool__(self) -> bool:
        return not self.errors

    def unwrap(self) -> dict[str, Any]:
        """Return ``record``, or raise ``ValidationError`` carrying ``errors``."""
        if self.errors:
            raise ValidationError("Invalid search parameters", errors=self.errors)
        return self.record
