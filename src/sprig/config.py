"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from typing import Literal, TypeAlias

from sprig.errors import ConfigurationError
from sprig.routing.pattern import normalize_basename

DuplicatePolicy: TypeAlias = Literal["overwrite", "error"]

_DUPLICATE_POLICIES = frozenset({"overwrite", "error"})


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(basename="/app", on_duplicate="error")
    """

    # Extra root segment prepended to every pattern ("/app", "app/" -> "/app")
    basename: str = ""

    # What to do when two declarations flatten to the same pattern
    on_duplicate: DuplicatePolicy = "overwrite"

    def __post_init__(self) -> None:
        if self.on_duplicate not in _DUPLICATE_POLICIES:
            msg = (
                f"Invalid on_duplicate policy {self.on_duplicate!r}. "
                f"Expected one of: {', '.join(sorted(_DUPLICATE_POLICIES))}"
            )
            raise ConfigurationError(msg)
        object.__setattr__(self, "basename", normalize_basename(self.basename))
