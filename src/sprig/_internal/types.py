"""Shared type aliases used across sprig modules."""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

# Parameter bag for building a path; path tokens and search fields share it
Params: TypeAlias = Mapping[str, Any]

# Search-parameter capability: raw input in, validated record out (raises on rejection)
SearchParamsContract: TypeAlias = Callable[[Any], Mapping[str, Any]]

# Options forwarded untouched to the external navigation primitive
NavigationOptions: TypeAlias = Mapping[str, Any]
