"""Tests for sprig.config — RouterConfig frozen dataclass."""

import pytest

from sprig.config import RouterConfig
from sprig.errors import ConfigurationError


class TestRouterConfig:
    def test_defaults(self) -> None:
        cfg = RouterConfig()

        assert cfg.basename == ""
        assert cfg.on_duplicate == "overwrite"

    def test_override(self) -> None:
        cfg = RouterConfig(basename="/app", on_duplicate="error")

        assert cfg.basename == "/app"
        assert cfg.on_duplicate == "error"

    def test_frozen(self) -> None:
        cfg = RouterConfig()

        with pytest.raises(AttributeError):
            cfg.basename = "/x"  # type: ignore[misc]

    def test_basename_normalized(self) -> None:
        assert RouterConfig(basename="app/").basename == "/app"
        assert RouterConfig(basename="/").basename == ""

    def test_invalid_duplicate_policy(self) -> None:
        with pytest.raises(ConfigurationError, match="on_duplicate"):
            RouterConfig(on_duplicate="ignore")  # type: ignore[arg-type]
