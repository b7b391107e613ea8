"""Tests for drape.cli._resolve — ViewResolver import resolution."""

import sys
import types
from typing import Any

import pytest

from drape.cli._resolve import parse_params, resolve_views
from drape.config import DecorationConfig
from drape.views.view_resolver import ViewResolver


def _render(resource_path: str, model: dict[str, Any], /) -> str:
    return resource_path


def _factory() -> ViewResolver:
    return ViewResolver(DecorationConfig(), _render)


@pytest.fixture
def _fake_views_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module with ViewResolvers on sys.modules."""
    mod = types.ModuleType("_fake_drape_app")
    mod.views = _factory()  # type: ignore[attr-defined]
    mod.custom = _factory()  # type: ignore[attr-defined]
    mod.make_views = _factory  # type: ignore[attr-defined]
    mod.not_views = "just a string"  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_drape_app", mod)


@pytest.mark.usefixtures("_fake_views_module")
class TestResolveViews:
    def test_explicit_attribute(self) -> None:
        assert isinstance(resolve_views("_fake_drape_app:views"), ViewResolver)

    def test_custom_attribute(self) -> None:
        views = resolve_views("_fake_drape_app:custom")
        assert views is sys.modules["_fake_drape_app"].custom

    def test_default_attribute(self) -> None:
        """Omitting :attr defaults to 'views'."""
        views = resolve_views("_fake_drape_app")
        assert views is sys.modules["_fake_drape_app"].views

    def test_factory_is_called(self) -> None:
        assert isinstance(resolve_views("_fake_drape_app:make_views"), ViewResolver)

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_views("nonexistent_module_xyz:views")

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            resolve_views("_fake_drape_app:does_not_exist")

    def test_wrong_type(self) -> None:
        with pytest.raises(TypeError, match=r"not a drape\.ViewResolver"):
            resolve_views("_fake_drape_app:not_views")


class TestParseParams:
    def test_pairs(self) -> None:
        assert parse_params(["layout=none", "x=1"]) == {"layout": "none", "x": "1"}

    def test_value_may_contain_equals(self) -> None:
        assert parse_params(["q=a=b"]) == {"q": "a=b"}

    def test_empty_value(self) -> None:
        assert parse_params(["layout="]) == {"layout": ""}

    @pytest.mark.parametrize("pair", ["layout", "=none"])
    def test_malformed(self, pair: str) -> None:
        with pytest.raises(ValueError, match="KEY=VALUE"):
            parse_params([pair])
