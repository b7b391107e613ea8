"""Tests for drape.templating — kida environment and renderer.

Exercises ViewResolver -> Compositor -> KidaRenderer with real kida
templates.
"""

from pathlib import Path

import pytest
from kida import DictLoader, Environment
from kida.environment.exceptions import TemplateNotFoundError

from drape.config import DecorationConfig
from drape.errors import RenderError
from drape.templating.integration import KidaRenderer, create_environment
from drape.views.view_resolver import ViewResolver

_LAYOUT = """\
<html><head><title>{{ title }}</title></head>
<body data-view="{{ view_url }}">{{ hotel }}</body></html>"""

_CONTENT = "<article>{{ hotel }}</article>"


def _env() -> Environment:
    """Build a kida Environment with in-memory test templates."""
    return Environment(
        loader=DictLoader(
            {
                "standard.html": _LAYOUT,
                "show.html": _CONTENT,
            }
        )
    )


def _views(**overrides: object) -> ViewResolver:
    overrides.setdefault("default_template_name", "standard")
    return ViewResolver(DecorationConfig(**overrides), KidaRenderer(_env()))


class TestKidaRenderer:
    def test_renders_resource_with_model(self) -> None:
        renderer = KidaRenderer(_env())
        assert renderer("show.html", {"hotel": "Ritz"}) == "<article>Ritz</article>"

    def test_env_property(self) -> None:
        env = _env()
        assert KidaRenderer(env).env is env

    def test_missing_template_raises_render_error(self) -> None:
        renderer = KidaRenderer(_env())
        with pytest.raises(RenderError) as exc_info:
            renderer("missing.html", {})
        assert exc_info.value.resource_path == "missing.html"
        assert str(exc_info.value) == "missing.html: template not found"
        assert isinstance(exc_info.value.__cause__, TemplateNotFoundError)

    def test_missing_layout_reaches_caller(self) -> None:
        views = _views(default_template_name="common/absent")
        with pytest.raises(RenderError, match="common/absent.html"):
            views.render("show", {"hotel": "Ritz"})


class TestDecoratedRendering:
    def test_layout_receives_reserved_attributes(self) -> None:
        html = _views().render("show", {"hotel": "Ritz"})
        assert "<title>view.title.show</title>" in html
        assert 'data-view="show.html"' in html
        assert "Ritz" in html
        assert "<article>" not in html

    def test_cancelled_renders_content_only(self) -> None:
        html = _views().render("show", {"hotel": "Ritz"}, {"layout": "none"})
        assert html == "<article>Ritz</article>"

    def test_no_default_renders_content_only(self) -> None:
        html = _views(default_template_name=None).render("show", {"hotel": "Ritz"})
        assert html == "<article>Ritz</article>"

    def test_autoescape_from_create_environment(self, tmp_path: Path) -> None:
        (tmp_path / "show.html").write_text(_CONTENT)
        config = DecorationConfig(template_dir=tmp_path)
        views = ViewResolver(config, KidaRenderer(create_environment(config)))
        html = views.render("show", {"hotel": "<b>Ritz</b>"})
        assert "<b>" not in html
        assert "Ritz" in html


class TestCreateEnvironment:
    def test_loads_from_template_dir(self, tmp_path: Path) -> None:
        (tmp_path / "common").mkdir()
        (tmp_path / "common" / "standard.html").write_text("<title>{{ title }}</title>")
        env = create_environment(DecorationConfig(template_dir=tmp_path))
        html = env.get_template("common/standard.html").render({"title": "view.title.x"})
        assert html == "<title>view.title.x</title>"

    def test_registers_filters_and_globals(self, tmp_path: Path) -> None:
        (tmp_path / "page.html").write_text("{{ name | shout }} {{ site }}")
        env = create_environment(
            DecorationConfig(template_dir=tmp_path),
            filters={"shout": lambda value: str(value).upper()},
            globals_={"site": "Travel"},
        )
        assert env.get_template("page.html").render({"name": "ritz"}) == "RITZ Travel"
