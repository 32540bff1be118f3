"""Unit tests for the Jinja2 renderer (modscaffold.templates)."""

from __future__ import annotations

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from modscaffold.templates import TemplateRenderer, default_renderer

pytestmark = pytest.mark.unit


@pytest.fixture
def renderer(tmp_path) -> TemplateRenderer:
    """Renderer over a temp directory with two small templates."""
    (tmp_path / "sub").mkdir()
    (tmp_path / "greeting.txt.j2").write_text("Hello {{ name | title_case }}\n")
    (tmp_path / "sub" / "badge.txt.j2").write_text("license-{{ license | url_quote }}")
    return TemplateRenderer(tmp_path)


class TestTemplateRenderer:
    def test_render_with_filters(self, renderer):
        assert renderer.render("greeting.txt.j2", {"name": "neoforge"}) == "Hello Neoforge\n"
        out = renderer.render("sub/badge.txt.j2", {"license": "GPL 3/x"})
        assert out == "license-GPL%203%2Fx"

    def test_undefined_variable_raises(self, renderer):
        with pytest.raises(UndefinedError):
            renderer.render("greeting.txt.j2", {})

    def test_missing_template(self, renderer):
        with pytest.raises(TemplateNotFound):
            renderer.render("nope.j2", {})

    def test_default_renderer_is_shared(self):
        renderer = default_renderer()
        assert renderer is default_renderer()
        assert renderer.template_dir.name == "templates"
        assert (renderer.template_dir / "gradle" / "settings.gradle.j2").is_file()
