"""Unit tests for TemplateRegistry class."""

import pytest
from pathlib import Path
from jinja2 import TemplateNotFound, UndefinedError

from compass.contexts.templating.registries import TemplateRegistry
from compass.utils.config import RENDERING_TEMPLATES_PATH


@pytest.mark.unit
def test_template_registry_init():
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry()
    assert registry.types_base_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
@pytest.mark.parametrize("layout", ["professional", "modern", "creative"])
def test_get_resume_layout(layout):
    """Test loading each packaged resume layout."""
    registry = TemplateRegistry()
    template = registry.get_template(layout)

    assert template is not None
    assert layout in registry._cache


@pytest.mark.unit
def test_template_caching():
    """Test that templates are cached after first load."""
    registry = TemplateRegistry()

    # First load
    template1 = registry.get_template("modern")
    assert registry.is_cached("modern")

    # Second load should return same object from cache
    template2 = registry.get_template("modern")
    assert template1 is template2


@pytest.mark.unit
def test_get_template_not_found():
    """Test error handling for missing template."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateNotFound, match="minimal"):
        registry.get_template("minimal")


@pytest.mark.unit
def test_get_template_path():
    """Test getting template file path."""
    registry = TemplateRegistry()
    path = registry.get_template_path("creative")

    assert isinstance(path, Path)
    assert path.name == "template.html.jinja"
    assert "creative" in str(path)


@pytest.mark.unit
def test_custom_pattern_for_page_templates():
    """Test a flat directory of page templates."""
    registry = TemplateRegistry(RENDERING_TEMPLATES_PATH, template_pattern="{name}.html.jinja")

    assert registry.get_template_path("letter_print").name == "letter_print.html.jinja"
    assert registry.get_template("resume_download") is not None


@pytest.mark.unit
def test_clear_cache():
    """Test cache clearing."""
    registry = TemplateRegistry()

    # Load template
    registry.get_template("professional")
    assert len(registry._cache) == 1

    # Clear cache
    registry.clear_cache()
    assert len(registry._cache) == 0


@pytest.mark.unit
def test_autoescape(tmp_path):
    """Test that interpolated values are HTML-escaped."""
    (tmp_path / "plain").mkdir()
    (tmp_path / "plain" / "template.html.jinja").write_text("<p>{{ text }}</p>")
    registry = TemplateRegistry(tmp_path)

    result = registry.get_template("plain").render(text="<b>Tom & Jerry</b>")

    assert result == "<p>&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;</p>"


@pytest.mark.unit
def test_undefined_variable_fails_loudly(tmp_path):
    """Test that StrictUndefined rejects missing context values."""
    (tmp_path / "plain").mkdir()
    (tmp_path / "plain" / "template.html.jinja").write_text("<p>{{ missing }}</p>")
    registry = TemplateRegistry(tmp_path)

    with pytest.raises(UndefinedError):
        registry.get_template("plain").render()
