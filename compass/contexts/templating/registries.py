"""
Templating Registries

Centralized registry for loading and caching Jinja2 HTML templates.
"""

from pathlib import Path
from typing import Dict, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

from compass.utils.config import RESUME_TEMPLATES_PATH

DEFAULT_TEMPLATE_PATTERN = "{name}/template.html.jinja"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for HTML generation.

    Resume layouts are stored in
    compass/contexts/templating/template/types/{name}/template.html.jinja.
    Other layouts (e.g., rendering's page wrappers) pass their own base path
    and file name pattern.

    All interpolated values are HTML-escaped (autoescape), and referencing an
    undefined variable fails loudly (StrictUndefined).
    """

    def __init__(
        self,
        types_base_path: Optional[Path] = None,
        template_pattern: str = DEFAULT_TEMPLATE_PATTERN,
    ):
        """
        Initialize the template registry.

        Args:
            types_base_path: Base path for template directories. Defaults to
                           RESUME_TEMPLATES_PATH from environment
            template_pattern: Template file path relative to the base path,
                            with a {name} placeholder
        """
        if types_base_path is None:
            types_base_path = RESUME_TEMPLATES_PATH

        self.types_base_path = Path(types_base_path)
        self.template_pattern = template_pattern
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.types_base_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template name (e.g., 'modern')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        template_path = self.template_pattern.format(name=name)

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for '{name}' at {self.types_base_path / template_path}"
            ) from e

        self._cache[name] = template
        return template

    def get_template_path(self, name: str) -> Path:
        """
        Get the file path for a template.

        Args:
            name: Template name (e.g., 'creative')

        Returns:
            Path to template file
        """
        return self.types_base_path / self.template_pattern.format(name=name)

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        """
        Check if a template is in the cache.

        Args:
            name: Template name

        Returns:
            True if cached, False otherwise
        """
        return name in self._cache
