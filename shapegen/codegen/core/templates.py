"""
Jinja2 environment used to lay out generated files.

Per-shape code is produced by writers; templates only arrange the pieces
of a file (header comment, imports, body).
"""

from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import DictLoader, Environment, FileSystemLoader, StrictUndefined, TemplateError as JinjaError

from .errors import GeneratorError
from .naming import to_camel_case, to_pascal_case, to_snake_case


class TemplateError(GeneratorError):
    """A template could not be found or rendered."""

    pass


def comment_lines(value: str, style: str = "//") -> str:
    """Prefix every line of ``value`` with a line-comment marker."""
    return "\n".join(
        f"{style} {line}" if line.strip() else style for line in str(value).split("\n")
    )


class TemplateEngine:
    """Jinja2 environment with code generation filters.

    Templates are read from ``template_dir`` when it exists. Otherwise the
    engine starts empty and templates are registered with ``add_template``.
    """

    def __init__(self, template_dir: Optional[Path] = None):
        self.template_dir = template_dir
        if template_dir is not None and template_dir.exists():
            loader = FileSystemLoader(str(template_dir))
        else:
            loader = DictLoader({})

        self._env = Environment(
            loader=loader,
            autoescape=False,
            keep_trailing_newline=True,
            lstrip_blocks=True,
            trim_blocks=True,
            undefined=StrictUndefined,
        )
        self._env.filters.update(
            snake_case=to_snake_case,
            camel_case=to_camel_case,
            pascal_case=to_pascal_case,
            comment=comment_lines,
        )

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a named template.

        Raises:
            TemplateError: If the template is missing or fails to render
        """
        try:
            return self._env.get_template(template_name).render(**context)
        except JinjaError as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def render_string(self, template_string: str, context: Dict[str, Any]) -> str:
        """Render template source given inline."""
        try:
            return self._env.from_string(template_string).render(**context)
        except JinjaError as e:
            raise TemplateError(f"Failed to render template string: {e}") from e

    def add_template(self, name: str, content: str):
        """Register an in-memory template, replacing a file loader if needed."""
        if not isinstance(self._env.loader, DictLoader):
            self._env.loader = DictLoader({})
        self._env.loader.mapping[name] = content

    def template_exists(self, template_name: str) -> bool:
        return template_name in self._env.loader.list_templates()


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Create a template engine, falling back to in-memory templates."""
    return TemplateEngine(template_dir)
