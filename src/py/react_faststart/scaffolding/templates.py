"""Template definitions and file rendering for scaffolding.

Rendering functions are pure: they return file content and leave writing to
the caller.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

__all__ = (
    "TAILWIND_CONTENT_GLOBS",
    "ProjectTemplate",
    "RenderedFile",
    "StylingChoice",
    "get_template_dir",
    "render_app_component",
    "render_index_css",
    "render_tailwind_config",
    "render_template",
)

TAILWIND_CONTENT_GLOBS = ("./index.html", "./src/**/*.{js,ts,jsx,tsx}")


class ProjectTemplate(str, Enum):
    """Templates understood by the project generator."""

    REACT = "react"
    REACT_TS = "react-ts"

    @property
    def is_typed(self) -> bool:
        return self is ProjectTemplate.REACT_TS

    @property
    def app_file_name(self) -> str:
        """Name of the entry component file the generator creates."""
        return "App.tsx" if self.is_typed else "App.jsx"


class StylingChoice(str, Enum):
    """Post-scaffold setup options."""

    DEFAULT = "Default"
    TAILWIND = "Tailwind CSS"


@dataclass(frozen=True)
class RenderedFile:
    """A file produced by a rendering function.

    Attributes:
        path: Location relative to the generated project root.
        content: Full file content.
    """

    path: Path
    content: str


def get_template_dir() -> Path:
    """Get the directory containing the file templates.

    Returns:
        Path to the templates directory.
    """
    return Path(__file__).parent.parent / "templates"


def render_template(template_name: str, context: "dict[str, Any]") -> str:
    """Render a packaged Jinja2 template with the given context.

    Templates are rendered with autoescaping disabled because the output is code
    and configuration files, not HTML.

    Args:
        template_name: File name inside the templates directory.
        context: Dictionary of template variables.

    Returns:
        Rendered template content.
    """
    from jinja2 import Environment, FileSystemLoader, StrictUndefined

    env = Environment(
        loader=FileSystemLoader(str(get_template_dir())),
        keep_trailing_newline=True,
        autoescape=False,  # noqa: S701
        undefined=StrictUndefined,
    )
    return env.get_template(template_name).render(**context)


def render_app_component(template: ProjectTemplate, styling_enabled: bool) -> RenderedFile:
    """Render the minimal entry component for a generated project.

    Without styling the component is a bare placeholder. With styling it is a
    Tailwind themed page with a light/dark toggle. The typed template only adds
    the ``React.FC`` annotation and the ``.tsx`` extension.

    Args:
        template: The generator template the project was created from.
        styling_enabled: Whether Tailwind CSS was configured.

    Returns:
        The component path (relative to the project root) and its content.
    """
    content = render_template(
        "App.j2",
        {
            "component_annotation": ": React.FC" if template.is_typed else "",
            "use_tailwind": styling_enabled,
        },
    )
    return RenderedFile(path=Path("src", template.app_file_name), content=content)


def render_tailwind_config(content_globs: "tuple[str, ...] | list[str]" = TAILWIND_CONTENT_GLOBS) -> str:
    """Render ``tailwind.config.js`` scanning ``content_globs`` for class names."""
    return render_template("tailwind.config.js.j2", {"content_globs": list(content_globs)})


def render_index_css() -> str:
    """Render the stylesheet holding the three Tailwind layer directives."""
    return render_template("index.css.j2", {})
