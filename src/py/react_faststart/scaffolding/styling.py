"""Tailwind CSS setup for a generated project."""

from pathlib import Path

from react_faststart.config import DEFAULT_TAILWIND_PACKAGES
from react_faststart.console import console, logger
from react_faststart.executor import JSExecutor
from react_faststart.scaffolding.templates import (
    ProjectTemplate,
    render_app_component,
    render_index_css,
    render_tailwind_config,
)

__all__ = ("StylingConfigurator",)


def _write(path: Path, content: str) -> None:
    logger.debug("Writing %s", path)
    path.write_text(content, encoding="utf-8")


class StylingConfigurator:
    """Install and wire up Tailwind CSS inside a generated project.

    Every file this touches is overwritten outright; existing content is never
    merged. A failing step stops the configuration and leaves the project as is.
    """

    def __init__(self, executor: JSExecutor, packages: "list[str] | None" = None) -> None:
        self.executor = executor
        self.packages = list(packages) if packages is not None else list(DEFAULT_TAILWIND_PACKAGES)

    def configure(self, project_root: Path, template: ProjectTemplate) -> None:
        """Run the Tailwind setup in ``project_root``.

        Args:
            project_root: Root of the generated project.
            template: Template the project was generated from.
        """
        console.rule("[yellow]Installing Tailwind CSS[/]", align="left")
        self.executor.add_dev_dependencies(self.packages, project_root)
        console.print("[green]Dependencies installed successfully![/]")

        console.print("Initializing Tailwind configuration...")
        self.executor.exec_local("tailwindcss", ["init", "-p"], project_root)

        console.print("Configuring Tailwind...")
        _write(project_root / "tailwind.config.js", render_tailwind_config())

        console.print("Setting up Tailwind styles...")
        src_dir = project_root / "src"
        src_dir.mkdir(parents=True, exist_ok=True)
        _write(src_dir / "index.css", render_index_css())

        app_css = src_dir / "App.css"
        if app_css.exists():
            console.print("Deleting App.css...")
            app_css.unlink(missing_ok=True)

        app_file = render_app_component(template, styling_enabled=True)
        console.print(f"Resetting {app_file.path.name}...")
        _write(project_root / app_file.path, app_file.content)
