"""Project generation through the external Vite generator."""

from pathlib import Path

from react_faststart.config import DEFAULT_GENERATOR_PACKAGE
from react_faststart.console import console
from react_faststart.executor import JSExecutor
from react_faststart.scaffolding.templates import ProjectTemplate

__all__ = ("ScaffoldInvoker",)


class ScaffoldInvoker:
    """Create a project skeleton and install its dependencies."""

    def __init__(self, executor: JSExecutor, generator_package: str = DEFAULT_GENERATOR_PACKAGE) -> None:
        self.executor = executor
        self.generator_package = generator_package

    def scaffold(self, name: str, template: ProjectTemplate, parent_dir: Path) -> Path:
        """Run the generator so it creates ``parent_dir / name``.

        Args:
            name: Normalized project name, used as the directory name.
            template: Generator template identifier.
            parent_dir: Directory the generator runs in.

        Returns:
            The generated project root.
        """
        console.print(f"[green]Creating Vite project '{name}' with template '{template.value}'...[/]")
        self.executor.exec_package(self.generator_package, [name, "--template", template.value], parent_dir)
        console.print("[green]Project created successfully![/]")
        return parent_dir / name

    def install_dependencies(self, project_root: Path) -> None:
        """Install the generated project's dependencies."""
        console.rule("[yellow]Starting package installation process[/]", align="left")
        self.executor.install(project_root)
        console.print("[green]Dependencies installed successfully![/]")
