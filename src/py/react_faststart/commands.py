"""Interactive scaffolding workflow.

``run_faststart`` drives one run from the first prompt to the final
instructions. Each stage is a small function whose result feeds the next one.
Errors from any stage are handled in exactly one place.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol

from rich.markup import escape

from react_faststart.config import FaststartConfig
from react_faststart.console import console, logger
from react_faststart.exceptions import FaststartError, InvalidProjectNameError
from react_faststart.executor import JSExecutor, check_node_version, get_executor
from react_faststart.naming import validate_project_name
from react_faststart.scaffolding import (
    ConflictResolution,
    ProjectTemplate,
    ScaffoldInvoker,
    StylingChoice,
    StylingConfigurator,
    render_app_component,
    resolve_directory_conflict,
)

__all__ = ("Prompter", "ProjectRequest", "RichPrompter", "RunOutcome", "run_faststart")


class RunOutcome(Enum):
    """How a scaffolding run ended."""

    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAILED = "failed"

    @property
    def exit_code(self) -> int:
        return 1 if self is RunOutcome.FAILED else 0


@dataclass(frozen=True)
class ProjectRequest:
    """The user's answers for one run."""

    raw_name: str
    name: str
    template: ProjectTemplate
    styling: StylingChoice

    @property
    def styling_enabled(self) -> bool:
        return self.styling is StylingChoice.TAILWIND


class Prompter(Protocol):
    """Source of the user's answers."""

    def ask_name(self) -> str: ...

    def confirm_overwrite(self, message: str) -> bool: ...

    def choose_template(self) -> ProjectTemplate: ...

    def choose_styling(self) -> StylingChoice: ...


class RichPrompter:
    """Ask questions on the terminal with rich prompts."""

    def ask_name(self) -> str:
        # Prompt.ask strips its answer; the name is validated exactly as typed.
        return console.input("Enter the name of your project: ")

    def confirm_overwrite(self, message: str) -> bool:
        from rich.prompt import Confirm

        return Confirm.ask(message, default=False, console=console)

    def choose_template(self) -> ProjectTemplate:
        from rich.prompt import Prompt

        answer = Prompt.ask(
            "Choose a template",
            choices=[t.value for t in ProjectTemplate],
            default=ProjectTemplate.REACT.value,
            console=console,
        )
        return ProjectTemplate(answer)

    def choose_styling(self) -> StylingChoice:
        from rich.prompt import Prompt

        answer = Prompt.ask(
            "Choose your project setup",
            choices=[s.value for s in StylingChoice],
            default=StylingChoice.DEFAULT.value,
            console=console,
        )
        return StylingChoice(answer)


def _prompt_project_name(prompter: Prompter) -> "tuple[str, str]":
    while True:
        raw = prompter.ask_name()
        try:
            return raw, validate_project_name(raw)
        except InvalidProjectNameError as e:
            console.print(f"[red]Error: {escape(e.reason)}[/]")


def _reset_entry_component(project_root: Path, template: ProjectTemplate) -> None:
    app_file = render_app_component(template, styling_enabled=False)
    console.print(f"Resetting {app_file.path.name}...")
    target = project_root / app_file.path
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(app_file.content, encoding="utf-8")


def _configure_project(
    request: ProjectRequest,
    project_root: Path,
    invoker: ScaffoldInvoker,
    executor: JSExecutor,
    config: FaststartConfig,
) -> None:
    if request.styling_enabled:
        StylingConfigurator(executor, config.tailwind_packages).configure(project_root, request.template)
    else:
        _reset_entry_component(project_root, request.template)
        invoker.install_dependencies(project_root)


def _print_instructions(name: str, executor: JSExecutor) -> None:
    console.rule("[green]Setup complete![/]", align="left")
    console.print("Run the following commands to start your development server:")
    console.print(f"cd {name}", markup=False, highlight=False)
    console.print(" ".join(executor.dev_command), markup=False, highlight=False)


def run_faststart(
    prompter: "Prompter | None" = None,
    config: "FaststartConfig | None" = None,
    *,
    cwd: "Path | None" = None,
    executor: "JSExecutor | None" = None,
) -> RunOutcome:
    """Run the interactive scaffolding workflow.

    Stages, in order: node preflight, project name, directory conflict,
    template, project generation, setup choice, Tailwind setup or plain
    install, final instructions.

    Args:
        prompter: Source of answers. Defaults to terminal prompts.
        config: Run settings. Defaults to settings read from the environment.
        cwd: Directory the project is created in. Defaults to the current
            working directory.
        executor: Package manager executor. Defaults to ``config.executor``.

    Returns:
        ``COMPLETED`` on success, ``CANCELLED`` when the user declined to
        overwrite an existing directory and ``FAILED`` when any stage raised.
    """
    prompter = prompter or RichPrompter()
    config = config or FaststartConfig()
    parent_dir = Path(cwd) if cwd is not None else Path.cwd()

    try:
        executor = executor or get_executor(config.executor)
        if config.check_node:
            check_node_version(config.min_node_version)

        raw_name, name = _prompt_project_name(prompter)
        project_root = parent_dir / name

        resolution = resolve_directory_conflict(project_root, prompter.confirm_overwrite)
        if resolution is ConflictResolution.ABORTED:
            console.print("[red]Operation cancelled.[/]")
            return RunOutcome.CANCELLED

        template = prompter.choose_template()
        invoker = ScaffoldInvoker(executor, config.generator_package)
        project_root = invoker.scaffold(name, template, parent_dir)
        console.rule(style="blue")

        request = ProjectRequest(raw_name=raw_name, name=name, template=template, styling=prompter.choose_styling())
        _configure_project(request, project_root, invoker, executor, config)
    except (FaststartError, OSError, ValueError) as e:
        logger.debug("Scaffolding failed", exc_info=True)
        console.print(f"[red]An error occurred: {escape(str(e))}[/]", highlight=False)
        return RunOutcome.FAILED

    _print_instructions(request.name, executor)
    return RunOutcome.COMPLETED
