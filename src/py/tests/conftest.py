from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from react_faststart.console import logger
from react_faststart.exceptions import ExternalToolError
from react_faststart.executor import JSExecutor
from react_faststart.scaffolding import ProjectTemplate, StylingChoice

# Environment variables that may affect test behavior - clear before each test
_FASTSTART_ENV_VARS = [
    "FASTSTART_EXECUTOR",
    "FASTSTART_GENERATOR",
    "FASTSTART_TAILWIND_PACKAGES",
    "FASTSTART_SKIP_NODE_CHECK",
    "FASTSTART_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_faststart_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear react-faststart environment variables before each test for isolation."""
    for var in _FASTSTART_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture(autouse=True)
def reset_logger() -> Generator[None, None, None]:
    """Undo logging configuration done by the CLI."""
    level, handlers, propagate = logger.level, list(logger.handlers), logger.propagate
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers
    logger.propagate = propagate


class FakeExecutor(JSExecutor):
    """Records every external tool call and imitates the generator's output on disk."""

    bin_name = "npm"
    exec_prefix = ("npx",)
    local_bin_prefix = ("npx",)

    def __init__(self, *, fail_on: "str | None" = None) -> None:
        self.calls: list[tuple[str, list[str], Path]] = []
        self.fail_on = fail_on

    def _record(self, kind: str, args: list[str], cwd: Path) -> None:
        self.calls.append((kind, args, cwd))
        if self.fail_on == kind:
            raise ExternalToolError([kind, *args], 1)

    def install(self, cwd: Path) -> None:
        self._record("install", [], cwd)
        (cwd / "node_modules").mkdir(exist_ok=True)

    def add_dev_dependencies(self, packages: list[str], cwd: Path) -> None:
        self._record("add_dev", list(packages), cwd)

    def exec_package(self, package: str, args: list[str], cwd: Path) -> None:
        self._record("exec_package", [package, *args], cwd)
        name, _, template = args
        ext = "tsx" if template == "react-ts" else "jsx"
        src = cwd / name / "src"
        src.mkdir(parents=True)
        (cwd / name / "package.json").write_text('{"name": "%s"}\n' % name)
        (src / f"App.{ext}").write_text("// generated by create-vite\n")
        (src / "App.css").write_text("#root { margin: 0 auto; }\n")
        (src / "index.css").write_text(":root { color-scheme: light dark; }\n")

    def exec_local(self, binary: str, args: list[str], cwd: Path) -> None:
        self._record("exec_local", [binary, *args], cwd)
        (cwd / "tailwind.config.js").write_text("module.exports = {}\n")
        (cwd / "postcss.config.js").write_text("export default {}\n")

    @property
    def kinds(self) -> list[str]:
        return [kind for kind, _, _ in self.calls]


class ScriptedPrompter:
    """Answers prompts from a fixed script and remembers what was asked."""

    def __init__(
        self,
        names: "list[str]",
        *,
        overwrite: bool = False,
        template: ProjectTemplate = ProjectTemplate.REACT,
        styling: StylingChoice = StylingChoice.DEFAULT,
    ) -> None:
        self.names = list(names)
        self.overwrite = overwrite
        self.template = template
        self.styling = styling
        self.asked: list[str] = []

    def ask_name(self) -> str:
        self.asked.append("name")
        return self.names.pop(0)

    def confirm_overwrite(self, message: str) -> bool:
        self.asked.append("overwrite")
        return self.overwrite

    def choose_template(self) -> ProjectTemplate:
        self.asked.append("template")
        return self.template

    def choose_styling(self) -> StylingChoice:
        self.asked.append("styling")
        return self.styling


@pytest.fixture
def fake_executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def make_prompter() -> Callable[..., ScriptedPrompter]:
    def _make(*names: str, **kwargs: object) -> ScriptedPrompter:
        return ScriptedPrompter(list(names), **kwargs)  # type: ignore[arg-type]

    return _make


@pytest.fixture
def make_executor() -> Callable[..., FakeExecutor]:
    return FakeExecutor
