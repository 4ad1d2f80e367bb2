"""JavaScript package manager executors.

Every external tool the scaffolder drives (the project generator, the package
manager and the Tailwind initializer) runs through this module. Commands run to
completion with the terminal's stdin, stdout and stderr inherited so the user
sees their output live.
"""

import platform
import re
import shutil
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from react_faststart.console import logger
from react_faststart.exceptions import ExternalToolError, ExternalToolNotFoundError, UnsupportedNodeVersionError

__all__ = (
    "BunExecutor",
    "JSExecutor",
    "NodeExecutor",
    "PnpmExecutor",
    "YarnExecutor",
    "check_node_version",
    "get_executor",
    "run_external_tool",
)

_NODE_VERSION = re.compile(r"v?(\d+)(?:\.\d+)*")


def _resolve(executable: str, command: "list[str] | None" = None) -> str:
    path = shutil.which(executable)
    if path is None:
        raise ExternalToolNotFoundError(executable, command)
    return path


def run_external_tool(command: str, args: "list[str]", cwd: Path) -> None:
    """Run ``command`` with ``args`` inside ``cwd`` and wait for it to finish.

    Args:
        command: Executable name, resolved on ``PATH``.
        args: Arguments passed to the executable.
        cwd: Working directory for the process.

    Raises:
        ExternalToolNotFoundError: If the executable cannot be found or started.
        ExternalToolError: If the process exits with a non-zero status.
    """
    display = [command, *args]
    full_command = [_resolve(command, display), *args]
    logger.debug("Running %s in %s", " ".join(display), cwd)
    try:
        process = subprocess.run(
            full_command,
            cwd=cwd,
            shell=platform.system() == "Windows",
            check=False,
            stdin=None,  # inherit for interactive prompts
            stdout=None,  # inherit for live output
            stderr=None,
        )
    except OSError as e:
        raise ExternalToolNotFoundError(command, display) from e
    if process.returncode != 0:
        raise ExternalToolError(display, process.returncode)


class JSExecutor(ABC):
    """Abstract base class for Javascript package manager executors."""

    add_dev_args: "tuple[str, ...]" = ("add", "-D")

    @property
    @abstractmethod
    def bin_name(self) -> str:
        """The package manager executable."""

    @property
    @abstractmethod
    def exec_prefix(self) -> "tuple[str, ...]":
        """Command that downloads and runs a package binary."""

    @property
    @abstractmethod
    def local_bin_prefix(self) -> "tuple[str, ...]":
        """Command that runs a binary from the project's own dependencies."""

    def install(self, cwd: Path) -> None:
        """Install the dependencies listed in the project manifest."""
        run_external_tool(self.bin_name, ["install"], cwd)

    def add_dev_dependencies(self, packages: "list[str]", cwd: Path) -> None:
        """Add ``packages`` to the project as development dependencies."""
        run_external_tool(self.bin_name, [*self.add_dev_args, *packages], cwd)

    def exec_package(self, package: str, args: "list[str]", cwd: Path) -> None:
        """Run the binary of ``package`` without adding it to a project (e.g. ``npx``)."""
        command, *prefix = self.exec_prefix
        run_external_tool(command, [*prefix, package, *args], cwd)

    def exec_local(self, binary: str, args: "list[str]", cwd: Path) -> None:
        """Run a binary installed in the project's own dependencies."""
        command, *prefix = self.local_bin_prefix
        run_external_tool(command, [*prefix, binary, *args], cwd)

    @property
    def dev_command(self) -> "list[str]":
        """Get the command that starts the dev server (e.g., npm run dev)."""
        return [self.bin_name, "run", "dev"]


class NodeExecutor(JSExecutor):
    """Node.js executor."""

    bin_name = "npm"
    exec_prefix = ("npx",)
    local_bin_prefix = ("npx",)
    add_dev_args = ("install", "-D")


class BunExecutor(JSExecutor):
    """Bun executor."""

    bin_name = "bun"
    exec_prefix = ("bunx",)
    local_bin_prefix = ("bunx",)
    add_dev_args = ("add", "-d")


class YarnExecutor(JSExecutor):
    """Yarn executor.

    The generator runs through ``yarn dlx``, which needs Yarn 2 or newer.
    """

    bin_name = "yarn"
    exec_prefix = ("yarn", "dlx")
    local_bin_prefix = ("yarn",)


class PnpmExecutor(JSExecutor):
    """PNPM executor."""

    bin_name = "pnpm"
    exec_prefix = ("pnpm", "dlx")
    local_bin_prefix = ("pnpm", "exec")


_EXECUTORS: "dict[str, type[JSExecutor]]" = {
    "npm": NodeExecutor,
    "node": NodeExecutor,
    "bun": BunExecutor,
    "yarn": YarnExecutor,
    "pnpm": PnpmExecutor,
}


def get_executor(name: str) -> JSExecutor:
    """Return an executor instance for a package manager name.

    Raises:
        ValueError: If no executor exists for ``name``.

    Returns:
        The executor.
    """
    try:
        return _EXECUTORS[name.lower()]()
    except KeyError:
        msg = f"Unknown executor {name!r}. Expected one of: {', '.join(sorted(_EXECUTORS))}"
        raise ValueError(msg) from None


def check_node_version(minimum: int = 17) -> str:
    """Ensure the installed Node.js runtime is at least ``minimum``.

    Raises:
        ExternalToolNotFoundError: If ``node`` is not installed.
        ExternalToolError: If ``node --version`` fails.
        UnsupportedNodeVersionError: If the major version is below ``minimum``.

    Returns:
        The reported Node.js version string.
    """
    command = [_resolve("node"), "--version"]
    try:
        result = subprocess.run(command, capture_output=True, text=True, check=False)
    except OSError as e:
        raise ExternalToolNotFoundError("node") from e
    if result.returncode != 0:
        raise ExternalToolError(["node", "--version"], result.returncode)
    version = result.stdout.strip()
    match = _NODE_VERSION.match(version)
    if match is None or int(match.group(1)) < minimum:
        raise UnsupportedNodeVersionError(version.lstrip("v"), minimum)
    logger.debug("Found Node %s", version)
    return version
