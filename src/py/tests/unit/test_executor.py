"""Tests for react_faststart.executor module."""

from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from react_faststart.exceptions import ExternalToolError, ExternalToolNotFoundError, UnsupportedNodeVersionError
from react_faststart.executor import (
    BunExecutor,
    JSExecutor,
    NodeExecutor,
    PnpmExecutor,
    YarnExecutor,
    check_node_version,
    get_executor,
    run_external_tool,
)


def _which(name: str) -> str:
    return f"/usr/bin/{name}"


# =====================================================
# run_external_tool
# =====================================================


@patch("subprocess.run")
@patch("shutil.which", side_effect=_which)
def test_run_external_tool_inherits_streams(mock_which: Mock, mock_run: Mock) -> None:
    mock_run.return_value = Mock(returncode=0)

    run_external_tool("npm", ["install"], Path("/tmp/demo"))

    mock_run.assert_called_once()
    args, kwargs = mock_run.call_args
    assert args[0] == ["/usr/bin/npm", "install"]
    assert kwargs["cwd"] == Path("/tmp/demo")
    assert kwargs["stdin"] is None
    assert kwargs["stdout"] is None
    assert kwargs["stderr"] is None
    assert kwargs["check"] is False
    assert "timeout" not in kwargs


@patch("subprocess.run")
@patch("shutil.which", side_effect=_which)
def test_run_external_tool_non_zero_exit(mock_which: Mock, mock_run: Mock) -> None:
    mock_run.return_value = Mock(returncode=3)

    with pytest.raises(ExternalToolError) as exc_info:
        run_external_tool("npx", ["create-vite@latest", "demo"], Path("/tmp"))

    assert exc_info.value.command == ["npx", "create-vite@latest", "demo"]
    assert exc_info.value.return_code == 3
    assert "npx create-vite@latest demo" in str(exc_info.value)
    assert "3" in str(exc_info.value)
    mock_run.assert_called_once()


@patch("subprocess.run")
@patch("shutil.which", return_value=None)
def test_run_external_tool_missing_executable(mock_which: Mock, mock_run: Mock) -> None:
    with pytest.raises(ExternalToolNotFoundError) as exc_info:
        run_external_tool("npm", ["install"], Path("/tmp"))

    assert exc_info.value.command == ["npm", "install"]
    assert exc_info.value.return_code is None
    assert "'npm' not found" in str(exc_info.value)
    mock_run.assert_not_called()


@patch("subprocess.run", side_effect=PermissionError("not executable"))
@patch("shutil.which", side_effect=_which)
def test_run_external_tool_launch_failure(mock_which: Mock, mock_run: Mock) -> None:
    with pytest.raises(ExternalToolNotFoundError):
        run_external_tool("npm", ["install"], Path("/tmp"))


# =====================================================
# Executor commands
# =====================================================


@pytest.mark.parametrize(
    ("executor", "install", "add_dev", "exec_package", "exec_local"),
    [
        (
            NodeExecutor(),
            ["/usr/bin/npm", "install"],
            ["/usr/bin/npm", "install", "-D", "tailwindcss"],
            ["/usr/bin/npx", "create-vite@latest", "demo"],
            ["/usr/bin/npx", "tailwindcss", "init", "-p"],
        ),
        (
            BunExecutor(),
            ["/usr/bin/bun", "install"],
            ["/usr/bin/bun", "add", "-d", "tailwindcss"],
            ["/usr/bin/bunx", "create-vite@latest", "demo"],
            ["/usr/bin/bunx", "tailwindcss", "init", "-p"],
        ),
        (
            PnpmExecutor(),
            ["/usr/bin/pnpm", "install"],
            ["/usr/bin/pnpm", "add", "-D", "tailwindcss"],
            ["/usr/bin/pnpm", "dlx", "create-vite@latest", "demo"],
            ["/usr/bin/pnpm", "exec", "tailwindcss", "init", "-p"],
        ),
        (
            YarnExecutor(),
            ["/usr/bin/yarn", "install"],
            ["/usr/bin/yarn", "add", "-D", "tailwindcss"],
            ["/usr/bin/yarn", "dlx", "create-vite@latest", "demo"],
            ["/usr/bin/yarn", "tailwindcss", "init", "-p"],
        ),
    ],
)
@patch("subprocess.run")
@patch("shutil.which", side_effect=_which)
def test_executor_commands(
    mock_which: Mock,
    mock_run: Mock,
    executor: NodeExecutor,
    install: list[str],
    add_dev: list[str],
    exec_package: list[str],
    exec_local: list[str],
) -> None:
    mock_run.return_value = Mock(returncode=0)
    cwd = Path("/tmp/demo")

    executor.install(cwd)
    executor.add_dev_dependencies(["tailwindcss"], cwd)
    executor.exec_package("create-vite@latest", ["demo"], cwd)
    executor.exec_local("tailwindcss", ["init", "-p"], cwd)

    commands = [call.args[0] for call in mock_run.call_args_list]
    assert commands == [install, add_dev, exec_package, exec_local]
    assert all(call.kwargs["cwd"] == cwd for call in mock_run.call_args_list)


def test_js_executor_requires_manager_commands() -> None:
    class HalfExecutor(JSExecutor):
        bin_name = "npm"

    with pytest.raises(TypeError):
        JSExecutor()  # type: ignore[abstract]
    with pytest.raises(TypeError, match="exec_prefix"):
        HalfExecutor()  # type: ignore[abstract]
    assert NodeExecutor().bin_name == "npm"


def test_executor_dev_command() -> None:
    assert NodeExecutor().dev_command == ["npm", "run", "dev"]
    assert PnpmExecutor().dev_command == ["pnpm", "run", "dev"]


@pytest.mark.parametrize(
    ("name", "expected"),
    [("npm", NodeExecutor), ("node", NodeExecutor), ("BUN", BunExecutor), ("pnpm", PnpmExecutor), ("yarn", YarnExecutor)],
)
def test_get_executor(name: str, expected: type) -> None:
    assert isinstance(get_executor(name), expected)


def test_get_executor_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown executor"):
        get_executor("deno")


# =====================================================
# Node version check
# =====================================================


@patch("subprocess.run")
@patch("shutil.which", side_effect=_which)
def test_check_node_version_supported(mock_which: Mock, mock_run: Mock) -> None:
    mock_run.return_value = Mock(returncode=0, stdout="v20.11.1\n")

    assert check_node_version(17) == "v20.11.1"


@patch("subprocess.run")
@patch("shutil.which", side_effect=_which)
def test_check_node_version_too_old(mock_which: Mock, mock_run: Mock) -> None:
    mock_run.return_value = Mock(returncode=0, stdout="v16.20.2\n")

    with pytest.raises(UnsupportedNodeVersionError, match="You are running Node 16.20.2"):
        check_node_version(17)


@patch("subprocess.run")
@patch("shutil.which", return_value=None)
def test_check_node_version_missing_node(mock_which: Mock, mock_run: Mock) -> None:
    with pytest.raises(ExternalToolNotFoundError):
        check_node_version()
    mock_run.assert_not_called()


@patch("subprocess.run")
@patch("shutil.which", side_effect=_which)
def test_check_node_version_command_failure(mock_which: Mock, mock_run: Mock) -> None:
    mock_run.return_value = Mock(returncode=1, stdout="")

    with pytest.raises(ExternalToolError):
        check_node_version()
