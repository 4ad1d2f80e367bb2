"""Runtime settings for the scaffolding workflow."""

import os
from dataclasses import dataclass, field
from typing import Literal

__all__ = (
    "DEFAULT_GENERATOR_PACKAGE",
    "DEFAULT_TAILWIND_PACKAGES",
    "TRUE_VALUES",
    "FaststartConfig",
    "resolve_executor_name",
    "resolve_tailwind_packages",
)

TRUE_VALUES = {"True", "true", "1", "yes", "Y", "T"}
DEFAULT_GENERATOR_PACKAGE = "create-vite@latest"
# `tailwindcss init -p` only exists on the 3.x line.
DEFAULT_TAILWIND_PACKAGES = ("tailwindcss@3", "postcss", "autoprefixer")

ExecutorName = Literal["npm", "bun", "pnpm", "yarn"]


def resolve_executor_name(value: "str | None" = None) -> ExecutorName:
    """Resolve the package manager name.

    Reads FASTSTART_EXECUTOR when ``value`` is not given. ``node`` is accepted
    as an alias for ``npm``.

    Raises:
        ValueError: If the name is not a supported package manager.

    Returns:
        The normalized executor name.
    """
    raw = value if value is not None else os.getenv("FASTSTART_EXECUTOR", "npm")
    match raw.strip().lower():
        case "" | "npm" | "node":
            return "npm"
        case "bun":
            return "bun"
        case "pnpm":
            return "pnpm"
        case "yarn":
            return "yarn"
        case _:
            msg = f"Invalid executor: {raw!r}. Expected one of: npm, bun, pnpm, yarn"
            raise ValueError(msg)


def resolve_tailwind_packages() -> list[str]:
    """Resolve the Tailwind dev dependencies from FASTSTART_TAILWIND_PACKAGES.

    Returns:
        Package specifiers in installation order.
    """
    env_value = os.getenv("FASTSTART_TAILWIND_PACKAGES")
    if env_value is None or not env_value.strip():
        return list(DEFAULT_TAILWIND_PACKAGES)
    return [p.strip() for p in env_value.split(",") if p.strip()]


@dataclass
class FaststartConfig:
    """Settings for a scaffolding run.

    Attributes:
        executor: Package manager used for installs and to run package binaries.
        generator_package: Package specifier of the project generator.
        tailwind_packages: Dev dependencies installed by the Tailwind setup.
        check_node: Verify the Node.js version before prompting.
        min_node_version: Lowest supported Node.js major version.
        log_level: Level for the package logger.
    """

    executor: ExecutorName = field(default_factory=resolve_executor_name)
    generator_package: str = field(
        default_factory=lambda: os.getenv("FASTSTART_GENERATOR", DEFAULT_GENERATOR_PACKAGE)
    )
    tailwind_packages: list[str] = field(default_factory=resolve_tailwind_packages)
    check_node: bool = field(
        default_factory=lambda: os.getenv("FASTSTART_SKIP_NODE_CHECK", "False") not in TRUE_VALUES
    )
    min_node_version: int = 17
    log_level: str = field(default_factory=lambda: os.getenv("FASTSTART_LOG_LEVEL", "WARNING"))

    def __post_init__(self) -> None:
        self.executor = resolve_executor_name(self.executor)
