"""Command line entry point."""

import sys
from typing import Optional

from click import Choice, ClickException, command, option, version_option

from react_faststart.__metadata__ import __version__


@command(
    name="react-faststart",
    help="Create a React project with Vite, optionally set up with Tailwind CSS.",
)
@option(
    "--executor",
    type=Choice(["npm", "bun", "pnpm", "yarn"], case_sensitive=False),
    help="Package manager used to generate the project and install dependencies.  Defaults to $FASTSTART_EXECUTOR or npm.",
    default=None,
    required=False,
)
@option(
    "--skip-node-check",
    type=bool,
    help="Do not verify the installed Node.js version before starting.",
    default=False,
    is_flag=True,
)
@option("--verbose", type=bool, help="Enable verbose output.", default=False, is_flag=True)
@version_option(__version__, prog_name="react-faststart")
def faststart(executor: "Optional[str]", skip_node_check: "bool", verbose: "bool") -> None:
    """Run the interactive project setup."""
    from react_faststart.commands import RichPrompter, run_faststart
    from react_faststart.config import FaststartConfig
    from react_faststart.console import configure_logging, console

    try:
        config = FaststartConfig() if executor is None else FaststartConfig(executor=executor)  # type: ignore[arg-type]
    except ValueError as e:
        raise ClickException(str(e)) from e
    if skip_node_check:
        config.check_node = False
    configure_logging("DEBUG" if verbose else config.log_level)

    console.rule("[yellow]React Faststart[/]", align="left")
    outcome = run_faststart(RichPrompter(), config)
    sys.exit(outcome.exit_code)


def main() -> None:  # pragma: no cover
    faststart()


if __name__ == "__main__":  # pragma: no cover
    main()
