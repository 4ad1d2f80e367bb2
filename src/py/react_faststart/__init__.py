"""React Faststart: scaffold a React project with Vite in one interactive run.

Basic usage::

    $ react-faststart

Programmatic usage:
    from react_faststart import FaststartConfig, run_faststart

    outcome = run_faststart(config=FaststartConfig(executor="pnpm"))
"""

from react_faststart.commands import ProjectRequest, RichPrompter, RunOutcome, run_faststart
from react_faststart.config import FaststartConfig
from react_faststart.exceptions import (
    ExternalToolError,
    ExternalToolNotFoundError,
    FaststartError,
    InvalidProjectNameError,
    UnsupportedNodeVersionError,
)
from react_faststart.naming import normalize_project_name, validate_project_name
from react_faststart.scaffolding import ProjectTemplate, StylingChoice

__all__ = (
    "ExternalToolError",
    "ExternalToolNotFoundError",
    "FaststartConfig",
    "FaststartError",
    "InvalidProjectNameError",
    "ProjectRequest",
    "ProjectTemplate",
    "RichPrompter",
    "RunOutcome",
    "StylingChoice",
    "UnsupportedNodeVersionError",
    "normalize_project_name",
    "run_faststart",
    "validate_project_name",
)
