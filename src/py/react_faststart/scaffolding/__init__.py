"""Project scaffolding module for react-faststart.

Generation of the project skeleton is delegated to ``create-vite``; this
package decides where it runs, what happens to an existing directory and
which files are rewritten afterwards.

Supported templates:
- React (``react``)
- React with TypeScript (``react-ts``)
"""

from react_faststart.scaffolding.conflicts import ConflictResolution, resolve_directory_conflict
from react_faststart.scaffolding.generator import ScaffoldInvoker
from react_faststart.scaffolding.styling import StylingConfigurator
from react_faststart.scaffolding.templates import (
    ProjectTemplate,
    RenderedFile,
    StylingChoice,
    render_app_component,
    render_index_css,
    render_tailwind_config,
)

__all__ = [
    "ConflictResolution",
    "ProjectTemplate",
    "RenderedFile",
    "ScaffoldInvoker",
    "StylingChoice",
    "StylingConfigurator",
    "render_app_component",
    "render_index_css",
    "render_tailwind_config",
    "resolve_directory_conflict",
]
