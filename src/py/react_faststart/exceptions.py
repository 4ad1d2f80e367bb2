"""React Faststart exception classes."""

__all__ = [
    "ExternalToolError",
    "ExternalToolNotFoundError",
    "FaststartError",
    "InvalidProjectNameError",
    "UnsupportedNodeVersionError",
]


class FaststartError(Exception):
    """Base exception for React Faststart related errors."""


class InvalidProjectNameError(FaststartError, ValueError):
    """Raised when a project name cannot be used as a directory or package name."""

    def __init__(self, name: str, reason: str) -> None:
        """Initialize the exception.

        Args:
            name: The rejected project name as entered by the user.
            reason: Human readable explanation of the rejection.
        """
        super().__init__(f"Invalid project name {name!r}: {reason}")
        self.name = name
        self.reason = reason


class ExternalToolError(FaststartError):
    """Raised when an external tool exits with a non-zero status."""

    def __init__(self, command: list[str], return_code: "int | None" = None, message: "str | None" = None) -> None:
        self.command = command
        self.return_code = return_code
        if message is None:
            message = f"Command {' '.join(command)!r} failed with return code {return_code}."
        super().__init__(message)


class ExternalToolNotFoundError(ExternalToolError):
    """Raised when an external tool executable cannot be found or launched."""

    def __init__(self, executable: str, command: "list[str] | None" = None) -> None:
        self.executable = executable
        super().__init__(command or [executable], None, f"Executable {executable!r} not found.")


class UnsupportedNodeVersionError(FaststartError):
    """Raised when the installed Node.js runtime is too old."""

    def __init__(self, found: str, required: int) -> None:
        super().__init__(
            f"You are running Node {found}. react-faststart requires Node {required} or higher. "
            "Please update your version of Node."
        )
        self.found = found
        self.required = required
