"""Error types raised by cppgen.

Every failure the tool can report derives from ``CppgenError`` so the CLI
entry point can turn it into a message and a non-zero exit status.
"""

from __future__ import annotations

from pathlib import Path


class CppgenError(Exception):
    """Base class for all cppgen failures."""


class InvalidInputError(CppgenError):
    """Raised when the project name, language or a setting is unusable."""


class ScaffoldError(CppgenError):
    """Raised when the project tree cannot be written.

    Attributes:
        path: The file or directory the failing operation targeted.
        project_root: The project directory, once it has been created.
            ``None`` means nothing was written to disk.
    """

    def __init__(
        self,
        message: str,
        path: str | Path,
        project_root: Path | None = None,
    ) -> None:
        self.path = Path(path)
        self.project_root = project_root
        super().__init__(message)


class AlreadyExistsError(ScaffoldError):
    """Raised when the project directory is already present."""


class PermissionDeniedError(ScaffoldError):
    """Raised when the filesystem refuses to create a file or directory."""


class ScaffoldIOError(ScaffoldError):
    """Raised for any other filesystem failure while scaffolding."""
