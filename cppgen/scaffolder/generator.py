"""Project skeleton generator.

Takes a ``ProjectConfig`` and writes a minimal CMake-based C or C++ project::

    <name>/
      include/
      build/
      src/
        main.c | main.cpp
      CMakeLists.txt
      .gitignore

Writes happen one after another.  There is no rollback: when a write fails
the tree created so far is left on disk and the raised error records where
it lives.
"""

from __future__ import annotations

import errno
import stat
from pathlib import Path
from typing import Any

from cppgen.config import ProjectConfig, Settings
from cppgen.exceptions import (
    AlreadyExistsError,
    PermissionDeniedError,
    ScaffoldError,
    ScaffoldIOError,
)

from .templates import (
    BUILD_SCRIPT_TEMPLATE,
    CMAKE_TEMPLATE,
    TemplateRenderer,
)


# Created in this order beneath the project root.
PROJECT_DIRS: tuple[str, ...] = ("include", "build", "src")


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Writes one project skeleton to disk.

    A generator is meant to be used once.  After :meth:`generate` returns (or
    raises), ``created`` lists every directory and file it wrote, in order.
    """

    def __init__(
        self,
        config: ProjectConfig,
        settings: Settings | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.settings = settings or Settings()
        self.renderer = renderer or TemplateRenderer()
        self.created: list[Path] = []

    # -- Public API --------------------------------------------------------

    def project_root(self, output_dir: str | Path | None = None) -> Path:
        """Return the directory the project will be generated into."""
        base = Path(output_dir) if output_dir is not None else self.settings.output_dir
        return base / self.config.name

    def generate(self, output_dir: str | Path | None = None) -> Path:
        """Generate the project skeleton.

        Args:
            output_dir: Parent directory in which the project folder is
                created.  Defaults to ``settings.output_dir``.  It must
                already exist.

        Returns:
            Path to the generated project root.

        Raises:
            AlreadyExistsError: The project directory is already present.
            PermissionDeniedError: The filesystem refused a write.
            ScaffoldIOError: Any other filesystem failure.
        """
        root = self.project_root(output_dir)
        context = self._build_context()

        # 1. Project root.  Nothing exists yet if this fails.
        self._mkdir(root, project_root=None)

        # 2. Skeleton directories
        for name in PROJECT_DIRS:
            self._mkdir(root / name, project_root=root)

        # 3. Entry-point source
        language = self.config.language
        self._render(
            self.renderer.main_template(language),
            root / "src" / language.main_file,
            context,
            project_root=root,
        )

        # 4. CMake build description
        self._render(CMAKE_TEMPLATE, root / "CMakeLists.txt", context, project_root=root)

        # 5. Git ignore rules
        self._render(
            self.renderer.gitignore_template(language),
            root / ".gitignore",
            context,
            project_root=root,
        )

        # 6. Optional convenience build script
        if self.settings.build_script:
            script = root / "build.sh"
            self._render(BUILD_SCRIPT_TEMPLATE, script, context, project_root=root)
            self._guard(_make_executable, script, project_root=root)

        return root

    # -- Context building --------------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context from the project config."""
        language = self.config.language
        return {
            "project_name": self.config.name,
            "language": language,
            "cmake_language": language.cmake_language,
            "main_file": language.main_file,
            "source_suffix": language.source_suffix,
            "cmake_minimum_version": self.settings.cmake_minimum_version,
            "cmake_generator": self.settings.cmake_generator,
        }

    # -- Filesystem steps --------------------------------------------------

    def _mkdir(self, path: Path, project_root: Path | None) -> None:
        self._guard(path.mkdir, project_root=project_root, target=path)
        self.created.append(path)

    def _render(
        self,
        template_path: str,
        output_path: Path,
        context: dict[str, Any],
        project_root: Path,
    ) -> None:
        self._guard(
            self.renderer.render_to_file,
            template_path,
            output_path,
            context,
            project_root=project_root,
            target=output_path,
        )
        self.created.append(output_path)

    def _guard(
        self,
        func: Any,
        *args: Any,
        project_root: Path | None,
        target: Path | None = None,
    ) -> Any:
        """Call *func*, translating ``OSError`` into a ``ScaffoldError``."""
        target = target if target is not None else Path(args[0])
        try:
            return func(*args)
        except OSError as exc:
            raise _translate_os_error(exc, target, project_root) from exc


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _translate_os_error(
    exc: OSError, path: Path, project_root: Path | None
) -> ScaffoldError:
    """Map a filesystem error onto the matching ``ScaffoldError`` subclass."""
    if isinstance(exc, FileExistsError) or exc.errno == errno.EEXIST:
        return AlreadyExistsError(
            f'"{path}" already exists.', path, project_root
        )
    if isinstance(exc, PermissionError) or exc.errno in (errno.EACCES, errno.EPERM):
        return PermissionDeniedError(
            f'Permission denied while creating "{path}".', path, project_root
        )
    reason = exc.strerror or str(exc)
    return ScaffoldIOError(f'Could not create "{path}": {reason}', path, project_root)


def _make_executable(path: Path) -> None:
    """Set the executable bit on a file."""
    current = path.stat().st_mode
    path.chmod(current | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
