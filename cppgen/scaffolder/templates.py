"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``cppgen/scaffolder/templates/`` directory and renders them with the project's
name and language details.  The template files are the static text of every
generated file; the renderer only substitutes values into them.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from cppgen.config import Language


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

CMAKE_TEMPLATE = "CMakeLists.txt.j2"
BUILD_SCRIPT_TEMPLATE = "build.sh.j2"

MAIN_TEMPLATES: dict[Language, str] = {
    Language.C: "main.c.j2",
    Language.CPP: "main.cpp.j2",
}

GITIGNORE_TEMPLATES: dict[Language, str] = {
    Language.C: "c.gitignore.j2",
    Language.CPP: "cpp.gitignore.j2",
}


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the Jinja2 templates used for a generated project.

    Templates live as ``.j2`` files under a configurable template directory.
    Rendering is strict: a template referring to a variable missing from the
    context fails instead of emitting an empty string.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["cmake_target"] = cmake_target_name
        self.env.filters["cmake_quote"] = cmake_quote

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"CMakeLists.txt.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        The parent directory must already exist; nothing is created
        implicitly.  Returns the output path.
        """
        content = self.render(template_path, context)
        out = Path(output_path)
        out.write_text(content, encoding="utf-8")
        return out

    # -- Lookup ------------------------------------------------------------

    def main_template(self, language: Language) -> str:
        return MAIN_TEMPLATES[language]

    def gitignore_template(self, language: Language) -> str:
        return GITIGNORE_TEMPLATES[language]


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------


def cmake_target_name(value: str) -> str:
    """Convert a project name into a valid CMake target name.

    CMake only accepts ``[A-Za-z0-9_.+-]`` in target names; every other
    character becomes an underscore.
    """
    return re.sub(r"[^A-Za-z0-9_.+\-]", "_", value)


def cmake_quote(value: str) -> str:
    """Escape *value* for use inside a quoted CMake argument."""
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("$", "\\$")
