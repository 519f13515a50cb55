"""cppgen command-line interface.

Usage::

    cppgen                          # interactive
    cppgen -n my-app -l cpp         # non-interactive
    cppgen -n my-app -l c -o ~/src --build-script
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.markup import escape

from cppgen import __version__
from cppgen.config import Language, ProjectConfig, Settings, validate_project_name
from cppgen.exceptions import CppgenError, InvalidInputError, ScaffoldError
from cppgen.prompts import interactive_prompt
from cppgen.scaffolder import ProjectGenerator
from cppgen.utils import (
    console,
    print_error,
    print_success,
    print_tree,
    print_warning,
)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cppgen",
        description="Generate a minimal CMake project skeleton for C or C++.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  cppgen\n"
            "  cppgen -n my-app -l cpp\n"
            "  cppgen -n my-app -l c -o ./projects --build-script\n"
        ),
    )

    parser.add_argument(
        "--name", "-n",
        default=None,
        help="Project name (prompted for if omitted)",
    )
    parser.add_argument(
        "--language", "-l",
        default=None,
        metavar="{c,cpp}",
        help="Project language: c or cpp/c++ (prompted for if omitted)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory in which the project folder is created (default: .)",
    )
    parser.add_argument(
        "--build-script",
        action="store_true",
        default=None,
        help="Also write build.sh that configures, builds and runs the project",
    )
    parser.add_argument(
        "--generator",
        default=None,
        help="CMake generator used by build.sh (default: Ninja)",
    )
    parser.add_argument(
        "--no-input",
        action="store_true",
        help="Never prompt; fail if the name or language is missing",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="List every created directory and file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Combine environment settings with command-line overrides."""
    settings = Settings.from_env()
    overrides: dict[str, object] = {}
    if args.output is not None:
        overrides["output_dir"] = Path(args.output)
    if args.build_script is not None:
        overrides["build_script"] = args.build_script
    if args.generator is not None:
        overrides["cmake_generator"] = args.generator
    return settings.with_overrides(**overrides)


def resolve_project(args: argparse.Namespace, settings: Settings) -> ProjectConfig:
    """Turn parsed arguments into a ``ProjectConfig``.

    With both ``--name`` and ``--language`` no prompt is shown.  Values given
    on the command line are validated before prompting for the rest.

    Raises:
        InvalidInputError: If a value is missing, empty or unrecognised.
    """
    if args.name is not None and args.language is not None:
        return ProjectConfig.create(args.name, args.language)

    language = Language.parse(args.language) if args.language is not None else None
    name = _validated_name(args.name) if args.name is not None else None

    if args.no_input:
        missing = "project name" if name is None else "language"
        raise InvalidInputError(f"Missing {missing} and prompting is disabled (--no-input).")

    return interactive_prompt(
        name=name,
        language=language,
        attempts=settings.prompt_attempts,
    )


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``cppgen`` and ``python -m cppgen``.

    Returns:
        The process exit status.
    """
    args = build_parser().parse_args(argv)

    generator: ProjectGenerator | None = None
    try:
        settings = load_settings(args)
        project = resolve_project(args, settings)
        generator = ProjectGenerator(project, settings)
        root = generator.generate()
    except KeyboardInterrupt:
        console.print()
        print_warning("Aborted.")
        _report_partial(generator)
        return 130
    except CppgenError as exc:
        print_error(f"Error: {escape(str(exc))}")
        if isinstance(exc, ScaffoldError) and exc.project_root is not None:
            print_warning(
                f"A partially created project was left at {escape(str(exc.project_root))}"
            )
        return 1
    finally:
        if args.verbose and generator is not None:
            for path in generator.created:
                console.print(f"  [dim]created {escape(str(path))}[/dim]")

    print_success(
        f'Created {project.language.display_name} project "{escape(project.name)}" '
        f"at {escape(str(root))}"
    )
    print_tree(root)
    return 0


def _validated_name(raw: str) -> str:
    try:
        return validate_project_name(raw)
    except ValueError as exc:
        raise InvalidInputError(str(exc)) from None


def _report_partial(generator: ProjectGenerator | None) -> None:
    if generator is not None and generator.created:
        leftover = escape(str(generator.created[0]))
        print_warning(f"A partially created project was left at {leftover}")


if __name__ == "__main__":
    sys.exit(main())
