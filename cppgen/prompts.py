"""Interactive collection of the project name and language.

Used when the command line does not provide both values.  Each prompt
re-asks on an invalid answer and gives up with ``InvalidInputError`` after a
bounded number of attempts, so a closed stdin cannot spin forever.
"""

from __future__ import annotations

from typing import TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from cppgen.config import Language, ProjectConfig, validate_project_name
from cppgen.exceptions import InvalidInputError
from cppgen.utils import console as default_console


def ask_project_name(
    *,
    attempts: int = 3,
    console: Console | None = None,
    stream: TextIO | None = None,
) -> str:
    """Prompt until a usable project name is entered.

    Raises:
        InvalidInputError: After *attempts* invalid answers or on end of input.
    """
    console = console or default_console
    for _ in range(attempts):
        answer = _ask("[bold]Project name[/bold]", console, stream)
        try:
            return validate_project_name(answer)
        except ValueError as exc:
            console.print(f"[prompt.invalid]{escape(str(exc))}")
    raise InvalidInputError("No valid project name given.")


def ask_language(
    *,
    attempts: int = 3,
    console: Console | None = None,
    stream: TextIO | None = None,
) -> Language:
    """Prompt until ``c``, ``cpp`` or ``c++`` is entered (any case).

    Raises:
        InvalidInputError: After *attempts* invalid answers or on end of input.
    """
    console = console or default_console
    console.print("[dim]Used for the CMake file and the main source file.[/dim]")
    for _ in range(attempts):
        answer = _ask("[bold]Language[/bold] [dim](c, cpp)[/dim]", console, stream)
        try:
            return Language.parse(answer)
        except InvalidInputError as exc:
            console.print(f"[prompt.invalid]{escape(str(exc))}")
    raise InvalidInputError("No valid language given.")


def interactive_prompt(
    *,
    name: str | None = None,
    language: Language | None = None,
    attempts: int = 3,
    console: Console | None = None,
    stream: TextIO | None = None,
) -> ProjectConfig:
    """Collect whichever of name and language is missing, then validate both."""
    if name is None:
        name = ask_project_name(attempts=attempts, console=console, stream=stream)
    if language is None:
        language = ask_language(attempts=attempts, console=console, stream=stream)
    return ProjectConfig.create(name, language)


def _ask(prompt: str, console: Console, stream: TextIO | None) -> str:
    try:
        return Prompt.ask(prompt, console=console, stream=stream)
    except EOFError:
        raise InvalidInputError("No input available for interactive mode.") from None
